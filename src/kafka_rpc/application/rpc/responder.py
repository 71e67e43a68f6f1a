"""Application RPC – Responder: serves requests from one topic with an injected handler."""
from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Generic, TypeVar

from kafka_rpc.kernel.errors import DecodeError, HandlerError, PublishError, SerializationError
from kafka_rpc.kernel.messaging import (
    Envelope,
    HandlerResult,
    JsonMessageSerializer,
    MessagePublisher,
    MessageSerializer,
    MessageSubscriber,
    NoReply,
    Reply,
)
from kafka_rpc.observability.correlation import CorrelationContext, RequestContext
from kafka_rpc.observability.logging import get_logger

logger = get_logger(__name__)

Req = TypeVar("Req")
Resp = TypeVar("Resp")

type Handler[Req, Resp] = Callable[[Req], HandlerResult[Resp] | Awaitable[HandlerResult[Resp]]]


class Responder(Generic[Req, Resp]):
    """Consumes requests, runs *handler* on each and publishes correlated replies.

    The handler returns :class:`Reply` to answer or ``NO_REPLY`` for
    fire-and-forget requests; it may be a plain function or a coroutine
    function. A reply goes to the topic named in the request's ``replyTopic``
    header, carrying the request's correlation id.

    Failures are isolated per message: an undecodable payload or a failing
    handler is logged and skipped, no reply is published and the loop keeps
    serving. A caller waiting on such a request sees a timeout.
    Messages are not retried.

    *publisher* may be ``None`` for responders that never reply.
    """

    def __init__(
        self,
        subscriber: MessageSubscriber,
        handler: Handler[Req, Resp],
        request_type: type[Req],
        *,
        publisher: MessagePublisher | None = None,
        serializer: MessageSerializer[Any] | None = None,
        poll_interval: float = 0.5,
    ) -> None:
        self._subscriber = subscriber
        self._handler = handler
        self._request_type = request_type
        self._publisher = publisher
        self._serializer = serializer or JsonMessageSerializer()
        self._poll_interval = poll_interval
        self._stopping = asyncio.Event()
        self._task: asyncio.Task[None] | None = None
        self._log = logger.bind(request_topic=subscriber.topic)

    @property
    def request_topic(self) -> str:
        return self._subscriber.topic

    @property
    def running(self) -> bool:
        return self._task is not None and not self._stopping.is_set()

    async def start(self) -> None:
        if self._task is not None:
            if self._stopping.is_set():
                raise RuntimeError("Responder cannot be restarted after stop(); create a new one")
            return
        if self._publisher is not None:
            await self._publisher.start()
        await self._subscriber.start()
        self._stopping.clear()
        self._task = asyncio.create_task(self._serve(), name=f"responder:{self.request_topic}")
        self._log.info("rpc.responder.started", group_id=self._subscriber.group_id)

    async def stop(self) -> None:
        """Stop after the current message; an in-flight handler is allowed to finish."""
        if self._task is None or self._stopping.is_set():
            return
        self._stopping.set()
        try:
            await self._task
        except Exception:
            self._log.exception("rpc.responder.loop_failed")
        finally:
            try:
                await self._subscriber.stop()
            finally:
                if self._publisher is not None:
                    await self._publisher.stop()
        self._log.info("rpc.responder.stopped")

    async def __aenter__(self) -> "Responder[Req, Resp]":
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()

    async def _serve(self) -> None:
        while not self._stopping.is_set():
            try:
                envelope = await self._subscriber.receive(self._poll_interval)
            except Exception:
                self._log.exception("rpc.request.receive_failed")
                await asyncio.sleep(self._poll_interval)
                continue
            if envelope is None:
                continue
            try:
                await self.process(envelope)
            except Exception:
                self._log.exception("rpc.request.process_failed", correlation_id=envelope.correlation_id)

    async def process(self, envelope: Envelope) -> bool:
        """Handle one inbound request; return ``True`` when a reply was published."""
        try:
            request = self._serializer.deserialize(envelope.payload, self._request_type)
        except DecodeError as exc:
            self._log.error(
                "rpc.request.decode_failed",
                correlation_id=envelope.correlation_id,
                event_type=envelope.event_type,
                **exc.log_fields(),
            )
            return False

        context = RequestContext(
            correlation_id=envelope.correlation_id,
            topic=self.request_topic,
            event_type=envelope.event_type,
        )
        with CorrelationContext.scope(context):
            try:
                result = await self._invoke(request)
            except HandlerError as exc:
                self._log.error("rpc.request.handler_failed", exc_info=exc.cause or exc, **exc.log_fields())
                return False

            match result:
                case NoReply():
                    self._log.debug("rpc.request.handled", reply=False)
                    return False
                case Reply(value=value):
                    return await self._send_reply(envelope, value)
        return False

    async def _invoke(self, request: Req) -> HandlerResult[Resp]:
        try:
            result = self._handler(request)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            raise HandlerError(f"Handler for '{self.request_topic}' raised {type(exc).__name__}", cause=exc) from exc
        if not isinstance(result, (Reply, NoReply)):
            raise HandlerError(
                f"Handler for '{self.request_topic}' returned {type(result).__name__}; expected Reply or NO_REPLY"
            )
        return result

    async def _send_reply(self, request: Envelope, value: Resp) -> bool:
        if not request.reply_topic:
            self._log.debug("rpc.reply.not_requested")
            return False
        if not request.correlation_id:
            self._log.warning("rpc.reply.uncorrelated", reply_topic=request.reply_topic)
            return False
        if self._publisher is None:
            self._log.warning("rpc.reply.no_publisher", reply_topic=request.reply_topic)
            return False
        try:
            reply = Envelope(
                payload=self._serializer.serialize(value),
                correlation_id=request.correlation_id,
                event_type=type(value).__name__,
            )
            await self._publisher.publish(request.reply_topic, reply)
        except (PublishError, SerializationError) as exc:
            self._log.error("rpc.reply.publish_failed", reply_topic=request.reply_topic, **exc.log_fields())
            return False
        self._log.info("rpc.reply.sent", reply_topic=request.reply_topic)
        return True


__all__ = ["Handler", "Responder"]
