"""Application RPC – Requestor: correlated request/reply client."""
from __future__ import annotations

import asyncio
import contextlib
from datetime import timedelta
from typing import Any, Generic, TypeVar
from uuid import uuid4

from kafka_rpc.application.rpc.registry import CorrelationRegistry
from kafka_rpc.kernel.errors import (
    DecodeError,
    PublishError,
    RequestCancelledError,
    RequestTimeoutError,
    ValidationError,
)
from kafka_rpc.kernel.messaging import (
    Envelope,
    JsonMessageSerializer,
    MessagePublisher,
    MessageSerializer,
    MessageSubscriber,
)
from kafka_rpc.observability.logging import get_logger

logger = get_logger(__name__)

Req = TypeVar("Req")
Resp = TypeVar("Resp")


def _as_seconds(timeout: float | timedelta) -> float:
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return float(timeout)


class Requestor(Generic[Req, Resp]):
    """Publishes requests and resolves them with replies read from a dedicated topic.

    The reply topic is the topic of *subscriber*; it is stamped into every
    request so responders know where to answer. The subscriber's consumer
    group must be unique to this instance, otherwise replies are split
    between requestors.

    Usage::

        async with Requestor(publisher, subscriber, CompletedCreateSampleEvent) as rpc:
            created = await rpc.call("wants-create-sample", request, timeout=2.0)
    """

    def __init__(
        self,
        publisher: MessagePublisher,
        subscriber: MessageSubscriber,
        response_type: type[Resp],
        *,
        serializer: MessageSerializer[Any] | None = None,
        default_timeout: float | timedelta = 30.0,
        poll_interval: float = 0.5,
        shutdown_timeout: float = 5.0,
    ) -> None:
        self._publisher = publisher
        self._subscriber = subscriber
        self._response_type = response_type
        self._serializer = serializer or JsonMessageSerializer()
        self._default_timeout = default_timeout
        self._poll_interval = poll_interval
        self._shutdown_timeout = shutdown_timeout
        self._registry: CorrelationRegistry[Resp] = CorrelationRegistry()
        self._stopping = asyncio.Event()
        self._task: asyncio.Task[None] | None = None
        self._log = logger.bind(reply_topic=subscriber.topic)

    @property
    def reply_topic(self) -> str:
        return self._subscriber.topic

    @property
    def registry(self) -> CorrelationRegistry[Resp]:
        return self._registry

    @property
    def running(self) -> bool:
        return self._task is not None and not self._stopping.is_set()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        if self._task is not None:
            if self._stopping.is_set():
                raise RuntimeError("Requestor cannot be restarted after stop(); create a new one")
            return
        await self._publisher.start()
        await self._subscriber.start()
        self._stopping.clear()
        self._task = asyncio.create_task(self._consume_replies(), name=f"requestor:{self.reply_topic}")
        self._log.info("rpc.requestor.started", group_id=self._subscriber.group_id)

    async def stop(self) -> None:
        """Stop the reply loop, fail pending calls with ``RequestCancelledError``, release connections."""
        if self._task is None or self._stopping.is_set():
            return
        self._stopping.set()
        task = self._task
        try:
            await asyncio.wait_for(asyncio.shield(task), timeout=self._shutdown_timeout)
        except TimeoutError:
            self._log.warning("rpc.requestor.join_timeout", timeout_seconds=self._shutdown_timeout)
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        except Exception:
            self._log.exception("rpc.requestor.loop_failed")
        finally:
            cancelled = self._registry.cancel_all(lambda cid: RequestCancelledError(cid))
            try:
                await self._subscriber.stop()
            finally:
                await self._publisher.stop()
        self._log.info("rpc.requestor.stopped", cancelled_calls=cancelled)

    async def __aenter__(self) -> "Requestor[Req, Resp]":
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    async def call(self, topic: str, request: Req, timeout: float | timedelta | None = None) -> Resp:
        """Publish *request* to *topic* and wait for the correlated reply.

        Raises
        ------
        RequestTimeoutError
            No reply within *timeout* (defaults to the requestor's default).
        PublishError
            The broker refused the request; nothing is left pending.
        RequestCancelledError
            The requestor was stopped while the call was pending.
        """
        seconds = _as_seconds(self._default_timeout if timeout is None else timeout)
        if not topic:
            raise ValidationError("topic must not be empty", errors=[{"field": "topic"}])
        if seconds <= 0:
            raise ValidationError("timeout must be positive", errors=[{"field": "timeout", "value": seconds}])
        self._ensure_running()

        correlation_id = str(uuid4())
        envelope = Envelope(
            payload=self._serializer.serialize(request),
            correlation_id=correlation_id,
            reply_topic=self.reply_topic,
            event_type=type(request).__name__,
        )
        slot = self._registry.register(correlation_id)
        timer = asyncio.get_running_loop().call_later(seconds, self._expire, correlation_id, topic, seconds)
        try:
            try:
                await self._publisher.publish(topic, envelope)
            except PublishError as exc:
                self._log.error("rpc.request.publish_failed", correlation_id=correlation_id, **exc.log_fields())
                raise
            self._log.debug("rpc.request.sent", topic=topic, correlation_id=correlation_id)
            return await slot
        finally:
            timer.cancel()
            self._registry.cancel(correlation_id)

    async def fire_and_forget(self, topic: str, request: Req) -> None:
        """Publish *request* without expecting or waiting for a reply."""
        if not topic:
            raise ValidationError("topic must not be empty", errors=[{"field": "topic"}])
        self._ensure_running()
        envelope = Envelope(
            payload=self._serializer.serialize(request),
            event_type=type(request).__name__,
        )
        try:
            await self._publisher.publish(topic, envelope)
        except PublishError as exc:
            self._log.error("rpc.event.publish_failed", **exc.log_fields())
            raise
        self._log.debug("rpc.event.sent", topic=topic)

    def _ensure_running(self) -> None:
        if not self.running:
            raise RuntimeError("Requestor is not running; call start() first")

    def _expire(self, correlation_id: str, topic: str, seconds: float) -> None:
        error = RequestTimeoutError(correlation_id, topic=topic, timeout_seconds=seconds)
        if self._registry.cancel(correlation_id, error):
            self._log.warning("rpc.request.timeout", **error.log_fields())

    # ------------------------------------------------------------------
    # Reply loop
    # ------------------------------------------------------------------

    async def _consume_replies(self) -> None:
        while not self._stopping.is_set():
            try:
                envelope = await self._subscriber.receive(self._poll_interval)
            except Exception:
                self._log.exception("rpc.reply.receive_failed")
                await asyncio.sleep(self._poll_interval)
                continue
            if envelope is None:
                continue
            try:
                self._dispatch_reply(envelope)
            except Exception:
                self._log.exception("rpc.reply.dispatch_failed", correlation_id=envelope.correlation_id)

    def _dispatch_reply(self, envelope: Envelope) -> None:
        correlation_id = envelope.correlation_id
        if not correlation_id:
            self._log.warning("rpc.reply.unroutable", event_type=envelope.event_type)
            return
        try:
            response = self._serializer.deserialize(envelope.payload, self._response_type)
        except DecodeError as exc:
            self._log.error("rpc.reply.decode_failed", correlation_id=correlation_id, **exc.log_fields())
            return
        if not self._registry.resolve(correlation_id, response):
            self._log.debug("rpc.reply.unmatched", correlation_id=correlation_id)


__all__ = ["Requestor"]
