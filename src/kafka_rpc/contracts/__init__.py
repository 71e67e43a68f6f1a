"""Contracts – topic names, consumer-group conventions and sample event types."""
from kafka_rpc.contracts.sample import (
    CompletedCreateSampleEvent,
    CompletedDeleteSampleEvent,
    CompletedGetAllSampleEvent,
    CompletedGetSampleEvent,
    CompletedUpdateSampleEvent,
    SampleClient,
    SampleData,
    WantsCreateSampleEvent,
    WantsDeleteSampleEvent,
    WantsGetAllSampleEvent,
    WantsGetSampleEvent,
    WantsUpdateSampleEvent,
)
from kafka_rpc.contracts.topics import Topics, requestor_group_id, responder_group_id

__all__ = [
    "CompletedCreateSampleEvent",
    "CompletedDeleteSampleEvent",
    "CompletedGetAllSampleEvent",
    "CompletedGetSampleEvent",
    "CompletedUpdateSampleEvent",
    "SampleClient",
    "SampleData",
    "Topics",
    "WantsCreateSampleEvent",
    "WantsDeleteSampleEvent",
    "WantsGetAllSampleEvent",
    "WantsGetSampleEvent",
    "WantsUpdateSampleEvent",
    "requestor_group_id",
    "responder_group_id",
]
