"""Exception hierarchy shared across the ingestion pipeline."""
from __future__ import annotations


class IngestError(Exception):
    """Base class for all ingestion related failures."""


class DocumentNotFound(IngestError):
    pass


class MalformedDocumentError(IngestError):
    pass


class ExhaustedQueueError(IngestError):
    pass


class MalformedRoadError(IngestError):
    """A structural mismatch confined to a single road."""

    def __init__(self, road_id: int, reason: str) -> None:
        super().__init__(f"road {road_id}: {reason}")
        self.road_id = road_id
        self.reason = reason
