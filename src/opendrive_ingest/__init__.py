"""Ingest OpenDRIVE road networks and drive a map-builder with them."""
from __future__ import annotations

from .domain.models import (
    CubicPolynomial,
    IngestOptions,
    Lane,
    LaneGroups,
    LaneSection,
    OutputFormat,
    ParseResult,
    Polynomial,
    Road,
    RoadTypeSpeed,
)
from .emitters.map_builder import MapBuilder, MapBuilderCall, RecordingMapBuilder
from .emitters.roads import emit_roads
from .parser.document import parse_document
from .pipeline import ingest, ingest_file, load_document, parse_document_text
from .utils.errors import (
    DocumentNotFound,
    ExhaustedQueueError,
    IngestError,
    MalformedDocumentError,
    MalformedRoadError,
)

__all__ = [
    "CubicPolynomial",
    "DocumentNotFound",
    "ExhaustedQueueError",
    "IngestError",
    "IngestOptions",
    "Lane",
    "LaneGroups",
    "LaneSection",
    "MalformedDocumentError",
    "MalformedRoadError",
    "MapBuilder",
    "MapBuilderCall",
    "OutputFormat",
    "ParseResult",
    "Polynomial",
    "RecordingMapBuilder",
    "Road",
    "RoadTypeSpeed",
    "emit_roads",
    "ingest",
    "ingest_file",
    "load_document",
    "parse_document",
    "parse_document_text",
]
