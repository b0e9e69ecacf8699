"""High-level orchestration: load, parse, then emit."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from .domain.models import IngestOptions, ParseResult
from .emitters.map_builder import MapBuilder
from .emitters.roads import emit_roads
from .parser.document import parse_document
from .parser.tree import XmlNode
from .utils.errors import DocumentNotFound, MalformedDocumentError
from .utils.logging import get_logger

LOG = get_logger()

DocumentRoot = Union[XmlNode, ET.Element, ET.ElementTree]


def load_document(path: Path) -> XmlNode:
    if not path.exists():
        raise DocumentNotFound(f"OpenDRIVE file not found: {path}")
    try:
        tree = ET.parse(path)
    except ET.ParseError as exc:
        raise MalformedDocumentError(f"{path}: {exc}") from exc
    LOG.info("loaded OpenDRIVE: %s", path)
    return XmlNode(tree.getroot())


def parse_document_text(text: str) -> XmlNode:
    try:
        return XmlNode(ET.fromstring(text))
    except ET.ParseError as exc:
        raise MalformedDocumentError(str(exc)) from exc


def _as_node(root: DocumentRoot) -> XmlNode:
    if isinstance(root, XmlNode):
        return root
    if isinstance(root, ET.ElementTree):
        return XmlNode(root.getroot())
    return XmlNode(root)


def ingest(
    root: DocumentRoot,
    map_builder: MapBuilder,
    options: IngestOptions = IngestOptions(),
) -> ParseResult:
    """Parse the whole document, then drive ``map_builder`` with the roads.

    Nothing is emitted unless parsing finishes, so a malformed document (or a
    malformed road under ``options.strict``) leaves the map-builder untouched.
    """
    result = parse_document(_as_node(root), options)
    emit_roads(result.roads, map_builder)
    return result


def ingest_file(
    path: Path,
    map_builder: MapBuilder,
    options: IngestOptions = IngestOptions(),
) -> ParseResult:
    return ingest(load_document(path), map_builder, options)


__all__ = ["ingest", "ingest_file", "load_document", "parse_document_text"]
