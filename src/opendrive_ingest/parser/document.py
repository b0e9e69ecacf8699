"""Parse a whole ``<OpenDRIVE>`` document into road records."""
from __future__ import annotations

import dataclasses
from typing import List

from ..domain.models import IngestOptions, ParseResult, Road
from ..utils.constants import LANES_TAG, ROAD_TAG, ROOT_TAG
from ..utils.errors import MalformedDocumentError, MalformedRoadError
from ..utils.logging import get_logger
from .offsets import LaneOffsetQueue
from .roads import build_road_record
from .sections import assemble_lane_sections
from .tree import XmlNode

LOG = get_logger()


def parse_road(road_node: XmlNode) -> Road:
    road = build_road_record(road_node)
    lanes_node = road_node.child(LANES_TAG)
    offsets = LaneOffsetQueue.from_lanes_node(lanes_node)
    sections = assemble_lane_sections(road.id, lanes_node, offsets)
    if offsets:
        LOG.debug("road %d: %d unused laneOffset(s)", road.id, len(offsets))
    return dataclasses.replace(road, sections=sections)


def parse_document(root: XmlNode, options: IngestOptions = IngestOptions()) -> ParseResult:
    """Parse every ``<road>`` under ``root`` in document order.

    A road whose sections outnumber its lane offsets is dropped and reported on
    :attr:`ParseResult.rejected`; with ``options.strict`` the error propagates.
    """
    if root.tag != ROOT_TAG:
        raise MalformedDocumentError(f"expected <{ROOT_TAG}> root element, found <{root.tag}>")

    roads: List[Road] = []
    rejected: List[MalformedRoadError] = []
    for road_node in root.children(ROAD_TAG):
        try:
            road = parse_road(road_node)
        except MalformedRoadError as exc:
            if options.strict:
                raise
            LOG.error("skipping malformed road: %s", exc)
            rejected.append(exc)
            continue
        LOG.debug("parsed road %d (%d section(s))", road.id, len(road.sections))
        roads.append(road)

    LOG.info("parsed %d road(s), rejected %d", len(roads), len(rejected))
    return ParseResult(roads=tuple(roads), rejected=tuple(rejected))


__all__ = ["parse_document", "parse_road"]
