"""Lane-section assembly: offset pairing and left/right lane merge."""
from __future__ import annotations

from typing import List, Optional, Tuple

from ..domain.models import Lane, LaneGroups, LaneSection, RoadId
from ..utils.constants import (
    CENTER_LANE_ID,
    CENTER_TAG,
    DEFAULT_LANE_TYPE,
    LANE_SECTION_TAG,
    LANE_TAG,
    LEFT_TAG,
    LINK_TAG,
    PREDECESSOR_TAG,
    RIGHT_TAG,
    SUCCESSOR_TAG,
)
from ..utils.errors import ExhaustedQueueError, MalformedRoadError
from ..utils.logging import get_logger
from .offsets import LaneOffsetQueue
from .tree import XmlNode

LOG = get_logger()


def parse_lane(lane_node: XmlNode) -> Lane:
    predecessor = successor = None
    link = lane_node.child(LINK_TAG)
    if link is not None:
        pred_node = link.child(PREDECESSOR_TAG)
        if pred_node is not None:
            predecessor = pred_node.optional_int_attribute("id")
        succ_node = link.child(SUCCESSOR_TAG)
        if succ_node is not None:
            successor = succ_node.optional_int_attribute("id")
    return Lane(
        id=lane_node.int_attribute("id"),
        lane_type=lane_node.text_attribute("type", DEFAULT_LANE_TYPE),
        level=lane_node.bool_attribute("level"),
        predecessor=predecessor,
        successor=successor,
    )


def _parse_side(section_node: XmlNode, side: str, road_id: RoadId, index: int) -> Tuple[Lane, ...]:
    group = section_node.child(side)
    if group is None:
        return ()
    lanes: List[Lane] = []
    for lane_node in group.children(LANE_TAG):
        lane = parse_lane(lane_node)
        if lane.id == CENTER_LANE_ID:
            LOG.warning("road %d section %d: lane id 0 under <%s> ignored", road_id, index, side)
            continue
        lanes.append(lane)
    return tuple(lanes)


def parse_lane_groups(section_node: XmlNode, road_id: RoadId = 0, index: int = 0) -> LaneGroups:
    # The center lane carries no topology; only its presence is checked.
    if section_node.child(CENTER_TAG) is None:
        LOG.warning("road %d section %d: no <center> lane group", road_id, index)
    return LaneGroups(
        left=_parse_side(section_node, LEFT_TAG, road_id, index),
        right=_parse_side(section_node, RIGHT_TAG, road_id, index),
    )


def assemble_lane_sections(
    road_id: RoadId,
    lanes_node: Optional[XmlNode],
    offsets: LaneOffsetQueue,
) -> Tuple[LaneSection, ...]:
    """Pair each ``<laneSection>`` with the next offset and merge its lanes.

    Raises :class:`MalformedRoadError` when the road declares more sections
    than lane offsets.
    """
    if lanes_node is None:
        return ()
    sections: List[LaneSection] = []
    for index, section_node in enumerate(lanes_node.children(LANE_SECTION_TAG)):
        try:
            offset = offsets.take_next()
        except ExhaustedQueueError as exc:
            raise MalformedRoadError(
                road_id,
                f"lane section {index} has no matching laneOffset ({index} declared)",
            ) from exc
        sections.append(
            LaneSection(
                s=section_node.float_attribute("s"),
                a=offset.a,
                b=offset.b,
                c=offset.c,
                d=offset.d,
                groups=parse_lane_groups(section_node, road_id, index),
            )
        )
    return tuple(sections)


__all__ = ["assemble_lane_sections", "parse_lane", "parse_lane_groups"]
