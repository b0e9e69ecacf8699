"""Road-level attribute, link and type/speed extraction."""
from __future__ import annotations

from typing import List, Optional, Tuple

from ..domain.models import Road, RoadId, RoadTypeSpeed
from ..utils.constants import (
    LINK_TAG,
    NO_ROAD,
    PREDECESSOR_TAG,
    SPEED_TAG,
    SUCCESSOR_TAG,
    TYPE_TAG,
)
from ..utils.logging import get_logger
from .tree import XmlNode

LOG = get_logger()


def _linked_element_id(link: XmlNode, tag: str, road_id: RoadId) -> Optional[RoadId]:
    node = link.child(tag)
    if node is None:
        return None
    element_id = node.optional_int_attribute("elementId")
    if element_id is None:
        LOG.warning("road %d: <%s> without a usable elementId; treated as unlinked", road_id, tag)
    return element_id


def parse_road_link(road_node: XmlNode, road_id: RoadId) -> Tuple[Optional[RoadId], Optional[RoadId]]:
    """Return ``(predecessor, successor)`` element ids, ``None`` where absent."""
    link = road_node.child(LINK_TAG)
    if link is None:
        return None, None
    return (
        _linked_element_id(link, PREDECESSOR_TAG, road_id),
        _linked_element_id(link, SUCCESSOR_TAG, road_id),
    )


def parse_road_types(road_node: XmlNode) -> Tuple[RoadTypeSpeed, ...]:
    zones: List[RoadTypeSpeed] = []
    for type_node in road_node.children(TYPE_TAG):
        speed = type_node.child(SPEED_TAG)
        zones.append(
            RoadTypeSpeed(
                s=type_node.float_attribute("s"),
                road_type=type_node.text_attribute("type"),
                max_speed=speed.float_attribute("max") if speed is not None else 0.0,
                unit=speed.text_attribute("unit") if speed is not None else "",
            )
        )
    return tuple(zones)


def _junction_id(road_node: XmlNode) -> Optional[RoadId]:
    junction = road_node.optional_int_attribute("junction")
    if junction is None or junction == NO_ROAD:
        return None
    return junction


def build_road_record(road_node: XmlNode) -> Road:
    """Build a :class:`Road` from a ``<road>`` element, sections left empty."""
    road_id = road_node.int_attribute("id")
    predecessor, successor = parse_road_link(road_node, road_id)
    return Road(
        id=road_id,
        name=road_node.text_attribute("name"),
        length=road_node.float_attribute("length"),
        junction_id=_junction_id(road_node),
        predecessor=predecessor,
        successor=successor,
        speed_zones=parse_road_types(road_node),
    )


__all__ = ["build_road_record", "parse_road_link", "parse_road_types"]
