"""Road emission into a map-builder."""
from __future__ import annotations

from typing import Iterable, Optional

from ..domain.models import Road
from ..utils.constants import NO_LANE, NO_ROAD
from ..utils.logging import get_logger
from .map_builder import MapBuilder

LOG = get_logger()


def _or_sentinel(value: Optional[int], sentinel: int) -> int:
    return sentinel if value is None else value


def emit_road(road: Road, map_builder: MapBuilder) -> int:
    """Issue the calls for one road; returns the number of lanes emitted."""
    map_builder.add_road(
        road.id,
        road.name,
        road.length,
        _or_sentinel(road.junction_id, NO_ROAD),
        _or_sentinel(road.predecessor, NO_ROAD),
        _or_sentinel(road.successor, NO_ROAD),
    )

    for zone in road.speed_zones:
        map_builder.set_road_type_speed(road.id, zone.s, zone.road_type, zone.max_speed, zone.unit)

    lane_count = 0
    for index, section in enumerate(road.sections):
        map_builder.add_road_section(road.id, section.polynomial)
        for lane in section.lanes:
            map_builder.add_road_section_lane(
                road.id,
                index,
                lane.id,
                lane.lane_type,
                lane.level,
                _or_sentinel(lane.predecessor, NO_LANE),
                _or_sentinel(lane.successor, NO_LANE),
            )
            lane_count += 1
    return lane_count


def emit_roads(roads: Iterable[Road], map_builder: MapBuilder) -> None:
    road_count = section_count = lane_count = 0
    for road in roads:
        lane_count += emit_road(road, map_builder)
        road_count += 1
        section_count += len(road.sections)
    LOG.info(
        "emitted %d road(s), %d section(s), %d lane(s)",
        road_count,
        section_count,
        lane_count,
    )


__all__ = ["emit_road", "emit_roads"]
