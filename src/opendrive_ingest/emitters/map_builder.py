"""Map-builder construction interface and a call-recording implementation."""
from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Dict, List, Protocol, Tuple

from ..domain.models import CubicPolynomial, LaneId, RoadId


class MapBuilder(Protocol):
    def add_road(
        self,
        road_id: RoadId,
        name: str,
        length: float,
        junction_id: RoadId,
        predecessor: RoadId,
        successor: RoadId,
    ) -> None: ...

    def set_road_type_speed(
        self,
        road_id: RoadId,
        s: float,
        road_type: str,
        max_speed: float,
        unit: str,
    ) -> None: ...

    def add_road_section(self, road_id: RoadId, polynomial: CubicPolynomial) -> None: ...

    def add_road_section_lane(
        self,
        road_id: RoadId,
        section_index: int,
        lane_id: LaneId,
        lane_type: str,
        level: bool,
        predecessor: LaneId,
        successor: LaneId,
    ) -> None: ...


@dataclass(frozen=True)
class MapBuilderCall:
    method: str
    args: Tuple[Any, ...]

    def to_json(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "args": [asdict(arg) if is_dataclass(arg) else arg for arg in self.args],
        }


class RecordingMapBuilder:
    """Keeps every construction call, in order, as a :class:`MapBuilderCall`."""

    def __init__(self) -> None:
        self.calls: List[MapBuilderCall] = []

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append(MapBuilderCall(method=method, args=args))

    def add_road(
        self,
        road_id: RoadId,
        name: str,
        length: float,
        junction_id: RoadId,
        predecessor: RoadId,
        successor: RoadId,
    ) -> None:
        self._record("add_road", road_id, name, length, junction_id, predecessor, successor)

    def set_road_type_speed(
        self, road_id: RoadId, s: float, road_type: str, max_speed: float, unit: str
    ) -> None:
        self._record("set_road_type_speed", road_id, s, road_type, max_speed, unit)

    def add_road_section(self, road_id: RoadId, polynomial: CubicPolynomial) -> None:
        self._record("add_road_section", road_id, polynomial)

    def add_road_section_lane(
        self,
        road_id: RoadId,
        section_index: int,
        lane_id: LaneId,
        lane_type: str,
        level: bool,
        predecessor: LaneId,
        successor: LaneId,
    ) -> None:
        self._record(
            "add_road_section_lane",
            road_id,
            section_index,
            lane_id,
            lane_type,
            level,
            predecessor,
            successor,
        )


__all__ = ["MapBuilder", "MapBuilderCall", "RecordingMapBuilder"]
