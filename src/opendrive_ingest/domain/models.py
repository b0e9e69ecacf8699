"""Domain models for parsed OpenDRIVE road records."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from ..utils.constants import DEFAULT_LANE_TYPE
from ..utils.errors import MalformedRoadError

RoadId = int
LaneId = int


@dataclass(frozen=True)
class Polynomial:
    """Cubic ``a + b*ds + c*ds^2 + d*ds^3`` starting at ``s`` along the road."""

    s: float
    a: float
    b: float
    c: float
    d: float

    def evaluate(self, ds: float) -> float:
        return self.a + self.b * ds + self.c * ds ** 2 + self.d * ds ** 3


@dataclass(frozen=True)
class CubicPolynomial:
    """Section polynomial in the argument order the map-builder expects."""

    a: float
    b: float
    c: float
    d: float
    s: float


@dataclass(frozen=True)
class RoadTypeSpeed:
    s: float
    road_type: str
    max_speed: float = 0.0
    unit: str = ""


@dataclass(frozen=True)
class Lane:
    id: LaneId
    lane_type: str = DEFAULT_LANE_TYPE
    level: bool = False
    predecessor: Optional[LaneId] = None
    successor: Optional[LaneId] = None


@dataclass(frozen=True)
class LaneGroups:
    """Left and right lane groups of one section, each in document order."""

    left: Tuple[Lane, ...] = ()
    right: Tuple[Lane, ...] = ()

    def merged(self) -> Tuple[Lane, ...]:
        return self.left + self.right


@dataclass(frozen=True)
class LaneSection:
    s: float
    a: float
    b: float
    c: float
    d: float
    groups: LaneGroups = field(default_factory=LaneGroups)

    @property
    def lanes(self) -> Tuple[Lane, ...]:
        return self.groups.merged()

    @property
    def polynomial(self) -> CubicPolynomial:
        return CubicPolynomial(a=self.a, b=self.b, c=self.c, d=self.d, s=self.s)


@dataclass(frozen=True)
class Road:
    id: RoadId
    name: str = ""
    length: float = 0.0
    junction_id: Optional[RoadId] = None
    predecessor: Optional[RoadId] = None
    successor: Optional[RoadId] = None
    speed_zones: Tuple[RoadTypeSpeed, ...] = ()
    sections: Tuple[LaneSection, ...] = ()


@dataclass(frozen=True)
class ParseResult:
    """Roads that parsed cleanly, plus the roads dropped as malformed."""

    roads: Tuple[Road, ...] = ()
    rejected: Tuple[MalformedRoadError, ...] = ()


class OutputFormat(str, Enum):
    CALLS = "calls"
    SUMMARY = "summary"


@dataclass(frozen=True)
class IngestOptions:
    strict: bool = False
    console_log: bool = True
    log_path: Optional[Path] = None
    output_format: OutputFormat = OutputFormat.CALLS
