"""Per-road FIFO of ``<laneOffset>`` polynomials."""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Optional

from ..domain.models import Polynomial
from ..utils.constants import LANE_OFFSET_TAG
from ..utils.errors import ExhaustedQueueError
from .tree import XmlNode


def parse_polynomial(node: XmlNode) -> Polynomial:
    return Polynomial(
        s=node.float_attribute("s"),
        a=node.float_attribute("a"),
        b=node.float_attribute("b"),
        c=node.float_attribute("c"),
        d=node.float_attribute("d"),
    )


class LaneOffsetQueue:
    """Offsets in document order, handed out one per lane section."""

    def __init__(self, offsets: Iterable[Polynomial] = ()) -> None:
        self._pending: Deque[Polynomial] = deque(offsets)

    @classmethod
    def from_lanes_node(cls, lanes_node: Optional[XmlNode]) -> "LaneOffsetQueue":
        if lanes_node is None:
            return cls()
        return cls(parse_polynomial(node) for node in lanes_node.children(LANE_OFFSET_TAG))

    def __len__(self) -> int:
        return len(self._pending)

    def take_next(self) -> Polynomial:
        if not self._pending:
            raise ExhaustedQueueError("no lane offset left to consume")
        return self._pending.popleft()


__all__ = ["LaneOffsetQueue", "parse_polynomial"]
