"""Read-only view over a parsed OpenDRIVE element tree.

``XmlNode`` wraps an :class:`xml.etree.ElementTree.Element` and offers named
child lookup plus typed attribute accessors. Every accessor takes a default
that is returned when the attribute is absent or its text cannot be coerced,
so callers never branch on ``None`` for plain scalar attributes.
"""
from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Iterator, Optional

from ..utils.logging import get_logger

LOG = get_logger()

_TRUE_PREFIXES = ("1", "t", "T", "y", "Y")
# Optional sign, then a hex literal or a run of decimal digits; trailing text is ignored.
_INT_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")


def parse_int_prefix(raw: str) -> Optional[int]:
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    sign, digits = match.groups()
    value = int(digits, 16) if digits[:2] in ("0x", "0X") else int(digits)
    return -value if sign == "-" else value


def local_name(tag: str) -> str:
    return tag.split("}")[-1]


class XmlNode:
    __slots__ = ("_element",)

    def __init__(self, element: ET.Element) -> None:
        self._element = element

    def __repr__(self) -> str:
        return f"XmlNode({self.tag!r})"

    @property
    def tag(self) -> str:
        return local_name(self._element.tag)

    def child(self, name: str) -> Optional["XmlNode"]:
        for element in self._element:
            if local_name(element.tag) == name:
                return XmlNode(element)
        return None

    def children(self, name: str) -> Iterator["XmlNode"]:
        for element in self._element:
            if local_name(element.tag) == name:
                yield XmlNode(element)

    def has_attribute(self, name: str) -> bool:
        return name in self._element.attrib

    def text_attribute(self, name: str, default: str = "") -> str:
        return self._element.attrib.get(name, default)

    def int_attribute(self, name: str, default: int = 0) -> int:
        raw = self._element.attrib.get(name)
        if raw is None:
            return default
        value = parse_int_prefix(raw)
        if value is None:
            LOG.debug("<%s %s=%r> is not an integer; using %d", self.tag, name, raw, default)
            return default
        return value

    def float_attribute(self, name: str, default: float = 0.0) -> float:
        raw = self._element.attrib.get(name)
        if raw is None:
            return default
        try:
            return float(raw)
        except ValueError:
            LOG.debug("<%s %s=%r> is not a number; using %s", self.tag, name, raw, default)
            return default

    def bool_attribute(self, name: str, default: bool = False) -> bool:
        raw = self._element.attrib.get(name)
        if raw is None:
            return default
        raw = raw.strip()
        if not raw:
            return default
        return raw.startswith(_TRUE_PREFIXES)

    def optional_int_attribute(self, name: str) -> Optional[int]:
        """Return the integer value, or ``None`` when absent or not a number."""
        raw = self._element.attrib.get(name)
        if raw is None:
            return None
        value = parse_int_prefix(raw)
        if value is None:
            LOG.warning("<%s %s=%r> is not an integer; treated as absent", self.tag, name, raw)
        return value


__all__ = ["XmlNode", "local_name", "parse_int_prefix"]
