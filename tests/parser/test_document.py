"""Tests for whole-document parsing."""
from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from opendrive_ingest.domain.models import IngestOptions
from opendrive_ingest.parser.document import parse_document
from opendrive_ingest.parser.tree import XmlNode
from opendrive_ingest.utils.errors import MalformedDocumentError, MalformedRoadError

_SHORT_ROAD = (
    '<road id="1" name="Short" length="10">'
    "<lanes>"
    '<laneOffset s="0"/>'
    '<laneSection s="0"><right><lane id="-1"/></right></laneSection>'
    '<laneSection s="5"><right><lane id="-1"/></right></laneSection>'
    "</lanes>"
    "</road>"
)
_GOOD_ROAD = (
    '<road id="2" name="Good" length="20">'
    "<lanes>"
    '<laneOffset s="0" a="0.5"/>'
    '<laneSection s="0"><center><lane id="0"/></center><right><lane id="-1"/></right></laneSection>'
    "</lanes>"
    "</road>"
)


def _document(*roads: str) -> XmlNode:
    return XmlNode(ET.fromstring("<OpenDRIVE><header/>" + "".join(roads) + "</OpenDRIVE>"))


def test_roads_are_returned_in_document_order() -> None:
    result = parse_document(_document('<road id="9"/>', '<road id="3"/>', '<road id="5"/>'))

    assert [road.id for road in result.roads] == [9, 3, 5]
    assert result.rejected == ()


def test_malformed_road_is_isolated() -> None:
    result = parse_document(_document(_SHORT_ROAD, _GOOD_ROAD))

    assert [road.id for road in result.roads] == [2]
    assert result.roads[0].sections[0].a == 0.5
    assert [exc.road_id for exc in result.rejected] == [1]


def test_strict_mode_propagates_malformed_road() -> None:
    with pytest.raises(MalformedRoadError):
        parse_document(_document(_GOOD_ROAD, _SHORT_ROAD), IngestOptions(strict=True))


def test_wrong_root_is_malformed_document() -> None:
    with pytest.raises(MalformedDocumentError):
        parse_document(XmlNode(ET.fromstring("<roads><road id='1'/></roads>")))


def test_extra_offsets_are_tolerated() -> None:
    road = (
        '<road id="4"><lanes>'
        '<laneOffset s="0" a="1"/><laneOffset s="10" a="2"/>'
        '<laneSection s="0"/>'
        "</lanes></road>"
    )

    result = parse_document(_document(road))

    assert len(result.roads[0].sections) == 1
    assert result.roads[0].sections[0].a == 1.0


def test_reparse_yields_equal_records() -> None:
    doc = _document(_GOOD_ROAD, _SHORT_ROAD)

    first = parse_document(doc)
    second = parse_document(doc)

    assert first.roads == second.roads
    assert [exc.reason for exc in first.rejected] == [exc.reason for exc in second.rejected]
