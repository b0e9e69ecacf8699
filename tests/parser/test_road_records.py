"""Tests for road attribute, link and type/speed extraction."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from opendrive_ingest.domain.models import RoadTypeSpeed
from opendrive_ingest.parser.roads import build_road_record, parse_road_link, parse_road_types
from opendrive_ingest.parser.tree import XmlNode
from opendrive_ingest.utils.constants import LOGGER_NAME


def _road(xml: str) -> XmlNode:
    return XmlNode(ET.fromstring(xml))


def test_scalar_attributes_are_read() -> None:
    road = build_road_record(_road('<road id="4" name="Ring" length="250.5" junction="12"/>'))

    assert road.id == 4
    assert road.name == "Ring"
    assert road.length == 250.5
    assert road.junction_id == 12
    assert road.sections == ()


def test_missing_scalars_degrade_to_defaults() -> None:
    road = build_road_record(_road("<road/>"))

    assert road.id == 0
    assert road.name == ""
    assert road.length == 0.0
    assert road.junction_id is None


def test_junction_minus_one_means_not_in_junction() -> None:
    road = build_road_record(_road('<road id="1" junction="-1"/>'))

    assert road.junction_id is None


def test_junction_zero_is_a_real_junction() -> None:
    road = build_road_record(_road('<road id="1" junction="0"/>'))

    assert road.junction_id == 0


def test_link_block_reads_element_ids() -> None:
    node = _road(
        '<road id="5">'
        "<link>"
        '<predecessor elementType="road" elementId="4" contactPoint="end"/>'
        '<successor elementType="junction" elementId="100"/>'
        "</link>"
        "</road>"
    )

    assert parse_road_link(node, 5) == (4, 100)


def test_absent_link_or_child_is_none() -> None:
    assert parse_road_link(_road('<road id="1"/>'), 1) == (None, None)
    node = _road('<road id="1"><link><successor elementId="2"/></link></road>')
    assert parse_road_link(node, 1) == (None, 2)


def test_link_child_without_element_id_warns(caplog) -> None:
    caplog.set_level(logging.WARNING, logger=LOGGER_NAME)
    node = _road('<road id="9"><link><predecessor elementType="road"/></link></road>')

    assert parse_road_link(node, 9) == (None, None)
    assert "road 9" in caplog.text


def test_types_keep_document_order_and_default_speed() -> None:
    node = _road(
        '<road id="1">'
        '<type s="0" type="town"><speed max="50" unit="km/h"/></type>'
        '<type s="40.5" type="rural"/>'
        "</road>"
    )

    assert parse_road_types(node) == (
        RoadTypeSpeed(s=0.0, road_type="town", max_speed=50.0, unit="km/h"),
        RoadTypeSpeed(s=40.5, road_type="rural", max_speed=0.0, unit=""),
    )


def test_non_numeric_link_id_is_unlinked_not_road_zero() -> None:
    node = _road('<road id="1"><link><successor elementType="road" elementId="abc"/></link></road>')

    assert parse_road_link(node, 1) == (None, None)
