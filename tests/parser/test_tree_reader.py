"""Tests for the read-only element tree wrapper."""
from __future__ import annotations

import xml.etree.ElementTree as ET

from opendrive_ingest.parser.tree import XmlNode


def _node(xml: str) -> XmlNode:
    return XmlNode(ET.fromstring(xml))


def test_typed_attributes_coerce_values() -> None:
    node = _node('<road id="7" length="12.5" name="Main" level="true"/>')

    assert node.int_attribute("id") == 7
    assert node.float_attribute("length") == 12.5
    assert node.text_attribute("name") == "Main"
    assert node.bool_attribute("level") is True


def test_missing_attributes_fall_back_to_defaults() -> None:
    node = _node("<road/>")

    assert node.int_attribute("id") == 0
    assert node.int_attribute("junction", -1) == -1
    assert node.float_attribute("length") == 0.0
    assert node.text_attribute("name") == ""
    assert node.bool_attribute("level") is False
    assert node.optional_int_attribute("junction") is None


def test_unparseable_numbers_use_default() -> None:
    node = _node('<road id="abc" length="wide"/>')

    assert node.int_attribute("id") == 0
    assert node.float_attribute("length") == 0.0


def test_int_attribute_accepts_integral_float_text() -> None:
    assert _node('<lane id="-2.0"/>').int_attribute("id") == -2


def test_bool_attribute_follows_leading_character() -> None:
    assert _node('<lane level="1"/>').bool_attribute("level") is True
    assert _node('<lane level="false"/>').bool_attribute("level") is False
    assert _node('<lane level="0"/>').bool_attribute("level") is False
    assert _node('<lane level=""/>').bool_attribute("level", True) is True


def test_children_preserve_document_order_and_match_local_names() -> None:
    node = _node(
        '<OpenDRIVE xmlns="http://example.com/odr">'
        '<road id="3"/><header/><road id="1"/><road id="2"/>'
        "</OpenDRIVE>"
    )

    assert node.tag == "OpenDRIVE"
    assert [road.int_attribute("id") for road in node.children("road")] == [3, 1, 2]
    assert node.child("header") is not None
    assert node.child("controller") is None


def test_int_attribute_reads_hex_and_leading_digits() -> None:
    node = _node('<road id="0x10" junction="12abc" length="-7 m" name="abc"/>')

    assert node.int_attribute("id") == 16
    assert node.int_attribute("junction") == 12
    assert node.int_attribute("length") == -7
    assert node.int_attribute("name", -1) == -1


def test_optional_int_attribute_is_none_for_non_numeric_text() -> None:
    node = _node('<successor elementId="abc" id="5"/>')

    assert node.optional_int_attribute("elementId") is None
    assert node.optional_int_attribute("id") == 5
    assert node.optional_int_attribute("contactPoint") is None
