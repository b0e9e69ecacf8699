"""Shared constants for OpenDRIVE ingestion."""
from __future__ import annotations

LOGGER_NAME = "opendrive_ingest"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

ROOT_TAG = "OpenDRIVE"
ROAD_TAG = "road"
LINK_TAG = "link"
PREDECESSOR_TAG = "predecessor"
SUCCESSOR_TAG = "successor"
TYPE_TAG = "type"
SPEED_TAG = "speed"
LANES_TAG = "lanes"
LANE_OFFSET_TAG = "laneOffset"
LANE_SECTION_TAG = "laneSection"
LEFT_TAG = "left"
CENTER_TAG = "center"
RIGHT_TAG = "right"
LANE_TAG = "lane"

# Map-builder sentinels for "no link".
NO_ROAD = -1
NO_LANE = 0

CENTER_LANE_ID = 0
DEFAULT_LANE_TYPE = "none"
