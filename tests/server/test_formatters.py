"""Tests for JSON message formatting."""

import json

from navfix import parse_rmc_sentence
from server.formatters import format_rmc_message


def test_format_decoded_sentence() -> None:
    fix = parse_rmc_sentence(
        "$GPRMC,225446.33,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E,A*2B"
    )
    message = json.loads(format_rmc_message(fix))
    assert message["type"] == "rmc"
    assert message["utc_time"] == "22:54:46.330000"
    assert message["utc_date"] == "1994-11-19"
    assert message["status"] == "autonomous"
    assert message["lat"] > 0
    assert message["lon"] < 0
    assert message["valid"] is True


def test_format_empty_sentence() -> None:
    fix = parse_rmc_sentence("$GPRMC,,V,,,,,,,,,,N*53")
    message = json.loads(format_rmc_message(fix))
    assert message == {
        "type": "rmc",
        "utc_time": None,
        "utc_date": None,
        "status": "invalid",
        "lat": None,
        "lon": None,
        "speed_knots": None,
        "speed_ms": None,
        "course_degrees": None,
        "valid": False,
    }
