"""JSON formatting utilities for decoded fixes."""

import json

from navfix.nmea.types import RmcData

__all__ = ["format_rmc_message"]

# 1 knot = 1852 m / 3600 s
_KNOTS_TO_METERS_PER_SECOND = 1852.0 / 3600.0


def format_rmc_message(data: RmcData) -> str:
    """Serialize an RMC fix into a JSON string for WebSocket transmission.

    Absent fields are sent as ``null``; ``lat`` and ``lon`` are always both
    null or both set.
    """
    speed_knots = data.speed_over_ground
    speed_ms = (
        speed_knots * _KNOTS_TO_METERS_PER_SECOND if speed_knots is not None else None
    )

    return json.dumps({
        "type": "rmc",
        "utc_time": data.fix_time.isoformat() if data.fix_time is not None else None,
        "utc_date": data.fix_date.isoformat() if data.fix_date is not None else None,
        "status": data.status_of_fix.name.lower(),
        "lat": data.latitude,
        "lon": data.longitude,
        "speed_knots": speed_knots,
        "speed_ms": speed_ms,
        "course_degrees": data.true_course,
        "valid": data.valid,
    })
