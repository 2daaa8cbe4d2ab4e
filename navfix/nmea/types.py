"""NMEA data types for parsed sentences.

This module defines dataclasses for structured NMEA sentence data.

Design Decisions:
    1. Optional fields (X | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero" - a stationary receiver reports speed 0.0, a receiver
       without a fix reports nothing.

    2. Position as one optional pair: latitude and longitude come from a single
       decode of four fields, so they are stored as one ``Coordinate | None``.
       A record with a latitude but no longitude cannot be constructed.

    3. Closed status enumeration: the status letter has exactly three legal
       values. Any other letter is a decode error, so there is no "unknown"
       member to handle downstream.

    4. Frozen records: a record describes one sentence and never changes after
       decoding, so it is safe to hand to other threads without copying.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum


class RmcStatusOfFix(Enum):
    """Receiver-reported validity of an RMC fix.

    Member values are the protocol letters:
        'A' = Autonomous (valid fix from satellites alone)
        'D' = Differential (valid fix with DGPS/RTK corrections)
        'V' = Invalid (receiver warning, no usable fix)
    """

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    INVALID = "V"


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in signed decimal degrees.

    Attributes:
        latitude_degrees: Positive=North, negative=South.
        longitude_degrees: Positive=East, negative=West.
    """

    latitude_degrees: float
    longitude_degrees: float


@dataclass(frozen=True)
class RmcData:
    """Parsed RMC (Recommended Minimum Navigation Information) sentence.

    RMC is the sentence most receivers emit once per fix: time, date,
    position, speed and course in a single line.

    Attributes:
        fix_time: UTC time of the fix. None if the field was empty.

        fix_date: UTC date of the fix. None if the field was empty.

        status_of_fix: Receiver status (always present).

        position: Latitude/longitude pair, or None if the receiver sent
            no position (common before the first fix).

        speed_over_ground: Ground speed in knots. None if the field was empty.

        true_course: Course made good relative to true north, in degrees.
            None if the field was empty (typical when stationary).

    Example:
        >>> rmc = parse_rmc_sentence(
        ...     "$GPRMC,225446.33,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E,A*2B"
        ... )
        >>> rmc.fix_time
        datetime.time(22, 54, 46, 330000)
        >>> rmc.latitude
        49.274166...
        >>> rmc.valid
        True
    """

    fix_time: time | None
    fix_date: date | None
    status_of_fix: RmcStatusOfFix
    position: Coordinate | None
    speed_over_ground: float | None
    true_course: float | None

    @property
    def latitude(self) -> float | None:
        """Latitude in decimal degrees, None exactly when longitude is None."""
        if self.position is None:
            return None
        return self.position.latitude_degrees

    @property
    def longitude(self) -> float | None:
        """Longitude in decimal degrees, None exactly when latitude is None."""
        if self.position is None:
            return None
        return self.position.longitude_degrees

    @property
    def valid(self) -> bool:
        """Navigation validity: False when the receiver flags the fix invalid."""
        return self.status_of_fix is not RmcStatusOfFix.INVALID

    @property
    def timestamp(self) -> datetime | None:
        """Naive UTC datetime of the fix, or None if date or time is missing."""
        if self.fix_date is None or self.fix_time is None:
            return None
        return datetime.combine(self.fix_date, self.fix_time)
