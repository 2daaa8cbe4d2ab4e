"""NMEA field tokenizing and decoding utilities.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). The decoders here treat an empty field as "no data" and return
None, so callers can distinguish "no data" from "zero value". A non-empty field
that does not match its grammar is never silently dropped: it raises
``MalformedField`` naming the field.
"""

import math
import re
from datetime import date, time

from navfix.nmea.errors import MalformedField, TruncatedSentence
from navfix.nmea.types import Coordinate

FIELD_DELIMITER = ","

# Supported NMEA talker IDs for multi-constellation GNSS receivers.
# Each 2-character prefix identifies the satellite system:
#   GP = GPS (USA)
#   GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB = BeiDou (China)
#   GQ = QZSS (Japan)
VALID_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")

# NMEA is ASCII: re.ASCII keeps \d from matching other scripts' digits.
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)
_HMS_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})(?:\.(\d*))?", re.ASCII)
_DATE_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})", re.ASCII)
# Latitude is ddmm.mmmm, longitude dddmm.mmmm: the degree width is fixed
# and the last two integer digits are always minutes.
_LATITUDE_PATTERN = re.compile(r"(\d{2})(\d{2}(?:\.\d*)?)", re.ASCII)
_LONGITUDE_PATTERN = re.compile(r"(\d{3})(\d{2}(?:\.\d*)?)", re.ASCII)

# Two-digit years: 70-99 belong to the 1900s, 00-69 to the 2000s
_CENTURY_PIVOT = 70


class FieldCursor:
    """Left-to-right reader over the field data of one sentence.

    Not a CSV splitter: there is no quoting or escaping. Each call to
    ``take`` returns the text up to the next delimiter (or the end of the
    data) without consuming the delimiter itself, so the caller decides
    whether a delimiter is mandatory at that position.

    Example:
        >>> cursor = FieldCursor("225446.33,A,")
        >>> cursor.take()
        '225446.33'
        >>> cursor.skip_delimiter("fix_time")
        >>> cursor.remaining
        'A,'
    """

    def __init__(self, data: str) -> None:
        self._data = data
        self._position = 0

    @property
    def remaining(self) -> str:
        """The unconsumed suffix of the field data."""
        return self._data[self._position :]

    def take(self) -> str:
        """Return the next field; empty string if the field is empty."""
        end = self._data.find(FIELD_DELIMITER, self._position)
        if end == -1:
            end = len(self._data)
        token = self._data[self._position : end]
        self._position = end
        return token

    def skip_delimiter(self, after: str) -> None:
        """Consume one delimiter.

        Args:
            after: Name of the field just read, used in the error message.

        Raises:
            TruncatedSentence: If the data ends here.
        """
        if not self._data.startswith(FIELD_DELIMITER, self._position):
            raise TruncatedSentence(after)
        self._position += len(FIELD_DELIMITER)

    def take_group(self, names: tuple[str, ...]) -> list[str]:
        """Take consecutive fields that must be decoded together.

        Delimiters between the fields are consumed; the delimiter after the
        last one is left for the caller, as with ``take``.
        """
        tokens = [self.take()]
        for previous in names[:-1]:
            self.skip_delimiter(previous)
            tokens.append(self.take())
        return tokens


def parse_float_field(value: str, field: str) -> float | None:
    """Parse a decimal numeral, returning None if the field is empty.

    Accepts an optional sign, fraction and exponent ("000.5", "-3", "1e2").
    Spellings that Python's ``float`` would take but a receiver never emits,
    such as "nan", "inf", overflowing exponents like "1e999" or padded
    whitespace, are rejected.

    Raises:
        MalformedField: If the field is non-empty and not a numeral.

    Example:
        >>> parse_float_field("054.7", "true_course")
        54.7
        >>> parse_float_field("", "true_course")  # empty field
        None
    """
    if not value:
        return None
    if _FLOAT_PATTERN.fullmatch(value) is None:
        raise MalformedField(field, value, "not a decimal number")
    result = float(value)
    if not math.isfinite(result):
        raise MalformedField(field, value, "not a finite number")
    return result


def parse_char_field(value: str, alphabet: str, field: str) -> str:
    """Parse a mandatory single-character field from a closed alphabet.

    Raises:
        MalformedField: If the field is empty, longer than one character,
            or not one of ``alphabet``.
    """
    if len(value) != 1 or value not in alphabet:
        raise MalformedField(field, value, f"expected one of {alphabet!r}")
    return value


def parse_hms(value: str, field: str = "fix_time") -> time | None:
    """Parse a UTC time of day in hhmmss[.sss] format.

    The fractional part may have any number of digits; it is kept to
    microsecond precision.

    Raises:
        MalformedField: If the field is non-empty and not a valid time.

    Example:
        >>> parse_hms("225446.33")
        datetime.time(22, 54, 46, 330000)
    """
    if not value:
        return None
    match = _HMS_PATTERN.fullmatch(value)
    if match is None:
        raise MalformedField(field, value, "expected hhmmss[.sss]")
    hours, minutes, seconds, fraction = match.groups()
    microseconds = int((fraction or "")[:6].ljust(6, "0"))
    try:
        return time(int(hours), int(minutes), int(seconds), microseconds)
    except ValueError as e:
        raise MalformedField(field, value, str(e)) from e


def parse_date(value: str, field: str = "fix_date") -> date | None:
    """Parse a calendar date in ddmmyy format.

    Raises:
        MalformedField: If the field is non-empty and not a real date.

    Example:
        >>> parse_date("191194")
        datetime.date(1994, 11, 19)
    """
    if not value:
        return None
    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        raise MalformedField(field, value, "expected ddmmyy")
    day, month, short_year = (int(part) for part in match.groups())
    year = short_year + (1900 if short_year >= _CENTURY_PIVOT else 2000)
    try:
        return date(year, month, day)
    except ValueError as e:
        raise MalformedField(field, value, str(e)) from e


def _parse_degrees_minutes(
    value: str,
    pattern: re.Pattern[str],
    field: str,
) -> float:
    """Convert a ddmm.mmmm / dddmm.mmmm magnitude to decimal degrees.

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)
    """
    match = pattern.fullmatch(value)
    if match is None:
        raise MalformedField(field, value, "expected degrees and minutes")
    degrees, minutes = match.groups()
    return int(degrees) + float(minutes) / 60.0


def parse_lat_lon(
    latitude: str,
    latitude_hemisphere: str,
    longitude: str,
    longitude_hemisphere: str,
) -> Coordinate | None:
    """Decode a latitude/longitude pair as one unit.

    Sign convention:
    - North/East = positive
    - South/West = negative

    Returns:
        A ``Coordinate``, or None when all four fields are empty.

    Raises:
        MalformedField: If only some of the four fields are present, or any
            of them fails its grammar.

    Example:
        >>> parse_lat_lon("4916.45", "N", "12311.12", "W")
        Coordinate(latitude_degrees=49.274166..., longitude_degrees=-123.185333...)
    """
    tokens = (latitude, latitude_hemisphere, longitude, longitude_hemisphere)
    if not any(tokens):
        return None
    if not all(tokens):
        raise MalformedField(
            "position", FIELD_DELIMITER.join(tokens), "incomplete coordinate pair"
        )

    latitude_degrees = _parse_degrees_minutes(latitude, _LATITUDE_PATTERN, "latitude")
    if parse_char_field(latitude_hemisphere, "NS", "latitude_hemisphere") == "S":
        latitude_degrees = -latitude_degrees

    longitude_degrees = _parse_degrees_minutes(
        longitude, _LONGITUDE_PATTERN, "longitude"
    )
    if parse_char_field(longitude_hemisphere, "EW", "longitude_hemisphere") == "W":
        longitude_degrees = -longitude_degrees

    return Coordinate(
        latitude_degrees=latitude_degrees,
        longitude_degrees=longitude_degrees,
    )
