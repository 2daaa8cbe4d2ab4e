"""RMC sentence parser.

RMC (Recommended Minimum Navigation Information) carries the minimum a
navigation application needs from one epoch: time, date, position, speed and
course, plus a status letter saying whether the receiver trusts the fix.

RMC Sentence Format:
    $GPRMC,225446.33,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E,A*2B
           |         | |       | |        | |     |     |      |     | |
           |         | |       | |        | |     |     |      |     | +-- FAA mode (NMEA 2.3+)
           |         | |       | |        | |     |     |      +-----+-- Magnetic variation
           |         | |       | |        | |     |     +-- Date (DDMMYY)
           |         | |       | |        | |     +-- Course made good (degrees true)
           |         | |       | |        | +-- Speed over ground (knots)
           |         | |       | +--------+-- Longitude + E/W
           |         | +-------+-- Latitude + N/S
           |         +-- Status (A/D/V)
           +-- UTC time (HHMMSS.ss)

Status Values:
    A = Autonomous, valid
    D = Differential, valid
    V = Invalid (receiver warning)

Only the fields up to and including the date are decoded. Magnetic variation,
the FAA mode indicator (NMEA 2.3) and the navigational status (NMEA 4.1) are
skipped, so sentences from every protocol revision decode identically. SiRF
chipsets omit the magnetic variation and mode indicator entirely.
"""

from navfix.nmea.errors import WrongSentenceType
from navfix.nmea.fields import (
    FieldCursor,
    parse_char_field,
    parse_date,
    parse_float_field,
    parse_hms,
    parse_lat_lon,
)
from navfix.nmea.sentence import NmeaSentence, SentenceType, parse_nmea_sentence
from navfix.nmea.types import RmcData, RmcStatusOfFix

_STATUS_CODES: dict[str, RmcStatusOfFix] = {
    "A": RmcStatusOfFix.AUTONOMOUS,
    "D": RmcStatusOfFix.DIFFERENTIAL,
    "V": RmcStatusOfFix.INVALID,
}

_POSITION_FIELDS = (
    "latitude",
    "latitude_hemisphere",
    "longitude",
    "longitude_hemisphere",
)


def _parse_status(value: str) -> RmcStatusOfFix:
    """Map the status letter to ``RmcStatusOfFix``; empty is not allowed."""
    return _STATUS_CODES[parse_char_field(value, "ADV", "status_of_fix")]


def parse_rmc_fields(data: str) -> RmcData:
    """Decode the field data of an RMC sentence.

    Fields are read strictly left to right, one delimiter between each:
        1. fix_time          optional, HHMMSS.ss
        2. status_of_fix     mandatory, A/D/V
        3-6. position        four fields decoded as one pair, optional as a whole
        7. speed_over_ground optional, knots
        8. true_course       optional, degrees
        9. fix_date          optional, DDMMYY
    followed by one more delimiter. Whatever follows it is ignored.

    Args:
        data: Field data with the "$GPRMC," header and "*hh" checksum removed.

    Returns:
        The decoded record.

    Raises:
        MalformedField: If a non-empty field fails its grammar, the status
            letter is missing or unknown, or the position is incomplete.
        TruncatedSentence: If the data ends before the delimiter that
            follows the date field.

    Example:
        >>> parse_rmc_fields(",V,,,,,,,,,,N").status_of_fix
        <RmcStatusOfFix.INVALID: 'V'>
    """
    cursor = FieldCursor(data)

    fix_time = parse_hms(cursor.take())
    cursor.skip_delimiter("fix_time")

    status_of_fix = _parse_status(cursor.take())
    cursor.skip_delimiter("status_of_fix")

    position = parse_lat_lon(*cursor.take_group(_POSITION_FIELDS))
    cursor.skip_delimiter("longitude_hemisphere")

    speed_over_ground = parse_float_field(cursor.take(), "speed_over_ground")
    cursor.skip_delimiter("speed_over_ground")

    true_course = parse_float_field(cursor.take(), "true_course")
    cursor.skip_delimiter("true_course")

    fix_date = parse_date(cursor.take())
    cursor.skip_delimiter("fix_date")

    return RmcData(
        fix_time=fix_time,
        fix_date=fix_date,
        status_of_fix=status_of_fix,
        position=position,
        speed_over_ground=speed_over_ground,
        true_course=true_course,
    )


def parse_rmc(sentence: NmeaSentence) -> RmcData:
    """Decode a framed RMC sentence.

    The type tag is checked before any field is looked at; a sentence of
    another type is rejected rather than reinterpreted.

    Raises:
        WrongSentenceType: If ``sentence.message_id`` is not "RMC".
        MalformedField: See ``parse_rmc_fields``.
        TruncatedSentence: See ``parse_rmc_fields``.
    """
    if sentence.message_id != SentenceType.RMC:
        raise WrongSentenceType(
            expected=SentenceType.RMC.value,
            found=sentence.message_id,
        )
    return parse_rmc_fields(sentence.data)


def parse_rmc_sentence(line: str) -> RmcData:
    """Frame, checksum-verify and decode a raw RMC line.

    Example:
        >>> result = parse_rmc_sentence("$GPRMC,,V,,,,,,,,,,N*53")
        >>> result.valid
        False
    """
    return parse_rmc(parse_nmea_sentence(line))
