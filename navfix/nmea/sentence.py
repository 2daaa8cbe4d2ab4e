"""Framing of raw NMEA lines.

A raw sentence looks like::

    $GPRMC,225446.33,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E,A*2B
     ||___| |_____________________________________________________________| |
     |  |                            field data                          checksum
     |  +-- message type (RMC)
     +-- talker ID (GP)

``parse_nmea_sentence`` splits such a line into its parts and verifies the
checksum. Sentence decoders such as ``parse_rmc`` only ever see the result.
"""

import re
from dataclasses import dataclass
from enum import Enum

from navfix.nmea.checksum import calculate_checksum
from navfix.nmea.errors import ChecksumMismatch, InvalidSentence
from navfix.nmea.fields import FIELD_DELIMITER, VALID_TALKER_IDS

_CHECKSUM_PATTERN = re.compile(r"[0-9A-Fa-f]{2}")

# 2 talker + 3 sentence type characters
_HEADER_LENGTH = 5


class SentenceType(str, Enum):
    """Sentence type tags seen from common GNSS receivers."""

    GGA = "GGA"
    GLL = "GLL"
    GNS = "GNS"
    GSA = "GSA"
    GSV = "GSV"
    RMC = "RMC"
    TXT = "TXT"
    VTG = "VTG"
    ZDA = "ZDA"


@dataclass(frozen=True)
class NmeaSentence:
    """One framed NMEA sentence.

    Attributes:
        talker_id: Constellation prefix, e.g. "GP" or "GN".
        message_id: Sentence type tag, e.g. "RMC". Kept as a plain string so
            sentence types this package does not model can still be routed.
        data: Field data between the header comma and '*'.
        checksum: Checksum transmitted after '*'.
    """

    talker_id: str
    message_id: str
    data: str
    checksum: int

    def calc_checksum(self) -> int:
        """Recompute the XOR checksum over header and field data."""
        return calculate_checksum(
            f"{self.talker_id}{self.message_id}{FIELD_DELIMITER}{self.data}"
        )


def _split_frame(sentence: str) -> tuple[str, int]:
    """Split a stripped sentence into its checksummed content and checksum.

    Raises:
        InvalidSentence: If '$', '*' or the two hex checksum digits are missing.

    Example:
        >>> _split_frame("$GPRMC,,V,,,,,,,,,,N*53")
        ('GPRMC,,V,,,,,,,,,,N', 83)
    """
    if not sentence.startswith("$"):
        raise InvalidSentence(sentence, "missing '$' start delimiter")
    if "*" not in sentence:
        raise InvalidSentence(sentence, "missing '*' checksum delimiter")

    end = sentence.index("*")
    provided = sentence[end + 1 :]
    if _CHECKSUM_PATTERN.fullmatch(provided) is None:
        raise InvalidSentence(sentence, "checksum must be two hex digits")

    return sentence[1:end], int(provided, 16)


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Only the '$'/'*' frame is checked, not the header, so sentences from
    unsupported talkers can still be verified.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum

    Example:
        >>> validate_checksum("$GPRMC,,V,,,,,,,,,,N*53")
        True
        >>> validate_checksum("$GPRMC,,V,,,,,,,,,,N*FF")  # wrong checksum
        False
    """
    try:
        content, provided = _split_frame(sentence.strip())
    except InvalidSentence:
        return False
    return calculate_checksum(content) == provided


def parse_nmea_sentence(line: str) -> NmeaSentence:
    """Split a raw NMEA line into header, field data and checksum.

    Performs:
    1. Whitespace stripping (handles \\r\\n line endings)
    2. Structural checks ('$' start, '*' plus two hex digits, header)
    3. Talker ID validation (must be a supported constellation)
    4. Checksum verification

    Args:
        line: Raw NMEA sentence string

    Returns:
        The framed sentence.

    Raises:
        InvalidSentence: If the line is not a structurally valid sentence.
        ChecksumMismatch: If the checksum does not match.

    Example:
        >>> parse_nmea_sentence("$GPRMC,,V,,,,,,,,,,N*53")
        NmeaSentence(talker_id='GP', message_id='RMC', data=',V,,,,,,,,,,N', checksum=83)
    """
    sentence = line.strip()
    content, provided = _split_frame(sentence)

    header, delimiter, data = content.partition(FIELD_DELIMITER)
    if not delimiter or len(header) != _HEADER_LENGTH:
        raise InvalidSentence(sentence, f"malformed header {header!r}")

    talker_id = header[:2]
    if talker_id not in VALID_TALKER_IDS:
        raise InvalidSentence(sentence, f"unsupported talker ID {talker_id!r}")

    framed = NmeaSentence(
        talker_id=talker_id,
        message_id=header[2:],
        data=data,
        checksum=provided,
    )

    calculated = framed.calc_checksum()
    if calculated != framed.checksum:
        raise ChecksumMismatch(expected=framed.checksum, calculated=calculated)

    return framed
