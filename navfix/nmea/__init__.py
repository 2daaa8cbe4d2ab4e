"""NMEA 0183 framing and RMC sentence parser."""

from navfix.nmea.checksum import calculate_checksum
from navfix.nmea.errors import (
    ChecksumMismatch,
    InvalidSentence,
    MalformedField,
    NmeaError,
    TruncatedSentence,
    WrongSentenceType,
)
from navfix.nmea.rmc import parse_rmc, parse_rmc_fields, parse_rmc_sentence
from navfix.nmea.sentence import (
    NmeaSentence,
    SentenceType,
    parse_nmea_sentence,
    validate_checksum,
)
from navfix.nmea.types import Coordinate, RmcData, RmcStatusOfFix

__all__ = [
    "ChecksumMismatch",
    "Coordinate",
    "InvalidSentence",
    "MalformedField",
    "NmeaError",
    "NmeaSentence",
    "RmcData",
    "RmcStatusOfFix",
    "SentenceType",
    "TruncatedSentence",
    "WrongSentenceType",
    "calculate_checksum",
    "parse_nmea_sentence",
    "parse_rmc",
    "parse_rmc_fields",
    "parse_rmc_sentence",
    "validate_checksum",
]
