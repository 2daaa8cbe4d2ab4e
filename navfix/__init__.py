"""Navfix package for decoding NMEA RMC navigation fixes."""

from navfix.gnss import RMCReader, iter_rmc
from navfix.nmea import (
    Coordinate,
    MalformedField,
    NmeaError,
    NmeaSentence,
    RmcData,
    RmcStatusOfFix,
    TruncatedSentence,
    WrongSentenceType,
    parse_nmea_sentence,
    parse_rmc,
    parse_rmc_fields,
    parse_rmc_sentence,
    validate_checksum,
)

__all__ = [
    "Coordinate",
    "MalformedField",
    "NmeaError",
    "NmeaSentence",
    "RMCReader",
    "RmcData",
    "RmcStatusOfFix",
    "TruncatedSentence",
    "WrongSentenceType",
    "iter_rmc",
    "parse_nmea_sentence",
    "parse_rmc",
    "parse_rmc_fields",
    "parse_rmc_sentence",
    "validate_checksum",
]
