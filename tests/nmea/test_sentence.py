"""Tests for NMEA sentence framing."""

import pytest

from navfix import parse_nmea_sentence
from navfix.nmea import ChecksumMismatch, InvalidSentence, NmeaSentence

RMC_VALID = (
    "$GPRMC,225446.33,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E,A*2B"
)


class TestParseNmeaSentence:
    """Tests for parse_nmea_sentence function."""

    def test_splits_header_and_data(self):
        sentence = parse_nmea_sentence(RMC_VALID)
        assert sentence.talker_id == "GP"
        assert sentence.message_id == "RMC"
        assert sentence.data == (
            "225446.33,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E,A"
        )
        assert sentence.checksum == 0x2B

    def test_checksum_matches_calculation(self):
        sentence = parse_nmea_sentence(RMC_VALID)
        assert sentence.checksum == sentence.calc_checksum()

    def test_empty_fields_kept_in_data(self):
        sentence = parse_nmea_sentence("$GPRMC,,V,,,,,,,,,,N*53")
        assert sentence == NmeaSentence(
            talker_id="GP",
            message_id="RMC",
            data=",V,,,,,,,,,,N",
            checksum=0x53,
        )

    def test_other_sentence_types_are_framed(self):
        sentence = parse_nmea_sentence(
            "$GPGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*61"
        )
        assert sentence.message_id == "GGA"

    def test_multi_constellation_talker(self):
        sentence = parse_nmea_sentence(
            "$GNRMC,225446.33,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E,A*35"
        )
        assert sentence.talker_id == "GN"

    def test_trailing_whitespace(self):
        assert parse_nmea_sentence(RMC_VALID + "\r\n").message_id == "RMC"

    def test_checksum_mismatch(self):
        with pytest.raises(ChecksumMismatch) as exc_info:
            parse_nmea_sentence(RMC_VALID[:-2] + "FF")
        assert exc_info.value.expected == 0xFF
        assert exc_info.value.calculated == 0x2B

    @pytest.mark.parametrize(
        "line",
        [
            "",
            RMC_VALID[1:],
            RMC_VALID.replace("*", ""),
            RMC_VALID[:-1],
            RMC_VALID[:-2] + "ZZ",
            "$GPRMC*00",
            "$RMC,,V*00",
        ],
    )
    def test_structural_errors(self, line):
        with pytest.raises(InvalidSentence):
            parse_nmea_sentence(line)

    def test_unsupported_talker(self):
        with pytest.raises(InvalidSentence, match="talker"):
            parse_nmea_sentence("$XXRMC,,V,,,,,,,,,,N*44")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_nmea_sentence("garbage")
