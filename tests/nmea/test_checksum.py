"""Tests for NMEA checksum validation."""

import pytest

from navfix import parse_nmea_sentence, validate_checksum
from navfix.nmea import InvalidSentence, calculate_checksum

RMC_VALID = (
    "$GPRMC,225446.33,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E,A*2B"
)
RMC_EMPTY = "$GPRMC,,V,,,,,,,,,,N*53"


class TestCalculateChecksum:
    """Tests for calculate_checksum function."""

    def test_xor_of_content(self):
        assert calculate_checksum("GPRMC,,V,,,,,,,,,,N") == 0x53

    def test_empty_content_is_zero(self):
        assert calculate_checksum("") == 0


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_rmc_checksum(self):
        assert validate_checksum(RMC_VALID) is True

    def test_valid_checksum_with_newline(self):
        assert validate_checksum(RMC_VALID + "\r\n") is True

    def test_invalid_checksum(self):
        sentence = RMC_VALID[:-2] + "FF"
        assert validate_checksum(sentence) is False

    def test_lowercase_hex_accepted(self):
        assert validate_checksum(RMC_VALID[:-2] + "2b") is True

    def test_missing_dollar_sign(self):
        assert validate_checksum(RMC_VALID[1:]) is False

    def test_missing_asterisk(self):
        sentence = RMC_VALID.replace("*", "")
        assert validate_checksum(sentence) is False

    def test_empty_string(self):
        assert validate_checksum("") is False

    def test_truncated_checksum(self):
        assert validate_checksum(RMC_VALID[:-1]) is False

    def test_non_hex_checksum(self):
        assert validate_checksum(RMC_VALID[:-2] + "ZZ") is False

    def test_valid_empty_rmc_checksum(self):
        assert validate_checksum(RMC_EMPTY) is True


class TestValidateChecksumFraming:
    """validate_checksum and parse_nmea_sentence share one frame grammar."""

    @pytest.mark.parametrize(
        "sentence",
        [
            RMC_VALID[1:],
            RMC_VALID.replace("*", ""),
            RMC_VALID[:-1],
            RMC_VALID + "0",
            RMC_VALID[:-2] + "ZZ",
            RMC_VALID[:-2] + "+2",
        ],
    )
    def test_bad_frame_rejected_by_both(self, sentence):
        assert validate_checksum(sentence) is False
        with pytest.raises(InvalidSentence):
            parse_nmea_sentence(sentence)

    def test_header_is_not_checked(self):
        # Correct checksum, but "XX" is not a supported talker
        sentence = "$XXRMC,,V,,,,,,,,,,N*44"
        assert validate_checksum(sentence) is True
        with pytest.raises(InvalidSentence, match="talker"):
            parse_nmea_sentence(sentence)
