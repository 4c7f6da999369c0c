"""
Unit tests for the NMEA checksum: XOR, hex rendering, sentence wrapping.
"""

import logging

import pytest

from nmea_encoder.checksum import compute_checksum, format_checksum, wrap_sentence


class TestComputeChecksum:
    """compute_checksum XORs every byte of the body."""

    def test_empty_body_is_zero(self) -> None:
        assert compute_checksum("") == 0

    def test_single_character(self) -> None:
        assert compute_checksum("A") == 0x41

    def test_pair_cancels(self) -> None:
        assert compute_checksum("GG") == 0

    def test_known_sentence(self) -> None:
        assert compute_checksum("GNGGA,123519") == 0x69

    def test_result_is_byte(self) -> None:
        assert 0 <= compute_checksum("IIMDA,29.921,I,1.013,B") <= 255


class TestComputeChecksumInvalid:
    """Non-ASCII bodies are rejected, not coerced."""

    def test_non_ascii_raises(self) -> None:
        with pytest.raises(ValueError):
            compute_checksum("IIMTA,20.5,°C")

    def test_non_ascii_talker_raises(self) -> None:
        with pytest.raises(ValueError):
            wrap_sentence("ÉIMTA,20.5,C")


class TestFormatChecksum:
    """Two uppercase, zero padded hex digits."""

    def test_zero_padded(self) -> None:
        assert format_checksum(2) == "02"

    def test_uppercase(self) -> None:
        assert format_checksum(0x7C) == "7C"

    def test_max(self) -> None:
        assert format_checksum(255) == "FF"


class TestWrapSentence:
    """wrap_sentence adds $, * and the checksum, and no line terminator."""

    def test_layout(self) -> None:
        assert wrap_sentence("IIMTA,20.5,C") == "$IIMTA,20.5,C*02"

    def test_no_crlf(self) -> None:
        s = wrap_sentence("GNGGA,123519")
        assert s == "$GNGGA,123519*69"
        assert not s.endswith("\n")

    def test_roundtrip_with_independent_validator(self, valid_checksum) -> None:
        assert valid_checksum(wrap_sentence("IIHDM,110,M"))

    def test_logs_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="nmea_encoder.checksum"):
            wrap_sentence("IIHDM,110,M")
        assert "$IIHDM,110,M*3C" in caplog.text
