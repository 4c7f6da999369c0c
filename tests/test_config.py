"""
Unit tests for config parsing: valid, invalid, and edge cases.
"""

import pytest

from nmea_encoder.config import SENTENCE_IDS, parse_args


class TestParseArgsDefaults:
    """Default values when no args given."""

    def test_empty_args_uses_defaults(self) -> None:
        config = parse_args([])
        assert config.talker == "II"
        assert config.sentences == list(SENTENCE_IDS)
        assert config.crlf is False
        assert config.debug is False

    def test_help_exits(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--help"])


class TestParseArgsValid:
    """Valid explicit arguments."""

    def test_talker(self) -> None:
        config = parse_args(["--talker", "GP"])
        assert config.talker == "GP"

    def test_single_sentence(self) -> None:
        config = parse_args(["--sentence", "MDA"])
        assert config.sentences == ["MDA"]

    def test_repeated_sentence_keeps_order(self) -> None:
        config = parse_args(["--sentence", "XDR", "--sentence=RMC"])
        assert config.sentences == ["XDR", "RMC"]

    def test_sentence_case_insensitive(self) -> None:
        config = parse_args(["--sentence", "mwv"])
        assert config.sentences == ["MWV"]

    def test_crlf_and_debug_flags(self) -> None:
        config = parse_args(["--crlf", "--debug"])
        assert config.crlf is True
        assert config.debug is True


class TestParseArgsInvalidAndEdge:
    """Invalid and edge cases."""

    def test_unknown_sentence_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--sentence", "GGA"])

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--baud", "4800"])

    def test_talker_not_validated(self) -> None:
        config = parse_args(["--talker", "XYZ"])
        assert config.talker == "XYZ"

    def test_default_sentences_not_shared(self) -> None:
        a = parse_args([])
        a.sentences.append("RMC")
        assert parse_args([]).sentences == list(SENTENCE_IDS)
