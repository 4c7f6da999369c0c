"""
Unit tests for the command line driver.
"""

from datetime import datetime

from nmea_encoder.config import SENTENCE_IDS, Config
from nmea_encoder.main import demo_sentences, run

TS = datetime(2024, 6, 15, 12, 34, 56)


class TestDemoSentences:
    """Reference sentences for every supported ID."""

    def test_every_id_present(self) -> None:
        built = demo_sentences("II", TS)
        assert set(built) == set(SENTENCE_IDS)

    def test_all_checksums_valid(self, valid_checksum) -> None:
        for sentences in demo_sentences("II", TS).values():
            for s in sentences:
                assert valid_checksum(s), s

    def test_talker_applied(self) -> None:
        for sentence_id, sentences in demo_sentences("WI", TS).items():
            for s in sentences:
                assert s.startswith("$WI" + sentence_id + ",")

    def test_known_values(self) -> None:
        built = demo_sentences("II", TS)
        assert built["MWV"] == ["$IIMWV,110.0,R,023.5,N,A*39"]
        assert built["MWD"] == ["$IIMWD,289.0,T,274.0,M,20.9,N,10.8,M*44"]
        assert len(built["XDR"]) == 2
        assert len(built["MDA"]) == 2


class TestRun:
    """run() prints the selected sentences and returns an exit code."""

    def test_prints_selected_sentences(self, capsys) -> None:
        code = run(Config(talker="II", sentences=["MTA", "HDM"]), timestamp=TS)
        assert code == 0
        out = capsys.readouterr().out
        assert out == "$IIMTA,20.5,C*02\n$IIHDM,110,M*3C\n"

    def test_crlf(self, capsys) -> None:
        run(Config(sentences=["MTA"], crlf=True), timestamp=TS)
        assert capsys.readouterr().out == "$IIMTA,20.5,C*02\r\n"

    def test_all_sentences(self, capsys) -> None:
        assert run(Config(), timestamp=TS) == 0
        lines = capsys.readouterr().out.splitlines()
        # XDR and MDA have two variants each
        assert len(lines) == len(SENTENCE_IDS) + 2

    def test_non_ascii_talker_fails(self, capsys) -> None:
        assert run(Config(talker="ÜI"), timestamp=TS) == 1
        assert capsys.readouterr().out == ""

    def test_default_timestamp(self, capsys) -> None:
        assert run(Config(sentences=["RMC"])) == 0
        assert capsys.readouterr().out.startswith("$IIRMC,")
