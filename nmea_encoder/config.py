"""
Configuration defaults and parsing for nmea-encode.
"""

import argparse
from dataclasses import dataclass, field
from typing import List, Optional

SENTENCE_IDS = (
    "RMC",
    "MWV",
    "VHW",
    "HDM",
    "VDR",
    "MMB",
    "MTA",
    "XDR",
    "MDA",
    "VWT",
    "MWD",
)


@dataclass
class Config:
    """Runtime configuration."""

    talker: str = "II"
    sentences: List[str] = field(default_factory=lambda: list(SENTENCE_IDS))
    crlf: bool = False
    debug: bool = False


def parse_args(args: Optional[list] = None) -> Config:
    """Parse command-line arguments into Config."""
    parser = argparse.ArgumentParser(
        description="Print sample NMEA 0183 sentences built from reference values."
    )
    parser.add_argument(
        "--talker",
        default="II",
        help="Two-letter talker ID prefix (default: II)",
    )
    parser.add_argument(
        "--sentence",
        action="append",
        choices=SENTENCE_IDS,
        type=str.upper,
        default=None,
        help="Sentence to emit; repeat for several (default: all)",
    )
    parser.add_argument(
        "--crlf",
        action="store_true",
        help="Terminate each printed sentence with CR/LF",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parsed = parser.parse_args(args)
    return Config(
        talker=parsed.talker,
        sentences=parsed.sentence or list(SENTENCE_IDS),
        crlf=parsed.crlf,
        debug=parsed.debug,
    )
