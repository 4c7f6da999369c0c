"""
Command line driver: print sample sentences built from reference values.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Dict, Optional

from nmea_encoder.config import Config, parse_args
from nmea_encoder.navigation import (
    generate_hdm,
    generate_rmc,
    generate_vdr,
    generate_vhw,
)
from nmea_encoder.weather import (
    generate_mda,
    generate_mmb,
    generate_mta,
    generate_mwd,
    generate_mwv,
    generate_vwt,
)
from nmea_encoder.xdr import XdrReading, XdrType, generate_xdr

logger = logging.getLogger(__name__)


def demo_sentences(talker: str, timestamp: datetime) -> Dict[str, list]:
    """
    Build the reference sentences, keyed by sentence ID.

    MDA has two entries: all quantities present, and a partial one with
    water temperature, humidity and dew point missing.
    """
    return {
        "RMC": [generate_rmc(talker, timestamp, 38.25, -122.5, 6.7, 210.0, 3.0)],
        "MWV": [generate_mwv(talker, 23.45, 110)],
        "VHW": [generate_vhw(talker, 8.5, 110)],
        "HDM": [generate_hdm(talker, 110)],
        "VDR": [generate_vdr(talker, 1.2, 45.0, 30.0)],
        "MMB": [generate_mmb(talker, 1013.6)],
        "MTA": [generate_mta(talker, 20.5)],
        "XDR": [
            generate_xdr(talker, XdrReading(XdrType.PRESSURE_BAR, 1.0136, "BMP180")),
            generate_xdr(
                talker,
                XdrReading(XdrType.PRESSURE_BAR, 1.0136, "BMP180"),
                XdrReading(XdrType.TEMPERATURE, 15.5, "BMP180"),
            ),
        ],
        "MDA": [
            generate_mda(talker, 1013.25, 25, 12, 75, 50, 9, 270, 255, 12),
            generate_mda(
                talker,
                pressure_hpa=1009,
                air_temp_c=31.7,
                wind_dir_true=82.3,
                wind_dir_magnetic=72.3,
                wind_speed_knots=7.4,
            ),
        ],
        "VWT": [generate_vwt(talker, 16, 96)],
        "MWD": [generate_mwd(talker, 289, 20.9, 15.0)],
    }


def run(config: Config, timestamp: Optional[datetime] = None) -> int:
    """
    Print the selected sentences to stdout, one per line.

    Returns exit code (0 = success).
    """
    log_level = logging.DEBUG if config.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if timestamp is None:
        timestamp = datetime.now(timezone.utc)
    try:
        built = demo_sentences(config.talker, timestamp)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    end = "\r\n" if config.crlf else "\n"
    for sentence_id in config.sentences:
        for sentence in built[sentence_id]:
            sys.stdout.write(sentence + end)
    logger.debug("Emitted %d sentence types", len(config.sentences))
    return 0


def main() -> None:
    """Entry point for the nmea-encode script."""
    config = parse_args()
    sys.exit(run(config))


if __name__ == "__main__":
    main()
