#!/usr/bin/env python3
"""
LibFuzzer harness for sentence building (RMC, MWV, VWT, MWD, MMB, MTA, MDA,
VHW, HDM, VDR).

Feed raw bytes as JSON: {"talker":str,"lat":float,"lon":float,"speed":float,
"angle":float,"variation":float,"pressure":float,"temp":float,...}
Fuzzer exercises field formatting and checksums with arbitrary numbers.
Run: python fuzz/fuzz_sentences.py fuzz/corpus/sentences/ [options]
"""

import json
import sys
from datetime import datetime

try:
    import atheris
except ImportError:
    print("Install atheris: pip install atheris")
    sys.exit(1)

with atheris.instrument_imports():
    from nmea_encoder.navigation import (
        generate_hdm,
        generate_rmc,
        generate_vdr,
        generate_vhw,
    )
    from nmea_encoder.weather import (
        WindReference,
        generate_mda,
        generate_mmb,
        generate_mta,
        generate_mwd,
        generate_mwv,
        generate_vwt,
    )

_MDA_KEYS = (
    "pressure",
    "temp",
    "water_temp",
    "rel_humidity",
    "abs_humidity",
    "dew_point",
    "wind_dir_true",
    "wind_dir_magnetic",
    "speed",
)


def _number(obj: dict, key: str) -> float:
    value = obj.get(key, 0)
    return float(value) if isinstance(value, (int, float)) else 0.0


def test_one_input(data: bytes) -> None:
    """Single fuzz iteration: parse JSON and build every sentence type."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return
    try:
        obj = json.loads(text)
    except json.JSONDecodeError:
        return
    if not isinstance(obj, dict):
        return
    talker = obj.get("talker", "II")
    if not isinstance(talker, str):
        talker = "II"
    try:
        lat = _number(obj, "lat")
        lon = _number(obj, "lon")
        speed = _number(obj, "speed")
        angle = _number(obj, "angle")
        variation = _number(obj, "variation")
        pressure = _number(obj, "pressure")
        temp = _number(obj, "temp")
        mda = [
            float(obj[k]) if isinstance(obj.get(k), (int, float)) else None
            for k in _MDA_KEYS
        ]
    except OverflowError:
        return
    ts = datetime(2024, 6, 15, 12, 34, 56)
    try:
        generate_rmc(talker, ts, lat, lon, speed, angle, variation)
        generate_mwv(talker, speed, angle, WindReference.THEORETICAL)
        generate_vwt(talker, speed, angle)
        generate_mwd(talker, angle, speed, variation)
        generate_mmb(talker, pressure)
        generate_mta(talker, temp)
        generate_mda(talker, *mda)
        generate_vhw(talker, speed, angle)
        generate_hdm(talker, angle)
        generate_vdr(talker, speed, angle, variation)
    except (OverflowError, ValueError):
        return


def main() -> None:
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
