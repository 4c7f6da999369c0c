#!/usr/bin/env python3
"""
LibFuzzer harness for XDR building (generate_xdr, format_reading).

Feed raw bytes as JSON: [{"kind":str,"value":float,"name":str}, ...]
Fuzzer exercises transducer value formats with arbitrary kinds and values.
Run: python fuzz/fuzz_xdr.py fuzz/corpus/xdr/ [options]
"""

import json
import sys

try:
    import atheris
except ImportError:
    print("Install atheris: pip install atheris")
    sys.exit(1)

with atheris.instrument_imports():
    from nmea_encoder.xdr import XdrReading, XdrType, generate_xdr


def test_one_input(data: bytes) -> None:
    """Single fuzz iteration: parse JSON readings and build one XDR."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return
    try:
        obj = json.loads(text)
    except json.JSONDecodeError:
        return
    if not isinstance(obj, list) or not obj:
        return
    readings = []
    for item in obj:
        if not isinstance(item, dict):
            return
        try:
            kind = XdrType[str(item.get("kind", "GENERIC"))]
        except KeyError:
            return
        value = item.get("value", 0)
        if not isinstance(value, (int, float)):
            return
        try:
            value = float(value)
        except OverflowError:
            return
        readings.append(XdrReading(kind, value, str(item.get("name", ""))))
    try:
        generate_xdr("II", *readings)
    except ValueError:
        return


def main() -> None:
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
