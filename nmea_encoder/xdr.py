"""
XDR (transducer measurements) sentence.

$--XDR,a,x.x,a,c--c,...,a,x.x,a,c--c*hh

Each transducer contributes a Type-Data-Units-ID group; any number of
groups of mixed types may follow each other in one sentence.

Transducer             Type  Units
temperature            C     C = degrees Celsius
angular displacement   A     D = degrees ("-" = anti-clockwise)
linear displacement    D     M = meters ("-" = compression)
frequency              F     H = Hertz
force                  N     N = Newton ("-" = compression)
pressure               P     B = Bars, P = Pascal ("-" = vacuum)
flow rate              R     l = liters/second
tachometer             T     R = RPM
humidity               H     P = Percent
volume                 V     M = cubic meters
generic                G     none
current                I     A = Amperes
voltage                U     V = Volts
switch or valve        S     none (1 = ON/CLOSED, 0 = OFF/OPEN)
salinity               L     S = ppt
"""

import enum
from dataclasses import dataclass
from typing import Callable, Dict

from nmea_encoder import fields
from nmea_encoder.checksum import wrap_sentence


class XdrType(enum.Enum):
    """Transducer kind; value is (type letter, unit letter)."""

    TEMPERATURE = ("C", "C")
    ANGULAR_DISPLACEMENT = ("A", "D")
    LINEAR_DISPLACEMENT = ("D", "M")
    FREQUENCY = ("F", "H")
    FORCE = ("N", "N")
    PRESSURE_BAR = ("P", "B")
    PRESSURE_PASCAL = ("P", "P")
    FLOW_RATE = ("R", "l")
    TACHOMETER = ("T", "R")
    HUMIDITY = ("H", "P")
    VOLUME = ("V", "M")
    GENERIC = ("G", "")
    CURRENT = ("I", "A")
    VOLTAGE = ("U", "V")
    SWITCH_OR_VALVE = ("S", "")
    SALINITY = ("L", "S")

    @property
    def type_letter(self) -> str:
        return self.value[0]

    @property
    def unit(self) -> str:
        return self.value[1]


# Types not listed here are written with fields.format_plain.
_VALUE_FORMATS: Dict[XdrType, Callable[[float], str]] = {
    XdrType.PRESSURE_BAR: fields.pressure,
    XdrType.PRESSURE_PASCAL: fields.pressure_pascal,
    XdrType.TEMPERATURE: fields.temperature,
}


@dataclass(frozen=True)
class XdrReading:
    """
    One transducer measurement.

    name identifies the transducer to the caller only; the sentence carries
    the reading's position (0, 1, ...) as the transducer ID.
    """

    kind: XdrType
    value: float
    name: str = ""

    def __str__(self) -> str:
        return (
            f"{self.name}, {self.kind.name}, {self.kind.type_letter}, "
            f"{self.value} {self.kind.unit}"
        )


def format_reading(reading: XdrReading, index: int) -> str:
    """Type-Data-Units-ID group for one reading."""
    formatter = _VALUE_FORMATS.get(reading.kind, fields.format_plain)
    return (
        f"{reading.kind.type_letter},{formatter(reading.value)},"
        f"{reading.kind.unit},{index}"
    )


def generate_xdr(prefix: str, first: XdrReading, *more: XdrReading) -> str:
    """Build XDR from one or more readings, in the order given."""
    readings = (first,) + more
    groups = [format_reading(r, i) for i, r in enumerate(readings)]
    return wrap_sentence(f"{prefix}XDR," + ",".join(groups))
