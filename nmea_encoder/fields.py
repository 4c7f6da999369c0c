"""
Field formatters for NMEA 0183 sentences.

Each formatter turns one physical value into a fixed-width, fixed-precision
ASCII token. Formatters never convert units; builders do that with the
constants below before formatting.

Rounding is half-up on the shortest decimal representation of the value
(23.45 -> "23.5"), independent of locale.
"""

import math
import sys
from datetime import datetime
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional, Tuple

KNOTS_TO_KMH = 1.852
KNOTS_TO_MS = 1.852 * 0.27777777
HPA_TO_INHG = 33.8639  # hPa per inch of mercury
HPA_TO_BAR = 0.001  # 1 mb = 1 hPa

# Wire-compatible "no data" marker; None is the preferred way to say the same.
NO_VALUE = -sys.float_info.max

# Wide enough to quantize any finite double without InvalidOperation.
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def is_missing(value: Optional[float]) -> bool:
    """True for None and for the NO_VALUE sentinel."""
    return value is None or value == NO_VALUE


def _to_decimal(value: float) -> Decimal:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")
    return Decimal(repr(value))


def format_fixed(value: float, int_digits: int, frac_digits: int) -> str:
    """
    Format value with at least int_digits integer digits (zero padded)
    and exactly frac_digits decimals.

    The minus sign, if any, precedes the padded digits: -5 with 3 integer
    digits is "-005". Raises ValueError for NaN and infinities.
    """
    quantum = Decimal(1).scaleb(-frac_digits)
    rounded = _to_decimal(value).quantize(quantum, context=_CONTEXT)
    whole, _, frac = f"{rounded.copy_abs():f}".partition(".")
    sign = "-" if rounded < 0 else ""
    text = sign + whole.zfill(int_digits)
    if frac_digits:
        text += "." + frac
    return text


def format_plain(value: float) -> str:
    """Full-precision decimal text, never in exponent notation."""
    text = f"{_to_decimal(value):f}"
    if "." not in text:
        text += ".0"
    return text


def lat_degrees(value: float) -> str:
    """Two-digit whole degrees (00)."""
    return format_fixed(value, 2, 0)


def lon_degrees(value: float) -> str:
    """Three-digit whole degrees (000)."""
    return format_fixed(value, 3, 0)


def minutes(value: float) -> str:
    """Minutes of arc (00.000)."""
    return format_fixed(value, 2, 3)


def over_ground(value: float) -> str:
    """Course/speed over ground and other angles (000.0)."""
    return format_fixed(value, 3, 1)


def temperature(value: float) -> str:
    return format_fixed(value, 1, 1)


def pressure(value: float) -> str:
    """Inches of mercury or bars, four decimals (##0.0000)."""
    return format_fixed(value, 1, 4)


def pressure_mda(value: float) -> str:
    return format_fixed(value, 1, 3)


def pressure_pascal(value: float) -> str:
    return format_fixed(value, 1, 0)


def percent(value: float) -> str:
    return format_fixed(value, 1, 0)


def direction(value: float) -> str:
    return format_fixed(value, 1, 0)


def speed(value: float) -> str:
    """Speed in knots, m/s or km/h (#0.0)."""
    return format_fixed(value, 1, 1)


def split_degrees(value: float) -> Tuple[int, float]:
    """
    Split a signed coordinate into (whole degrees, minutes) of its magnitude.

    Minutes are computed as 0.6 * (fraction * 100) rather than fraction * 60
    so that rounding matches existing NMEA producers bit for bit.
    """
    magnitude = abs(value)
    degrees = int(magnitude)
    return degrees, 0.6 * ((magnitude - degrees) * 100.0)


def format_time(timestamp: datetime) -> str:
    """HHMMSS from the timestamp's own fields (no timezone conversion)."""
    return timestamp.strftime("%H%M%S")


def format_date(timestamp: datetime) -> str:
    """DDMMYY from the timestamp's own fields (no timezone conversion)."""
    return timestamp.strftime("%d%m%y")
