"""
Build NMEA 0183 wind and atmospheric sentences (MWV, VWT, MWD, MMB, MTA, MDA).

Units: speeds in knots, angles in degrees, pressure in hPa (= mb),
temperatures in degrees Celsius, humidity in percent.
"""

import enum
from typing import Callable, Optional

from nmea_encoder import fields
from nmea_encoder.checksum import wrap_sentence


class WindReference(enum.Enum):
    """MWV reference frame letter."""

    RELATIVE = "R"  # apparent wind
    THEORETICAL = "T"  # true wind


def generate_mwv(
    prefix: str,
    speed: float,
    angle: float,
    reference: WindReference = WindReference.RELATIVE,
) -> str:
    """
    Build MWV (wind angle and speed).

    A negative angle is brought into range by adding 360 once.
    """
    if angle < 0:
        angle = 360 + angle
    body = (
        f"{prefix}MWV,{fields.over_ground(angle)},{reference.value},"
        f"{fields.over_ground(speed)},N,A"
    )
    return wrap_sentence(body)


def generate_vwt(prefix: str, speed_knots: float, angle: float) -> str:
    """
    Build VWT (true wind angle off the bow, and speed in kn, m/s, km/h).

    Positive angle is starboard (R), zero or negative is port (L).
    """
    side = "R" if angle > 0 else "L"
    body = (
        f"{prefix}VWT,{fields.speed(abs(angle))},{side},"
        f"{fields.speed(speed_knots)},N,"
        f"{fields.speed(speed_knots * fields.KNOTS_TO_MS)},M,"
        f"{fields.speed(speed_knots * fields.KNOTS_TO_KMH)},K"
    )
    return wrap_sentence(body)


def generate_mwd(
    prefix: str, true_dir: float, speed_knots: float, variation: float
) -> str:
    """
    Build MWD (wind direction true and magnetic, speed in knots and m/s).

    Magnetic direction is true_dir - variation, wrapped by a single
    add/subtract of 360 (not modulo).
    """
    magnetic = true_dir - variation
    if magnetic < 0:
        magnetic += 360
    if magnetic > 360:
        magnetic -= 360
    body = (
        f"{prefix}MWD,{fields.over_ground(true_dir)},T,"
        f"{fields.over_ground(magnetic)},M,"
        f"{fields.speed(speed_knots)},N,"
        f"{fields.speed(speed_knots * fields.KNOTS_TO_MS)},M"
    )
    return wrap_sentence(body)


def generate_mmb(prefix: str, pressure_hpa: float) -> str:
    """Build MMB (barometric pressure in inches of mercury and bars)."""
    body = (
        f"{prefix}MMB,{fields.pressure(pressure_hpa / fields.HPA_TO_INHG)},I,"
        f"{fields.pressure(pressure_hpa * fields.HPA_TO_BAR)},B"
    )
    return wrap_sentence(body)


def generate_mta(prefix: str, temperature_c: float) -> str:
    """Build MTA (air temperature)."""
    return wrap_sentence(f"{prefix}MTA,{fields.temperature(temperature_c)},C")


def _group(
    value: Optional[float], formatter: Callable[[float], str], *units: str
) -> str:
    """
    One value followed by its unit fields, or the same number of empty
    fields when the value is missing.
    """
    if fields.is_missing(value):
        return "," * len(units)
    return ",".join((formatter(value),) + units)


def generate_mda(
    prefix: str,
    pressure_hpa: Optional[float] = None,
    air_temp_c: Optional[float] = None,
    water_temp_c: Optional[float] = None,
    rel_humidity: Optional[float] = None,
    abs_humidity: Optional[float] = None,
    dew_point_c: Optional[float] = None,
    wind_dir_true: Optional[float] = None,
    wind_dir_magnetic: Optional[float] = None,
    wind_speed_knots: Optional[float] = None,
) -> str:
    """
    Build MDA (meteorological composite).

    Any quantity may be None (or fields.NO_VALUE); its fields are then
    emitted empty so the sentence always carries the same 20 data fields.
    """
    if fields.is_missing(pressure_hpa):
        pressure = ",,,"
    else:
        pressure = (
            f"{fields.pressure_mda(pressure_hpa / fields.HPA_TO_INHG)},I,"
            f"{fields.pressure_mda(pressure_hpa * fields.HPA_TO_BAR)},B"
        )
    if fields.is_missing(wind_speed_knots):
        wind_speed = ",,,"
    else:
        wind_speed = (
            f"{fields.speed(wind_speed_knots)},N,"
            f"{fields.speed(wind_speed_knots * 1.852 / 3.6)},M"
        )
    groups = [
        pressure,
        _group(air_temp_c, fields.temperature, "C"),
        _group(water_temp_c, fields.temperature, "C"),
        _group(rel_humidity, fields.percent),
        _group(abs_humidity, fields.percent),
        _group(dew_point_c, fields.direction, "C"),
        _group(wind_dir_true, fields.temperature, "T"),
        _group(wind_dir_magnetic, fields.temperature, "M"),
        wind_speed,
    ]
    return wrap_sentence(f"{prefix}MDA," + ",".join(groups))
