"""
Build NMEA 0183 navigation sentences (RMC, VHW, HDM, VDR).

All builders take the talker prefix (e.g. "GP", "II") first and return the
complete sentence "$<prefix><id>,...*hh" without CR/LF.
"""

from datetime import datetime
from typing import Callable

from nmea_encoder import fields
from nmea_encoder.checksum import wrap_sentence


def _coordinate(
    value: float,
    degrees_format: Callable[[float], str],
    positive: str,
    negative: str,
) -> str:
    """DDMM.MMM (or DDDMM.MMM) followed by the hemisphere letter."""
    degrees, mins = fields.split_degrees(value)
    hemisphere = negative if value < 0 else positive
    return f"{degrees_format(degrees)}{fields.minutes(mins)},{hemisphere}"


def generate_rmc(
    prefix: str,
    timestamp: datetime,
    lat: float,
    lon: float,
    sog: float,
    cog: float,
    variation: float,
) -> str:
    """
    Build RMC (recommended minimum: time, position, SOG, COG, date, variation).

    lat/lon in signed degrees (+ = North/East), sog in knots, cog in degrees,
    variation in signed degrees (+ = East). Time and date are taken from the
    timestamp's fields as given. Status is always A.
    """
    body = (
        f"{prefix}RMC,{fields.format_time(timestamp)},A,"
        f"{_coordinate(lat, fields.lat_degrees, 'N', 'S')},"
        f"{_coordinate(lon, fields.lon_degrees, 'E', 'W')},"
        f"{fields.over_ground(sog)},{fields.over_ground(cog)},"
        f"{fields.format_date(timestamp)},"
        f"{fields.over_ground(abs(variation))},{'W' if variation < 0 else 'E'}"
    )
    return wrap_sentence(body)


def generate_vhw(prefix: str, speed_knots: float, heading: float) -> str:
    """
    Build VHW (water speed and heading).

    Only the magnetic heading and the speed in knots are modelled; true
    heading and km/h fields are left empty.
    """
    body = (
        f"{prefix}VHW,,,{fields.lon_degrees(heading)},M,"
        f"{fields.minutes(speed_knots)},N,,"
    )
    return wrap_sentence(body)


def generate_hdm(prefix: str, heading: float) -> str:
    """Build HDM (magnetic heading, degrees)."""
    return wrap_sentence(f"{prefix}HDM,{fields.lon_degrees(heading)},M")


def generate_vdr(
    prefix: str, speed_knots: float, dir_true: float, dir_magnetic: float
) -> str:
    """Build VDR (current set, true and magnetic, and drift in knots)."""
    body = (
        f"{prefix}VDR,{fields.speed(dir_true)},T,"
        f"{fields.speed(dir_magnetic)},M,{fields.speed(speed_knots)},N"
    )
    return wrap_sentence(body)
