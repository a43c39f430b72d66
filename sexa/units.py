#
# Sexa Units of Angle and Time
#

# Native units are radians for Angle, HourAngle and RA, and seconds for Time.
# Values are plain floats; the constructors here build them from sexagesimal
# components and the converters give display units for formatting.

# Standard library -----------------------------------------------------------------------------------------------------
import math
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import std_float

Sign = Literal["-", "+", " "]

# @formatter:off
SIGNS = ("-", "+", " ")

RAD_PER_DEG   = math.pi / 180
RAD_PER_HOUR  = math.pi / 12
SEC_PER_HOUR  = 3600
FULL_CIRCLE   = 2 * math.pi
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def sexa_to_float(sign: Sign, a: int | float, b: int | float, c: int | float) -> float:
    """
    Combine sexagesimal components into a single value in units of the first component.

    The sign applies to the whole value; components are expected non-negative.

    Args:
        sign: '-' for a negative value, '+' or ' ' for a positive one.
        a: Degrees or hours.
        b: Minutes.
        c: Seconds.

    Raises:
        ValueError: If sign is not one of '-', '+', ' '.

    Examples:
        >>> sexa_to_float('-', 13, 30, 0)
        -13.5
    """
    if sign not in SIGNS:
        raise ValueError(f"sign must be one of {SIGNS}, got {sign!r}")
    value = std_float(a) + std_float(b) / 60 + std_float(c) / 3600
    return -value if sign == "-" else value


def angle_from_sexa(sign: Sign, d: int | float, m: int | float, s: int | float) -> float:
    """Angle in radians from degrees, minutes and seconds of arc."""
    return sexa_to_float(sign, d, m, s) * RAD_PER_DEG


def angle_from_deg(deg) -> float:
    """Angle in radians from decimal degrees."""
    return std_float(deg) * RAD_PER_DEG


def hour_angle_from_sexa(sign: Sign, h: int | float, m: int | float, s: int | float) -> float:
    """Hour angle in radians from hours, minutes and seconds of time."""
    return sexa_to_float(sign, h, m, s) * RAD_PER_HOUR


def ra_from_sexa(h: int | float, m: int | float, s: int | float) -> float:
    """
    Right ascension in radians from hours, minutes and seconds, wrapped to [0, 2π).

    RA has no sign; 24ʰ and above wrap around.
    """
    return wrap_ra(sexa_to_float(" ", h, m, s) * RAD_PER_HOUR)


def time_from_sexa(sign: Sign, h: int | float, m: int | float, s: int | float) -> float:
    """Time in seconds from hours, minutes and seconds."""
    return sexa_to_float(sign, h, m, s) * SEC_PER_HOUR


def wrap_ra(rad: float) -> float:
    """Wrap radians to [0, 2π); non-finite values pass through."""
    if not math.isfinite(rad):
        return rad
    wrapped = math.fmod(rad, FULL_CIRCLE)
    if wrapped < 0:
        wrapped += FULL_CIRCLE
    # fmod of a tiny negative can round up to exactly 2π
    return 0.0 if wrapped >= FULL_CIRCLE else wrapped


def deg(rad: float) -> float:
    """Radians to degrees."""
    return rad / RAD_PER_DEG


def hours(rad: float) -> float:
    """Radians to hours, 1ʰ = 15°."""
    return rad / RAD_PER_HOUR


def time_hours(seconds: float) -> float:
    """Seconds to hours."""
    return seconds / SEC_PER_HOUR
