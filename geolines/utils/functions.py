"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_up', 'wrap_longitude_degrees', 'wrap_longitude_radians']

import math


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def wrap_longitude_degrees(delta: float) -> float:
    """
    Folds a longitude difference of up to one revolution into [-180, 180], so that
    the shorter way around the globe is taken.
    """
    if delta > 180:
        delta -= 360
    if delta < -180:
        delta += 360

    return delta


def wrap_longitude_radians(lon: float) -> float:
    """Wraps an arbitrary longitude (in radians) into [-pi, pi)"""
    return (lon + math.pi) % (2 * math.pi) - math.pi
