"""
Module for distance unit conversions
"""
__all__ = ['convert_from_meters', 'convert_to_meters']


_CONVERSION_FACTORS = {
    'm': 1,
    'km': 1000,
    'mi': 1609.344,
    'ft': 0.3048,
    'nmi': 1852,
    'yd': 0.9144,
}


def _conversion_factor(unit: str) -> float:
    unit = unit.lower()
    if unit not in _CONVERSION_FACTORS:
        raise ValueError(
            f"Unknown unit '{unit}'. Options: {list(_CONVERSION_FACTORS.keys())}"
        )

    return _CONVERSION_FACTORS[unit]


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer= 'km', mile = 'mi'
        , feet ='ft',nautical mile = 'nmi', yard = 'yd').

    Returns:
        float: The distance in meters.
    """
    return distance * _conversion_factor(unit)


def convert_from_meters(distance: float, unit: str) -> float:
    """
    Converts a distance in meters to another unit.

    Args:
        distance (float): The distance, in meters.
        unit (str): The target unit; see convert_to_meters() for options.

    Returns:
        float: The distance in the target unit.
    """
    return distance / _conversion_factor(unit)
