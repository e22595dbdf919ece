"""
Geodetic calculation dispatch module.
Holds the calculator used by shapes and the module-level functions below, and supports
switching between spherical and ellipsoidal calculations.
"""

__all__ = [
    'area', 'get_geodetic_calculator', 'length', 'loxodromic_line',
    'orthodromic_destination', 'orthodromic_line', 'set_geodetic_calculator',
]

from typing import List, Literal, Optional, Tuple, Union

from geolines.coordinates import Coordinate
from geolines.ellipsoid import Ellipsoid
from geolines.geodesy import SpheroidCalculator
from geolines.lines import GeodeticLine
from geolines.shapes import GeoBox, GeoCircle
from geolines.sphere import SphereCalculator


# The calculator in use (default ellipsoidal, WGS84)
_CALCULATOR: Union[SphereCalculator, SpheroidCalculator] = SpheroidCalculator()

_ALGORITHMS = ('sphere', 'spheroid')


def get_geodetic_calculator() -> Union[SphereCalculator, SpheroidCalculator]:
    """Returns the calculator currently in use"""
    return _CALCULATOR


def set_geodetic_calculator(
    algorithm: Literal['sphere', 'spheroid'],
    ellipsoid: Union[Ellipsoid, str, None] = None,
):
    """
    Set the global geodetic calculation method.

    Args:
        algorithm:
            'spheroid' (ellipsoidal) or 'sphere' (spherical)

        ellipsoid:
            (Default None) An Ellipsoid or the name of a preset. For 'spheroid' this is
            the earth model (default WGS84); for 'sphere' the sphere takes the
            ellipsoid's mean radius (default 6,371 km).
    """
    global _CALCULATOR

    if algorithm not in _ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{algorithm}'. Options: {list(_ALGORITHMS)}")

    if isinstance(ellipsoid, str):
        ellipsoid = Ellipsoid.from_name(ellipsoid)

    if algorithm == 'sphere':
        _CALCULATOR = SphereCalculator(ellipsoid.mean_radius) if ellipsoid else SphereCalculator()
        return

    _CALCULATOR = SpheroidCalculator(ellipsoid) if ellipsoid else SpheroidCalculator()


def _spheroid_calculator() -> SpheroidCalculator:
    if not isinstance(_CALCULATOR, SpheroidCalculator):
        raise TypeError(
            'Geodetic lines require an ellipsoidal calculator; '
            "use set_geodetic_calculator('spheroid')"
        )

    return _CALCULATOR


def orthodromic_line(start: Coordinate, end: Coordinate) -> Optional[GeodeticLine]:
    """See SpheroidCalculator.orthodromic_line()"""
    return _spheroid_calculator().orthodromic_line(start, end)


def orthodromic_destination(start: Coordinate, bearing: float, distance: float) -> GeodeticLine:
    """See SpheroidCalculator.orthodromic_destination()"""
    return _spheroid_calculator().orthodromic_destination(start, bearing, distance)


def loxodromic_line(start: Coordinate, end: Coordinate) -> Optional[GeodeticLine]:
    """See SpheroidCalculator.loxodromic_line()"""
    return _spheroid_calculator().loxodromic_line(start, end)


def length(
    shape: Union[GeoBox, GeoCircle, List[Coordinate], Tuple[Coordinate, ...]]
) -> float:
    """The length of a shape, per the calculator in use"""
    return _CALCULATOR.length(shape)


def area(
    shape: Union[GeoBox, GeoCircle, List[Coordinate], Tuple[Coordinate, ...]]
) -> float:
    """The area of a shape, per the calculator in use"""
    return _CALCULATOR.area(shape)
