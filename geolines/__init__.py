
from geolines._version import __version__  # noqa: F401
from geolines.utils.logging import LOGGER
from geolines.coordinates import Coordinate
from geolines.ellipsoid import (
    AIRY_1830, CLARKE_1866, DEFAULT_ELLIPSOID, Ellipsoid, GRS80,
    INTERNATIONAL_1924, WGS72, WGS84
)
from geolines.lines import GeodeticLine
from geolines.shapes import GeoBox, GeoCircle
from geolines.sphere import SphereCalculator
from geolines.geodesy import ConvergenceError, SpheroidCalculator
from geolines.calc import get_geodetic_calculator, set_geodetic_calculator


__all__ = [
    'AIRY_1830',
    'CLARKE_1866',
    'ConvergenceError',
    'Coordinate',
    'DEFAULT_ELLIPSOID',
    'Ellipsoid',
    'GeoBox',
    'GeoCircle',
    'GeodeticLine',
    'GRS80',
    'INTERNATIONAL_1924',
    'LOGGER',
    'SphereCalculator',
    'SpheroidCalculator',
    'WGS72',
    'WGS84',
    'get_geodetic_calculator',
    'set_geodetic_calculator',
]
