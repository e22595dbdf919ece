"""
Simple closed shapes whose length and area are resolved through the current
geodetic calculator
"""

__all__ = ['GeoBox', 'GeoCircle']

import statistics
from typing import List, Tuple

from geolines.coordinates import Coordinate
from geolines.utils.functions import round_half_up


class GeoBox:

    """
    A Box (or Square), as expressed by the Northwest and Southeast corners.

    Args:
        nw_bound: (Coordinate)
            The Northwest corner of the box

        se_bound: (Coordinate)
            The Southeast corner of the box

    """

    def __init__(self, nw_bound: Coordinate, se_bound: Coordinate):
        if nw_bound.latitude < se_bound.latitude:
            raise ValueError('The northwest bound must not lie south of the southeast bound.')

        self.nw_bound = nw_bound
        self.se_bound = se_bound

    def __contains__(self, coord: Coordinate) -> bool:
        return self.contains_coordinate(coord)

    def __eq__(self, other):
        if not isinstance(other, GeoBox):
            return False

        return (
            self.nw_bound == other.nw_bound
            and self.se_bound == other.se_bound
        )

    def __hash__(self):
        return hash((self.nw_bound, self.se_bound))

    def __repr__(self):
        return f'<GeoBox {self.nw_bound.to_float()} - {self.se_bound.to_float()}>'

    @property
    def area(self) -> float:
        """The area of the box, in square meters"""
        from geolines.calc import area
        return area(self)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (
            self.nw_bound.longitude, self.se_bound.latitude,
            self.se_bound.longitude, self.nw_bound.latitude
        )

    @property
    def centroid(self) -> Coordinate:
        _nw = self.nw_bound.to_float()
        _se = self.se_bound.to_float()
        return Coordinate(
            round_half_up(statistics.mean([_nw[0], _se[0]]), 7),
            round_half_up(statistics.mean([_nw[1], _se[1]]), 7),
        )

    @property
    def length(self) -> float:
        """The perimeter of the box, in meters"""
        from geolines.calc import length
        return length(self)

    def bounding_coords(self) -> List[Coordinate]:
        _nw = self.nw_bound.to_float()
        _se = self.se_bound.to_float()

        # Is self-closing
        return [
            self.nw_bound,
            Coordinate(_nw[0], _se[1]),
            self.se_bound,
            Coordinate(_se[0], _nw[1]),
            self.nw_bound,
        ]

    def contains_coordinate(self, coord: Coordinate) -> bool:
        if not self.se_bound.latitude <= coord.latitude <= self.nw_bound.latitude:
            return False

        if self.nw_bound.longitude <= self.se_bound.longitude:
            return self.nw_bound.longitude <= coord.longitude <= self.se_bound.longitude

        # Crosses the antimeridian
        return (
            coord.longitude >= self.nw_bound.longitude or
            coord.longitude <= self.se_bound.longitude
        )


class GeoCircle:

    """
    A circle shape, as expressed by:
        * A Coordinate center
        * A radius

    Args:
        center: (Coordinate)
            The circle centroid

        radius: (float)
            The length of the circle's radius, in meters
    """

    def __init__(self, center: Coordinate, radius: float):
        if radius < 0:
            raise ValueError(f'Radius must not be negative, got {radius}')

        self.center = center
        self.radius = float(radius)

    def __contains__(self, coord: Coordinate) -> bool:
        return self.contains_coordinate(coord)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeoCircle):
            return False

        return (
            self.center == other.center
            and self.radius == other.radius
        )

    def __hash__(self) -> int:
        return hash((self.centroid, self.radius))

    def __repr__(self) -> str:
        return f'<GeoCircle at {self.centroid.to_float()}; radius {self.radius} meters>'

    @property
    def area(self) -> float:
        """The area of the circle, in square meters"""
        from geolines.calc import area
        return area(self)

    @property
    def centroid(self) -> Coordinate:
        return self.center

    @property
    def length(self) -> float:
        """The circumference of the circle, in meters"""
        from geolines.calc import length
        return length(self)

    def contains_coordinate(self, coord: Coordinate) -> bool:
        from geolines.sphere import SphereCalculator
        return SphereCalculator().distance(coord, self.center) <= self.radius
