"""
Spherical approximations of geodetic quantities.

Used directly where a mean-radius sphere is accurate enough, and by the ellipsoidal
calculator for the length and area of closed shapes.
"""

__all__ = ['SphereCalculator']

import math
from typing import List, Sequence, Tuple, Union

import numpy as np

from geolines._const import EARTH_RADIUS_METERS
from geolines.coordinates import Coordinate
from geolines.shapes import GeoBox, GeoCircle


def _box_extent(box: GeoBox):
    """Returns the (longitude span, north latitude, south latitude) of a box, in radians"""
    lon_span = math.radians((box.se_bound.longitude - box.nw_bound.longitude) % 360)
    return (
        lon_span,
        math.radians(box.nw_bound.latitude),
        math.radians(box.se_bound.latitude),
    )


class SphereCalculator:

    """
    Geodetic calculations on a sphere.

    Args:
        radius: (float)
            The radius of the sphere, in meters. Defaults to the mean earth radius.
    """

    def __init__(self, radius: float = EARTH_RADIUS_METERS):
        if not radius > 0:
            raise ValueError(f'Sphere radius must be positive, not {radius}')

        self.radius = float(radius)

    def __repr__(self):
        return f'<SphereCalculator radius {self.radius} meters>'

    def distance(self, coord1: Coordinate, coord2: Coordinate) -> float:
        """Calculate distance using the Haversine formula (spherical earth)."""
        lon1, lat1 = math.radians(coord1.longitude), math.radians(coord1.latitude)
        lon2, lat2 = math.radians(coord2.longitude), math.radians(coord2.latitude)

        dlon = lon2 - lon1
        dlat = lat2 - lat1

        a = (math.sin(dlat / 2) ** 2 +
             math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

        return self.radius * c

    def destination(
            self,
            start: Coordinate,
            bearing_degrees: float,
            distance: float,
    ) -> Coordinate:
        """Calculate destination point using spherical trigonometry."""
        lon1 = math.radians(start.longitude)
        lat1 = math.radians(start.latitude)
        bearing_rad = math.radians(bearing_degrees)

        ang_dist = distance / self.radius

        lat2 = math.asin(math.sin(lat1) * math.cos(ang_dist) +
                         math.cos(lat1) * math.sin(ang_dist) * math.cos(bearing_rad))

        lon2 = lon1 + math.atan2(math.sin(bearing_rad) * math.sin(ang_dist) * math.cos(lat1),
                                 math.cos(ang_dist) - math.sin(lat1) * math.sin(lat2))

        return Coordinate(math.degrees(lon2), math.degrees(lat2))

    def bearing(self, start: Coordinate, end: Coordinate) -> float:
        """Calculate initial bearing using spherical trigonometry."""
        lon1, lat1 = math.radians(start.longitude), math.radians(start.latitude)
        lon2, lat2 = math.radians(end.longitude), math.radians(end.latitude)

        dlon = lon2 - lon1

        y = math.sin(dlon) * math.cos(lat2)
        x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

        initial_bearing = math.atan2(y, x)
        return (math.degrees(initial_bearing) + 360) % 360

    def length(
        self,
        shape: Union[GeoBox, GeoCircle, List[Coordinate], Tuple[Coordinate, ...]]
    ) -> float:
        """
        The length of a shape: the circumference of a circle, the perimeter of a box,
        or the summed great-circle distances along a sequence of coordinates.

        Args:
            shape:
                A GeoCircle, a GeoBox, or a list/tuple of Coordinates

        Returns:
            float, in meters
        """
        if isinstance(shape, GeoCircle):
            return 2 * math.pi * self.radius * math.sin(shape.radius / self.radius)

        if isinstance(shape, GeoBox):
            lon_span, north, south = _box_extent(shape)
            return self.radius * (
                2 * (north - south) + lon_span * (math.cos(north) + math.cos(south))
            )

        if isinstance(shape, (list, tuple)):
            return sum(
                self.distance(start, end) for start, end in zip(shape, shape[1:])
            )

        raise TypeError(f'Cannot calculate the length of {type(shape).__name__}')

    def area(
        self,
        shape: Union[GeoBox, GeoCircle, List[Coordinate], Tuple[Coordinate, ...]]
    ) -> float:
        """
        The area enclosed by a shape. A sequence of coordinates is treated as a linear
        ring (closed automatically if the last coordinate does not repeat the first)
        and must not enclose a pole.

        Args:
            shape:
                A GeoCircle, a GeoBox, or a list/tuple of Coordinates

        Returns:
            float, in square meters
        """
        if isinstance(shape, GeoCircle):
            return 2 * math.pi * self.radius ** 2 * (1 - math.cos(shape.radius / self.radius))

        if isinstance(shape, GeoBox):
            lon_span, north, south = _box_extent(shape)
            return self.radius ** 2 * lon_span * (math.sin(north) - math.sin(south))

        if isinstance(shape, (list, tuple)):
            return self._ring_area(shape)

        raise TypeError(f'Cannot calculate the area of {type(shape).__name__}')

    def _ring_area(self, coords: Sequence[Coordinate]) -> float:
        if len(set((x.longitude, x.latitude) for x in coords)) < 3:
            return 0.

        ring = list(coords)
        if ring[0] != ring[-1]:
            ring.append(ring[0])

        lons = np.radians([x.longitude for x in ring])
        lats = np.radians([x.latitude for x in ring])

        # Edges crossing the antimeridian take the short way round
        dlon = np.mod(np.diff(lons) + np.pi, 2 * np.pi) - np.pi
        excess = np.sum(dlon * (2 + np.sin(lats[:-1]) + np.sin(lats[1:])))

        return float(abs(excess) * self.radius ** 2 / 2)
