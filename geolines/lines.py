"""
Result type for geodetic line calculations
"""

__all__ = ['GeodeticLine']

from geolines.conversion import convert_from_meters
from geolines.coordinates import Coordinate


class GeodeticLine:

    """
    A path between two coordinates, as produced by a geodetic calculator. Either an
    orthodromic line (geodesic) or a loxodromic line (rhumb line).

    Args:
        start: (Coordinate)
            The starting coordinate

        end: (Coordinate)
            The ending coordinate

        distance: (float)
            The length of the path, in the unit of the ellipsoid's equatorial axis

        initial_bearing: (float)
            The bearing at the start of the path, in degrees clockwise from north

        final_bearing: (float)
            The bearing from the end of the path back toward its start, in degrees
            clockwise from north
    """

    def __init__(
        self,
        start: Coordinate,
        end: Coordinate,
        distance: float,
        initial_bearing: float,
        final_bearing: float,
    ):
        self._start = start
        self._end = end
        self._distance = float(distance)
        self._initial_bearing = float(initial_bearing)
        self._final_bearing = float(final_bearing)

    def __eq__(self, other):
        if not isinstance(other, GeodeticLine):
            return False

        return (
            self.start == other.start and
            self.end == other.end and
            self.distance == other.distance and
            self.initial_bearing == other.initial_bearing and
            self.final_bearing == other.final_bearing
        )

    def __hash__(self):
        return hash((
            self.start, self.end, self.distance, self.initial_bearing, self.final_bearing
        ))

    def __repr__(self):
        return (
            f'<GeodeticLine {self.start.to_float()} -> {self.end.to_float()}; '
            f'{round(self.distance, 3)} meters, bearing '
            f'{round(self.initial_bearing, 6)} / {round(self.final_bearing, 6)}>'
        )

    @property
    def start(self) -> Coordinate:
        return self._start

    @property
    def end(self) -> Coordinate:
        return self._end

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def initial_bearing(self) -> float:
        return self._initial_bearing

    @property
    def final_bearing(self) -> float:
        return self._final_bearing

    def distance_in(self, unit: str) -> float:
        """
        The length of the line in another unit. Assumes the line was calculated on an
        ellipsoid measured in meters, which holds for every preset.

        Args:
            unit:
                One of 'm', 'km', 'mi', 'ft', 'nmi', 'yd'

        Returns:
            float
        """
        return convert_from_meters(self.distance, unit)
