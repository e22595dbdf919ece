"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

from typing import Optional, Tuple, Union

from geolines.utils.functions import round_half_up


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lon/lat pair).

    Latitudes that run past a pole are folded back into [-90, 90] and longitudes are
    wrapped into (-180, 180]. An elevation (z) and measure (m) may be attached; they
    travel with the coordinate but play no part in geodetic calculations.
    """

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
        z: Optional[float] = None,
        m: Optional[float] = None,
        _bounded: bool = True,
    ):
        lon, lat = float(longitude), float(latitude)
        if _bounded:
            while not -90 <= lat <= 90:
                # Crosses one of the poles
                lat = 90 - (lat - 90) if lat > 90 else -90 - (lat + 90)
                lon = lon + 180 if lon < 0 else lon - 180

            while not -180 <= lon <= 180:
                # Crosses the antimeridian
                lon = lon - 360 if lon > 180 else lon + 360

        # Longitudes are bounded to (-180, 180]
        if lon == -180:
            lon = 180.

        self.longitude = lon
        self.latitude = lat
        self.z = z
        self.m = m

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.z == other.z and
            self.m == other.m
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude, self.z, self.m))

    def __repr__(self):
        parts = filter(lambda x: x is not None, (self.longitude, self.latitude, self.z, self.m))
        return f'<Coordinate({", ".join(map(str, parts))})>'

    @classmethod
    def from_dms(cls, lon: Tuple[int, int, float, str], lat: Tuple[int, int, float, str]):
        """
        Creates a Coordinate from a Degree Minutes Seconds (lon, lat) pair.

        The quadrant value should consist of either 'E'/'W' (longitude) or 'N'/'S' (latitude)

        Args:
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            Coordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return Coordinate(convert(lon), convert(lat))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert a value (latitude or longitude) in decimal degrees to a tuple of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted value as (degrees, minutes, seconds, hemisphere)
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
        )

    def to_float(self, reverse: bool = False) -> Tuple:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).
        If the Coordinate contains Z and/or M datapoints, the tuple will be extended
        to include both (in that order)

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of up to length 4, consisting of (longitude, latitude, altitude, M)
        """
        out = [self.longitude, self.latitude]
        if reverse:
            out = out[::-1]

        if self.z is not None:
            out.append(self.z)
        if self.m is not None:
            out.append(self.m)
        return tuple(out)

    def to_str(self, reverse: bool = False) -> Tuple:
        """
        Converts the coordinate to a tuple of strings (longitude, latitude).
        If the Coordinate contains Z and/or M datapoints, the tuple will be extended
        to include both (in that order)

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of up to length 4, consisting of (longitude, latitude, altitude, M)
        """
        return tuple(map(str, self.to_float(reverse)))
