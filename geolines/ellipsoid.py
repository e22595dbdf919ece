"""
Ellipsoidal earth models
"""

__all__ = [
    'AIRY_1830', 'CLARKE_1866', 'DEFAULT_ELLIPSOID', 'Ellipsoid', 'GRS80',
    'INTERNATIONAL_1924', 'WGS72', 'WGS84',
]

import math

from geolines._const import WGS84_A, WGS84_F


class Ellipsoid:

    """
    An oblate spheroid approximating the figure of the earth, as expressed by:
        * An equatorial (semi-major) axis
        * A flattening, (a - b) / a

    Ellipsoids are immutable; the eccentricity is derived once at construction.

    Args:
        name: (str)
            A label for the model, e.g. 'WGS84'

        equatorial_axis: (float)
            The semi-major axis. Distances calculated against this ellipsoid are
            expressed in the same unit (meters, for all presets)

        flattening: (float)
            The flattening of the ellipsoid. Must be greater than 0 and less than 1.
    """

    def __init__(self, name: str, equatorial_axis: float, flattening: float):
        equatorial_axis, flattening = float(equatorial_axis), float(flattening)

        # Negated comparisons also reject NaN
        if not equatorial_axis > 0:
            raise ValueError(
                f'Equatorial axis must be a positive length, not {equatorial_axis}'
            )

        if not 0 < flattening < 1:
            raise ValueError(
                f'Flattening must be greater than 0 and less than 1, not {flattening}'
            )

        self._name = name
        self._equatorial_axis = equatorial_axis
        self._flattening = flattening
        self._eccentricity = math.sqrt(flattening * (2 - flattening))

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (
            self.equatorial_axis == other.equatorial_axis and
            self.flattening == other.flattening
        )

    def __hash__(self):
        return hash((self.equatorial_axis, self.flattening))

    def __repr__(self):
        return (
            f'<Ellipsoid {self.name}: a={self.equatorial_axis}, '
            f'1/f={round(self.inverse_flattening, 9)}>'
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def equatorial_axis(self) -> float:
        """The semi-major axis (a)"""
        return self._equatorial_axis

    @property
    def flattening(self) -> float:
        return self._flattening

    @property
    def eccentricity(self) -> float:
        """The first eccentricity, sqrt(f * (2 - f))"""
        return self._eccentricity

    @property
    def inverse_flattening(self) -> float:
        return 1 / self._flattening

    @property
    def polar_axis(self) -> float:
        """The semi-minor axis (b)"""
        return self._equatorial_axis * (1 - self._flattening)

    @property
    def mean_radius(self) -> float:
        """The IUGG mean radius, (2a + b) / 3"""
        return (2 * self._equatorial_axis + self.polar_axis) / 3

    @classmethod
    def from_name(cls, name: str) -> 'Ellipsoid':
        """
        Looks up one of the named ellipsoid presets (case-insensitive).

        Args:
            name:
                The preset name, e.g. 'WGS84' or 'international_1924'

        Returns:
            Ellipsoid
        """
        key = name.upper()
        if key not in _PRESETS:
            raise ValueError(f"Unknown ellipsoid '{name}'. Options: {list(_PRESETS.keys())}")

        return _PRESETS[key]


WGS84 = Ellipsoid('WGS84', WGS84_A, WGS84_F)
GRS80 = Ellipsoid('GRS80', 6378137.0, 1 / 298.257222101)
WGS72 = Ellipsoid('WGS72', 6378135.0, 1 / 298.26)
INTERNATIONAL_1924 = Ellipsoid('International 1924', 6378388.0, 1 / 297.0)
CLARKE_1866 = Ellipsoid('Clarke 1866', 6378206.4, 1 / 294.9786982)
AIRY_1830 = Ellipsoid('Airy 1830', 6377563.396, 1 / 299.3249646)

DEFAULT_ELLIPSOID = WGS84

_PRESETS = {
    'WGS84': WGS84,
    'GRS80': GRS80,
    'WGS72': WGS72,
    'INTERNATIONAL_1924': INTERNATIONAL_1924,
    'CLARKE_1866': CLARKE_1866,
    'AIRY_1830': AIRY_1830,
}
