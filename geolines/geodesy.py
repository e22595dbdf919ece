"""
Geodetic calculations on an ellipsoidal earth model.

Orthodromic lines (geodesics) are solved with Vincenty's inverse and direct formulae,
in the formulation of the NGS INVERSE/FORWARD programs (Helmert's expansion of the
distance series). Loxodromic lines (rhumb lines) are solved through meridional parts
and the meridional arc length.

References:
    T. Vincenty, "Direct and inverse solutions of geodesics on the ellipsoid with
    application of nested equations", Survey Review XXIII (176), 1975
"""

__all__ = ['ConvergenceError', 'SpheroidCalculator']

import math
import sys
from typing import List, NamedTuple, Optional, Tuple, Union

from geolines._const import (
    CONVERGENCE_TOLERANCE, MAX_DIRECT_ITERATIONS, MAX_INVERSE_ITERATIONS,
    NAUTICAL_MILE, NON_CONVERGENCE_TOLERANCE, PARALLEL_SAILING_THRESHOLD,
    POLE_TOLERANCE
)
from geolines.coordinates import Coordinate
from geolines.ellipsoid import DEFAULT_ELLIPSOID, Ellipsoid
from geolines.lines import GeodeticLine
from geolines.shapes import GeoBox, GeoCircle
from geolines.sphere import SphereCalculator
from geolines.utils.functions import wrap_longitude_degrees, wrap_longitude_radians
from geolines.utils.mixins import LoggingMixin

_MACHINE_EPSILON = sys.float_info.epsilon


class ConvergenceError(ArithmeticError):
    """
    The inverse geodesic problem could not be solved for a pair of coordinates.

    Vincenty's iteration does not converge for (nearly) antipodal points off the
    equator. The failure is deterministic, so retrying the same pair is pointless.
    """


class _InverseState(NamedTuple):
    """Quantities derived from one estimate of the auxiliary longitude difference"""
    sinLambda: float
    cosLambda: float
    sinSigma: float
    cosSigma: float
    sigma: float
    sinAlpha: float
    cosSqAlpha: float
    cos2SigmaM: float


class _DirectState(NamedTuple):
    """Quantities derived from one estimate of the angular distance"""
    sinSigma: float
    cosSigma: float
    cos2SigmaM: float


def _wrap_bearing(degrees: float) -> float:
    """Wraps a bearing in degrees into [0, 360)"""
    degrees %= 360
    # Tiny negative bearings round up to a full turn
    return 0. if degrees == 360 else degrees


def _compass_degrees(azimuth: float) -> float:
    """Converts an azimuth in radians to degrees in [0, 360)"""
    return _wrap_bearing(math.degrees(azimuth))


def _coincident(coord1: Coordinate, coord2: Coordinate) -> bool:
    return (
        abs(coord1.latitude - coord2.latitude) < _MACHINE_EPSILON and
        abs(coord1.longitude - coord2.longitude) < _MACHINE_EPSILON
    )


def _distance_coefficients(cosSqAlpha: float, r: float) -> Tuple[float, float]:
    """Vincenty's A and B coefficients, via Helmert's expansion parameter k1"""
    uSq = cosSqAlpha * (1 / (r * r) - 1)
    root = math.sqrt(1 + uSq)
    k1 = (root - 1) / (root + 1)
    A = (1 + k1 * k1 / 4) / (1 - k1)
    B = k1 * (1 - 3 * k1 * k1 / 8)
    return A, B


def _delta_sigma(B: float, sinSigma: float, cosSigma: float, cos2SigmaM: float) -> float:
    # eq. 6
    return B * sinSigma * (
        cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
        )
    )


def _lambda_offset(
    f: float,
    sinAlpha: float,
    cosSqAlpha: float,
    sigma: float,
    sinSigma: float,
    cosSigma: float,
    cos2SigmaM: float,
) -> float:
    """Difference between the auxiliary-sphere and ellipsoidal longitude differences"""
    # eq. 10
    C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
    # eq. 11
    return (1 - C) * f * sinAlpha * (
        sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
    )


def _inverse_state(
    Lambda: float,
    sinU1: float,
    cosU1: float,
    sinU2: float,
    cosU2: float,
) -> Optional[_InverseState]:
    sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

    # eq. 14
    sinSigma = math.hypot(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda)
    if sinSigma == 0:
        # Coincident on the auxiliary sphere
        return None

    # eq. 15, 16
    cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
    sigma = math.atan2(sinSigma, cosSigma)

    # eq. 17
    sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
    cosSqAlpha = 1 - sinAlpha ** 2

    # eq. 18; both points on the equator when cos^2(alpha) vanishes
    cos2SigmaM = 0.
    if cosSqAlpha > 0:
        cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha

    return _InverseState(
        sinLambda, cosLambda, sinSigma, cosSigma, sigma, sinAlpha, cosSqAlpha, cos2SigmaM
    )


def _direct_state(sigma: float, sigma1: float) -> _DirectState:
    return _DirectState(math.sin(sigma), math.cos(sigma), math.cos(2 * sigma1 + sigma))


class SpheroidCalculator(LoggingMixin):

    """
    Geodetic calculations on an ellipsoid.

    Distances are expressed in the unit of the ellipsoid's equatorial axis (meters for
    all presets); bearings are degrees clockwise from north in [0, 360). Lengths of
    circles and boxes, and all areas, are delegated to a sphere of the ellipsoid's
    mean radius.

    Instances hold no mutable state and may be shared freely.

    Args:
        ellipsoid: (Ellipsoid)
            (Default WGS84) The earth model to calculate against
    """

    def __init__(self, ellipsoid: Ellipsoid = DEFAULT_ELLIPSOID):
        super().__init__()
        self._ellipsoid = ellipsoid
        self._sphere = SphereCalculator(ellipsoid.mean_radius)

    def __repr__(self):
        return f'<SpheroidCalculator {self.ellipsoid.name}>'

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def orthodromic_line(self, start: Coordinate, end: Coordinate) -> Optional[GeodeticLine]:
        """
        Solves the inverse geodesic problem: the shortest path over the ellipsoid
        between two coordinates.

        Args:
            start:
                The starting coordinate

            end:
                The ending coordinate

        Returns:
            GeodeticLine, or None if the coordinates coincide

        Raises:
            ConvergenceError: the coordinates are (nearly) antipodal and the iteration
            could not settle on a solution
        """
        solution = self._solve_inverse(start, end)
        if solution is None:
            return None

        distance, initial_bearing, final_bearing = solution
        return GeodeticLine(start, end, distance, initial_bearing, final_bearing)

    def orthodromic_destination(
        self,
        start: Coordinate,
        bearing: float,
        distance: float
    ) -> GeodeticLine:
        """
        Solves the direct geodesic problem: where a geodesic leaving a coordinate at a
        given bearing ends after a given distance.

        Starting at a pole, only north-south courses are meaningful; other bearings
        log a warning on every such call but still produce a result.

        Args:
            start:
                The starting coordinate

            bearing:
                The initial bearing, in degrees clockwise from north

            distance:
                The distance to travel, in the unit of the ellipsoid's axis

        Returns:
            GeodeticLine, whose end is the destination
        """
        if distance < 0:
            raise ValueError(f'Distance must not be negative, got {distance}')

        f = self.ellipsoid.flattening
        r = 1 - f
        lon1, lat1 = self._to_radians(start)
        alpha1 = math.radians(bearing)
        sinAlpha1, cosAlpha1 = math.sin(alpha1), math.cos(alpha1)

        if abs(math.cos(lat1)) < POLE_TOLERANCE and not abs(sinAlpha1) < POLE_TOLERANCE:
            self.logger.warning(
                'Only north-south courses are meaningful when starting at a pole; '
                'the destination longitude from %s at bearing %s is arbitrary.',
                start, bearing
            )

        tanU1 = r * math.tan(lat1)
        cosU1 = 1 / math.sqrt(1 + tanU1 ** 2)
        sinU1 = tanU1 * cosU1

        # eq. 1; left at zero for due east/west courses
        sigma1 = 0. if cosAlpha1 == 0 else math.atan2(tanU1, cosAlpha1)

        # eq. 2
        sinAlpha = cosU1 * sinAlpha1
        cosSqAlpha = 1 - sinAlpha ** 2
        A, B = _distance_coefficients(cosSqAlpha, r)

        # eq. 7
        sigma0 = distance / (r * self.ellipsoid.equatorial_axis * A)
        sigma = sigma0
        for _ in range(MAX_DIRECT_ITERATIONS):
            state = _direct_state(sigma, sigma1)
            sigma_prev = sigma
            sigma = sigma0 + _delta_sigma(B, *state)
            if abs(sigma - sigma_prev) <= CONVERGENCE_TOLERANCE:
                break
        else:
            self.logger.warning(
                'Vincenty direct solution did not converge within %s iterations; '
                'using the last estimate',
                MAX_DIRECT_ITERATIONS
            )

        sinSigma, cosSigma, cos2SigmaM = _direct_state(sigma, sigma1)

        # eq. 8
        tmp = sinU1 * sinSigma - cosU1 * cosSigma * cosAlpha1
        lat2 = math.atan2(
            sinU1 * cosSigma + cosU1 * sinSigma * cosAlpha1,
            r * math.sqrt(sinAlpha ** 2 + tmp ** 2)
        )

        # eq. 9, 10, 11
        lambda_ = math.atan2(
            sinSigma * sinAlpha1,
            cosU1 * cosSigma - sinU1 * sinSigma * cosAlpha1
        )
        L = lambda_ - _lambda_offset(
            f, sinAlpha, cosSqAlpha, sigma, sinSigma, cosSigma, cos2SigmaM
        )
        lon2 = wrap_longitude_radians(lon1 + L)

        # eq. 12, reversed to point back at the start
        alpha2 = math.atan2(sinAlpha, -tmp) + math.pi

        return GeodeticLine(
            start,
            Coordinate(math.degrees(lon2), math.degrees(lat2)),
            distance,
            _wrap_bearing(bearing),
            _compass_degrees(alpha2),
        )

    def loxodromic_line(self, start: Coordinate, end: Coordinate) -> Optional[GeodeticLine]:
        """
        Solves the rhumb line between two coordinates: the path of constant bearing.

        Args:
            start:
                The starting coordinate

            end:
                The ending coordinate

        Returns:
            GeodeticLine, or None if the coordinates coincide. The final bearing is the
            reciprocal of the course.
        """
        if _coincident(start, end):
            return None

        lat1, lat2 = start.latitude, end.latitude
        latDeltaRad = math.radians(lat2 - lat1)
        lonDeltaRad = math.radians(wrap_longitude_degrees(end.longitude - start.longitude))
        meridionalDelta = self.meridional_distance(lat2) - self.meridional_distance(lat1)
        course = self._loxodromic_course(lat1, lat2, lonDeltaRad)

        if abs(latDeltaRad) < PARALLEL_SAILING_THRESHOLD:
            # Near parallel sailing; expand meridional distance / meridional parts
            # about the mid latitude to order e^2 * dlat^2
            midLatRad = math.radians((lat1 + lat2) / 2)
            e2 = self.ellipsoid.eccentricity ** 2
            ratio = (
                math.cos(midLatRad) / math.sqrt(1 - e2 * math.sin(midLatRad) ** 2) * (
                    1 + (
                        e2 * math.cos(2 * midLatRad) / 8
                        - (1 + 2 * math.tan(midLatRad) ** 2) / 24
                        - e2 / 12
                    ) * latDeltaRad ** 2
                )
            )
            distance = math.hypot(
                meridionalDelta,
                self.ellipsoid.equatorial_axis * ratio * lonDeltaRad
            )
        else:
            distance = abs(meridionalDelta / math.cos(math.radians(course)))

        return GeodeticLine(start, end, distance, course, (course + 180) % 360)

    def meridional_parts(self, latitude: float) -> float:
        """
        The meridional parts at a latitude: the Mercator ordinate, in nautical miles
        (minutes of equatorial arc). Diverges to +/- infinity at the poles.

        Args:
            latitude:
                The latitude, in degrees

        Returns:
            float
        """
        if abs(latitude) >= 90:
            return math.copysign(math.inf, latitude)

        lat = math.radians(latitude)
        e = self.ellipsoid.eccentricity
        sinLat = math.sin(lat)
        parts = self.ellipsoid.equatorial_axis * (
            math.log(math.tan(0.5 * lat + math.pi / 4)) +
            e / 2 * math.log((1 - e * sinLat) / (1 + e * sinLat))
        )
        return parts / NAUTICAL_MILE

    def meridional_distance(self, latitude: float) -> float:
        """
        The length of the meridian arc from the equator to a latitude.

        Args:
            latitude:
                The latitude, in degrees

        Returns:
            float, negative for southern latitudes
        """
        lat = math.radians(latitude)
        e2 = self.ellipsoid.eccentricity ** 2
        b0 = 1 - e2 / 4 * (1 + e2 / 16 * (3 + 5 * e2 / 4 * (1 + 35 * e2 / 64)))
        b2 = -(3 / 8) * (1 + e2 / 4 * (1 + 15 * e2 / 32 * (1 + 7 * e2 / 12)))
        b4 = 15 / 256 * (1 + 3 * e2 / 4 * (1 + 35 * e2 / 48))
        b6 = -(35 / 3072) * (1 + 5 * e2 / 4)
        b8 = 315 / 131072

        dist = b0 * lat + e2 * (
            b2 * math.sin(2 * lat) + e2 * (
                b4 * math.sin(4 * lat) + e2 * (
                    b6 * math.sin(6 * lat) + e2 * b8 * math.sin(8 * lat)
                )
            )
        )
        return dist * self.ellipsoid.equatorial_axis

    def length(
        self,
        shape: Union[GeoBox, GeoCircle, List[Coordinate], Tuple[Coordinate, ...]]
    ) -> float:
        """
        The length of a shape. For a sequence of coordinates, the sum of the
        orthodromic distances between consecutive coordinates (coincident neighbors
        contribute nothing). Circles and boxes are measured on the sphere.

        Args:
            shape:
                A GeoCircle, a GeoBox, or a list/tuple of Coordinates

        Returns:
            float
        """
        if isinstance(shape, (GeoBox, GeoCircle)):
            return self._sphere.length(shape)

        if not isinstance(shape, (list, tuple)):
            raise TypeError(f'Cannot calculate the length of {type(shape).__name__}')

        distance = 0.
        for start, end in zip(shape, shape[1:]):
            solution = self._solve_inverse(start, end)
            if solution is not None:
                distance += solution[0]

        return distance

    def area(
        self,
        shape: Union[GeoBox, GeoCircle, List[Coordinate], Tuple[Coordinate, ...]]
    ) -> float:
        """
        The area of a shape, approximated on a sphere of the ellipsoid's mean radius.
        See SphereCalculator.area()
        """
        return self._sphere.area(shape)

    def _loxodromic_course(self, lat1: float, lat2: float, lonDeltaRad: float) -> float:
        if lat1 == lat2:
            # Along a parallel; also avoids inf - inf at the poles
            mpDelta = 0.
        else:
            mpDelta = self.meridional_parts(lat2) - self.meridional_parts(lat1)

        if mpDelta == 0 and lonDeltaRad == 0:
            # Latitudes too close to separate in meridional parts; due north or south
            return 0. if lat2 >= lat1 else 180.

        # atan2 resolves the quadrant from the signs of both differences. Meridional
        # parts increase with latitude, so this matches the direction of travel.
        course = math.atan2(
            self.ellipsoid.equatorial_axis / NAUTICAL_MILE * lonDeltaRad,
            mpDelta
        )
        return _compass_degrees(course)

    def _to_radians(self, coord: Coordinate) -> Tuple[float, float]:
        if coord.z is not None:
            self.warn_once(
                'Elevation (z) values are ignored by geodetic calculations. '
                '(this warning will not repeat)'
            )

        return math.radians(coord.longitude), math.radians(coord.latitude)

    def _solve_inverse(
        self,
        start: Coordinate,
        end: Coordinate
    ) -> Optional[Tuple[float, float, float]]:
        """Returns (distance, initial bearing, final bearing), or None if coincident"""
        if _coincident(start, end):
            return None

        f = self.ellipsoid.flattening
        r = 1 - f
        lon1, lat1 = self._to_radians(start)
        lon2, lat2 = self._to_radians(end)

        # Reduced latitudes
        tanU1 = r * math.sin(lat1) / math.cos(lat1)
        tanU2 = r * math.sin(lat2) / math.cos(lat2)
        cosU1 = 1 / math.sqrt(tanU1 ** 2 + 1)
        cosU2 = 1 / math.sqrt(tanU2 ** 2 + 1)
        sinU1 = cosU1 * tanU1
        sinU2 = cosU2 * tanU2

        L = wrap_longitude_radians(lon2 - lon1)
        Lambda = L
        Lambda_prev = -sys.float_info.max  # the estimate before Lambda
        flip_flopping = False
        for _ in range(MAX_INVERSE_ITERATIONS):
            state = _inverse_state(Lambda, sinU1, cosU1, sinU2, cosU2)
            if state is None:
                return None

            Lambda_next = L + _lambda_offset(
                f, state.sinAlpha, state.cosSqAlpha, state.sigma,
                state.sinSigma, state.cosSigma, state.cos2SigmaM
            )
            if flip_flopping or abs(Lambda_next - Lambda) <= CONVERGENCE_TOLERANCE:
                break

            if abs(Lambda_next - Lambda_prev) <= _MACHINE_EPSILON:
                # Alternating between two estimates rather than converging; settle
                # on their mean
                Lambda = (Lambda_next + Lambda) / 2
                flip_flopping = True
                continue

            Lambda_prev, Lambda = Lambda, Lambda_next
        else:
            return self._unconverged_inverse(start, end, lat1, lat2, L)

        A, B = _distance_coefficients(state.cosSqAlpha, r)
        deltaSigma = _delta_sigma(B, state.sinSigma, state.cosSigma, state.cos2SigmaM)

        # eq. 19
        distance = r * self.ellipsoid.equatorial_axis * A * (state.sigma - deltaSigma)

        # eq. 20; the azimuth at the far end is reversed to point back at the start
        alpha1 = math.atan2(
            cosU2 * state.sinLambda,
            cosU1 * sinU2 - sinU1 * cosU2 * state.cosLambda
        )
        alpha2 = math.atan2(
            cosU1 * state.sinLambda,
            cosU1 * sinU2 * state.cosLambda - sinU1 * cosU2
        ) + math.pi

        return distance, _compass_degrees(alpha1), _compass_degrees(alpha2)

    def _unconverged_inverse(
        self,
        start: Coordinate,
        end: Coordinate,
        lat1: float,
        lat2: float,
        L: float,
    ) -> Optional[Tuple[float, float, float]]:
        if abs(L) <= NON_CONVERGENCE_TOLERANCE and abs(lat1 - lat2) <= NON_CONVERGENCE_TOLERANCE:
            return None

        if abs(lat1) <= NON_CONVERGENCE_TOLERANCE and abs(lat2) <= NON_CONVERGENCE_TOLERANCE:
            # Both on the equator; follow it
            return abs(L) * self.ellipsoid.equatorial_axis, 0., 180.

        raise ConvergenceError(
            f'Vincenty inverse solution failed to converge between {start} and {end}; '
            'the coordinates are likely near-antipodal.'
        )
