import math

import pytest
from pytest import approx

from geolines.ellipsoid import *


def test_ellipsoid_init():
    ellipsoid = Ellipsoid('Test', '6378137', 0.5)
    assert ellipsoid.name == 'Test'
    assert ellipsoid.equatorial_axis == 6_378_137.
    assert ellipsoid.flattening == 0.5
    assert ellipsoid.inverse_flattening == 2.
    assert ellipsoid.polar_axis == 6_378_137. / 2

    for axis, flattening in (
        (0., 0.5),
        (-1., 0.5),
        (math.nan, 0.5),
        (1., 0.),
        (1., 1.),
        (1., -0.1),
        (1., math.nan),
    ):
        with pytest.raises(ValueError):
            Ellipsoid('Bad', axis, flattening)


def test_ellipsoid_immutable():
    with pytest.raises(AttributeError):
        WGS84.flattening = 0.1

    with pytest.raises(AttributeError):
        WGS84.equatorial_axis = 1.


def test_ellipsoid_derived_values():
    assert WGS84.eccentricity == approx(0.0818191908426215, rel=1e-12)
    assert WGS84.inverse_flattening == approx(298.257223563)
    assert WGS84.polar_axis == approx(6_356_752.314245, abs=1e-6)
    assert WGS84.mean_radius == approx(6_371_008.7714, abs=1e-3)

    assert GRS80.equatorial_axis == WGS84.equatorial_axis
    assert GRS80.polar_axis == approx(6_356_752.314140, abs=1e-6)


def test_ellipsoid_eq():
    assert Ellipsoid('Copy', 6_378_137., 1 / 298.257223563) == WGS84
    assert WGS84 != GRS80
    assert WGS84 != 'WGS84'


def test_ellipsoid_hash():
    ellipsoids = [
        WGS84,
        Ellipsoid('Copy', 6_378_137., 1 / 298.257223563),
        GRS80,
    ]
    assert len(set(ellipsoids)) == 2


def test_ellipsoid_repr():
    assert repr(WGS84) == '<Ellipsoid WGS84: a=6378137.0, 1/f=298.257223563>'


def test_ellipsoid_from_name():
    assert Ellipsoid.from_name('WGS84') is WGS84
    assert Ellipsoid.from_name('wgs84') is WGS84
    assert Ellipsoid.from_name('grs80') is GRS80
    assert Ellipsoid.from_name('International_1924') is INTERNATIONAL_1924
    assert Ellipsoid.from_name('AIRY_1830') is AIRY_1830

    with pytest.raises(ValueError):
        Ellipsoid.from_name('Everest')


def test_default_ellipsoid():
    assert DEFAULT_ELLIPSOID is WGS84
