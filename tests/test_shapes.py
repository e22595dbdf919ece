import pytest

from geolines.coordinates import Coordinate
from geolines.ellipsoid import WGS84
from geolines.shapes import GeoBox, GeoCircle
from geolines.sphere import SphereCalculator

BOX = GeoBox(Coordinate(0., 1.), Coordinate(1., 0.))
CIRCLE = GeoCircle(Coordinate(0., 0.), 1000.)
SPHERE = SphereCalculator(WGS84.mean_radius)


def test_geobox_init():
    assert BOX.nw_bound == Coordinate(0., 1.)
    assert BOX.se_bound == Coordinate(1., 0.)

    # Degenerate boxes are allowed
    GeoBox(Coordinate(0., 0.), Coordinate(0., 0.))

    with pytest.raises(ValueError):
        GeoBox(Coordinate(0., 0.), Coordinate(1., 1.))


def test_geobox_eq():
    assert BOX == GeoBox(Coordinate(0., 1.), Coordinate(1., 0.))
    assert BOX != GeoBox(Coordinate(0., 1.), Coordinate(2., 0.))
    assert BOX != CIRCLE


def test_geobox_hash():
    assert len({BOX, GeoBox(Coordinate(0., 1.), Coordinate(1., 0.))}) == 1


def test_geobox_repr():
    assert repr(BOX) == '<GeoBox (0.0, 1.0) - (1.0, 0.0)>'


def test_geobox_contains():
    assert Coordinate(0.5, 0.5) in BOX
    assert Coordinate(0., 0.) in BOX
    assert Coordinate(1.5, 0.5) not in BOX
    assert not BOX.contains_coordinate(Coordinate(0.5, -0.5))

    # Antimeridian test
    box = GeoBox(Coordinate(179., 1.), Coordinate(-179., 0.))
    assert Coordinate(179.5, 0.5) in box
    assert Coordinate(-179.5, 0.5) in box
    assert Coordinate(180., 0.5) in box
    assert Coordinate(0., 0.5) not in box
    assert Coordinate(-179.5, 1.5) not in box


def test_geobox_bounds():
    assert BOX.bounds == (0., 0., 1., 1.)


def test_geobox_centroid():
    assert BOX.centroid == Coordinate(0.5, 0.5)


def test_geobox_bounding_coords():
    assert BOX.bounding_coords() == [
        Coordinate(0., 1.),
        Coordinate(0., 0.),
        Coordinate(1., 0.),
        Coordinate(1., 1.),
        Coordinate(0., 1.),
    ]


def test_geobox_area_and_length():
    assert BOX.area == SPHERE.area(BOX)
    assert BOX.length == SPHERE.length(BOX)


def test_geocircle_init():
    assert CIRCLE.center == Coordinate(0., 0.)
    assert CIRCLE.radius == 1000.
    assert GeoCircle(Coordinate(0., 0.), 0).radius == 0.

    with pytest.raises(ValueError):
        GeoCircle(Coordinate(0., 0.), -1.)


def test_geocircle_eq():
    assert CIRCLE == GeoCircle(Coordinate(0., 0.), 1000)
    assert CIRCLE != GeoCircle(Coordinate(0., 0.), 999)
    assert CIRCLE != BOX


def test_geocircle_hash():
    assert len({CIRCLE, GeoCircle(Coordinate(0., 0.), 1000.)}) == 1


def test_geocircle_repr():
    assert repr(CIRCLE) == '<GeoCircle at (0.0, 0.0); radius 1000.0 meters>'


def test_geocircle_contains():
    assert Coordinate(0., 0.) in CIRCLE
    assert Coordinate(0.001, 0.001) in CIRCLE
    assert Coordinate(0.01, 0.) not in CIRCLE


def test_geocircle_centroid():
    assert CIRCLE.centroid == Coordinate(0., 0.)


def test_geocircle_area_and_length():
    assert CIRCLE.area == SPHERE.area(CIRCLE)
    assert CIRCLE.length == SPHERE.length(CIRCLE)
