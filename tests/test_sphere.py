import math

import pytest
from pytest import approx

from geolines.coordinates import Coordinate
from geolines.shapes import GeoBox, GeoCircle
from geolines.sphere import SphereCalculator

from tests.functions import assert_coordinates_equal

SPHERE = SphereCalculator()


def test_sphere_calculator_init():
    assert SPHERE.radius == 6_371_000.
    assert SphereCalculator(1).radius == 1.
    assert repr(SphereCalculator(1)) == '<SphereCalculator radius 1.0 meters>'

    with pytest.raises(ValueError):
        SphereCalculator(0.)

    with pytest.raises(ValueError):
        SphereCalculator(-1.)


def test_distance():
    # Sourced from haversine package
    expected = 157.253373
    actual = SPHERE.distance(Coordinate(0.0, 0.0), Coordinate(0.001, 0.001))
    assert expected == approx(actual, abs=1e-6)

    expected = 157_249.381271
    actual = SPHERE.distance(Coordinate(0.0, 0.0), Coordinate(1.0, 1.0))
    assert expected == approx(actual, abs=1e-6)

    # Antimeridian test
    expected = 222389.853289
    actual = SPHERE.distance(Coordinate(179., 0.), Coordinate(-179., 0.))
    assert expected == approx(actual, abs=1e-6)


def test_destination():
    expected = Coordinate(0.7059029, 0.7058494)
    actual = SPHERE.destination(Coordinate(0.0, 0.0), 45., 111_000)
    assert_coordinates_equal(expected, actual)


def test_bearing():
    expected = 45.
    actual = SPHERE.bearing(Coordinate(0.0, 0.0), Coordinate(0.001, 0.001))
    assert actual == approx(expected, abs=1e-6)

    assert SPHERE.bearing(Coordinate(0.0, 0.0), Coordinate(-1.0, 0.0)) == approx(270.)


def test_length():
    circle = GeoCircle(Coordinate(0., 0.), 1000.)
    assert SPHERE.length(circle) == approx(2 * math.pi * 1000., rel=1e-6)

    one_degree = math.radians(1.)
    box = GeoBox(Coordinate(0., 1.), Coordinate(1., 0.))
    expected = SPHERE.radius * (2 * one_degree + one_degree * (math.cos(one_degree) + 1))
    assert SPHERE.length(box) == approx(expected)

    coords = [Coordinate(0., 0.), Coordinate(1., 1.), Coordinate(1., 0.)]
    expected = (
        SPHERE.distance(coords[0], coords[1]) +
        SPHERE.distance(coords[1], coords[2])
    )
    assert SPHERE.length(coords) == approx(expected)
    assert SPHERE.length(tuple(coords)) == approx(expected)
    assert SPHERE.length([]) == 0.

    with pytest.raises(TypeError):
        SPHERE.length(Coordinate(0., 0.))


def test_area():
    circle = GeoCircle(Coordinate(0., 0.), 1000.)
    assert SPHERE.area(circle) == approx(math.pi * 1000. ** 2, rel=1e-6)

    one_degree = math.radians(1.)
    box = GeoBox(Coordinate(0., 1.), Coordinate(1., 0.))
    expected = SPHERE.radius ** 2 * one_degree * math.sin(one_degree)
    assert SPHERE.area(box) == approx(expected)

    # Antimeridian test
    box = GeoBox(Coordinate(179., 1.), Coordinate(-179., 0.))
    assert SPHERE.area(box) == approx(2 * expected)

    with pytest.raises(TypeError):
        SPHERE.area('not a shape')


def test_area_ring():
    box = GeoBox(Coordinate(0., 1.), Coordinate(1., 0.))
    ring = box.bounding_coords()
    assert SPHERE.area(ring) == approx(SPHERE.area(box))

    # Rings close automatically, in either winding
    assert SPHERE.area(ring[:-1]) == approx(SPHERE.area(box))
    assert SPHERE.area(ring[::-1]) == approx(SPHERE.area(box))

    # Antimeridian test
    box = GeoBox(Coordinate(179., 1.), Coordinate(-179., 0.))
    assert SPHERE.area(box.bounding_coords()) == approx(SPHERE.area(box))

    # Degenerate rings
    assert SPHERE.area([]) == 0.
    assert SPHERE.area([Coordinate(0., 0.), Coordinate(1., 1.), Coordinate(0., 0.)]) == 0.
