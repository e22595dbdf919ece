import math

from pytest import approx

from geolines.utils.functions import *


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(1.65, 1) == 1.7

    assert round_half_up(-1.59, 1) == -1.6
    assert round_half_up(-1.51, 1) == -1.5
    assert round_half_up(-1.55, 1) == -1.5
    assert round_half_up(-1.65, 1) == -1.6


def test_wrap_longitude_degrees():
    assert wrap_longitude_degrees(0.) == 0.
    assert wrap_longitude_degrees(90.) == 90.
    assert wrap_longitude_degrees(180.) == 180.
    assert wrap_longitude_degrees(-180.) == -180.
    assert wrap_longitude_degrees(359.) == -1.
    assert wrap_longitude_degrees(-359.) == 1.
    assert wrap_longitude_degrees(181.) == -179.


def test_wrap_longitude_radians():
    assert wrap_longitude_radians(0.) == 0.
    assert wrap_longitude_radians(math.pi) == approx(-math.pi)
    assert wrap_longitude_radians(3 * math.pi / 2) == approx(-math.pi / 2)
    assert wrap_longitude_radians(-3 * math.pi / 2) == approx(math.pi / 2)
