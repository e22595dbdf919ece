import pytest
from geolines.conversion import *


def test_convert_to_meters():
    # Test cases: (distance, unit, expected_result)
    test_data = [
        (1.0, 'm', 1.0),
        (1.0, 'km', 1000.0),
        (1.0, 'mi', 1609.344),
        (1.0, 'ft', 0.3048),
        (1.0, 'nmi', 1852.0),
        (1.0, 'yd', 0.9144),
    ]

    for distance, unit, expected_result in test_data:
        result = convert_to_meters(distance, unit)
        assert result == pytest.approx(expected_result, rel=1e-6)

    with pytest.raises(ValueError):
        convert_to_meters(1.0, 'league')


def test_convert_from_meters():
    # Test cases: (distance, unit, expected_result)
    test_data = [
        (1.0, 'm', 1.0),
        (1000.0, 'km', 1.0),
        (1609.344, 'mi', 1.0),
        (0.3048, 'ft', 1.0),
        (1852.0, 'NMI', 1.0),
        (0.9144, 'yd', 1.0),
    ]

    for distance, unit, expected_result in test_data:
        result = convert_from_meters(distance, unit)
        assert result == pytest.approx(expected_result, rel=1e-6)

    with pytest.raises(ValueError):
        convert_from_meters(1.0, 'league')
