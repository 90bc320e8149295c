import pytest

from orthodromic import DistanceUnit
from orthodromic.units import convert_from_km


def test_distance_unit_parse():
    assert DistanceUnit.parse(DistanceUnit.METRIC) is DistanceUnit.METRIC
    for alias in ('km', 'KM', 'metric', 'si'):
        assert DistanceUnit.parse(alias) is DistanceUnit.METRIC

    for alias in ('mi', 'Imperial', 'us'):
        assert DistanceUnit.parse(alias) is DistanceUnit.IMPERIAL

    with pytest.raises(ValueError):
        DistanceUnit.parse('furlong')

    with pytest.raises(ValueError):
        DistanceUnit.parse(1)


def test_distance_unit_factor():
    assert DistanceUnit.METRIC.factor == 1.
    assert DistanceUnit.IMPERIAL.factor == 1. / 1.609344


def test_convert_from_km():
    assert convert_from_km(10., DistanceUnit.METRIC) == 10.
    assert convert_from_km(1.609344, 'mi') == pytest.approx(1., rel=1e-15)
    assert convert_from_km(0., DistanceUnit.IMPERIAL) == 0.
