import pytest
from pytest import approx

from orthodromic import (
    DistanceUnit, GeoPoint, distance, karney, karney_result, set_geodesic_algorithm,
    vincenty_inverse
)

from tests.functions import default_geodesic_algorithm  # noqa: F401

pytest.importorskip('geographiclib')

JFK = (40.641766, -73.780968)
LHR = (51.470020, -0.454295)


def test_karney_distance():
    # Agrees with Vincenty to well under a millimeter away from antipodes
    assert karney(*JFK, *LHR) == approx(vincenty_inverse(*JFK, *LHR), abs=1e-6)
    assert karney(*JFK, *LHR, DistanceUnit.IMPERIAL) == approx(3451.7577882724, abs=1e-6)
    assert karney(0., 0., 1., 1.) == approx(156.899568291, abs=1e-6)


def test_karney_antipodal():
    # Where Vincenty fails to converge, Karney still produces an answer
    assert vincenty_inverse(0., 0., 0., 179.9999) == -1.
    result = karney_result(0., 0., 0., 179.9999)
    assert result.ok
    assert 19_990. < result.value < 20_004.


def test_karney_coincident():
    assert karney(*JFK, *JFK) == approx(0., abs=1e-12)


@pytest.mark.usefixtures('default_geodesic_algorithm')
def test_karney_dispatch():
    set_geodesic_algorithm('karney')
    assert distance(GeoPoint(*JFK), GeoPoint(*LHR)) == karney(*JFK, *LHR)
