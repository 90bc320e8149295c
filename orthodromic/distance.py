# orthodromic/distance.py
"""
Great-circle distance calculations.

Every algorithm is exposed twice:
    - <name>_result(...) returns a DistanceResult holding the distance or the error
    - <name>(...) returns the distance as a float, or -1.0 if the computation failed

Supports switching the algorithm used by distance() between Haversine, Spherical
Law of Cosines (sphere), Vincenty and Karney (ellipsoid).
"""

__all__ = [
    'haversine', 'haversine_result',
    'spherical_law_of_cosines', 'spherical_law_of_cosines_result',
    'vincenty_inverse', 'vincenty_inverse_result',
    'karney', 'karney_result',
    'distance', 'get_geodesic_algorithm', 'set_geodesic_algorithm',
]

import math
from typing import Callable, Literal, Union

from orthodromic._const import (
    MEAN_EARTH_RADIUS_KM, VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE,
    WGS84_A, WGS84_B, WGS84_F
)
from orthodromic.coordinates import GeoPoint
from orthodromic.exceptions import ConvergenceError, DomainFault, GeodesyError
from orthodromic.result import DistanceResult
from orthodromic.units import DistanceUnit, convert_from_km
from orthodromic.utils.logging import LOGGER, log_suppressed

UnitLike = Union[DistanceUnit, str]


# -------------------------------------------------------------------------
# Shared evaluation
# -------------------------------------------------------------------------

def _evaluate(
    func: Callable[..., float],
    lat1: float, lon1: float, lat2: float, lon2: float,
    unit: UnitLike,
) -> DistanceResult:
    """
    Runs one of the raw algorithms below, converting any numerical failure into
    a failed DistanceResult.
    """
    unit = DistanceUnit.parse(unit)
    if not all(math.isfinite(x) for x in (lat1, lon1, lat2, lon2)):
        return DistanceResult.failure(
            DomainFault(f'Non-finite coordinate in ({lat1}, {lon1}), ({lat2}, {lon2})')
        )

    try:
        dist = func(lat1, lon1, lat2, lon2, unit)
    except GeodesyError as e:
        return DistanceResult.failure(e)
    except (ValueError, ArithmeticError) as e:
        return DistanceResult.failure(DomainFault(f'{func.__name__}: {e}'))

    return DistanceResult.success(dist)


def _to_sentinel(result: DistanceResult, func_name: str) -> float:
    if not result.ok:
        log_suppressed(func_name, result.error)
    return result.to_sentinel()


# -------------------------------------------------------------------------
# Haversine Implementation (Spherical)
# -------------------------------------------------------------------------

def _haversine(lat1, lon1, lat2, lon2, unit: DistanceUnit) -> float:
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)

    a = math.sin((phi2 - phi1) / 2)
    a *= a

    # Longitude difference is halved in degrees, before conversion to radians
    b = math.sin(math.radians((lon2 - lon1) / 2))
    b *= b * math.cos(phi1) * math.cos(phi2)

    # Rounding can push a + b a hair above 1 for antipodal points
    central_angle = 2 * math.asin(math.sqrt(min(a + b, 1.0)))

    return convert_from_km(central_angle * MEAN_EARTH_RADIUS_KM, unit)


def haversine_result(
    lat1: float, lon1: float, lat2: float, lon2: float,
    unit: UnitLike = DistanceUnit.METRIC,
) -> DistanceResult:
    """
    Calculate great-circle distance using the Haversine formula (spherical earth,
    mean radius 6371.009 km). Numerically stable for all distances, including
    coincident and antipodal points.

    Args:
        lat1, lon1: The first point, in decimal degrees
        lat2, lon2: The second point, in decimal degrees
        unit: DistanceUnit.METRIC (km, default) or DistanceUnit.IMPERIAL (miles)

    Returns:
        DistanceResult
    """
    return _evaluate(_haversine, lat1, lon1, lat2, lon2, unit)


def haversine(
    lat1: float, lon1: float, lat2: float, lon2: float,
    unit: UnitLike = DistanceUnit.METRIC,
) -> float:
    """Haversine distance in km or miles; -1.0 if the computation failed."""
    return _to_sentinel(haversine_result(lat1, lon1, lat2, lon2, unit), 'haversine')


# -------------------------------------------------------------------------
# Spherical Law of Cosines Implementation (Spherical)
# -------------------------------------------------------------------------

def _spherical_law_of_cosines(lat1, lon1, lat2, lon2, unit: DistanceUnit) -> float:
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlambda = math.radians(lon1 - lon2)

    cos_angle = (math.sin(phi1) * math.sin(phi2) +
                 math.cos(phi1) * math.cos(phi2) * math.cos(dlambda))
    central_angle = math.acos(max(-1.0, min(cos_angle, 1.0)))

    return convert_from_km(central_angle * MEAN_EARTH_RADIUS_KM, unit)


def spherical_law_of_cosines_result(
    lat1: float, lon1: float, lat2: float, lon2: float,
    unit: UnitLike = DistanceUnit.METRIC,
) -> DistanceResult:
    """
    Calculate great-circle distance using the Spherical Law of Cosines.

    Results match the Haversine formula, but acos is ill-conditioned near 1, so
    precision degrades for very small distances (down to roughly 10 cm of noise
    for coincident points). Prefer haversine() for short hops.
    """
    return _evaluate(_spherical_law_of_cosines, lat1, lon1, lat2, lon2, unit)


def spherical_law_of_cosines(
    lat1: float, lon1: float, lat2: float, lon2: float,
    unit: UnitLike = DistanceUnit.METRIC,
) -> float:
    """Spherical Law of Cosines distance in km or miles; -1.0 if the computation failed."""
    return _to_sentinel(
        spherical_law_of_cosines_result(lat1, lon1, lat2, lon2, unit),
        'spherical_law_of_cosines'
    )


# -------------------------------------------------------------------------
# Vincenty Implementation (Ellipsoidal)
# -------------------------------------------------------------------------

def _vincenty_inverse(lat1, lon1, lat2, lon2, unit: DistanceUnit) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)

    U1 = math.atan((1 - WGS84_F) * math.tan(phi1))
    U2 = math.atan((1 - WGS84_F) * math.tan(phi2))
    L = math.radians(lon2 - lon1)
    Lambda = L

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    for _ in range(VINCENTY_MAX_ITERATIONS):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        term1 = cosU2 * sinLambda
        term2 = cosU1 * sinU2 - sinU1 * cosU2 * cosLambda
        sinSigma = math.sqrt(term1 * term1 + term2 * term2)

        if sinSigma == 0:
            return 0.0  # Coincident points

        # eq. 15, 16
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha * sinAlpha

        # eq. 18
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            cos2SigmaM = 0  # Equatorial line

        # eq. 10
        C = WGS84_F / 16 * cosSqAlpha * (4 + WGS84_F * (4 - 3 * cosSqAlpha))

        Lambda_prev = Lambda

        # eq. 11
        Lambda = L + (1 - C) * WGS84_F * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM * cos2SigmaM))
        )

        if abs(Lambda - Lambda_prev) < VINCENTY_TOLERANCE:
            break
    else:
        LOGGER.debug(
            'Vincenty inverse did not converge for (%s, %s) -> (%s, %s)',
            lat1, lon1, lat2, lon2
        )
        raise ConvergenceError(
            f'Vincenty inverse did not converge within {VINCENTY_MAX_ITERATIONS} iterations',
            iterations=VINCENTY_MAX_ITERATIONS,
        )

    # eq. 3, 4, 6
    uSq = cosSqAlpha * (WGS84_A * WGS84_A - WGS84_B * WGS84_B) / (WGS84_B * WGS84_B)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM * cos2SigmaM) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma * sinSigma) * (-3 + 4 * cos2SigmaM * cos2SigmaM)
    )
    )

    # eq. 19, meters to km
    return convert_from_km(WGS84_B * A * (sigma - deltaSigma) / 1000.0, unit)


def vincenty_inverse_result(
    lat1: float, lon1: float, lat2: float, lon2: float,
    unit: UnitLike = DistanceUnit.METRIC,
) -> DistanceResult:
    """
    Calculate geodesic distance using Vincenty's inverse formula (WGS84 ellipsoid).

    The method iterates on the longitude difference on the auxiliary sphere until
    it changes by less than 1e-12 rad, for at most 100 iterations. Near antipodal
    point pairs it may fail to settle; the result then carries a ConvergenceError
    rather than an approximate distance. Fall back to karney_result() if an answer
    is needed for such pairs.

    Args:
        lat1, lon1: The first point, in decimal degrees
        lat2, lon2: The second point, in decimal degrees
        unit: DistanceUnit.METRIC (km, default) or DistanceUnit.IMPERIAL (miles)

    Returns:
        DistanceResult
    """
    return _evaluate(_vincenty_inverse, lat1, lon1, lat2, lon2, unit)


def vincenty_inverse(
    lat1: float, lon1: float, lat2: float, lon2: float,
    unit: UnitLike = DistanceUnit.METRIC,
) -> float:
    """Vincenty inverse distance in km or miles; -1.0 if the computation failed."""
    return _to_sentinel(
        vincenty_inverse_result(lat1, lon1, lat2, lon2, unit), 'vincenty_inverse'
    )


# -------------------------------------------------------------------------
# Karney Implementation (Ellipsoidal)
# -------------------------------------------------------------------------

def _karney(lat1, lon1, lat2, lon2, unit: DistanceUnit) -> float:
    from geographiclib.geodesic import Geodesic  # pylint: disable=import-outside-toplevel

    # Inverse returns a dict with 's12' (distance in meters), 'azi1', etc.
    res = Geodesic.WGS84.Inverse(lat1, lon1, lat2, lon2)
    return convert_from_km(res['s12'] / 1000.0, unit)


def karney_result(
    lat1: float, lon1: float, lat2: float, lon2: float,
    unit: UnitLike = DistanceUnit.METRIC,
) -> DistanceResult:
    """
    Calculate geodesic distance using Karney's algorithm (via geographiclib).
    Robust against antipodal points and convergence failures.

    Requires the optional geographiclib package (pip install orthodromic[karney]).
    """
    return _evaluate(_karney, lat1, lon1, lat2, lon2, unit)


def karney(
    lat1: float, lon1: float, lat2: float, lon2: float,
    unit: UnitLike = DistanceUnit.METRIC,
) -> float:
    """Karney distance in km or miles; -1.0 if the computation failed."""
    return _to_sentinel(karney_result(lat1, lon1, lat2, lon2, unit), 'karney')


# -------------------------------------------------------------------------
# Dynamic Dispatch & Configuration
# -------------------------------------------------------------------------

_ALGORITHMS = {
    'haversine': haversine,
    'spherical_law_of_cosines': spherical_law_of_cosines,
    'vincenty': vincenty_inverse,
    'karney': karney,
}

# Declares the distance algo in use by distance() (default haversine)
_algorithm = 'haversine'


def distance(
    point1: GeoPoint,
    point2: GeoPoint,
    unit: UnitLike = DistanceUnit.METRIC,
) -> float:
    """
    Distance between two GeoPoints using the algorithm chosen with
    set_geodesic_algorithm(). Returns -1.0 if the computation failed.
    """
    return _ALGORITHMS[_algorithm](
        point1.latitude, point1.longitude,
        point2.latitude, point2.longitude,
        unit
    )


def get_geodesic_algorithm() -> str:
    """Name of the algorithm currently used by distance()"""
    return _algorithm


def set_geodesic_algorithm(
    algorithm: Literal['haversine', 'spherical_law_of_cosines', 'vincenty', 'karney']
):
    """
    Set the global geodesic calculation method.

    Args:
        algorithm: 'haversine', 'spherical_law_of_cosines', 'vincenty' or 'karney'
    """
    global _algorithm  # pylint: disable=global-statement

    if algorithm not in _ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{algorithm}'. Options: {list(_ALGORITHMS.keys())}")

    _algorithm = algorithm
