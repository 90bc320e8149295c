import sys

from orthodromic._version import __version__  # noqa: F401
from orthodromic.utils.logging import LOGGER
from orthodromic.coordinates import GeoPoint
from orthodromic.distance import (
    distance, get_geodesic_algorithm, haversine, haversine_result, karney, karney_result,
    set_geodesic_algorithm, spherical_law_of_cosines, spherical_law_of_cosines_result,
    vincenty_inverse, vincenty_inverse_result
)
from orthodromic.exceptions import ConvergenceError, DomainFault, GeodesyError
from orthodromic.result import DistanceResult
from orthodromic.units import DistanceUnit
from orthodromic.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'geographiclib': 'orthodromic[karney]',
    }
)
sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'ConvergenceError',
    'DistanceResult',
    'DistanceUnit',
    'DomainFault',
    'GeoPoint',
    'GeodesyError',
    'LOGGER',
    'distance',
    'get_geodesic_algorithm',
    'haversine',
    'haversine_result',
    'karney',
    'karney_result',
    'set_geodesic_algorithm',
    'spherical_law_of_cosines',
    'spherical_law_of_cosines_result',
    'vincenty_inverse',
    'vincenty_inverse_result',
]
