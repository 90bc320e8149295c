"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

from typing import Tuple

from pydantic import validate_call

from orthodromic.utils.logging import warn_once


class GeoPoint:
    """
    Representation of a point on the globe (i.e., a lat/lon pair in decimal degrees).

    Coordinates outside of [-90, 90] / [-180, 180] are accepted as-is and passed
    through to the distance formulas unchanged.
    """

    __slots__ = ('_latitude', '_longitude')

    @validate_call
    def __init__(self, latitude: float, longitude: float):
        """Numeric strings are coerced to float"""
        object.__setattr__(self, '_latitude', latitude)
        object.__setattr__(self, '_longitude', longitude)

        if not self.in_range:
            warn_once(
                'GeoPoint created outside of the legal latitude/longitude range; '
                'coordinates are not validated. (this warning will not repeat)'
            )

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __iter__(self):
        return iter((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def in_range(self) -> bool:
        """True if latitude is within [-90, 90] and longitude within [-180, 180]"""
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a GeoPoint from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            GeoPoint
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls(convert(lat), convert(lon))

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude
