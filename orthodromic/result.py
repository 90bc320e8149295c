"""
Explicit success/failure outcome of a distance computation
"""

__all__ = ['DistanceResult']

from typing import Optional

from orthodromic._const import FAILURE_SENTINEL
from orthodromic.exceptions import GeodesyError


class DistanceResult:
    """
    Holds either a computed distance or the error that prevented it, never both.

    Use .ok to branch, .unwrap() to get the distance (re-raising the stored error
    on failure) or .to_sentinel() for the legacy -1 convention.
    """

    __slots__ = ('value', 'error')

    def __init__(
        self,
        value: Optional[float] = None,
        error: Optional[GeodesyError] = None,
    ):
        if (value is None) == (error is None):
            raise ValueError('DistanceResult requires exactly one of value or error')

        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'error', error)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, DistanceResult):
            return False

        return self.value == other.value and self.error is other.error

    def __repr__(self):
        if self.ok:
            return f'<DistanceResult(value={self.value})>'
        return f'<DistanceResult(error={self.error!r})>'

    @classmethod
    def success(cls, value: float) -> 'DistanceResult':
        return cls(value=value)

    @classmethod
    def failure(cls, error: GeodesyError) -> 'DistanceResult':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Returns the distance, or raises the error that prevented it"""
        if self.error is not None:
            raise self.error

        return self.value

    def to_sentinel(self) -> float:
        """Returns the distance, or -1.0 if the computation failed"""
        return FAILURE_SENTINEL if self.error is not None else self.value
