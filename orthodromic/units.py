"""
Module for distance unit selection and conversion
"""
__all__ = ['DistanceUnit', 'convert_from_km']

from enum import Enum
from typing import Union

from orthodromic._const import KM_PER_MILE


class DistanceUnit(Enum):
    """The unit a computed distance is reported in"""
    METRIC = 'km'
    IMPERIAL = 'mi'

    @property
    def factor(self) -> float:
        """Multiplier applied to a distance in kilometers"""
        return 1.0 if self is DistanceUnit.METRIC else 1.0 / KM_PER_MILE

    @classmethod
    def parse(cls, unit: Union['DistanceUnit', str]) -> 'DistanceUnit':
        """
        Resolves a DistanceUnit from either a member or one of its string aliases.

        Args:
            unit (DistanceUnit | str): The unit, or an alias (kilometer = 'km', 'metric',
            'si'; statute mile = 'mi', 'imperial', 'us').

        Returns:
            DistanceUnit
        """
        if isinstance(unit, cls):
            return unit

        if isinstance(unit, str):
            aliases = {
                'km': cls.METRIC,
                'metric': cls.METRIC,
                'si': cls.METRIC,
                'mi': cls.IMPERIAL,
                'imperial': cls.IMPERIAL,
                'us': cls.IMPERIAL,
            }
            key = unit.lower()
            if key in aliases:
                return aliases[key]

        raise ValueError(
            f"Unknown distance unit {unit!r}. Options: {[x.name for x in cls]}"
        )


def convert_from_km(distance: float, unit: Union[DistanceUnit, str]) -> float:
    """
    Converts a distance in kilometers to the requested unit.

    Args:
        distance (float): The distance, in kilometers.
        unit (DistanceUnit | str): The target unit.

    Returns:
        float: The distance in the target unit.
    """
    return distance * DistanceUnit.parse(unit).factor
