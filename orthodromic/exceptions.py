"""
Errors raised while computing distances
"""

__all__ = ['ConvergenceError', 'DomainFault', 'GeodesyError']


class GeodesyError(Exception):
    """Base class for all distance computation failures"""


class DomainFault(GeodesyError, ValueError):
    """
    A floating point operation produced an undefined result, e.g. a
    non-finite input coordinate or a math domain error.
    """


class ConvergenceError(GeodesyError, ArithmeticError):
    """
    The Vincenty inverse iteration did not settle within its iteration budget.
    This is expected near antipodal point pairs.
    """

    def __init__(self, message: str, iterations: int):
        super().__init__(message)
        self.iterations = iterations
