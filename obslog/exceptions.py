"""Errors raised by the observation log."""
from curvesim.exceptions import CurvesimException


class ObservationLogError(CurvesimException):
    """Base class for observation log errors."""


class MissingValueError(ObservationLogError):
    """Raised when a required field is read while still unset."""


class SchemaMismatchError(ObservationLogError):
    """Raised when the declared fields no longer match the recorded rows."""


class UnknownFieldError(ObservationLogError, KeyError):
    """Raised for a field name that is not declared on the log."""

    def __str__(self):
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class FieldTypeError(ObservationLogError, TypeError):
    """Raised when a value cannot be represented in the field's dtype."""


class DerivationError(ObservationLogError):
    """Raised when a derivation cannot be computed."""


class UnregisteredDerivationError(DerivationError):
    """Raised when a derivation function name is not registered."""
