"""
ObservationLog object that holds named scalar fields and records snapshots of
them throughout a loop.
"""

__all__ = [
    "ObservationLog",
    "Field",
    "Row",
    "Derivation",
    "derivation_functions",
    "get_derivation_function",
]

from .derivations import Derivation, derivation_functions, get_derivation_function
from .fields import Field, Row
from .observation_log import ObservationLog
