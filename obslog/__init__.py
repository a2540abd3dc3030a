"""Package to record and plot observations accumulated over a loop."""
__all__ = [
    "autolog",
    "ObservationLog",
    "Field",
    "Derivation",
    "EMPTY",
    "__version__",
]

from .conf import EMPTY
from .log import Derivation, Field, ObservationLog
from .sim import autolog
from .version import __version__
