"""
Named, fixed transformations used to derive one field of an
:class:`~obslog.log.ObservationLog` from others.

Functions are looked up by name in `derivation_functions`, so transformations
that would collide as bare functions (e.g. two different "calc" methods) live
side by side under distinct names.
"""
from functools import reduce
from operator import add, mul

from curvesim.utils import dataclass

from obslog.exceptions import DerivationError, UnregisteredDerivationError


def derive_sum(*values):
    """Returns the sum of all inputs."""
    return reduce(add, values)


def derive_difference(minuend, subtrahend):
    """Returns `minuend - subtrahend`."""
    return minuend - subtrahend


def derive_product(*values):
    """Returns the product of all inputs."""
    return reduce(mul, values)


def derive_modulo(dividend, divisor):
    """Returns `dividend % divisor`."""
    if divisor == 0:
        raise DerivationError("Modulo by zero.")
    return dividend % divisor


derivation_functions = {
    "sum": derive_sum,
    "difference": derive_difference,
    "product": derive_product,
    "modulo": derive_modulo,
}

# minimum and maximum number of inputs, None for unbounded
derivation_arity = {
    "sum": (1, None),
    "difference": (2, 2),
    "product": (1, None),
    "modulo": (2, 2),
}


def get_derivation_function(name):
    """Returns the registered derivation function for `name`."""
    try:
        return derivation_functions[name]
    except KeyError as e:
        raise UnregisteredDerivationError(
            f"Derivation function '{name}' is not registered."
        ) from e


@dataclass(frozen=True, slots=True)
class Derivation:
    """
    Attributes
    -----------
    target : str
        Field the derived value is written to.
    function : str
        Name of a function in `derivation_functions`.
    inputs : tuple of str
        Input fields, in argument order.
    """

    target: str
    function: str
    inputs: tuple

    def __post_init__(self):
        object.__setattr__(self, "inputs", tuple(self.inputs))
        get_derivation_function(self.function)

        lo, hi = derivation_arity[self.function]
        n = len(self.inputs)
        if n < lo or (hi is not None and n > hi):
            raise DerivationError(
                f"'{self.function}' takes {lo if lo == hi else f'at least {lo}'} "
                f"inputs, got {n}."
            )
        if self.target in self.inputs:
            raise DerivationError(
                f"Derivation target '{self.target}' cannot also be an input."
            )

    @classmethod
    def from_dict(cls, conf):
        """Builds a Derivation from a dict with target/function/inputs keys."""
        return cls(conf["target"], conf["function"], conf["inputs"])

    def compute(self, values):
        """
        Applies the transformation to `values`, given in `inputs` order.
        """
        func = derivation_functions[self.function]
        return func(*values)
