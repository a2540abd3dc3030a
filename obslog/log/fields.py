"""
Field declarations and the immutable `Row` snapshot recorded by
:class:`~obslog.log.ObservationLog`.
"""
from collections.abc import Mapping
from numbers import Real

import numpy as np
from pandas import isna

from curvesim.utils import dataclass

from obslog.conf import DEFAULT_DTYPE, EMPTY
from obslog.exceptions import FieldTypeError


NUMERIC_KINDS = "biuf"


@dataclass(frozen=True, slots=True)
class Field:
    """
    A named scalar slot on an observation log.

    Attributes
    -----------
    name : str
        Field name, used as the column name in the log's history.
    dtype : str
        Numpy dtype name values are coerced through (bool, int, uint or float).
    required : bool
        If true, the field must be set before a row is recorded.
    """

    name: str
    dtype: str = DEFAULT_DTYPE
    required: bool = True

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise FieldTypeError(f"Field name must be a non-empty str, got {self.name!r}")
        try:
            kind = np.dtype(self.dtype).kind
        except TypeError as e:
            raise FieldTypeError(f"Unknown dtype '{self.dtype}' for field '{self.name}'") from e
        if kind not in NUMERIC_KINDS:
            raise FieldTypeError(
                f"Field '{self.name}' must have a numeric dtype, got '{self.dtype}'."
            )

    def coerce(self, value):
        """
        Returns `value` converted to the field's dtype as a plain Python scalar.
        Missing values (None, NaN, NaT) are returned as the empty sentinel.
        Anything other than a real number or bool, strings included, is rejected.
        """
        if is_empty(value):
            return EMPTY
        if not isinstance(value, (Real, np.bool_)):
            raise FieldTypeError(
                f"Value {value!r} is not a number for field '{self.name}' ({self.dtype})."
            )
        try:
            return np.dtype(self.dtype).type(value).item()
        except (TypeError, ValueError, OverflowError) as e:
            raise FieldTypeError(
                f"Value {value!r} is not valid for field '{self.name}' ({self.dtype})."
            ) from e


def is_empty(value):
    """True if `value` is the empty sentinel or another missing marker."""
    try:
        return bool(isna(value))
    except (TypeError, ValueError):
        # array-likes are never a single missing scalar
        return False


def make_field(spec):
    """
    Builds a :class:`Field` from a name, a `(name, dtype)` or
    `(name, dtype, required)` tuple, or returns an existing Field unchanged.
    """
    if isinstance(spec, Field):
        return spec
    if isinstance(spec, str):
        return Field(spec)
    if isinstance(spec, (tuple, list)) and 1 <= len(spec) <= 3:
        return Field(*spec)
    raise FieldTypeError(f"Cannot build a field from {spec!r}")


class Row(Mapping):
    """
    Read-only snapshot of every field of a log at the time it was recorded.

    Iterates in declared field order and compares equal to a dict
    with the same items.
    """

    __slots__ = ["_names", "_values"]

    def __init__(self, names, values):
        names = tuple(names)
        values = tuple(values)
        if len(names) != len(values):
            raise ValueError("Row names and values differ in length.")
        object.__setattr__(self, "_names", names)
        object.__setattr__(self, "_values", values)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __getitem__(self, key):
        try:
            return self._values[self._names.index(key)]
        except ValueError:
            raise KeyError(key) from None

    def __iter__(self):
        return iter(self._names)

    def __len__(self):
        return len(self._names)

    def __hash__(self):
        return hash((self._names, self._values))

    def __repr__(self):
        items = ", ".join(f"{k!r}: {v!r}" for k, v in zip(self._names, self._values))
        return f"Row({{{items}}})"

    @property
    def names(self):
        """Field names in declared order."""
        return self._names

    @property
    def values_tuple(self):
        """Field values in declared order."""
        return self._values

    def as_dict(self):
        return dict(zip(self._names, self._values))
