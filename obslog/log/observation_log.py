"""
Module to house the `ObservationLog`, an accumulator object that holds a set of
named scalar fields and appends snapshots of them to an ordered history.
"""
from pandas import DataFrame

from curvesim.logging import get_logger

from obslog.conf import EMPTY
from obslog.exceptions import (
    DerivationError,
    MissingValueError,
    SchemaMismatchError,
    UnknownFieldError,
)

from .derivations import Derivation
from .fields import Field, Row, is_empty, make_field


logger = get_logger(__name__)


class ObservationLog:
    """
    Accumulator that holds the current value of each declared field and records
    snapshots of all fields into an append-only history.

    Fields start out unset (the empty sentinel) and may be changed freely
    between calls to :meth:`record`. History rows never change once recorded.
    """

    __slots__ = [
        "_schema",
        "_values",
        "_rows",
        "_recorded_schema",
        "_derivation",
    ]

    def __init__(self, fields, derivation=None):
        """
        Parameters
        ----------
        fields : iterable
            Field declarations, each a name, a `(name, dtype[, required])`
            tuple or a :class:`~obslog.log.fields.Field`.

        derivation : :class:`~obslog.log.derivations.Derivation` or dict, optional
            Transformation applied by :meth:`derive`. A target that is not
            among `fields` is added to the schema as a float field.
        """
        if isinstance(derivation, dict):
            derivation = Derivation.from_dict(derivation)

        self._schema = {}
        self._values = {}
        self._rows = []
        self._recorded_schema = None
        self._derivation = derivation

        for spec in fields:
            self._declare(make_field(spec))

        if derivation is not None:
            for name in derivation.inputs:
                if name not in self._schema:
                    raise UnknownFieldError(
                        f"Derivation input '{name}' is not a declared field."
                    )
            if derivation.target not in self._schema:
                self._declare(Field(derivation.target))

    def _declare(self, field):
        if field.name in self._schema:
            raise SchemaMismatchError(f"Field '{field.name}' is declared twice.")
        self._schema[field.name] = field
        self._values[field.name] = EMPTY

    def _field(self, name):
        try:
            return self._schema[name]
        except KeyError:
            raise UnknownFieldError(f"Field '{name}' is not declared.") from None

    @property
    def derivation(self):
        """The :class:`~obslog.log.derivations.Derivation` applied by :meth:`derive`, if any."""
        return self._derivation

    @property
    def fields(self):
        """Declared field names, in order."""
        return tuple(self._schema)

    @property
    def schema(self):
        """Declared :class:`Field` objects, in order."""
        return tuple(self._schema.values())

    def add_field(self, field):
        """
        Declares a new field. Once rows have been recorded, the next
        :meth:`record` raises :class:`SchemaMismatchError`.
        """
        field = make_field(field)
        self._declare(field)
        logger.debug("Declared field '%s' (%s)", field.name, field.dtype)
        return field

    def set(self, field, value):
        """Assigns `value` to `field`, coerced to the field's dtype."""
        self._values[field] = self._field(field).coerce(value)

    def update(self, **values):
        """Assigns several fields at once; nothing is set if any value is invalid."""
        coerced = {name: self._field(name).coerce(v) for name, v in values.items()}
        self._values.update(coerced)

    def get(self, field):
        """Returns the current value of `field`, or the empty sentinel if unset."""
        self._field(field)
        return self._values[field]

    def derive(self):
        """
        Computes the derivation target from its inputs and stores it.

        Returns
        -------
        The derived value.
        """
        derivation = self.derivation
        if derivation is None:
            raise DerivationError("No derivation is configured for this log.")

        inputs = [self._values[name] for name in derivation.inputs]
        missing = [n for n, v in zip(derivation.inputs, inputs) if is_empty(v)]
        if missing:
            raise MissingValueError(
                f"Cannot derive '{derivation.target}': unset input(s) {missing}."
            )

        value = derivation.compute(inputs)
        self.set(derivation.target, value)
        return self._values[derivation.target]

    def record(self):
        """
        Appends a snapshot of every declared field to the history.

        Returns
        -------
        :class:`~obslog.log.fields.Row`
            The recorded row.
        """
        names = self.fields
        if self._recorded_schema is not None and names != self._recorded_schema:
            raise SchemaMismatchError(
                f"Fields {list(names)} do not match recorded fields "
                f"{list(self._recorded_schema)}."
            )

        missing = [
            name
            for name, field in self._schema.items()
            if field.required and is_empty(self._values[name])
        ]
        if missing:
            raise MissingValueError(f"Cannot record: unset required field(s) {missing}.")

        row = Row(names, (self._values[name] for name in names))
        self._rows.append(row)
        self._recorded_schema = names
        logger.debug("Recorded row %d: %s", len(self._rows), row)
        return row

    def history(self):
        """Returns the recorded rows, oldest first."""
        return tuple(self._rows)

    def __len__(self):
        return len(self._rows)

    def to_frame(self, index=None):
        """
        Returns the history as a DataFrame with one column per field.

        Parameters
        ----------
        index : str, optional
            Field to use as the DataFrame index (e.g. "time").

        Returns
        -------
        pandas.DataFrame
        """
        names = self._recorded_schema
        if names is None:
            names = self.fields
        df = DataFrame([row.values_tuple for row in self._rows], columns=list(names))

        if self._rows:
            dtypes = {}
            for name in names:
                field = self._schema[name]
                if not df[name].isna().any():
                    dtypes[name] = field.dtype
            df = df.astype(dtypes)
        else:
            df = df.astype({name: self._schema[name].dtype for name in names})

        if index is not None:
            if index not in df.columns:
                raise UnknownFieldError(f"Field '{index}' is not declared.")
            df = df.set_index(index)

        return df

    def __repr__(self):
        return (
            f"{type(self).__name__}(fields={list(self.fields)}, "
            f"derivation={self.derivation!r}, rows={len(self._rows)})"
        )
