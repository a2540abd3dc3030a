import math

import numpy as np
import pytest

from obslog.exceptions import FieldTypeError
from obslog.log import Field, Row
from obslog.log.fields import is_empty, make_field


def test_field_defaults():
    field = Field("x")
    assert field.dtype == "float64"
    assert field.required


@pytest.mark.parametrize("dtype", ["object", "str", "datetime64[ns]", "not-a-dtype"])
def test_non_numeric_dtype(dtype):
    with pytest.raises(FieldTypeError):
        Field("x", dtype)


def test_empty_name():
    with pytest.raises(FieldTypeError):
        Field("")


@pytest.mark.parametrize(
    "dtype, value, expected",
    [
        ("float64", 3, 3.0),
        ("float32", 0.5, 0.5),
        ("int64", 2.9, 2),
        ("int32", np.int8(4), 4),
        ("bool", 0, False),
    ],
)
def test_coerce(dtype, value, expected):
    coerced = Field("x", dtype).coerce(value)
    assert coerced == expected
    assert type(coerced) is type(expected)


def test_coerce_missing():
    assert math.isnan(Field("n", "int64").coerce(None))
    assert math.isnan(Field("x").coerce(float("nan")))


def test_is_empty():
    assert is_empty(float("nan"))
    assert is_empty(None)
    assert not is_empty(0)
    assert not is_empty([1, 2])


def test_make_field():
    field = Field("x", "int64")
    assert make_field(field) is field
    assert make_field("y") == Field("y")
    assert make_field(("z", "int64", False)) == Field("z", "int64", False)
    with pytest.raises(FieldTypeError):
        make_field(42)


def test_row_mapping():
    row = Row(["b", "a"], [1, 2])
    assert list(row) == ["b", "a"]
    assert row["a"] == 2
    assert row == {"a": 2, "b": 1}
    assert row.as_dict() == {"b": 1, "a": 2}
    assert len(row) == 2
    with pytest.raises(KeyError):
        row["c"]
    assert hash(row) == hash(Row(["b", "a"], [1, 2]))


@pytest.mark.parametrize(
    "dtype, value",
    [
        ("bool", "False"),
        ("float64", "3.5"),
        ("int64", b"1"),
        ("float64", [1.0]),
        ("float64", 1 + 2j),
    ],
)
def test_coerce_rejects_non_numbers(dtype, value):
    with pytest.raises(FieldTypeError):
        Field("x", dtype).coerce(value)
