import pytest

from obslog.log import Derivation, Field, ObservationLog

# fields used by the worked example
SUM_FIELDS = ["a", "b"]
SUM_DERIVATION = {"target": "sum", "function": "sum", "inputs": ["a", "b"]}

# fields used by the notebook-style loop
LOOP_FIELDS = [
    ("time", "int64"),
    ("variable1", "float64"),
    ("variable2", "float64"),
]
LOOP_DERIVATION = Derivation("derived_sum", "sum", ("variable1", "variable2"))


def create_sum_log():
    return ObservationLog(SUM_FIELDS, derivation=SUM_DERIVATION)


def create_loop_log():
    return ObservationLog(LOOP_FIELDS, derivation=LOOP_DERIVATION)


@pytest.fixture
def sum_log():
    return create_sum_log()


@pytest.fixture
def loop_log():
    return create_loop_log()


@pytest.fixture
def plain_log():
    return ObservationLog(
        [
            Field("x"),
            Field("n", "int64"),
            Field("flag", "bool"),
            Field("note", "float64", required=False),
        ]
    )
