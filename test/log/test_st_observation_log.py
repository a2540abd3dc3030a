from hypothesis import given, settings
from hypothesis import strategies as st
from hypothesis.stateful import (
    RuleBasedStateMachine,
    invariant,
    precondition,
    rule,
)

from obslog.log import ObservationLog


FIELDS = ["a", "b"]
values = st.floats(min_value=-1e9, max_value=1e9, allow_nan=False)
field_names = st.sampled_from(FIELDS)


@given(st.lists(st.tuples(field_names, values), max_size=30))
def test_get_returns_most_recent_set(assignments):
    log = ObservationLog(FIELDS)
    expected = {}
    for name, value in assignments:
        log.set(name, value)
        expected[name] = value

    for name, value in expected.items():
        assert log.get(name) == value


@given(a=values, b=values)
def test_derive_is_deterministic(a, b):
    log = ObservationLog(FIELDS, derivation={"target": "sum", "function": "sum", "inputs": FIELDS})
    log.update(a=a, b=b)
    first = log.derive()
    assert log.derive() == first
    assert first == a + b


class StatefulObservationLog(RuleBasedStateMachine):
    """
    Mirrors every recorded row in a plain list and checks the log's
    history never diverges from it.
    """

    def __init__(self):
        super().__init__()
        self.log = ObservationLog(
            FIELDS, derivation={"target": "sum", "function": "sum", "inputs": FIELDS}
        )
        self.expected = []
        self.frozen = []

    @rule(name=field_names, value=values)
    def set_field(self, name, value):
        self.log.set(name, value)

    @precondition(lambda self: all(self.log.get(f) == self.log.get(f) for f in FIELDS))
    @rule()
    def derive(self):
        self.log.derive()

    @precondition(
        lambda self: all(self.log.get(f) == self.log.get(f) for f in self.log.fields)
    )
    @rule()
    def record(self):
        n = len(self.log.history())
        row = self.log.record()
        assert len(self.log.history()) == n + 1
        self.expected.append({f: self.log.get(f) for f in self.log.fields})
        self.frozen.append(row.values_tuple)

    @invariant()
    def history_matches(self):
        history = self.log.history()
        assert [dict(row) for row in history] == self.expected
        assert [row.values_tuple for row in history] == self.frozen


StatefulObservationLog.TestCase.settings = settings(
    max_examples=50,
    stateful_step_count=30,
)
TestStatefulObservationLog = StatefulObservationLog.TestCase
