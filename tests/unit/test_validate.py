import pytest

from pydfa.automata.validate import check, validate
from pydfa.core.types import DFA, MISSING


def _with(dfa: DFA, **changes) -> DFA:
    fields = {
        "states": dfa.states,
        "alphabet": dfa.alphabet,
        "start": dfa.start,
        "finals": dfa.finals,
        "transitions": dfa.transitions,
    }
    fields.update(changes)
    return DFA(**fields)


class TestValidDFA:
    def test_two_state_dfa_is_valid(self, ends_with_a_dfa):
        assert validate(ends_with_a_dfa) is True
        assert check(ends_with_a_dfa) is None

    def test_record_form_is_accepted(self, ends_with_a_dfa):
        assert validate(ends_with_a_dfa.to_record()) is True

    def test_validate_is_idempotent(self, ends_with_a_dfa, missing_transition_record):
        assert validate(ends_with_a_dfa) == validate(ends_with_a_dfa)
        assert validate(missing_transition_record) == validate(missing_transition_record)

    def test_validate_does_not_modify_input(self, ends_with_a_dfa):
        before = ends_with_a_dfa.to_record()
        validate(ends_with_a_dfa)
        assert ends_with_a_dfa.to_record() == before


class TestInvalidDFA:
    def test_missing_transition_entry(self, missing_transition_record):
        assert validate(missing_transition_record) is False
        assert check(DFA.from_record(missing_transition_record)) == "state 1 has no transition on 'a'"

    @pytest.mark.parametrize("state, rank", [(0, 0), (0, 1), (1, 0), (1, 1)])
    def test_removing_any_single_entry_invalidates(self, ends_with_a_dfa, state, rank):
        table = ends_with_a_dfa.transitions.copy()
        table[state, rank] = MISSING
        assert validate(_with(ends_with_a_dfa, transitions=table)) is False

    def test_start_outside_states(self, ends_with_a_dfa):
        dfa = _with(ends_with_a_dfa, start=2)
        assert validate(dfa) is False
        assert "start state 2" in check(dfa)

    def test_final_outside_states(self, ends_with_a_dfa):
        dfa = _with(ends_with_a_dfa, finals=frozenset({1, 5}))
        assert validate(dfa) is False
        assert "final state 5" in check(dfa)

    def test_state_without_row(self, ends_with_a_dfa):
        dfa = _with(ends_with_a_dfa, states=(0, 1, 2), transitions=ends_with_a_dfa.transitions)
        assert validate(dfa) is False
        assert check(dfa) == "state 2 has no transitions"

    def test_row_of_missing_entries_counts_as_absent(self, ends_with_a_dfa):
        dfa = _with(ends_with_a_dfa, transitions=[[1, 0], [MISSING, MISSING]])
        assert check(dfa) == "state 1 has no transitions"

    def test_negative_state_has_no_row(self):
        dfa = DFA(states=(-1, 0), alphabet=("a",), start=0, finals=frozenset(), transitions=[[0]])
        assert validate(dfa) is False

    def test_table_narrower_than_alphabet(self, ends_with_a_dfa):
        dfa = _with(ends_with_a_dfa, transitions=[[1], [1]])
        assert check(dfa) == "state 0 has no transition on 'b'"

    def test_target_outside_states(self, ends_with_a_dfa):
        dfa = _with(ends_with_a_dfa, transitions=[[1, 0], [3, 0]])
        assert validate(dfa) is False
        assert "unknown state 3" in check(dfa)

    def test_table_wider_than_alphabet(self, ends_with_a_dfa):
        dfa = _with(ends_with_a_dfa, transitions=[[0, 0, 1], [1, 1, 1]])
        assert validate(dfa) is False
        assert check(dfa) == "transition table has shape (2, 3), expected (2, 2)"

    def test_table_taller_than_states(self, ends_with_a_dfa):
        dfa = _with(ends_with_a_dfa, transitions=[[1, 0], [1, 0], [0, 0]])
        assert validate(dfa) is False
        assert "shape (3, 2)" in check(dfa)

    def test_state_ids_with_gaps(self):
        dfa = DFA(states=(0, 2), alphabet=("a",), start=0, finals=frozenset({2}), transitions=[[2], [0], [2]])
        assert validate(dfa) is False
        assert check(dfa) == "states must be the identifiers 0..n-1"

    def test_duplicate_state_ids(self, ends_with_a_dfa):
        dfa = _with(ends_with_a_dfa, states=(0, 1, 1))
        assert validate(dfa) is False

    def test_first_violated_clause_is_reported(self):
        dfa = DFA(states=(0,), alphabet=("a",), start=4, finals=frozenset({9}), transitions=[[7]])
        assert "start state" in check(dfa)


class TestMalformedRecords:
    """validate never raises, even on records that cannot form a DFA."""

    @pytest.mark.parametrize(
        "record",
        [
            {},
            {"states": [0], "alphabet": ["a"], "start": 0, "finals": []},
            {"states": [0], "alphabet": ["a"], "start": "zero", "finals": [], "transitions": {}},
            {"states": [0], "alphabet": ["a"], "start": 0, "finals": [], "transitions": [[0]]},
            {"states": [0], "alphabet": ["a"], "start": 0, "finals": [], "transitions": {0: {"a": "x"}}},
            {"states": None, "alphabet": ["a"], "start": 0, "finals": [], "transitions": {}},
            {"states": [0], "alphabet": ["a"], "start": 0, "finals": [], "transitions": {0: {"a": 2**70}}},
            {"states": [0], "alphabet": ["a"], "start": 0, "finals": [], "transitions": {0: {"a": 1}}},
            {"states": [0, 10**10], "alphabet": ["a"], "start": 0, "finals": [], "transitions": {}},
            {"states": [0, 2], "alphabet": ["a"], "start": 0, "finals": [], "transitions": {0: {"a": 0}}},
        ],
    )
    def test_malformed_record_is_invalid(self, record):
        assert validate(record) is False
