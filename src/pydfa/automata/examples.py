from __future__ import annotations

from typing import Any

from pydfa.core.types import DFA


def make_ends_with_a_dfa() -> DFA:
    """Accepts words over {a, b} whose last symbol is 'a'."""
    return DFA(
        states=(0, 1),
        alphabet=("a", "b"),
        start=0,
        finals=frozenset({1}),
        transitions=[
            [1, 0],
            [1, 0],
        ],
    )


def make_missing_transition_record() -> dict[str, Any]:
    """Record of make_ends_with_a_dfa() with state 1's 'a' entry removed."""
    return {
        "states": [0, 1],
        "alphabet": ["a", "b"],
        "start": 0,
        "finals": [1],
        "transitions": {
            0: {"a": 1, "b": 0},
            1: {"b": 0},
        },
    }


def make_empty_language_dfa() -> DFA:
    return DFA(
        states=(0, 1),
        alphabet=("a", "b"),
        start=0,
        finals=frozenset(),
        transitions=[
            [1, 1],
            [1, 1],
        ],
    )


def make_contains_a_dfa() -> DFA:
    """Accepts words over {a, b} containing at least one 'a'."""
    return DFA(
        states=(0, 1),
        alphabet=("a", "b"),
        start=0,
        finals=frozenset({1}),
        transitions=[
            [1, 0],
            [1, 1],
        ],
    )


def make_div3_dfa() -> DFA:
    """Binary numbers (most significant bit first) divisible by three."""
    return DFA(
        states=(0, 1, 2),
        alphabet=("0", "1"),
        start=0,
        finals=frozenset({0}),
        transitions=[
            [0, 1],
            [2, 0],
            [1, 2],
        ],
    )
