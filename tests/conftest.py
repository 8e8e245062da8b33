"""
Pytest configuration and fixtures for pydfa tests.

Provides the small two-state automata used across unit and integration tests.
"""

import pytest


@pytest.fixture
def ends_with_a_dfa():
    """
    Two states over {a, b}, start 0, final {1}.

    0 -a-> 1, 0 -b-> 0, 1 -a-> 1, 1 -b-> 0.
    """
    from pydfa.automata.examples import make_ends_with_a_dfa
    return make_ends_with_a_dfa()


@pytest.fixture
def missing_transition_record():
    """Record form of ends_with_a_dfa without state 1's 'a' entry."""
    from pydfa.automata.examples import make_missing_transition_record
    return make_missing_transition_record()


@pytest.fixture
def empty_language_dfa():
    from pydfa.automata.examples import make_empty_language_dfa
    return make_empty_language_dfa()


@pytest.fixture
def contains_a_dfa():
    from pydfa.automata.examples import make_contains_a_dfa
    return make_contains_a_dfa()
