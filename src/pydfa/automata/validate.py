"""
Structural well-formedness check for DFAs.

States must be the identifiers 0..n-1. Clauses, in order: start in states;
finals within states; every state has a transition row; every symbol has an
entry in every row; every target is a state. The table must then be exactly
states x symbols. The first violated clause decides.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import numpy as np

from pydfa.core.log import get_logger
from pydfa.core.types import DFA, MISSING

logger = get_logger(__name__)


def check(dfa: DFA) -> Optional[str]:
    """Return the reason the first violated clause fails, or None if dfa is well-formed."""
    state_set = set(dfa.states)
    n = len(dfa.states)

    if sorted(dfa.states) != list(range(n)):
        return "states must be the identifiers 0..n-1"

    if dfa.start not in state_set:
        return f"start state {dfa.start} is not in states"

    for final in sorted(dfa.finals):
        if final not in state_set:
            return f"final state {final} is not in states"

    table = dfa.transitions
    n_rows, n_cols = table.shape
    for state in dfa.states:
        if not 0 <= state < n_rows:
            return f"state {state} has no transitions"
        row = table[state]
        if n_cols and np.all(row == MISSING):
            return f"state {state} has no transitions"

        for rank, symbol in enumerate(dfa.alphabet):
            if rank >= n_cols or row[rank] == MISSING:
                return f"state {state} has no transition on {symbol!r}"
            target = int(row[rank])
            if target not in state_set:
                return f"transition ({state}, {symbol!r}) targets unknown state {target}"

    expected_shape = (n, len(dfa.alphabet))
    if table.shape != expected_shape:
        return f"transition table has shape {table.shape}, expected {expected_shape}"

    return None


def validate(dfa: Union[DFA, Mapping[str, Any]]) -> bool:
    """
    True iff dfa is structurally well-formed. Never raises.

    Accepts a DFA or its record form; a record that cannot be turned into a
    DFA at all is invalid.
    """
    if not isinstance(dfa, DFA):
        try:
            dfa = DFA.from_record(dfa)
        except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as exc:
            logger.debug("dfa.malformed_record", error=str(exc))
            return False

    reason = check(dfa)
    if reason is not None:
        logger.debug("dfa.invalid", reason=reason)
        return False
    return True
