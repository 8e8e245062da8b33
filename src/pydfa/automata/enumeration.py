"""
Exhaustive enumeration of DFAs.

For each state count n = 1, 2, ... the transition function is a vector of
n * |alphabet| digits in 0..n-1 (digit s * |alphabet| + k is the target of
state s on alphabet[k]), counted in odometer order with digit 0 least
significant. For every transition vector, the final-state sets follow by
bitmask 0 .. 2**n - 1. The start state is always 0.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Optional, Sequence

import numpy as np

from pydfa.config import DEFAULT_ALPHABET
from pydfa.core.log import get_logger
from pydfa.core.types import DFA

logger = get_logger(__name__)


def dfa_count(n_states: int, n_symbols: int) -> int:
    """Number of DFAs the enumerator emits for a given state count."""
    if n_states < 1:
        raise ValueError("n_states must be >= 1")
    return n_states ** (n_states * n_symbols) * 2**n_states


class DFAEnumerator:
    """
    Resumable cursor over every DFA for an alphabet.

    The cursor state is (state_count, digits, final_mask); next_dfa() builds
    the DFA at the current position and then advances. Produced DFAs own
    their transition tables.
    """

    def __init__(self, alphabet: Sequence[str] = DEFAULT_ALPHABET, state_count: int = 1):
        alphabet = tuple(alphabet)
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet symbols must be unique")
        if state_count < 1:
            raise ValueError("state_count must be >= 1")

        self.alphabet = alphabet
        self.state_count = state_count
        self.digits = np.zeros(state_count * len(alphabet), dtype=np.int64)
        self.final_mask = 0
        self.produced = 0

    def __iter__(self) -> DFAEnumerator:
        return self

    def __next__(self) -> DFA:
        return self.next_dfa()

    def next_dfa(self) -> DFA:
        n = self.state_count
        dfa = DFA(
            states=tuple(range(n)),
            alphabet=self.alphabet,
            start=0,
            finals=frozenset(s for s in range(n) if self.final_mask >> s & 1),
            transitions=self.digits.reshape(n, len(self.alphabet)),
        )
        self._advance()
        self.produced += 1
        return dfa

    def _advance(self) -> None:
        self.final_mask += 1
        if self.final_mask < 1 << self.state_count:
            return

        self.final_mask = 0
        if self._increment_digits():
            return

        self.state_count += 1
        self.digits = np.zeros(self.state_count * len(self.alphabet), dtype=np.int64)
        logger.debug(
            "enumerator.state_count_advanced",
            state_count=self.state_count,
            produced=self.produced + 1,
        )

    def _increment_digits(self) -> bool:
        """Odometer step. False once the most significant digit overflows."""
        n = self.state_count
        for i in range(self.digits.size):
            self.digits[i] += 1
            if self.digits[i] < n:
                return True
            self.digits[i] = 0
        return False


def enumerate_dfas(
    alphabet: Sequence[str] = DEFAULT_ALPHABET,
    limit: Optional[int] = None,
) -> Iterator[DFA]:
    cursor = DFAEnumerator(alphabet)
    if limit is None:
        return cursor
    return islice(cursor, limit)
