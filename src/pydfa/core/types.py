"""
Core types for pydfa: DFA, TMDecider, Decision, Configuration, SimulationResult.

Pure data containers. Construction coerces field types but does not check
well-formedness; that is the validator's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

import numpy as np

MISSING = -1


def _as_table(transitions: Any, n_symbols: int) -> np.ndarray:
    table = np.array(transitions, dtype=np.int64)
    if table.size == 0:
        table = table.reshape(0, n_symbols)
    if table.ndim != 2:
        raise ValueError("transitions must be a 2-D table of shape (states, symbols)")
    table.flags.writeable = False
    return table


@dataclass(frozen=True, eq=False)
class DFA:
    """
    Deterministic finite automaton over an ordered alphabet.

    transitions[s, k] is the target of state s on alphabet[k]; absent entries
    hold MISSING. The table is copied and made read-only on construction.
    """

    states: tuple[int, ...]
    alphabet: tuple[str, ...]
    start: int
    finals: frozenset[int]
    transitions: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", tuple(int(s) for s in self.states))
        object.__setattr__(self, "alphabet", tuple(self.alphabet))
        object.__setattr__(self, "start", int(self.start))
        object.__setattr__(self, "finals", frozenset(int(f) for f in self.finals))
        object.__setattr__(self, "transitions", _as_table(self.transitions, len(self.alphabet)))

    @property
    def n_states(self) -> int:
        return len(self.states)

    def symbol_rank(self, symbol: str) -> int:
        try:
            return self.alphabet.index(symbol)
        except ValueError:
            raise ValueError(f"symbol {symbol!r} is not in the alphabet") from None

    def next_state(self, state: int, symbol: str) -> int:
        rank = self.symbol_rank(symbol)
        rows, cols = self.transitions.shape
        target = int(self.transitions[state, rank]) if 0 <= state < rows and rank < cols else MISSING
        if target == MISSING:
            raise KeyError(f"no transition from state {state} on {symbol!r}")
        return target

    def _key(self) -> tuple:
        return (
            self.states,
            self.alphabet,
            self.start,
            self.finals,
            self.transitions.shape,
            self.transitions.tobytes(),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DFA):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def to_record(self) -> dict[str, Any]:
        transitions: dict[int, dict[str, int]] = {}
        for state, row in enumerate(self.transitions):
            entries = {
                symbol: int(target)
                for symbol, target in zip(self.alphabet, row)
                if target != MISSING
            }
            if entries:
                transitions[state] = entries
        return {
            "states": list(self.states),
            "alphabet": list(self.alphabet),
            "start": self.start,
            "finals": sorted(self.finals),
            "transitions": transitions,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> DFA:
        """
        Build a DFA from its record form.

        State keys may be ints or strings (JSON object keys). Rows for ids
        that are not states and symbols outside the alphabet are dropped;
        every pair the record does not list stays MISSING.

        Raises:
            ValueError: If states are not 0..n-1 or a target is not a state
        """
        states = tuple(int(s) for s in record["states"])
        alphabet = tuple(record["alphabet"])
        ranks = {symbol: k for k, symbol in enumerate(alphabet)}

        n = len(states)
        if sorted(states) != list(range(n)):
            raise ValueError("states must be the identifiers 0..n-1")

        table = np.full((n, len(alphabet)), MISSING, dtype=np.int64)
        for state_key, row in record["transitions"].items():
            state = int(state_key)
            if not 0 <= state < n:
                continue
            for symbol, target in row.items():
                if symbol not in ranks:
                    continue
                target = int(target)
                if not 0 <= target < n:
                    raise ValueError(f"transition ({state}, {symbol!r}) targets unknown state {target}")
                table[state, ranks[symbol]] = target

        return cls(
            states=states,
            alphabet=alphabet,
            start=record["start"],
            finals=frozenset(record["finals"]),
            transitions=table,
        )


@dataclass(frozen=True, eq=False)
class TMDecider:
    """Right-moving, read-only tape decider derived from a DFA."""

    states: tuple[int, ...]
    alphabet: tuple[str, ...]
    start: int
    finals: frozenset[int]
    transitions: np.ndarray
    blank: str = "_"

    def __post_init__(self) -> None:
        if self.blank in self.alphabet:
            raise ValueError(f"blank symbol {self.blank!r} must not belong to the alphabet")


class Decision(str, Enum):
    ACCEPT = "ACCEPT"
    REJECT = "REJECT"


@dataclass(frozen=True)
class Configuration:
    """One snapshot of a decider run."""

    state: int
    tape: str
    head_position: int
    action: str


@dataclass(frozen=True)
class SimulationResult:
    decision: Decision
    trace: tuple[Configuration, ...]

    @property
    def accepted(self) -> bool:
        return self.decision is Decision.ACCEPT
