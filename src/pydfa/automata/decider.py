"""
DFA to tape decider conversion and simulation.

The decider reads its tape left to right, never writes, and halts on the
first blank. Both functions assume a DFA that already passed validate().
"""

from __future__ import annotations

from pydfa.config import DEFAULT_BLANK
from pydfa.core.log import get_logger
from pydfa.core.types import DFA, MISSING, Configuration, Decision, SimulationResult, TMDecider

logger = get_logger(__name__)


def to_decider(dfa: DFA, blank: str = DEFAULT_BLANK) -> TMDecider:
    while blank in dfa.alphabet:
        blank += "_"
    return TMDecider(
        states=dfa.states,
        alphabet=dfa.alphabet,
        start=dfa.start,
        finals=dfa.finals,
        transitions=dfa.transitions,
        blank=blank,
    )


def run(decider: TMDecider, tape: str) -> SimulationResult:
    """
    Run decider on tape and return its decision with the full trace.

    The trace holds len(tape) + 2 snapshots: "Start", one per symbol read
    (state and head before the move), and the halting decision.
    """
    ranks = {symbol: k for k, symbol in enumerate(decider.alphabet)}
    state = decider.start
    head = 0
    trace = [Configuration(state, tape, head, "Start")]

    while True:
        symbol = tape[head] if head < len(tape) else decider.blank

        if symbol == decider.blank:
            decision = Decision.ACCEPT if state in decider.finals else Decision.REJECT
            trace.append(Configuration(state, tape, head, f"Halt: {decision.value}"))
            logger.debug("decider.halted", decision=decision.value, steps=len(trace) - 1)
            return SimulationResult(decision=decision, trace=tuple(trace))

        rank = ranks.get(symbol)
        if rank is None:
            raise ValueError(f"symbol {symbol!r} at position {head} is not in the alphabet")
        next_state = int(decider.transitions[state, rank])
        if next_state == MISSING:
            raise KeyError(f"no transition from state {state} on {symbol!r}")

        trace.append(Configuration(state, tape, head, f"Read {symbol!r}, go to state {next_state}"))
        state = next_state
        head += 1


def accepts(dfa: DFA, word: str) -> bool:
    return run(to_decider(dfa), word).accepted
