"""pydfa: enumeration, validation, tape-decider simulation and emptiness checks for DFAs."""

from pydfa.automata.decider import accepts, run, to_decider
from pydfa.automata.emptiness import is_empty, reachable_states, transition_graph
from pydfa.automata.enumeration import DFAEnumerator, dfa_count, enumerate_dfas
from pydfa.automata.validate import check, validate
from pydfa.core.types import (
    DFA,
    MISSING,
    Configuration,
    Decision,
    SimulationResult,
    TMDecider,
)

__version__ = "0.1.0"

__all__ = [
    "DFA",
    "MISSING",
    "TMDecider",
    "Decision",
    "Configuration",
    "SimulationResult",
    "DFAEnumerator",
    "dfa_count",
    "enumerate_dfas",
    "check",
    "validate",
    "to_decider",
    "run",
    "accepts",
    "is_empty",
    "reachable_states",
    "transition_graph",
]
