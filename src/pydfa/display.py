"""Text rendering of DFAs and decider traces."""

from __future__ import annotations

import json

from pydfa.core.types import DFA, Configuration, SimulationResult


def format_configuration(config: Configuration) -> str:
    head_marker = " " * config.head_position + "^"
    return f'State={config.state} | Tape="{config.tape}"\n{head_marker}  {config.action}'


def format_trace(result: SimulationResult) -> str:
    return "\n\n".join(format_configuration(config) for config in result.trace)


def dfa_to_json(dfa: DFA, indent: int = 2) -> str:
    return json.dumps(dfa.to_record(), indent=indent)
