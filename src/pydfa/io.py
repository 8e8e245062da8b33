"""DFA record files (JSON)."""

from __future__ import annotations

import json
from pathlib import Path

from pydfa.core.types import DFA


def save_dfas(dfas: list[DFA], path: str) -> None:
    records = [dfa.to_record() for dfa in dfas]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2)


def load_dfas(path: str) -> list[DFA]:
    """Load every DFA from a JSON list of records.

    Raises:
        FileNotFoundError: If path does not exist
    """
    return [DFA.from_record(record) for record in _read_records(path)]


def load_dfa(path: str) -> DFA:
    """Load a single DFA from a file holding one record or a one-element list."""
    records = _read_records(path)
    if len(records) != 1:
        raise ValueError(f"expected exactly one DFA record in {path}, found {len(records)}")
    return DFA.from_record(records[0])


def read_record(path: str) -> dict:
    """Raw single record, for callers that validate before building a DFA."""
    records = _read_records(path)
    if len(records) != 1:
        raise ValueError(f"expected exactly one DFA record in {path}, found {len(records)}")
    return records[0]


def _read_records(path: str) -> list[dict]:
    if not Path(path).exists():
        raise FileNotFoundError(f"DFA file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        return [data]
    return list(data)
