from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

DEFAULT_ALPHABET = ("a", "b")
DEFAULT_BLANK = "_"

_TRUE_STRINGS = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EngineConfig:
    """Settings shared by the command line and the demonstration driver."""

    alphabet: tuple[str, ...] = DEFAULT_ALPHABET
    blank: str = DEFAULT_BLANK
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "alphabet", tuple(self.alphabet))
        if not self.alphabet:
            raise ValueError("alphabet must not be empty")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("alphabet symbols must be unique")
        if any(not symbol for symbol in self.alphabet):
            raise ValueError("alphabet symbols must be non-empty strings")
        if not self.blank:
            raise ValueError("blank must be a non-empty string")
        if self.blank in self.alphabet:
            raise ValueError("blank must not belong to the alphabet")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log_level: {self.log_level}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
        """
        Read settings from PYDFA_* environment variables.

        PYDFA_ALPHABET is comma separated ("a,b"); PYDFA_LOG_JSON accepts
        1/true/yes/on. Unset variables keep the defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}
        if env.get("PYDFA_ALPHABET"):
            kwargs["alphabet"] = parse_alphabet(env["PYDFA_ALPHABET"])
        if env.get("PYDFA_BLANK"):
            kwargs["blank"] = env["PYDFA_BLANK"]
        if env.get("PYDFA_LOG_LEVEL"):
            kwargs["log_level"] = env["PYDFA_LOG_LEVEL"]
        if "PYDFA_LOG_JSON" in env:
            kwargs["log_json"] = env["PYDFA_LOG_JSON"].strip().lower() in _TRUE_STRINGS
        return cls(**kwargs)


def parse_alphabet(text: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in text.split(",") if part.strip())
