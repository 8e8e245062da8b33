from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from pydfa.automata.decider import run, to_decider
from pydfa.automata.emptiness import is_empty
from pydfa.automata.enumeration import DFAEnumerator
from pydfa.automata.examples import (
    make_contains_a_dfa,
    make_empty_language_dfa,
    make_ends_with_a_dfa,
    make_missing_transition_record,
)
from pydfa.automata.validate import check, validate
from pydfa.config import EngineConfig, parse_alphabet
from pydfa.core.log import configure_logging, get_logger
from pydfa.core.types import DFA
from pydfa.display import dfa_to_json, format_trace
from pydfa.io import read_record

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pydfa", description="Enumerate, validate and decide DFAs")
    ap.add_argument("--alphabet", type=parse_alphabet, default=None, help="Comma separated symbols, e.g. a,b")
    ap.add_argument("--blank", type=str, default=None, help="Blank symbol for the tape decider")
    ap.add_argument("--log-level", type=str, default=None)
    ap.add_argument("--log-json", action="store_true", default=None)

    sub = ap.add_subparsers(dest="command", required=True)

    enum_ap = sub.add_parser("enumerate", help="Print DFAs in enumeration order")
    enum_ap.add_argument("--count", type=int, default=20)
    enum_ap.add_argument("--state-count", type=int, default=1, help="Start at the first DFA with this many states")

    validate_ap = sub.add_parser("validate", help="Check a DFA record file")
    validate_ap.add_argument("path")

    simulate_ap = sub.add_parser("simulate", help="Run the tape decider of a DFA on an input")
    simulate_ap.add_argument("path")
    simulate_ap.add_argument("input", nargs="?", default="")

    empty_ap = sub.add_parser("empty", help="Decide whether a DFA accepts nothing")
    empty_ap.add_argument("path")

    sub.add_parser("demo", help="Run the built-in demonstration")
    return ap


def _resolve_config(args: argparse.Namespace) -> EngineConfig:
    base = EngineConfig.from_env()
    overrides = {
        "alphabet": args.alphabet,
        "blank": args.blank,
        "log_level": args.log_level,
        "log_json": args.log_json,
    }
    merged = base.to_dict()
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return EngineConfig(**merged)


def _load_valid(path: str) -> Optional[DFA]:
    """Load the DFA at path, or print why it is invalid and return None."""
    record = read_record(path)
    try:
        dfa = DFA.from_record(record)
    except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as exc:
        print(f"invalid: malformed record ({exc})")
        return None

    reason = check(dfa)
    if reason is not None:
        print(f"invalid: {reason}")
        return None
    return dfa


def cmd_enumerate(args: argparse.Namespace, config: EngineConfig) -> int:
    if args.count < 0:
        raise ValueError("--count must be >= 0")
    cursor = DFAEnumerator(config.alphabet, state_count=args.state_count)
    for index in range(1, args.count + 1):
        dfa = cursor.next_dfa()
        print(f"----- DFA #{index} -----")
        print(dfa_to_json(dfa))
    return 0


def cmd_validate(args: argparse.Namespace, config: EngineConfig) -> int:
    dfa = _load_valid(args.path)
    if dfa is None:
        return 1
    print("valid")
    return 0


def cmd_simulate(args: argparse.Namespace, config: EngineConfig) -> int:
    dfa = _load_valid(args.path)
    if dfa is None:
        return 1
    unknown = sorted(set(args.input) - set(dfa.alphabet))
    if unknown:
        print(f"input contains symbols outside the alphabet: {unknown}")
        return 1

    result = run(to_decider(dfa, blank=config.blank), args.input)
    print(f'Decision on "{args.input}": {result.decision.value}')
    print()
    print(format_trace(result))
    return 0


def cmd_empty(args: argparse.Namespace, config: EngineConfig) -> int:
    dfa = _load_valid(args.path)
    if dfa is None:
        return 1
    print("empty" if is_empty(dfa) else "nonempty")
    return 0


def cmd_demo(args: argparse.Namespace, config: EngineConfig) -> int:
    print("=== FIRST 20 ENUMERATED DFAs ===")
    cursor = DFAEnumerator(config.alphabet)
    for index in range(1, 21):
        print(f"----- DFA #{index} -----")
        print(dfa_to_json(cursor.next_dfa()))

    print()
    print("=== VALIDATION EXAMPLES ===")
    valid_dfa = make_ends_with_a_dfa()
    invalid_record = make_missing_transition_record()
    print(dfa_to_json(valid_dfa))
    print(f"Valid DFA example validation: {validate(valid_dfa)}")
    print(json.dumps(invalid_record, indent=2))
    print(f"Invalid DFA example validation: {validate(invalid_record)}")

    print()
    print("=== TM-D SIMULATION EXAMPLE ===")
    word = "abba"
    result = run(to_decider(valid_dfa, blank=config.blank), word)
    print(f'Decision on "{word}": {result.decision.value}')
    print()
    print("--- Tape Configurations ---")
    print(format_trace(result))

    print()
    print("=== EMPTY DFA EXAMPLE ===")
    empty_dfa = make_empty_language_dfa()
    print(dfa_to_json(empty_dfa))
    print(is_empty(empty_dfa))

    print("=== NON-EMPTY DFA EXAMPLE ===")
    nonempty_dfa = make_contains_a_dfa()
    print(dfa_to_json(nonempty_dfa))
    print(is_empty(nonempty_dfa))
    return 0


_COMMANDS = {
    "enumerate": cmd_enumerate,
    "validate": cmd_validate,
    "simulate": cmd_simulate,
    "empty": cmd_empty,
    "demo": cmd_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    try:
        config = _resolve_config(args)
    except ValueError as exc:
        ap.error(str(exc))
    configure_logging(level=config.log_level, json=config.log_json)
    logger.debug("cli.start", command=args.command, config=config.to_dict())

    try:
        return _COMMANDS[args.command](args, config)
    except FileNotFoundError as exc:
        logger.error("cli.file_not_found", error=str(exc))
        return 2
    except json.JSONDecodeError as exc:
        logger.error("cli.bad_json", error=str(exc))
        return 2
    except ValueError as exc:
        logger.error("cli.bad_argument", error=str(exc))
        return 2


if __name__ == "__main__":
    sys.exit(main())
