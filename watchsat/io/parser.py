from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, TextIO, Union

import yaml

from ..core.model import Clause, LiteralState, SATInstance, add_clause_to_instance, add_literal_to_clause

YAML_SUFFIXES = {".yaml", ".yml"}


class ParseError(ValueError):
    """Raised for input that cannot be turned into an instance."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


@dataclass
class Problem:
    instance: SATInstance
    options: Dict[str, Any] = field(default_factory=dict)


def parse_literal(token: str) -> tuple[str, LiteralState]:
    if token.startswith("~"):
        return token[1:], LiteralState.NEGATED
    return token, LiteralState.NORMAL


def parse_clause(tokens: Iterable[str], instance: SATInstance, line: int | None = None) -> None:
    """Add one clause built from literal tokens such as ``A`` or ``~B``."""
    clause: Clause = []
    for token in tokens:
        if not token:
            continue
        name, state = parse_literal(token)
        if not name:
            raise ParseError(f"literal {token!r} has no variable name", line)
        add_literal_to_clause(name, state, clause, instance)
    if not clause:
        raise ParseError("clause has no literals", line)
    add_clause_to_instance(clause, instance)


def parse_instance(lines: Iterable[str]) -> SATInstance:
    """Build an instance from text, one clause per line.

    Blank lines and lines starting with ``#`` are skipped.
    """
    instance = SATInstance()
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parse_clause(line.split(" "), instance, lineno)
    return instance


def parse_yaml(data: Any) -> Problem:
    if not isinstance(data, dict) or "clauses" not in data:
        raise ParseError("YAML instance must be a mapping with a 'clauses' list")
    clauses = data["clauses"] or []
    if not isinstance(clauses, list):
        raise ParseError("'clauses' must be a list")
    instance = SATInstance()
    for n, entry in enumerate(clauses, start=1):
        if isinstance(entry, str):
            tokens: List[str] = entry.strip().split(" ")
        elif isinstance(entry, list):
            tokens = [str(tok).strip() for tok in entry]
        else:
            raise ParseError(f"clause {n} must be a string or a list of literals")
        parse_clause(tokens, instance)
    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise ParseError("'options' must be a mapping")
    return Problem(instance=instance, options=options)


def load_problem(source: Union[str, Path, TextIO, None] = None) -> Problem:
    """Load a problem from a path, an open stream, or stdin when ``source`` is None or ``-``."""
    if source is None or source == "-":
        return Problem(parse_instance(sys.stdin))
    if not isinstance(source, (str, Path)):
        return Problem(parse_instance(source))
    path = Path(source)
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            return parse_yaml(yaml.safe_load(f))
        return Problem(parse_instance(f))


def load_instance(source: Union[str, Path, TextIO, None] = None) -> SATInstance:
    return load_problem(source).instance
