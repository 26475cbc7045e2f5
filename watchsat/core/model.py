from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Sequence, Tuple


class LiteralAssignment(IntEnum):
    """Value held by a variable during search.

    The numeric values fix the lexicographic order of assignments.
    """
    UNASSIGNED = 0
    TRUE = 1
    FALSE = 2


class LiteralState(Enum):
    """Polarity of a literal as written in a clause."""
    NORMAL = 0
    NEGATED = 1


class EmptyClauseError(ValueError):
    """Raised when an empty clause is added to an instance."""


VariableIndex = int
LiteralCode = int
Clause = List[LiteralCode]


def make_literal(var: VariableIndex, state: LiteralState) -> LiteralCode:
    return var << 1 | state.value


def literal_variable(code: LiteralCode) -> VariableIndex:
    return code >> 1


def literal_is_negated(code: LiteralCode) -> bool:
    return bool(code & 1)


def literal_falsified_by_assignment(var: VariableIndex, value: LiteralAssignment) -> LiteralCode:
    """Return the code of the literal that assigning ``value`` to ``var`` makes false."""
    if value is LiteralAssignment.TRUE:
        return var << 1 | 1
    if value is LiteralAssignment.FALSE:
        return var << 1
    raise ValueError(f"cannot falsify a literal with {value!r}")


def literal_is_true(code: LiteralCode, value: LiteralAssignment) -> bool:
    """Whether ``code`` holds when its variable has ``value``."""
    if literal_is_negated(code):
        return value is LiteralAssignment.FALSE
    return value is LiteralAssignment.TRUE


@dataclass
class SATInstance:
    """Variable name table plus the clauses of a CNF formula."""
    variables: List[str] = field(default_factory=list)
    variable_table: Dict[str, VariableIndex] = field(default_factory=dict)
    clauses: List[Tuple[LiteralCode, ...]] = field(default_factory=list)

    @property
    def num_variables(self) -> int:
        return len(self.variables)


def add_literal_to_clause(variable: str, state: LiteralState, clause: Clause, instance: SATInstance) -> None:
    """Append the literal for ``variable`` to ``clause``, declaring the name on first sight."""
    index = instance.variable_table.get(variable)
    if index is None:
        index = len(instance.variables)
        instance.variable_table[variable] = index
        instance.variables.append(variable)
    clause.append(make_literal(index, state))


def add_clause_to_instance(clause: Sequence[LiteralCode], instance: SATInstance) -> None:
    if not clause:
        raise EmptyClauseError("a clause needs at least one literal")
    instance.clauses.append(tuple(clause))
