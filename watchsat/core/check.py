"""Independent satisfaction checks used to verify search results."""

from __future__ import annotations

import itertools
from typing import Iterable, List, Set

from .assignment import Assignment
from .model import LiteralAssignment, LiteralCode, SATInstance, literal_is_true, literal_variable


def clause_satisfied(clause: Iterable[LiteralCode], assignment: Assignment) -> bool:
    return any(literal_is_true(lit, assignment[literal_variable(lit)]) for lit in clause)


def satisfies(instance: SATInstance, assignment: Assignment) -> bool:
    """True when every clause of ``instance`` has a true literal under ``assignment``."""
    return all(clause_satisfied(c, assignment) for c in instance.clauses)


def unsatisfied_clauses(instance: SATInstance, assignment: Assignment) -> List[int]:
    return [i for i, c in enumerate(instance.clauses) if not clause_satisfied(c, assignment)]


def brute_force_solutions(instance: SATInstance) -> Set[Assignment]:
    """Try all 2**N total assignments.  Only sensible for small instances."""
    result = set()
    for values in itertools.product((LiteralAssignment.FALSE, LiteralAssignment.TRUE), repeat=instance.num_variables):
        candidate = Assignment(tuple(values))
        if satisfies(instance, candidate):
            result.add(candidate)
    return result
