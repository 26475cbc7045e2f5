"""Depth-first enumeration of satisfying assignments."""

from __future__ import annotations

import logging
from typing import Iterable, List, Set

from .assignment import Assignment, AssignmentWorkspace
from .model import LiteralAssignment, SATInstance, literal_falsified_by_assignment
from .watch import WatchList

logger = logging.getLogger(__name__)

FALSE_TRUE = (LiteralAssignment.FALSE, LiteralAssignment.TRUE)


def solve(instance: SATInstance) -> Set[Assignment]:
    """Return every satisfying assignment of ``instance``.

    Variables are assigned in index order, trying ``False`` before ``True``.
    The search keeps an explicit stack of ``[variable, next value]`` frames,
    so its depth is not bounded by the interpreter recursion limit.  An empty
    result means the instance is unsatisfiable.
    """
    watch_list = WatchList(instance)
    workspace = AssignmentWorkspace(instance.num_variables)
    solutions: Set[Assignment] = set()
    num_vars = instance.num_variables
    trace = logger.isEnabledFor(logging.DEBUG)

    stack: List[List[int]] = [[0, 0]]
    while stack:
        frame = stack[-1]
        var, step = frame
        if var == num_vars:
            solutions.add(workspace.snapshot())
            stack.pop()
            continue
        if step == len(FALSE_TRUE):
            workspace[var] = LiteralAssignment.UNASSIGNED
            stack.pop()
            continue
        value = FALSE_TRUE[step]
        frame[1] = step + 1
        if trace:
            logger.debug("Trying %s = %s", instance.variables[var], value.name.capitalize())
        workspace[var] = value
        if watch_list.falsify(literal_falsified_by_assignment(var, value), workspace):
            stack.append([var + 1, 0])

    logger.info(
        "Found %d satisfying assignment(s) over %d variable(s) and %d clause(s)",
        len(solutions), num_vars, len(instance.clauses),
    )
    return solutions


def is_satisfiable(instance: SATInstance) -> bool:
    return bool(solve(instance))


def sorted_solutions(solutions: Iterable[Assignment]) -> List[Assignment]:
    return sorted(solutions)
