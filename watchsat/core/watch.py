"""Single-watch clause tracking used to prune the backtracking search.

Every clause watches exactly one of its literals.  A watched literal is kept
either unassigned or true under the current partial assignment; when an
assignment falsifies it, the clause looks for another literal to watch and,
failing that, is reported as contradicted.

Watch moves are not rolled back when the search backtracks.  The search
assigns variables in increasing index order and only ever unassigns a suffix
of them, so a moved watch still points at a literal that is either unassigned
or assigned exactly as it was when the watch moved.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Tuple

from .assignment import AssignmentWorkspace
from .model import LiteralAssignment, LiteralCode, SATInstance, literal_is_true, literal_variable

logger = logging.getLogger(__name__)

Watchers = Deque[int]


class WatchList:
    """Per-literal queues of the clauses currently watching that literal.

    Clauses are referenced by their index in ``clauses``, a tuple copied from
    the instance when the watch list is built.  The instance itself is left
    untouched.
    """

    def __init__(self, instance: SATInstance) -> None:
        self.clauses: Tuple[Tuple[LiteralCode, ...], ...] = tuple(instance.clauses)
        self._watchers: List[Watchers] = [deque() for _ in range(2 * instance.num_variables)]
        for index, clause in enumerate(self.clauses):
            self._watchers[clause[0]].append(index)

    def __len__(self) -> int:
        return len(self._watchers)

    def watchers(self, literal: LiteralCode) -> Tuple[int, ...]:
        """Indices of the clauses watching ``literal``."""
        return tuple(self._watchers[literal])

    def table(self) -> List[Tuple[int, ...]]:
        """Watching clause indices for every literal code, in code order."""
        return [self.watchers(code) for code in range(len(self._watchers))]

    def _find_alternative(self, clause: Tuple[LiteralCode, ...], assignment: AssignmentWorkspace) -> LiteralCode | None:
        for alternative in clause:
            value = assignment[literal_variable(alternative)]
            if value is LiteralAssignment.UNASSIGNED or literal_is_true(alternative, value):
                return alternative
        return None

    def falsify(self, false_literal: LiteralCode, assignment: AssignmentWorkspace) -> bool:
        """Move every clause off ``false_literal``, which was just made false.

        Returns ``False`` as soon as one of those clauses has no literal left
        that is unassigned or true; that clause stays at the front of the
        queue for ``false_literal``.  Returns ``True`` once the queue is empty.
        """
        watching = self._watchers[false_literal]
        while watching:
            index = watching[0]
            clause = self.clauses[index]
            alternative = self._find_alternative(clause, assignment)
            if alternative is None:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Contradicted clause %d %s under %s", index, clause, assignment.snapshot())
                return False
            watching.popleft()
            self._watchers[alternative].append(index)
        return True
