from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .model import LiteralAssignment, SATInstance, VariableIndex


@dataclass(frozen=True, order=True)
class Assignment:
    """Immutable snapshot of variable values, ordered lexicographically."""
    values: Tuple[LiteralAssignment, ...] = ()

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, var: VariableIndex) -> LiteralAssignment:
        return self.values[var]

    def empty(self) -> bool:
        return not self.values

    def is_complete(self) -> bool:
        return LiteralAssignment.UNASSIGNED not in self.values

    def value_of(self, var: VariableIndex) -> Optional[bool]:
        value = self.values[var]
        if value is LiteralAssignment.UNASSIGNED:
            return None
        return value is LiteralAssignment.TRUE

    def as_dict(self, instance: SATInstance) -> Dict[str, Optional[bool]]:
        return {name: self.value_of(i) for i, name in enumerate(instance.variables)}


class AssignmentWorkspace:
    """Partial assignment mutated in place by the search."""

    def __init__(self, size: int) -> None:
        self._values: List[LiteralAssignment] = [LiteralAssignment.UNASSIGNED] * size

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, var: VariableIndex) -> LiteralAssignment:
        return self._values[var]

    def __setitem__(self, var: VariableIndex, value: LiteralAssignment) -> None:
        self._values[var] = value

    def snapshot(self) -> Assignment:
        return Assignment(tuple(self._values))
