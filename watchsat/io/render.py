"""Human-readable formatting of literals, clauses, instances and assignments."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

from ..core.assignment import Assignment
from ..core.model import LiteralAssignment, LiteralCode, SATInstance, literal_is_negated, literal_variable

NO_ASSIGNMENTS = "{No assignments}"

_VALUE_NAMES = {
    LiteralAssignment.UNASSIGNED: "None",
    LiteralAssignment.TRUE: "True",
    LiteralAssignment.FALSE: "False",
}


def literal_to_string(literal: LiteralCode, instance: SATInstance) -> str:
    prefix = "~" if literal_is_negated(literal) else ""
    return prefix + instance.variables[literal_variable(literal)]


def clause_to_string(clause: Iterable[LiteralCode], instance: SATInstance) -> str:
    return " ".join(literal_to_string(lit, instance) for lit in clause)


def instance_to_string(instance: SATInstance) -> str:
    return "\n".join(clause_to_string(clause, instance) for clause in instance.clauses)


def value_to_string(value: LiteralAssignment) -> str:
    return _VALUE_NAMES[value]


def assignment_to_string(assignment: Assignment, instance: SATInstance) -> str:
    """Render as ``{A==True, B==False}`` in variable index order."""
    if assignment.empty():
        return NO_ASSIGNMENTS
    parts = [
        f"{name}=={value_to_string(assignment[i])}"
        for i, name in enumerate(instance.variables)
    ]
    return "{" + ", ".join(parts) + "}"


def watch_table_to_string(table: Sequence[Sequence[int]], instance: SATInstance) -> str:
    """One ``Watching <literal>: [<clause>] ...`` line per literal code."""
    lines = []
    for code, watching in enumerate(table):
        clauses = "".join(f" [{clause_to_string(instance.clauses[i], instance)}]" for i in watching)
        lines.append(f"Watching {literal_to_string(code, instance)}:{clauses}")
    return "\n".join(lines)


def solutions_to_data(solutions: Iterable[Assignment], instance: SATInstance) -> Dict[str, Any]:
    """Plain data suitable for ``yaml.safe_dump``."""
    rows: List[Dict[str, Any]] = [sol.as_dict(instance) for sol in solutions]
    return {
        "variables": list(instance.variables),
        "satisfiable": bool(rows),
        "count": len(rows),
        "solutions": rows,
    }
