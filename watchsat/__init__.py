"""Enumerate every satisfying assignment of a CNF formula."""

from .core.model import SATInstance, LiteralAssignment, LiteralState, add_clause_to_instance, add_literal_to_clause
from .core.search import solve

__all__ = [
    "SATInstance",
    "LiteralAssignment",
    "LiteralState",
    "add_clause_to_instance",
    "add_literal_to_clause",
    "solve",
]
