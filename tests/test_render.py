from watchsat.core.assignment import Assignment
from watchsat.core.model import LiteralAssignment, SATInstance
from watchsat.core.search import solve, sorted_solutions
from watchsat.io import render
from watchsat.io.parser import parse_instance

T, F, U = LiteralAssignment.TRUE, LiteralAssignment.FALSE, LiteralAssignment.UNASSIGNED


def test_literal_and_clause_strings():
    instance = parse_instance(["A ~B", "B C"])
    assert render.literal_to_string(0, instance) == "A"
    assert render.literal_to_string(3, instance) == "~B"
    assert render.clause_to_string(instance.clauses[0], instance) == "A ~B"
    assert render.instance_to_string(instance) == "A ~B\nB C"


def test_assignment_string():
    instance = parse_instance(["A ~B"])
    assert render.assignment_to_string(Assignment((T, F)), instance) == "{A==True, B==False}"
    assert render.assignment_to_string(Assignment((T, U)), instance) == "{A==True, B==None}"


def test_empty_assignment_sentinel():
    assert render.assignment_to_string(Assignment(()), SATInstance()) == "{No assignments}"


def test_solutions_to_data():
    instance = parse_instance(["A B"])
    data = render.solutions_to_data(sorted_solutions(solve(instance)), instance)
    assert data["variables"] == ["A", "B"]
    assert data["satisfiable"] is True
    assert data["count"] == 3
    assert data["solutions"][0] == {"A": True, "B": True}
