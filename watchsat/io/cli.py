"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys

import yaml

from ..core.check import unsatisfied_clauses
from ..core.model import EmptyClauseError
from ..core.search import solve, sorted_solutions
from ..core.watch import WatchList
from . import parser, render
from .config import OUTPUT_FORMATS, ConfigError, SolverOptions

logger = logging.getLogger(__name__)

EXIT_SAT = 0
EXIT_UNSAT = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Enumerate all satisfying assignments of a CNF formula")
    ap.add_argument("instance", nargs="?", default="-", help="Clause file (text or YAML); '-' reads stdin")
    ap.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, default=None, help="Output format")
    ap.add_argument("--verify", action="store_true", default=None, help="Re-check every solution against the clauses")
    ap.add_argument("--log-level", default=None, help="Logging level, e.g. INFO or DEBUG")
    ap.add_argument("--trace", action="store_true", help="Log every search step (same as --log-level DEBUG)")
    ap.add_argument("--quiet", action="store_true", help="Do not echo the instance before solving")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        problem = parser.load_problem(args.instance)
        options = SolverOptions.from_mapping(problem.options).merged(
            output_format=args.output_format,
            verify=args.verify,
            log_level="DEBUG" if args.trace else args.log_level,
            show_instance=False if args.quiet else None,
        )
    except (OSError, yaml.YAMLError, parser.ParseError, ConfigError, EmptyClauseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    logging.basicConfig(level=options.level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    instance = problem.instance
    logger.info("Loaded %d clause(s) over %d variable(s)", len(instance.clauses), instance.num_variables)

    if options.output_format == "text" and options.show_instance:
        print("Read instance!")
        print(render.instance_to_string(instance))
        print()

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Initial watches:\n%s", render.watch_table_to_string(WatchList(instance).table(), instance))

    solutions = sorted_solutions(solve(instance))

    if options.verify:
        bad = [sol for sol in solutions if unsatisfied_clauses(instance, sol)]
        for sol in bad:
            logger.error("Unsound solution %s", render.assignment_to_string(sol, instance))
        if bad:
            return EXIT_ERROR

    if options.output_format == "yaml":
        yaml.safe_dump(render.solutions_to_data(solutions, instance), sys.stdout, sort_keys=False)
    else:
        print(f"{len(solutions)} satisfying assignment(s)")
        for sol in solutions:
            print(render.assignment_to_string(sol, instance))

    return EXIT_SAT if solutions else EXIT_UNSAT


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
