#!/usr/bin/env python3
"""
Prove a propositional conclusion from premises.

USAGE:
    propatlas-prove problem.prop
    propatlas-prove -p "A>B" -p "A" -c "B"
    propatlas-prove problem.prop --strict --timeout 10
    propatlas-prove problem.prop --json proof.json
    propatlas-prove -p "A>B" -p "A" --consequences
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

import yaml

from propatlas import list_consequences, prove_problem
from propatlas.core.exceptions import FormulaError
from propatlas.core.problem import Problem
from propatlas.fileformats import get_format_handler
from propatlas.proofs import save_proof
from propatlas.reporting import ProofReporter, format_conjunction
from propatlas.utils.config import Config

EXIT_PROVEN = 0
EXIT_UNPROVEN = 1
EXIT_ERROR = 2


def print_error(message: str):
    print(f"*** ERROR! {message}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Prove a conclusion from premises by resolution",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("problem", type=Path, nargs="?", help="Path to a .prop problem file")
    parser.add_argument("-p", "--premise", action="append", dest="premises", default=[],
                        help="Premise formula (repeatable)")
    parser.add_argument("-c", "--conclusion", help="Conclusion formula")
    parser.add_argument("--timeout", type=float, help="Time budget in seconds (default: 100)")
    parser.add_argument("--max-clauses", type=int, help="Give up once this many clauses exist")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="Only resolve clauses that clash on exactly one variable")
    parser.add_argument("--consequences", action="store_true",
                        help="List the consequences of the premises instead of proving")
    parser.add_argument("--config", type=Path, help="Path to a YAML config file")
    parser.add_argument("--json", dest="json_output", type=Path, help="Export the proof attempt to JSON")
    parser.add_argument("--quiet", action="store_true", help="Print only the verdict")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    return parser


def read_problem_file(args, parser) -> Problem:
    if args.premises or args.conclusion:
        parser.error("give either a problem file or --premise/--conclusion, not both")
    if not args.problem.exists():
        raise FileNotFoundError(f"File not found: {args.problem}")
    return get_format_handler(args.problem).parse_file(args.problem)


def load_problem(args, parser) -> Problem:
    if args.problem is not None:
        return read_problem_file(args, parser)

    if args.conclusion is None:
        parser.error("a problem file or --conclusion is required")
    return Problem(premises=args.premises, conclusion=args.conclusion)


def load_premises(args, parser) -> List[str]:
    if args.problem is not None:
        return read_problem_file(args, parser).premises

    if not args.premises:
        parser.error("--consequences needs a problem file or --premise")
    return args.premises


def print_consequences(args, parser, config) -> int:
    premises = load_premises(args, parser)
    results = list_consequences(premises, config=config)
    if not args.quiet:
        print("All consequence formulas:")
    for clauses in results:
        print(format_conjunction(clauses, clauses.variables))
    return EXIT_PROVEN


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config(str(args.config)) if args.config else None
        if args.consequences:
            return print_consequences(args, parser, config)

        problem = load_problem(args, parser)
        reporter = ProofReporter(stream=None if args.quiet else sys.stdout)
        proof = prove_problem(
            problem,
            strict=args.strict,
            timeout=args.timeout,
            max_clauses=args.max_clauses,
            reporter=reporter,
            config=config,
        )

        if args.quiet:
            print(proof.verdict.value)

        if args.json_output:
            save_proof(proof, args.json_output)
            print(f"Proof exported to {args.json_output}", file=sys.stderr)
    except (FormulaError, OSError, ValueError, yaml.YAMLError) as e:
        print_error(str(e))
        return EXIT_ERROR

    return EXIT_PROVEN if proof.is_complete else EXIT_UNPROVEN


if __name__ == "__main__":
    sys.exit(main())
