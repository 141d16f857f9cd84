#!/usr/bin/env python3
"""
Prove every problem in a directory and summarize the results.

USAGE:
    propatlas-bench problems/
    propatlas-bench problems/ --strict --timeout 5 --output results.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from propatlas import prove_problem
from propatlas.core.exceptions import FormulaError
from propatlas.fileformats import get_format_handler

logger = logging.getLogger(__name__)


def find_problems(directory: Path, extension: str = ".prop"):
    return sorted(path for path in directory.rglob(f"*{extension}") if path.is_file())


def run_problem(path: Path, strict=None, timeout=None) -> dict:
    result = {"problem": str(path), "verdict": None, "steps": 0, "clauses": 0, "time": 0.0}
    try:
        problem = get_format_handler(path).parse_file(path)
        proof = prove_problem(problem, strict=strict, timeout=timeout)
    except FormulaError as e:
        logger.warning("Skipping %s: %s", path, e)
        result["error"] = str(e)
        return result
    result.update(
        verdict=proof.verdict.value,
        steps=proof.length,
        clauses=len(proof.clauses),
        time=proof.elapsed,
    )
    return result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Prove all .prop problems in a directory")
    parser.add_argument("directory", type=Path, help="Directory searched recursively for .prop files")
    parser.add_argument("--timeout", type=float, help="Time budget per problem in seconds")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="Only resolve clauses that clash on exactly one variable")
    parser.add_argument("--output", type=Path, help="Write results as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if not args.directory.is_dir():
        print(f"Error: Not a directory: {args.directory}", file=sys.stderr)
        return 2

    problems = find_problems(args.directory)
    results = []
    proven = 0
    for path in (pbar := tqdm(problems, desc="Proving")):
        pbar.set_postfix({'Proven': proven, 'Problem': path.name})
        result = run_problem(path, strict=args.strict, timeout=args.timeout)
        if result["verdict"] == "proven":
            proven += 1
        results.append(result)
    pbar.set_postfix({'Proven': proven})

    summary = {
        "total": len(results),
        "proven": proven,
        "errors": sum(1 for r in results if "error" in r),
        "results": results,
    }
    print(f"Proven {proven}/{len(results)}")

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(summary, f, indent=2)

    return 0


if __name__ == "__main__":
    sys.exit(main())
