"""JSON serialization for core objects."""

import json
from pathlib import Path
from typing import Any, Dict, Union

from .clause import Clause, ClauseSet, Polarity
from .problem import Problem
from .tokens import Token


class CoreJSONEncoder(json.JSONEncoder):
    """JSON encoder for clauses, clause sets and problems."""

    def default(self, obj):
        if isinstance(obj, Token):
            return obj.symbol

        elif isinstance(obj, Polarity):
            return obj.value

        elif isinstance(obj, Clause):
            return {
                "_type": "Clause",
                "polarities": list(obj.polarities)
            }

        elif isinstance(obj, ClauseSet):
            return {
                "_type": "ClauseSet",
                "variables": list(obj.variables),
                "clauses": list(obj.clauses)
            }

        elif isinstance(obj, Problem):
            return {
                "_type": "Problem",
                "name": obj.name,
                "premises": obj.premises,
                "premise_names": obj.premise_names,
                "conclusion": obj.conclusion
            }

        return super().default(obj)


def decode_core_object(dct: Dict[str, Any]) -> Any:
    """Decode a JSON dictionary back to core objects."""
    if "_type" not in dct:
        return dct

    obj_type = dct["_type"]

    if obj_type == "Clause":
        return Clause(*[Polarity(value) for value in dct["polarities"]])

    elif obj_type == "ClauseSet":
        return ClauseSet([Token(symbol) for symbol in dct["variables"]], dct["clauses"])

    elif obj_type == "Problem":
        return Problem(
            premises=dct["premises"],
            conclusion=dct["conclusion"],
            name=dct.get("name"),
            premise_names=dct.get("premise_names", [])
        )

    return dct


def clause_set_to_json(clauses: ClauseSet, indent: int = 2) -> str:
    return json.dumps(clauses, cls=CoreJSONEncoder, indent=indent)


def clause_set_from_json(json_str: str) -> ClauseSet:
    return json.loads(json_str, object_hook=decode_core_object)


def save_problem(problem: Problem, file_path: Union[str, Path]) -> None:
    """Save a Problem to a JSON file."""
    with open(Path(file_path), 'w') as f:
        json.dump(problem, f, cls=CoreJSONEncoder, indent=2)


def load_problem(file_path: Union[str, Path]) -> Problem:
    """Load a Problem from a JSON file."""
    with open(Path(file_path), 'r') as f:
        return json.load(f, object_hook=decode_core_object)
