"""JSON serialization for proof objects."""

import json
from pathlib import Path
from typing import Union

from propatlas.core.serialization import CoreJSONEncoder, decode_core_object
from .proof import Proof, ResolutionStep, Verdict


class ProofJSONEncoder(CoreJSONEncoder):
    """JSON encoder for proof objects."""

    def default(self, obj):
        if isinstance(obj, Verdict):
            return obj.value

        elif isinstance(obj, ResolutionStep):
            return {
                "_type": "ResolutionStep",
                "parents": obj.parents,
                "resolvent": obj.resolvent,
                "resolvent_index": obj.resolvent_index,
                "round": obj.round,
                "rule_name": obj.rule_name
            }

        elif isinstance(obj, Proof):
            return {
                "_type": "Proof",
                "clauses": obj.clauses,
                "initial_size": obj.initial_size,
                "steps": obj.steps,
                "verdict": obj.verdict,
                "rounds": obj.rounds,
                "elapsed": obj.elapsed,
                "metadata": obj.metadata
            }

        # Fall back to parent encoder
        return super().default(obj)


class ProofJSONDecoder(json.JSONDecoder):
    """JSON decoder for proof objects."""

    def __init__(self):
        super().__init__(object_hook=self.object_hook)

    def object_hook(self, obj):
        # First try core decoder
        result = decode_core_object(obj)
        if result is not obj:
            return result

        if obj.get("_type") == "ResolutionStep":
            return ResolutionStep(
                parents=obj["parents"],
                resolvent=obj["resolvent"],
                resolvent_index=obj.get("resolvent_index"),
                round=obj.get("round", 0),
                rule_name=obj.get("rule_name", "positional")
            )

        elif obj.get("_type") == "Proof":
            verdict = obj.get("verdict")
            return Proof(
                clauses=obj["clauses"],
                initial_size=obj["initial_size"],
                steps=obj.get("steps", []),
                verdict=Verdict(verdict) if verdict else None,
                rounds=obj.get("rounds", 0),
                elapsed=obj.get("elapsed", 0.0),
                metadata=obj.get("metadata", {})
            )

        return obj


def proof_to_json(proof: Proof, indent: int = 2) -> str:
    """Convert a proof to JSON string."""
    return json.dumps(proof, cls=ProofJSONEncoder, indent=indent)


def proof_from_json(json_str: str) -> Proof:
    """Convert JSON string to a proof."""
    return json.loads(json_str, cls=ProofJSONDecoder)


def save_proof(proof: Proof, filepath: Union[str, Path]) -> None:
    """Save a proof to a JSON file."""
    with open(filepath, 'w') as f:
        json.dump(proof, f, cls=ProofJSONEncoder, indent=2)


def load_proof(filepath: Union[str, Path]) -> Proof:
    """Load a proof from a JSON file."""
    with open(filepath, 'r') as f:
        return json.load(f, cls=ProofJSONDecoder)
