"""
Proof representation and management.
"""

from .proof import Proof, ResolutionStep, Verdict
from .serialization import (
    ProofJSONEncoder, ProofJSONDecoder,
    proof_to_json, proof_from_json,
    save_proof, load_proof
)

__all__ = [
    'Proof', 'ResolutionStep', 'Verdict',
    'ProofJSONEncoder', 'ProofJSONDecoder',
    'proof_to_json', 'proof_from_json',
    'save_proof', 'load_proof'
]
