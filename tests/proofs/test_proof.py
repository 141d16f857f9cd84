"""Tests for proof traces and their serialization."""

import json

import networkx as nx
import pytest

from propatlas.core.clause import Clause, ClauseSet
from propatlas.core.tokens import Token
from propatlas.loops import ResolutionLoop
from propatlas.proofs import (
    Proof, ResolutionStep, Verdict,
    load_proof, proof_from_json, proof_to_json, save_proof
)
from propatlas.proofs.proof import EMPTY_NODE

AB = (Token('A'), Token('B'))


@pytest.fixture
def classical_proof():
    clauses = ClauseSet(AB, [
        Clause.from_literals(AB, literals)
        for literals in (["A", "B"], ["A", "-B"], ["-A", "B"], ["-A", "-B"])
    ])
    return ResolutionLoop(rule="classical").run(clauses)


class TestProof:
    """Test Proof class."""

    def test_empty_proof(self):
        proof = Proof(clauses=ClauseSet(AB), initial_size=0)

        assert proof.length == 0
        assert proof.verdict is None
        assert not proof.is_complete
        assert proof.used_steps() == []
        assert proof.used_clauses() == []

    def test_add_step(self):
        clauses = ClauseSet(AB, [Clause.from_literals(AB, ["A"]), Clause.from_literals(AB, ["-A"])])
        proof = Proof(clauses=clauses, initial_size=2)
        step = ResolutionStep(parents=[0, 1], resolvent=Clause.empty(2), round=1)

        assert proof.add_step(step) is proof
        assert proof.steps == [step]
        assert step.is_empty

    def test_initial_and_derived(self, classical_proof):
        assert len(classical_proof.initial_clauses) == 4
        assert len(classical_proof.derived_clauses) == 4
        assert classical_proof.variables == AB

    def test_derivation_graph(self, classical_proof):
        graph = classical_proof.derivation_graph()

        assert isinstance(graph, nx.DiGraph)
        assert set(graph.predecessors(4)) == {0, 1}
        assert set(graph.predecessors(EMPTY_NODE)) == {4, 7}
        assert graph.nodes[0]["initial"]
        assert not graph.nodes[4]["initial"]
        assert nx.is_directed_acyclic_graph(graph)

    def test_used_steps(self, classical_proof):
        """Test that only the ancestors of the empty clause are kept."""
        used = classical_proof.used_steps()

        assert [step.parents for step in used] == [[0, 1], [2, 3], [4, 7]]
        assert used[-1].is_empty

    def test_used_clauses(self, classical_proof):
        assert classical_proof.used_clauses() == [0, 1, 2, 3]

    def test_used_clauses_initial_empty(self):
        clauses = ClauseSet(AB, [Clause.from_literals(AB, ["A"]), Clause.empty(2)])
        proof = ResolutionLoop().run(clauses)

        assert proof.used_steps() == []
        assert proof.used_clauses() == [1]


class TestProofSerialization:
    """Test proof JSON round trips."""

    def test_to_json(self, classical_proof):
        data = json.loads(proof_to_json(classical_proof))

        assert data["_type"] == "Proof"
        assert data["verdict"] == "proven"
        assert data["rounds"] == 2
        assert len(data["steps"]) == 5
        assert data["steps"][-1]["resolvent_index"] is None

    def test_round_trip(self, classical_proof):
        restored = proof_from_json(proof_to_json(classical_proof))

        assert restored.verdict is Verdict.PROVEN
        assert restored.clauses == classical_proof.clauses
        assert restored.initial_size == classical_proof.initial_size
        assert restored.steps == classical_proof.steps
        assert restored.metadata == {"rule": "classical"}

    def test_file_round_trip(self, classical_proof, tmp_path):
        path = tmp_path / "proof.json"
        save_proof(classical_proof, path)
        restored = load_proof(path)

        assert restored.used_clauses() == [0, 1, 2, 3]
