"""End-to-end tests of proving entailments from formula text."""

import io

import pytest

from propatlas import (
    FormulaTooLargeError, MissingOpeningParenthesisError, ProofReporter, UnknownSymbolError,
    Verdict, format_conjunction, list_consequences, prove, prove_problem, refute
)
from propatlas.fileformats import get_format_handler


def quiet_prove(premises, conclusion, **kwargs):
    return prove(premises, conclusion, reporter=None, **kwargs)


class TestEntailments:
    """Test classic argument forms in both rule modes."""

    @pytest.mark.parametrize("strict", [False, True])
    @pytest.mark.parametrize("premises,conclusion", [
        (["A>B", "A"], "B"),
        (["A>B", "-B"], "-A"),
        (["A|B", "-A"], "B"),
        (["A>B", "B>C"], "A>C"),
        (["A&B"], "B&A"),
        ([], "A|-A"),
        (["A"], "A"),
    ])
    def test_valid_arguments(self, premises, conclusion, strict):
        proof = quiet_prove(premises, conclusion, strict=strict)
        assert proof.verdict is Verdict.PROVEN

    @pytest.mark.parametrize("strict", [False, True])
    def test_contingent_conclusion(self, strict):
        proof = quiet_prove([], "A", strict=strict)
        assert proof.verdict is Verdict.SATURATED

    def test_affirming_the_consequent_strict(self):
        proof = quiet_prove(["A>B", "B"], "A", strict=True)
        assert proof.verdict is Verdict.SATURATED

    def test_affirming_the_consequent_positional(self):
        """The positional rule cancels two clashes at once and accepts this fallacy."""
        proof = quiet_prove(["A>B", "B"], "A", strict=False)
        assert proof.verdict is Verdict.PROVEN

    def test_inconsistent_premises(self):
        proof = quiet_prove(["A&-A"], "B", strict=True)
        assert proof.verdict is Verdict.PROVEN

    def test_goal_without_clauses(self):
        """Test that an always-true goal formula gives no clauses to refute."""
        proof = quiet_prove(["A|-A"], "A&-A")
        assert proof.verdict is Verdict.SATURATED
        assert len(proof.clauses) == 0


class TestReports:

    def test_modus_ponens_stdout(self, capsys):
        proof = prove(["A>B", "A"], "B")

        assert proof.is_complete
        assert capsys.readouterr().out.splitlines() == [
            "Set of clauses:",
            "{(A | B), (A | -B), (-A | B), (-A | -B)}",
            "Resolve (A | B) and (A | -B): (A)",
            "Resolve (A | B) and (-A | B): (B)",
            "Resolve (A | B) and (-A | -B): empty resolvent",
            "An empty resolvent has been obtained; the theorem is proven",
        ]

    def test_refute_is_quiet_by_default(self, capsys):
        proof = refute("A&-A")

        assert proof.is_complete
        assert capsys.readouterr().out == ""

    def test_custom_reporter(self):
        stream = io.StringIO()
        prove(["A"], "A", reporter=ProofReporter(stream=stream))
        assert stream.getvalue().splitlines()[1] == "{(A), (-A)}"


class TestErrors:
    """Test that parse errors reach the caller."""

    def test_unknown_symbol(self):
        with pytest.raises(UnknownSymbolError):
            quiet_prove(["A*B"], "A")

    def test_unbalanced_premise(self):
        with pytest.raises(MissingOpeningParenthesisError):
            quiet_prove(["A)"], "(A")

    def test_variable_limit(self):
        with pytest.raises(FormulaTooLargeError):
            quiet_prove(["A&B"], "C", max_variables=2)


class TestProblemFiles:

    def test_prove_parsed_problem(self, tmp_path):
        path = tmp_path / "syllogism.prop"
        path.write_text("% hypothetical syllogism\n"
                        "premise: a > b.\n"
                        "premise: b > c.\n"
                        "conclusion: a > c.\n")

        problem = get_format_handler(path).parse_file(path)
        proof = prove_problem(problem, strict=True)

        assert proof.is_complete
        assert proof.metadata["problem"] == "syllogism"
        assert proof.metadata["formula"] == "-(((A>B)&(B>C))>(A>C))"


class TestConsequences:

    def test_consequences_are_provable(self):
        """Test that the classical prover proves every listed consequence."""
        premises = ["A>B", "A"]
        results = list(list_consequences(premises))

        assert len(results) == 7
        for clauses in results:
            conclusion = format_conjunction(clauses, clauses.variables)
            assert quiet_prove(premises, conclusion, strict=True).is_complete

    def test_requires_premises(self):
        with pytest.raises(ValueError):
            list_consequences([])
