"""Tests for the command line entry points."""

import json

import pytest

from propatlas.cli import bench, prove
from propatlas.proofs import Verdict, load_proof


@pytest.fixture
def problem_dir(tmp_path):
    (tmp_path / "modus_ponens.prop").write_text("premise: A > B.\npremise: A.\nconclusion: B.\n")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "contingent.prop").write_text("conclusion: A.\n")
    (tmp_path / "broken.prop").write_text("premise: A + B.\nconclusion: A.\n")
    (tmp_path / "notes.txt").write_text("not a problem")
    return tmp_path


class TestProveCommand:
    """Test propatlas-prove."""

    def test_inline_problem(self, capsys):
        code = prove.main(["-p", "A>B", "-p", "A", "-c", "B"])

        out = capsys.readouterr().out
        assert code == prove.EXIT_PROVEN
        assert out.startswith("Set of clauses:\n")
        assert "Resolve (A | B) and (-A | -B): empty resolvent" in out

    def test_problem_file(self, problem_dir, capsys):
        code = prove.main([str(problem_dir / "modus_ponens.prop"), "--quiet"])

        assert code == prove.EXIT_PROVEN
        assert capsys.readouterr().out == "proven\n"

    def test_unproven(self, capsys):
        code = prove.main(["-p", "A>B", "-p", "B", "-c", "A", "--strict", "--quiet"])

        assert code == prove.EXIT_UNPROVEN
        assert capsys.readouterr().out == "saturated\n"

    def test_formula_error(self, capsys):
        code = prove.main(["-c", "A+"])

        assert code == prove.EXIT_ERROR
        assert capsys.readouterr().err.strip() == "*** ERROR! Unknown symbol '+'!"

    def test_missing_file(self, tmp_path, capsys):
        code = prove.main([str(tmp_path / "absent.prop")])

        assert code == prove.EXIT_ERROR
        assert "File not found" in capsys.readouterr().err

    def test_file_and_inline_conflict(self, problem_dir):
        with pytest.raises(SystemExit):
            prove.main([str(problem_dir / "modus_ponens.prop"), "-c", "B"])

    def test_json_export(self, tmp_path, capsys):
        output = tmp_path / "proof.json"
        code = prove.main(["-p", "A", "-c", "A", "--quiet", "--json", str(output)])

        assert code == prove.EXIT_PROVEN
        proof = load_proof(output)
        assert proof.verdict is Verdict.PROVEN
        assert proof.metadata["formula"] == "-(((A))>(A))"

    def test_config_file(self, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text("prover:\n  timeout: 0\n")

        code = prove.main(["-p", "A>B", "-p", "A", "-c", "B", "--quiet", "--config", str(config)])

        assert code == prove.EXIT_UNPROVEN
        assert capsys.readouterr().out == "budget_exceeded\n"

    def test_malformed_config(self, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text("prover: [timeout\n")

        code = prove.main(["-c", "A|-A", "--config", str(config)])

        assert code == prove.EXIT_ERROR
        assert capsys.readouterr().err.startswith("*** ERROR! ")

    def test_invalid_timeout_in_environment(self, tmp_path, monkeypatch, capsys):
        config = tmp_path / "config.yaml"
        config.write_text('prover:\n  timeout: "${PROPATLAS_TIMEOUT:100}"\n')
        monkeypatch.setenv("PROPATLAS_TIMEOUT", "ten")

        code = prove.main(["-c", "A|-A", "--quiet", "--config", str(config)])

        assert code == prove.EXIT_ERROR
        assert "prover.timeout" in capsys.readouterr().err

    def test_unwritable_json_path(self, tmp_path, capsys):
        code = prove.main(["-c", "A|-A", "--quiet", "--json", str(tmp_path)])

        assert code == prove.EXIT_ERROR
        assert "*** ERROR! " in capsys.readouterr().err

    def test_consequences(self, capsys):
        code = prove.main(["-p", "A", "-p", "B", "--consequences"])

        lines = capsys.readouterr().out.splitlines()
        assert code == prove.EXIT_PROVEN
        assert lines[0] == "All consequence formulas:"
        assert lines[1:] == [
            "(-A | B)",
            "(A | -B)",
            "(A | -B) & (-A | B)",
            "(A | B)",
            "(A | B) & (-A | B)",
            "(A | B) & (A | -B)",
            "(A | B) & (A | -B) & (-A | B)",
        ]

    def test_consequences_from_file(self, problem_dir, capsys):
        code = prove.main([str(problem_dir / "modus_ponens.prop"), "--consequences", "--quiet"])

        assert code == prove.EXIT_PROVEN
        assert len(capsys.readouterr().out.splitlines()) == 7

    def test_consequences_need_premises(self):
        with pytest.raises(SystemExit):
            prove.main(["--consequences"])


class TestBenchCommand:
    """Test propatlas-bench."""

    def test_find_problems(self, problem_dir):
        names = [path.name for path in bench.find_problems(problem_dir)]
        assert names == ["broken.prop", "modus_ponens.prop", "contingent.prop"]

    def test_summary(self, problem_dir, tmp_path, capsys):
        output = tmp_path / "results.json"
        code = bench.main([str(problem_dir), "--output", str(output)])

        assert code == 0
        assert "Proven 1/3" in capsys.readouterr().out
        with open(output) as f:
            summary = json.load(f)
        assert summary["total"] == 3
        assert summary["errors"] == 1
        verdicts = {result["problem"].split("/")[-1]: result["verdict"] for result in summary["results"]}
        assert verdicts == {
            "broken.prop": None,
            "modus_ponens.prop": "proven",
            "contingent.prop": "saturated",
        }

    def test_not_a_directory(self, tmp_path, capsys):
        assert bench.main([str(tmp_path / "absent")]) == 2
