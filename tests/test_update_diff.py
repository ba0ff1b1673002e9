from unittest.mock import patch
import subprocess

import pytest

from macrokata.check import check
from macrokata.diffing import unified_diff
from macrokata.update_diff import update_diff

MAIN = "fn main() {}\n"
SOLUTION = "fn main() {\n    println!(\"hi\");\n}\n"


def _make(root, name="ex"):
    solutions = root / "exercises" / name / "solutions"
    solutions.mkdir(parents=True)
    (root / "exercises" / name / "main.rs").write_text(MAIN)
    (solutions / "main.rs").write_text(SOLUTION)
    return solutions / "solution.diff"


def test_writes_diff_file(tmp_path):
    diff_path = _make(tmp_path)
    written = update_diff("ex", tmp_path)
    assert diff_path.read_text() == written
    assert "+    println!(\"hi\");" in written.splitlines()


def test_updated_diff_passes_check(tmp_path):
    _make(tmp_path)
    written = update_diff("ex", tmp_path)
    assert written == unified_diff(MAIN, SOLUTION)
    done = subprocess.CompletedProcess(args=[], returncode=0)
    with patch("macrokata.check.subprocess.run", return_value=done) as run:
        assert check("ex", tmp_path) is None
    assert run.call_count == 1
    assert run.call_args.args[0] == ["cargo", "clippy", "--bin", "ex_soln"]


def test_overwrites_stale_diff(tmp_path):
    diff_path = _make(tmp_path)
    diff_path.write_text("stale")
    assert update_diff("ex", tmp_path) == diff_path.read_text()
    assert "stale" not in diff_path.read_text()


def test_missing_exercise_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        update_diff("nope", tmp_path)