"""Runs every script under examples/ as __main__."""

import runpy
from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"
SCRIPTS = sorted(EXAMPLES_DIR.glob("0*.py"))


def test_scripts_found():
    assert len(SCRIPTS) == 4


@pytest.mark.parametrize("script", SCRIPTS, ids=lambda path: path.stem)
def test_script_runs(script, monkeypatch, capsys):
    monkeypatch.syspath_prepend(str(EXAMPLES_DIR))

    runpy.run_path(str(script), run_name="__main__")

    output = capsys.readouterr().out
    assert output.startswith(f"\n== {script.stem}:")


def test_infra_has_no_runner():
    source = (EXAMPLES_DIR / "_infra.py").read_text()

    assert "def run(" not in source
