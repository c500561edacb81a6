"""
Runs the scripts under examples/ and checks what they print.
"""

import os
import runpy

EXAMPLES = os.path.join(os.path.dirname(__file__), '..', 'examples')


def _run_example(name, monkeypatch, argv=()):
    path = os.path.join(EXAMPLES, name)
    monkeypatch.setattr("sys.argv", [path, *argv])
    runpy.run_path(path, run_name="__main__")


def test_hello_world_example(capsys, monkeypatch):
    _run_example("01_hello_world.py", monkeypatch)
    out = capsys.readouterr().out
    assert out.startswith("Hello World!\n")
    assert "\x00" not in out


def test_reverse_input_example(capsys, monkeypatch):
    _run_example("02_reverse_input.py", monkeypatch, ["stressed"])
    assert capsys.readouterr().out == "desserts\n"


def test_step_budget_example(capsys, monkeypatch):
    _run_example("03_step_budget.py", monkeypatch)
    out = capsys.readouterr().out
    assert out.startswith("stopped after 25 steps, halted=False\n")
