"""
Command-line driver tests: file mode, prompt mode and exit codes.
"""

import io

import pytest

from bfvm import cli


@pytest.fixture
def script(tmp_path):
    def write(source, name="prog.bf"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return str(path)
    return write


def test_runs_file(script, capsys, hello_world):
    assert cli.main([script(hello_world)]) == cli.EX_OK
    out, err = capsys.readouterr()
    assert out == "Hello World!\n\n"
    assert err == ""


def test_no_output_prints_nothing(script, capsys):
    assert cli.main([script("+++")]) == cli.EX_OK
    assert capsys.readouterr().out == ""


def test_input_flag(script, capsys):
    assert cli.main([script(",.,."), "--input", "ok"]) == cli.EX_OK
    assert capsys.readouterr().out == "ok\n"


def test_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.bf")]) == cli.EX_NOINPUT
    assert "Couldn't find file" in capsys.readouterr().err


def test_too_many_scripts(script, capsys):
    assert cli.main([script("+", "a.bf"), script("+", "b.bf")]) == cli.EX_USAGE
    assert "Usage: bfvm [script]" in capsys.readouterr().err


def test_parse_error_exit_code(script, capsys):
    assert cli.main([script("+[")]) == cli.EX_DATAERR
    assert "unmatched '['" in capsys.readouterr().err


def test_runtime_error_exit_code(script, capsys):
    assert cli.main([script("+++++++++++++++++++++++++++++++++.<")]) == cli.EX_SOFTWARE
    out, err = capsys.readouterr()
    assert out == "!\n"
    assert "data pointer -1" in err


def test_max_steps_flag(script, capsys):
    assert cli.main([script("+[]"), "--max-steps", "20"]) == cli.EX_SOFTWARE
    assert "step limit of 20" in capsys.readouterr().err


def test_max_steps_from_environment(script, capsys, monkeypatch):
    monkeypatch.setenv("BFVM_MAX_STEPS", "5")
    assert cli.main([script("+[]")]) == cli.EX_SOFTWARE
    assert "step limit of 5" in capsys.readouterr().err


def test_bad_environment_value_is_ignored(script, capsys, monkeypatch):
    monkeypatch.setenv("BFVM_MAX_STEPS", "lots")
    assert cli.main([script("+")]) == cli.EX_OK
    assert "BFVM_MAX_STEPS" in capsys.readouterr().err


def test_memory_size_and_dump(script, capsys):
    assert cli.main([script("+>++"), "--memory-size", "2", "--dump"]) == cli.EX_OK
    err = capsys.readouterr().err
    assert "  1   2" in err
    assert "+ > + +" in err


def test_verbose_logs_trace(script, capsys):
    assert cli.main([script("+"), "-v"]) == cli.EX_OK
    err = capsys.readouterr().err
    assert "ip=1 ptr=0 cell=1" in err


def test_prompt_runs_each_line(capsys, monkeypatch):
    lines = "++++++++[>++++++++<-]>+.\n<\n+++++++++++++++++++++++++++++++++.\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(lines))
    assert cli.main([]) == cli.EX_OK
    out, err = capsys.readouterr()
    assert "A\n" in out
    assert "!\n" in out
    assert "data pointer -1" in err


def test_prompt_reports_parse_errors_and_continues(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("]\n+++++++++++++++++++++++++++++++++.\n"))
    assert cli.main([]) == cli.EX_OK
    out, err = capsys.readouterr()
    assert "unmatched ']'" in err
    assert "!\n" in out
