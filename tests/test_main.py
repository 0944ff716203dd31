import io
import sys

import pytest
from mlisp.__main__ import main


def run_main(monkeypatch, argv, stdin=""):
    out = io.StringIO()
    monkeypatch.setattr(sys, "argv", ["mlisp", *argv])
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    monkeypatch.setattr(sys, "stdout", out)
    with pytest.raises(SystemExit) as exc:
        main()
    return exc.value.code, out.getvalue()


def test_reads_file(tmp_path, monkeypatch):
    src = tmp_path / "prog.lisp"
    src.write_text("(define x '(1 2))\n")
    code, out = run_main(monkeypatch, [str(src)])
    assert code == 0
    assert out == "(define x (quote (1.000000 2.000000)))\n"


def test_reads_stdin(monkeypatch):
    code, out = run_main(monkeypatch, [], stdin="(a . b)\n")
    assert code == 0
    assert out == "(a . b)\n"


def test_error_exit_status(monkeypatch, capsys):
    code, _ = run_main(monkeypatch, [], stdin="())\n")
    assert code == 1


def test_usage(monkeypatch):
    code, _ = run_main(monkeypatch, ["a", "b"])
    assert code == 2
