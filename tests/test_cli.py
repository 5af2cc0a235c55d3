import pytest

from kappa.__main__ import EXIT_ERROR, EXIT_USAGE, main


@pytest.fixture
def program(tmp_path):
    def write(source: str) -> str:
        path = tmp_path / "program.scm"
        path.write_text(source, encoding="utf-8")
        return str(path)
    return write


def test_usage(capsys):
    assert main([]) == EXIT_USAGE
    assert capsys.readouterr().out == "usage: \n    kappa <file_name> \n"


def test_runs_program_to_completion(program, capsys):
    path = program("""
        ; factorial
        (define (fact n) (if (<= n 1) 1 (* n (fact (- n 1)))))
        (fact 5)
    """)
    assert main([path]) == 0
    assert capsys.readouterr().out == "==> fact\n==> 120\n==> program done\n"


def test_error_stops_the_program(program, capsys):
    path = program("(define x 1)\n(/ x 0)\n(+ 1 1)\n")
    assert main([path]) == EXIT_ERROR
    captured = capsys.readouterr()
    assert captured.out == "==> x\n==> "
    assert captured.err.strip().splitlines()[-1] == "error: /: division by zero"


def test_unbound_symbol_reported(program, capsys):
    assert main([program("missing")]) == EXIT_ERROR
    assert "error: unbound symbol: missing" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.scm")]) == EXIT_ERROR
    assert capsys.readouterr().err.startswith("error: cannot load")


def test_runaway_recursion(program, capsys, monkeypatch):
    monkeypatch.setenv("KAPPA_RECURSION_LIMIT", "2000")
    path = program("(define (loop n) (loop n))\n(loop 1)\n")
    assert main([path]) == EXIT_ERROR
    assert "error: maximum recursion depth exceeded" in capsys.readouterr().err
