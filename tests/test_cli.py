"""Tests for cppcondition CLI entrypoints."""

from __future__ import annotations

import json
import sys

import pytest

import cppcondition.main as main


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    monkeypatch.setattr(sys, "argv", ["cppcondition", *args])
    return main.main()


def test_main_requires_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Missing subcommands print help and fail."""
    exit_code = _run(monkeypatch)

    assert exit_code == 2
    assert "cppcondition" in capsys.readouterr().out


def test_parse_prints_formula(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """parse prints the Boolean formula as a condition."""
    exit_code = _run(monkeypatch, "parse", "--fuzzy", "defined(A) && B > 2")

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "A && B_gt_2"


def test_parse_non_boolean(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """--non-boolean keeps operators and macros."""
    exit_code = _run(monkeypatch, "parse", "--non-boolean", "func(A) > (B + 1)")

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "func(A) > B + 1"


def test_parse_json_format(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """JSON output is node-link data."""
    exit_code = _run(monkeypatch, "parse", "-f", "json", "defined(A) || !defined(B)")

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert [node["type"] for node in data["nodes"]] == [
        "disjunction",
        "variable",
        "negation",
        "variable",
    ]


def test_parse_show_ast(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """--show-ast prints the resolved tree before the formula."""
    exit_code = _run(monkeypatch, "parse", "--show-ast", "defined(A) && 1")

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "BOOL_AND" in out
    assert "defined()" in out


def test_parse_invalid_condition(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Invalid conditions exit with 1 and a marked error message."""
    exit_code = _run(monkeypatch, "parse", "defined(A) || ")

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "both sides of binary operator" in err
    assert "In formula: defined(A) ||" in err


def test_parse_invalid_condition_substituted(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """--invalid selects the substitution policy."""
    exit_code = _run(monkeypatch, "parse", "--invalid", "error_variable", "defined(A) || ")

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "PARSING_ERROR"


def test_parse_with_config(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Inline configuration enables options."""
    exit_code = _run(
        monkeypatch, "parse", "--config", '{"handle_linux_macros": true}', "IS_ENABLED(A)"
    )

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "A || A_MODULE"


def test_parse_with_bad_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Invalid settings exit with 2."""
    exit_code = _run(
        monkeypatch, "parse", "--config", '{"invalid_condition": "sometimes"}', "defined(A)"
    )

    assert exit_code == 2


def test_variables_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """variables prints sorted variable names, one per line."""
    exit_code = _run(monkeypatch, "variables", "--non-boolean", "C > 1 || defined(A) && B")

    assert exit_code == 0
    assert capsys.readouterr().out.split() == ["A", "B", "C"]


def test_tokens_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """tokens prints a table of lexer tokens."""
    exit_code = _run(monkeypatch, "tokens", "defined(A) && 12UL")

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "identifier" in out
    assert "BOOL_AND" in out
    assert "12" in out


def test_tokens_command_lex_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Lex errors exit with 1."""
    exit_code = _run(monkeypatch, "tokens", "A $ B")

    assert exit_code == 1
    assert "Invalid character" in capsys.readouterr().err
