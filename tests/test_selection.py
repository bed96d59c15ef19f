"""Tests for the interactive selection helpers."""

import pytest

from cpt_hook.ui import selection
from cpt_hook.ui.selection import RichSelector, parse_selection


@pytest.mark.parametrize("answer,expected", [
    ("", []),
    ("   ", []),
    ("1", [0]),
    ("3, 1", [0, 2]),
    ("2 2 1", [0, 1]),
    ("all", [0, 1, 2]),
    ("ALL", [0, 1, 2]),
])
def test_parse_valid(answer, expected):
    assert parse_selection(answer, 3) == expected


@pytest.mark.parametrize("answer", ["0", "4", "x", "1,b", "-1"])
def test_parse_invalid(answer):
    assert parse_selection(answer, 3) is None


def test_rich_selector_reasks_until_valid(monkeypatch, console, output):
    answers = iter(["9", "2"])
    monkeypatch.setattr(selection.Prompt, "ask", lambda *args, **kwargs: next(answers))

    chosen = RichSelector(console).select("Escolha os hooks", ["pre-commit", "pre-push"])

    assert chosen == [1]
    text = output.getvalue()
    assert "1) pre-commit" in text
    assert "Seleção inválida" in text


def test_rich_selector_without_options_does_not_prompt(monkeypatch, console):
    def fail(*args, **kwargs):
        raise AssertionError("prompted")

    monkeypatch.setattr(selection.Prompt, "ask", fail)

    assert RichSelector(console).select("Escolha as actions", []) == []


def test_rich_selector_escapes_markup_in_answer(monkeypatch, console, output):
    """An answer that looks like a closing tag is reported, then asked again."""
    answers = iter(["[/x]", "1"])
    monkeypatch.setattr(selection.Prompt, "ask", lambda *args, **kwargs: next(answers))

    chosen = RichSelector(console).select("Escolha as actions", ["[/b] weird label", "ok"])

    assert chosen == [0]
    text = output.getvalue()
    assert "[/x]" in text
    assert "[/b] weird label" in text


def test_rich_selector_end_of_input(monkeypatch, console):
    """Closed stdin becomes a cpt-hook error instead of an EOFError."""
    def closed(*args, **kwargs):
        raise EOFError

    monkeypatch.setattr(selection.Prompt, "ask", closed)

    with pytest.raises(selection.SelectionUnavailableError):
        RichSelector(console).select("Escolha as actions", ["a"])


def test_selector_is_abstract():
    with pytest.raises(TypeError):
        selection.Selector()
