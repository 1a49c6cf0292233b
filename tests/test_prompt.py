from __future__ import annotations

import io

import pytest

from service_decommissioner.interaction.prompt import (
    ConsolePrompt,
    ScriptedPrompt,
    format_question,
    interaction_session,
)


def test_format_question_shows_default():
    assert format_question("Port") == "Port: "
    assert format_question("Port", "8900") == "Port [8900]: "


def test_console_prompt_strips_and_falls_back_to_default():
    answers = iter(["  relay  ", "   "])
    out = io.StringIO()
    prompt = ConsolePrompt(output=out, read_line=lambda: next(answers))

    assert prompt.ask("Name") == "relay"
    assert prompt.ask("Port", "8900") == "8900"
    assert out.getvalue() == "Name: Port [8900]: "


def test_console_prompt_treats_end_of_input_as_empty():
    def eof() -> str:
        raise EOFError

    prompt = ConsolePrompt(output=io.StringIO(), read_line=eof)
    assert prompt.ask("Name") == ""
    assert prompt.ask("Name", "fallback") == "fallback"


def test_closed_console_prompt_refuses_questions():
    prompt = ConsolePrompt(output=io.StringIO(), read_line=lambda: "x")
    prompt.close()
    assert prompt.closed
    with pytest.raises(RuntimeError):
        prompt.ask("Name")


def test_session_closes_provider_on_error():
    prompt = ScriptedPrompt(answers=["a"])

    with pytest.raises(ValueError):
        with interaction_session(prompt) as session:
            session.ask("first")
            raise ValueError("boom")

    assert prompt.closed
    assert prompt.questions == ["first"]


def test_scripted_prompt_runs_dry():
    prompt = ScriptedPrompt(answers=["one"])
    assert prompt.ask("a") == "one"
    assert prompt.ask("b") == ""
    assert prompt.ask("c", "dflt") == "dflt"
