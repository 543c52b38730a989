"""Tests for the Streamlit host wiring, with a stand-in for the streamlit module."""

from __future__ import annotations

from typing import Any

import pytest

from beauty_chat.core.context import ChatContext
from beauty_chat.core.turn_controller import ChatTurnController
from ui import streamlit_app

from conftest import FakeResponse, FakeWorkerClient


class _FakeStreamlit:
    def __init__(self, submitted: str | None = None) -> None:
        self.session_state: dict[str, Any] = {}
        self.submitted = submitted
        self.chat_input_calls: list[tuple[tuple, dict]] = []
        self.drawn: list[str] = []

    def set_page_config(self, **kwargs: Any) -> None:
        pass

    def title(self, text: str) -> None:
        pass

    def caption(self, text: str) -> None:
        pass

    def markdown(self, body: str, **kwargs: Any) -> None:
        self.drawn.append(body)

    def empty(self) -> "_FakeStreamlit":
        return self

    def chat_input(self, *args: Any, **kwargs: Any) -> str | None:
        self.chat_input_calls.append((args, kwargs))
        return self.submitted


@pytest.fixture
def fake_st(monkeypatch: pytest.MonkeyPatch) -> _FakeStreamlit:
    fake = _FakeStreamlit()
    monkeypatch.setattr(streamlit_app, "st", fake)
    return fake


def _seed(fake: _FakeStreamlit, worker: FakeWorkerClient) -> ChatContext:
    ctx = ChatContext()
    fake.session_state["chat_context"] = ctx
    fake.session_state["controller"] = ChatTurnController(context=ctx, worker_client=worker)
    return ctx


def test_chat_input_is_not_tied_to_the_lock(fake_st: _FakeStreamlit) -> None:
    streamlit_app.main()

    [(_, kwargs)] = fake_st.chat_input_calls
    assert "disabled" not in kwargs
    assert isinstance(fake_st.session_state["chat_context"], ChatContext)


def test_submission_runs_one_turn_and_redraws(fake_st: _FakeStreamlit) -> None:
    worker = FakeWorkerClient(response=FakeResponse(body='{"choices":[{"message":{"content":"Try a toner."}}]}'))
    ctx = _seed(fake_st, worker)
    fake_st.submitted = "<b>toner?</b>"

    streamlit_app.main()

    assert [e.text for e in ctx.window.entries] == ["<b>toner?</b>", "Try a toner."]
    assert any("Thinking..." in body for body in fake_st.drawn)
    final = fake_st.drawn[-1]
    assert "&lt;b&gt;toner?&lt;/b&gt;" in final
    assert '<div class="message assistant"><strong>Assistant:</strong> Try a toner.</div>' in final
    assert "Thinking..." not in final
    assert ctx.input.disabled is False


def test_window_html_starts_with_greeting() -> None:
    ctx = ChatContext()

    out = streamlit_app.window_html(ctx.window)

    assert out.startswith('<div class="chat-window"><div class="chat-greeting">👋 Hello!')
