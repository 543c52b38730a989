from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
import requests

import beauty_chat.config as config
from beauty_chat.core.context import ChatContext
from beauty_chat.core.turn_controller import ChatTurnController
from beauty_chat.models.payload import ChatPayload


class FakeResponse:
    def __init__(
        self,
        status_code: int = 200,
        body: str = "",
        reason: str | None = "OK",
        read_error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self._body = body
        self._read_error = read_error
        self.closed = False

    @property
    def text(self) -> str:
        if self._read_error is not None:
            raise self._read_error
        return self._body

    def close(self) -> None:
        self.closed = True


@dataclass
class FakeWorkerClient:
    response: Any = None
    error: Exception | None = None
    payloads: list[ChatPayload] = field(default_factory=list)
    on_send: Any = None

    def send(self, payload: ChatPayload) -> Any:
        self.payloads.append(payload)
        if self.on_send is not None:
            self.on_send()
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def _debug_on(monkeypatch: pytest.MonkeyPatch) -> None:
    # exercise the diagnostic branches too
    monkeypatch.setattr(config, "DEBUG", True)


@pytest.fixture
def context() -> ChatContext:
    return ChatContext()


@pytest.fixture
def worker() -> FakeWorkerClient:
    return FakeWorkerClient(response=FakeResponse())


@pytest.fixture
def controller(context: ChatContext, worker: FakeWorkerClient) -> ChatTurnController:
    return ChatTurnController(context=context, worker_client=worker)


@pytest.fixture
def offline() -> requests.ConnectionError:
    return requests.ConnectionError("network is unreachable")
