# Role: Single chat message shown in the widget (sender + text). Frozen once created:
# the controller renders it and never touches it again.

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

Sender = Literal["User", "Assistant"]

USER: Sender = "User"
ASSISTANT: Sender = "Assistant"


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str
