# Role: Outbound request body for the worker. Always exactly one system instruction followed by
# one user message: requests are stateless, no earlier turns are ever replayed.

from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, model_validator

Role = Literal["system", "user"]


class ChatMessage(BaseModel):
    role: Role
    content: str


class ChatPayload(BaseModel):
    messages: List[ChatMessage]

    @model_validator(mode="after")
    def _check_shape(self):
        # system first, user second, nothing else
        roles = [m.role for m in self.messages]
        if roles != ["system", "user"]:
            raise ValueError(f"payload must be [system, user], got {roles}")
        return self

    @classmethod
    def for_user_text(cls, system_prompt: str, user_text: str) -> "ChatPayload":
        return cls(
            messages=[
                ChatMessage(role="system", content=system_prompt),
                ChatMessage(role="user", content=user_text),
            ]
        )

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
