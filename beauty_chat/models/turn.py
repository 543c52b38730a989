# Role: Small typed contract for the result of one submission. The outcome names the branch the
# controller took; the messages are what it rendered (None when nothing was rendered).

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from beauty_chat.models.message import Message


class TurnOutcome(str, Enum):
    IGNORED = "ignored"
    BUSY = "busy"
    REPLY = "reply"
    MISSING_REPLY = "missing_reply"
    HTTP_ERROR = "http_error"
    PARSE_ERROR = "parse_error"
    SERVICE_ERROR = "service_error"
    TRANSPORT_ERROR = "transport_error"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class TurnResult:
    outcome: TurnOutcome
    user_message: Optional[Message] = None
    assistant_message: Optional[Message] = None
