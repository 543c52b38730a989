# Role: Interprets the worker's response body. Parsing is separate from interpretation so the controller
# can tell "malformed JSON" apart from "valid JSON with the wrong shape".

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from beauty_chat.utils.lookup import dig, first_present, is_present

DEFAULT_ERROR_CODE = "unknown_error"
DEFAULT_ERROR_MESSAGE = "An error occurred."


@dataclass(frozen=True)
class ServiceError:
    code: str
    message: str
    raw: Any


def parse_body(raw: str) -> Any:
    # Key line: empty body is a legitimate "no data" result, not a parse failure.
    # Malformed JSON raises ValueError (json.JSONDecodeError), absurd nesting RecursionError.
    if not raw:
        return None
    return json.loads(raw)


def extract_service_error(data: Any) -> Optional[ServiceError]:
    # 1) No present "error" field -> not an error envelope ({} and [] are present)
    # 2) code: error.code, then error.type, then the default
    # 3) message: error.message, then the default
    err = dig(data, "error")
    if not is_present(err):
        return None

    code = first_present([dig(err, "code"), dig(err, "type")], DEFAULT_ERROR_CODE)
    message = first_present([dig(err, "message")], DEFAULT_ERROR_MESSAGE)
    return ServiceError(code=str(code), message=str(message), raw=err)


def extract_reply(data: Any) -> Optional[str]:
    """
    Reply text at choices[0].message.content, trimmed.

    Returns None when any step of the path is missing. A present but non-text
    content raises TypeError: the caller treats that as a broken turn, not a
    degraded one.
    """
    content = dig(data, "choices", 0, "message", "content")
    if not is_present(content):
        return None
    if not isinstance(content, str):
        raise TypeError(f"reply content is not text: {type(content).__name__}")
    return content.strip()
