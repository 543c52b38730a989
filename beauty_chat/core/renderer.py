# Role: Turns (sender, text) into an inert message entry and appends it to the chat window.
# All markup-significant characters are escaped, so neither user nor model text can inject structure.

from __future__ import annotations

import html
from typing import Any

from beauty_chat.core.context import ChatWindow, MessageEntry


def escape_text(text: Any) -> str:
    # 1) Coerce (None -> "")
    # 2) Escape & < >
    # 3) Newlines -> <br>
    s = "" if text is None else str(text)
    return html.escape(s, quote=False).replace("\n", "<br>")


class MessageRenderer:
    def __init__(self, window: ChatWindow) -> None:
        self.window = window

    def render(self, sender: str, text: Any) -> MessageEntry:
        """Append one entry, scroll to it, and return it as a handle for later removal."""
        label = str(sender)
        entry = MessageEntry(
            entry_id=self.window.next_id(),
            sender=label,
            text="" if text is None else str(text),
            css_class=f"message {label.lower()}",
            html=f"<strong>{escape_text(label)}:</strong> {escape_text(text)}",
        )
        self.window.append(entry)
        self.window.scroll_to_bottom()
        return entry
