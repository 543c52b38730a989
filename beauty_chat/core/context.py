# Role: Explicit UI state for the widget. The controller never reaches for global handles:
# it gets the input field, the message list and the in-flight flag through one ChatContext.

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import beauty_chat.config as config


@dataclass(frozen=True)
class MessageEntry:
    """One rendered row in the message list. `html` is already escaped and safe to inject."""

    entry_id: int
    sender: str
    text: str
    css_class: str
    html: str


@dataclass
class InputField:
    value: str = ""
    disabled: bool = False


class ChatWindow:
    """
    Append-only message list with a scroll position.

    Entries are only ever appended at the end. The one exception is removal by handle,
    which the controller uses for the loading placeholder.
    """

    def __init__(
        self,
        greeting: Optional[str] = None,
        listener: Optional[Callable[["ChatWindow"], None]] = None,
    ) -> None:
        self.greeting = config.GREETING if greeting is None else greeting
        self.listener = listener
        self.scroll_top = 0
        self._entries: List[MessageEntry] = []
        self._ids = itertools.count(1)

    @property
    def entries(self) -> List[MessageEntry]:
        return list(self._entries)

    @property
    def scroll_height(self) -> int:
        return len(self._entries)

    def next_id(self) -> int:
        return next(self._ids)

    def append(self, entry: MessageEntry) -> None:
        self._entries.append(entry)
        self._notify()

    def remove(self, entry: MessageEntry) -> bool:
        # Key line: removing something already gone is a no-op, like detaching a detached node.
        try:
            self._entries.remove(entry)
        except ValueError:
            return False
        self.scroll_top = min(self.scroll_top, self.scroll_height)
        self._notify()
        return True

    def scroll_to_bottom(self) -> None:
        self.scroll_top = self.scroll_height

    def _notify(self) -> None:
        if self.listener is not None:
            self.listener(self)


@dataclass
class ChatContext:
    window: ChatWindow = field(default_factory=ChatWindow)
    input: InputField = field(default_factory=InputField)

    # Key line: re-entrancy guard that works even when no UI control exists.
    in_flight: bool = False
