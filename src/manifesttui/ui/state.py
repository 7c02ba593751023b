"""Controller modes, input events and status messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Mode(str, Enum):
    BROWSING = "browsing"
    EDITING = "editing"
    FILTERING = "filtering"


class EventKind(str, Enum):
    NAVIGATION = "navigation"
    ACTIVATE = "activate"
    CANCEL = "cancel"
    QUIT = "quit"
    COMMAND = "command"


class InputEvent(str, Enum):
    NEXT_ITEM = "next-item"
    PREVIOUS_ITEM = "previous-item"
    NEXT_FIELD = "next-field"
    PREVIOUS_FIELD = "previous-field"
    ACTIVATE = "activate"
    CANCEL = "cancel"
    QUIT = "quit"
    FILTER = "filter"
    RELOAD = "reload"

    @property
    def kind(self) -> EventKind:
        return _EVENT_KINDS[self]


_EVENT_KINDS = {
    InputEvent.NEXT_ITEM: EventKind.NAVIGATION,
    InputEvent.PREVIOUS_ITEM: EventKind.NAVIGATION,
    InputEvent.NEXT_FIELD: EventKind.NAVIGATION,
    InputEvent.PREVIOUS_FIELD: EventKind.NAVIGATION,
    InputEvent.ACTIVATE: EventKind.ACTIVATE,
    InputEvent.CANCEL: EventKind.CANCEL,
    InputEvent.QUIT: EventKind.QUIT,
    InputEvent.FILTER: EventKind.COMMAND,
    InputEvent.RELOAD: EventKind.COMMAND,
}


class StatusLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class StatusMessage:
    level: StatusLevel
    text: str

    @classmethod
    def info(cls, text: str) -> StatusMessage:
        return cls(StatusLevel.INFO, text)

    @classmethod
    def success(cls, text: str) -> StatusMessage:
        return cls(StatusLevel.SUCCESS, text)

    @classmethod
    def error(cls, text: str) -> StatusMessage:
        return cls(StatusLevel.ERROR, text)
