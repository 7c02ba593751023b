"""Edit session: form state for one manifest entry and its commit."""

from __future__ import annotations

import logging as py_logging
from dataclasses import dataclass, replace
from enum import Enum

from manifesttui.errors import EntryStaleError, IndexOutOfRangeError, SessionConsumedError
from manifesttui.manifest.models import Document, EntryKind, build_record, record_values
from manifesttui.projection import Entry, entry_for

logger = py_logging.getLogger(__name__)


class FocusDirection(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"


@dataclass(frozen=True)
class EditField:
    label: str
    value: str


@dataclass
class EditSession:
    target_kind: EntryKind
    target_index: int
    fields: tuple[EditField, ...]
    focus_index: int = 0
    consumed: bool = False

    @property
    def focused(self) -> EditField:
        return self.fields[self.focus_index]

    def field_map(self) -> dict[str, str]:
        return {item.label: item.value for item in self.fields}


def begin_edit(document: Document, entry: Entry) -> EditSession:
    try:
        current = entry_for(document, entry.kind, entry.index)
    except IndexOutOfRangeError as exc:
        raise EntryStaleError(
            f"Entry no longer exists: {entry.title}",
            hint="The manifest changed; select the entry again from the refreshed list.",
        ) from exc
    if current.title != entry.title or current.summary != entry.summary:
        raise EntryStaleError(
            f"Entry changed since it was listed: {entry.title}",
            hint="The manifest changed; select the entry again from the refreshed list.",
        )

    record = document.record_at(entry.kind, entry.index)
    fields = tuple(EditField(label, value) for label, value in record_values(entry.kind, record))
    logger.debug("edit begin kind=%s index=%s", entry.kind.value, entry.index)
    return EditSession(target_kind=entry.kind, target_index=entry.index, fields=fields)


def move_focus(session: EditSession, direction: FocusDirection) -> EditSession:
    count = len(session.fields)
    if count == 0:
        raise ValueError("Edit session has no fields")
    step = 1 if direction is FocusDirection.NEXT else -1
    return replace(session, focus_index=(session.focus_index + step) % count)


def set_field_value(session: EditSession, value: str) -> EditSession:
    fields = list(session.fields)
    fields[session.focus_index] = replace(fields[session.focus_index], value=value)
    return replace(session, fields=tuple(fields))


def insert_text(session: EditSession, text: str) -> EditSession:
    return set_field_value(session, session.focused.value + text)


def delete_backward(session: EditSession) -> EditSession:
    return set_field_value(session, session.focused.value[:-1])


def commit(document: Document, session: EditSession) -> Document:
    """Write every session field into a new record at the session's target slot."""
    if session.consumed:
        raise SessionConsumedError(
            "Edit session was already committed.",
            hint="Open the entry again to make further changes.",
        )
    record = build_record(session.target_kind, session.field_map())
    updated = document.replace_record(session.target_kind, session.target_index, record)
    session.consumed = True
    logger.info(
        "edit commit kind=%s index=%s",
        session.target_kind.value,
        session.target_index,
    )
    return updated
