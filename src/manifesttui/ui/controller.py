"""Session controller: routes input events between browsing and editing."""

from __future__ import annotations

import logging as py_logging

from manifesttui.errors import ManifestTuiError, SaveError, user_facing_error
from manifesttui.manifest.codec import ManifestCodec, XmlManifestCodec
from manifesttui.manifest.models import Document
from manifesttui.manifest.storage import ManifestStorage
from manifesttui.persistence import load_document, save_document
from manifesttui.projection import Entry, project
from manifesttui.session import (
    EditSession,
    FocusDirection,
    begin_edit,
    commit,
    delete_backward,
    insert_text,
    move_focus,
)
from manifesttui.ui.keys import KeyAction
from manifesttui.ui.screens.entry_list import EntryListScreen
from manifesttui.ui.state import InputEvent, Mode, StatusMessage

logger = py_logging.getLogger(__name__)


def _error_status(exc: ManifestTuiError) -> StatusMessage:
    return StatusMessage.error(user_facing_error(exc.message.rstrip("."), hint=exc.hint))


class SessionController:
    def __init__(
        self,
        document: Document,
        storage: ManifestStorage,
        *,
        codec: ManifestCodec | None = None,
    ) -> None:
        self.storage = storage
        self.codec = codec or XmlManifestCodec()
        self.document = document
        self.entry_list = EntryListScreen(project(document))
        self.mode = Mode.BROWSING
        self.edit_session: EditSession | None = None
        self.status = StatusMessage.info(f"Loaded {storage.path}")
        self.quit_requested = False

    @property
    def entries(self) -> list[Entry]:
        return self.entry_list.entries

    def handle(self, event: InputEvent) -> None:
        logger.debug("input mode=%s event=%s", self.mode.value, event.value)
        if event is InputEvent.QUIT:
            self.quit_requested = True
            return
        if self.mode is Mode.EDITING:
            self._handle_editing(event)
        elif self.mode is Mode.FILTERING:
            self._handle_filtering(event)
        else:
            self._handle_browsing(event)

    def apply(self, action: KeyAction) -> None:
        if action.event is not None:
            self.handle(action.event)
        elif action.backspace:
            self.backspace()
        elif action.text:
            self.type_text(action.text)

    def type_text(self, text: str) -> None:
        if self.mode is Mode.EDITING and self.edit_session is not None:
            self.edit_session = insert_text(self.edit_session, text)
        elif self.mode is Mode.FILTERING:
            self.entry_list.set_query(self.entry_list.query + text)

    def backspace(self) -> None:
        if self.mode is Mode.EDITING and self.edit_session is not None:
            self.edit_session = delete_backward(self.edit_session)
        elif self.mode is Mode.FILTERING:
            self.entry_list.set_query(self.entry_list.query[:-1])

    def _handle_browsing(self, event: InputEvent) -> None:
        if event is InputEvent.NEXT_ITEM:
            self.entry_list.move(1)
        elif event is InputEvent.PREVIOUS_ITEM:
            self.entry_list.move(-1)
        elif event is InputEvent.ACTIVATE:
            self.select()
        elif event is InputEvent.CANCEL:
            if self.entry_list.query:
                self.entry_list.set_query("")
            else:
                self.quit_requested = True
        elif event is InputEvent.FILTER:
            self.mode = Mode.FILTERING
        elif event is InputEvent.RELOAD:
            self.reload()

    def _handle_filtering(self, event: InputEvent) -> None:
        if event is InputEvent.NEXT_ITEM:
            self.entry_list.move(1)
        elif event is InputEvent.PREVIOUS_ITEM:
            self.entry_list.move(-1)
        elif event is InputEvent.ACTIVATE:
            self.mode = Mode.BROWSING
        elif event is InputEvent.CANCEL:
            self.entry_list.set_query("")
            self.mode = Mode.BROWSING

    def _handle_editing(self, event: InputEvent) -> None:
        if self.edit_session is None:
            self.mode = Mode.BROWSING
            return
        if event is InputEvent.NEXT_FIELD:
            self.edit_session = move_focus(self.edit_session, FocusDirection.NEXT)
        elif event is InputEvent.PREVIOUS_FIELD:
            self.edit_session = move_focus(self.edit_session, FocusDirection.PREVIOUS)
        elif event is InputEvent.ACTIVATE:
            self.commit_edit()
        elif event is InputEvent.CANCEL:
            self.cancel_edit()

    def select(self) -> None:
        entry = self.entry_list.selected()
        if entry is None:
            self.status = StatusMessage.info("No entry selected.")
            return
        try:
            self.edit_session = begin_edit(self.document, entry)
        except ManifestTuiError as exc:
            logger.warning("edit refused entry=%s: %s", entry.title, exc.message)
            self.status = _error_status(exc)
            self.entry_list.set_entries(project(self.document))
            return
        self.mode = Mode.EDITING

    def cancel_edit(self) -> None:
        self.edit_session = None
        self.mode = Mode.BROWSING
        self.status = StatusMessage.info("Edit cancelled.")

    def commit_edit(self) -> None:
        session = self.edit_session
        self.edit_session = None
        self.mode = Mode.BROWSING
        if session is None:
            return

        try:
            updated = commit(self.document, session)
        except ManifestTuiError as exc:
            logger.warning("commit failed: %s", exc.message)
            self.status = _error_status(exc)
            self.entry_list.set_entries(project(self.document))
            return

        try:
            report = save_document(self.storage, updated, codec=self.codec)
        except SaveError as exc:
            logger.error(
                "save failed stage=%s overwritten=%s: %s",
                exc.stage.value,
                exc.file_overwritten,
                exc.message,
            )
            self.status = _error_status(exc)
            return

        self.document = report.document
        self.entry_list.set_entries(report.entries)
        self.status = StatusMessage.success(f"Saved and reloaded {report.path} ({report.size} bytes).")

    def reload(self) -> None:
        try:
            document = load_document(self.storage, codec=self.codec)
        except ManifestTuiError as exc:
            logger.warning("reload failed: %s", exc.message)
            self.status = _error_status(exc)
            return
        self.document = document
        self.entry_list.set_entries(project(document))
        self.status = StatusMessage.info(f"Reloaded {self.storage.path}")
