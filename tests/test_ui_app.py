from __future__ import annotations

import asyncio
from pathlib import Path

from manifesttui.manifest import FileStorage
from manifesttui.persistence import load_document
from manifesttui.ui.app import build_app
from manifesttui.ui.controller import SessionController
from manifesttui.ui.state import Mode, StatusLevel


def _controller(manifest_file: Path) -> SessionController:
    storage = FileStorage(manifest_file)
    return SessionController(load_document(storage), storage)


def test_key_presses_edit_and_save_through_the_app(manifest_file: Path) -> None:
    controller = _controller(manifest_file)
    app = build_app(controller)

    async def drive() -> None:
        async with app.run_test() as pilot:
            await pilot.press("down", "enter")
            await pilot.pause()
            assert controller.mode is Mode.EDITING
            assert controller.edit_session is not None
            assert controller.edit_session.focused.label == "name"

            await pilot.press("tab", "x", "enter")
            await pilot.pause()
            assert controller.mode is Mode.BROWSING
            assert controller.status.level is StatusLevel.SUCCESS

            await pilot.press("q")
            await pilot.pause()

    asyncio.run(drive())

    assert controller.quit_requested
    saved = load_document(FileStorage(manifest_file))
    assert saved.remotes[0].fetch == "https://android.googlesource.comx"


def test_unbound_browsing_keys_leave_the_controller_alone(manifest_file: Path) -> None:
    controller = _controller(manifest_file)
    app = build_app(controller)

    async def drive() -> None:
        async with app.run_test() as pilot:
            await pilot.press("x", "backspace")
            await pilot.pause()
            assert controller.mode is Mode.BROWSING
            assert controller.entry_list.cursor == 0
            assert not controller.quit_requested

    asyncio.run(drive())
