"""Full-screen terminal shell around the session controller."""

from __future__ import annotations

import logging as py_logging
from typing import Any

from manifesttui.errors import ExitCode, ManifestTuiError
from manifesttui.ui.controller import SessionController
from manifesttui.ui.keys import classify_key
from manifesttui.ui.render import render_screen
from manifesttui.ui.theme import RenderTheme

logger = py_logging.getLogger(__name__)

VIEW_ID = "manifest-view"


def build_app(controller: SessionController, *, theme: RenderTheme | None = None) -> Any:
    """Return a textual ``App`` driving ``controller``; not started."""
    try:
        from textual.app import App, ComposeResult
        from textual.events import Key, Resize
        from textual.widgets import Static
    except ImportError as exc:
        raise ManifestTuiError(
            "textual is not installed; the editor cannot start.",
            code=ExitCode.RUNTIME_ERROR,
            hint="Run `pip install textual` and try again.",
        ) from exc

    active_theme = theme or RenderTheme.from_config()

    class ManifestView(Static):
        can_focus = True

        def redraw(self) -> None:
            self.update(
                render_screen(
                    mode=controller.mode,
                    entry_list=controller.entry_list,
                    edit_session=controller.edit_session,
                    status=controller.status,
                    theme=active_theme,
                    height=max(self.app.size.height - 2, 1),
                )
            )

        def on_key(self, event: Key) -> None:
            action = classify_key(controller.mode, event.key, event.character)
            if action is None:
                return
            event.stop()
            event.prevent_default()
            controller.apply(action)
            if controller.quit_requested:
                logger.info("quit requested")
                self.app.exit()
                return
            self.redraw()

    class ManifestApp(App[None]):
        TITLE = "manifest-tui"
        CSS = f"""
        #{VIEW_ID} {{
            padding: 1 2;
        }}
        """

        def compose(self) -> ComposeResult:
            yield ManifestView(id=VIEW_ID)

        def on_mount(self) -> None:
            view = self.query_one(f"#{VIEW_ID}", ManifestView)
            view.focus()
            view.redraw()

        def on_resize(self, event: Resize) -> None:
            for view in self.query(ManifestView):
                view.redraw()

    return ManifestApp()


def launch_app(controller: SessionController, *, theme: RenderTheme | None = None) -> int:  # pragma: no cover
    app = build_app(controller, theme=theme)
    logger.debug("starting ui path=%s", controller.storage.path)
    app.run()
    return int(ExitCode.SUCCESS)
