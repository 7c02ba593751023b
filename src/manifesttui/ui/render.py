"""Text rendering of the controller state as rich markup."""

from __future__ import annotations

from rich.markup import escape

from manifesttui.manifest.models import EntryKind
from manifesttui.session import EditSession
from manifesttui.ui.keys import HELP
from manifesttui.ui.screens.entry_list import EntryListScreen
from manifesttui.ui.state import Mode, StatusLevel, StatusMessage
from manifesttui.ui.theme import RenderTheme

LIST_TITLE = "Parsed Manifest"
ROW_HEIGHT = 4
_CHROME_LINES = 7
_CURSOR = "█"


def page_bounds(total: int, cursor: int, height: int | None) -> tuple[int, int, int, int]:
    """Return ``(start, stop, page, pages)`` for the page holding ``cursor``."""
    if total == 0:
        return 0, 0, 0, 1
    if height is None:
        return 0, total, 0, 1
    per_page = max(1, (height - _CHROME_LINES) // ROW_HEIGHT)
    pages = (total + per_page - 1) // per_page
    page = min(cursor, total - 1) // per_page
    start = page * per_page
    return start, min(start + per_page, total), page, pages


def render_entry_list(
    screen: EntryListScreen,
    theme: RenderTheme,
    *,
    height: int | None = None,
    filtering: bool = False,
) -> str:
    lines = [theme.title(LIST_TITLE), ""]
    if filtering:
        lines.append(f"Filter: {escape(screen.query)}{_CURSOR}")
    elif screen.query:
        lines.append(theme.muted(f"Filter: {escape(screen.query)}"))

    visible = screen.visible()
    if not visible:
        lines.append(theme.muted("No entries match the filter." if screen.query else "No items."))
        return "\n".join(lines)

    start, stop, page, pages = page_bounds(len(visible), screen.cursor, height)
    for position in range(start, stop):
        entry = visible[position]
        summary = entry.summary.split("\n")
        if position == screen.cursor:
            lines.append(theme.selected(f"│ {escape(entry.title)}"))
            lines.extend(theme.selected(f"│ {escape(line)}") for line in summary)
        else:
            lines.append(f"  {escape(entry.title)}")
            lines.extend(theme.muted(f"  {escape(line)}") for line in summary)
        lines.append("")
    if pages > 1:
        lines.append(theme.muted(f"page {page + 1}/{pages}"))
    return "\n".join(lines).rstrip("\n")


def _form_title(session: EditSession) -> str:
    if session.target_kind is EntryKind.DEFAULT:
        return "Edit default"
    return f"Edit {session.target_kind.value} #{session.target_index + 1}"


def render_edit_form(session: EditSession, theme: RenderTheme) -> str:
    width = max(len(item.label) for item in session.fields)
    lines = [theme.title(_form_title(session)), ""]
    for position, item in enumerate(session.fields):
        label = item.label.ljust(width)
        if position == session.focus_index:
            lines.append(theme.selected(f"> {escape(label)}: {escape(item.value)}{_CURSOR}"))
        else:
            lines.append(f"  {escape(label)}: {escape(item.value)}")
    return "\n".join(lines)


def render_status(status: StatusMessage, theme: RenderTheme) -> str:
    text = escape(status.text)
    if status.level is StatusLevel.ERROR:
        return theme.error(text)
    if status.level is StatusLevel.SUCCESS:
        return theme.status(text)
    return theme.muted(text)


def render_help(mode: Mode, theme: RenderTheme) -> str:
    return theme.muted(" • ".join(f"{item.keys} {item.description}" for item in HELP[mode]))


def render_screen(
    *,
    mode: Mode,
    entry_list: EntryListScreen,
    edit_session: EditSession | None,
    status: StatusMessage,
    theme: RenderTheme,
    height: int | None = None,
) -> str:
    if mode is Mode.EDITING and edit_session is not None:
        body = render_edit_form(edit_session, theme)
    else:
        body = render_entry_list(
            entry_list,
            theme,
            height=height,
            filtering=mode is Mode.FILTERING,
        )
    return "\n".join([body, "", render_status(status, theme), render_help(mode, theme)])


def render_plain_entries(entry_list: EntryListScreen) -> str:
    """Uncolored listing used for non-interactive output."""
    lines: list[str] = []
    for entry in entry_list.visible():
        lines.append(entry.title)
        lines.extend(f"    {line}" for line in entry.summary.split("\n"))
    return "\n".join(lines)
