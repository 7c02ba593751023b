from __future__ import annotations

from manifesttui.config import ThemeConfig
from manifesttui.manifest import DefaultBlock, Document, Project, Remote
from manifesttui.projection import project
from manifesttui.session import FocusDirection, begin_edit, move_focus
from manifesttui.ui.render import (
    LIST_TITLE,
    page_bounds,
    render_edit_form,
    render_entry_list,
    render_help,
    render_plain_entries,
    render_screen,
    render_status,
)
from manifesttui.ui.screens.entry_list import EntryListScreen
from manifesttui.ui.state import Mode, StatusMessage
from manifesttui.ui.theme import RenderTheme

THEME = RenderTheme.from_config()


def _document() -> Document:
    return Document(
        default=DefaultBlock(sync_j="4", revision="main"),
        remotes=(Remote(name="origin", fetch="https://x"),),
        projects=(Project(name="platform/build", path="build/make"),),
    )


def test_entry_list_marks_selected_row_and_escapes_markup() -> None:
    screen = EntryListScreen(project(_document()))
    screen.move(1)

    text = render_entry_list(screen, THEME)

    assert LIST_TITLE in text
    assert f"[{THEME.title_foreground} on {THEME.title_background}]" in text
    assert "│ Remote: origin" in text
    assert "  Project: platform/build" in text
    assert "\\[fetch: https://x]" in text


def test_entry_list_shows_filter_prompt_and_empty_state() -> None:
    screen = EntryListScreen(project(_document()), query="nope")

    text = render_entry_list(screen, THEME, filtering=True)

    assert "Filter: nope█" in text
    assert "No entries match the filter." in text


def test_page_bounds_pages_around_cursor() -> None:
    assert page_bounds(0, 0, 20) == (0, 0, 0, 1)
    assert page_bounds(10, 3, None) == (0, 10, 0, 1)
    # (23 - 7) // 4 == 4 rows per page
    assert page_bounds(10, 5, 23) == (4, 8, 1, 3)
    assert page_bounds(10, 9, 23) == (8, 10, 2, 3)


def test_entry_list_shows_page_indicator_when_paged() -> None:
    document = Document(projects=tuple(Project(name=f"p{index}") for index in range(12)))
    screen = EntryListScreen(project(document))
    screen.move(12)

    text = render_entry_list(screen, THEME, height=15)

    assert "Project: p11" in text
    assert "Project: p0" not in text
    assert "page 7/7" in text


def test_edit_form_highlights_focused_field() -> None:
    document = _document()
    session = move_focus(begin_edit(document, project(document)[1]), FocusDirection.NEXT)

    text = render_edit_form(session, THEME)

    assert "Edit remote #1" in text
    assert "  name    : origin" in text
    assert "> fetch   : https://x█" in text


def test_edit_form_title_for_default_block() -> None:
    document = _document()

    text = render_edit_form(begin_edit(document, project(document)[0]), THEME)

    assert "Edit default" in text


def test_status_colors_follow_level() -> None:
    assert THEME.error_foreground in render_status(StatusMessage.error("boom"), THEME)
    assert THEME.status_foreground in render_status(StatusMessage.success("ok"), THEME)
    assert THEME.muted_foreground in render_status(StatusMessage.info("hi"), THEME)


def test_render_screen_switches_body_by_mode() -> None:
    document = _document()
    screen = EntryListScreen(project(document))
    session = begin_edit(document, project(document)[0])
    status = StatusMessage.info("Loaded default.xml")

    browsing = render_screen(
        mode=Mode.BROWSING,
        entry_list=screen,
        edit_session=None,
        status=status,
        theme=THEME,
    )
    editing = render_screen(
        mode=Mode.EDITING,
        entry_list=screen,
        edit_session=session,
        status=status,
        theme=THEME,
    )

    assert LIST_TITLE in browsing
    assert LIST_TITLE not in editing
    assert "sync-j" in editing
    assert "Loaded default.xml" in browsing
    assert "Loaded default.xml" in editing
    assert render_help(Mode.EDITING, THEME) in editing


def test_plain_entries_listing() -> None:
    screen = EntryListScreen(project(_document()))

    assert render_plain_entries(screen).splitlines() == [
        "Default",
        "    sync-j: 4, revision: main",
        "Remote: origin",
        "    [fetch: https://x] [revision: ]",
        "    [upstream: ] [review: ]",
        "Project: platform/build",
        "    [path: build/make] [remote: ] [revision: ]",
        "    [upstream: ] [groups: ] [dest-branch: ]",
    ]


def test_theme_defaults_follow_theme_config() -> None:
    defaults = ThemeConfig()

    assert THEME.title_background == defaults.title_background
    assert THEME.error_foreground == defaults.error_foreground
    custom = RenderTheme.from_config(ThemeConfig(error_foreground="#123456"))
    assert render_status(StatusMessage.error("boom"), custom).startswith("[bold #123456]")
