"""Key classification for each controller mode."""

from __future__ import annotations

from dataclasses import dataclass

from manifesttui.ui.state import InputEvent, Mode


@dataclass(frozen=True)
class KeyAction:
    event: InputEvent | None = None
    text: str = ""
    backspace: bool = False


@dataclass(frozen=True)
class KeyHelp:
    keys: str
    description: str


BROWSING_KEYS: dict[str, InputEvent] = {
    "up": InputEvent.PREVIOUS_ITEM,
    "k": InputEvent.PREVIOUS_ITEM,
    "down": InputEvent.NEXT_ITEM,
    "j": InputEvent.NEXT_ITEM,
    "enter": InputEvent.ACTIVATE,
    "escape": InputEvent.CANCEL,
    "q": InputEvent.QUIT,
    "ctrl+c": InputEvent.QUIT,
    "slash": InputEvent.FILTER,
    "r": InputEvent.RELOAD,
}

EDITING_KEYS: dict[str, InputEvent] = {
    "tab": InputEvent.NEXT_FIELD,
    "down": InputEvent.NEXT_FIELD,
    "shift+tab": InputEvent.PREVIOUS_FIELD,
    "up": InputEvent.PREVIOUS_FIELD,
    "enter": InputEvent.ACTIVATE,
    "escape": InputEvent.CANCEL,
    "ctrl+c": InputEvent.QUIT,
}

FILTERING_KEYS: dict[str, InputEvent] = {
    "up": InputEvent.PREVIOUS_ITEM,
    "down": InputEvent.NEXT_ITEM,
    "enter": InputEvent.ACTIVATE,
    "escape": InputEvent.CANCEL,
    "ctrl+c": InputEvent.QUIT,
}

_KEYMAPS = {
    Mode.BROWSING: BROWSING_KEYS,
    Mode.EDITING: EDITING_KEYS,
    Mode.FILTERING: FILTERING_KEYS,
}

HELP: dict[Mode, tuple[KeyHelp, ...]] = {
    Mode.BROWSING: (
        KeyHelp("↑/k ↓/j", "move"),
        KeyHelp("enter", "edit"),
        KeyHelp("/", "filter"),
        KeyHelp("r", "reload"),
        KeyHelp("q", "quit"),
    ),
    Mode.EDITING: (
        KeyHelp("tab/↓ shift+tab/↑", "field"),
        KeyHelp("enter", "save"),
        KeyHelp("esc", "cancel"),
    ),
    Mode.FILTERING: (
        KeyHelp("enter", "apply"),
        KeyHelp("esc", "clear"),
    ),
}


def classify_key(mode: Mode, key: str, character: str | None = None) -> KeyAction | None:
    """Map a key press to a controller action; ``None`` when the key is unbound."""
    event = _KEYMAPS[mode].get(key)
    if event is not None:
        return KeyAction(event=event)
    if mode is Mode.BROWSING:
        return None
    if key == "backspace":
        return KeyAction(backspace=True)
    if character and character.isprintable():
        return KeyAction(text=character)
    return None
