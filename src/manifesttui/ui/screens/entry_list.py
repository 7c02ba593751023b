"""Entry list screen model: cursor and title filter over the projection."""

from __future__ import annotations

from dataclasses import dataclass, field

from manifesttui.projection import Entry, filter_entries


@dataclass
class EntryListScreen:
    entries: list[Entry] = field(default_factory=list)
    cursor: int = 0
    query: str = ""

    def visible(self) -> list[Entry]:
        return filter_entries(self.entries, self.query)

    def selected(self) -> Entry | None:
        visible = self.visible()
        if not visible:
            return None
        return visible[min(self.cursor, len(visible) - 1)]

    def move(self, delta: int) -> None:
        visible = self.visible()
        if not visible:
            self.cursor = 0
            return
        self.cursor = max(0, min(self.cursor + delta, len(visible) - 1))

    def set_query(self, query: str) -> None:
        current = self.selected()
        self.query = query
        self._restore_cursor(current)

    def set_entries(self, entries: list[Entry]) -> None:
        """Swap in a fresh projection, keeping the cursor on the same slot."""
        current = self.selected()
        self.entries = list(entries)
        self._restore_cursor(current)

    def _restore_cursor(self, previous: Entry | None) -> None:
        visible = self.visible()
        if previous is not None:
            for position, entry in enumerate(visible):
                if entry.kind is previous.kind and entry.index == previous.index:
                    self.cursor = position
                    return
        self.cursor = max(0, min(self.cursor, len(visible) - 1))
