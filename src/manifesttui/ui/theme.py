"""Rendering colors, passed as a value into the renderers."""

from __future__ import annotations

from dataclasses import dataclass

from manifesttui.config import ThemeConfig


@dataclass(frozen=True)
class RenderTheme:
    title_foreground: str
    title_background: str
    status_foreground: str
    error_foreground: str
    selected_foreground: str
    muted_foreground: str

    @classmethod
    def from_config(cls, config: ThemeConfig | None = None) -> RenderTheme:
        """Build from ``config``; the ``ThemeConfig`` defaults when omitted."""
        if config is None:
            config = ThemeConfig()
        return cls(
            title_foreground=config.title_foreground,
            title_background=config.title_background,
            status_foreground=config.status_foreground,
            error_foreground=config.error_foreground,
            selected_foreground=config.selected_foreground,
            muted_foreground=config.muted_foreground,
        )

    def title(self, text: str) -> str:
        return f"[{self.title_foreground} on {self.title_background}] {text} [/]"

    def selected(self, text: str) -> str:
        return f"[bold {self.selected_foreground}]{text}[/]"

    def muted(self, text: str) -> str:
        return f"[{self.muted_foreground}]{text}[/]"

    def status(self, text: str) -> str:
        return f"[{self.status_foreground}]{text}[/]"

    def error(self, text: str) -> str:
        return f"[bold {self.error_foreground}]{text}[/]"
