"""XDG config loading/saving."""

from __future__ import annotations

import os
import re
import sys
from contextlib import suppress
from pathlib import Path
from typing import Literal, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from manifesttui.logging import normalize_level

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover
    import tomli as tomllib

DEFAULT_CONFIG_PATH = Path("~/.config/manifesttui/config.toml").expanduser()
DEFAULT_MANIFEST_PATH = "default.xml"
DEFAULT_LOG_LEVEL: Literal["DEBUG", "INFO", "WARN", "ERROR"] = "INFO"
MANIFEST_PATH_ENV = "MANIFESTTUI_MANIFEST"

_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


def _validate_color(value: str) -> str:
    if not _COLOR_PATTERN.match(value):
        raise ValueError(f"Invalid color: {value}")
    return value


class ThemeConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    title_foreground: str = "#FFFDF5"
    title_background: str = "#25A065"
    status_foreground: str = "#04B575"
    error_foreground: str = "#FF5F87"
    selected_foreground: str = "#EE6FF8"
    muted_foreground: str = "#777777"

    @field_validator(
        "title_foreground",
        "title_background",
        "status_foreground",
        "error_foreground",
        "selected_foreground",
        "muted_foreground",
    )
    @classmethod
    def _validate_colors(cls, value: str) -> str:
        return _validate_color(value)


class AppConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    manifest_path: str = DEFAULT_MANIFEST_PATH
    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = DEFAULT_LOG_LEVEL
    log_file: str = ""
    theme: ThemeConfig = Field(default_factory=ThemeConfig)

    @field_validator("manifest_path")
    @classmethod
    def _validate_manifest_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Manifest path cannot be empty")
        return value


def get_config_path(path: str | Path | None = None) -> Path:
    if path is None:
        return DEFAULT_CONFIG_PATH
    return Path(path).expanduser()


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _toml_scalar(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return f'"{_escape(value)}"'
    raise TypeError(f"Unsupported TOML scalar type: {type(value)!r}")


def _normalize_theme(value: object) -> ThemeConfig:
    theme = ThemeConfig()
    if not isinstance(value, dict):
        return theme
    for name in ThemeConfig.model_fields:
        color = value.get(name)
        if isinstance(color, str) and _COLOR_PATTERN.match(color.strip()):
            setattr(theme, name, color.strip())
    return theme


def _sanitize(raw: dict[str, object]) -> AppConfig:
    cfg = AppConfig()

    manifest_path = raw.get("manifest_path", cfg.manifest_path)
    if isinstance(manifest_path, str) and manifest_path.strip():
        cfg.manifest_path = manifest_path.strip()

    log_level = raw.get("log_level", cfg.log_level)
    if isinstance(log_level, str):
        normalized = normalize_level(log_level)
        if normalized is not None:
            cfg.log_level = cast(Literal["DEBUG", "INFO", "WARN", "ERROR"], normalized)

    log_file = raw.get("log_file", cfg.log_file)
    if isinstance(log_file, str):
        cfg.log_file = log_file.strip()

    cfg.theme = _normalize_theme(raw.get("theme", {}))
    return cfg


def load_config(path: str | Path | None = None) -> AppConfig:
    resolved = get_config_path(path)
    if not resolved.exists():
        return AppConfig()
    try:
        with resolved.open("rb") as handle:
            raw = tomllib.load(handle)
    except (tomllib.TOMLDecodeError, OSError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()
    return _sanitize(raw)


def save_config(config: AppConfig, path: str | Path | None = None) -> Path:
    resolved = get_config_path(path)
    resolved.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        f"manifest_path = {_toml_scalar(config.manifest_path)}",
        f"log_level = {_toml_scalar(config.log_level)}",
        f"log_file = {_toml_scalar(config.log_file)}",
        "",
        "[theme]",
    ]
    for name in ThemeConfig.model_fields:
        lines.append(f"{name} = {_toml_scalar(getattr(config.theme, name))}")

    resolved.write_text("\n".join(lines) + "\n", encoding="utf-8")
    with suppress(OSError):
        resolved.chmod(0o600)
    return resolved


def resolve_manifest_path(cli_path: str | Path | None, config: AppConfig) -> Path:
    """CLI argument wins over the environment, which wins over the config file."""
    if cli_path is not None and str(cli_path).strip():
        return Path(cli_path).expanduser()
    env_path = os.getenv(MANIFEST_PATH_ENV, "").strip()
    if env_path:
        return Path(env_path).expanduser()
    return Path(config.manifest_path).expanduser()


def persist_manifest_path(manifest_path: str | Path, path: str | Path | None = None) -> AppConfig:
    config = load_config(path)
    config.manifest_path = str(Path(manifest_path).expanduser().resolve())
    save_config(config, path)
    return config
