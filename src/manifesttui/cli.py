"""Public CLI contract and entrypoint."""

from __future__ import annotations

import argparse
import logging as py_logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from .config import get_config_path, load_config, persist_manifest_path, resolve_manifest_path
from .errors import ExitCode, ManifestTuiError, user_facing_error
from .logging import LEVEL_NAMES, configure_logging, default_log_path, normalize_level
from .manifest.storage import FileStorage
from .persistence import load_document
from .ui.controller import SessionController
from .ui.render import render_plain_entries
from .ui.theme import RenderTheme

UiLauncher = Callable[[SessionController, RenderTheme], int | None]


def _log_level_type(value: str) -> str:
    normalized = normalize_level(value)
    if normalized is None:
        accepted = ", ".join(LEVEL_NAMES)
        raise argparse.ArgumentTypeError(f"--log-level must be one of: {accepted}")
    return normalized


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="manifest-tui",
        description="Browse and edit the default, remotes and projects of a repo manifest.",
    )
    parser.add_argument(
        "manifest",
        nargs="?",
        type=Path,
        default=None,
        help="Manifest file to edit (default: config manifest_path, then default.xml)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Config TOML path")
    parser.add_argument("--log-level", type=_log_level_type, default=None)
    parser.add_argument("--log-file", type=Path, default=None)
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the manifest entries and exit",
    )
    parser.add_argument(
        "--remember",
        action="store_true",
        help="Store the manifest path in the config file as the new default",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    return parser.parse_args(argv)


def launch_ui(controller: SessionController, theme: RenderTheme) -> int:
    from manifesttui.ui.app import launch_app

    return launch_app(controller, theme=theme)


def _remember_manifest(manifest_path: Path, config_path: Path | None, logger: py_logging.Logger) -> None:
    try:
        saved = persist_manifest_path(manifest_path, config_path)
    except OSError as exc:
        raise ManifestTuiError(
            f"Could not write config {get_config_path(config_path)}: {exc.strerror or exc}",
            code=ExitCode.CONFIG_ERROR,
            hint="Check that the config directory is writable.",
        ) from exc
    logger.info("manifest path remembered path=%s", saved.manifest_path)


def main(
    argv: Sequence[str] | None = None,
    *,
    ui_launcher: UiLauncher | None = None,
) -> int:
    log_path = default_log_path()
    logger = configure_logging(log_file=log_path)
    parser = build_parser()
    try:
        namespace = parser.parse_args(argv)
    except SystemExit as exc:
        if exc.code not in (None, 0):
            logger.warning("Argument parsing failed with exit code %s", exc.code)
        return int(exc.code or 0)

    config = load_config(namespace.config)
    if namespace.log_file is not None:
        log_path = namespace.log_file.expanduser()
    elif config.log_file:
        log_path = Path(config.log_file).expanduser()
    level = namespace.log_level or config.log_level
    interactive = not namespace.list
    logger = configure_logging(level=level, log_file=log_path, console=not interactive)

    try:
        storage = FileStorage(resolve_manifest_path(namespace.manifest, config))
        document = load_document(storage)
        if namespace.remember:
            _remember_manifest(storage.path, namespace.config, logger)

        if namespace.list:
            controller = SessionController(document, storage)
            print(render_plain_entries(controller.entry_list))
            return int(ExitCode.SUCCESS)

        launcher = ui_launcher or launch_ui
        logger.debug("Starting UI flow path=%s", storage.path)
        result = launcher(SessionController(document, storage), RenderTheme.from_config(config.theme))
        if isinstance(result, int):
            return result
        return int(ExitCode.SUCCESS)
    except ManifestTuiError as exc:
        logger.error(
            "Handled ManifestTuiError (code=%s): %s",
            int(exc.code),
            exc.message,
            exc_info=logger.isEnabledFor(py_logging.DEBUG),
        )
        print(user_facing_error(exc.message.rstrip("."), hint=exc.hint), file=sys.stderr)
        return int(exc.code)
    except Exception:
        logger.exception("Unhandled exception in CLI entrypoint")
        try:
            hint = f"Inspect logs: {log_path}"
            print(user_facing_error("Unexpected runtime failure", hint=hint), file=sys.stderr)
        except Exception:
            pass
        return int(ExitCode.RUNTIME_ERROR)


def run(argv: Sequence[str] | None = None) -> int:
    return main(argv)
