"""Load and self-verifying save of the manifest document."""

from __future__ import annotations

import logging as py_logging
from dataclasses import dataclass
from pathlib import Path

from manifesttui.errors import (
    ManifestParseError,
    ManifestReadError,
    ReadBackError,
    ReparseError,
    SerializationError,
    WriteError,
)
from manifesttui.manifest.codec import ManifestCodec, XmlManifestCodec
from manifesttui.manifest.models import Document
from manifesttui.manifest.storage import ManifestStorage
from manifesttui.projection import Entry, project

logger = py_logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveReport:
    path: Path
    document: Document
    entries: list[Entry]
    size: int


def load_document(storage: ManifestStorage, *, codec: ManifestCodec | None = None) -> Document:
    active_codec = codec or XmlManifestCodec()
    try:
        data = storage.read_bytes()
    except OSError as exc:
        raise ManifestReadError(
            f"Failed to read {storage.path}: {exc.strerror or exc}",
            hint="Check that the manifest file exists and is readable.",
        ) from exc
    document = active_codec.parse(data)
    logger.info(
        "manifest loaded path=%s remotes=%s projects=%s",
        storage.path,
        len(document.remotes),
        len(document.projects),
    )
    return document


def save_document(
    storage: ManifestStorage,
    document: Document,
    *,
    codec: ManifestCodec | None = None,
) -> SaveReport:
    """Serialize, write, read back and re-parse; return the re-parsed document.

    Each stage raises its own ``SaveError`` subclass. The caller's document is
    never modified; on success the caller adopts ``SaveReport.document``.
    """
    active_codec = codec or XmlManifestCodec()
    path = storage.path

    try:
        payload = active_codec.serialize(document)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Could not serialize manifest: {exc}",
            hint="The file was not modified. Remove unsupported characters and retry.",
        ) from exc

    try:
        storage.write_bytes(payload)
    except OSError as exc:
        raise WriteError(
            f"Could not write {path}: {exc.strerror or exc}",
            hint="The file may be incomplete. Check permissions and free space, then save again.",
        ) from exc
    logger.debug("manifest written path=%s bytes=%s", path, len(payload))

    try:
        written = storage.read_bytes()
    except OSError as exc:
        raise ReadBackError(
            f"Saved {path} but could not read it back: {exc.strerror or exc}",
            hint="The file was overwritten; verify its contents before editing further.",
        ) from exc

    try:
        fresh = active_codec.parse(written)
    except ManifestParseError as exc:
        raise ReparseError(
            f"Saved {path} but it no longer parses: {exc.message}",
            hint="The file was overwritten; repair it or save again from the editor.",
        ) from exc

    logger.info("manifest saved path=%s bytes=%s", path, len(payload))
    return SaveReport(path=path, document=fresh, entries=project(fresh), size=len(payload))
