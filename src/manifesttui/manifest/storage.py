"""Whole-file durable storage for the manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ManifestStorage(Protocol):
    @property
    def path(self) -> Path: ...

    def read_bytes(self) -> bytes: ...

    def write_bytes(self, data: bytes) -> None: ...


class FileStorage:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def read_bytes(self) -> bytes:
        return self._path.read_bytes()

    def write_bytes(self, data: bytes) -> None:
        self._path.write_bytes(data)

    def __repr__(self) -> str:
        return f"FileStorage({str(self._path)!r})"
