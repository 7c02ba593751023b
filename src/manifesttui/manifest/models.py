"""Manifest document domain models and the per-kind attribute schema."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union, cast

from manifesttui.errors import ExitCode, IndexOutOfRangeError, ManifestTuiError


class EntryKind(str, Enum):
    DEFAULT = "default"
    REMOTE = "remote"
    PROJECT = "project"


@dataclass(frozen=True)
class DefaultBlock:
    sync_j: str = ""
    revision: str = ""


@dataclass(frozen=True)
class Remote:
    name: str = ""
    fetch: str = ""
    revision: str = ""
    upstream: str = ""
    review: str = ""


@dataclass(frozen=True)
class Project:
    path: str = ""
    name: str = ""
    remote: str = ""
    revision: str = ""
    upstream: str = ""
    groups: str = ""
    dest_branch: str = ""


Record = Union[DefaultBlock, Remote, Project]


@dataclass(frozen=True)
class FieldSpec:
    label: str
    attribute: str


# Canonical field order per kind. Labels are the XML attribute names.
SCHEMAS: dict[EntryKind, tuple[FieldSpec, ...]] = {
    EntryKind.DEFAULT: (
        FieldSpec("sync-j", "sync_j"),
        FieldSpec("revision", "revision"),
    ),
    EntryKind.REMOTE: (
        FieldSpec("name", "name"),
        FieldSpec("fetch", "fetch"),
        FieldSpec("revision", "revision"),
        FieldSpec("upstream", "upstream"),
        FieldSpec("review", "review"),
    ),
    EntryKind.PROJECT: (
        FieldSpec("path", "path"),
        FieldSpec("name", "name"),
        FieldSpec("remote", "remote"),
        FieldSpec("revision", "revision"),
        FieldSpec("upstream", "upstream"),
        FieldSpec("groups", "groups"),
        FieldSpec("dest-branch", "dest_branch"),
    ),
}

RECORD_TYPES: dict[EntryKind, type] = {
    EntryKind.DEFAULT: DefaultBlock,
    EntryKind.REMOTE: Remote,
    EntryKind.PROJECT: Project,
}


def schema_labels(kind: EntryKind) -> tuple[str, ...]:
    return tuple(spec.label for spec in SCHEMAS[kind])


def record_values(kind: EntryKind, record: Record) -> list[tuple[str, str]]:
    return [(spec.label, getattr(record, spec.attribute) or "") for spec in SCHEMAS[kind]]


def build_record(kind: EntryKind, values: Mapping[str, str]) -> Record:
    """Build a complete record of ``kind``; every schema label must be present."""
    kwargs: dict[str, str] = {}
    for spec in SCHEMAS[kind]:
        if spec.label not in values:
            raise ManifestTuiError(
                f"Missing field for {kind.value}: {spec.label}",
                code=ExitCode.VALIDATION_ERROR,
                hint="Every schema field must be present in the edit form.",
            )
        kwargs[spec.attribute] = values[spec.label]
    return RECORD_TYPES[kind](**kwargs)


@dataclass(frozen=True)
class Document:
    default: DefaultBlock = DefaultBlock()
    remotes: tuple[Remote, ...] = ()
    projects: tuple[Project, ...] = ()

    def record_at(self, kind: EntryKind, index: int) -> Record:
        if kind is EntryKind.DEFAULT:
            if index != 0:
                raise IndexOutOfRangeError(
                    f"Default block index must be 0, got {index}",
                    hint="The default block is a singleton.",
                )
            return self.default
        records = self.remotes if kind is EntryKind.REMOTE else self.projects
        if index < 0 or index >= len(records):
            raise IndexOutOfRangeError(
                f"{kind.value.capitalize()} index out of range: {index} (have {len(records)})",
                hint="Reload the manifest and select the entry again.",
            )
        return records[index]

    def replace_default(self, record: DefaultBlock) -> Document:
        return replace(self, default=record)

    def replace_remote(self, index: int, record: Remote) -> Document:
        self.record_at(EntryKind.REMOTE, index)
        remotes = list(self.remotes)
        remotes[index] = record
        return replace(self, remotes=tuple(remotes))

    def replace_project(self, index: int, record: Project) -> Document:
        self.record_at(EntryKind.PROJECT, index)
        projects = list(self.projects)
        projects[index] = record
        return replace(self, projects=tuple(projects))

    def replace_record(self, kind: EntryKind, index: int, record: Record) -> Document:
        if kind is EntryKind.DEFAULT:
            self.record_at(kind, index)
            return self.replace_default(cast(DefaultBlock, record))
        if kind is EntryKind.REMOTE:
            return self.replace_remote(index, cast(Remote, record))
        return self.replace_project(index, cast(Project, record))
