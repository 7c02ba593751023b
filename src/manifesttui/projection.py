"""Flatten a manifest document into an ordered list of addressable entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from manifesttui.manifest.models import DefaultBlock, Document, EntryKind, Project, Remote


@dataclass(frozen=True)
class Entry:
    kind: EntryKind
    index: int
    title: str
    summary: str


def _default_entry(default: DefaultBlock) -> Entry:
    return Entry(
        kind=EntryKind.DEFAULT,
        index=0,
        title="Default",
        summary=f"sync-j: {default.sync_j}, revision: {default.revision}",
    )


def _remote_entry(index: int, remote: Remote) -> Entry:
    return Entry(
        kind=EntryKind.REMOTE,
        index=index,
        title=f"Remote: {remote.name}",
        summary=(
            f"[fetch: {remote.fetch}] [revision: {remote.revision}]\n"
            f"[upstream: {remote.upstream}] [review: {remote.review}]"
        ),
    )


def _project_entry(index: int, project: Project) -> Entry:
    return Entry(
        kind=EntryKind.PROJECT,
        index=index,
        title=f"Project: {project.name}",
        summary=(
            f"[path: {project.path}] [remote: {project.remote}] [revision: {project.revision}]\n"
            f"[upstream: {project.upstream}] [groups: {project.groups}] "
            f"[dest-branch: {project.dest_branch}]"
        ),
    )


def project(document: Document) -> list[Entry]:
    entries = [_default_entry(document.default)]
    entries.extend(_remote_entry(index, item) for index, item in enumerate(document.remotes))
    entries.extend(_project_entry(index, item) for index, item in enumerate(document.projects))
    return entries


def entry_for(document: Document, kind: EntryKind, index: int) -> Entry:
    """Project a single record; raises ``IndexOutOfRangeError`` for a bad slot."""
    record = document.record_at(kind, index)
    if kind is EntryKind.DEFAULT:
        return _default_entry(cast(DefaultBlock, record))
    if kind is EntryKind.REMOTE:
        return _remote_entry(index, cast(Remote, record))
    return _project_entry(index, cast(Project, record))


def filter_entries(entries: list[Entry], query: str) -> list[Entry]:
    needle = query.strip().lower()
    if not needle:
        return list(entries)
    return [entry for entry in entries if needle in entry.title.lower()]
