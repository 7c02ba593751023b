from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from manifesttui.manifest import (
    DefaultBlock,
    Document,
    EntryKind,
    Project,
    Remote,
    XmlManifestCodec,
    record_values,
)
from manifesttui.projection import project
from manifesttui.session import FocusDirection, begin_edit, commit, move_focus, set_field_value

# Any assigned non-control character, plus the whitespace controls XML keeps.
_VALUE_CHARS = st.characters(exclude_categories=("Cs", "Cc", "Cn"), include_characters="\t\n\r")
_SURROGATES = st.integers(min_value=0xD800, max_value=0xDFFF).map(chr)
_VALUES = st.text(alphabet=_VALUE_CHARS, max_size=12)

_DEFAULTS = st.builds(DefaultBlock, sync_j=_VALUES, revision=_VALUES)
_REMOTES = st.builds(
    Remote,
    name=_VALUES,
    fetch=_VALUES,
    revision=_VALUES,
    upstream=_VALUES,
    review=_VALUES,
)
_PROJECTS = st.builds(
    Project,
    path=_VALUES,
    name=_VALUES,
    remote=_VALUES,
    revision=_VALUES,
    upstream=_VALUES,
    groups=_VALUES,
    dest_branch=_VALUES,
)
_DOCUMENTS = st.builds(
    Document,
    default=_DEFAULTS,
    remotes=st.lists(_REMOTES, max_size=5).map(tuple),
    projects=st.lists(_PROJECTS, max_size=5).map(tuple),
)


@given(_DOCUMENTS)
def test_projection_has_one_entry_per_record_in_order(document: Document) -> None:
    entries = project(document)

    assert len(entries) == 1 + len(document.remotes) + len(document.projects)
    assert entries[0].kind is EntryKind.DEFAULT
    remote_entries = entries[1 : 1 + len(document.remotes)]
    project_entries = entries[1 + len(document.remotes) :]
    assert [(entry.kind, entry.index) for entry in remote_entries] == [
        (EntryKind.REMOTE, index) for index in range(len(document.remotes))
    ]
    assert [(entry.kind, entry.index) for entry in project_entries] == [
        (EntryKind.PROJECT, index) for index in range(len(document.projects))
    ]


@given(_DOCUMENTS)
def test_serialize_then_parse_is_identity(document: Document) -> None:
    codec = XmlManifestCodec()

    assert codec.parse(codec.serialize(document)) == document


@given(_DOCUMENTS, st.data())
def test_focus_cycles_back_after_one_lap(document: Document, data: st.DataObject) -> None:
    entries = project(document)
    entry = data.draw(st.sampled_from(entries))
    session = begin_edit(document, entry)
    start = data.draw(st.integers(min_value=0, max_value=len(session.fields) - 1))
    session.focus_index = start

    for direction in FocusDirection:
        moved = session
        for _ in range(len(session.fields)):
            moved = move_focus(moved, direction)
        assert moved.focus_index == start


@given(_DOCUMENTS, st.data())
def test_commit_writes_every_edited_value(document: Document, data: st.DataObject) -> None:
    entry = data.draw(st.sampled_from(project(document)))
    session = begin_edit(document, entry)
    new_values = data.draw(st.lists(_VALUES, min_size=len(session.fields), max_size=len(session.fields)))
    for value in new_values:
        session = move_focus(set_field_value(session, value), FocusDirection.NEXT)

    updated = commit(document, session)

    record = updated.record_at(entry.kind, entry.index)
    assert [value for _, value in record_values(entry.kind, record)] == new_values
    codec = XmlManifestCodec()
    assert codec.parse(codec.serialize(updated)) == updated


@given(_DOCUMENTS, _VALUES, _SURROGATES)
def test_lone_surrogates_are_rejected_before_output(
    document: Document, prefix: str, surrogate: str
) -> None:
    broken = document.replace_default(DefaultBlock(sync_j=prefix + surrogate))

    with pytest.raises(ValueError, match="sync-j"):
        XmlManifestCodec().serialize(broken)
