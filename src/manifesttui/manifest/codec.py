"""XML encoding of the manifest document."""

from __future__ import annotations

import logging as py_logging
import re
import xml.etree.ElementTree as ET  # nosec B405 - manifests are local user files
from typing import Protocol, cast

from manifesttui.errors import ManifestParseError
from manifesttui.manifest.models import (
    SCHEMAS,
    DefaultBlock,
    Document,
    EntryKind,
    Project,
    Record,
    Remote,
    build_record,
    record_values,
)

logger = py_logging.getLogger(__name__)

ROOT_TAG = "manifest"
_TAGS = {
    EntryKind.DEFAULT: "default",
    EntryKind.REMOTE: "remote",
    EntryKind.PROJECT: "project",
}
# Characters outside the XML 1.0 Char production cannot be written. Lone
# surrogates would be emitted as character references expat rejects.
_INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


class ManifestCodec(Protocol):
    def serialize(self, document: Document) -> bytes: ...

    def parse(self, data: bytes) -> Document: ...


def _record_from_element(kind: EntryKind, element: ET.Element) -> Record:
    values = {spec.label: element.get(spec.label, "") for spec in SCHEMAS[kind]}
    return build_record(kind, values)


def _append_record(parent: ET.Element, kind: EntryKind, record: Record) -> None:
    element = ET.SubElement(parent, _TAGS[kind])
    for label, value in record_values(kind, record):
        if not value:
            continue
        if _INVALID_XML_CHARS.search(value):
            raise ValueError(f"{_TAGS[kind]} attribute {label!r} contains characters XML cannot encode")
        element.set(label, value)


class XmlManifestCodec:
    """Reads and writes ``<manifest>`` documents; empty attributes are omitted."""

    def __init__(self, *, indent: str = "  ") -> None:
        self.indent = indent

    def serialize(self, document: Document) -> bytes:
        root = ET.Element(ROOT_TAG)
        _append_record(root, EntryKind.DEFAULT, document.default)
        for remote in document.remotes:
            _append_record(root, EntryKind.REMOTE, remote)
        for project in document.projects:
            _append_record(root, EntryKind.PROJECT, project)
        if self.indent:
            ET.indent(root, space=self.indent)
        return ET.tostring(root, encoding="utf-8", xml_declaration=True) + b"\n"

    def parse(self, data: bytes) -> Document:
        try:
            root = ET.fromstring(data)  # nosec B314
        except ET.ParseError as exc:
            raise ManifestParseError(
                f"Manifest is not well-formed XML: {exc}",
                hint="Fix the XML syntax and try again.",
            ) from exc
        if root.tag != ROOT_TAG:
            raise ManifestParseError(
                f"Unexpected root element: <{root.tag}>",
                hint=f"A manifest must have a <{ROOT_TAG}> root element.",
            )

        defaults = root.findall(_TAGS[EntryKind.DEFAULT])
        if len(defaults) > 1:
            raise ManifestParseError(
                f"Manifest declares {len(defaults)} <default> elements",
                hint="Keep a single <default> element.",
            )
        default = (
            cast(DefaultBlock, _record_from_element(EntryKind.DEFAULT, defaults[0]))
            if defaults
            else DefaultBlock()
        )
        remotes = [
            cast(Remote, _record_from_element(EntryKind.REMOTE, element))
            for element in root.findall(_TAGS[EntryKind.REMOTE])
        ]
        projects = [
            cast(Project, _record_from_element(EntryKind.PROJECT, element))
            for element in root.findall(_TAGS[EntryKind.PROJECT])
        ]
        logger.debug("manifest parsed remotes=%s projects=%s", len(remotes), len(projects))
        return Document(default=default, remotes=tuple(remotes), projects=tuple(projects))
