"""Manifest document domain package."""

from .codec import ManifestCodec, XmlManifestCodec
from .models import (
    SCHEMAS,
    DefaultBlock,
    Document,
    EntryKind,
    FieldSpec,
    Project,
    Record,
    Remote,
    build_record,
    record_values,
    schema_labels,
)
from .storage import FileStorage, ManifestStorage

__all__ = [
    "build_record",
    "DefaultBlock",
    "Document",
    "EntryKind",
    "FieldSpec",
    "FileStorage",
    "ManifestCodec",
    "ManifestStorage",
    "Project",
    "Record",
    "record_values",
    "Remote",
    "SCHEMAS",
    "schema_labels",
    "XmlManifestCodec",
]
