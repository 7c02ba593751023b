"""Deterministic error model and exit code contract."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    SUCCESS = 0
    INVALID_ARGS = 2
    CONFIG_ERROR = 3
    RUNTIME_ERROR = 4
    PARSE_ERROR = 5
    IO_ERROR = 6
    VALIDATION_ERROR = 7


class SaveStage(str, Enum):
    SERIALIZE = "serialize"
    WRITE = "write"
    READ_BACK = "read-back"
    REPARSE = "reparse"


@dataclass
class ManifestTuiError(Exception):
    message: str
    code: ExitCode = ExitCode.RUNTIME_ERROR
    hint: str = ""

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} Hint: {self.hint}"
        return self.message


@dataclass
class ManifestReadError(ManifestTuiError):
    code: ExitCode = ExitCode.IO_ERROR


@dataclass
class ManifestParseError(ManifestTuiError):
    code: ExitCode = ExitCode.PARSE_ERROR


@dataclass
class EntryStaleError(ManifestTuiError):
    code: ExitCode = ExitCode.VALIDATION_ERROR


@dataclass
class IndexOutOfRangeError(ManifestTuiError):
    code: ExitCode = ExitCode.VALIDATION_ERROR


@dataclass
class SessionConsumedError(ManifestTuiError):
    code: ExitCode = ExitCode.VALIDATION_ERROR


@dataclass
class SaveError(ManifestTuiError):
    """Base for failures of one stage of the save/reload cycle."""

    stage: ClassVar[SaveStage]
    file_overwritten: ClassVar[bool] = False


@dataclass
class SerializationError(SaveError):
    stage: ClassVar[SaveStage] = SaveStage.SERIALIZE


@dataclass
class WriteError(SaveError):
    code: ExitCode = ExitCode.IO_ERROR
    stage: ClassVar[SaveStage] = SaveStage.WRITE


@dataclass
class ReadBackError(SaveError):
    code: ExitCode = ExitCode.IO_ERROR
    stage: ClassVar[SaveStage] = SaveStage.READ_BACK
    file_overwritten: ClassVar[bool] = True


@dataclass
class ReparseError(SaveError):
    code: ExitCode = ExitCode.PARSE_ERROR
    stage: ClassVar[SaveStage] = SaveStage.REPARSE
    file_overwritten: ClassVar[bool] = True


def user_facing_error(message: str, *, hint: str = "") -> str:
    if hint:
        return f"Error: {message}. Next step: {hint}"
    return f"Error: {message}."
