from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

PathInput = Union[str, os.PathLike]


class SymlinkType(str, Enum):
    AUTO = "auto"
    FILE = "file"
    DIRECTORY = "directory"


def normalize_link_type(value: SymlinkType | str) -> SymlinkType:
    if isinstance(value, SymlinkType):
        return value
    text = str(value).strip().lower()
    try:
        return SymlinkType(text)
    except ValueError:
        raise ValueError(f"Unsupported symlink type: {value}") from None


def normalize_path_text(value: PathInput | None) -> str:
    if value is None:
        return ""
    return os.fspath(value).strip()


@dataclass(frozen=True)
class LinkRequest:
    source: str
    destination: str
    requested_type: SymlinkType = SymlinkType.AUTO

    @property
    def source_path(self) -> Path:
        return Path(self.source).expanduser()

    @property
    def destination_path(self) -> Path:
        return Path(self.destination).expanduser()


@dataclass(frozen=True)
class HistoryEntry:
    source: str
    destination: str

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"
