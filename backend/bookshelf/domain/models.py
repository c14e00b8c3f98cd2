from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO


@dataclass(frozen=True)
class UploadAck:
    """Minimal acknowledgment of a successful store."""

    etag: str
    key: str


@dataclass(frozen=True)
class LibraryEntry:
    url: str
    thumbnail: str
    name: str


@dataclass
class UploadRequest:
    stream: BinaryIO | None
    filename: str | None
    folder: str | None
    content_type: str | None = None
