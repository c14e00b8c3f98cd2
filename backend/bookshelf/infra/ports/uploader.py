from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO

from bookshelf.domain.models import UploadAck


class UploaderPort(ABC):
    @abstractmethod
    def store(self, key: str, stream: BinaryIO, content_type: str, acl: str) -> UploadAck:
        """Create or overwrite exactly one object at key."""
