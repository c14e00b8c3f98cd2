"""Storage key construction.

Ownership is a naming convention only: an owner's objects are whatever lives
under ``users/<owner_id>/``. Nothing enforces that writers honor it.
"""

from __future__ import annotations

from bookshelf.core.errors import MissingFile, MissingFolder, MissingOwner

SEPARATOR = "/"
OWNER_ROOT = "users"


def normalize_folder(folder: str | None) -> str:
    if not folder:
        raise MissingFolder()
    # A separator-only folder names no directory at all.
    stripped = folder.rstrip(SEPARATOR)
    if not stripped:
        raise MissingFolder()
    return stripped + SEPARATOR


def build_key(folder: str | None, filename: str | None) -> str:
    folder = normalize_folder(folder)
    if not filename:
        raise MissingFile()
    return folder + filename


def build_list_prefix(owner_id: str | None) -> str:
    if not owner_id:
        raise MissingOwner()
    return f"{OWNER_ROOT}{SEPARATOR}{owner_id}{SEPARATOR}"
