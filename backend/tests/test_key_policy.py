import pytest

from bookshelf.core.errors import MissingFile, MissingFolder, MissingOwner
from bookshelf.domain.keys import build_key, build_list_prefix, normalize_folder


@pytest.mark.parametrize(
    ("folder", "filename", "expected"),
    [
        ("users/42", "book.pdf", "users/42/book.pdf"),
        ("users/42/", "book.pdf", "users/42/book.pdf"),
        ("users/42//", "book.pdf", "users/42/book.pdf"),
        ("shared", "a b.pdf", "shared/a b.pdf"),
    ],
)
def test_build_key_appends_single_separator(folder, filename, expected):
    assert build_key(folder, filename) == expected


def test_normalize_folder_is_idempotent():
    once = normalize_folder("users/7")
    assert normalize_folder(once) == once == "users/7/"


@pytest.mark.parametrize("folder", ["", None, "/", "//"])
def test_build_key_requires_folder(folder):
    with pytest.raises(MissingFolder):
        build_key(folder, "book.pdf")


def test_build_key_requires_filename():
    with pytest.raises(MissingFile):
        build_key("users/42", "")


def test_build_list_prefix():
    assert build_list_prefix("42") == "users/42/"
    assert build_list_prefix("alice") == "users/alice/"


@pytest.mark.parametrize("owner_id", ["", None])
def test_build_list_prefix_requires_owner(owner_id):
    with pytest.raises(MissingOwner):
        build_list_prefix(owner_id)
