from __future__ import annotations

from dataclasses import dataclass

THUMBNAIL_FOLDER = "thumbnails/"
THUMBNAIL_SUFFIX = ".jpg"


def bucket_root_url(bucket: str, region: str | None = None) -> str:
    if region:
        return f"https://{bucket}.s3.{region}.amazonaws.com/"
    return f"https://{bucket}.s3.amazonaws.com/"


@dataclass(frozen=True)
class URLPolicy:
    """Derive public URLs for stored keys.

    Pure string building: no backend call is made, and the thumbnail URL is a
    naming convention whose target may not exist.
    """

    root_url: str

    def __post_init__(self) -> None:
        if not self.root_url.endswith("/"):
            object.__setattr__(self, "root_url", self.root_url + "/")

    @classmethod
    def for_bucket(cls, bucket: str, region: str | None = None) -> "URLPolicy":
        return cls(root_url=bucket_root_url(bucket, region))

    def object_url(self, key: str) -> str:
        return f"{self.root_url}{key}"

    def thumbnail_url(self, key: str) -> str:
        return f"{self.root_url}{THUMBNAIL_FOLDER}{key}{THUMBNAIL_SUFFIX}"
