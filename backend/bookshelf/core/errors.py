"""Error taxonomy for the gateway.

Every error is terminal for the request that raised it. The ``message`` is the
only text that ever reaches the caller; backend diagnostics stay in the logs.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base class for all gateway failures."""

    message = "Request failed"
    status_code = 500

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFile(GatewayError):
    message = "Failed to upload file"
    status_code = 400


class MissingFolder(GatewayError):
    message = "Missing s3_path"
    status_code = 400


class StreamOpenFailed(GatewayError):
    message = "Failed to open file"
    status_code = 400


class StoreFailed(GatewayError):
    message = "Failed to upload file"
    status_code = 500


class MissingOwner(GatewayError):
    message = "Missing userId"
    status_code = 400


class ListFailed(GatewayError):
    message = "Failed to load library"
    status_code = 500
