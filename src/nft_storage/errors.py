"""Exceptions raised by the NFT.Storage client."""

from __future__ import annotations

import json
from typing import Any


class NftStorageError(Exception):
    """Base class for all client failures."""


class RequestError(NftStorageError):
    """The request never produced a response (connect, TLS, timeout, ...)."""


class InvalidJsonError(NftStorageError):
    """A response body was not JSON, or not JSON of the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Unable to parse json, {message}")


class ApiError(NftStorageError):
    """The API answered with a non-2xx status.

    ``body`` is the decoded JSON error document, or the raw text when the
    error body is not JSON.
    """

    def __init__(self, status_code: int, body: Any) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {self._render(body)}")

    @staticmethod
    def _render(body: Any) -> str:
        if isinstance(body, str):
            return body
        return json.dumps(body)
