"""NFT.Storage API client - uploads, lists, fetches and deletes stored content."""

from __future__ import annotations

import json
import logging
from typing import Any, Sequence, TypeVar
from urllib.parse import quote

import httpx

from nft_storage.errors import ApiError, InvalidJsonError, RequestError
from nft_storage.links import METADATA_FILENAME, cid_links
from nft_storage.models.config import DEFAULT_API_URL, ClientConfig
from nft_storage.models.responses import (
    CheckNftResponse,
    DeleteNftResponse,
    GetNftResponse,
    ListNftResponse,
    StoreNftResponse,
)

log = logging.getLogger(__name__)

# Page size used when sweeping the account in delete_all_nfts()
DELETE_ALL_PAGE_SIZE = 100

_R = TypeVar("_R")


class NftStorageClient:
    """Async client for the NFT.Storage HTTP API.

    Wraps the REST surface at ``api_url``:
    - GET /              list stored items (``before``/``limit`` pagination)
    - POST /upload       upload a raw blob or a multipart directory
    - GET /{cid}         fetch a stored item
    - GET /check/{cid}   check whether a CID is stored
    - DELETE /{cid}      delete a stored item

    Every request carries ``Authorization: Bearer <token>``. The handle holds
    no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        token: str = "",
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = api_url.rstrip("/")
        self._token = token
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.AsyncClient()

    @classmethod
    def from_config(
        cls, cfg: ClientConfig, *, http_client: httpx.AsyncClient | None = None,
    ) -> NftStorageClient:
        return cls(cfg.api_url, cfg.token, http_client=http_client)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str:
        return self._token

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> NftStorageClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ── Transport ──────────────────────────────────────────

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body of a 2xx response."""
        url = f"{self._base_url}{path}"
        log.debug("%s %s", method, url)
        try:
            resp = await self._client.request(
                method,
                url,
                headers={"Authorization": f"Bearer {self._token}"},
                **kwargs,
            )
        except httpx.HTTPError as exc:
            log.error("%s %s failed: %s", method, url, exc)
            raise RequestError(str(exc) or exc.__class__.__name__) from exc

        if not resp.is_success:
            try:
                body = resp.json()
            except ValueError:
                body = resp.text
            log.warning("%s %s returned HTTP %d", method, url, resp.status_code)
            raise ApiError(resp.status_code, body)

        try:
            return resp.json()
        except ValueError as exc:
            raise InvalidJsonError(str(exc)) from exc

    @staticmethod
    def _decode(model: type[_R], raw: Any) -> _R:
        try:
            return model.from_dict(raw)  # type: ignore[attr-defined]
        except (TypeError, ValueError) as exc:
            raise InvalidJsonError(str(exc)) from exc

    @staticmethod
    def _cid_segment(cid: str) -> str:
        """Encode ``cid`` as a single path segment."""
        if not cid or cid in (".", ".."):
            raise ValueError(f"invalid CID: {cid!r}")
        return quote(cid, safe="")

    # ── Queries ────────────────────────────────────────────

    async def list_nfts(
        self,
        before: str | None = None,
        limit: int | None = None,
        only_metadata: bool = False,
    ) -> ListNftResponse:
        """List stored items.

        ``before`` returns items created before the given timestamp
        (``2021-12-01T08:52:33`` or ``2020-07-27T17:32:28Z``); ``limit`` caps
        the page size. With ``only_metadata`` only items whose first file is
        ``metadata.json`` are kept, and their links point at that file.
        """
        params: dict[str, str] = {}
        if before is not None:
            params["before"] = before
        if limit is not None:
            params["limit"] = str(limit)

        body = self._decode(
            ListNftResponse, await self._request("GET", "/", params=params),
        )

        if only_metadata:
            # A stored NFT's metadata directory holds exactly one file
            body.value = [
                v for v in body.value
                if v.files and v.files[0].name == METADATA_FILENAME
            ]
            for v in body.value:
                v.links = cid_links(v.cid, METADATA_FILENAME)
        else:
            for v in body.value:
                v.links = cid_links(v.cid)
        return body

    async def get_nft(self, cid: str) -> GetNftResponse:
        """Fetch a stored item by CID, with convenience links attached."""
        path = f"/{self._cid_segment(cid)}"
        body = self._decode(GetNftResponse, await self._request("GET", path))
        body.value.links = cid_links(body.value.cid)
        return body

    async def check_nft(self, cid: str) -> CheckNftResponse:
        """Check whether ``cid`` is stored, returning its pin and deal status."""
        path = f"/check/{self._cid_segment(cid)}"
        return self._decode(CheckNftResponse, await self._request("GET", path))

    # ── Uploads ────────────────────────────────────────────

    async def upload_file(self, data: bytes) -> StoreNftResponse:
        """Upload a single unnamed blob. The returned CID addresses the blob itself."""
        log.info("Uploading %d bytes", len(data))
        body = self._decode(
            StoreNftResponse, await self._request("POST", "/upload", content=data),
        )
        log.info("Uploaded %s", body.value.cid)
        return body

    async def upload_files_in_directory(
        self,
        files: Sequence[bytes],
        file_names: Sequence[str],
    ) -> StoreNftResponse:
        """Upload one or more named files as a single IPFS directory.

        Each call creates a new directory; files are then reachable at
        ``<dir cid>/<file name>``.
        """
        if len(files) != len(file_names):
            raise ValueError(
                f"got {len(files)} files but {len(file_names)} file names"
            )
        if not files:
            raise ValueError("at least one file is required")

        parts = [
            ("file", (name, data))
            for name, data in zip(file_names, files)
        ]
        log.info("Uploading directory of %d file(s)", len(parts))
        body = self._decode(
            StoreNftResponse, await self._request("POST", "/upload", files=parts),
        )
        log.info("Uploaded directory %s", body.value.cid)
        return body

    async def store_nft(
        self, data: bytes, name: str, description: str,
    ) -> StoreNftResponse:
        """Upload ``data`` and then a JSON metadata blob referencing its CID.

        Returns the response of the metadata upload.
        """
        stored = await self.upload_file(data)
        metadata = {
            "name": name,
            "description": description,
            "files": stored.value.cid,
        }
        return await self.upload_file(json.dumps(metadata).encode("utf-8"))

    async def store_nft_in_directory(
        self,
        files: Sequence[bytes],
        file_names: Sequence[str],
        name: str,
        description: str,
    ) -> StoreNftResponse:
        """Upload files as a directory, then a ``metadata.json`` directory listing them.

        The metadata references every uploaded file as ``ipfs://<dir cid>/<name>``.
        Returns the response of the metadata upload.
        """
        stored = await self.upload_files_in_directory(files, file_names)
        dir_cid = stored.value.cid
        metadata = {
            "name": name,
            "description": description,
            "files": [f"ipfs://{dir_cid}/{f.name}" for f in stored.value.files],
        }
        return await self.upload_files_in_directory(
            [json.dumps(metadata).encode("utf-8")], [METADATA_FILENAME],
        )

    # ── Deletion ───────────────────────────────────────────

    async def delete_nft(self, cid: str) -> DeleteNftResponse:
        """Delete a stored item by CID."""
        path = f"/{self._cid_segment(cid)}"
        return self._decode(DeleteNftResponse, await self._request("DELETE", path))

    async def delete_all_nfts(self) -> DeleteNftResponse:
        """Delete every stored item, one page at a time.

        Intended for development accounts. Stops once a listing comes back
        empty; the first failing call aborts the sweep.
        """
        deleted = 0
        while True:
            page = await self.list_nfts(limit=DELETE_ALL_PAGE_SIZE)
            if not page.value:
                break
            for v in page.value:
                log.info("Deleting CID %s", v.cid)
                await self.delete_nft(v.cid)
                deleted += 1
        log.info("Deleted %d item(s)", deleted)
        return DeleteNftResponse(ok=True)
