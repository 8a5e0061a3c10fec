"""PinningStorage protocol - the operations offered by a pinning service client."""

from __future__ import annotations

from typing import Protocol, Sequence

from nft_storage.models.responses import (
    CheckNftResponse,
    DeleteNftResponse,
    GetNftResponse,
    ListNftResponse,
    StoreNftResponse,
)


class PinningStorage(Protocol):
    """Stores content on IPFS through a hosted pinning service."""

    async def list_nfts(
        self,
        before: str | None = None,
        limit: int | None = None,
        only_metadata: bool = False,
    ) -> ListNftResponse:
        """List stored items, newest first."""
        ...

    async def get_nft(self, cid: str) -> GetNftResponse:
        ...

    async def check_nft(self, cid: str) -> CheckNftResponse:
        ...

    async def upload_file(self, data: bytes) -> StoreNftResponse:
        ...

    async def upload_files_in_directory(
        self, files: Sequence[bytes], file_names: Sequence[str],
    ) -> StoreNftResponse:
        ...

    async def store_nft(
        self, data: bytes, name: str, description: str,
    ) -> StoreNftResponse:
        """Upload content plus a metadata blob referencing it."""
        ...

    async def store_nft_in_directory(
        self,
        files: Sequence[bytes],
        file_names: Sequence[str],
        name: str,
        description: str,
    ) -> StoreNftResponse:
        """Upload a directory plus a metadata.json referencing each file."""
        ...

    async def delete_nft(self, cid: str) -> DeleteNftResponse:
        ...

    async def delete_all_nfts(self) -> DeleteNftResponse:
        """Delete everything stored under the account."""
        ...
