"""Async client for the NFT.Storage pinning service."""

from nft_storage.client import DELETE_ALL_PAGE_SIZE, NftStorageClient
from nft_storage.config import load_config
from nft_storage.errors import ApiError, InvalidJsonError, NftStorageError, RequestError
from nft_storage.interfaces import PinningStorage
from nft_storage.links import METADATA_FILENAME, cid_links
from nft_storage.models import (
    CheckNftResponse,
    CheckValue,
    ClientConfig,
    Deal,
    DeleteNftResponse,
    FileEntry,
    GetNftResponse,
    ListNftResponse,
    NftValue,
    Pin,
    StoreNftResponse,
)

__all__ = [
    "NftStorageClient", "PinningStorage", "DELETE_ALL_PAGE_SIZE", "load_config",
    "NftStorageError", "RequestError", "InvalidJsonError", "ApiError",
    "cid_links", "METADATA_FILENAME",
    "ClientConfig",
    "Pin", "FileEntry", "Deal", "NftValue", "CheckValue",
    "ListNftResponse", "StoreNftResponse", "GetNftResponse",
    "DeleteNftResponse", "CheckNftResponse",
]
