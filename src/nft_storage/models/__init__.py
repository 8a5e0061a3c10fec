"""Data models for the nft_storage client."""

from nft_storage.models.config import ClientConfig, DEFAULT_API_URL
from nft_storage.models.responses import (
    CheckNftResponse,
    CheckValue,
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
    "ClientConfig", "DEFAULT_API_URL",
    "Pin", "FileEntry", "Deal", "NftValue", "CheckValue",
    "ListNftResponse", "StoreNftResponse", "GetNftResponse",
    "DeleteNftResponse", "CheckNftResponse",
]
