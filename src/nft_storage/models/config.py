"""Configuration model for the client and CLI."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_API_URL = "https://api.nft.storage"


@dataclass
class ClientConfig:
    """Resolved client configuration."""

    api_url: str = DEFAULT_API_URL
    token: str = ""  # loaded from env var NFT_STORAGE_TOKEN
    log_level: str = "info"
