"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from nft_storage.models.config import ClientConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "NFT_STORAGE_",
) -> ClientConfig:
    """Load client configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (NFT_STORAGE_TOKEN, etc.)
        2. TOML config file
        3. Defaults from ClientConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = ClientConfig()

    # ── API section ────────────────────────────────────────
    api = raw.get("api", {})
    if v := api.get("url"):
        cfg.api_url = str(v)
    if v := api.get("token"):
        cfg.token = str(v)

    # ── Client section ─────────────────────────────────────
    client = raw.get("client", {})
    if v := client.get("log_level"):
        cfg.log_level = str(v)

    # ── Environment variable overrides (highest priority) ──
    if token := os.environ.get(f"{env_prefix}TOKEN"):
        cfg.token = token
    if url := os.environ.get(f"{env_prefix}API_URL"):
        cfg.api_url = url
    if level := os.environ.get(f"{env_prefix}LOG_LEVEL"):
        cfg.log_level = level

    return cfg
