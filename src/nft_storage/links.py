"""Gateway convenience links for stored content."""

from __future__ import annotations

METADATA_FILENAME = "metadata.json"


def cid_links(cid: str, path: str | None = None) -> list[str]:
    """Return the dweb.link, ipfs.io and ipfs:// links for ``cid``.

    ``path`` (e.g. ``metadata.json``) is appended to each link when given.
    """
    suffix = f"/{path}" if path else ""
    return [
        f"https://{cid}.ipfs.dweb.link{suffix}",
        f"https://ipfs.io/ipfs/{cid}{suffix}",
        f"ipfs://{cid}{suffix}",
    ]
