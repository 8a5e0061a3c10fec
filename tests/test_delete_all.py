"""Tests 30-33: Deleting everything stored under the account."""

from __future__ import annotations

import httpx
import pytest

from nft_storage.client import DELETE_ALL_PAGE_SIZE
from nft_storage.errors import ApiError
from tests.conftest import make_client
from tests.factories import make_nft_value


def _seed(fake_api, count: int) -> None:
    for i in range(count):
        fake_api.add_item(make_nft_value(
            cid=f"bafy{i:04d}",
            created=f"2021-12-01T{i // 3600:02d}:{i // 60 % 60:02d}:{i % 60:02d}.000Z",
        ))


# ── Test 30: Empty account stops after one listing ────────────────


async def test_delete_all_empty(client, fake_api):
    resp = await client.delete_all_nfts()

    assert resp.ok
    assert len(fake_api.requests_to("GET", "/")) == 1
    assert fake_api.requests_to("DELETE") == []


# ── Test 31: Every item is deleted, page by page ──────────────────


async def test_delete_all_pages(client, fake_api):
    _seed(fake_api, DELETE_ALL_PAGE_SIZE + 20)

    resp = await client.delete_all_nfts()

    assert resp.ok
    assert fake_api.items == {}
    assert len(fake_api.requests_to("DELETE")) == DELETE_ALL_PAGE_SIZE + 20
    # Two full/partial pages plus the terminating empty page
    listings = fake_api.requests_to("GET", "/")
    assert len(listings) == 3
    assert all(r.url.params["limit"] == str(DELETE_ALL_PAGE_SIZE) for r in listings)


# ── Test 32: Terminates on the first empty page ───────────────────


async def test_delete_all_stops_on_empty_page():
    """A page with zero entries ends the loop even if ok is false."""
    pages = [
        {"ok": True, "value": [make_nft_value(cid="bafyOnly")]},
        {"ok": False, "value": []},
    ]
    deleted: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json=pages.pop(0))
        deleted.append(request.url.path[1:])
        return httpx.Response(200, json={"ok": True})

    c = make_client(handler)
    try:
        resp = await c.delete_all_nfts()
    finally:
        await c.client.aclose()

    assert resp.ok
    assert deleted == ["bafyOnly"]
    assert pages == []


# ── Test 33: A failing delete aborts the sweep ────────────────────


async def test_delete_all_propagates_errors():
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.method)
        if request.method == "GET":
            return httpx.Response(200, json={
                "ok": True,
                "value": [make_nft_value(cid="bafyA"), make_nft_value(cid="bafyB")],
            })
        return httpx.Response(403, json={"ok": False, "error": {"message": "forbidden"}})

    c = make_client(handler)
    try:
        with pytest.raises(ApiError) as exc_info:
            await c.delete_all_nfts()
    finally:
        await c.client.aclose()

    assert exc_info.value.status_code == 403
    assert calls == ["GET", "DELETE"]
