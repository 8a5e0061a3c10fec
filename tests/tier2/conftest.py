"""Tier 2 fixtures: a local aiohttp server speaking the NFT.Storage API."""

from __future__ import annotations

import hashlib

import pytest
from aiohttp import web

from nft_storage.client import NftStorageClient
from tests.conftest import TEST_TOKEN


class LocalApiServer:
    """Minimal NFT.Storage API on 127.0.0.1 backed by a dict."""

    def __init__(self, token: str) -> None:
        self.token = token
        self.items: dict[str, dict] = {}
        self.seen_auth: list[str] = []
        self._clock = 0

    def app(self) -> web.Application:
        app = web.Application(middlewares=[self._auth])
        app.router.add_get("/", self.handle_list)
        app.router.add_post("/upload", self.handle_upload)
        app.router.add_get("/check/{cid}", self.handle_check)
        app.router.add_get("/{cid}", self.handle_get)
        app.router.add_delete("/{cid}", self.handle_delete)
        return app

    @web.middleware
    async def _auth(self, request, handler):
        auth = request.headers.get("Authorization", "")
        self.seen_auth.append(auth)
        if auth != f"Bearer {self.token}":
            return web.json_response(
                {"ok": False, "error": {"name": "Unauthorized", "message": "bad token"}},
                status=401,
            )
        return await handler(request)

    def _store(self, blob: bytes, files: list[dict], kind: str) -> dict:
        self._clock += 1
        cid = "bafy" + hashlib.sha256(blob).hexdigest()[:52]
        created = f"2022-01-01T00:00:{self._clock:02d}.000Z"
        value = {
            "cid": cid,
            "size": len(blob),
            "created": created,
            "type": kind,
            "scope": "default",
            "pin": {"cid": cid, "status": "queued", "created": created, "size": len(blob)},
            "files": files,
            "deals": [],
        }
        self.items[cid] = value
        return value

    async def handle_list(self, request):
        limit = int(request.query.get("limit") or 10)
        before = request.query.get("before")
        values = sorted(self.items.values(), key=lambda v: v["created"], reverse=True)
        if before:
            values = [v for v in values if v["created"] < before]
        return web.json_response({"ok": True, "value": values[:limit]})

    async def handle_upload(self, request):
        if request.content_type == "multipart/form-data":
            reader = await request.multipart()
            files, blob = [], b""
            async for part in reader:
                data = await part.read()
                files.append({"name": part.filename, "type": "application/octet-stream"})
                blob += part.filename.encode() + data
            value = self._store(blob, files, "directory")
        else:
            value = self._store(await request.read(), [], "application/octet-stream")
        return web.json_response({"ok": True, "value": value})

    def _missing(self):
        return web.json_response(
            {"ok": False, "error": {"name": "HTTPError", "message": "NFT not found"}},
            status=404,
        )

    async def handle_get(self, request):
        cid = request.match_info["cid"]
        if cid not in self.items:
            return self._missing()
        return web.json_response({"ok": True, "value": self.items[cid]})

    async def handle_check(self, request):
        cid = request.match_info["cid"]
        if cid not in self.items:
            return self._missing()
        item = self.items[cid]
        return web.json_response(
            {"ok": True, "value": {"cid": cid, "pin": item["pin"], "deals": []}},
        )

    async def handle_delete(self, request):
        cid = request.match_info["cid"]
        if self.items.pop(cid, None) is None:
            return self._missing()
        return web.json_response({"ok": True})


@pytest.fixture
async def api_server():
    """Local API server on an ephemeral port. Returns (base_url, server)."""
    server = LocalApiServer(TEST_TOKEN)
    runner = web.AppRunner(server.app())
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    host, port = runner.addresses[0][:2]
    yield f"http://{host}:{port}", server
    await runner.cleanup()


@pytest.fixture
async def live_client(api_server):
    """Real NftStorageClient (own httpx client) pointed at the local server."""
    base_url, _ = api_server
    async with NftStorageClient(base_url, TEST_TOKEN) as c:
        yield c
