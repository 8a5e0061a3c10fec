"""Response records mirroring the NFT.Storage JSON shapes.

Every field falls back to an empty/zero value when the key is absent.
``from_dict`` raises ``TypeError``/``ValueError`` when a value has the wrong
shape; the client turns those into ``InvalidJsonError``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


def _obj(raw: Any, what: str) -> dict:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise TypeError(f"{what}: expected object, got {type(raw).__name__}")
    return raw


def _arr(raw: Any, what: str) -> list:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise TypeError(f"{what}: expected array, got {type(raw).__name__}")
    return raw


def _str(raw: Any) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise TypeError(f"expected string, got {type(raw).__name__}")
    return raw


def _int(raw: Any) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise TypeError(f"expected number, got {type(raw).__name__}")
    if isinstance(raw, float) and not math.isfinite(raw):
        raise ValueError(f"expected finite number, got {raw}")
    return int(raw)


def _bool(raw: Any) -> bool:
    if raw is None:
        return False
    if not isinstance(raw, bool):
        raise TypeError(f"expected boolean, got {type(raw).__name__}")
    return raw


@dataclass
class Pin:
    """IPFS pin status of a stored item."""

    cid: str = ""
    status: str = ""  # "queued", "pinning", "pinned", "failed"
    created: str = ""
    size: int = 0

    @classmethod
    def from_dict(cls, raw: Any) -> Pin:
        d = _obj(raw, "pin")
        return cls(
            cid=_str(d.get("cid")),
            status=_str(d.get("status")),
            created=_str(d.get("created")),
            size=_int(d.get("size")),
        )

    def to_dict(self) -> dict:
        return {
            "cid": self.cid,
            "status": self.status,
            "created": self.created,
            "size": self.size,
        }


@dataclass
class FileEntry:
    """A file inside a stored directory."""

    name: str = ""
    type: str = ""  # MIME type

    @classmethod
    def from_dict(cls, raw: Any) -> FileEntry:
        d = _obj(raw, "file")
        return cls(name=_str(d.get("name")), type=_str(d.get("type")))

    def to_dict(self) -> dict:
        return {"name": self.name, "type": self.type}


# (attribute, JSON key, coercion)
_DEAL_FIELDS = (
    ("batch_root_cid", "batchRootCid", _str),
    ("last_changed", "lastChanged", _str),
    ("miner", "miner", _str),
    ("piece_cid", "pieceCid", _str),
    ("status", "status", _str),
    ("status_text", "statusText", _str),
    ("chain_deal_id", "chainDealID", _int),
    ("deal_activation", "dealActivation", _str),
    ("deal_expiration", "dealExpiration", _str),
    ("datamodel_selector", "datamodelSelector", _str),
)


@dataclass
class Deal:
    """Filecoin storage deal backing a stored item."""

    batch_root_cid: str = ""
    last_changed: str = ""
    miner: str = ""
    piece_cid: str = ""
    status: str = ""
    status_text: str = ""
    chain_deal_id: int = 0
    deal_activation: str = ""
    deal_expiration: str = ""
    datamodel_selector: str = ""

    @classmethod
    def from_dict(cls, raw: Any) -> Deal:
        d = _obj(raw, "deal")
        return cls(**{attr: conv(d.get(key)) for attr, key, conv in _DEAL_FIELDS})

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for attr, key, _ in _DEAL_FIELDS}


def _pin(raw: Any) -> Pin:
    return Pin.from_dict(raw)


def _deals(raw: Any) -> list[Deal]:
    return [Deal.from_dict(d) for d in _arr(raw, "deals")]


@dataclass
class NftValue:
    """A stored item: upload metadata plus pin and deal status."""

    cid: str = ""
    size: int = 0
    created: str = ""
    type: str = ""
    scope: str = ""
    pin: Pin = field(default_factory=Pin)
    files: list[FileEntry] = field(default_factory=list)
    deals: list[Deal] = field(default_factory=list)
    links: list[str] = field(default_factory=list)  # gateway convenience links

    @classmethod
    def from_dict(cls, raw: Any) -> NftValue:
        d = _obj(raw, "value")
        return cls(
            cid=_str(d.get("cid")),
            size=_int(d.get("size")),
            created=_str(d.get("created")),
            type=_str(d.get("type")),
            scope=_str(d.get("scope")),
            pin=_pin(d.get("pin")),
            files=[FileEntry.from_dict(f) for f in _arr(d.get("files"), "files")],
            deals=_deals(d.get("deals")),
            links=[_str(link) for link in _arr(d.get("link"), "link")],
        )

    def to_dict(self) -> dict:
        return {
            "cid": self.cid,
            "size": self.size,
            "created": self.created,
            "type": self.type,
            "scope": self.scope,
            "pin": self.pin.to_dict(),
            "files": [f.to_dict() for f in self.files],
            "deals": [d.to_dict() for d in self.deals],
            "link": list(self.links),
        }


@dataclass
class CheckValue:
    """Existence-check payload: CID with its pin and deal status."""

    cid: str = ""
    pin: Pin = field(default_factory=Pin)
    deals: list[Deal] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> CheckValue:
        d = _obj(raw, "value")
        return cls(
            cid=_str(d.get("cid")),
            pin=_pin(d.get("pin")),
            deals=_deals(d.get("deals")),
        )

    def to_dict(self) -> dict:
        return {
            "cid": self.cid,
            "pin": self.pin.to_dict(),
            "deals": [d.to_dict() for d in self.deals],
        }


# ── Envelopes ({ok, value}) ────────────────────────────


@dataclass
class ListNftResponse:
    ok: bool = False
    value: list[NftValue] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> ListNftResponse:
        d = _obj(raw, "response")
        return cls(
            ok=_bool(d.get("ok")),
            value=[NftValue.from_dict(v) for v in _arr(d.get("value"), "value")],
        )

    def to_dict(self) -> dict:
        return {"ok": self.ok, "value": [v.to_dict() for v in self.value]}


@dataclass
class StoreNftResponse:
    ok: bool = False
    value: NftValue = field(default_factory=NftValue)

    @classmethod
    def from_dict(cls, raw: Any) -> StoreNftResponse:
        d = _obj(raw, "response")
        return cls(ok=_bool(d.get("ok")), value=NftValue.from_dict(d.get("value")))

    def to_dict(self) -> dict:
        return {"ok": self.ok, "value": self.value.to_dict()}


@dataclass
class GetNftResponse:
    ok: bool = False
    value: NftValue = field(default_factory=NftValue)

    @classmethod
    def from_dict(cls, raw: Any) -> GetNftResponse:
        d = _obj(raw, "response")
        return cls(ok=_bool(d.get("ok")), value=NftValue.from_dict(d.get("value")))

    def to_dict(self) -> dict:
        return {"ok": self.ok, "value": self.value.to_dict()}


@dataclass
class DeleteNftResponse:
    ok: bool = False

    @classmethod
    def from_dict(cls, raw: Any) -> DeleteNftResponse:
        d = _obj(raw, "response")
        return cls(ok=_bool(d.get("ok")))

    def to_dict(self) -> dict:
        return {"ok": self.ok}


@dataclass
class CheckNftResponse:
    ok: bool = False
    value: CheckValue = field(default_factory=CheckValue)

    @classmethod
    def from_dict(cls, raw: Any) -> CheckNftResponse:
        d = _obj(raw, "response")
        return cls(ok=_bool(d.get("ok")), value=CheckValue.from_dict(d.get("value")))

    def to_dict(self) -> dict:
        return {"ok": self.ok, "value": self.value.to_dict()}
