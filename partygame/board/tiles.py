"""Externally visible board values.

Kind-specific tile data lives in a payload variant rather than optional
fields: switching a tile's kind swaps the payload, so a tile forced to
``key_shop`` can never keep a stale coin delta.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple, Union

# Tile kinds
START = "start"
COINS = "coins"
MINIGAME = "minigame"
KEY_SHOP = "key_shop"
MALUS = "malus"
BONUS = "bonus"

TILE_KINDS = (START, COINS, MINIGAME, KEY_SHOP, MALUS, BONUS)

MINIGAME_CATEGORIES = ("skill", "luck", "quiz", "other")

KEY_PRICE = 30
COINS_RANGE = (3, 8)


@dataclass(frozen=True)
class CoinsPayload:
    """Carried by ``coins`` (positive) and ``malus`` (negative) tiles."""

    coins_change: int


@dataclass(frozen=True)
class KeyShopPayload:
    key_price: int = KEY_PRICE


@dataclass(frozen=True)
class MinigamePayload:
    category: str = "other"


TilePayload = Union[CoinsPayload, KeyShopPayload, MinigamePayload]

_PAYLOAD_FOR_KIND = {
    COINS: CoinsPayload,
    MALUS: CoinsPayload,
    KEY_SHOP: KeyShopPayload,
    MINIGAME: MinigamePayload,
}


def payload_matches(kind: str, payload: Optional[TilePayload]) -> bool:
    expected = _PAYLOAD_FOR_KIND.get(kind)
    if expected is None:
        return payload is None
    return isinstance(payload, expected)


@dataclass(frozen=True)
class Tile:
    id: int
    kind: str
    x: int
    y: int
    next_ids: Tuple[int, ...] = ()
    payload: Optional[TilePayload] = None

    def with_kind(self, kind: str, payload: Optional[TilePayload] = None) -> "Tile":
        if not payload_matches(kind, payload):
            raise ValueError(f"payload {payload!r} does not fit tile kind {kind!r}")
        return replace(self, kind=kind, payload=payload)

    @property
    def coins_change(self) -> Optional[int]:
        return self.payload.coins_change if isinstance(self.payload, CoinsPayload) else None

    @property
    def key_price(self) -> Optional[int]:
        return self.payload.key_price if isinstance(self.payload, KeyShopPayload) else None

    @property
    def minigame_category(self) -> Optional[str]:
        return self.payload.category if isinstance(self.payload, MinigamePayload) else None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "kind": self.kind,
            "x": self.x,
            "y": self.y,
            "next": list(self.next_ids),
        }
        if self.coins_change is not None:
            out["coinsChange"] = self.coins_change
        if self.key_price is not None:
            out["keyPrice"] = self.key_price
        if self.minigame_category is not None:
            out["minigameCategory"] = self.minigame_category
        return out


@dataclass(frozen=True)
class Board:
    id: str
    tiles: Tuple[Tile, ...]

    def __len__(self) -> int:
        return len(self.tiles)

    def kind_counts(self) -> Dict[str, int]:
        counts = {k: 0 for k in TILE_KINDS}
        for t in self.tiles:
            counts[t.kind] = counts.get(t.kind, 0) + 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "tiles": [t.to_dict() for t in self.tiles]}


__all__ = [
    "START",
    "COINS",
    "MINIGAME",
    "KEY_SHOP",
    "MALUS",
    "BONUS",
    "TILE_KINDS",
    "MINIGAME_CATEGORIES",
    "KEY_PRICE",
    "COINS_RANGE",
    "CoinsPayload",
    "KeyShopPayload",
    "MinigamePayload",
    "TilePayload",
    "payload_matches",
    "Tile",
    "Board",
]
