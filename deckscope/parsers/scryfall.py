"""
Scryfall payload adapters.

Turns card records in Scryfall's JSON shape, and decks in the
deck-with-details shape served by the deck API, into the immutable engine
models. Optional fields that are missing or null come through as None or
empty; only a deck entry without its card record is rejected.

Card objects: https://scryfall.com/docs/api/cards
"""

import json
from pathlib import Path
from typing import Any, TypedDict

from deckscope.models.card import Card, CardFace
from deckscope.models.deck import Deck, DeckEntry

VALID_RARITIES = frozenset({"common", "uncommon", "rare", "mythic", "special", "bonus"})


def _normalize_rarity(rarity: str | None) -> str:
    """Normalize rarity to a known Scryfall rarity, defaulting to common."""
    rarity = (rarity or "").lower()
    return rarity if rarity in VALID_RARITIES else "common"


class DeckCardData(TypedDict, total=False):
    """One deck entry as served by the deck API."""

    id: str
    quantity: int
    is_commander: bool
    is_sideboard: bool
    is_maybeboard: bool
    card: dict[str, Any]


def _parse_colors(value: Any) -> frozenset[str] | None:
    """
    Read a color list.

    Stored rows keep colors as JSON strings, API payloads as arrays.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = json.loads(value) if value else []
    return frozenset(str(color).upper() for color in value)


def _parse_cmc(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def parse_card_face(data: dict[str, Any]) -> CardFace:
    """Build a CardFace from a Scryfall card_face object."""
    return CardFace(
        name=data.get("name", ""),
        mana_cost=data.get("mana_cost") or None,
        type_line=data.get("type_line") or "",
        oracle_text=data.get("oracle_text"),
        colors=_parse_colors(data.get("colors")),
    )


def parse_card(data: dict[str, Any]) -> Card:
    """
    Build a Card from a Scryfall card object.

    Args:
        data: Scryfall card JSON (API object or reconstructed database row)

    Returns:
        Immutable Card
    """
    faces = data.get("card_faces") or []
    if isinstance(faces, str):
        faces = json.loads(faces)

    return Card(
        name=data.get("name", ""),
        mana_cost=data.get("mana_cost") or None,
        cmc=_parse_cmc(data.get("cmc")),
        type_line=data.get("type_line") or None,
        oracle_text=data.get("oracle_text"),
        colors=_parse_colors(data.get("colors")),
        color_identity=_parse_colors(data.get("color_identity")) or frozenset(),
        rarity=_normalize_rarity(data.get("rarity")),
        faces=tuple(parse_card_face(face) for face in faces),
        id=data.get("id"),
    )


def parse_deck_entry(data: DeckCardData) -> DeckEntry:
    """
    Build a DeckEntry from a deck-card payload.

    Raises:
        ValueError: If the entry has no card record joined in
        InvalidDeckEntryError: If quantity or board flags are invalid
    """
    card_data = data.get("card")
    if not card_data:
        raise ValueError(f"Deck entry {data.get('id')!r} has no card record")

    return DeckEntry(
        card=parse_card(card_data),
        quantity=int(data.get("quantity", 1)),
        is_commander=bool(data.get("is_commander", False)),
        is_sideboard=bool(data.get("is_sideboard", False)),
        is_maybeboard=bool(data.get("is_maybeboard", False)),
        id=data.get("id"),
    )


def parse_deck(data: dict[str, Any]) -> Deck:
    """Build a Deck from a deck-with-details payload."""
    return Deck(
        format=(data.get("format") or "").lower(),
        entries=tuple(parse_deck_entry(entry) for entry in data.get("cards") or []),
        name=data.get("name", ""),
    )


def load_deck(path: Path) -> Deck:
    """
    Load a deck-with-details JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(path, encoding="utf-8") as f:
        return parse_deck(json.load(f))
