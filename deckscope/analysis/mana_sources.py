"""
Mana source estimation.

Infers which colors of mana a permanent can produce from its type line and
rules text. These are text heuristics: they miss cards with unusual wording
and over-count some others.

Rules, applied in order:
1. Non-permanents produce nothing.
2. A basic land produces the color of the first basic type it names, and
   nothing else is checked.
3. "Any color" producers mark AnyColor.
4. Fetch text ("search your library for a Plains or Island card") marks
   each basic type named.
5. "Add {..}" clauses: a choice ("or") marks each named color once; a
   plain clause adds one per symbol ("Add {G}{G}" adds two).
"""

import re

from deckscope.models.card import Card
from deckscope.models.mana import ManaSourceVector

PERMANENT_TYPES: tuple[str, ...] = (
    "land",
    "creature",
    "artifact",
    "enchantment",
    "planeswalker",
    "battle",
)

# Checked in this order; the first basic type named wins
BASIC_LAND_TYPE_TO_MANA: dict[str, str] = {
    "plains": "W",
    "island": "U",
    "swamp": "B",
    "mountain": "R",
    "forest": "G",
}

ANY_COLOR_PHRASES: tuple[str, ...] = (
    "add one mana of any color",
    "mana of any color in your commander's color identity",
)

FETCH_PATTERN = re.compile(r"search your library for an? ([\w\s,]+) card")
ADD_MANA_PATTERN = re.compile(r"add ((?:\{[wubrgcxy\d/p]+\}\s*(?:or)?\s*)+)", re.IGNORECASE)
PRODUCED_SYMBOL_PATTERN = re.compile(r"\{([wubrgc])\}", re.IGNORECASE)


def is_permanent(card: Card) -> bool:
    type_line = (card.type_line or "").lower()
    return any(kind in type_line for kind in PERMANENT_TYPES)


def combined_oracle_text(card: Card) -> str:
    """Lowercased rules text of the card and all of its faces."""
    texts = [card.oracle_text or ""]
    texts.extend(face.oracle_text for face in card.faces if face.oracle_text)
    return "\n".join(texts).lower()


def estimate_mana_sources(card: Card) -> ManaSourceVector:
    """
    Estimate the colors one copy of a card can produce.

    Args:
        card: Card to inspect

    Returns:
        ManaSourceVector for a single copy; multiply by quantity to fold
        into a deck total.
    """
    sources = ManaSourceVector()
    if not is_permanent(card):
        return sources

    type_line = (card.type_line or "").lower()
    if "basic" in type_line and "land" in type_line:
        for land_type, symbol in BASIC_LAND_TYPE_TO_MANA.items():
            if land_type in type_line:
                sources[symbol] = 1
                return sources

    text = combined_oracle_text(card)

    if any(phrase in text for phrase in ANY_COLOR_PHRASES):
        sources.any_color = 1

    for match in FETCH_PATTERN.finditer(text):
        land_types = match.group(1)
        for land_type, symbol in BASIC_LAND_TYPE_TO_MANA.items():
            if land_type in land_types:
                sources[symbol] = 1

    for match in ADD_MANA_PATTERN.finditer(text):
        clause = match.group(1)
        symbols = [s.upper() for s in PRODUCED_SYMBOL_PATTERN.findall(clause)]
        if " or " in clause:
            for symbol in symbols:
                sources[symbol] = 1
        else:
            for symbol in symbols:
                sources[symbol] += 1

    return sources


def deck_mana_sources(card: Card, quantity: int) -> ManaSourceVector:
    """Contribution of an entry of `quantity` copies to the deck-wide vector."""
    return estimate_mana_sources(card).scaled(quantity)
