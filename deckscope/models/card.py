"""
Card Models.

Immutable card records as supplied by the card catalog. The engine only
reads these; nothing here is ever mutated after loading.

INVARIANTS:
- All models are frozen (immutable after construction)
- Set-valued fields are frozensets, sequences are tuples
- A card with no faces is its own sole face
"""

from dataclasses import dataclass, field
from enum import Enum


class TypeCategory(str, Enum):
    """Primary category of a card, resolved from its type line."""

    CREATURE = "Creature"
    PLANESWALKER = "Planeswalker"
    INSTANT = "Instant"
    SORCERY = "Sorcery"
    ARTIFACT = "Artifact"
    ENCHANTMENT = "Enchantment"
    BATTLE = "Battle"
    LAND = "Land"
    OTHER = "Other"  # Has a type line, but no known category
    UNKNOWN = "Unknown"  # No type line at all


@dataclass(frozen=True, slots=True)
class CardFace:
    """
    One face of a multi-faced card (split, adventure, transform, MDFC).

    Attributes:
        name: Face name
        mana_cost: Printed cost as a symbol string (e.g., "{1}{U}"), if any
        type_line: Face type line (e.g., "Instant - Adventure")
        oracle_text: Rules text of this face, if any
        colors: Colors of this face, if the catalog supplies them
    """

    name: str
    mana_cost: str | None = None
    type_line: str = ""
    oracle_text: str | None = None
    colors: frozenset[str] | None = None


@dataclass(frozen=True, slots=True)
class Card:
    """
    A resolved card printing from the catalog.

    Attributes:
        name: Card name (e.g., "Lightning Bolt")
        mana_cost: Printed cost symbol string, None for lands and most DFC roots
        cmc: Converted mana cost as reported by the catalog
        type_line: Full type line (e.g., "Basic Land - Forest")
        oracle_text: Rules text, None when it lives on the faces
        colors: Colors of the card itself, if known
        color_identity: Deckbuilding color identity (subset of W, U, B, R, G)
        rarity: common, uncommon, rare, mythic, special, bonus
        faces: Card faces, empty for single-faced cards
        id: Catalog printing id
    """

    name: str
    mana_cost: str | None = None
    cmc: float | None = None
    type_line: str | None = None
    oracle_text: str | None = None
    colors: frozenset[str] | None = None
    color_identity: frozenset[str] = field(default_factory=frozenset)
    rarity: str = "common"
    faces: tuple[CardFace, ...] = ()
    id: str | None = None

    def all_faces(self) -> tuple[CardFace, ...]:
        """Faces of this card; a faceless card is returned as its own sole face."""
        if self.faces:
            return self.faces
        return (
            CardFace(
                name=self.name,
                mana_cost=self.mana_cost,
                type_line=self.type_line or "",
                oracle_text=self.oracle_text,
                colors=self.colors,
            ),
        )

    def cost_strings(self) -> list[str]:
        """Non-empty cost strings of the card and each of its faces, in that order."""
        costs = [self.mana_cost] if self.mana_cost else []
        costs.extend(face.mana_cost for face in self.faces if face.mana_cost)
        return costs
