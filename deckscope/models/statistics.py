"""
Deck statistics models.

The statistics view handed to charts and export features. Every value is
derived from a single deck snapshot; nothing is carried across snapshots.
"""

from dataclasses import dataclass, field
from typing import Any

from deckscope.models.deck import Board
from deckscope.models.mana import ManaPipVector, ManaSourceVector

# Display order for rarities, unknown rarities sort last
RARITY_ORDER: dict[str, int] = {
    "mythic": 1,
    "rare": 2,
    "uncommon": 3,
    "common": 4,
    "special": 5,
    "bonus": 6,
}


@dataclass(frozen=True)
class DeckStatistics:
    """
    Aggregate statistics for one board view of a deck.

    Attributes:
        board: Which segment was analyzed (MAINBOARD includes commanders)
        total_cards: Sum of quantities in the analyzed segment
        type_distribution: Quantity per primary type
        mana_curve: Non-land quantity per mana value bin ("0".."9", "10+")
        color_distribution: Quantity per color identity group (W/U/B/R/G,
            Colorless, Multicolor), lands included
        spell_color_distribution: Same grouping over non-land cards only
        rarity_distribution: Quantity per rarity
        mana_sources: Mana-producing permanents per color
        mana_symbols: Cost symbols of non-land cards
        average_spell_cmc: Mean mana value over every non-land copy
        median_spell_cmc: Median mana value over every non-land copy
        land_count: Copies whose primary type is Land
        non_land_count: total_cards - land_count
        land_ratio: Lands as a percentage of total_cards
        multicolor_ratio: Multicolor cards as a percentage of total_cards
        card_advantage_count: Copies whose text mentions draw/search/tutor
    """

    board: Board
    total_cards: int = 0
    type_distribution: dict[str, int] = field(default_factory=dict)
    mana_curve: dict[str, int] = field(default_factory=dict)
    color_distribution: dict[str, int] = field(default_factory=dict)
    spell_color_distribution: dict[str, int] = field(default_factory=dict)
    rarity_distribution: dict[str, int] = field(default_factory=dict)
    mana_sources: ManaSourceVector = field(default_factory=ManaSourceVector)
    mana_symbols: ManaPipVector = field(default_factory=ManaPipVector)
    average_spell_cmc: float = 0.0
    median_spell_cmc: float = 0.0
    land_count: int = 0
    non_land_count: int = 0
    land_ratio: float = 0.0
    multicolor_ratio: float = 0.0
    card_advantage_count: int = 0

    def type_breakdown(self) -> list[tuple[str, int]]:
        """Types ordered by descending count."""
        return sorted(self.type_distribution.items(), key=lambda item: -item[1])

    def rarity_breakdown(self) -> list[tuple[str, int]]:
        """Rarities in display order (mythic first)."""
        return sorted(
            self.rarity_distribution.items(),
            key=lambda item: RARITY_ORDER.get(item[0], 99),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "board": self.board.value,
            "total_cards": self.total_cards,
            "type_distribution": dict(self.type_distribution),
            "mana_curve": dict(self.mana_curve),
            "color_distribution": dict(self.color_distribution),
            "spell_color_distribution": dict(self.spell_color_distribution),
            "rarity_distribution": dict(self.rarity_distribution),
            "mana_sources": self.mana_sources.to_dict(),
            "mana_symbols": self.mana_symbols.to_dict(),
            "average_spell_cmc": self.average_spell_cmc,
            "median_spell_cmc": self.median_spell_cmc,
            "land_count": self.land_count,
            "non_land_count": self.non_land_count,
            "land_ratio": self.land_ratio,
            "multicolor_ratio": self.multicolor_ratio,
            "card_advantage_count": self.card_advantage_count,
        }
