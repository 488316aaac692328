"""
Sample hand models.

Transient views of a sample hand session. Nothing here is persisted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from deckscope.models.card import Card
from deckscope.models.deck import DeckEntry


class HandPhase(str, Enum):
    """Session state of the sample hand simulator."""

    EMPTY = "empty"  # No hand drawn yet
    HAND_DRAWN = "hand_drawn"  # Opening or final hand on the table
    MULLIGANING = "mulliganing"  # Mulligan taken, bottoming pending


@dataclass(frozen=True, slots=True)
class HandCard:
    """
    A card in hand, tied back to the deck entry it was drawn from.

    Attributes:
        entry: Originating deck entry. Equality compares entries by value;
            remaining_pool matches hand cards to pool copies by identity.
    """

    entry: DeckEntry

    @property
    def card(self) -> Card:
        return self.entry.card


@dataclass(frozen=True)
class HandStats:
    """Quick land/spell summary of a hand."""

    lands: int = 0
    spells: int = 0
    average_spell_cmc: float = 0.0


@dataclass(frozen=True)
class HandState:
    """
    Snapshot of the simulator session.

    Attributes:
        cards: Cards currently in hand
        mulligan_count: Mulligans taken since the last kept hand
        bottomed: Hand indices selected to go to the bottom
        phase: Current session state
    """

    cards: tuple[HandCard, ...] = ()
    mulligan_count: int = 0
    bottomed: frozenset[int] = field(default_factory=frozenset)
    phase: HandPhase = HandPhase.EMPTY


@dataclass(frozen=True)
class HandView:
    """Everything a hand display needs in one object."""

    state: HandState
    next_draws: tuple[HandCard, ...]
    stats: HandStats
    commanders: tuple[DeckEntry, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "phase": self.state.phase.value,
            "hand": [hc.card.name for hc in self.state.cards],
            "mulligan_count": self.state.mulligan_count,
            "bottomed": sorted(self.state.bottomed),
            "next_draws": [hc.card.name for hc in self.next_draws],
            "commanders": [entry.card.name for entry in self.commanders],
            "stats": {
                "lands": self.stats.lands,
                "spells": self.stats.spells,
                "average_spell_cmc": self.stats.average_spell_cmc,
            },
        }
