from deckscope.models.card import Card, CardFace, TypeCategory
from deckscope.models.deck import Board, Deck, DeckEntry, InvalidDeckEntryError
from deckscope.models.hand import HandCard, HandPhase, HandState, HandStats, HandView
from deckscope.models.mana import ManaPipVector, ManaSourceVector
from deckscope.models.outcome import (
    STANDARD_MESSAGES,
    ActionResult,
    Advisory,
    AdvisoryKind,
    OutcomeType,
)
from deckscope.models.statistics import RARITY_ORDER, DeckStatistics

__all__ = [
    "ActionResult",
    "Advisory",
    "AdvisoryKind",
    "Board",
    "Card",
    "CardFace",
    "Deck",
    "DeckEntry",
    "DeckStatistics",
    "HandCard",
    "HandPhase",
    "HandState",
    "HandStats",
    "HandView",
    "InvalidDeckEntryError",
    "ManaPipVector",
    "ManaSourceVector",
    "OutcomeType",
    "RARITY_ORDER",
    "STANDARD_MESSAGES",
    "TypeCategory",
]
