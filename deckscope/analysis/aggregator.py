"""
Deck statistics aggregation.

Folds per-card classification, mana source and pip results into deck-wide
statistics. compute_deck_statistics is a pure function of the deck value;
get_deck_statistics memoizes it keyed on that value.
"""

import copy
import logging
import statistics
from functools import lru_cache

from deckscope.analysis.card_classifier import identity_group, is_land, mana_value, primary_type
from deckscope.analysis.mana_pips import mana_curve, mana_pips
from deckscope.analysis.mana_sources import deck_mana_sources
from deckscope.config import settings
from deckscope.models.deck import Board, Deck, DeckEntry
from deckscope.models.mana import ManaPipVector, ManaSourceVector
from deckscope.models.statistics import DeckStatistics

logger = logging.getLogger(__name__)

# Deliberately crude; over- and under-counts real card advantage
CARD_ADVANTAGE_KEYWORDS: tuple[str, ...] = ("draw", "search", "tutor")


def board_entries(deck: Deck, board: Board = Board.MAINBOARD) -> list[DeckEntry]:
    """
    Entries for a board view.

    The mainboard view includes commanders; the other views contain only
    their own segment.
    """
    if board == Board.MAINBOARD:
        return deck.mainboard()
    return deck.entries_in(board)


def compute_deck_statistics(deck: Deck, board: Board = Board.MAINBOARD) -> DeckStatistics:
    """
    Compute statistics for one board view of a deck.

    Args:
        deck: Resolved deck snapshot (never mutated)
        board: Segment to analyze, mainboard + commanders by default

    Returns:
        DeckStatistics for the selected segment
    """
    entries = board_entries(deck, board)

    total_cards = 0
    type_distribution: dict[str, int] = {}
    color_distribution: dict[str, int] = {}
    spell_color_distribution: dict[str, int] = {}
    rarity_distribution: dict[str, int] = {}
    mana_sources = ManaSourceVector()
    mana_symbols = ManaPipVector()
    spell_values: list[float] = []
    card_advantage_count = 0

    for entry in entries:
        card = entry.card
        qty = entry.quantity
        total_cards += qty

        card_type = primary_type(card).value
        type_distribution[card_type] = type_distribution.get(card_type, 0) + qty

        group = identity_group(card)
        color_distribution[group] = color_distribution.get(group, 0) + qty

        rarity_distribution[card.rarity] = rarity_distribution.get(card.rarity, 0) + qty

        mana_sources = mana_sources + deck_mana_sources(card, qty)

        if not is_land(card):
            spell_color_distribution[group] = spell_color_distribution.get(group, 0) + qty
            mana_symbols = mana_symbols + mana_pips(card).scaled(qty)
            spell_values.extend([mana_value(card)] * qty)

        oracle = (card.oracle_text or "").lower()
        if any(keyword in oracle for keyword in CARD_ADVANTAGE_KEYWORDS):
            card_advantage_count += qty

    land_count = type_distribution.get("Land", 0)
    multicolor_count = color_distribution.get("Multicolor", 0)

    result = DeckStatistics(
        board=board,
        total_cards=total_cards,
        type_distribution=type_distribution,
        mana_curve=mana_curve(entries),
        color_distribution=color_distribution,
        spell_color_distribution=spell_color_distribution,
        rarity_distribution=rarity_distribution,
        mana_sources=mana_sources,
        mana_symbols=mana_symbols,
        average_spell_cmc=statistics.fmean(spell_values) if spell_values else 0.0,
        median_spell_cmc=statistics.median(spell_values) if spell_values else 0.0,
        land_count=land_count,
        non_land_count=total_cards - land_count,
        land_ratio=_percentage(land_count, total_cards),
        multicolor_ratio=_percentage(multicolor_count, total_cards),
        card_advantage_count=card_advantage_count,
    )

    logger.debug(
        "Computed %s statistics for deck '%s': %d cards, %d lands",
        board.value,
        deck.name,
        total_cards,
        land_count,
    )
    return result


def _percentage(part: int, whole: int) -> float:
    return part / whole * 100 if whole > 0 else 0.0


@lru_cache(maxsize=settings.statistics_cache_size)
def _cached_statistics(deck: Deck, board: Board) -> DeckStatistics:
    return compute_deck_statistics(deck, board)


def get_deck_statistics(deck: Deck, board: Board = Board.MAINBOARD) -> DeckStatistics:
    """
    Cached statistics for a deck snapshot.

    Keyed on the deck's content, so an edited deck is a new key and an
    unchanged one is served from cache. Each caller gets its own copy of
    the cached result; editing it never reaches the cache.
    """
    return copy.deepcopy(_cached_statistics(deck, board))


def clear_statistics_cache() -> None:
    """Drop every memoized statistics result."""
    _cached_statistics.cache_clear()
