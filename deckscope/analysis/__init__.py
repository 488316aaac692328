from deckscope.analysis.aggregator import (
    clear_statistics_cache,
    compute_deck_statistics,
    get_deck_statistics,
)
from deckscope.analysis.card_classifier import color_group, mana_value, primary_type
from deckscope.analysis.mana_pips import mana_curve, mana_pips
from deckscope.analysis.mana_sources import estimate_mana_sources

__all__ = [
    "clear_statistics_cache",
    "color_group",
    "compute_deck_statistics",
    "estimate_mana_sources",
    "get_deck_statistics",
    "mana_curve",
    "mana_pips",
    "mana_value",
    "primary_type",
]
