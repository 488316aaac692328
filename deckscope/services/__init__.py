"""
DeckScope services.

Stateful helpers built on top of the analysis functions.
"""

from deckscope.services.sample_hand import (
    SampleHandSimulator,
    build_card_pool,
    draw,
    hand_stats,
    remaining_pool,
)

__all__ = [
    "SampleHandSimulator",
    "build_card_pool",
    "draw",
    "hand_stats",
    "remaining_pool",
]
