"""
Mana pip counting and mana curve.
"""

import math
from collections.abc import Iterable

from deckscope.analysis.card_classifier import cost_symbols, is_land, leading_int, mana_value
from deckscope.config import CURVE_OVERFLOW_BIN
from deckscope.models.card import Card
from deckscope.models.deck import Deck, DeckEntry
from deckscope.models.mana import ManaPipVector

COLORED_SYMBOLS = frozenset({"W", "U", "B", "R", "G"})

OVERFLOW_KEY = f"{CURVE_OVERFLOW_BIN}+"


def mana_pips(card: Card) -> ManaPipVector:
    """
    Count the mana symbols in a card's cost and its faces' costs.

    - Any symbol containing "/P" is one Phyrexian pip
    - W/U/B/R/G is one pip of that color, C one colorless pip
    - A symbol starting with a number adds that number to Generic
    - Anything else (X, hybrid, snow) is ignored
    """
    pips = ManaPipVector()
    for cost in card.cost_strings():
        for symbol in cost_symbols(cost):
            if "/P" in symbol:
                pips.phyrexian += 1
            elif symbol in COLORED_SYMBOLS:
                pips[symbol] += 1
            elif symbol == "C":
                pips.colorless += 1
            else:
                number = leading_int(symbol)
                if number is not None:
                    pips.generic += number
    return pips


def curve_bin(value: float) -> str:
    """Curve bucket for a mana value: "0".."9", or the overflow bucket."""
    bucket = math.floor(value)
    if bucket >= CURVE_OVERFLOW_BIN:
        return OVERFLOW_KEY
    return str(max(bucket, 0))


def empty_curve() -> dict[str, int]:
    curve = {str(i): 0 for i in range(CURVE_OVERFLOW_BIN)}
    curve[OVERFLOW_KEY] = 0
    return curve


def mana_curve(deck: Deck | Iterable[DeckEntry]) -> dict[str, int]:
    """
    Mana curve of the non-land entries, weighted by quantity.

    A Deck is read through its mainboard (commanders included); any other
    iterable of entries is taken as given. Every bucket is present,
    including empty ones.
    """
    entries = deck.mainboard() if isinstance(deck, Deck) else deck
    curve = empty_curve()
    for entry in entries:
        if is_land(entry.card):
            continue
        curve[curve_bin(mana_value(entry.card))] += entry.quantity
    return curve
