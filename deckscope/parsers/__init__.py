from deckscope.parsers.scryfall import (
    load_deck,
    parse_card,
    parse_card_face,
    parse_deck,
    parse_deck_entry,
)

__all__ = [
    "load_deck",
    "parse_card",
    "parse_card_face",
    "parse_deck",
    "parse_deck_entry",
]
