from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from deckscope.models.card import Card


class Board(str, Enum):
    """Deck segment an entry belongs to."""

    MAINBOARD = "mainboard"
    SIDEBOARD = "sideboard"
    MAYBEBOARD = "maybeboard"
    COMMANDER = "commander"


class InvalidDeckEntryError(ValueError):
    """
    Raised when a deck entry violates its structural invariants.

    The storage layer should never hand the engine such an entry;
    seeing one means the snapshot is corrupt.
    """

    def __init__(self, card_name: str, reason: str):
        self.card_name = card_name
        self.reason = reason
        super().__init__(f"Invalid deck entry for '{card_name}': {reason}")


@dataclass(frozen=True, slots=True)
class DeckEntry:
    """
    A card in a deck with its quantity and board flags.

    Attributes:
        card: The resolved card record (borrowed from the catalog)
        quantity: Number of copies, always >= 1
        is_commander: Designated commander (implies mainboard)
        is_sideboard: Entry lives in the sideboard
        is_maybeboard: Entry lives in the maybeboard
        id: Deck-entry id from storage
    """

    card: Card
    quantity: int = 1
    is_commander: bool = False
    is_sideboard: bool = False
    is_maybeboard: bool = False
    id: str | None = None

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise InvalidDeckEntryError(self.card.name, f"quantity {self.quantity} is below 1")
        if self.is_sideboard and self.is_maybeboard:
            raise InvalidDeckEntryError(self.card.name, "cannot be both sideboard and maybeboard")
        if self.is_commander and (self.is_sideboard or self.is_maybeboard):
            raise InvalidDeckEntryError(self.card.name, "a commander must be in the mainboard")

    @property
    def board(self) -> Board:
        """Segment this entry is counted in."""
        if self.is_commander:
            return Board.COMMANDER
        if self.is_sideboard:
            return Board.SIDEBOARD
        if self.is_maybeboard:
            return Board.MAYBEBOARD
        return Board.MAINBOARD


@dataclass(frozen=True, slots=True)
class Deck:
    """
    A fully resolved deck snapshot.

    Equality and hashing cover the whole content, so a Deck value
    can key caches directly.

    Attributes:
        format: Format name (e.g., "standard", "commander")
        entries: Deck entries with card records joined in
        name: Deck name
    """

    format: str
    entries: tuple[DeckEntry, ...] = ()
    name: str = ""

    def __iter__(self) -> Iterator[DeckEntry]:
        return iter(self.entries)

    def entries_in(self, *boards: Board) -> list[DeckEntry]:
        """Entries belonging to any of the given boards."""
        return [entry for entry in self.entries if entry.board in boards]

    def mainboard(self) -> list[DeckEntry]:
        """Mainboard entries, commanders included."""
        return self.entries_in(Board.MAINBOARD, Board.COMMANDER)

    def commanders(self) -> list[DeckEntry]:
        """Entries designated as commander."""
        return self.entries_in(Board.COMMANDER)

    def count(self, *boards: Board) -> int:
        """Total copies across the given boards (mainboard + commander by default)."""
        entries = self.entries_in(*boards) if boards else self.mainboard()
        return sum(entry.quantity for entry in entries)
