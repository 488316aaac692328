"""
Sample hand simulator.

Draws opening hands from a deck and walks through London mulligans:
every mulligan draws a fresh 7, and once the player keeps, one card per
mulligan taken goes to the bottom of the library.

Session states: EMPTY -> HAND_DRAWN -> MULLIGANING -> HAND_DRAWN (final).

A simulator instance is one session owned by one caller. Transitions never
raise; each returns an ActionResult, and a refused transition leaves the
session exactly as it was.
"""

import logging
import random
from collections.abc import Sequence

from deckscope.config import (
    COMMANDER_FORMAT,
    MAX_MULLIGANS,
    NEXT_DRAWS_PREVIEW,
    OPENING_HAND_SIZE,
    settings,
)
from deckscope.models.deck import Board, Deck, DeckEntry
from deckscope.models.hand import HandCard, HandPhase, HandState, HandStats, HandView
from deckscope.models.outcome import ActionResult, AdvisoryKind

logger = logging.getLogger(__name__)

# Process-wide random source, used when no source is injected
_default_rng = random.Random(settings.random_seed)


def build_card_pool(deck: Deck) -> list[DeckEntry]:
    """
    Expand a deck into its library, one item per physical copy.

    Sideboard and maybeboard entries are left out, and so is the commander
    in commander-format decks. Each item is the originating DeckEntry
    itself, so a 4-of appears as the same entry four times.
    """
    pool: list[DeckEntry] = []
    for entry in deck.entries:
        if entry.is_sideboard or entry.is_maybeboard:
            continue
        if deck.format == COMMANDER_FORMAT and entry.is_commander:
            continue
        pool.extend([entry] * entry.quantity)
    return pool


def shuffled(pool: Sequence[DeckEntry], rng: random.Random | None = None) -> list[DeckEntry]:
    """Uniformly shuffled copy of the pool (Fisher-Yates); the pool itself is untouched."""
    cards = list(pool)
    (rng or _default_rng).shuffle(cards)
    return cards


def draw(
    pool: Sequence[DeckEntry],
    n: int = OPENING_HAND_SIZE,
    rng: random.Random | None = None,
) -> list[HandCard]:
    """
    Draw n cards off the top of a freshly shuffled copy of the pool.

    Returns min(n, len(pool)) cards, empty for an empty pool or n <= 0.
    """
    if not pool or n <= 0:
        return []
    return [HandCard(entry=entry) for entry in shuffled(pool, rng)[:n]]


def remaining_pool(pool: Sequence[DeckEntry], hand: Sequence[HandCard]) -> list[DeckEntry]:
    """
    Pool minus the cards in hand.

    Removes one copy per hand card, matched by originating entry identity
    (two equal-looking entries are still different entries).
    """
    remaining = list(pool)
    for hand_card in hand:
        for i, entry in enumerate(remaining):
            if entry is hand_card.entry:
                del remaining[i]
                break
    return remaining


def hand_stats(hand: Sequence[HandCard]) -> HandStats:
    """Lands, spells and average spell cmc of a hand."""
    spells = [hc for hc in hand if "land" not in (hc.card.type_line or "").lower()]
    total_cmc = sum(hc.card.cmc or 0 for hc in spells)
    return HandStats(
        lands=len(hand) - len(spells),
        spells=len(spells),
        average_spell_cmc=total_cmc / len(spells) if spells else 0.0,
    )


class SampleHandSimulator:
    """
    One sample hand session over a deck snapshot.

    Args:
        deck: Deck to draw from (never mutated)
        rng: Random source; the process-wide source when omitted
    """

    def __init__(self, deck: Deck, rng: random.Random | None = None):
        self.deck = deck
        self._rng = rng or _default_rng
        self._pool = build_card_pool(deck)
        self._hand: list[HandCard] = []
        self._mulligan_count = 0
        self._bottomed: list[int] = []
        self._phase = HandPhase.EMPTY

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def phase(self) -> HandPhase:
        return self._phase

    @property
    def hand(self) -> list[HandCard]:
        return list(self._hand)

    @property
    def mulligan_count(self) -> int:
        return self._mulligan_count

    @property
    def bottomed(self) -> frozenset[int]:
        return frozenset(self._bottomed)

    @property
    def pool(self) -> list[DeckEntry]:
        return list(self._pool)

    @property
    def commanders(self) -> list[DeckEntry]:
        """Commander entries, shown beside the hand rather than drawn."""
        return self.deck.commanders()

    @property
    def available_cards(self) -> int:
        """Mainboard copies, leaving out the commander and the side and maybe boards."""
        return sum(
            entry.quantity
            for entry in self.deck.entries
            if entry.board == Board.MAINBOARD
        )

    @property
    def state(self) -> HandState:
        return HandState(
            cards=tuple(self._hand),
            mulligan_count=self._mulligan_count,
            bottomed=frozenset(self._bottomed),
            phase=self._phase,
        )

    def hand_stats(self) -> HandStats:
        return hand_stats(self._hand)

    def peek_next_draws(self, k: int = NEXT_DRAWS_PREVIEW) -> list[HandCard]:
        """
        Preview the next k draws without touching the hand.

        Recomputed from scratch on every call: the cards in hand are removed
        from the full pool and the rest is shuffled.
        """
        if not self._hand:
            return []
        return draw(remaining_pool(self._pool, self._hand), k, self._rng)

    def view(self, k: int = NEXT_DRAWS_PREVIEW) -> HandView:
        return HandView(
            state=self.state,
            next_draws=tuple(self.peek_next_draws(k)),
            stats=self.hand_stats(),
            commanders=tuple(self.commanders),
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def draw_new_hand(self) -> ActionResult:
        """Draw a fresh 7-card hand, discarding any mulligan progress."""
        if not self._pool:
            return self._refuse(AdvisoryKind.NOTHING_TO_DRAW)

        is_opening = not self._hand
        self._hand = draw(self._pool, OPENING_HAND_SIZE, self._rng)
        self._mulligan_count = 0
        self._bottomed = []
        self._phase = HandPhase.HAND_DRAWN
        return self._succeed("Opening hand drawn!" if is_opening else "New 7-card hand drawn!")

    def mulligan(self) -> ActionResult:
        """Take a London mulligan: shuffle the whole pool and draw 7 again."""
        if not self._hand:
            return self._refuse(AdvisoryKind.NO_HAND)
        if self._mulligan_count >= MAX_MULLIGANS:
            return self._refuse(AdvisoryKind.MULLIGAN_LIMIT)

        self._hand = draw(self._pool, OPENING_HAND_SIZE, self._rng)
        self._mulligan_count += 1
        self._bottomed = []
        self._phase = HandPhase.MULLIGANING
        return self._succeed(f"Mulligan {self._mulligan_count}: draw {OPENING_HAND_SIZE} cards")

    def toggle_bottom(self, index: int) -> ActionResult:
        """Mark or unmark the card at a hand index for the bottom of the library."""
        if not self._hand:
            return self._refuse(AdvisoryKind.NO_HAND)
        if self._mulligan_count == 0:
            return self._refuse(AdvisoryKind.NO_MULLIGAN)
        if not 0 <= index < len(self._hand):
            return self._refuse(
                AdvisoryKind.INVALID_INDEX,
                detail=f"index {index}, hand size {len(self._hand)}",
            )

        if index in self._bottomed:
            self._bottomed.remove(index)
            return self._succeed(f"{self._hand[index].card.name} stays in hand")
        if len(self._bottomed) >= self._mulligan_count:
            return self._refuse(
                AdvisoryKind.BOTTOM_LIMIT,
                f"You can only bottom {self._mulligan_count} card(s)",
            )

        self._bottomed.append(index)
        return self._succeed(f"{self._hand[index].card.name} marked for the bottom")

    def confirm_bottom(self) -> ActionResult:
        """Put the marked cards on the bottom and keep the rest."""
        if not self._hand:
            return self._refuse(AdvisoryKind.NO_HAND)
        if len(self._bottomed) != self._mulligan_count:
            return self._refuse(
                AdvisoryKind.BOTTOM_COUNT_MISMATCH,
                f"Select exactly {self._mulligan_count} card(s)",
                detail=f"{len(self._bottomed)} selected",
            )

        bottomed = set(self._bottomed)
        put_back = self._mulligan_count
        self._hand = [hc for i, hc in enumerate(self._hand) if i not in bottomed]
        self._mulligan_count = 0
        self._bottomed = []
        self._phase = HandPhase.HAND_DRAWN
        return self._succeed(f"Put {put_back} on bottom, final hand {len(self._hand)}")

    def reset(self) -> None:
        """Clear the session back to EMPTY."""
        self._hand = []
        self._mulligan_count = 0
        self._bottomed = []
        self._phase = HandPhase.EMPTY

    def _succeed(self, message: str) -> ActionResult:
        logger.info("Sample hand for '%s': %s", self.deck.name, message)
        return ActionResult.success(message)

    def _refuse(
        self,
        kind: AdvisoryKind,
        message: str | None = None,
        detail: str | None = None,
    ) -> ActionResult:
        result = ActionResult.refusal(kind, message, detail)
        logger.warning("Sample hand for '%s' refused: %s", self.deck.name, result.message)
        return result
