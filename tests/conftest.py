import pytest

from deckscope.analysis import clear_statistics_cache
from deckscope.models import Card, CardFace, Deck, DeckEntry


@pytest.fixture(autouse=True)
def clear_cached_statistics():
    """Clear memoized deck statistics between tests.

    Decks built from identical fixtures hash the same, so a stale cache
    entry from another test could otherwise be served.
    """
    clear_statistics_cache()
    yield
    clear_statistics_cache()


@pytest.fixture
def forest() -> Card:
    return Card(
        name="Forest",
        cmc=0.0,
        type_line="Basic Land — Forest",
        oracle_text="({T}: Add {G}.)",
        color_identity=frozenset({"G"}),
    )


@pytest.fixture
def grizzly_bears() -> Card:
    return Card(
        name="Grizzly Bears",
        mana_cost="{1}{G}",
        cmc=2.0,
        type_line="Creature — Bear",
        colors=frozenset({"G"}),
        color_identity=frozenset({"G"}),
    )


@pytest.fixture
def white_ritual() -> Card:
    """A non-permanent that adds mana: a source in text, never a mana source."""
    return Card(
        name="Twin Blessing",
        mana_cost="{1}{W}",
        cmc=2.0,
        type_line="Instant",
        oracle_text="Add {W}{W}.",
        colors=frozenset({"W"}),
        color_identity=frozenset({"W"}),
        rarity="uncommon",
    )


@pytest.fixture
def giant_growth() -> Card:
    return Card(
        name="Giant Growth",
        mana_cost="{G}",
        cmc=1.0,
        type_line="Instant",
        oracle_text="Target creature gets +3/+3 until end of turn.",
        colors=frozenset({"G"}),
        color_identity=frozenset({"G"}),
    )


@pytest.fixture
def rampant_growth() -> Card:
    return Card(
        name="Rampant Growth",
        mana_cost="{1}{G}",
        cmc=2.0,
        type_line="Sorcery",
        oracle_text=(
            "Search your library for a basic land card, put that card onto the "
            "battlefield tapped, then shuffle."
        ),
        colors=frozenset({"G"}),
        color_identity=frozenset({"G"}),
    )


@pytest.fixture
def craw_wurm() -> Card:
    return Card(
        name="Craw Wurm",
        mana_cost="{4}{G}{G}",
        cmc=6.0,
        type_line="Creature — Wurm",
        colors=frozenset({"G"}),
        color_identity=frozenset({"G"}),
    )


@pytest.fixture
def eldrazi_titan() -> Card:
    return Card(
        name="Eldrazi Titan",
        mana_cost="{10}",
        cmc=10.0,
        type_line="Creature — Eldrazi",
        oracle_text="When you cast this spell, draw four cards.",
        rarity="mythic",
    )


@pytest.fixture
def adventure_card() -> Card:
    """Adventure-style card: no root cost or cmc, costs live on the faces."""
    return Card(
        name="Bonecrusher Giant // Stomp",
        type_line="Creature — Giant // Instant — Adventure",
        colors=frozenset({"R"}),
        color_identity=frozenset({"R"}),
        rarity="rare",
        faces=(
            CardFace(
                name="Bonecrusher Giant",
                mana_cost="{2}{R}",
                type_line="Creature — Giant",
                oracle_text="Whenever this creature becomes the target of a spell, "
                "this creature deals 2 damage to that spell's controller.",
            ),
            CardFace(
                name="Stomp",
                mana_cost="{1}{R}",
                type_line="Instant — Adventure",
                oracle_text="Damage can't be prevented this turn. Stomp deals 2 damage "
                "to any target.",
            ),
        ),
    )


@pytest.fixture
def green_deck(
    forest: Card,
    white_ritual: Card,
    grizzly_bears: Card,
    giant_growth: Card,
    rampant_growth: Card,
    craw_wurm: Card,
    eldrazi_titan: Card,
) -> Deck:
    """60-card mainboard plus a sideboard and a maybeboard entry."""
    naturalize = Card(
        name="Naturalize",
        mana_cost="{1}{G}",
        cmc=2.0,
        type_line="Instant",
        oracle_text="Destroy target artifact or enchantment.",
        color_identity=frozenset({"G"}),
    )
    elvish_mystic = Card(
        name="Elvish Mystic",
        mana_cost="{G}",
        cmc=1.0,
        type_line="Creature — Elf Druid",
        oracle_text="{T}: Add {G}.",
        color_identity=frozenset({"G"}),
    )
    return Deck(
        format="standard",
        name="Mono-Green Stompy",
        entries=(
            DeckEntry(card=forest, quantity=17, id="forest"),
            DeckEntry(card=white_ritual, quantity=1, id="ritual"),
            DeckEntry(card=grizzly_bears, quantity=29, id="bears"),
            DeckEntry(card=giant_growth, quantity=4, id="growth"),
            DeckEntry(card=rampant_growth, quantity=4, id="rampant"),
            DeckEntry(card=craw_wurm, quantity=4, id="wurm"),
            DeckEntry(card=eldrazi_titan, quantity=1, id="titan"),
            DeckEntry(card=naturalize, quantity=2, is_sideboard=True, id="naturalize"),
            DeckEntry(card=elvish_mystic, quantity=1, is_maybeboard=True, id="mystic"),
        ),
    )


@pytest.fixture
def commander_deck(forest: Card, grizzly_bears: Card) -> Deck:
    """100-card commander deck: 1 commander, 40 Forests, 59 Bears."""
    commander = Card(
        name="Ezuri, Renegade Leader",
        mana_cost="{1}{G}{G}",
        cmc=3.0,
        type_line="Legendary Creature — Elf Warrior",
        oracle_text="{G}: Regenerate another target Elf.",
        color_identity=frozenset({"G"}),
        rarity="rare",
    )
    return Deck(
        format="commander",
        name="Ezuri Elves",
        entries=(
            DeckEntry(card=commander, quantity=1, is_commander=True, id="ezuri"),
            DeckEntry(card=forest, quantity=40, id="forest"),
            DeckEntry(card=grizzly_bears, quantity=59, id="bears"),
        ),
    )
