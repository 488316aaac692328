import pytest

from deckscope.analysis.card_classifier import (
    color_group,
    cost_symbols,
    cost_total,
    identity_group,
    is_land,
    leading_int,
    mana_value,
    primary_type,
)
from deckscope.models import Card, CardFace, TypeCategory


class TestPrimaryType:
    @pytest.mark.parametrize(
        ("type_line", "expected"),
        [
            ("Creature — Bear", TypeCategory.CREATURE),
            ("Legendary Planeswalker — Jace", TypeCategory.PLANESWALKER),
            ("Instant", TypeCategory.INSTANT),
            ("Sorcery", TypeCategory.SORCERY),
            ("Artifact — Equipment", TypeCategory.ARTIFACT),
            ("Enchantment — Aura", TypeCategory.ENCHANTMENT),
            ("Battle — Siege", TypeCategory.BATTLE),
            ("Basic Land — Forest", TypeCategory.LAND),
        ],
    )
    def test_single_category(self, type_line: str, expected: TypeCategory) -> None:
        assert primary_type(Card(name="Test", type_line=type_line)) == expected

    def test_artifact_land_is_land(self) -> None:
        """Land is checked before Artifact."""
        card = Card(name="Seat of the Synod", type_line="Artifact Land")
        assert primary_type(card) == TypeCategory.LAND

    def test_artifact_creature_is_creature(self) -> None:
        card = Card(name="Ornithopter", type_line="Artifact Creature — Thopter")
        assert primary_type(card) == TypeCategory.CREATURE

    def test_enchantment_creature_is_creature(self) -> None:
        card = Card(name="Heliod's Pilgrim", type_line="Enchantment Creature — God")
        assert primary_type(card) == TypeCategory.CREATURE

    def test_unrecognized_type_is_other(self) -> None:
        card = Card(name="Plane", type_line="Plane — Dominaria")
        assert primary_type(card) == TypeCategory.OTHER

    def test_missing_type_line_is_unknown(self) -> None:
        assert primary_type(Card(name="Mystery")) == TypeCategory.UNKNOWN
        assert primary_type(Card(name="Mystery", type_line="")) == TypeCategory.UNKNOWN

    def test_is_land(self, forest: Card, grizzly_bears: Card) -> None:
        assert is_land(forest)
        assert not is_land(grizzly_bears)


class TestCostParsing:
    def test_cost_symbols(self) -> None:
        assert cost_symbols("{2}{W/U}{G/P}") == ["2", "W/U", "G/P"]

    def test_cost_symbols_missing(self) -> None:
        assert cost_symbols(None) == []
        assert cost_symbols("") == []

    def test_leading_int(self) -> None:
        assert leading_int("12") == 12
        assert leading_int("2/W") == 2
        assert leading_int("X") is None
        assert leading_int("W") is None

    def test_cost_total(self) -> None:
        assert cost_total("{3}{U}{U}") == 5
        assert cost_total("{X}{R}") == 1
        assert cost_total("{W/U}{G/P}{C}") == 3
        assert cost_total(None) == 0


class TestManaValue:
    def test_uses_catalog_cmc(self, craw_wurm: Card) -> None:
        assert mana_value(craw_wurm) == 6.0

    def test_zero_cmc_is_kept(self, forest: Card) -> None:
        assert mana_value(forest) == 0.0

    def test_faces_fallback_uses_first_face(self, adventure_card: Card) -> None:
        """No root cost or cmc: the first face's cost decides."""
        assert mana_value(adventure_card) == 3

    def test_root_cost_without_cmc(self) -> None:
        card = Card(name="Counterspell", mana_cost="{U}{U}", type_line="Instant")
        assert mana_value(card) == 2

    def test_missing_cost_is_zero(self) -> None:
        assert mana_value(Card(name="Blank", type_line="Instant")) == 0

    def test_root_cost_wins_over_faces(self) -> None:
        card = Card(
            name="Fire // Ice",
            mana_cost="{1}{R} // {1}{U}",
            type_line="Instant // Instant",
            faces=(
                CardFace(name="Fire", mana_cost="{1}{R}", type_line="Instant"),
                CardFace(name="Ice", mana_cost="{1}{U}", type_line="Instant"),
            ),
        )
        assert mana_value(card) == 4


class TestColorGroups:
    def test_identity_group(self, forest: Card, eldrazi_titan: Card) -> None:
        assert identity_group(forest) == "G"
        assert identity_group(eldrazi_titan) == "Colorless"
        gold = Card(name="Gold", color_identity=frozenset({"W", "U"}))
        assert identity_group(gold) == "Multicolor"

    def test_color_group_land(self, forest: Card) -> None:
        assert color_group(forest) == "Land"

    def test_color_group_colorless_artifact(self) -> None:
        card = Card(name="Sol Ring", type_line="Artifact", colors=frozenset())
        assert color_group(card) == "Artifact"

    def test_color_group_colored_artifact(self) -> None:
        card = Card(name="Etched Champion", type_line="Artifact Creature", colors=frozenset("W"))
        assert color_group(card) == "White"

    def test_color_group_by_colors(self, grizzly_bears: Card, eldrazi_titan: Card) -> None:
        assert color_group(grizzly_bears) == "Green"
        assert color_group(eldrazi_titan) == "Colorless"
        gold = Card(name="Gold", type_line="Instant", colors=frozenset({"B", "R"}))
        assert color_group(gold) == "Multicolor"
