"""
Card classification.

Resolves a card's primary category from its type line and reads mana
symbols out of its cost strings. Missing type lines and costs never raise;
they classify as Unknown and cost nothing.
"""

import re

from deckscope.models.card import Card, TypeCategory

# Checked in this order; the first category named on the type line wins,
# so an Artifact Land is a Land and an Artifact Creature is a Creature.
TYPE_PRIORITY: tuple[TypeCategory, ...] = (
    TypeCategory.LAND,
    TypeCategory.CREATURE,
    TypeCategory.INSTANT,
    TypeCategory.SORCERY,
    TypeCategory.ARTIFACT,
    TypeCategory.ENCHANTMENT,
    TypeCategory.PLANESWALKER,
    TypeCategory.BATTLE,
)

COLOR_NAMES: dict[str, str] = {
    "W": "White",
    "U": "Blue",
    "B": "Black",
    "R": "Red",
    "G": "Green",
}

SYMBOL_PATTERN = re.compile(r"\{([^{}]+)\}")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Variable costs are worth nothing outside the stack
_VARIABLE_SYMBOLS = frozenset({"X", "Y", "Z"})


def primary_type(card: Card) -> TypeCategory:
    """
    Resolve the primary category of a card.

    Args:
        card: Card to classify

    Returns:
        First matching category in TYPE_PRIORITY, Other when the type line
        names none of them, Unknown when there is no type line.
    """
    type_line = card.type_line
    if not type_line:
        return TypeCategory.UNKNOWN
    for category in TYPE_PRIORITY:
        if category.value in type_line:
            return category
    return TypeCategory.OTHER


def is_land(card: Card) -> bool:
    return primary_type(card) == TypeCategory.LAND


def cost_symbols(cost: str | None) -> list[str]:
    """Symbols inside each {...} token of a cost string, braces stripped."""
    if not cost:
        return []
    return SYMBOL_PATTERN.findall(cost)


def leading_int(symbol: str) -> int | None:
    """Integer prefix of a symbol ("2" -> 2, "2/W" -> 2, "X" -> None)."""
    match = _LEADING_INT.match(symbol)
    return int(match.group(1)) if match else None


def cost_total(cost: str | None) -> int:
    """
    Mana value of a printed cost string.

    Numeric symbols add their value, X/Y/Z add nothing, and every other
    symbol (colored, colorless, hybrid, Phyrexian, snow) adds one.
    """
    total = 0
    for symbol in cost_symbols(cost):
        number = leading_int(symbol)
        if number is not None:
            total += number
        elif symbol.upper() not in _VARIABLE_SYMBOLS:
            total += 1
    return total


def mana_value(card: Card) -> float:
    """
    Mana value of a card.

    Uses the catalog cmc when present. Multi-faced cards without a root
    cost (split/adventure style) fall back to the first face's cost.
    """
    if card.cmc is not None:
        return card.cmc
    if card.faces and not card.mana_cost:
        return cost_total(card.faces[0].mana_cost)
    return cost_total(card.mana_cost)


def identity_group(card: Card) -> str:
    """Colorless, the single color letter, or Multicolor, by color identity size."""
    identity = card.color_identity
    if not identity:
        return "Colorless"
    if len(identity) == 1:
        return next(iter(identity))
    return "Multicolor"


def color_group(card: Card) -> str:
    """
    Collection grouping of a card.

    Lands group as Land, colorless artifacts as Artifact; everything else
    groups by its colors (not identity).
    """
    type_line = (card.type_line or "").lower()
    if "land" in type_line:
        return "Land"

    colors = card.colors or frozenset()
    if "artifact" in type_line and not colors:
        return "Artifact"
    if not colors:
        return "Colorless"
    if len(colors) > 1:
        return "Multicolor"
    return COLOR_NAMES.get(next(iter(colors)), "Colorless")
