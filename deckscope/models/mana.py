"""
Mana vector models.

Two different counts that are easy to confuse:
- ManaSourceVector counts permanents able to PRODUCE a color
- ManaPipVector counts symbols a deck must PAY in its costs
"""

from dataclasses import dataclass, fields
from typing import Self

# Mana symbol -> vector field
COLOR_FIELDS: dict[str, str] = {
    "W": "white",
    "U": "blue",
    "B": "black",
    "R": "red",
    "G": "green",
    "C": "colorless",
}


@dataclass
class _ManaVector:
    """Shared arithmetic for the mana count vectors."""

    def __getitem__(self, key: str) -> int:
        return int(getattr(self, COLOR_FIELDS.get(key, key)))

    def __setitem__(self, key: str, value: int) -> None:
        setattr(self, COLOR_FIELDS.get(key, key), value)

    def __add__(self, other: Self) -> Self:
        return type(self)(**{f.name: self[f.name] + other[f.name] for f in fields(self)})

    def scaled(self, factor: int) -> Self:
        """Copy with every count multiplied by factor (a deck quantity)."""
        return type(self)(**{f.name: self[f.name] * factor for f in fields(self)})

    def total(self) -> int:
        return sum(self[f.name] for f in fields(self))

    def is_empty(self) -> bool:
        return self.total() == 0


@dataclass
class ManaSourceVector(_ManaVector):
    """
    Potential mana-producing permanents per color.

    One card contributes to each color it can produce; values count
    cards (times quantity), not mana amounts.
    """

    white: int = 0
    blue: int = 0
    black: int = 0
    red: int = 0
    green: int = 0
    colorless: int = 0
    any_color: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for API responses."""
        return {
            "W": self.white,
            "U": self.blue,
            "B": self.black,
            "R": self.red,
            "G": self.green,
            "Colorless": self.colorless,
            "AnyColor": self.any_color,
        }


@dataclass
class ManaPipVector(_ManaVector):
    """Mana symbol occurrences across printed costs."""

    white: int = 0
    blue: int = 0
    black: int = 0
    red: int = 0
    green: int = 0
    colorless: int = 0
    phyrexian: int = 0
    generic: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for API responses."""
        return {
            "W": self.white,
            "U": self.blue,
            "B": self.black,
            "R": self.red,
            "G": self.green,
            "Colorless": self.colorless,
            "Phyrexian": self.phyrexian,
            "Generic": self.generic,
        }
