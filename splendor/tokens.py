"""Gem and gold token types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GemType(Enum):
    """Kinds of token; the values match the order used in the card data."""

    BLACK_ONYX = 0
    GREEN_EMERALD = 1
    WHITE_DIAMOND = 2
    BLUE_SAPPHIRE = 3
    RED_RUBY = 4
    GOLD = 5

    @classmethod
    def from_code(cls, code: str) -> "GemType":
        """Return the gem for a two-letter database code such as ``"GE"``."""
        try:
            return _BY_CODE[code]
        except KeyError:
            raise ValueError(f"unknown gem code: {code!r}") from None

    @classmethod
    def gems(cls) -> tuple["GemType", ...]:
        """The five gem colours, without gold, in value order."""
        return tuple(gem for gem in cls if gem is not cls.GOLD)

    @property
    def code(self) -> str | None:
        """The two-letter database code, or ``None`` for gold."""
        return _CODES.get(self)


_CODES = {
    GemType.GREEN_EMERALD: "GE",
    GemType.BLUE_SAPPHIRE: "BS",
    GemType.WHITE_DIAMOND: "WD",
    GemType.BLACK_ONYX: "BO",
    GemType.RED_RUBY: "RR",
}
_BY_CODE = {code: gem for gem, code in _CODES.items()}

TYPE_COUNT = len(GemType)


@dataclass(frozen=True)
class Token:
    """A single token of one type."""

    gem: GemType