"""Stacks of cards drawn from the top."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from splendor import pieces
from splendor.carddao import CardDatabase
from splendor.cards import ExpansionCard, ExpansionLevel, NobleCard
from splendor.randomizer import Randomizer

T = TypeVar("T")

_EXPANSION_COUNTS = {
    ExpansionLevel.LEVEL1: pieces.L1_EXPANSION_CARD_COUNT,
    ExpansionLevel.LEVEL2: pieces.L2_EXPANSION_CARD_COUNT,
    ExpansionLevel.LEVEL3: pieces.L3_EXPANSION_CARD_COUNT,
}


class EmptyDeckError(IndexError):
    """A card was requested from an empty deck."""


class Deck(Generic[T]):
    """An ordered stack whose last card is the top."""

    def __init__(self, cards: Iterable[T] = ()) -> None:
        self._cards: list[T] = list(cards)

    def shuffle(self, randomizer: Randomizer | None = None) -> None:
        (randomizer or Randomizer()).shuffle(self._cards)

    def draw(self) -> T:
        """Remove and return the top card."""
        if not self._cards:
            raise EmptyDeckError("Can't draw card from empty deck")
        return self._cards.pop()

    def remove_top(self) -> None:
        if not self._cards:
            raise EmptyDeckError("Can't remove card from empty deck")
        self._cards.pop()

    def add(self, card: T) -> None:
        """Put a card on top."""
        self._cards.append(card)

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def cards(self) -> list[T]:
        """A copy of the cards, bottom first."""
        return list(self._cards)

    def replace_cards(self, cards: Iterable[T]) -> None:
        self._cards = list(cards)

    def clear(self) -> None:
        self._cards.clear()


def noble_deck(database: CardDatabase) -> Deck[NobleCard]:
    """All nobles, face down, ids ascending from the bottom."""
    return Deck(
        NobleCard.from_database(database, card_id, False)
        for card_id in range(1, pieces.NOBLE_CARD_COUNT + 1)
    )


def expansion_deck(
    database: CardDatabase, level: ExpansionLevel | int
) -> Deck[ExpansionCard]:
    """All expansion cards of one level, face down, ids ascending from the bottom."""
    try:
        level = ExpansionLevel(level)
    except ValueError:
        raise ValueError(f"Failed to initialize deck of expansion level {level}") from None
    return Deck(
        ExpansionCard.from_database(database, level, card_id, False)
        for card_id in range(1, _EXPANSION_COUNTS[level] + 1)
    )