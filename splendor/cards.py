"""Playing cards: expansion (development) cards and noble tiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from splendor.carddao import CardDatabase
from splendor.tokens import GemType


class ExpansionLevel(IntEnum):
    LEVEL1 = 1
    LEVEL2 = 2
    LEVEL3 = 3


@dataclass
class Card:
    """Fields shared by every card."""

    card_id: int = 0
    face_up: bool = True
    prestige_points: int = 0


@dataclass
class ExpansionCard(Card):
    """A development card that costs gems and rewards one permanent gem."""

    level: ExpansionLevel = ExpansionLevel.LEVEL1
    reward: GemType = GemType.GREEN_EMERALD
    cost: dict[GemType, int] = field(default_factory=dict)

    @classmethod
    def from_database(
        cls,
        database: CardDatabase,
        level: ExpansionLevel | int,
        card_id: int = 0,
        face_up: bool = True,
    ) -> "ExpansionCard":
        """Build the card of this level and id from the cards database."""
        level = ExpansionLevel(level)
        spec = database.expansion(level, card_id)
        return cls(
            card_id=card_id,
            face_up=face_up,
            prestige_points=spec.prestige,
            level=level,
            reward=spec.reward,
            cost=dict(spec.request),
        )


@dataclass
class NobleCard(Card):
    """A noble tile won by owning enough gem rewards."""

    name: str = ""
    requirements: dict[GemType, int] = field(default_factory=dict)

    @classmethod
    def from_database(
        cls, database: CardDatabase, card_id: int = 0, face_up: bool = True
    ) -> "NobleCard":
        """Build the noble with this id from the cards database."""
        spec = database.noble(card_id)
        return cls(
            card_id=card_id,
            face_up=face_up,
            prestige_points=spec.prestige,
            name=spec.name,
            requirements=dict(spec.request),
        )