"""Card definitions read from the XML cards database."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from os import PathLike
from pathlib import Path

from splendor import pieces
from splendor.tokens import GemType

DEFAULT_DATABASE_PATH = "../external/Cards Database/CardsDatabase.xml"


class CardDatabaseError(ValueError):
    """The cards database is malformed."""


class CardType(Enum):
    UNKNOWN = -1
    NOBLE = 0
    EXPANSION_L1 = 1
    EXPANSION_L2 = 2
    EXPANSION_L3 = 3


@dataclass(frozen=True)
class CardData:
    """Reference to a card by kind and id."""

    kind: CardType = CardType.UNKNOWN
    card_id: int = 0


def _empty_request() -> dict[GemType, int]:
    return dict.fromkeys(GemType.gems(), 0)


@dataclass
class NobleSpec:
    name: str = ""
    prestige: int = 0
    request: dict[GemType, int] = field(default_factory=_empty_request)


@dataclass
class ExpansionSpec:
    reward: GemType = GemType.GREEN_EMERALD
    prestige: int = 0
    request: dict[GemType, int] = field(default_factory=_empty_request)


_LEVEL_LIMITS = {
    1: pieces.L1_EXPANSION_CARD_COUNT,
    2: pieces.L2_EXPANSION_CARD_COUNT,
    3: pieces.L3_EXPANSION_CARD_COUNT,
}


def _child(node: ET.Element, tag: str) -> ET.Element:
    found = node.find(tag)
    if found is None:
        raise CardDatabaseError(f"missing <{tag}> in <{node.tag}>")
    return found


def _text(node: ET.Element, tag: str) -> str:
    return (_child(node, tag).text or "").strip()


def _int(node: ET.Element, tag: str) -> int:
    value = _text(node, tag)
    try:
        return int(value)
    except ValueError:
        raise CardDatabaseError(f"<{tag}> is not a number: {value!r}") from None


def _request(node: ET.Element) -> dict[GemType, int]:
    request_node = _child(node, "REQUEST")
    return {gem: _int(request_node, gem.code) for gem in GemType.gems()}


def _parse_noble(node: ET.Element) -> tuple[int, NobleSpec]:
    spec = NobleSpec(_text(node, "NAME"), _int(node, "PRESTIGE"), _request(node))
    return _int(node, "ID"), spec


def _parse_expansion(node: ET.Element) -> tuple[int, ExpansionSpec]:
    code = _text(node, "REWARD")
    try:
        reward = GemType.from_code(code)
    except ValueError:
        raise CardDatabaseError(f"unknown reward {code!r}") from None
    spec = ExpansionSpec(reward, _int(node, "PRESTIGE"), _request(node))
    return _int(node, "ID"), spec


@dataclass
class CardDatabase:
    """Noble and expansion card specifications indexed by id."""

    nobles: dict[int, NobleSpec] = field(default_factory=dict)
    expansions: dict[int, dict[int, ExpansionSpec]] = field(
        default_factory=lambda: {level: {} for level in _LEVEL_LIMITS}
    )

    @classmethod
    def load(cls, path: str | PathLike[str] = DEFAULT_DATABASE_PATH) -> "CardDatabase":
        """Read the database from an XML file."""
        return cls.from_xml(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def from_xml(cls, text: str) -> "CardDatabase":
        """Parse the database from XML text."""
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise CardDatabaseError(f"invalid XML: {exc}") from exc

        nobles_node = _child(root, "NOBLE_CARDS")
        nobles = dict(
            _parse_noble(node) for node in islice(nobles_node, pieces.NOBLE_CARD_COUNT)
        )
        expansions_root = _child(root, "EXPANSION_CARDS")
        expansions = {
            level: dict(
                _parse_expansion(node)
                for node in islice(_child(expansions_root, f"LEVEL{level}"), limit)
            )
            for level, limit in _LEVEL_LIMITS.items()
        }
        return cls(nobles, expansions)

    def noble(self, card_id: int) -> NobleSpec:
        """The noble with this id; an empty spec for an unknown id."""
        return self.nobles.get(card_id, NobleSpec())

    def expansion(self, level: int, card_id: int) -> ExpansionSpec:
        """The expansion card of a level (1-3); an empty spec for an unknown id."""
        level = int(level)
        if level not in _LEVEL_LIMITS:
            raise ValueError(f"no expansion level {level}")
        return self.expansions.get(level, {}).get(card_id, ExpansionSpec())