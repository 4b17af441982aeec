"""Game state exchanged between the two online players."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields
from enum import Enum

_LENGTH = struct.Struct(">I")


class LastDrawn(Enum):
    """Which expansion deck the last card was drawn from."""

    NONE = 0
    LEVEL1 = 1
    LEVEL2 = 2
    LEVEL3 = 3


@dataclass
class NetworkPacket:
    """Serialized hand, board, decks and player data, all as strings."""

    hand_resources: str = ""
    hand_tokens: str = ""
    hand_expansions: str = ""
    hand_nobles: str = ""
    board_tokens: str = ""
    board_noble_slots: str = ""
    board_expansion_l1_slots: str = ""
    board_expansion_l2_slots: str = ""
    board_expansion_l3_slots: str = ""
    card_drawn_from_deck: str = ""
    deck_nobles: str = ""
    deck_expansion_l1: str = ""
    deck_expansion_l2: str = ""
    deck_expansion_l3: str = ""
    player_prestige_points: str = ""

    def set_hand_data(self, hand_data: tuple[str, str, str, str]) -> None:
        (
            self.hand_resources,
            self.hand_tokens,
            self.hand_expansions,
            self.hand_nobles,
        ) = hand_data

    def set_board_data(self, board_data: tuple[str, str, str, str, str]) -> None:
        (
            self.board_tokens,
            self.board_noble_slots,
            self.board_expansion_l1_slots,
            self.board_expansion_l2_slots,
            self.board_expansion_l3_slots,
        ) = board_data

    def set_card_drawn_from_deck(self, card_drawn: LastDrawn) -> None:
        self.card_drawn_from_deck = str(LastDrawn(card_drawn).value)

    def set_decks_data(self, decks_data: tuple[str, str, str, str]) -> None:
        (
            self.deck_nobles,
            self.deck_expansion_l1,
            self.deck_expansion_l2,
            self.deck_expansion_l3,
        ) = decks_data

    def set_player_data(self, prestige_points: str) -> None:
        self.player_prestige_points = prestige_points

    def clear(self) -> None:
        """Reset every field to the empty string."""
        for item in fields(self):
            setattr(self, item.name, "")

    def to_bytes(self) -> bytes:
        """Each field as a big-endian 32-bit byte length followed by UTF-8 text."""
        parts = []
        for item in fields(self):
            encoded = getattr(self, item.name).encode("utf-8")
            parts.append(_LENGTH.pack(len(encoded)))
            parts.append(encoded)
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, data: bytes) -> "NetworkPacket":
        """Parse what :meth:`to_bytes` produced."""
        data = bytes(data)
        values = []
        offset = 0
        for item in fields(cls):
            if len(data) - offset < _LENGTH.size:
                raise ValueError(f"packet truncated before field {item.name}")
            (length,) = _LENGTH.unpack_from(data, offset)
            offset += _LENGTH.size
            end = offset + length
            if end > len(data):
                raise ValueError(f"packet truncated inside field {item.name}")
            values.append(data[offset:end].decode("utf-8"))
            offset = end
        if offset != len(data):
            raise ValueError("trailing bytes after packet")
        return cls(*values)

    def __str__(self) -> str:
        return (
            "[Hand Data]\n"
            f"Resources: {self.hand_resources}\n"
            f"Tokens: {self.hand_tokens}\n"
            f"Expansions: {self.hand_expansions}\n"
            f"Nobles: {self.hand_nobles}\n"
            "[Board Data]\n"
            f"Tokens: {self.board_tokens}\n"
            f"Nobles: {self.board_noble_slots}\n"
            f"ExpansionsL1: {self.board_expansion_l1_slots}\n"
            f"ExpansionsL2: {self.board_expansion_l2_slots}\n"
            f"ExpansionsL3: {self.board_expansion_l3_slots}\n"
            f"CardDrawn: {self.card_drawn_from_deck}\n"
            "[Decks Data]\n"
            f"Nobles: {self.deck_nobles}\n"
            f"ExpansionsL1: {self.deck_expansion_l1}\n"
            f"ExpansionsL2: {self.deck_expansion_l2}\n"
            f"ExpansionsL3: {self.deck_expansion_l3}\n"
            "[Player Data]\n"
            f"Prestige points:{self.player_prestige_points}\n"
        )