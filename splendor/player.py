"""Players and their prestige score."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from splendor.packet import NetworkPacket


class PlayerType(Enum):
    USER = "user"
    COMPUTER = "computer"


@dataclass
class Player:
    player_id: int
    name: str
    type: PlayerType = PlayerType.USER
    prestige_points: int = 0

    def add_prestige_points(self, amount: int) -> None:
        self.prestige_points += amount

    def to_package(self) -> str:
        """The player's data as sent over the network."""
        return str(self.prestige_points)

    def update_from_package(self, packet: NetworkPacket) -> None:
        """Take the prestige points carried by a received packet."""
        self.prestige_points = int(packet.player_prestige_points)