"""Options chosen before a game starts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from splendor import pieces


class GameMode(Enum):
    OFFLINE = "offline"
    CLIENT = "client"
    SERVER = "server"


@dataclass(frozen=True)
class PregameSetup:
    """Player count, game mode and optional features of a game."""

    player_count: int
    game_mode: GameMode = GameMode.OFFLINE
    with_timer: bool = False
    with_ai: bool = False

    def __post_init__(self) -> None:
        if not 2 <= self.player_count <= 4:
            raise ValueError("Wrong playerCount (Value must be between 2-4)")

    def gem_token_count(self) -> int:
        """Tokens in each gem pile for this number of players."""
        return pieces.gem_tokens_per_pile(self.player_count)

    def noble_card_count(self) -> int:
        """Nobles laid out for this number of players."""
        return pieces.noble_card_count(self.player_count)