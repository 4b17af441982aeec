"""Session rules: seating players, passing turns, detecting the winner and logging."""

from __future__ import annotations

from contextlib import contextmanager
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator

from splendor import pieces
from splendor.logger import Level, Logger
from splendor.player import Player

DEFAULT_LOG_FILE = "../Logging/LogFileStream.log"
CURSOR_TEXTURE = "../external/Resources/Textures/UI/cursor.png"

_OFFLINE_NAMES = ("Adrian", "Bogdan", "Eugen", "Teodor")
_ONLINE_NAMES = ("Teodor", "Adrian")


def _numbered_players(count: int) -> list[Player]:
    return [Player(number, f"Player {number}") for number in range(1, count + 1)]


def offline_players(count: int) -> list[Player]:
    """Players of a local game, ids from 1, named after the default roster."""
    if count < 0:
        raise ValueError("player count cannot be negative")
    players = _numbered_players(count)
    if count >= 2:
        for player, name in zip(players, _OFFLINE_NAMES):
            player.name = name
    return players


def online_players(count: int) -> list[Player]:
    """Players of a network game; the first two are the connected peers."""
    if count < 2:
        raise ValueError("an online game needs at least two players")
    players = _numbered_players(count)
    for player, name in zip(players, _ONLINE_NAMES):
        player.name = name
    return players


def next_player_index(index: int, count: int) -> int:
    """The seat that plays after ``index``, wrapping to the first seat."""
    if count <= 0:
        raise ValueError("player count must be positive")
    index += 1
    return 0 if index == count else index


def find_winner(players: Iterable[Player]) -> Player | None:
    """The first player who reached the winning prestige, if any."""
    return next(
        (p for p in players if p.prestige_points >= pieces.WINNING_PRESTIGE_POINTS),
        None,
    )


def winner_message(name: str) -> str:
    return f"{name} HAS WON THE GAME"


@contextmanager
def open_log(path: str | PathLike[str] = DEFAULT_LOG_FILE) -> Iterator[Logger]:
    """Append to the log file through a logger that keeps info and above."""
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as stream:
        yield Logger(stream, Level.INFO)