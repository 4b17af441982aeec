"""Events and screen layout of the game table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

CARD_ROW_SLOTS = 5

PANEL_ORDER = (
    "info",
    "players",
    "tokens",
    "expansions_l1",
    "expansions_l2",
    "expansions_l3",
    "nobles",
    "token_alert",
    "hand",
)


class GameEvent(Enum):
    """What the player asked for during a game."""

    NONE = auto()
    MENU_BUTTON = auto()
    PASS_BUTTON = auto()


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.right and self.y <= py < self.bottom


def game_layout(width: float, height: float) -> dict[str, Rect]:
    """Area of each panel for a window size, in drawing order.

    The hand and token-alert panels are overlays covering the whole window.
    """
    if width <= 0 or height <= 0:
        raise ValueError("window size must be positive")
    rects = {
        "info": Rect(0, 0, width, height * 0.05),
        "players": Rect(0, height * 0.05, width * 0.3, height * 0.95),
        "tokens": Rect(width * 0.3, height * 0.05, width * 0.1, height * 0.95),
        "nobles": Rect(width * 0.4, height * 0.05, width * 0.6, height * 0.26),
        "expansions_l3": Rect(width * 0.4, height * 0.31, width * 0.6, height * 0.23),
        "expansions_l2": Rect(width * 0.4, height * 0.54, width * 0.6, height * 0.23),
        "expansions_l1": Rect(width * 0.4, height * 0.77, width * 0.6, height * 0.23),
        "hand": Rect(0, 0, width, height),
        "token_alert": Rect(0, 0, width, height),
    }
    return {name: rects[name] for name in PANEL_ORDER}