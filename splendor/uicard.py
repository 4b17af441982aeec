"""On-screen card that can be hovered, bought (left click) or held (right click)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from os import PathLike
from pathlib import Path

from splendor import pieces
from splendor.button import (
    DARK_GREEN,
    DARK_YELLOW,
    GOLD_YELLOW,
    QUARTER_TRANSPARENT,
    TRANSPARENT,
    WARNING_RED,
    WHITE,
    Color,
)
from splendor.colliders import MouseEvent, RectCollider
from splendor.sound import SoundSystem, SoundType

DEFAULT_TEXTURE_ROOT = "../external/Resources/Textures/Cards/"
BACKGROUND_COUNT = 3


class CardKind(Enum):
    UNKNOWN = -1
    BACKGROUND = 4
    NOBLE = 0
    EXPANSION_L1 = 1
    EXPANSION_L2 = 2
    EXPANSION_L3 = 3


class CardState(Enum):
    NONE = auto()
    HOVER = auto()
    PRESS = auto()
    LEFT_RELEASE = auto()
    RIGHT_RELEASE = auto()


@dataclass(frozen=True)
class UICardData:
    kind: CardKind = CardKind.UNKNOWN
    card_id: int = 0
    numb: bool = False


_TEXTURE_SETS = {
    CardKind.BACKGROUND: ("", "ExpansionCardBackground", BACKGROUND_COUNT),
    CardKind.EXPANSION_L1: (
        "Level1ExpansionCards",
        "Level1ExpansionCard",
        pieces.L1_EXPANSION_CARD_COUNT,
    ),
    CardKind.EXPANSION_L2: (
        "Level2ExpansionCards",
        "Level2ExpansionCard",
        pieces.L2_EXPANSION_CARD_COUNT,
    ),
    CardKind.EXPANSION_L3: (
        "Level3ExpansionCards",
        "Level3ExpansionCard",
        pieces.L3_EXPANSION_CARD_COUNT,
    ),
    CardKind.NOBLE: ("NobleCards", "NobleCard", pieces.NOBLE_CARD_COUNT),
}


def texture_path(
    root: str | PathLike[str], kind: CardKind, card_id: int
) -> Path | None:
    """The image file of a card; id 0 is the blank card, ``None`` if there is none."""
    root = Path(root)
    if card_id == 0:
        return root / "NullTexture.png"
    if kind is CardKind.UNKNOWN:
        return None
    folder, name, count = _TEXTURE_SETS[kind]
    if not 1 <= card_id <= count:
        return None
    return root / folder / f"{name}-{card_id:02d}.png"


def _subtract(color: Color, other: Color) -> Color:
    return tuple(max(0, a - b) for a, b in zip(color, other))


class UICard(RectCollider):
    """A card slot on screen. Its hit area stays where it was placed."""

    texture_root: Path = Path(DEFAULT_TEXTURE_ROOT)

    def __init__(
        self,
        card_id: int,
        kind: CardKind,
        x: float = 0,
        y: float = 0,
        width: float = 0,
        height: float = 0,
        sounds: SoundSystem | None = None,
    ) -> None:
        super().__init__(x, y, width, height)
        self.card_id = card_id
        self.kind = kind
        self.sounds = sounds
        self.size = (float(width), float(height))
        self.initial_position = (float(x), float(y))
        self.position = self.initial_position
        self.scale = 1.0
        self.numb = False
        self.in_hand = False
        self.warning = False
        self.state = CardState.NONE
        self.selected = False
        self.info_text: str | None = None
        self.fill_color: Color = WHITE
        self.outline_color: Color = TRANSPARENT
        self.outline_thickness = 0.05 * width
        self.texture = texture_path(self.texture_root, kind, card_id)
        self._mouse = (0, 0)

    @property
    def data(self) -> UICardData:
        return UICardData(self.kind, self.card_id, self.numb)

    def set_data(self, data: UICardData) -> None:
        """Show another card; ignored when that card has no image."""
        path = texture_path(self.texture_root, data.kind, data.card_id)
        if path is None:
            return
        self.card_id = data.card_id
        self.kind = data.kind
        self.numb = True if data.kind is CardKind.UNKNOWN else data.numb
        self.texture = path

    def trigger_warning(self) -> None:
        """Outline the card in red, e.g. when it cannot be afforded."""
        self.warning = True
        self.outline_color = WARNING_RED
        self._play(SoundType.WRONG_SFX)

    def deactivate(self) -> None:
        self.fill_color = TRANSPARENT
        self.outline_color = TRANSPARENT
        self.info_text = None
        self.selected = False

    def activate(self) -> None:
        self.fill_color = WHITE

    def _play(self, sound_type: SoundType) -> None:
        if self.sounds is not None:
            self.sounds.play_sfx(sound_type)

    def handle_event(self, event: MouseEvent) -> None:
        self._mouse = (event.x, event.y)
        super().handle_event(event)

    def on_mouse_over(self) -> None:
        if self.in_hand:
            return
        width, height = self.size
        self.position = (self._mouse[0] - width, self._mouse[1] - height)

    def on_mouse_enter(self) -> None:
        if not self.numb:
            self.state = CardState.HOVER
            self.outline_color = _subtract(GOLD_YELLOW, QUARTER_TRANSPARENT)
            if self.in_hand:
                self.info_text = "in_hand"
                return
            self.info_text = "half" if self.kind is CardKind.BACKGROUND else "full"
        self._play(SoundType.OVER_SFX)
        if self.in_hand:
            return
        self.scale = 2.0
        self.selected = True

    def on_mouse_leave(self) -> None:
        if not self.numb:
            self.state = CardState.NONE
            self.outline_color = TRANSPARENT
            self.info_text = None
        if self.warning:
            self.warning = False
            self.outline_color = TRANSPARENT
        if self.in_hand:
            return
        self.scale = 1.0
        self.position = self.initial_position
        self.selected = False

    def on_mouse_left_click(self) -> None:
        if self.numb or self.kind is CardKind.BACKGROUND:
            return
        self.state = CardState.PRESS
        self.outline_color = _subtract(DARK_GREEN, QUARTER_TRANSPARENT)
        if not self.in_hand:
            self.scale = 1.8

    def on_mouse_left_release(self) -> None:
        if self.numb or self.kind is CardKind.BACKGROUND:
            return
        self.state = CardState.LEFT_RELEASE
        self.outline_color = _subtract(GOLD_YELLOW, QUARTER_TRANSPARENT)
        if not self.in_hand:
            self.scale = 2.0

    def on_mouse_right_click(self) -> None:
        if self.in_hand or self.numb:
            return
        self.state = CardState.PRESS
        self.scale = 1.8
        self.outline_color = _subtract(DARK_YELLOW, QUARTER_TRANSPARENT)

    def on_mouse_right_release(self) -> None:
        if self.in_hand or self.numb:
            return
        self.state = CardState.RIGHT_RELEASE
        self.scale = 2.0
        self.outline_color = _subtract(GOLD_YELLOW, QUARTER_TRANSPARENT)