"""Clickable rectangular button with a look for each state."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum, auto

from splendor.colliders import RectCollider
from splendor.sound import SoundSystem, SoundType

Color = tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)
WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
RED: Color = (255, 0, 0, 255)
LIGHT_GREY: Color = (200, 200, 200, 255)
GOLD_YELLOW: Color = (255, 196, 0, 255)
DARK_YELLOW: Color = (204, 153, 0, 255)
DARK_GREEN: Color = (0, 100, 0, 255)
WARNING_RED: Color = (200, 0, 0, 255)
QUARTER_TRANSPARENT: Color = (0, 0, 0, 64)


class ButtonState(Enum):
    NONE = auto()
    HOVER = auto()
    PRESS = auto()
    RELEASE = auto()


@dataclass
class BodyDesign:
    fill_color: Color = RED
    outline_color: Color = WHITE
    outline_thickness: float = 3.0


@dataclass
class TextDesign:
    text: str = "Button Text"
    font: str = "DosisLight"
    font_size: int = 30
    font_fill: Color = WHITE
    font_outline: Color = BLACK
    outline_thickness: float = 1.5


@dataclass
class Design:
    body: BodyDesign = field(default_factory=BodyDesign)
    text: TextDesign = field(default_factory=TextDesign)


def default_designs() -> tuple[Design, Design, Design]:
    """Fresh copies of the standard idle, hover and pressed designs."""
    none = Design(
        BodyDesign(TRANSPARENT, GOLD_YELLOW, 4.0),
        TextDesign("Button", "DosisBold", 30, GOLD_YELLOW, BLACK, 0.0),
    )
    hover = Design(
        BodyDesign(GOLD_YELLOW, WHITE, 2.0),
        TextDesign("Button", "DosisBold", 30, WHITE, WHITE, 0.0),
    )
    press = Design(
        BodyDesign(DARK_YELLOW, BLACK, 0.0),
        TextDesign("Button", "DosisBold", 30, LIGHT_GREY, WHITE, 0.0),
    )
    return none, hover, press


class UIButton(RectCollider):
    """A button that tracks hover, press and release and changes its design."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        none: Design | None = None,
        hover: Design | None = None,
        press: Design | None = None,
        initial_state: ButtonState = ButtonState.NONE,
        sounds: SoundSystem | None = None,
    ) -> None:
        super().__init__(x, y, width, height)
        default_none, default_hover, default_press = default_designs()
        self.none_design = copy.deepcopy(none) if none is not None else default_none
        self.hover_design = copy.deepcopy(hover) if hover is not None else default_hover
        self.press_design = copy.deepcopy(press) if press is not None else default_press
        self.sounds = sounds
        self.state = initial_state
        self._current = self.none_design

    @property
    def design(self) -> Design:
        """A copy of the design currently shown."""
        return copy.deepcopy(self._current)

    def switch_state(self, new_state: ButtonState) -> None:
        """Set the state; the release state keeps the current design."""
        self.state = new_state
        designs = {
            ButtonState.NONE: self.none_design,
            ButtonState.HOVER: self.hover_design,
            ButtonState.PRESS: self.press_design,
        }
        self._current = designs.get(new_state, self._current)

    def change_text(self, text: str) -> None:
        """Set the label in every design."""
        for design in (self.none_design, self.hover_design, self.press_design):
            design.text.text = text

    def _play(self, sound_type: SoundType) -> None:
        if self.sounds is not None:
            self.sounds.play_sfx(sound_type)

    def on_mouse_enter(self) -> None:
        self.state = ButtonState.HOVER
        self._current = self.hover_design
        self._play(SoundType.OVER_SFX)

    def on_mouse_leave(self) -> None:
        self.state = ButtonState.NONE
        self._current = self.none_design

    def on_mouse_left_click(self) -> None:
        self.state = ButtonState.PRESS
        self._current = self.press_design
        self._play(SoundType.BUTTON_SFX)

    def on_mouse_left_release(self) -> None:
        self.state = ButtonState.RELEASE
        self._current = self.hover_design