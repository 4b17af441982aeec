"""Mouse hit areas that turn pointer events into enter/leave/click callbacks."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto


class EventType(Enum):
    MOUSE_MOVED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    OTHER = auto()


class MouseButton(Enum):
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


@dataclass(frozen=True)
class MouseEvent:
    """A pointer event at window coordinates."""

    type: EventType
    x: int = 0
    y: int = 0
    button: MouseButton | None = None


class Collider(ABC):
    """Area that reacts to mouse events; subclasses define its shape.

    The default hooks record which interaction happened last in
    ``last_interaction``; subclasses override them to react.
    """

    is_mouse_in: bool = False
    last_interaction: str | None = None

    def handle_event(self, event: MouseEvent) -> None:
        """Dispatch an event to the matching hooks."""
        was_in = self.is_mouse_in
        if event.type is EventType.MOUSE_MOVED:
            self.is_mouse_in = self.detect_mouse_collision(event.x, event.y)
            if self.is_mouse_in:
                self.on_mouse_over()
        elif event.type is EventType.MOUSE_BUTTON_PRESSED:
            if self.detect_mouse_collision(event.x, event.y):
                if event.button is MouseButton.LEFT:
                    self.on_mouse_left_click()
                if event.button is MouseButton.RIGHT:
                    self.on_mouse_right_click()
        elif event.type is EventType.MOUSE_BUTTON_RELEASED:
            if self.detect_mouse_collision(event.x, event.y):
                if event.button is MouseButton.LEFT:
                    self.on_mouse_left_release()
                if event.button is MouseButton.RIGHT:
                    self.on_mouse_right_release()

        if was_in and not self.is_mouse_in:
            self.on_mouse_leave()
        elif not was_in and self.is_mouse_in:
            self.on_mouse_enter()

    @abstractmethod
    def detect_mouse_collision(self, x: float, y: float) -> bool:
        """Whether the point lies inside the collider."""

    def on_mouse_over(self) -> None:
        self.last_interaction = "over"

    def on_mouse_enter(self) -> None:
        self.last_interaction = "enter"

    def on_mouse_leave(self) -> None:
        self.last_interaction = "leave"

    def on_mouse_left_click(self) -> None:
        self.last_interaction = "left_click"

    def on_mouse_right_click(self) -> None:
        self.last_interaction = "right_click"

    def on_mouse_left_release(self) -> None:
        self.last_interaction = "left_release"

    def on_mouse_right_release(self) -> None:
        self.last_interaction = "right_release"


class RectCollider(Collider):
    """Axis-aligned rectangle with integer coordinates."""

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = int(x)
        self.y = int(y)
        self.width = int(width)
        self.height = int(height)

    @property
    def rect(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)

    def detect_mouse_collision(self, x: float, y: float) -> bool:
        left, right = sorted((self.x, self.x + self.width))
        top, bottom = sorted((self.y, self.y + self.height))
        return left <= x < right and top <= y < bottom


class CircCollider(Collider):
    """Circle measured from its position point."""

    def __init__(self, x: float, y: float, radius: float) -> None:
        self.x = x
        self.y = y
        self.radius = radius

    def detect_mouse_collision(self, x: float, y: float) -> bool:
        return math.hypot(x - self.x, y - self.y) < self.radius