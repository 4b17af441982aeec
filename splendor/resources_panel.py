"""Horizontal row showing how many of each gem a player owns as permanent resources."""

from __future__ import annotations

from typing import Mapping

from splendor.tokens import GemType

X_PADDING_PERCENTAGE = 0.05
Y_PADDING_PERCENTAGE = 0.02
RESOURCE_PERCENTAGE = 0.14
TEXT_SIZE = 60


class ResourcesPanel:
    """Five gem circles laid out left to right, each with a count label."""

    def __init__(
        self, x: float = 0, y: float = 0, width: float = 100, height: float = 1024
    ) -> None:
        self.position = (float(x), float(y))
        self.size = (float(width), float(height))
        self.active = True
        self.radius = RESOURCE_PERCENTAGE * width / 2
        self.gems: tuple[GemType, ...] = GemType.gems()
        center_y = y + height / 2
        self.centers: dict[GemType, tuple[float, float]] = {
            gem: (
                x
                + self.radius
                + (index + 1) * X_PADDING_PERCENTAGE * width
                + index * 2 * self.radius,
                center_y,
            )
            for index, gem in enumerate(self.gems)
        }
        self.text_positions: dict[GemType, tuple[float, float]] = {
            gem: (cx + self.radius / 1.5, cy + self.radius / 1.5)
            for gem, (cx, cy) in self.centers.items()
        }
        self.texts: dict[GemType, str] = dict.fromkeys(self.gems, "0")

    def update(self, resources: Mapping[GemType, int]) -> None:
        """Show the count of each gem; gems missing from ``resources`` show 0."""
        for gem in self.gems:
            self.texts[gem] = str(resources.get(gem, 0))