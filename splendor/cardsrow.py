"""A horizontal row of card slots: a deck's visible cards or the noble tiles."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from splendor.carddao import CardData, CardDatabase
from splendor.colliders import MouseEvent
from splendor.sound import SoundSystem
from splendor.tokens import GemType
from splendor.uicard import CardKind, CardState, UICard, UICardData

CARD_TEXTURE_RATIO = 238.0 / 357.0
_PICKED_STATES = (CardState.LEFT_RELEASE, CardState.RIGHT_RELEASE)


class CardsRowPanel:
    """Evenly spaced card slots inside a padded rectangle."""

    def __init__(
        self,
        card_slots: int,
        x: float = 0,
        y: float = 0,
        width: float = 1024,
        height: float = 100,
        padding_x: float = 0.1,
        padding_y: float = 0.05,
        sounds: SoundSystem | None = None,
    ) -> None:
        if card_slots < 1:
            raise ValueError("a cards row needs at least one slot")
        self.card_slots = card_slots
        self.position = (float(x), float(y))
        self.size = (float(width), float(height))
        self.active = True
        self.interactable = True

        card_height = height - 2 * padding_y * height
        card_width = card_height * CARD_TEXTURE_RATIO
        self.card_size = (card_width, card_height)

        content_x = x + padding_x * width
        content_y = y + padding_y * height
        content_width = width - 2 * padding_x * width
        self.card_distance = (
            (content_width - card_width) / (card_slots - 1) if card_slots > 1 else 0.0
        )

        self._cards = [
            UICard(
                0,
                CardKind.UNKNOWN,
                content_x + slot * self.card_distance,
                content_y,
                card_width,
                card_height,
                sounds,
            )
            for slot in range(card_slots)
        ]
        self.draw_order: list[UICard] = list(self._cards)

    @property
    def cards(self) -> list[UICard]:
        """The slots from left to right."""
        return list(self._cards)

    def handle_event(self, event: MouseEvent) -> None:
        """Pass a mouse event to every card while the row is usable."""
        if not (self.active and self.interactable):
            return
        for card in self._cards:
            card.handle_event(event)

    def cards_data(self) -> list[UICardData]:
        return [card.data for card in self._cards]

    def set_cards(self, data: Sequence[UICardData]) -> None:
        """Show the given cards; slots beyond them become empty."""
        for index, card in enumerate(self._cards):
            card.set_data(data[index] if index < len(data) else UICardData())

    def set_cards_from_dao(
        self,
        data: Sequence[CardData],
        with_background: int = 0,
        numb: bool = False,
    ) -> None:
        """Show board cards; with a deck level, the first slot shows that deck's back."""
        targets: Iterable[UICard] = self._cards
        if with_background:
            if with_background in (1, 2, 3):
                self._cards[0].set_data(
                    UICardData(CardKind.BACKGROUND, with_background, False)
                )
            targets = self._cards[1:]
        for index, card in enumerate(targets):
            if index < len(data):
                item = data[index]
                card.set_data(UICardData(CardKind(item.kind.value), item.card_id, numb))
            else:
                card.set_data(UICardData())
            card.activate()

    def check_for_picked_card(self) -> tuple[UICard, CardState] | None:
        """The first card released by a click and how it was clicked; it goes back to hover."""
        for card in self._cards:
            if card.state in _PICKED_STATES:
                state = card.state
                card.state = CardState.HOVER
                return card, state
        return None

    def check_for_won_noble(
        self, database: CardDatabase, resources: Mapping[GemType, int]
    ) -> UICardData | None:
        """The first noble whose requirements the resources meet."""
        for card in self._cards:
            if card.kind is not CardKind.NOBLE:
                return None
            request = database.noble(card.card_id).request
            if all(
                resources.get(gem, 0) >= request.get(gem, 0) for gem in GemType.gems()
            ):
                return card.data
        return None

    def numb_all(self) -> None:
        """Make every card ignore clicks and drop any selection."""
        for card in self._cards:
            card.numb = True
            card.selected = False
            card.info_text = None

    def un_numb_all(self) -> None:
        """Make every non-empty card clickable again."""
        for card in self._cards:
            if card.card_id != 0:
                card.numb = False

    def disable_deck_background(self) -> None:
        """Hide the deck back shown in the first slot, if any."""
        first = self._cards[0]
        if first.kind is CardKind.BACKGROUND:
            first.deactivate()
            first.numb = True

    def in_hand_all(self) -> None:
        for card in self._cards:
            card.in_hand = True

    def reverse_draw_order(self) -> None:
        self.draw_order.reverse()