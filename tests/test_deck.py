import pytest

from splendor import pieces
from splendor.carddao import CardDatabase
from splendor.cards import ExpansionLevel
from splendor.deck import Deck, EmptyDeckError, expansion_deck, noble_deck
from splendor.randomizer import Randomizer


@pytest.fixture
def database():
    return CardDatabase()


def test_draw_takes_last_added():
    deck = Deck(["a", "b"])
    deck.add("c")
    assert deck.draw() == "c"
    assert deck.draw() == "b"
    assert len(deck) == 1


def test_draw_from_empty_raises():
    with pytest.raises(EmptyDeckError):
        Deck().draw()


def test_remove_top_from_empty_raises():
    with pytest.raises(IndexError):
        Deck().remove_top()


def test_remove_top():
    deck = Deck([1, 2])
    deck.remove_top()
    assert deck.cards() == [1]


def test_is_empty_and_clear():
    deck = Deck([1])
    assert not deck.is_empty()
    deck.clear()
    assert deck.is_empty()


def test_cards_is_a_copy():
    deck = Deck([1, 2])
    deck.cards().append(3)
    assert len(deck) == 2


def test_replace_cards():
    deck = Deck([1])
    deck.replace_cards([4, 5, 6])
    assert deck.cards() == [4, 5, 6]


def test_shuffle_keeps_cards():
    items = list(range(30))
    deck = Deck(items)
    deck.shuffle(Randomizer(7))
    assert sorted(deck.cards()) == items


def test_noble_deck(database):
    deck = noble_deck(database)
    assert len(deck) == pieces.NOBLE_CARD_COUNT
    top = deck.draw()
    assert top.card_id == pieces.NOBLE_CARD_COUNT
    assert top.face_up is False


@pytest.mark.parametrize(
    "level, count",
    [
        (ExpansionLevel.LEVEL1, pieces.L1_EXPANSION_CARD_COUNT),
        (ExpansionLevel.LEVEL2, pieces.L2_EXPANSION_CARD_COUNT),
        (ExpansionLevel.LEVEL3, pieces.L3_EXPANSION_CARD_COUNT),
    ],
)
def test_expansion_deck(database, level, count):
    deck = expansion_deck(database, level)
    cards = deck.cards()
    assert [card.card_id for card in cards] == list(range(1, count + 1))
    assert all(card.level is level for card in cards)


def test_expansion_deck_invalid_level(database):
    with pytest.raises(ValueError):
        expansion_deck(database, 0)