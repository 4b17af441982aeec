import pytest

from splendor.carddao import CardDatabase, ExpansionSpec, NobleSpec
from splendor.cards import ExpansionCard, ExpansionLevel, NobleCard
from splendor.tokens import GemType


@pytest.fixture
def database():
    request = {gem: 0 for gem in GemType.gems()}
    request[GemType.RED_RUBY] = 4
    return CardDatabase(
        nobles={2: NobleSpec("Anne", 3, dict(request))},
        expansions={
            1: {},
            2: {5: ExpansionSpec(GemType.BLUE_SAPPHIRE, 2, dict(request))},
            3: {},
        },
    )


def test_expansion_from_database(database):
    card = ExpansionCard.from_database(database, ExpansionLevel.LEVEL2, 5, False)
    assert card.card_id == 5
    assert card.face_up is False
    assert card.level is ExpansionLevel.LEVEL2
    assert card.reward is GemType.BLUE_SAPPHIRE
    assert card.prestige_points == 2
    assert card.cost[GemType.RED_RUBY] == 4


def test_expansion_accepts_int_level(database):
    card = ExpansionCard.from_database(database, 2, 5, True)
    assert card.level is ExpansionLevel.LEVEL2


def test_expansion_unknown_id_is_empty(database):
    card = ExpansionCard.from_database(database, ExpansionLevel.LEVEL1, 9, True)
    assert card.prestige_points == 0
    assert card.reward is GemType.GREEN_EMERALD
    assert all(amount == 0 for amount in card.cost.values())


def test_expansion_invalid_level(database):
    with pytest.raises(ValueError):
        ExpansionCard.from_database(database, 4, 1, True)


def test_expansion_cost_is_a_copy(database):
    card = ExpansionCard.from_database(database, 2, 5, True)
    card.cost[GemType.RED_RUBY] = 0
    assert database.expansion(2, 5).request[GemType.RED_RUBY] == 4


def test_noble_from_database(database):
    card = NobleCard.from_database(database, 2, True)
    assert card.name == "Anne"
    assert card.prestige_points == 3
    assert card.requirements[GemType.RED_RUBY] == 4
    assert card.card_id == 2


def test_noble_unknown_id(database):
    card = NobleCard.from_database(database, 7, False)
    assert card.name == ""
    assert card.face_up is False


def test_card_equality(database):
    first = NobleCard.from_database(database, 2, True)
    second = NobleCard.from_database(database, 2, True)
    assert first == second
    second.face_up = False
    assert first != second and second.face_up is False