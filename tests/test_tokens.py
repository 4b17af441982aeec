import pytest

from splendor.tokens import TYPE_COUNT, GemType, Token

SYMBOLS = ("GE", "BS", "WD", "BO", "RR")


@pytest.mark.parametrize(
    "symbol, gem",
    [
        ("GE", GemType.GREEN_EMERALD),
        ("BS", GemType.BLUE_SAPPHIRE),
        ("WD", GemType.WHITE_DIAMOND),
        ("BO", GemType.BLACK_ONYX),
        ("RR", GemType.RED_RUBY),
    ],
)
def test_from_code(symbol, gem):
    assert GemType.from_code(symbol) is gem


def test_symbols_cover_every_gem():
    parsed = {GemType.from_code(symbol) for symbol in SYMBOLS}
    assert parsed == set(GemType.gems())


def test_unknown_code_raises():
    with pytest.raises(ValueError):
        GemType.from_code("XX")


def test_gold_is_not_a_gem():
    assert GemType.GOLD not in GemType.gems()


def test_gems_are_in_value_order():
    values = [gem.value for gem in GemType.gems()]
    assert values == sorted(values)
    assert len(values) == TYPE_COUNT - 1


def test_enum_values_match_source():
    assert GemType.from_code("GE").value == 1
    assert GemType.from_code("BO").value == 0
    assert max(gem.value for gem in GemType.gems()) < GemType.GOLD.value


def test_token_equality():
    assert Token(GemType.RED_RUBY) == Token(GemType.RED_RUBY)
    assert Token(GemType.RED_RUBY).gem is GemType.RED_RUBY