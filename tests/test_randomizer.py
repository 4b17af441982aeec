import pytest

from splendor.randomizer import Randomizer


def test_same_seed_same_sequence():
    first = Randomizer(7)
    second = Randomizer(7)
    assert [first.generate_int(0, 100) for _ in range(20)] == [
        second.generate_int(0, 100) for _ in range(20)
    ]


def test_int_within_inclusive_bounds():
    rnd = Randomizer(1)
    values = {rnd.generate_int(3, 5) for _ in range(300)}
    assert values == {3, 4, 5}


def test_int_single_value_range():
    assert Randomizer(2).generate_int(9, 9) == 9


def test_float_within_half_open_bounds():
    rnd = Randomizer(3)
    for _ in range(200):
        value = rnd.generate_float(-1.5, 2.5)
        assert -1.5 <= value < 2.5


@pytest.mark.parametrize("method", ["generate_int", "generate_float"])
def test_reversed_range_raises(method):
    with pytest.raises(ValueError):
        getattr(Randomizer(0), method)(5, 1)


def test_shuffle_is_permutation():
    items = list(range(50))
    Randomizer(11).shuffle(items)
    assert sorted(items) == list(range(50))
    assert items != list(range(50))


def test_shuffle_deterministic_with_seed():
    a = list("abcdefgh")
    b = list("abcdefgh")
    Randomizer(5).shuffle(a)
    Randomizer(5).shuffle(b)
    assert a == b