import math

import pytest

from luxide.interval import Interval


def test_from_intervals_encloses_both():
    a = Interval(-1.0, 2.0)
    b = Interval(0.5, 4.0)
    joined = Interval.from_intervals(a, b)
    assert joined.minimum == a.minimum
    assert joined.maximum == b.maximum
    for x in (a.minimum, a.maximum, b.minimum, b.maximum):
        assert joined.contains_including(x)


def test_from_intervals_with_empty_is_identity():
    a = Interval(1.5, 7.25)
    assert Interval.from_intervals(a, Interval.EMPTY) == a
    assert Interval.from_intervals(Interval.EMPTY, a) == a


def test_size_matches_bounds():
    i = Interval(1.25, 9.5)
    assert i.size() == i.maximum - i.minimum


def test_expand_grows_size_symmetrically():
    i = Interval(2.0, 6.0)
    expanded = i.expand(3.0)
    assert expanded.size() == pytest.approx(i.size() + 3.0)
    assert (i.minimum - expanded.minimum) == pytest.approx(expanded.maximum - i.maximum)


def test_contains_including_and_excluding_at_bounds():
    i = Interval(-2.0, 3.0)
    assert i.contains_including(i.minimum)
    assert i.contains_including(i.maximum)
    assert not i.contains_excluding(i.minimum)
    assert not i.contains_excluding(i.maximum)
    assert i.contains_excluding(0.0)
    assert not i.contains_including(10.0)


def test_empty_and_universe():
    for x in (-1e300, -1.0, 0.0, 1.0, 1e300):
        assert not Interval.EMPTY.contains_including(x)
        assert Interval.UNIVERSE.contains_excluding(x)
    assert Interval.UNIVERSE.size() == math.inf


@pytest.mark.parametrize("x", [-5.0, -1.0, 0.0, 0.5, 1.0, 8.0])
def test_clamp_stays_in_interval(x):
    i = Interval(-1.0, 1.0)
    clamped = i.clamp(x)
    assert i.contains_including(clamped)
    if i.contains_including(x):
        assert clamped == x


def test_clamp_outside_returns_bound():
    i = Interval(3.0, 4.0)
    assert i.clamp(-100.0) == i.minimum
    assert i.clamp(100.0) == i.maximum


def test_add_is_commutative_and_sub_inverts():
    i = Interval(1.0, 2.5)
    assert i + 4.0 == 4.0 + i
    assert (i + 4.0) - 4.0 == i
    assert (i + 4.0).size() == pytest.approx(i.size())


def test_augmented_assignment_rebinds():
    original = Interval(0.0, 1.0)
    i = original
    i += 2.0
    assert i == original + 2.0
    i -= 2.0
    assert i == original


def test_add_rejects_non_numbers():
    with pytest.raises(TypeError):
        Interval(0.0, 1.0) + "a"
    with pytest.raises(TypeError):
        Interval(0.0, 1.0) - None