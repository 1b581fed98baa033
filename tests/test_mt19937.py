import itertools

import pytest

from probetable.mt19937 import MT19937


def test_default_seed_first_output():
    assert MT19937()() == 3499211612


def test_default_seed_ten_thousandth_output():
    gen = MT19937(5489)
    value = None
    for _ in range(10000):
        value = gen()
    assert value == 4123659995


def test_same_seed_same_sequence():
    a = MT19937(42)
    b = MT19937(42)
    assert [a() for _ in range(1000)] == [b() for _ in range(1000)]


def test_different_seeds_differ():
    a = MT19937(1)
    b = MT19937(2)
    assert [a() for _ in range(10)] != [b() for _ in range(10)]


def test_seed_reduced_modulo_2_32():
    a = MT19937(7)
    b = MT19937(7 + 2**32)
    assert [a() for _ in range(20)] == [b() for _ in range(20)]


def test_negative_seed_wraps():
    a = MT19937(-1)
    b = MT19937(2**32 - 1)
    assert [a() for _ in range(20)] == [b() for _ in range(20)]


@pytest.mark.parametrize("seed", [0, 1, 123456, 2**32 - 1])
def test_outputs_are_32_bit(seed):
    gen = MT19937(seed)
    values = [gen() for _ in range(2000)]
    assert all(0 <= v < 2**32 for v in values)


def test_iteration_matches_calls():
    a = MT19937(99)
    b = MT19937(99)
    assert list(itertools.islice(a, 50)) == [b() for _ in range(50)]