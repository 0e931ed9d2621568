import random

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from algokit.numbers import (
    climb_stairs,
    fib,
    is_palindrome_number,
    is_perfect_number,
    is_power_of_three,
    missing_number,
    plus_one,
    reverse_integer,
)

int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@given(int32)
def test_reverse_integer_round_trip(x):
    assume(x % 10 != 0)
    once = reverse_integer(x)
    assume(once != 0)
    assert reverse_integer(once) == x


@given(int32)
def test_reverse_integer_keeps_sign_and_range(x):
    result = reverse_integer(x)
    assert -(2**31) <= result <= 2**31 - 1
    assert result * x >= 0


def test_reverse_integer_overflow():
    assert reverse_integer(2147483647) == 0


@given(st.integers(min_value=0, max_value=10**6))
def test_palindrome_number_mirror(n):
    assert is_palindrome_number(int(str(n) + str(n)[::-1])) is True


@given(st.integers(min_value=1, max_value=10**6))
def test_palindrome_number_negative_and_trailing_zero(n):
    assert is_palindrome_number(-n) is False
    assert is_palindrome_number(n * 10) is False


@given(st.integers(min_value=0, max_value=10**30))
def test_plus_one(n):
    digits = [int(c) for c in str(n)]
    assert plus_one(digits) == [int(c) for c in str(n + 1)]
    assert digits == [int(c) for c in str(n)]


def test_climb_stairs_base_cases():
    assert climb_stairs(1) == 1
    assert climb_stairs(2) == 2


@given(st.integers(min_value=3, max_value=60))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_rejects_non_positive():
    with pytest.raises(ValueError):
        climb_stairs(0)


@given(st.integers(min_value=0, max_value=200), st.randoms())
def test_missing_number(n, rnd):
    gone = rnd.randint(0, n)
    nums = [v for v in range(n + 1) if v != gone]
    rnd.shuffle(nums)
    assert missing_number(nums) == gone


@pytest.mark.parametrize("k", range(20))
def test_power_of_three_true(k):
    assert is_power_of_three(3**k) is True


@pytest.mark.parametrize("k", range(1, 20))
def test_power_of_three_false(k):
    assert is_power_of_three(2 * 3**k) is False
    assert is_power_of_three(-(3**k)) is False


@pytest.mark.parametrize("num", [6, 28, 496, 8128, 33550336])
def test_perfect_numbers(num):
    assert is_perfect_number(num) is True


@pytest.mark.parametrize("num", [-6, 0, 1, 2, 7, 12, 16, 97, 100])
def test_not_perfect_numbers(num):
    assert is_perfect_number(num) is False


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


@given(st.integers(min_value=2, max_value=300))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_random_indices_are_increasing():
    rnd = random.Random(3)
    indices = sorted(rnd.sample(range(2, 200), 20))
    values = [fib(i) for i in indices]
    assert values == sorted(values)
    assert len(set(values)) == len(values)