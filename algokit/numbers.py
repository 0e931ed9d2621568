"""Integer algorithms: digit manipulation, sequences and number properties."""

from __future__ import annotations

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_LARGEST_INT32_POWER_OF_THREE = 1162261467


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; return 0 if the result leaves the 32-bit signed range."""
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= reversed_value <= _INT32_MAX:
        return 0
    return reversed_value


def is_palindrome_number(x: int) -> bool:
    """Return whether ``x`` reads the same forwards and backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def plus_one(digits: list[int]) -> list[int]:
    """Return the digit list of the number represented by ``digits`` plus one."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking one or two at a time."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 1
    one_back, two_back = 2, 1
    for _ in range(n - 2):
        one_back, two_back = one_back + two_back, one_back
    return one_back


def missing_number(nums: list[int]) -> int:
    """Return the number in ``0..len(nums)`` that is absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def is_power_of_three(n: int) -> bool:
    """Return whether ``n`` is a power of three within the 32-bit signed range."""
    return n > 0 and _LARGEST_INT32_POWER_OF_THREE % n == 0


def is_perfect_number(num: int) -> bool:
    """Return whether ``num`` equals the sum of its proper divisors."""
    if num <= 1:
        return False
    total = 1
    divisor = 2
    while divisor * divisor < num:
        if num % divisor == 0:
            total += divisor + num // divisor
        divisor += 1
    return total == num


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` below 2 are returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current