"""String algorithms: substrings, palindromes, brackets and digit arithmetic."""

from __future__ import annotations

from itertools import zip_longest

_OPENERS = "({["
_CLOSER_FOR = {")": "(", "}": "{", "]": "["}


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring of ``s`` without repeated characters."""
    last_seen: dict[str, int] = {}
    best = 0
    start = 0
    for index, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring of ``s``."""
    n = len(s)
    start, best_len = 0, 1

    def expand(left: int, right: int) -> None:
        nonlocal start, best_len
        while left >= 0 and right < n and s[left] == s[right]:
            if right - left + 1 > best_len:
                start, best_len = left, right - left + 1
            left -= 1
            right += 1

    for centre in range(n):
        expand(centre, centre)
        expand(centre, centre + 1)
    return s[start:start + best_len]


def is_valid_parentheses(s: str) -> bool:
    """Return whether every bracket in ``s`` is closed by its matching kind in order."""
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack:
            return False
        elif ch in _CLOSER_FOR:
            if stack[-1] != _CLOSER_FOR[ch]:
                return False
            stack.pop()
    return not stack


def first_occurrence(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parentheses substring.

    Any character other than ``(`` is treated as a closing parenthesis.
    """
    stack = [-1]
    best = 0
    for index, ch in enumerate(s):
        if ch == "(":
            stack.append(index)
            continue
        stack.pop()
        if stack:
            best = max(best, index - stack[-1])
        else:
            stack.append(index)
    return best


def multiply_strings(num1: str, num2: str) -> str:
    """Multiply two non-negative decimal strings and return the product as a string."""
    if num1 == "0" or num2 == "0":
        return "0"
    digits = [0] * (len(num1) + len(num2))
    for i, a in reversed(list(enumerate(map(int, num1)))):
        for j, b in reversed(list(enumerate(map(int, num2)))):
            total = a * b + digits[i + j + 1]
            digits[i + j + 1] = total % 10
            digits[i + j] += total // 10
    return "".join(map(str, digits)).lstrip("0")


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def is_alphanumeric_palindrome(s: str) -> bool:
    """Return whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order, joined by single spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def is_anagram(s: str, t: str) -> bool:
    """Return whether ``t`` is a rearrangement of the characters of ``s``."""
    return sorted(s) == sorted(t)


def add_strings(num1: str, num2: str) -> str:
    """Add two non-negative decimal strings and return the sum as a string."""
    out: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        out.append(str(digit))
    if carry:
        out.append(str(carry))
    return "".join(reversed(out))


def number_of_substrings(s: str) -> int:
    """Count substrings of ``s`` holding at least one each of ``a``, ``b`` and ``c``.

    Raises ValueError if ``s`` holds any other character.
    """
    counts = {"a": 0, "b": 0, "c": 0}
    left = 0
    total = 0
    for ch in s:
        if ch not in counts:
            raise ValueError(f"unexpected character {ch!r}; only 'a', 'b' and 'c' are allowed")
        counts[ch] += 1
        while all(counts.values()):
            counts[s[left]] -= 1
            left += 1
        total += left
    return total


def smallest_number(pattern: str) -> str:
    """Return the smallest number over digits 1.. that follows an I/D (increase/decrease) pattern."""
    result: list[str] = []
    stack: list[int] = []
    for index in range(len(pattern) + 1):
        stack.append(index + 1)
        if index == len(pattern) or pattern[index] == "I":
            while stack:
                result.append(str(stack.pop()))
    return "".join(result)