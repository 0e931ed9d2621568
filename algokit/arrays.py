"""Algorithms over integer lists: searching, rearranging in place and counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from heapq import merge
from operator import xor


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)`` with ``i < j`` and ``nums[i] + nums[j] == target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return (partner, index)
        seen[value] = index
    return None


def remove_duplicates(nums: list[int]) -> int:
    """Compact the distinct values of sorted ``nums`` to its front and return how many there are.

    Elements past the returned count are left as they happen to be.
    """
    if not nums:
        return 0
    write = 0
    for value in nums[1:]:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def remove_element(nums: list[int], val: int) -> int:
    """Move every element not equal to ``val`` to the front of ``nums`` and return their count.

    Elements past the returned count are left as they happen to be.
    """
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def trap(height: Sequence[int]) -> int:
    """Return how much water is trapped between bars of the given heights."""
    left, right = 0, len(height) - 1
    left_max = right_max = water = 0
    while left < right:
        if height[left] < height[right]:
            left_max = max(left_max, height[left])
            water += left_max - height[left]
            left += 1
        else:
            right_max = max(right_max, height[right])
            water += right_max - height[right]
            right -= 1
    return water


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``.

    Raises ValueError if ``nums`` is empty.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass.

    Values other than 0 and 1 are grouped at the end with the 2s.
    """
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of sorted ``nums2`` into the first ``m`` of sorted ``nums1`` in place.

    ``nums1`` must have room for ``m + n`` elements.
    """
    nums1[: m + n] = merge(nums1[:m], nums2[:n])


def single_number(nums: Sequence[int]) -> int:
    """Return the value that occurs once when every other value occurs twice."""
    return reduce(xor, nums, 0)


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = nums[len(nums) - k:] + nums[: len(nums) - k]


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return whether any value occurs more than once."""
    return len(set(nums)) < len(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end of ``nums`` in place, keeping the other values in order."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in a list of ``n + 1`` values drawn from ``1..n``."""
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def reverse_in_place(s: list[str]) -> None:
    """Reverse the list ``s`` in place."""
    s.reverse()


def intersection(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Return the distinct values found in both sequences.

    They come in the order they first appear in the longer sequence, or in ``nums2``
    when both have the same length.
    """
    shorter, longer = (nums2, nums1) if len(nums1) > len(nums2) else (nums1, nums2)
    pending = set(shorter)
    result: list[int] = []
    for value in longer:
        if value in pending:
            pending.discard(value)
            result.append(value)
    return result


def third_max(nums: Sequence[int]) -> int:
    """Return the third largest distinct value, or the largest if there are fewer than three.

    Raises ValueError if ``nums`` is empty.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    distinct = sorted(set(nums), reverse=True)
    return distinct[2] if len(distinct) >= 3 else distinct[0]


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return, in ascending order, the values of ``1..len(nums)`` missing from ``nums``."""
    present = set(nums)
    return [value for value in range(1, len(nums) + 1) if value not in present]


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    best = current = 0
    for value in nums:
        current = current + 1 if value == 1 else 0
        best = max(best, current)
    return best


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Return whether ``n`` flowers fit into the empty plots without touching any other flower."""
    if n == 0:
        return True
    bed = list(flowerbed)
    last = len(bed) - 1
    remaining = n
    for index, plot in enumerate(bed):
        if plot != 0:
            continue
        left_free = index == 0 or bed[index - 1] == 0
        right_free = index == last or bed[index + 1] == 0
        if left_free and right_free:
            bed[index] = 1
            remaining -= 1
            if remaining == 0:
                return True
    return False


def merge_sort(nums: Sequence[int]) -> list[int]:
    """Return a new ascending list of ``nums`` built by merge sort."""
    if len(nums) <= 1:
        return list(nums)
    middle = (len(nums) + 1) // 2
    left = merge_sort(nums[:middle])
    right = merge_sort(nums[middle:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Return whether ``nums`` is a rotation of a non-decreasing sequence."""
    following = list(nums[1:]) + list(nums[:1])
    descents = sum(1 for current, nxt in zip(nums, following) if current > nxt)
    return descents <= 1


def divide_array(nums: Sequence[int]) -> bool:
    """Return whether ``nums`` splits into pairs of equal values."""
    return all(count % 2 == 0 for count in Counter(nums).values())


def longest_nice_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest run whose values share no set bits pairwise.

    The answer is never less than 1.
    """
    best = 1
    used_bits = 0
    left = 0
    for right, value in enumerate(nums):
        while used_bits & value:
            used_bits ^= nums[left]
            left += 1
        used_bits |= value
        best = max(best, right - left + 1)
    return best


def min_operations(nums: Sequence[int]) -> int:
    """Return the fewest flips of three adjacent bits that turn every bit to 1, or -1."""
    bits = list(nums)
    n = len(bits)
    flips = 0
    for index in range(n):
        if bits[index] % 2 == 0:
            if index > n - 3:
                return -1
            for offset in range(index, index + 3):
                bits[offset] = 1 - bits[offset] % 2
            flips += 1
    return flips