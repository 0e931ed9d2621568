"""Binary-search based algorithms over sorted and unsorted integer sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from heapq import merge
from itertools import accumulate
from math import isqrt


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences.

    Raises ValueError if both sequences are empty.
    """
    merged = list(merge(nums1, nums2))
    if not merged:
        raise ValueError("at least one number is required")
    middle, odd = divmod(len(merged), 2)
    if odd:
        return float(merged[middle])
    return (merged[middle - 1] + merged[middle]) / 2


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or ``(-1, -1)``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return (-1, -1)
    return (first, bisect_right(nums, target) - 1)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums)
    while low < high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid
    return low


def maximum_candies(candies: Sequence[int], k: int) -> int:
    """Return the largest pile size that lets ``k`` children each receive one equal pile.

    Raises ValueError if ``candies`` is empty.
    """
    if not candies:
        raise ValueError("candies must not be empty")
    low, high = 1, max(candies)
    result = 0
    while low <= high:
        mid = (low + high) // 2
        if sum(pile // mid for pile in candies) >= k:
            result = mid
            low = mid + 1
        else:
            high = mid - 1
    return result


def max_frequency(nums: Sequence[int], k: int) -> int:
    """Return the highest frequency any value can reach after at most ``k`` single increments."""
    ordered = sorted(nums)
    n = len(ordered)
    prefix = [0, *accumulate(ordered)]

    def window_fits(size: int) -> bool:
        return any(
            ordered[right] * size - (prefix[right + 1] - prefix[right + 1 - size]) <= k
            for right in range(size - 1, n)
        )

    low, high, result = 1, n, 1
    while low <= high:
        mid = (low + high) // 2
        if window_fits(mid):
            result = mid
            low = mid + 1
        else:
            high = mid - 1
    return result


def maximum_count(nums: Sequence[int]) -> int:
    """Return the larger of the number of positive and the number of negative values."""
    positives = sum(1 for value in nums if value > 0)
    negatives = sum(1 for value in nums if value < 0)
    return max(positives, negatives)


def repair_cars(ranks: Sequence[int], cars: int) -> int:
    """Return the least time in which mechanics of the given ranks can repair ``cars`` cars.

    A mechanic of rank ``r`` repairs ``m`` cars in ``r * m * m`` minutes.
    Raises ValueError if ``ranks`` is empty.
    """
    if not ranks:
        raise ValueError("ranks must not be empty")

    def can_finish(minutes: int) -> bool:
        repaired = 0
        for rank in ranks:
            repaired += isqrt(minutes // rank)
            if repaired >= cars:
                return True
        return False

    low, high = 1, min(ranks) * cars * cars
    answer = high
    while low <= high:
        mid = low + (high - low) // 2
        if can_finish(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _zeroed_after(nums: Sequence[int], queries: Sequence[Sequence[int]], k: int) -> bool:
    diff = [0] * (len(nums) + 1)
    for left, right, amount in queries[:k]:
        diff[left] += amount
        diff[right + 1] -= amount
    return all(value <= covered for value, covered in zip(nums, accumulate(diff)))


def min_zero_array(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> int:
    """Return the fewest leading queries ``[l, r, val]`` that can bring ``nums`` to all zeros, or -1."""
    if all(value == 0 for value in nums):
        return 0
    low, high, answer = 1, len(queries), -1
    while low <= high:
        mid = low + (high - low) // 2
        if _zeroed_after(nums, queries, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer