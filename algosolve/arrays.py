"""Classic problems over lists of integers."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import groupby
from operator import xor

_MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct ascending triples of ``nums`` that add up to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                result.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """All distinct ascending quadruples of ``nums`` that add up to ``target``."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            left, right = j + 1, n - 1
            while left < right:
                total = values[i] + values[j] + values[left] + values[right]
                if total == target:
                    result.append([values[i], values[j], values[left], values[right]])
                    while left < right and values[left] == values[left + 1]:
                        left += 1
                    while left < right and values[right] == values[right - 1]:
                        right -= 1
                    left += 1
                    right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return result


def subarray_bitwise_ors(arr: Sequence[int]) -> int:
    """Number of distinct bitwise ORs over all contiguous subarrays."""
    result: set[int] = set()
    previous: set[int] = set()
    for num in arr:
        previous = {num} | {value | num for value in previous}
        result |= previous
    return len(result)


def smallest_range_i(nums: Sequence[int], k: int) -> int:
    """Smallest max-min spread after moving each value by at most ``k``."""
    return max(0, (max(nums) - k) - (min(nums) + k))


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of two entries adding up to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return [seen[complement], index]
        seen[num] = index
    return []


def array_pair_sum(nums: Sequence[int]) -> int:
    """Largest sum of pair minimums when ``nums`` is split into pairs."""
    return sum(sorted(nums)[::2])


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Most children that can be content, each cookie going to one child."""
    children = sorted(greed)
    content = 0
    for size in sorted(sizes):
        if content == len(children):
            break
        if size >= children[content]:
            content += 1
    return content


def _search(nums: Sequence[int], target: int) -> tuple[bool, int]:
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return True, mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return False, left


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or -1 when absent."""
    found, index = _search(nums, target)
    return index if found else -1


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Whether two equal values sit at most ``k`` positions apart."""
    last_index: dict[int, int] = {}
    for index, num in enumerate(nums):
        if num in last_index and index - last_index[num] <= k:
            return True
        last_index[num] = index
    return False


def distribute_candies(candy_types: Sequence[int]) -> int:
    """Most candy types one can eat when eating half the candies."""
    return min(len(set(candy_types)), len(candy_types) // 2)


def find_length_of_lcis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing contiguous run."""
    if not nums:
        return 0
    longest = current = 1
    for previous, num in zip(nums, nums[1:]):
        current = current + 1 if num > previous else 1
        longest = max(longest, current)
    return longest


def find_lhs(nums: Sequence[int]) -> int:
    """Length of the longest subsequence whose max and min differ by exactly one."""
    freq = Counter(nums)
    return max(
        (count + freq[num + 1] for num, count in freq.items() if num + 1 in freq),
        default=0,
    )


def majority_element(nums: Sequence[int]) -> int:
    """The majority candidate found by the Boyer-Moore vote."""
    if not nums:
        raise ValueError("majority_element() needs a non-empty sequence")
    candidate = nums[0]
    count = 1
    for num in nums[1:]:
        if count == 0:
            candidate, count = num, 1
        elif num == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of ones."""
    return max(
        (len(list(run)) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Largest mean of any contiguous window of length ``k``."""
    if not 0 < k <= len(nums):
        raise ValueError("window length must be between 1 and len(nums)")
    window = sum(nums[:k])
    best = window
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window)
    return best / k


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place."""
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    non_zero = [num for num in nums if num != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the next larger value after it in ``nums2``.

    Values with no larger successor give -1; values absent from ``nums2`` give 0.
    """
    next_greater: dict[int, int] = {}
    stack: list[int] = []
    for num in nums2:
        while stack and stack[-1] < num:
            next_greater[stack.pop()] = num
        stack.append(num)
    for num in stack:
        next_greater[num] = -1
    return [next_greater.get(num, 0) for num in nums1]


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as decimal digits, most significant first."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]


def pascal_row(row_index: int) -> list[int]:
    """Row ``row_index`` of Pascal's triangle, counting from zero."""
    row = [1]
    for _ in range(row_index):
        row = [a + b for a, b in zip([0, *row], [*row, 0])]
    return row


def max_count(m: int, n: int, ops: Sequence[Sequence[int]]) -> int:
    """Count of cells holding the maximum after every increment operation."""
    rows = min((op[0] for op in ops), default=m)
    cols = min((op[1] for op in ops), default=n)
    return min(rows, m) * min(cols, n)


def find_relative_ranks(scores: Sequence[int]) -> list[str]:
    """Rank labels for each score: medals for the top three, then places."""
    result = [""] * len(scores)
    order = sorted(range(len(scores)), key=lambda i: scores[i], reverse=True)
    for place, index in enumerate(order):
        result[index] = _MEDALS[place] if place < len(_MEDALS) else str(place + 1)
    return result


def remove_duplicates(nums: list[int]) -> int:
    """Compact the distinct values of sorted ``nums`` to its front; return their count."""
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return _search(nums, target)[1]


def find_error_nums(nums: Sequence[int]) -> list[int]:
    """The duplicated and the missing value of a 1..n set with one error."""
    count = Counter(nums)
    duplicate = missing = 0
    for value in range(1, len(nums) + 1):
        if count[value] == 2:
            duplicate = value
        elif count[value] == 0:
            missing = value
    return [duplicate, missing]


def single_number(nums: Sequence[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Compress a sorted list of distinct integers into range strings."""
    result: list[str] = []
    for _, run in groupby(enumerate(nums), key=lambda pair: pair[1] - pair[0]):
        values = [value for _, value in run]
        start, end = values[0], values[-1]
        result.append(str(start) if start == end else f"{start}->{end}")
    return result