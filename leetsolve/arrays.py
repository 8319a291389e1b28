"""Problems over integer sequences, matrices, points and edge lists."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from itertools import accumulate, pairwise


def count_pairs(nums: Sequence[int], target: int) -> int:
    """Count index pairs ``i < j`` with ``nums[i] + nums[j] < target``."""
    ordered = sorted(nums)
    left, right = 0, len(ordered) - 1
    count = 0
    while left < right:
        if ordered[left] + ordered[right] < target:
            count += right - left
            left += 1
        else:
            right -= 1
    return count


def decode(encoded: Sequence[int], first: int) -> list[int]:
    """Recover the original array from its pairwise XOR encoding and first element."""
    return list(accumulate(encoded, lambda previous, value: previous ^ value, initial=first))


def get_final_state(nums: Sequence[int], k: int, multiplier: int) -> list[int]:
    """Multiply the first smallest element by ``multiplier``, ``k`` times over."""
    state = list(nums)
    for _ in range(k):
        index = min(range(len(state)), key=state.__getitem__)
        state[index] *= multiplier
    return state


def find_center(edges: Sequence[Sequence[int]]) -> int:
    """Return the centre node of a star graph given by its edge list."""
    a, b = edges[0][0], edges[0][1]
    return a if a in (edges[1][0], edges[1][1]) else b


def find_the_prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each prefix length, count the numbers present in both prefixes."""
    result = []
    seen_a = seen_b = 0
    for x, y in zip(a, b):
        seen_a |= 1 << x
        seen_b |= 1 << y
        result.append((seen_a & seen_b).bit_count())
    return result


def largest_local(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the maximum of every 3x3 window of a square grid."""
    size = len(grid) - 2
    return [
        [
            max(0, *(value for row in grid[i : i + 3] for value in row[j : j + 3]))
            for j in range(size)
        ]
        for i in range(size)
    ]


def left_right_difference(nums: Sequence[int]) -> list[int]:
    """Absolute difference between the sums to the left and right of each element."""
    remaining = sum(nums)
    left = 0
    result = []
    for value in nums:
        remaining -= value
        result.append(abs(left - remaining))
        left += value
    return result


def max_matrix_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Largest sum reachable by negating adjacent pairs any number of times."""
    values = [value for row in matrix for value in row]
    total = sum(abs(value) for value in values)
    negatives = sum(1 for value in values if value < 0)
    if negatives % 2:
        total -= 2 * min(abs(value) for value in values)
    return total


def min_moves_to_seat(seats: Sequence[int], students: Sequence[int]) -> int:
    """Minimum total moves to seat every student, one per seat."""
    if len(seats) < len(students):
        raise ValueError("there are fewer seats than students")
    return sum(
        abs(student - seat) for student, seat in zip(sorted(students), sorted(seats))
    )


def count_points(
    points: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[int]:
    """For each circle ``(x, y, r)``, count the points on or inside it."""
    coords = [(p[0], p[1]) for p in points]
    result = []
    for cx, cy, radius in ((q[0], q[1], q[2]) for q in queries):
        limit = radius * radius
        result.append(
            sum(1 for px, py in coords if (cx - px) ** 2 + (cy - py) ** 2 <= limit)
        )
    return result


def smaller_numbers_than_current(nums: Sequence[int]) -> list[int]:
    """For each element, count the elements strictly smaller than it."""
    return [sum(1 for other in nums if other < value) for value in nums]


def smaller_numbers_than_current_sorted(nums: Sequence[int]) -> list[int]:
    """Same result as :func:`smaller_numbers_than_current`, computed by sorting."""
    ordered = sorted(nums)
    return [bisect_left(ordered, value) for value in nums]


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Sum of the XOR totals of every subset of ``nums``."""
    totals = [0]
    for value in nums:
        totals += [total ^ value for total in totals]
    return sum(totals)


def _residue(value: int) -> int:
    """Remainder of division by two, taking the sign of the dividend."""
    return value % 2 if value >= 0 else -((-value) % 2)


def transform_array(nums: Sequence[int]) -> list[int]:
    """Replace values by their parity, evens first and odds filled from the end."""
    residues = [_residue(value) for value in nums]
    evens = [r for r in residues if r == 0]
    odds = [r for r in residues if r != 0]
    return evens + odds[::-1]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the first pair of numbers adding up to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def max_width_of_vertical_area(points: Sequence[Sequence[int]]) -> int:
    """Widest gap between consecutive x coordinates of the points."""
    xs = sorted(point[0] for point in points)
    return max((b - a for a, b in pairwise(xs)), default=0)