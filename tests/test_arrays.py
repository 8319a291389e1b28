import pytest

from leetsolve.arrays import (
    count_pairs,
    count_points,
    decode,
    find_center,
    find_the_prefix_common_array,
    get_final_state,
    largest_local,
    left_right_difference,
    max_matrix_sum,
    max_width_of_vertical_area,
    min_moves_to_seat,
    smaller_numbers_than_current,
    smaller_numbers_than_current_sorted,
    subset_xor_sum,
    transform_array,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target, expected",
    [
        ([-1, 1, 2, 3, 1], 2, 3),
        ([-6, 2, 5, -2, -7, -1, 3], -2, 10),
        ([], 5, 0),
    ],
)
def test_count_pairs(nums, target, expected):
    assert count_pairs(nums, target) == expected


def test_count_pairs_leaves_input_unsorted():
    nums = [3, 1, 2]
    assert count_pairs(nums, 10) == 3
    assert nums == [3, 1, 2]


@pytest.mark.parametrize(
    "encoded, first, expected",
    [
        ([1, 2, 3], 1, [1, 0, 2, 1]),
        ([6, 2, 7, 3], 4, [4, 2, 0, 7, 4]),
        ([], 9, [9]),
    ],
)
def test_decode(encoded, first, expected):
    assert decode(encoded, first) == expected


@pytest.mark.parametrize(
    "nums, k, multiplier, expected",
    [
        ([2, 1, 3, 5, 6], 5, 2, [8, 4, 6, 5, 6]),
        ([1, 2], 3, 4, [16, 8]),
    ],
)
def test_get_final_state(nums, k, multiplier, expected):
    assert get_final_state(nums, k, multiplier) == expected


def test_get_final_state_does_not_mutate_input():
    nums = [1, 2]
    assert get_final_state(nums, 1, 3) == [3, 2]
    assert nums == [1, 2]


@pytest.mark.parametrize(
    "edges, expected",
    [
        ([[1, 2], [2, 3], [4, 2]], 2),
        ([[1, 2], [5, 1], [1, 3], [1, 4]], 1),
    ],
)
def test_find_center(edges, expected):
    assert find_center(edges) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ([1, 3, 2, 4], [3, 1, 2, 4], [0, 2, 3, 4]),
        ([2, 3, 1], [3, 1, 2], [0, 1, 3]),
    ],
)
def test_find_the_prefix_common_array(a, b, expected):
    assert find_the_prefix_common_array(a, b) == expected


def test_largest_local():
    grid = [[9, 9, 8, 1], [5, 6, 2, 6], [8, 2, 6, 4], [6, 2, 2, 2]]
    assert largest_local(grid) == [[9, 9], [8, 6]]


def test_largest_local_three_by_three_is_single_cell():
    assert largest_local([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [[9]]


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([10, 4, 8, 3], [15, 1, 11, 22]),
        ([1], [0]),
    ],
)
def test_left_right_difference(nums, expected):
    assert left_right_difference(nums) == expected


@pytest.mark.parametrize(
    "matrix, expected",
    [
        ([[1, -1], [-1, 1]], 4),
        ([[1, 2, 3], [-1, -2, -3], [1, 2, 3]], 16),
        ([], 0),
    ],
)
def test_max_matrix_sum(matrix, expected):
    assert max_matrix_sum(matrix) == expected


@pytest.mark.parametrize(
    "seats, students, expected",
    [
        ([3, 1, 5], [2, 7, 4], 4),
        ([4, 1, 5, 9], [1, 3, 2, 6], 7),
        ([2, 2, 6, 6], [1, 3, 2, 6], 4),
    ],
)
def test_min_moves_to_seat(seats, students, expected):
    assert min_moves_to_seat(seats, students) == expected


def test_min_moves_to_seat_too_few_seats():
    with pytest.raises(ValueError):
        min_moves_to_seat([1], [1, 2])


@pytest.mark.parametrize(
    "points, queries, expected",
    [
        (
            [[1, 3], [3, 3], [5, 3], [2, 2]],
            [[2, 3, 1], [4, 3, 1], [1, 1, 2]],
            [3, 2, 2],
        ),
        (
            [[1, 1], [2, 2], [3, 3], [4, 4], [5, 5]],
            [[1, 2, 2], [2, 2, 2], [4, 3, 2], [4, 3, 3]],
            [2, 3, 2, 4],
        ),
    ],
)
def test_count_points(points, queries, expected):
    assert count_points(points, queries) == expected


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([8, 1, 2, 2, 3], [4, 0, 1, 1, 3]),
        ([6, 5, 4, 8], [2, 1, 0, 3]),
    ],
)
def test_smaller_numbers_than_current(nums, expected):
    assert smaller_numbers_than_current(nums) == expected
    assert smaller_numbers_than_current_sorted(nums) == expected


def test_smaller_numbers_variants_agree():
    nums = [7, 7, 7, 1, -3, 7, 0, 1]
    assert smaller_numbers_than_current_sorted(nums) == smaller_numbers_than_current(nums)


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 3], 6),
        ([5, 1, 6], 28),
        ([3, 4, 5, 6, 7, 8], 480),
        ([], 0),
    ],
)
def test_subset_xor_sum(nums, expected):
    assert subset_xor_sum(nums) == expected


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([4, 3, 2, 1], [0, 0, 1, 1]),
        ([1, 5, 1, 4, 2], [0, 0, 1, 1, 1]),
        ([], []),
        ([-3, 2], [0, -1]),
    ],
)
def test_transform_array(nums, expected):
    assert transform_array(nums) == expected


@pytest.mark.parametrize(
    "nums, target, expected",
    [
        ([2, 7, 11, 15], 9, [0, 1]),
        ([3, 2, 4], 6, [1, 2]),
        ([3, 3], 6, [0, 1]),
        ([3, 2, 3], 6, [0, 2]),
        ([1, 2], 10, []),
    ],
)
def test_two_sum(nums, target, expected):
    assert two_sum(nums, target) == expected


@pytest.mark.parametrize(
    "points, expected",
    [
        ([[8, 7], [9, 9], [7, 4]], 1),
        ([[3, 1], [9, 0], [1, 0], [1, 4], [5, 3], [8, 8]], 3),
        ([[4, 4]], 0),
    ],
)
def test_max_width_of_vertical_area(points, expected):
    assert max_width_of_vertical_area(points) == expected