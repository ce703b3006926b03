import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.matrix import (
    boundary_elements,
    filled,
    flatten,
    median,
    rotate_anticlockwise,
    rotate_clockwise,
    search_sorted,
    snake_order,
    spiral_order,
    transpose,
)

rectangles = st.integers(1, 5).flatmap(
    lambda cols: st.lists(
        st.lists(st.integers(-50, 50), min_size=cols, max_size=cols),
        min_size=1,
        max_size=5,
    )
)

SORTED = [
    [10, 20, 30, 40],
    [15, 25, 35, 45],
    [27, 29, 37, 48],
    [32, 33, 39, 50],
]


def test_filled_shape_and_independent_rows():
    grid = filled(3, 2, 10)
    assert grid == [[10, 10], [10, 10], [10, 10]]
    grid[0][0] = 99
    assert grid[1][0] == 10


def test_filled_rejects_negative():
    with pytest.raises(ValueError):
        filled(-1, 2, 0)


def test_flatten_jagged():
    assert flatten([[1, 2, 3], [4], []]) == [1, 2, 3, 4]


@given(rectangles)
def test_transpose_twice_is_identity(matrix):
    assert transpose(transpose(matrix)) == matrix


@given(rectangles)
def test_transpose_swaps_indices(matrix):
    result = transpose(matrix)
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            assert result[j][i] == value


def test_transpose_rejects_jagged():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


@given(rectangles)
def test_four_clockwise_turns_restore(matrix):
    result = matrix
    for _ in range(4):
        result = rotate_clockwise(result)
    assert result == matrix


@given(rectangles)
def test_clockwise_then_anticlockwise_restores(matrix):
    assert rotate_anticlockwise(rotate_clockwise(matrix)) == matrix


def test_rotate_clockwise_first_row_is_first_column_reversed():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert rotate_clockwise(matrix)[0] == [7, 4, 1]


def test_rotate_anticlockwise_last_column_becomes_first_row():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    result = rotate_anticlockwise(matrix)
    assert result[0] == [row[-1] for row in matrix]
    assert result[-1] == [row[0] for row in matrix]


def test_snake_order_alternates_direction():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    result = snake_order(matrix)
    assert result[0:3] == matrix[0]
    assert result[3:6] == matrix[1][::-1]
    assert result[6:9] == matrix[2]


def test_boundary_single_row_and_column():
    assert boundary_elements([[1, 2, 3]]) == [1, 2, 3]
    assert boundary_elements([[1], [2], [3]]) == [1, 2, 3]


def test_boundary_of_grid_skips_interior():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    result = boundary_elements(matrix)
    assert 6 not in result and 7 not in result
    assert result[:4] == matrix[0]
    assert len(result) == 2 * (3 + 4) - 4


@given(rectangles)
def test_spiral_is_a_permutation(matrix):
    result = spiral_order(matrix)
    assert sorted(result) == sorted(flatten(matrix))


def test_spiral_order_three_by_three():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert spiral_order(matrix) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_single_column():
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]


@pytest.mark.parametrize("value", flatten(SORTED))
def test_search_sorted_finds_every_element(value):
    row, col = search_sorted(SORTED, value)
    assert SORTED[row][col] == value


@pytest.mark.parametrize("value", [5, 26, 51])
def test_search_sorted_missing(value):
    assert search_sorted(SORTED, value) is None


odd_sorted_rows = st.tuples(
    st.integers(0, 2).map(lambda n: 2 * n + 1),
    st.integers(0, 2).map(lambda n: 2 * n + 1),
).flatmap(
    lambda shape: st.lists(
        st.lists(st.integers(-100, 100), min_size=shape[1], max_size=shape[1]).map(sorted),
        min_size=shape[0],
        max_size=shape[0],
    )
)


@given(odd_sorted_rows)
def test_median_matches_sorted_middle(matrix):
    values = sorted(flatten(matrix))
    assert median(matrix) == values[len(values) // 2]


def test_median_empty_raises():
    with pytest.raises(ValueError):
        median([])