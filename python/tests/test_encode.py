import numpy as np
import pytest

from tripla import AllocationFailure, InvalidDimension, InvalidMatrix, Triplet, encode
from tripla.creation import random_matrix


def make_matrices():
    rs = np.random.RandomState(7)
    out = []
    for shape in [(1, 1), (1, 5), (5, 1), (4, 6), (7, 3)]:
        m = rs.randint(-3, 4, size=shape).astype(np.float64)
        m[rs.random_sample(shape) < 0.5] = 0.0
        out.append(m)
    return out


def test_encode_simple_scenario():
    t = encode([[0, 5], [3, 0]], 2, 2)
    assert t == [(0, 1, 5), (1, 0, 3)]
    assert t[0] == Triplet(row=0, col=1, value=5)
    assert t.shape == (2, 2)


def test_encode_all_zero_is_empty():
    t = encode(np.zeros((3, 3)), 3, 3)
    assert len(t) == 0
    assert t == []
    assert t.shape == (3, 3)


@pytest.mark.parametrize(
    "matrix,rows,cols",
    [
        ([], 0, 0),
        ([], 0, 3),
        (np.zeros((0, 0)), None, None),
        (np.zeros((4, 0)), 4, 0),
    ],
)
def test_encode_empty_dimensions(matrix, rows, cols):
    t = encode(matrix, rows, cols)
    assert t.nnz == 0
    assert list(t) == []


@pytest.mark.parametrize("matrix", make_matrices())
def test_encode_count_matches_nonzero(matrix):
    t = encode(matrix, *matrix.shape)
    assert len(t) == np.count_nonzero(matrix)


@pytest.mark.parametrize("matrix", make_matrices())
def test_encode_entries_index_their_cells(matrix):
    for r, c, v in encode(matrix):
        assert v != 0
        assert matrix[r, c] == v


@pytest.mark.parametrize("matrix", make_matrices())
def test_encode_is_row_major(matrix):
    t = encode(matrix)
    assert t.is_row_major()
    keys = list(zip(t.row.tolist(), t.col.tolist()))
    assert keys == sorted(keys)


@pytest.mark.parametrize("matrix", make_matrices())
def test_encode_toarray_reproduces_matrix(matrix):
    np.testing.assert_array_equal(encode(matrix).toarray(), matrix)


def test_encode_fortran_order_still_row_major():
    m = np.asfortranarray([[0, 1, 2], [3, 0, 4]])
    t = encode(m)
    assert t == [(0, 1, 1), (0, 2, 2), (1, 0, 3), (1, 2, 4)]


def test_encode_does_not_modify_input():
    m = np.array([[0.0, 1.5], [-2.0, 0.0]])
    before = m.copy()
    t = encode(m)
    np.testing.assert_array_equal(m, before)
    # result is independent of the source
    m[0, 1] = 9.0
    assert t[0].value == 1.5


def test_encode_exact_zero_comparison():
    t = encode([[1e-300, 0.0, -0.0]])
    assert t == [(0, 0, 1e-300)]


def test_encode_keeps_nan():
    t = encode([[0.0, np.nan]])
    assert len(t) == 1
    assert np.isnan(t[0].value)


def test_encode_preserves_dtype():
    assert encode(np.array([[0, 2]], dtype=np.int32)).data.dtype == np.int32
    assert encode([[0.0, 2.5]]).data.dtype == np.float64


@pytest.mark.parametrize("rows,cols", [(-1, 2), (2, -1), (-1, -1)])
def test_encode_negative_dimensions(rows, cols):
    with pytest.raises(InvalidDimension):
        encode([[1, 2], [3, 4]], rows, cols)


@pytest.mark.parametrize("rows,cols", [(3, 2), (2, 3), (1, 2)])
def test_encode_declared_shape_mismatch(rows, cols):
    with pytest.raises(InvalidDimension):
        encode([[1, 2], [3, 4]], rows, cols)


def test_encode_ragged_matrix():
    with pytest.raises(InvalidDimension):
        encode([[1, 2], [3]], 2, 2)


def test_encode_requires_2d():
    with pytest.raises(InvalidDimension):
        encode([1, 2, 3])
    with pytest.raises(InvalidDimension):
        encode(np.zeros((2, 2, 2)))


def test_encode_rejects_non_numeric():
    with pytest.raises(InvalidMatrix):
        encode([["a", "b"]])


def test_invalid_dimension_is_value_error():
    with pytest.raises(ValueError):
        encode([[1]], -1, 1)


def test_random_matrix_shape_and_range():
    m = random_matrix(20, 30, rng=0)
    assert m.shape == (20, 30)
    nz = m[m != 0]
    assert nz.min() >= 1 and nz.max() <= 100


def test_random_matrix_seeded_is_reproducible():
    np.testing.assert_array_equal(random_matrix(5, 5, rng=42), random_matrix(5, 5, rng=42))


def test_random_matrix_zero_fraction_extremes():
    assert np.count_nonzero(random_matrix(4, 4, zero_fraction=1.0, rng=1)) == 0
    assert np.count_nonzero(random_matrix(4, 4, zero_fraction=0.0, rng=1)) == 16


def test_random_matrix_accepts_generator():
    rng = np.random.default_rng(3)
    m = random_matrix(3, 3, rng=rng)
    assert m.dtype == np.int64


def test_random_matrix_leaves_global_state_alone():
    np.random.seed(123)
    expected = np.random.random_sample()
    np.random.seed(123)
    random_matrix(10, 10)
    assert np.random.random_sample() == expected


@pytest.mark.parametrize(
    "kwargs", [{"zero_fraction": -0.1}, {"zero_fraction": 1.5}, {"low": 5, "high": 1}]
)
def test_random_matrix_bad_parameters(kwargs):
    with pytest.raises(ValueError):
        random_matrix(2, 2, **kwargs)


def test_random_matrix_bad_dimensions():
    with pytest.raises(InvalidDimension):
        random_matrix(-1, 2)
    with pytest.raises(InvalidDimension):
        random_matrix(2.5, 2)


def test_encode_object_array_of_numbers():
    m = np.array([[0, 5], [3, 0]], dtype=object)
    t = encode(m, 2, 2)
    assert t == [(0, 1, 5), (1, 0, 3)]
    assert t.data.dtype.kind == "i"
    assert m.dtype == object


def test_encode_object_array_with_non_numbers():
    with pytest.raises(InvalidMatrix):
        encode(np.array([[0, "x"], [None, 1]], dtype=object))


def test_encode_allocation_failure(monkeypatch):
    def exhausted(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(np, "nonzero", exhausted)
    with pytest.raises(AllocationFailure):
        encode([[1, 0], [0, 2]])
