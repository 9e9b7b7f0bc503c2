import pytest

from labstructs.sparse import SparseEntry, SparseMatrix

DENSE = [[0, 3, 0], [4, 0, 0], [0, 0, 5]]


def test_from_dense_keeps_non_zero_entries_in_row_major_order():
    matrix = SparseMatrix.from_dense(DENSE)
    assert matrix.shape == (3, 3)
    assert [(e.row, e.col, e.value) for e in matrix.entries] == [
        (0, 1, 3),
        (1, 0, 4),
        (2, 2, 5),
    ]


def test_dense_round_trip():
    assert SparseMatrix.from_dense(DENSE).to_dense() == DENSE


def test_ragged_input_rejected():
    with pytest.raises(ValueError):
        SparseMatrix.from_dense([[1, 2], [3]])


def test_out_of_bounds_entry_rejected():
    with pytest.raises(IndexError):
        SparseMatrix(2, 2, (SparseEntry(2, 0, 1),))


def test_constructor_sorts_entries():
    matrix = SparseMatrix(2, 2, (SparseEntry(1, 1, 7), SparseEntry(0, 1, 2)))
    assert matrix == SparseMatrix.from_dense([[0, 2], [0, 7]])


def test_addition_matches_dense_sum():
    a = SparseMatrix.from_dense(DENSE)
    b = SparseMatrix.from_dense([[1, 0, 0], [0, 0, 2], [0, 0, 1]])
    total = (a + b).to_dense()
    assert total[0][0] == 1
    assert total[0][1] == 3
    assert total[2][2] == 6


def test_addition_is_commutative():
    a = SparseMatrix.from_dense(DENSE)
    b = SparseMatrix.from_dense([[1, 1, 0], [0, 0, 2], [9, 0, 1]])
    assert a + b == b + a


def test_adding_zero_matrix_is_identity():
    a = SparseMatrix.from_dense(DENSE)
    zero = SparseMatrix(3, 3)
    assert a.add(zero) == a


def test_cancelling_values_keep_stored_zeros():
    a = SparseMatrix.from_dense(DENSE)
    negated = SparseMatrix.from_dense([[-v for v in row] for row in DENSE])
    total = a + negated
    assert len(total.entries) == len(a.entries)
    assert all(entry.value == 0 for entry in total.entries)


def test_addition_shape_mismatch():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2) + SparseMatrix(2, 3)


def test_multiply_by_identity():
    a = SparseMatrix.from_dense(DENSE)
    identity = SparseMatrix.from_dense([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    assert a @ identity == a
    assert identity.multiply(a) == a


def test_multiply_worked_example():
    a = SparseMatrix.from_dense([[1, 2], [3, 4]])
    b = SparseMatrix.from_dense([[5, 6], [7, 8]])
    assert (a @ b).to_dense() == [[19, 22], [43, 50]]


def test_multiply_result_has_no_zero_entries():
    a = SparseMatrix.from_dense([[1, -1]])
    b = SparseMatrix.from_dense([[1], [1]])
    product = a @ b
    assert product.shape == (1, 1)
    assert product.entries == ()


def test_multiply_shape_mismatch():
    with pytest.raises(ValueError):
        SparseMatrix(2, 3).multiply(SparseMatrix(2, 3))


def test_render_has_header_and_rows():
    lines = SparseMatrix.from_dense(DENSE).render().splitlines()
    assert lines[0] == "Sparse Matrix Representation:"
    assert lines[1] == "Row\tCol\tValue"
    assert len(lines) == 3 + 3


def test_operators_reject_other_types():
    with pytest.raises(TypeError):
        SparseMatrix(1, 1) + 1