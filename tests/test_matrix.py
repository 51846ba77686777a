import pytest

from algolab.matrix import DimensionError, Matrix, add, main, multiply, subtract


@pytest.fixture
def a():
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def b():
    return Matrix.from_rows([[10, 11, 12], [1, 2, 3]])


@pytest.fixture
def c():
    return Matrix.from_rows([[7, 8], [9, 10], [11, 12]])


def test_new_matrix_is_zero():
    m = Matrix(2, 3)
    assert m.data == [[0.0] * 3, [0.0] * 3]
    assert m.shape == (2, 3)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])


def test_add_then_subtract_round_trip(a, b):
    assert (a + b) - b == a
    assert add(a, b) == a + b


def test_subtract_self_is_zero(a):
    assert subtract(a, a) == Matrix(2, 3)


def test_add_commutes(a, b):
    assert a + b == b + a


def test_multiply_shape(a, c):
    product = a @ c
    assert product.shape == (2, 2)
    assert multiply(a, c) == product


def test_multiply_by_identity(a):
    identity = Matrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    assert a @ identity == a


def test_multiply_distributes_over_addition(a, c):
    assert a @ (c + c) == (a @ c) + (a @ c)


def test_add_dimension_mismatch(a, c):
    with pytest.raises(DimensionError, match="same dimensions for addition"):
        add(a, c)


def test_subtract_dimension_mismatch(a, c):
    with pytest.raises(DimensionError) as excinfo:
        subtract(a, c)
    assert "same dimensions for subtraction" in str(excinfo.value)


def test_multiply_dimension_mismatch(a, b):
    with pytest.raises(DimensionError) as excinfo:
        multiply(a, b)
    assert "Incompatible dimensions" in str(excinfo.value)


def test_format_pads_to_eight_columns():
    assert Matrix.from_rows([[1, 2]]).format() == "       1        2 \n\n"


def test_format_line_count(a):
    lines = a.format().split("\n")
    assert len(lines) == a.rows + 2
    assert all(len(line) == 9 * a.cols for line in lines[: a.rows])


def test_main_reports_invalid_multiplication(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "--- Multiplication (A * C) ---" in captured.out
    assert "Error: Incompatible dimensions for multiplication." in captured.err