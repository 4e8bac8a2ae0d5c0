import pytest

from algonotes.determinant import det, determinant


@pytest.mark.parametrize("func", [det, determinant])
def test_two_by_two(func):
    assert func([[1.0, 0.0], [-1.0, 2.0]]) == pytest.approx(2.0, rel=1e-15)


@pytest.mark.parametrize("func", [det, determinant])
def test_diagonal_three_by_three(func):
    m = [[1.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, 3.0]]
    assert func(m) == pytest.approx(6.0, rel=1e-15)


@pytest.mark.parametrize("func", [det, determinant])
def test_general_three_by_three(func):
    m = [[2.0, -3.0, 1.0], [2.0, 0.0, -1.0], [1.0, 4.0, 5.0]]
    assert func(m) == pytest.approx(49.0, rel=1e-12)


@pytest.mark.parametrize("func", [det, determinant])
def test_row_swap_changes_sign(func):
    assert func([[0.0, 1.0], [1.0, 0.0]]) == pytest.approx(-1.0)


@pytest.mark.parametrize("func", [det, determinant])
def test_singular_matrix(func):
    assert func([[1.0, 2.0], [2.0, 4.0]]) == pytest.approx(0.0, abs=1e-12)


def test_negative_pivot():
    assert determinant([[-2.0, 0.0], [0.0, 3.0]]) == pytest.approx(-6.0)


def test_methods_agree_on_four_by_four():
    m = [
        [3.0, 2.0, 0.0, 1.0],
        [4.0, 0.0, 1.0, 2.0],
        [3.0, 0.0, 2.0, 1.0],
        [9.0, 2.0, 3.0, 1.0],
    ]
    assert determinant(m) == pytest.approx(det(m), rel=1e-9)


def test_determinant_leaves_input_untouched():
    m = [[0.0, 1.0], [1.0, 0.0]]
    determinant(m)
    assert m == [[0.0, 1.0], [1.0, 0.0]]


@pytest.mark.parametrize("func", [det, determinant])
def test_non_square_rejected(func):
    with pytest.raises(ValueError):
        func([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_cofactor_needs_two_by_two():
    with pytest.raises(ValueError):
        det([[5.0]])