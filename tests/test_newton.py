import pytest

from algolab.newton import ConvergenceError, Polynomial, main, newton_raphson_find_root


def test_evaluate_worked_example():
    assert Polynomial([3, 2, 5]).evaluate(10) == 325


def test_derivative_worked_example():
    assert Polynomial([3, 2, 5]).derivative().coeffs == (6, 2)


@pytest.mark.parametrize("coeffs", [[], [5]])
def test_constant_derivative_is_zero(coeffs):
    assert Polynomial(coeffs).derivative().coeffs == (0,)


def test_empty_polynomial_evaluates_to_zero():
    assert Polynomial([]).evaluate(12.5) == 0.0


def test_root_of_x_squared_minus_nine():
    p = Polynomial([1, 0, -9])
    root = newton_raphson_find_root(p, 5.0)
    assert root == pytest.approx(3.0, abs=1e-6)
    assert abs(p.evaluate(root)) < 1e-6


def test_negative_guess_finds_negative_root():
    p = Polynomial([1, 0, -9])
    positive = newton_raphson_find_root(p, 5.0)
    negative = newton_raphson_find_root(p, -5.0)
    assert negative < 0
    assert -negative == pytest.approx(positive)


def test_zero_derivative_raises():
    with pytest.raises(ConvergenceError, match="Derivative is zero"):
        newton_raphson_find_root(Polynomial([1, 0, -9]), 0.0)


def test_iteration_limit_raises():
    with pytest.raises(ConvergenceError, match="Failed to converge after 1 iterations"):
        newton_raphson_find_root(Polynomial([1, 0, -9]), 5.0, max_iterations=1)


def test_no_real_root_does_not_converge():
    with pytest.raises(ConvergenceError):
        newton_raphson_find_root(Polynomial([1, 0, 1]), 0.5)


def test_main_reports_success(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Starting Newton-Raphson with guess x0 = 5" in out
    assert "Success: Converged to a root." in out


def test_main_reports_failure(capsys):
    assert main(["--guess", "0"]) == 0
    captured = capsys.readouterr()
    assert "Could not find a root." in captured.out
    assert "Derivative is zero" in captured.err