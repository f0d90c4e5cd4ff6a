import numpy as np
import pytest

from mandelscape.core.complex_math import Complex
from mandelscape.core.escape_time import iterate, iterate_grid, is_in_set


def test_complex_arithmetic():
    a = Complex(1.0, 2.0)
    b = Complex(3.0, -1.0)
    assert a + b == Complex(4.0, 1.0)
    assert a * b == Complex(5.0, 5.0)
    assert Complex(3.0, 4.0).magnitude_squared() == 25.0
    assert Complex(3.0, 4.0).magnitude() == 5.0


def test_coerce_accepts_builtin_complex():
    assert Complex.coerce(complex(1, -2)) == Complex(1.0, -2.0)
    assert Complex.coerce(0.5) == Complex(0.5, 0.0)
    c = Complex(1.0, 1.0)
    assert Complex.coerce(c) is c


def test_origin_is_in_set():
    assert iterate(Complex(0.0, 0.0), 80) == 80
    assert iterate(0j, 80) == 80


def test_two_escapes_quickly():
    # z1 = 2 (|z|^2 = 4, not > 4), z2 = 6 escapes
    result = iterate(Complex(2.0, 0.0), 80)
    assert result <= 3
    assert result == 1


def test_far_point_escapes_immediately():
    assert iterate(3.0, 10) == 0


def test_period_two_cycle_stays_bounded():
    assert iterate(-1.0, 50) == 50
    assert is_in_set(-1.0)
    assert not is_in_set(1.0)


def test_result_in_range_for_disc():
    rng = np.random.default_rng(1)
    radius = 2.0 * np.sqrt(rng.random(300))
    theta = rng.random(300) * 2 * np.pi
    for r, th in zip(radius, theta):
        c = complex(r * np.cos(th), r * np.sin(th))
        assert 0 <= iterate(c, 40) <= 40


@pytest.mark.parametrize('c', [0.3 + 0.5j, -0.75 + 0.1j, 0.25 + 0.0j, -1.9 + 0.0j, 0.4 + 0.3j])
def test_non_decreasing_in_max_iter(c):
    results = [iterate(c, m) for m in range(1, 120, 7)]
    assert results == sorted(results)


def test_grid_matches_scalar():
    rng = np.random.default_rng(0)
    real = rng.uniform(-2.2, 1.0, size=(20, 20))
    imag = rng.uniform(-1.5, 1.5, size=(20, 20))

    grid = iterate_grid(real, imag, 60)

    assert grid.shape == (20, 20)
    expected = np.array([[iterate(complex(r, i), 60) for r, i in zip(row_r, row_i)]
                         for row_r, row_i in zip(real, imag)])
    np.testing.assert_array_equal(grid, expected)


def test_grid_all_inside():
    grid = iterate_grid(np.zeros(5), np.zeros(5), 25)
    np.testing.assert_array_equal(grid, np.full(5, 25))
