"""Test whole-interval and partial-interval quadrature."""

import pytest
import numpy as np
from scipy import integrate
from hatpde.core.function import HatFunction, project_hat, evaluate, quad, quad_full, quad_interval
from hatpde.tools.exceptions import OutOfDomainError


domain_range = [(0, 1, 2), (0, 1, 9), (0, 2*np.pi, 100), (-1.5, 3.2, 17)]


def random_function(a, b, n, seed=0):
    rng = np.random.default_rng(seed)
    return HatFunction(a, b, n, rng.standard_normal(n))


def reference_quad(fn, x1, x2):
    """Integrate the interpolant with scipy, breaking at interior samples."""
    lower, upper = min(x1, x2), max(x1, x2)
    points = [x for x in fn.grid if lower < x < upper]
    result, error = integrate.quad(lambda x: evaluate(fn, x), lower, upper, points=points or None, limit=200)
    return result if x1 <= x2 else -result


def test_quad_x2():
    a, b, n = 0.0, 1.0, 1000
    f = project_hat(a, b, n, lambda x: x**2)
    rng = np.random.default_rng(10)
    errors = []
    for x1, x2 in rng.uniform(a, b, (100, 2)):
        errors.append(abs(quad(f, x1, x2) - (x2**3 - x1**3) / 3))
    assert max(errors) < 1e-3
    assert np.mean(errors) < 1e-3


def test_quad_sin():
    a, b, n = 0.0, 2*np.pi, 1000
    f = project_hat(a, b, n, np.sin)
    rng = np.random.default_rng(11)
    errors = []
    for x1, x2 in rng.uniform(a, b, (100, 2)):
        errors.append(abs(quad(f, x1, x2) - (np.cos(x1) - np.cos(x2))))
    assert max(errors) < 1e-3
    assert np.mean(errors) < 1e-3


@pytest.mark.parametrize('a, b, n', domain_range)
def test_quad_full_interval(a, b, n):
    f = random_function(a, b, n)
    assert quad(f, a, b) == quad(f)
    assert quad(f) == quad_full(f)


@pytest.mark.parametrize('a, b, n', domain_range)
def test_quad_antisymmetry(a, b, n):
    f = random_function(a, b, n)
    rng = np.random.default_rng(3)
    for x1, x2 in rng.uniform(a, b, (20, 2)):
        assert quad(f, x2, x1) == -quad(f, x1, x2)


@pytest.mark.parametrize('a, b, n', domain_range)
def test_quad_interval_exact(a, b, n):
    f = random_function(a, b, n)
    rng = np.random.default_rng(4)
    for x1, x2 in rng.uniform(a, b, (20, 2)):
        assert np.isclose(quad_interval(f, x1, x2), reference_quad(f, x1, x2), rtol=1e-8, atol=1e-10)


@pytest.mark.parametrize('a, b, n', domain_range)
def test_quad_grid_bounds(a, b, n):
    f = random_function(a, b, n)
    i1, i2 = n // 3, n - 1
    x1, x2 = f.grid[i1], f.grid[i2]
    expected = f.spacing * (np.sum(f.coeffs[i1:i2+1]) - (f.coeffs[i1] + f.coeffs[i2]) / 2)
    assert np.isclose(quad(f, x1, x2), expected)


def test_quad_weights():
    f = HatFunction(0, 4, 5, [1, 2, 3, 4, 5])
    assert quad(f) == 0.5 + 2 + 3 + 4 + 2.5


def test_quad_single_bin():
    f = HatFunction(0, 1, 3, [0, 2, 0])
    assert np.isclose(quad(f, 0.1, 0.2), 0.06)
    assert np.isclose(quad(f, 0.6, 0.9), 4*(0.9 - 0.6) - 2*(0.81 - 0.36))


def test_quad_across_bins():
    f = HatFunction(0, 1, 3, [0, 2, 0])
    assert np.isclose(quad(f, 0.25, 0.75), 0.75)
    assert np.isclose(quad(f, 0.25, 0.5), 0.375)
    assert np.isclose(quad(f, 0.5, 1), 0.5)


@pytest.mark.parametrize('x', [0, 0.3, 0.5, 1])
def test_quad_zero_width(x):
    f = HatFunction(0, 1, 3, [1, 2, -1])
    assert quad(f, x, x) == 0


@pytest.mark.parametrize('x1, x2', [(-0.1, 0.5), (0.5, 1.1), (-1, 2)])
def test_quad_out_of_domain(x1, x2):
    f = HatFunction(0, 1, 3, [1, 2, 3])
    with pytest.raises(OutOfDomainError):
        quad(f, x1, x2)
    with pytest.raises(OutOfDomainError):
        quad(f, x2, x1)


def test_quad_bad_bounds():
    f = HatFunction(0, 1, 3, [1, 2, 3])
    with pytest.raises(TypeError):
        quad(f, 0.5)
