"""Test boundary conditions and diffusion/wave evolution."""

import pytest
import functools
import numpy as np
from hatpde.core.function import HatFunction, project_hat, deriv, deriv2
from hatpde.core.pde import Neumann, Dirichlet, diffusion_neumann, diffusion_dirichlet, wave, wave_d0, diffusionN, diffusionD, waveD0
from hatpde.core.system import State
from hatpde.core.timesteppers import rk2step, schemes
from hatpde.tools.exceptions import DomainMismatchError
from hatpde.tools.general import apply


def bench_wrapper(test):
    @functools.wraps(test)
    def wrapper(benchmark, *args, **kw):
        benchmark.pedantic(test, args=(None,)+args, kwargs=kw)
    return wrapper


def identity_stepper(f, y0, h):
    return y0


stepper_range = list(schemes.values()) + [identity_stepper]


def random_function(a, b, n, seed=0):
    rng = np.random.default_rng(seed)
    return HatFunction(a, b, n, rng.standard_normal(n))


def test_short_names():
    assert diffusionN is diffusion_neumann
    assert diffusionD is diffusion_dirichlet
    assert waveD0 is wave_d0


def test_boundary_condition_records():
    assert Neumann(1, 2) == Neumann(1, 2)
    assert Neumann(1, 2) != Dirichlet(1, 2)
    assert (Dirichlet(0.5, -1).a, Dirichlet(0.5, -1).b) == (0.5, -1)


def test_dirichlet_impose():
    f = HatFunction(0, 1, 4, [1, 2, 3, 4])
    Dirichlet(-1, 7).impose(f)
    assert np.array_equal(f.coeffs, [-1, 2, 3, 7])


def test_neumann_impose():
    f = HatFunction(0, 3, 4, [1, 2, 3, 4])
    Neumann(0.5, -2).impose(f)
    assert np.array_equal(f.coeffs, [1.5, 2, 3, 1])


def test_neumann_impose_two_samples():
    f = HatFunction(0, 1, 2, [1, 2])
    Neumann(5, 5).impose(f)
    assert np.array_equal(f.coeffs, [1, 2])


@pytest.mark.parametrize('stepper', stepper_range)
@pytest.mark.parametrize('h', [1e-4, 0.1])
def test_diffusion_dirichlet_boundary(stepper, h):
    f = random_function(0, 1, 15)
    f_copy = f.copy()
    g = diffusion_dirichlet(stepper, Dirichlet(0.25, -3.5), f, h)
    assert g.coeffs[0] == 0.25
    assert g.coeffs[-1] == -3.5
    assert g.domain == f.domain
    assert f == f_copy


@pytest.mark.parametrize('stepper', stepper_range)
def test_diffusion_neumann_boundary(stepper):
    f = random_function(0, 1, 15)
    f_copy = f.copy()
    h = f.spacing
    g = diffusion_neumann(stepper, Neumann(0.5, -1.5), f, 1e-4)
    assert np.isclose((g.coeffs[1] - g.coeffs[0]) / h, 0.5)
    assert np.isclose((g.coeffs[-1] - g.coeffs[-2]) / h, -1.5)
    assert f == f_copy


def test_wrong_boundary_type():
    f = random_function(0, 1, 15)
    with pytest.raises(TypeError):
        diffusion_neumann(rk2step, Dirichlet(0, 0), f, 1e-4)
    with pytest.raises(TypeError):
        diffusion_dirichlet(rk2step, Neumann(0, 0), f, 1e-4)


@pytest.mark.parametrize('stepper', schemes.values())
def test_deriv2_keeps_boundary_slopes(stepper):
    f = project_hat(0, 1, 21, lambda x: np.exp(x) * np.sin(3*x))
    g = stepper(deriv2, f, 0.2 * f.spacing**2)
    assert np.isclose(g.coeffs[1] - g.coeffs[0], f.coeffs[1] - f.coeffs[0], rtol=0, atol=1e-12)
    assert np.isclose(g.coeffs[-1] - g.coeffs[-2], f.coeffs[-1] - f.coeffs[-2], rtol=0, atol=1e-12)


@pytest.mark.parametrize('n', [41])
@bench_wrapper
def test_diffusion_dirichlet_heat(benchmark, n):
    # u = exp(-t) sin(x) on [0, pi]
    f = project_hat(0, np.pi, n, np.sin)
    T = 0.5
    nsteps = 400
    ht = T / nsteps
    bc = Dirichlet(0, 0)
    f = apply(lambda f: diffusion_dirichlet(rk2step, bc, f, ht), f, nsteps)
    assert np.allclose(f.coeffs, np.exp(-T) * np.sin(f.grid), atol=1e-3)


def test_diffusion_neumann_heat():
    # u = exp(-t) cos(x) on [0, pi]
    f = project_hat(0, np.pi, 81, np.cos)
    T = 0.5
    nsteps = 1000
    ht = T / nsteps
    bc = Neumann(0, 0)
    f = apply(lambda f: diffusion_neumann(rk2step, bc, f, ht), f, nsteps)
    assert np.allclose(f.coeffs, np.exp(-T) * np.cos(f.grid), atol=5e-2)


def test_diffusion_neumann_linear_steady():
    f = project_hat(0, 1, 11, lambda x: 2*x + 1)
    g = apply(lambda f: diffusion_neumann(rk2step, Neumann(2, 2), f, 1e-3), f, 10)
    assert np.allclose(g.coeffs, f.coeffs)


def test_wave_constant_state():
    s = State(HatFunction(0, 1, 5, np.full(5, 2.)), HatFunction(0, 1, 5, np.full(5, -1.)))
    ft, fx = wave(rk2step, s, 0.01)
    assert np.allclose(ft.coeffs, 2)
    assert np.allclose(fx.coeffs, -1)


def test_wave_accepts_list():
    ft = project_hat(0, 1, 11, np.cos)
    fx = project_hat(0, 1, 11, np.sin)
    assert isinstance(wave(rk2step, [ft, fx], 0.01), State)


@pytest.mark.parametrize('stepper', stepper_range)
def test_wave_pure(stepper):
    ft = project_hat(0, 1, 11, np.cos)
    fx = project_hat(0, 1, 11, np.sin)
    s = State(ft, fx)
    s_copy = s.copy()
    new = wave_d0(stepper, s, 0.01)
    assert s == s_copy
    assert all(x is not y for x, y in zip(new, s))


def test_wave_domain_mismatch():
    s = State(project_hat(0, 1, 11, np.cos), project_hat(0, 1, 12, np.sin))
    with pytest.raises(DomainMismatchError):
        wave(rk2step, s, 0.01)


def test_wave_traveling():
    # u = sin(x - t): u_t = -cos(x - t), u_x = cos(x - t)
    a, b, n = 0, 2*np.pi, 201
    ft = project_hat(a, b, n, lambda x: -np.cos(x))
    fx = project_hat(a, b, n, np.cos)
    T = 0.5
    nsteps = int(round(T / (0.1 * ft.spacing)))
    ht = T / nsteps
    ft, fx = apply(lambda s: wave(rk2step, s, ht), State(ft, fx), nsteps)
    x = ft.grid
    interior = (x > 1.5) & (x < b - 1.5)
    assert np.allclose(ft.coeffs[interior], -np.cos(x[interior] - T), atol=1e-3)
    assert np.allclose(fx.coeffs[interior], np.cos(x[interior] - T), atol=1e-3)


def test_wave_d0():
    ft = project_hat(0, 1, 11, lambda x: 1 + x)
    fx = deriv(project_hat(0, 1, 11, np.sin))
    s = State(ft, fx)
    ft0, fx0 = wave_d0(rk2step, s, 0.01)
    ft1, fx1 = wave(rk2step, s, 0.01)
    assert ft0.coeffs[0] == 0
    assert ft0.coeffs[-1] == 0
    assert np.array_equal(ft0.coeffs[1:-1], ft1.coeffs[1:-1])
    assert fx0 == fx1
