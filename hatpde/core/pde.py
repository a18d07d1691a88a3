"""
Boundary conditions and one-step evolution of the diffusion and wave
equations on hat-basis functions.

The evolution functions take the ODE stepper as their first argument,
e.g. timesteppers.rk2step, and never modify their inputs.

"""

from .function import deriv, deriv2
from .system import State

import logging
logger = logging.getLogger(__name__.split('.')[-1])

# Public interface
__all__ = ['Neumann',
           'Dirichlet',
           'diffusion_neumann',
           'diffusion_dirichlet',
           'wave',
           'wave_d0',
           'diffusionN',
           'diffusionD',
           'waveD0']


class BoundaryCondition:
    """
    Base class for boundary conditions on a 1D interval.

    Parameters
    ----------
    a : float
        Value imposed at the left endpoint
    b : float
        Value imposed at the right endpoint
    """

    def __init__(self, a, b):
        self.a = a
        self.b = b

    def __repr__(self):
        return '%s(%r, %r)' %(type(self).__name__, self.a, self.b)

    def __eq__(self, other):
        if type(other) is type(self):
            return (self.a, self.b) == (other.a, other.b)
        return NotImplemented

    def __hash__(self):
        return hash((type(self), self.a, self.b))

    def impose(self, fn):
        """Modify the endpoint coefficients of a function in place."""
        raise NotImplementedError()


class Neumann(BoundaryCondition):
    """Neumann conditions: fixed slopes at the endpoints."""

    def impose(self, fn):
        n = fn.n
        if n >= 3:
            h = fn.spacing
            fn.coeffs[0] = fn.coeffs[1] - self.a * h
            fn.coeffs[n-1] = fn.coeffs[n-2] + self.b * h


class Dirichlet(BoundaryCondition):
    """Dirichlet conditions: fixed values at the endpoints."""

    def impose(self, fn):
        fn.coeffs[0] = self.a
        fn.coeffs[fn.n-1] = self.b


def _check_bc(bc, cls):
    if not isinstance(bc, cls):
        raise TypeError("Expected %s boundary conditions, got %r." %(cls.__name__, bc))


def _step_diffusion(stepper, fn, h):
    # State is just the function since only the first time derivative appears
    return stepper(deriv2, fn, h).copy()


def diffusion_neumann(stepper, bc, fn, h):
    """
    Evolve a function by one time-step under the diffusion equation
        dt(f) = dx(dx(f))
    with Neumann boundary conditions.

    Parameters
    ----------
    stepper : callable
        Autonomous ODE stepper, e.g. rk2step
    bc : Neumann
        Boundary slopes
    fn : HatFunction
        Solution at time t
    h : float
        Time-step

    Returns
    -------
    HatFunction approximating the solution at time t + h

    Notes
    -----
    deriv2 already keeps the boundary slopes fixed, so only the endpoint
    values need resetting to match the imposed slopes.
    """
    _check_bc(bc, Neumann)
    g = _step_diffusion(stepper, fn, h)
    bc.impose(g)
    return g


def diffusion_dirichlet(stepper, bc, fn, h):
    """
    Evolve a function by one time-step under the diffusion equation
        dt(f) = dx(dx(f))
    with Dirichlet boundary conditions.

    Parameters
    ----------
    stepper : callable
        Autonomous ODE stepper, e.g. rk2step
    bc : Dirichlet
        Boundary values
    fn : HatFunction
        Solution at time t
    h : float
        Time-step

    Returns
    -------
    HatFunction approximating the solution at time t + h
    """
    _check_bc(bc, Dirichlet)
    g = _step_diffusion(stepper, fn, h)
    bc.impose(g)
    return g


def _wave_rhs(state):
    ft, fx = state
    return State(deriv(fx), deriv(ft))


def wave(stepper, state, h):
    """
    Evolve a state by one time-step under the wave equation
        dt(dt(u)) = dx(dx(u))
    written as the first-order system
        dt(u_t) = dx(u_x),  dt(u_x) = dx(u_t)

    Parameters
    ----------
    stepper : callable
        Autonomous ODE stepper, e.g. rk2step
    state : pair of HatFunction
        Time derivative and space derivative of the solution at time t
    h : float
        Time-step

    Returns
    -------
    State pair at time t + h
    """
    ft, fx = state
    ft.check_domain(fx)
    return State(*stepper(_wave_rhs, State(ft, fx), h)).copy()


def wave_d0(stepper, state, h):
    """
    Evolve a state by one time-step under the wave equation and hold the
    solution fixed at the endpoints, by zeroing the endpoint coefficients of
    its time derivative.

    See wave for the arguments.
    """
    ft, fx = wave(stepper, state, h)
    ft.coeffs[0] = 0.
    ft.coeffs[ft.n-1] = 0.
    return State(ft, fx)


# Short names
diffusionN = diffusion_neumann
diffusionD = diffusion_dirichlet
waveD0 = wave_d0
