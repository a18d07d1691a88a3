"""
Explicit ODE steppers for autonomous initial value problems.

Each stepper takes one fixed step of
    y' = f(y),  y(0) = y0
with signature stepper(f, y0, h) -> y(h), where f maps a state to its
time derivative.  States may be of any type supporting addition and
multiplication by real scalars (a HatFunction, a State of several
functions, a float, a numpy array, ...).

"""

from collections import OrderedDict

# Public interface
__all__ = ['euler_step',
           'rk2step',
           'rk4step',
           'schemes']


# Track implemented schemes
schemes = OrderedDict()
def add_scheme(scheme):
    schemes[scheme.__name__] = scheme
    return scheme


@add_scheme
def euler_step(f, y0, h):
    """1st-order forward Euler step."""
    return y0 + h*f(y0)


@add_scheme
def rk2step(f, y0, h):
    """
    2nd-order Runge-Kutta (midpoint) step.

    Parameters
    ----------
    f : callable
        Takes a state and returns its time derivative
    y0 : state
        Initial state
    h : float
        Step size

    Returns
    -------
    Approximation of y(h)
    """
    k0 = f(y0)
    y1 = y0 + (h/2)*k0
    k1 = f(y1)
    return y0 + h*k1


@add_scheme
def rk4step(f, y0, h):
    """Classical 4th-order Runge-Kutta step."""
    k1 = f(y0)
    k2 = f(y0 + (h/2)*k1)
    k3 = f(y0 + (h/2)*k2)
    k4 = f(y0 + h*k3)
    return y0 + (h/6)*(k1 + 2*k2 + 2*k3 + k4)
