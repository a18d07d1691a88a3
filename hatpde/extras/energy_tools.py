"""
Drivers for measuring energy conservation of wave simulations.

"""

import numpy as np

from ..core.function import project_hat, deriv, quad_full
from ..core.pde import wave_d0
from ..core.system import State
from ..core.timesteppers import rk2step
from ..tools.config import config

import logging
logger = logging.getLogger(__name__.split('.')[-1])

SAFETY = config['timestepping'].getfloat('SAFETY')


def wave_energy(state, c=1.0):
    """
    Total energy 0.5*integral(u_t**2 + c**2 * u_x**2) of a wave state.

    The squares are taken on the coefficients, i.e. the energy density is
    interpolated between samples.
    """
    ft, fx = state
    return 0.5 * quad_full(ft**2 + c**2 * fx**2)


def wave_initial_state(a, b, n, f=np.sin):
    """
    Build a wave state from an initial profile f, with the time derivative
    set equal to the space derivative (a right-moving initial pulse).
    """
    fx = deriv(project_hat(a, b, n, f))
    return State(fx.copy(), fx)


def time_grid(t1, t2, hx, safety=None):
    """
    Number of time samples and time-step for integrating over [t1, t2] with
    a step close to safety * hx that divides the interval evenly.

    Returns
    -------
    nt : int
        Number of time samples (including t1 and t2)
    ht : float
        Time-step
    """
    if safety is None:
        safety = SAFETY
    ht = safety * hx
    nt = int(round((t2 - t1) / ht)) + 1
    ht = (t2 - t1) / (nt - 1)
    return nt, ht


def simulate_wave_energy(n, t1=0., t2=100., a=0., b=2*np.pi, f=np.sin, c=1.0, stepper=rk2step, safety=None):
    """
    Simulate the wave equation with fixed ends and record the energy.

    Parameters
    ----------
    n : int
        Number of spatial samples
    t1, t2 : float, optional
        Time interval (default: (0, 100))
    a, b : float, optional
        Spatial interval (default: (0, 2*pi))
    f : callable, optional
        Initial profile (default: np.sin)
    c : float, optional
        Wave speed used in the energy (default: 1)
    stepper : callable, optional
        ODE stepper (default: rk2step)
    safety : float, optional
        Ratio of time-step to sample spacing (default: from config)

    Returns
    -------
    times : array
        Sample times
    energies : array
        Energy at each sample time
    """
    state = wave_initial_state(a, b, n, f)
    nt, ht = time_grid(t1, t2, state[0].spacing, safety=safety)
    logger.info("Using %i samples and taking %i time-steps." %(n, nt - 1))
    times = np.linspace(t1, t2, nt)
    energies = np.zeros(nt)
    energies[0] = wave_energy(state, c)
    for k in range(1, nt):
        state = wave_d0(stepper, state, ht)
        energies[k] = wave_energy(state, c)
    return times, energies


def energy_variation(energies):
    """Spread of an energy history."""
    return float(np.max(energies) - np.min(energies))


def convergence_study(ns, **kw):
    """
    Energy variation of the fixed-end wave simulation for several sample
    counts.  Keywords are passed to simulate_wave_energy.

    Returns
    -------
    dict mapping sample count to (times, energies, variation)
    """
    results = {}
    for n in ns:
        times, energies = simulate_wave_energy(n, **kw)
        variation = energy_variation(energies)
        logger.info("n=%i, energy variation=%e" %(n, variation))
        results[n] = (times, energies, variation)
    return results
