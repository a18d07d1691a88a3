"""
Plotting helpers for hat-basis functions and energy histories.

"""

import numpy as np
import matplotlib.pyplot as plt

from ..core.function import evaluate, quad_interval


def plot_function(fn, axes=None, resolution=1000, integrate=False, **kw):
    """
    Plot a hat-basis function on its interval.

    Parameters
    ----------
    fn : HatFunction
        Function to plot
    axes : matplotlib.Axes, optional
        Axes for plotting (default: new figure)
    resolution : int, optional
        Number of plotting points (default: 1000)
    integrate : bool, optional
        Plot the running integral from a instead of the function (default: False)
    **kw
        Passed to axes.plot

    """
    if axes is None:
        fig = plt.figure(figsize=(6, 4))
        axes = fig.add_subplot(1, 1, 1)
    x = np.linspace(fn.a, fn.b, resolution)
    if integrate:
        y = np.array([quad_interval(fn, fn.a, xi) for xi in x])
    else:
        y = evaluate(fn, x)
    axes.plot(x, y, **kw)
    axes.set_xlim(fn.a, fn.b)
    return axes


def plot_energy(results, axes=None):
    """
    Plot energy histories from extras.energy_tools.convergence_study.

    Parameters
    ----------
    results : dict
        Mapping of sample count to (times, energies, variation)
    axes : matplotlib.Axes, optional
        Axes for plotting (default: new figure)

    """
    if axes is None:
        fig = plt.figure(figsize=(6, 4))
        axes = fig.add_subplot(1, 1, 1)
    for n, (times, energies, variation) in results.items():
        axes.plot(times, energies, label=str(n))
    axes.set_xlabel('Time')
    axes.set_ylabel('Energy')
    axes.legend(title='Samples')
    return axes
