"""
hatpde script simulating a 1D string with fixed ends.
This script evolves the wave equation as a first-order system in the time
and space derivatives of the solution, reconstructs the displacement by
integrating the space derivative, and saves a few snapshots.

    dt(u_t) = dx(u_x),  dt(u_x) = dx(u_t)

To run and plot:
    $ python3 wave_string.py
"""

import numpy as np
import matplotlib.pyplot as plt
import hatpde.public as hp
from hatpde.extras import plot_tools
import logging
logger = logging.getLogger(__name__)


# Parameters
a, b = 0, 2*np.pi
n = 100
stop_sim_time = 10
timestepper = hp.rk2step
timestep = 0.1 * (b - a) / (n - 1)
snapshots = 5

# Initial conditions
fx = hp.deriv(hp.project_hat(a, b, n, np.sin))
state = hp.State(fx.copy(), fx)

# Main loop
nsteps = int(round(stop_sim_time / timestep))
cadence = nsteps // (snapshots - 1)
fig = plt.figure(figsize=(6, 4))
axes = fig.add_subplot(1, 1, 1)
for i in range(nsteps + 1):
    if i % cadence == 0:
        plot_tools.plot_function(state[1], axes=axes, integrate=True, label='t=%.1f' %(i*timestep))
        logger.info('Iteration=%i, Time=%e' %(i, i*timestep))
    state = hp.wave_d0(timestepper, state, timestep)

# Plot
axes.set_xlabel('x')
axes.set_ylabel('u')
axes.legend()
fig.tight_layout()
fig.savefig('wave_string.png', dpi=200)
