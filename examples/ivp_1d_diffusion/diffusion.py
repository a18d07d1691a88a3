"""
hatpde script simulating 1D diffusion with Dirichlet and Neumann boundary
conditions, starting from the same profile.

    dt(u) = dx(dx(u))

To run and plot:
    $ python3 diffusion.py
"""

import numpy as np
import matplotlib.pyplot as plt
import hatpde.public as hp
from hatpde.extras import plot_tools
import logging
logger = logging.getLogger(__name__)


# Parameters
a, b = 0, 1
n = 64
stop_sim_time = 0.05
timestepper = hp.rk2step
timestep = 0.2 * ((b - a) / (n - 1))**2

# Initial conditions
u0 = hp.project_hat(a, b, n, lambda x: np.exp(-100*(x - 0.3)**2))
uD = uN = u0
dirichlet = hp.Dirichlet(0, 0.5)
neumann = hp.Neumann(0, 0)

# Main loop
nsteps = int(round(stop_sim_time / timestep))
for i in range(nsteps):
    uD = hp.diffusion_dirichlet(timestepper, dirichlet, uD, timestep)
    uN = hp.diffusion_neumann(timestepper, neumann, uN, timestep)
    if (i+1) % 100 == 0:
        logger.info('Iteration=%i, Dirichlet mass=%e, Neumann mass=%e' %(i+1, hp.quad(uD), hp.quad(uN)))

# Plot
fig = plt.figure(figsize=(6, 4))
axes = fig.add_subplot(1, 1, 1)
plot_tools.plot_function(u0, axes=axes, label='initial')
plot_tools.plot_function(uD, axes=axes, label='Dirichlet')
plot_tools.plot_function(uN, axes=axes, label='Neumann')
axes.legend()
fig.tight_layout()
fig.savefig('diffusion.png', dpi=200)
