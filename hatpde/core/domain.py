"""
Uniformly sampled one-dimensional domains.

"""

import math
import numpy as np
from functools import cached_property

from ..tools.exceptions import OutOfDomainError
from ..tools.general import map_range, clamp

import logging
logger = logging.getLogger(__name__.split('.')[-1])

# Public interface
__all__ = ['AffineCOV',
           'Interval']


class AffineCOV:
    """
    Class for affine change-of-variables for remapping space bounds.

    Parameters
    ----------
    native_bounds : tuple of floats
        Native bounds given as (lower, upper)
    problem_bounds : tuple of floats
        New bounds given as (lower, upper)
    """

    def __init__(self, native_bounds, problem_bounds):
        self.native_bounds = native_bounds
        self.problem_bounds = problem_bounds
        self.native_left, self.native_right = native_bounds
        self.problem_left, self.problem_right = problem_bounds
        self.stretch = (self.problem_right - self.problem_left) / (self.native_right - self.native_left)

    def problem_coord(self, native_coord):
        """Convert native coordinates to problem coordinates."""
        return map_range(*self.native_bounds, *self.problem_bounds, native_coord)

    def native_coord(self, problem_coord):
        """Convert problem coordinates to native coordinates."""
        return map_range(*self.problem_bounds, *self.native_bounds, problem_coord)


class Interval:
    """
    Interval [a, b] sampled at n uniformly spaced points.

    Parameters
    ----------
    a, b : float
        Interval bounds, with a < b
    n : int
        Number of sample points (n >= 2)

    Notes
    -----
    Intervals compare and hash by the exact tuple (a, b, n).  Functions are
    only compatible when their intervals are equal in this strict sense.
    The sample points are
        x_i = a + i*h,  i = 0, ..., n-1,  h = (b - a) / (n - 1)
    with the endpoints stored exactly.
    """

    def __init__(self, a, b, n):
        if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
            raise ValueError("Sample count must be an integer: %r" %(n,))
        if n < 2:
            raise ValueError("Sample count must be at least 2: %i" %n)
        a = float(a)
        b = float(b)
        if not (math.isfinite(a) and math.isfinite(b)):
            raise ValueError("Interval bounds must be finite: (%r, %r)" %(a, b))
        if not a < b:
            raise ValueError("Interval bounds must satisfy a < b: (%r, %r)" %(a, b))
        self._a = a
        self._b = b
        self._n = int(n)

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @property
    def n(self):
        return self._n

    @property
    def bounds(self):
        return (self._a, self._b)

    @property
    def spacing(self):
        """Distance between neighboring sample points."""
        return (self._b - self._a) / (self._n - 1)

    @cached_property
    def grid(self):
        """Sample points, with exact endpoints."""
        grid = np.linspace(self._a, self._b, self._n)
        grid.flags.writeable = False
        return grid

    @cached_property
    def COV(self):
        """Change of variables from sample-index coordinates to the interval."""
        return AffineCOV((0, self._n - 1), self.bounds)

    def __eq__(self, other):
        if isinstance(other, Interval):
            return (self._a, self._b, self._n) == (other._a, other._b, other._n)
        return NotImplemented

    def __hash__(self):
        return hash((Interval, self._a, self._b, self._n))

    def __repr__(self):
        return 'Interval(%r, %r, %r)' %(self._a, self._b, self._n)

    def contains(self, x):
        """Check if a point lies in [a, b]."""
        return self._a <= x <= self._b

    def check_point(self, x):
        """Raise if a point lies outside [a, b]."""
        if not self.contains(x):
            raise OutOfDomainError("Point %r outside of interval [%r, %r]." %(x, self._a, self._b))

    def check_index(self, i):
        """Raise if a sample index lies outside [0, n)."""
        if not 0 <= i < self._n:
            raise OutOfDomainError("Sample index %r outside of [0, %i)." %(i, self._n))

    def sample_point(self, i):
        """Position of the i-th sample point."""
        self.check_index(i)
        return float(self.grid[i])

    def index_coord(self, x):
        """
        Continuous sample-index coordinate of a point.

        Maps [a, b] affinely onto [0, n-1].  Points lying exactly on a sample
        point map exactly onto its integer index, and rounding at the ends is
        clamped back into range.
        """
        self.check_point(x)
        t = float(clamp(0, self._n - 1, self.COV.native_coord(x)))
        k = int(round(t))
        if self.grid[k] == x:
            return float(k)
        return t

    def bin_index(self, x):
        """Index i of the sample bin [x_i, x_(i+1)] containing a point."""
        return self.coord_bin(self.index_coord(x))

    def coord_bin(self, t):
        """Index i of the sample bin containing a sample-index coordinate t."""
        return min(int(math.floor(t)), self._n - 2)
