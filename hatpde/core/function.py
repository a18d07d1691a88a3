"""
Continuous piecewise-linear functions in the hat basis.

The hat basis on an interval [a, b] sampled at n uniform points consists of
the n continuous piecewise-linear functions that are one at their own sample
point and zero at all others.  A function in their span is stored by its
coefficients, which are simply its values at the sample points.

"""

import math
import numpy as np
from scipy import sparse
from functools import cache

from .domain import Interval
from ..tools.config import config
from ..tools.exceptions import DomainMismatchError, OutOfDomainError, ValueMismatchError
from ..tools.general import is_real_scalar

import logging
logger = logging.getLogger(__name__.split('.')[-1])

CONCAT_TOLERANCE = config['function'].getfloat('CONCAT_TOLERANCE')

# Public interface
__all__ = ['HatFunction',
           'zero',
           'project_hat',
           'hat',
           'evaluate',
           'quad',
           'quad_full',
           'quad_interval',
           'norm_l2',
           'deriv',
           'deriv2',
           'concat',
           'differentiation_matrix']


class HatFunction:
    """
    Function in the span of the hat basis on a uniformly sampled interval.

    Parameters
    ----------
    a, b : float
        Interval bounds, with a < b
    n : int
        Number of sample points
    coeffs : array_like
        Function values at the n sample points (copied)

    Notes
    -----
    Functions behave as values: arithmetic returns new functions and the
    interval is fixed at construction.  Binary operations require exactly
    equal intervals and raise DomainMismatchError otherwise.
    """

    __array_ufunc__ = None

    def __init__(self, a, b, n, coeffs):
        self._set(Interval(a, b, n), coeffs, copy=True)

    @classmethod
    def from_domain(cls, domain, coeffs, copy=True):
        """Build a function on an existing interval."""
        fn = cls.__new__(cls)
        fn._set(domain, coeffs, copy=copy)
        return fn

    def _set(self, domain, coeffs, copy):
        if copy:
            coeffs = np.array(coeffs, dtype=np.float64)
        else:
            coeffs = np.asarray(coeffs, dtype=np.float64)
        if coeffs.shape != (domain.n,):
            raise ValueError("Expected %i coefficients, got shape %s." %(domain.n, coeffs.shape))
        self._domain = domain
        self.coeffs = coeffs

    def _new(self, coeffs):
        return HatFunction.from_domain(self._domain, coeffs, copy=False)

    @property
    def domain(self):
        return self._domain

    @property
    def a(self):
        return self._domain.a

    @property
    def b(self):
        return self._domain.b

    @property
    def n(self):
        return self._domain.n

    @property
    def spacing(self):
        return self._domain.spacing

    @property
    def grid(self):
        return self._domain.grid

    def copy(self):
        return HatFunction.from_domain(self._domain, self.coeffs)

    def __repr__(self):
        return 'HatFunction(%r, %r, %r, %r)' %(self.a, self.b, self.n, self.coeffs.tolist())

    def __call__(self, x):
        return evaluate(self, x)

    def __eq__(self, other):
        if isinstance(other, HatFunction):
            return (self._domain == other._domain) and np.array_equal(self.coeffs, other.coeffs)
        return NotImplemented

    __hash__ = None

    def check_domain(self, other):
        """Raise if another function lives on a different interval."""
        if self._domain != other._domain:
            raise DomainMismatchError("Functions on %r and %r are incompatible." %(self._domain, other._domain))

    # Vector space

    def __add__(self, other):
        if isinstance(other, HatFunction):
            self.check_domain(other)
            return self._new(self.coeffs + other.coeffs)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, HatFunction):
            self.check_domain(other)
            return self._new(self.coeffs - other.coeffs)
        return NotImplemented

    def __neg__(self):
        return self._new(-self.coeffs)

    def __mul__(self, other):
        if is_real_scalar(other):
            return self._new(other * self.coeffs)
        elif isinstance(other, HatFunction):
            # Interpolant of the pointwise product
            self.check_domain(other)
            return self._new(self.coeffs * other.coeffs)
        return NotImplemented

    def __rmul__(self, other):
        if is_real_scalar(other):
            return self._new(other * self.coeffs)
        return NotImplemented

    def __truediv__(self, other):
        if is_real_scalar(other):
            return self._new(self.coeffs / other)
        return NotImplemented

    def __pow__(self, other):
        # Interpolant of the pointwise power
        if is_real_scalar(other):
            return self._new(self.coeffs ** other)
        return NotImplemented


def zero(a, b, n):
    """Additive identity on the interval [a, b] with n samples."""
    domain = Interval(a, b, n)
    return HatFunction.from_domain(domain, np.zeros(domain.n), copy=False)


def project_hat(a, b, n, f):
    """
    Project a function [a, b] -> R into the hat basis.
    This equates to sampling the function at the n uniform sample points.
    """
    domain = Interval(a, b, n)
    coeffs = [f(x) for x in domain.grid.tolist()]
    return HatFunction.from_domain(domain, coeffs, copy=False)


def hat(a, b, n, i, x):
    """Evaluate the i-th hat basis function, for 0 <= i < n, at x in [a, b]."""
    domain = Interval(a, b, n)
    domain.check_index(i)
    t = domain.index_coord(x)
    return max(0.0, 1.0 - abs(t - i))


def _interpolate(domain, coeffs, t):
    """Linearly interpolate coefficients at a sample-index coordinate."""
    if t.is_integer():
        return coeffs[int(t)]
    i = domain.coord_bin(t)
    s = t - i
    return coeffs[i] + s * (coeffs[i+1] - coeffs[i])


def evaluate(fn, x):
    """
    Evaluate a function at a point x in [a, b] (or an array of points).

    Only the two hat basis functions supported on the bin containing x
    contribute, so this locates the bin and interpolates linearly.
    Values at sample points are returned exactly.
    """
    domain = fn.domain
    if np.ndim(x):
        x = np.asarray(x, dtype=np.float64)
        if np.any(x < domain.a) or np.any(x > domain.b) or np.any(np.isnan(x)):
            raise OutOfDomainError("Points outside of interval [%r, %r]." %domain.bounds)
        return np.interp(x, domain.grid, fn.coeffs)
    t = domain.index_coord(x)
    return float(_interpolate(domain, fn.coeffs, t))


def _trapezoid(coeffs, h):
    # Composite trapezoid over consecutive samples, half weight at the ends
    return h * (np.sum(coeffs) - (coeffs[0] + coeffs[-1]) / 2)


def quad_full(fn):
    """Integrate a function over its whole interval."""
    return float(_trapezoid(fn.coeffs, fn.spacing))


def quad_interval(fn, x1, x2):
    """
    Integrate a function from x1 to x2, where a <= x1, x2 <= b.

    Notes
    -----
    With t1, t2 the sample-index coordinates of the bounds, the whole sample
    bins between s1 = ceil(t1) and s2 = floor(t2) are integrated with the
    composite trapezoid rule, and the two fractional bins at either end with
    a single trapezoid between the interpolated bound value and the nearest
    sample.  When both bounds share a bin (s1 > s2), a single trapezoid over
    [x1, x2] is used.  The result is the exact integral of the interpolant.
    """
    domain = fn.domain
    domain.check_point(x1)
    domain.check_point(x2)
    if x1 > x2:
        return -quad_interval(fn, x2, x1)
    coeffs = fn.coeffs
    grid = domain.grid
    t1 = domain.index_coord(x1)
    t2 = domain.index_coord(x2)
    v1 = _interpolate(domain, coeffs, t1)
    v2 = _interpolate(domain, coeffs, t2)
    s1 = int(math.ceil(t1))
    s2 = int(math.floor(t2))
    if s1 > s2:
        return float((x2 - x1) * (v1 + v2) / 2)
    left = (grid[s1] - x1) * (v1 + coeffs[s1]) / 2
    middle = _trapezoid(coeffs[s1:s2+1], domain.spacing)
    right = (x2 - grid[s2]) * (coeffs[s2] + v2) / 2
    return float(left + middle + right)


def quad(fn, *bounds):
    """
    Integrate a function, either over its whole interval or between bounds.

    Examples
    --------
    >>> quad(f)          # over [a, b]
    >>> quad(f, x1, x2)  # over [x1, x2]
    """
    if len(bounds) == 0:
        return quad_full(fn)
    elif len(bounds) == 2:
        return quad_interval(fn, *bounds)
    else:
        raise TypeError("quad takes either zero or two bounds (%i given)." %len(bounds))


def norm_l2(fn):
    """L2 norm of the interpolant of the squared function."""
    return math.sqrt(quad_full(fn**2))


@cache
def differentiation_matrix(domain, order=1):
    """
    Sparse matrix of the discrete derivative on an interval.

    Parameters
    ----------
    domain : Interval
        Sampled interval
    order : int, optional
        Derivative order, 1 or 2 (default: 1)

    Notes
    -----
    First order: central differences at interior samples and one-sided
    differences at the endpoints.
    Second order: the three-point stencil at interior samples, with each
    endpoint reusing the stencil of its interior neighbor.  The second
    derivative is then equal at the first two (and last two) samples, so an
    explicit step moves them together and leaves the boundary slopes fixed.
    """
    n = domain.n
    h = domain.spacing
    if order == 1:
        D = sparse.diags([-1/(2*h), 1/(2*h)], [-1, 1], shape=(n, n), format='lil')
        D[0, :2] = [-1/h, 1/h]
        D[n-1, n-2:] = [-1/h, 1/h]
    elif order == 2:
        if n < 3:
            raise ValueError("Second derivative requires at least 3 samples.")
        stencil = [1/h**2, -2/h**2, 1/h**2]
        D = sparse.diags(stencil, [-1, 0, 1], shape=(n, n), format='lil')
        D[0, :3] = stencil
        D[n-1, n-3:] = stencil
    else:
        raise ValueError("Unsupported derivative order: %r" %(order,))
    return D.tocsr()


def deriv(fn):
    """
    Derivative of a function, projected back into the hat basis.

    Caveat: the true derivative is piecewise constant and undefined at the
    sample points.  Here it is extended by averaging the two one-sided
    limits at interior samples and taking the inner limit at the endpoints.
    """
    return fn._new(differentiation_matrix(fn.domain, 1) @ fn.coeffs)


def deriv2(fn):
    """
    Approximate second derivative of a function, in the hat basis.

    The literal second derivative vanishes almost everywhere; this is the
    three-point difference stencil instead.  Endpoints reuse the stencil of
    their interior neighbor, which holds the boundary slopes constant under
    explicit timestepping.
    """
    return fn._new(differentiation_matrix(fn.domain, 2) @ fn.coeffs)


def concat(f, g):
    """
    Join a function on [a, b] with one on [b, c] into one on [a, c].

    The shared endpoint values must match (up to the configured
    CONCAT_TOLERANCE).  The result has f.n + g.n - 1 samples.
    """
    if f.b != g.a:
        raise DomainMismatchError("Intervals %r and %r do not share an endpoint." %(f.domain, g.domain))
    if not abs(f.coeffs[-1] - g.coeffs[0]) <= CONCAT_TOLERANCE:
        raise ValueMismatchError("Last and first samples do not match: %r != %r" %(f.coeffs[-1], g.coeffs[0]))
    if not np.isclose(f.spacing, g.spacing):
        logger.warning("Joining functions with different sample spacings (%g, %g); samples will be redistributed uniformly." %(f.spacing, g.spacing))
    coeffs = np.concatenate([f.coeffs, g.coeffs[1:]])
    return HatFunction(f.a, g.b, f.n + g.n - 1, coeffs)
