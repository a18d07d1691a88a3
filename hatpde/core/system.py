"""
Classes for systems of functions.

"""

from ..tools.general import unify, is_real_scalar

# Public interface
__all__ = ['State']


class State(tuple):
    """
    Ordered collection of functions forming a single vector.

    Addition and subtraction act componentwise between states of equal
    length, and real scalars multiply every component, so states can be
    advanced by the generic timesteppers.

    Examples
    --------
    >>> s = State(ft, fx)
    >>> ft, fx = s + 0.5*s
    """

    __array_ufunc__ = None

    def __new__(cls, *components):
        return super().__new__(cls, components)

    def __repr__(self):
        return 'State(%s)' %', '.join(repr(c) for c in self)

    def _check_length(self, other):
        try:
            return unify([len(self), len(other)])
        except ValueError:
            raise ValueError("States have different lengths: %i, %i" %(len(self), len(other)))

    def __add__(self, other):
        if isinstance(other, State):
            self._check_length(other)
            return State(*(x + y for x, y in zip(self, other)))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, State):
            self._check_length(other)
            return State(*(x - y for x, y in zip(self, other)))
        return NotImplemented

    def __neg__(self):
        return State(*(-x for x in self))

    def __mul__(self, other):
        if is_real_scalar(other):
            return State(*(other * x for x in self))
        return NotImplemented

    def __rmul__(self, other):
        if is_real_scalar(other):
            return State(*(other * x for x in self))
        return NotImplemented

    def __truediv__(self, other):
        if is_real_scalar(other):
            return State(*(x / other for x in self))
        return NotImplemented

    def copy(self):
        return State(*(x.copy() for x in self))
