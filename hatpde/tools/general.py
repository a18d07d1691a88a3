"""
Extended built-ins, etc.

"""

import numpy as np


def map_range(a1, b1, a2, b2, x):
    """
    Evaluate the unique affine map between two intervals.

    Parameters
    ----------
    a1, b1 : float
        Old interval bounds
    a2, b2 : float
        New interval bounds
    x : float or array
        Point(s) in the old interval

    """
    return (x - a1) * (b2 - a2) / (b1 - a1) + a2


def clamp(a, b, x):
    """Clamp a point to the interval [a, b]."""
    if x < a:
        return a
    elif x > b:
        return b
    else:
        return x


def accum(f, e, n):
    """Return [e, f(e), ..., f^(n-1)(e)]."""
    if n == 0:
        return []
    out = [e]
    for i in range(1, n):
        out.append(f(out[-1]))
    return out


def apply(f, e, n):
    """
    Apply f to e repeatedly, n times.
    Equivalent to accum(f, e, n+1)[-1] without keeping the intermediates.
    """
    for i in range(n):
        e = f(e)
    return e


def binary_lsb(n):
    """Binary digits of a non-negative integer, least significant first."""
    if n < 0:
        raise ValueError("Negative input: %i" %n)
    digits = []
    while n > 0:
        n, r = divmod(n, 2)
        digits.append(r)
    return digits


def binary_msb(n):
    """Binary digits of a non-negative integer, most significant first."""
    return binary_lsb(n)[::-1]


binary = binary_msb


def power(f, e, x, n):
    """
    Fast powering of x under an associative binary operation.

    Parameters
    ----------
    f : callable
        Associative binary operation
    e : object
        Identity element of f
    x : object
        Element to power
    n : int
        Non-negative exponent

    """
    mask = binary_lsb(n)
    squares = accum(lambda y: f(y, y), x, len(mask))
    out = e
    for bit, square in zip(mask, squares):
        if bit:
            out = f(out, square)
    return out


def unify(objects):
    """
    Check if all objects in a collection are equal.
    If so, return one of them.  If not, raise.
    """
    for i, object in enumerate(objects):
        if i == 0:
            OBJECT = object
        else:
            if object != OBJECT:
                raise ValueError("Objects are not all equal.")
    return OBJECT


def is_real_scalar(value):
    """Check for real (non-boolean) numeric scalars, including numpy scalars."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return np.isscalar(value) and np.isrealobj(value) and isinstance(value, (int, float, np.number))
