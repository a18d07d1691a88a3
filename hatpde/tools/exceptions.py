"""
Custom exception classes.

"""


class DomainMismatchError(ValueError):
    """Exceptions for operations between functions on different domains."""
    pass

class OutOfDomainError(ValueError):
    """Exceptions for points, bounds, or basis indices outside a domain."""
    pass

class ValueMismatchError(ValueError):
    """Exceptions for joining functions with discontinuous shared endpoints."""
    pass
