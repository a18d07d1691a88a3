"""hatpde public interface."""

# Import public interfaces from submodules
from .core.domain import *
from .core.function import *
from .core.system import *
from .core.timesteppers import *
from .core.pde import *
from .tools.exceptions import DomainMismatchError, OutOfDomainError, ValueMismatchError
from .tools.general import map_range, clamp, accum, apply, power
