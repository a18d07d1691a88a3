# Copyright (c) 2026, the hatpde developers.
#
# This file is part of hatpde, which is free software distributed
# under the terms of the GPLv3 license.  A copy of the license should
# have been included in the file 'LICENSE.txt', and is also available
# online at <http://www.gnu.org/licenses/gpl-3.0.html>.

__version__ = "0.1.0"

# Import custom logging to setup rootlogger
from .tools import logging as _logging_setup
import logging
logger = logging.getLogger(__name__.split('.')[-1])
