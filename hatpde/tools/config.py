"""
Configuration handling.

"""

from configparser import ConfigParser
import os


# Create config
config = ConfigParser()

# Read defaults, user, and local files
config.read(os.path.join(os.path.dirname(os.path.dirname(__file__)), 'hatpde.cfg'))
config.read(os.path.expanduser('~/.hatpde/hatpde.cfg'))
config.read('hatpde.cfg')
