"""This file is required to initialize the bot codebase as a package module.
"""

from . import constants
from .bot import RevBot

__title__ = "RevBot"
__author__ = "revbot contributors"
__license__ = "MIT"
__copyright__ = "Copyright 2022-present revbot contributors"
__version__ = "0.1.0"
