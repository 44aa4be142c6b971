"""Freshness core domain."""

from .exceptions import *
from .value_objects import *
from .protocols import *
from .timestamps import *
