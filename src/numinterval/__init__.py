'''Numeric intervals over the extended reals with parsing, rendering and point comparison.'''

from .version import __version__

from .constants import INFINITY_NEGATIVE, INFINITY_POSITIVE, DEFAULT_SEPARATOR
from .errors import InvalidArgument
from .interval import Interval
