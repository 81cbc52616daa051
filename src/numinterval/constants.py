import numpy as np


# ----------------------------------------------------------------------------------------------------------------------
# Textual representation

INFINITY_POSITIVE = 'INF'
INFINITY_NEGATIVE = '-INF'

DEFAULT_SEPARATOR = ', '


class BOUNDARY:
    LOWER_INC = '['
    LOWER_EXC = '('
    UPPER_INC = ']'
    UPPER_EXC = ')'


# Numeric literal as accepted by the interval grammar. The exponent part is
# optional so that every float rendered by str() can be read back.
NUMBER_PATTERN = r'-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
INTEGER_PATTERN = r'-?[0-9]+'


# ----------------------------------------------------------------------------------------------------------------------
# Numeric constants

PINF = np.inf
NINF = -np.inf
