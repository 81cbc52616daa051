import numbers
import re

import numpy as np

from .constants import (
    INFINITY_NEGATIVE,
    INFINITY_POSITIVE,
    INTEGER_PATTERN,
    NINF,
    NUMBER_PATTERN,
    PINF
)


# ----------------------------------------------------------------------------------------------------------------------
# Type definitions

Number = numbers.Real

_RE_NUMBER = re.compile(NUMBER_PATTERN)
_RE_INTEGER = re.compile(INTEGER_PATTERN)


# ----------------------------------------------------------------------------------------------------------------------

def tonumber(value) -> Number:
    '''
    Convert ``value`` into an ``int`` or ``float`` endpoint value.

    :raises TypeError:   if ``value`` is neither a real number nor a string.
    :raises ValueError:  if ``value`` is NaN or a string that is no numeric literal.
    '''
    if isinstance(value, (bool, np.bool_)):
        raise TypeError('Booleans are not numbers: %r' % value)
    if isinstance(value, str):
        return parsenumber(value)
    if not isinstance(value, numbers.Real):
        raise TypeError('Expected a real number, got %s' % type(value).__name__)
    if isinstance(value, np.generic):
        value = value.item()
    if not isinstance(value, (int, float)):
        value = float(value)
    if isinstance(value, float) and np.isnan(value):
        raise ValueError('NaN is not a valid endpoint')
    return value


def parsenumber(token: str) -> Number:
    '''Parse a numeric literal, returning an ``int`` for integer literals and a ``float`` otherwise.'''
    if _RE_INTEGER.fullmatch(token):
        return int(token)
    if _RE_NUMBER.fullmatch(token):
        return float(token)
    raise ValueError('Not a numeric literal: %r' % token)


def parseendpoint(token: str) -> Number:
    '''Like :func:`parsenumber`, but also understands the two infinity tokens.'''
    if token == INFINITY_NEGATIVE:
        return NINF
    if token == INFINITY_POSITIVE:
        return PINF
    return parsenumber(token)


def fmtendpoint(value) -> str:
    '''
    Render an endpoint value as text.

    Infinities are rendered as ``INF`` and ``-INF``, an unset endpoint as the empty
    string and all other values in their default ``str()`` form.
    '''
    if value is None:
        return ''
    if value == NINF:
        return INFINITY_NEGATIVE
    if value == PINF:
        return INFINITY_POSITIVE
    if isinstance(value, np.generic):
        value = value.item()
    return str(value)
