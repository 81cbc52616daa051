import re

import dnutils
from dnutils import ifnone

from .constants import BOUNDARY, DEFAULT_SEPARATOR, INFINITY_NEGATIVE, INFINITY_POSITIVE, NUMBER_PATTERN
from .errors import InvalidArgument
from .utils import Number, fmtendpoint, parseendpoint, tonumber


logger = dnutils.getlogger('/numinterval/interval', level=dnutils.ERROR)


_ENDPOINT_PATTERN = r'(?:%s|%s|%s)' % (
    NUMBER_PATTERN,
    re.escape(INFINITY_NEGATIVE),
    re.escape(INFINITY_POSITIVE)
)


# ----------------------------------------------------------------------------------------------------------------------

class Interval:
    '''
    A numeric interval with independently inclusive or exclusive boundaries.

    The endpoints may be any real numbers including positive and negative infinity.
    An interval is either created empty and configured through its chainable setters,
    or parsed from its textual representation:

    :Example:

        >>> from numinterval import Interval
        >>> i = Interval('[0, 1)')
        >>> i.compare(0), i.compare(.5), i.compare(1)
        (0, 0, 1)
        >>> print(Interval().set_lower_inclusive().set_lower(-1).set_upper(float('inf')))
        [-1, INF)
        >>> Interval('[0; 2]', separator='; ').upper
        2

    Accepted textual forms are ``[a, b]``, ``[a, b)``, ``(a, b]`` and ``(a, b)``, where
    ``a`` and ``b`` are numeric literals or one of ``-INF`` and ``INF``, separated by the
    interval's current :attr:`separator`.

    .. note::
        Instances are mutable and not synchronized. Code that shares an interval between
        threads must not mutate it concurrently.
    '''

    INFINITY_POSITIVE = INFINITY_POSITIVE
    INFINITY_NEGATIVE = INFINITY_NEGATIVE

    SEPARATOR = 'separator'

    SETTINGS = {
        SEPARATOR: DEFAULT_SEPARATOR
    }

    def __init__(self, interval: str = None, **settings):
        '''
        :param interval:    the textual interval to parse, e.g. ``"[0, 2]"`` (optional)
        :type interval:     str
        :param separator:   the string between the two endpoints (defaults to ``", "``)
        :type separator:    str
        '''
        self._lower = None
        self._upper = None
        self._lower_inclusive = False
        self._upper_inclusive = False

        self.settings = type(self).SETTINGS.copy()
        for attr, value in settings.items():
            if attr not in self.settings:
                raise AttributeError(
                    'Unknown settings "%s": expected one of {%s}' % (
                        attr,
                        ', '.join(type(self).SETTINGS)
                    )
                )
            self.settings[attr] = ifnone(value, self.settings[attr])

        if interval is not None:
            self.parse(interval)

    # ------------------------------------------------------------------------------------------------------------------
    # Accessors

    @property
    def lower(self) -> Number:
        '''The lower endpoint or ``None`` if it has not been set.'''
        return self._lower

    @lower.setter
    def lower(self, x):
        self.set_lower(x)

    @property
    def upper(self) -> Number:
        '''The upper endpoint or ``None`` if it has not been set.'''
        return self._upper

    @upper.setter
    def upper(self, x):
        self.set_upper(x)

    @property
    def lower_inclusive(self) -> bool:
        return self._lower_inclusive

    @lower_inclusive.setter
    def lower_inclusive(self, flag):
        self.set_is_lower_inclusive(flag)

    @property
    def upper_inclusive(self) -> bool:
        return self._upper_inclusive

    @upper_inclusive.setter
    def upper_inclusive(self, flag):
        self.set_is_upper_inclusive(flag)

    @property
    def separator(self) -> str:
        '''The string between the endpoints, used for both parsing and rendering.'''
        return self.settings[Interval.SEPARATOR]

    @separator.setter
    def separator(self, s):
        self.set_separator(s)

    def is_lower_inclusive(self) -> bool:
        return self._lower_inclusive

    def is_lower_exclusive(self) -> bool:
        return not self._lower_inclusive

    def is_upper_inclusive(self) -> bool:
        return self._upper_inclusive

    def is_upper_exclusive(self) -> bool:
        return not self._upper_inclusive

    # ------------------------------------------------------------------------------------------------------------------
    # Chainable setters

    def _number(self, x, method: str, name: str) -> Number:
        try:
            return tonumber(x)
        except (TypeError, ValueError, OverflowError):
            raise InvalidArgument(
                '%s.%s() expects parameter one, %s, to be a number, got %r' % (
                    type(self).__name__,
                    method,
                    name,
                    x
                ),
                argument=x
            ) from None

    def set_lower(self, lower) -> 'Interval':
        '''
        Set the lower endpoint.

        The value is not checked against the upper endpoint.

        :param lower:   a real number, ``-inf``/``inf`` or a numeric literal string
        :raises InvalidArgument: if ``lower`` is not a number
        '''
        self._lower = self._number(lower, 'set_lower', 'lower')
        return self

    def set_upper(self, upper) -> 'Interval':
        '''
        Set the upper endpoint.

        The value is not checked against the lower endpoint.

        :param upper:   a real number, ``-inf``/``inf`` or a numeric literal string
        :raises InvalidArgument: if ``upper`` is not a number
        '''
        self._upper = self._number(upper, 'set_upper', 'upper')
        return self

    def set_is_lower_inclusive(self, flag: bool) -> 'Interval':
        self._lower_inclusive = bool(flag)
        return self

    def set_is_upper_inclusive(self, flag: bool) -> 'Interval':
        self._upper_inclusive = bool(flag)
        return self

    def set_lower_exclusive(self) -> 'Interval':
        self._lower_inclusive = False
        return self

    def set_lower_inclusive(self) -> 'Interval':
        self._lower_inclusive = True
        return self

    def set_upper_exclusive(self) -> 'Interval':
        self._upper_inclusive = False
        return self

    def set_upper_inclusive(self) -> 'Interval':
        self._upper_inclusive = True
        return self

    def set_separator(self, separator: str) -> 'Interval':
        '''
        Set the separator used by :meth:`parse` and ``str()``.

        .. warning::
            The separator is taken literally. Separators containing digits, signs or
            periods may lead to wrong endpoints being parsed.
        '''
        self.settings[Interval.SEPARATOR] = separator
        return self

    # ------------------------------------------------------------------------------------------------------------------

    def compare(self, x) -> int:
        '''
        Compare a value to the interval.

        :param x:   the value to compare
        :returns:   ``-1`` if ``x`` lies below the interval, ``1`` if it lies above and
                    ``0`` if it lies inside of it.
        :raises InvalidArgument: if ``x`` is not a number
        '''
        x = self._number(x, 'compare', 'x')
        if self._lower is not None and (
                x < self._lower or not self._lower_inclusive and x == self._lower
        ):
            return -1
        if self._upper is not None and (
                x > self._upper or not self._upper_inclusive and x == self._upper
        ):
            return 1
        return 0

    def __contains__(self, x) -> bool:
        return self.compare(x) == 0

    def parse(self, string: str) -> 'Interval':
        '''
        Parse the textual representation of an interval into this instance.

        Either all of the endpoints and boundary flags are replaced or, if ``string``
        is invalid, none of them.

        :param string:  the interval, e.g. ``"[0, 1)"`` or ``"(-INF, 0]"``
        :raises InvalidArgument: if ``string`` is not a valid interval, if its upper
                                 endpoint is below its lower endpoint, or if its
                                 endpoints are equal while its boundaries are not.
        '''
        if not isinstance(string, str):
            raise InvalidArgument(
                '%s.parse() expects parameter one, string, to be a str, got %s' % (
                    type(self).__name__,
                    type(string).__name__
                ),
                argument=string
            )

        tokens = re.fullmatch(
            r'(?P<ldelim>[%s%s])(?P<lval>%s)%s(?P<uval>%s)(?P<udelim>[%s%s])' % (
                re.escape(BOUNDARY.LOWER_INC),
                re.escape(BOUNDARY.LOWER_EXC),
                _ENDPOINT_PATTERN,
                re.escape(self.separator),
                _ENDPOINT_PATTERN,
                re.escape(BOUNDARY.UPPER_INC),
                re.escape(BOUNDARY.UPPER_EXC),
            ),
            string
        )
        if tokens is None:
            logger.debug('Rejected interval %r (separator %r)' % (string, self.separator))
            raise InvalidArgument(
                '%s.parse() expects parameter one, string, to be a valid interval, got %r' % (
                    type(self).__name__,
                    string
                ),
                argument=string
            )

        lower_inclusive = tokens.group('ldelim') == BOUNDARY.LOWER_INC
        upper_inclusive = tokens.group('udelim') == BOUNDARY.UPPER_INC
        try:
            lower = parseendpoint(tokens.group('lval'))
            upper = parseendpoint(tokens.group('uval'))
        except (ValueError, OverflowError):
            logger.debug('Rejected interval %r: endpoints not convertible' % string)
            raise InvalidArgument(
                '%s.parse() expects parameter one, string, to be a valid interval, '
                'however, its endpoints cannot be converted to numbers' % type(self).__name__,
                argument=string
            ) from None

        if upper < lower:
            logger.debug('Rejected interval %r: endpoints out of order' % string)
            raise InvalidArgument(
                '%s.parse() expects parameter one, string, to be a valid interval, '
                'however, the upper bound appears to be greater than the lower bound: %r' % (
                    type(self).__name__,
                    string
                ),
                argument=string
            )

        if lower == upper and lower_inclusive != upper_inclusive:
            logger.debug('Rejected interval %r: boundaries differ on equal endpoints' % string)
            raise InvalidArgument(
                '%s.parse() expects parameter one, string, to be a valid interval, '
                'however, the endpoints are the same but the boundaries are different: %r' % (
                    type(self).__name__,
                    string
                ),
                argument=string
            )

        self._lower, self._upper = lower, upper
        self._lower_inclusive, self._upper_inclusive = lower_inclusive, upper_inclusive
        logger.debug('Parsed %r into %r' % (string, self))
        return self

    def copy(self) -> 'Interval':
        result = type(self)(separator=self.separator)
        result._lower = self._lower
        result._upper = self._upper
        result._lower_inclusive = self._lower_inclusive
        result._upper_inclusive = self._upper_inclusive
        return result

    # ------------------------------------------------------------------------------------------------------------------

    def __str__(self) -> str:
        return '%s%s%s%s%s' % (
            BOUNDARY.LOWER_INC if self._lower_inclusive else BOUNDARY.LOWER_EXC,
            fmtendpoint(self._lower),
            self.separator,
            fmtendpoint(self._upper),
            BOUNDARY.UPPER_INC if self._upper_inclusive else BOUNDARY.UPPER_EXC
        )

    def __repr__(self) -> str:
        return '<%s=%s>' % (type(self).__name__, str(self))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (
            self._lower == other._lower
            and self._upper == other._upper
            and self._lower_inclusive == other._lower_inclusive
            and self._upper_inclusive == other._upper_inclusive
        )

    __hash__ = None

