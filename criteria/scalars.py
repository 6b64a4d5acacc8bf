"""Scalar parsing and relational comparison for tag values."""

import re
from dataclasses import dataclass
from typing import Optional

from criteria import CriteriaError, Operator

# Years outside this open interval are unusable for range checks;
# two-digit years are ambiguous across centuries.
MIN_YEAR = 100
MAX_YEAR = 3000

_UNSIGNED_RE = re.compile(r'\s*\+?(\d+)')
_FLOAT_RE = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')
_DATE_PART_RE = re.compile(r'\.\s*\+?(\d+)')
# Sign, then digits and dots only. Several dots are accepted on purpose.
_NUMERIC_RE = re.compile(r'[+-]?[0-9.]*')
_DIGITS_RE = re.compile(r'[0-9]+')


def compare(operator: Operator, lhs: float, rhs: float) -> bool:
    """Evaluate ``lhs operator rhs``.

    Raises:
        CriteriaError: If operator is not relational.
    """
    if operator is Operator.LESS_THAN:
        return lhs < rhs
    if operator is Operator.LESS_THAN_OR_EQUAL:
        return lhs <= rhs
    if operator is Operator.GREATER_THAN:
        return lhs > rhs
    if operator is Operator.GREATER_THAN_OR_EQUAL:
        return lhs >= rhs
    if operator is Operator.EQUAL:
        return lhs == rhs
    if operator is Operator.NOT_EQUAL:
        return lhs != rhs
    raise CriteriaError(f"Operator {operator.name} ist kein Vergleichsoperator")


def scan_unsigned(text: str) -> Optional[int]:
    """Read a leading unsigned integer, ignoring whatever follows it."""
    m = _UNSIGNED_RE.match(text)
    return int(m.group(1)) if m else None


def scan_float(text: str) -> Optional[float]:
    """Read a leading floating-point number, ignoring whatever follows it."""
    m = _FLOAT_RE.match(text)
    return float(m.group(1)) if m else None


def is_numeric(text: str) -> bool:
    """Check whether text looks like a number that may take part in a range check."""
    return _NUMERIC_RE.fullmatch(text) is not None


@dataclass(frozen=True)
class GameDate:
    year: int
    month: int = 1
    day: int = 1

    @property
    def encoded(self) -> int:
        """Single comparable magnitude, year*10000 + month*100 + day."""
        return self.year * 10000 + self.month * 100 + self.day

    @property
    def in_range(self) -> bool:
        return MIN_YEAR < self.year < MAX_YEAR


def parse_date(text: str) -> Optional[GameDate]:
    """Parse ``year[.month[.day]]``.

    Month and day default to 1 when missing or unreadable (``1990.??.??``).

    Returns:
        The date, or None if there is no leading year.
    """
    m = _UNSIGNED_RE.match(text)
    if m is None:
        return None
    year = int(m.group(1))
    month = day = 1
    month_match = _DATE_PART_RE.match(text, m.end())
    if month_match:
        month = int(month_match.group(1))
        day_match = _DATE_PART_RE.match(text, month_match.end())
        if day_match:
            day = int(day_match.group(1))
    return GameDate(year, month, day)


@dataclass(frozen=True)
class TimeControl:
    text: str     # first control only, for prefix matching
    period: int   # seconds, for range checks


def parse_time_control(text: str) -> Optional[TimeControl]:
    """Parse a TimeControl tag value.

    Recognised shapes are ``period+increment``, ``*period`` (sandclock),
    ``moves/period`` and a bare ``period`` (sudden death). When several
    controls are joined with ``:`` only the first one is examined.

    Returns:
        The parsed control, or None for ``""``, ``?``, ``-`` and anything
        unrecognised.
    """
    if not text or text[0] in '?-':
        return None
    control = text.split(':', 1)[0]

    period: Optional[int] = None
    if '+' in control:
        period = scan_unsigned(control)
    elif control.startswith('*'):
        period = scan_unsigned(control[1:])
    elif '/' in control:
        period = scan_unsigned(control.split('/', 1)[1])
    elif _DIGITS_RE.fullmatch(control):
        period = int(control)

    if period is None:
        return None
    return TimeControl(control, period)
