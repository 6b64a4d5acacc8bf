"""Per-tag matching of a game's tag value against registered criteria."""

from collections.abc import Sequence

from criteria import Criterion, MatchConfig, Operator
from criteria.scalars import (
    compare,
    is_numeric,
    parse_date,
    parse_time_control,
    scan_float,
    scan_unsigned,
)
from criteria.soundex import soundex
from criteria.tags import NAME_TAGS


def check_list(
    tag: int,
    value: str,
    criteria: Sequence[Criterion],
    config: MatchConfig,
) -> bool:
    """Check a tag value against a list of text criteria.

    Uses a three-pass approach:
    1. Plain criteria, ANY of them (prefix, or substring if match_anywhere)
    2. Relational criteria, ALL of them (only for numeric-looking values)
    3. Regular expressions, ANY of them

    Each pass runs only if the previous ones found nothing.

    Args:
        tag: Tag code the value belongs to.
        value: The game's value for the tag.
        criteria: Criteria registered for the tag.
        config: Matching options.

    Returns:
        True if the value is wanted.
    """
    if config.use_soundex and tag in NAME_TAGS:
        value = soundex(value)

    # Pass 1: plain text
    for criterion in criteria:
        if criterion.operator is not Operator.NONE:
            continue
        if config.match_anywhere:
            if criterion.pattern in value:
                return True
        elif value.startswith(criterion.pattern):
            return True

    # Pass 2: numeric range
    relational = [c for c in criteria if c.operator.is_relational]
    if relational and is_numeric(value):
        wanted = True
        lhs = scan_float(value)
        for criterion in relational:
            rhs = scan_float(criterion.pattern)
            if lhs is not None and rhs is not None:
                wanted = compare(criterion.operator, lhs, rhs)
                if not wanted:
                    break
        if wanted:
            return True

    # Pass 3: regular expressions
    for criterion in criteria:
        if criterion.operator is Operator.REGEX and criterion.regex is not None:
            if criterion.regex.search(value):
                return True

    return False


def check_date(value: str, criteria: Sequence[Criterion]) -> bool:
    """Check a Date value.

    A pattern starting with 'b' means before, one starting with 'a' means
    after. Relational criteria are ANDed; plain prefix criteria are ORed.
    The first criterion seeds the result either way. A REGEX criterion
    counts as a failed range check. Unreadable pattern years are reported
    once, at registration.
    """
    game_date = parse_date(value)
    if game_date is None:
        return False

    wanted = False
    for index, criterion in enumerate(criteria):
        pattern = criterion.pattern
        operator = criterion.operator
        if pattern.startswith('b'):
            operator = Operator.LESS_THAN
            pattern = pattern[1:]
        elif pattern.startswith('a'):
            operator = Operator.GREATER_THAN
            pattern = pattern[1:]

        if operator.is_relational:
            wanted_date = parse_date(pattern)
            if wanted_date is None or not game_date.in_range:
                wanted = False
            else:
                matches = compare(operator, game_date.encoded, wanted_date.encoded)
                wanted = matches if index == 0 else wanted and matches
        elif operator is Operator.NONE:
            if index == 0 or not wanted:
                wanted = value.startswith(pattern)
        else:
            # a regex never satisfies a date range
            wanted = False
    return wanted


def check_elo(value: str, criteria: Sequence[Criterion]) -> bool:
    """Check a rating value; the first matching criterion wins."""
    game_elo = scan_unsigned(value)
    if game_elo is None:
        return False
    return _check_period_or_prefix(value, game_elo, criteria)


def check_time_control(value: str, criteria: Sequence[Criterion]) -> bool:
    """Check a TimeControl value against its first control's period."""
    control = parse_time_control(value)
    if control is None:
        return False
    return _check_period_or_prefix(control.text, control.period, criteria)


def _check_period_or_prefix(text: str, number: int, criteria: Sequence[Criterion]) -> bool:
    for criterion in criteria:
        if criterion.operator.is_relational:
            wanted_number = scan_unsigned(criterion.pattern)
            if wanted_number is not None and compare(criterion.operator, number, wanted_number):
                return True
        elif criterion.operator is Operator.NONE:
            if text.startswith(criterion.pattern):
                return True
    return False
