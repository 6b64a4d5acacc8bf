"""Board-position patterns matched against a game's starting FEN."""

import logging
import re

log = logging.getLogger(__name__)

INITIAL_BOARD = 'rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR'

_PATTERN_SYMBOLS = {
    '_': '_',
    '?': '.',
    '*': '.*',
    'A': '[KQRBNP]',
    'a': '[kqrbnp]',
}
_PIECES = set('KQRBNPkqrbnp')


def expand_rank(rank: str) -> str:
    """Replace digit runs of empty squares with that many '_' characters."""
    return ''.join('_' * int(ch) if ch in '12345678' else ch for ch in rank)


def _compile_rank(rank: str) -> re.Pattern:
    parts: list[str] = []
    for ch in rank:
        if ch in _PIECES:
            parts.append(ch)
        elif ch in _PATTERN_SYMBOLS:
            parts.append(_PATTERN_SYMBOLS[ch])
        elif ch in '12345678':
            parts.append('_' * int(ch))
        else:
            raise ValueError(f"Unbekanntes Zeichen {ch!r} im Stellungsmuster")
    return re.compile(''.join(parts))


class PositionMatcher:
    """Collects board patterns and tests FEN positions against them.

    Pattern syntax follows the FEN board field, with extra symbols:
    ``_`` an empty square, ``?`` any square, ``*`` any run of squares,
    ``A`` any white piece and ``a`` any black piece.
    """

    def __init__(self) -> None:
        self._patterns: list[list[re.Pattern]] = []

    def __len__(self) -> int:
        return len(self._patterns)

    def add_pattern(self, pattern: str) -> bool:
        """Register a board pattern.

        Returns:
            True if the pattern was accepted.
        """
        board = pattern.strip().split(' ', 1)[0]
        ranks = board.split('/')
        if len(ranks) != 8:
            log.warning("Stellungsmuster %r hat %d statt 8 Reihen, ignoriert.",
                        pattern, len(ranks))
            return False
        try:
            compiled = [_compile_rank(rank) for rank in ranks]
        except ValueError as exc:
            log.warning("Stellungsmuster %r ignoriert: %s", pattern, exc)
            return False
        self._patterns.append(compiled)
        return True

    def matches(self, fen: str) -> bool:
        """Check whether the board of a FEN string matches any pattern."""
        ranks = fen.strip().split(' ', 1)[0].split('/')
        if len(ranks) != 8:
            return False
        expanded = [expand_rank(rank) for rank in ranks]
        for compiled in self._patterns:
            if all(rx.fullmatch(rank) for rx, rank in zip(compiled, expanded)):
                return True
        return False
