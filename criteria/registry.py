"""Registry of selection criteria, one ordered list per tag code."""

import logging
from typing import Optional

from criteria import CriteriaError, Criterion, MatchConfig, Operator
from criteria.position import PositionMatcher
from criteria.scalars import parse_date
from criteria.soundex import soundex
from criteria.tags import NAME_TAGS, Tag, TagSchema

log = logging.getLogger(__name__)

# Single-letter extraction arguments, e.g. ``wKasparov``.
TAG_LETTERS: dict[str, Tag] = {
    'a': Tag.ANNOTATOR,
    'b': Tag.BLACK,
    'd': Tag.DATE,
    'e': Tag.ECO,
    'f': Tag.FEN,
    'h': Tag.HASHCODE,
    'p': Tag.PSEUDO_PLAYER,
    'r': Tag.RESULT,
    't': Tag.TIME_CONTROL,
    'w': Tag.WHITE,
}


class CriteriaRegistry:
    """Tag-indexed criteria, filled during configuration and read-only afterwards.

    Args:
        config: Matching options; only use_soundex matters here.
        schema: Tag schema to grow when unknown codes are registered.
        positions: Receives patterns registered against the FEN tag.
    """

    def __init__(
        self,
        config: MatchConfig,
        schema: Optional[TagSchema] = None,
        positions: Optional[PositionMatcher] = None,
    ) -> None:
        self.config = config
        self.schema = schema if schema is not None else TagSchema()
        self.positions = positions if positions is not None else PositionMatcher()
        self._lists: list[list[Criterion]] = [[] for _ in range(self.schema.size)]
        self.has_criteria = False

    @property
    def tag_count(self) -> int:
        return self.schema.size

    def register(self, tag: int, pattern: str, operator: Operator = Operator.NONE) -> bool:
        """Add a criterion for a tag.

        Args:
            tag: Tag code; codes beyond the schema extend it.
            pattern: Pattern text, without any operator symbol.
            operator: How the game value is compared with the pattern.

        Returns:
            True if the criterion was accepted.
        """
        if tag < 0:
            log.warning("Ungueltige Tag-Nummer %d, Kriterium %r ignoriert.", tag, pattern)
            return False
        if tag >= self.schema.size:
            self.schema.extend(tag + 1)

        if tag == Tag.FEN:
            accepted = self.positions.add_pattern(pattern)
        else:
            if self.config.use_soundex and tag in NAME_TAGS:
                pattern = soundex(pattern)
            criterion = Criterion(pattern, operator)
            if operator is Operator.REGEX and criterion.regex is None:
                log.warning("Regulaerer Ausdruck %r fuer Tag %s ist ungueltig und passt nie.",
                            pattern, self.schema.name_for(tag))
            if tag == Tag.DATE:
                _check_date_pattern(criterion)
            self._grow_lists()
            self._lists[tag].append(criterion)
            accepted = True
        self.has_criteria = True
        return accepted

    def register_name(self, name: str, pattern: str, operator: Operator = Operator.NONE) -> bool:
        """Add a criterion for a tag given by its PGN name."""
        return self.register(self.schema.code_for(name, create=True), pattern, operator)

    def extract_tag_argument(self, argstr: str) -> bool:
        """Register a single-letter argument such as ``wKasparov`` or ``d1990``.

        Raises:
            CriteriaError: If the leading letter is not a known tag letter.
        """
        tag = TAG_LETTERS.get(argstr[:1])
        if tag is None:
            raise CriteriaError(f"Unbekannte Art von Tag-Argument: {argstr!r}")
        return self.register(tag, argstr[1:], Operator.NONE)

    def list_for(self, tag: int) -> tuple[Criterion, ...]:
        """Criteria registered for a tag; empty if it is unconstrained."""
        if 0 <= tag < len(self._lists):
            return tuple(self._lists[tag])
        return ()

    def _grow_lists(self) -> None:
        missing = self.schema.size - len(self._lists)
        self._lists.extend([] for _ in range(missing))


def _check_date_pattern(criterion: Criterion) -> None:
    """Warn once about a relational date criterion without a readable year."""
    pattern = criterion.pattern
    operator = criterion.operator
    if pattern.startswith(('a', 'b')):
        # before/after prefix
        operator = Operator.LESS_THAN if pattern[0] == 'b' else Operator.GREATER_THAN
        pattern = pattern[1:]
    if operator.is_relational and parse_date(pattern) is None:
        log.warning("Jahr nicht lesbar in Datumskriterium %r.", criterion.pattern)
