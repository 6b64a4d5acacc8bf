"""Tag codes and the growable tag schema shared by registry and reader."""

import enum
import logging
from typing import Optional

from criteria import CriteriaError

log = logging.getLogger(__name__)


class Tag(enum.IntEnum):
    """Predefined tag codes."""

    EVENT = 0
    SITE = 1
    DATE = 2
    ROUND = 3
    WHITE = 4
    BLACK = 5
    RESULT = 6
    PSEUDO_PLAYER = 7   # White or Black
    PSEUDO_ELO = 8      # WhiteElo or BlackElo
    WHITE_ELO = 9
    BLACK_ELO = 10
    ECO = 11
    FEN = 12
    SETUP = 13
    TIME_CONTROL = 14
    ANNOTATOR = 15
    HASHCODE = 16
    PLY_COUNT = 17
    OPENING = 18
    VARIATION = 19
    TERMINATION = 20
    VARIANT = 21
    EVENT_DATE = 22


PGN_NAMES: dict[Tag, str] = {
    Tag.EVENT: 'Event',
    Tag.SITE: 'Site',
    Tag.DATE: 'Date',
    Tag.ROUND: 'Round',
    Tag.WHITE: 'White',
    Tag.BLACK: 'Black',
    Tag.RESULT: 'Result',
    Tag.PSEUDO_PLAYER: 'Player',
    Tag.PSEUDO_ELO: 'Elo',
    Tag.WHITE_ELO: 'WhiteElo',
    Tag.BLACK_ELO: 'BlackElo',
    Tag.ECO: 'ECO',
    Tag.FEN: 'FEN',
    Tag.SETUP: 'SetUp',
    Tag.TIME_CONTROL: 'TimeControl',
    Tag.ANNOTATOR: 'Annotator',
    Tag.HASHCODE: 'HashCode',
    Tag.PLY_COUNT: 'PlyCount',
    Tag.OPENING: 'Opening',
    Tag.VARIATION: 'Variation',
    Tag.TERMINATION: 'Termination',
    Tag.VARIANT: 'Variant',
    Tag.EVENT_DATE: 'EventDate',
}

# Never read from a game's headers; they stand for a pair of real tags.
PSEUDO_TAGS = frozenset({Tag.PSEUDO_PLAYER, Tag.PSEUDO_ELO})

# Tags whose values are names, eligible for soundex matching.
NAME_TAGS = frozenset({
    Tag.WHITE, Tag.BLACK, Tag.PSEUDO_PLAYER,
    Tag.EVENT, Tag.SITE, Tag.ANNOTATOR,
})


class TagSchema:
    """Bidirectional mapping between tag names and codes.

    Starts with the predefined tags and grows when a criterion names a tag
    nobody has seen before. It never shrinks.
    """

    def __init__(self) -> None:
        self._names: list[Optional[str]] = [PGN_NAMES[tag] for tag in Tag]
        self._codes: dict[str, int] = {name: code for code, name in enumerate(self._names)}

    @property
    def size(self) -> int:
        return len(self._names)

    def code_for(self, name: str, create: bool = False) -> Optional[int]:
        """Return the code for a tag name, optionally adding a new one.

        Args:
            name: Tag name as written in PGN, e.g. ``WhiteElo``.
            create: Allocate a fresh code when the name is unknown.

        Returns:
            The tag code, or None if unknown and create is False.
        """
        code = self._codes.get(name)
        if code is None and create:
            code = self.size
            self.extend(code + 1)
            self._names[code] = name
            self._codes[name] = code
            log.debug("Neuer Tag %s mit Code %d", name, code)
        return code

    def name_for(self, code: int) -> Optional[str]:
        if 0 <= code < self.size:
            return self._names[code]
        return None

    def extend(self, new_length: int) -> None:
        """Grow the code space to new_length unnamed slots.

        Raises:
            CriteriaError: If new_length would shrink the schema.
        """
        if new_length < self.size:
            raise CriteriaError(
                f"Tag-Schema kann nicht schrumpfen: {new_length} < {self.size}"
            )
        self._names.extend([None] * (new_length - self.size))

    def details(self, headers: dict[str, str]) -> list[Optional[str]]:
        """Build the per-game value list indexed by tag code.

        Headers with names outside the schema are ignored, as are
        headers that happen to share a pseudo tag's name.
        """
        values: list[Optional[str]] = [None] * self.size
        for name, value in headers.items():
            code = self._codes.get(name)
            if code is not None and code not in PSEUDO_TAGS:
                values[code] = value
        return values
