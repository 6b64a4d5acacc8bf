"""Core module for pgn-tag-selector."""

import enum
import re
from dataclasses import dataclass, field
from typing import Optional


class CriteriaError(Exception):
    """Configuration or consistency error that must stop the run."""


class Operator(enum.Enum):
    """Relation between a game's tag value and a registered pattern."""

    NONE = ''
    EQUAL = '='
    NOT_EQUAL = '<>'
    LESS_THAN = '<'
    LESS_THAN_OR_EQUAL = '<='
    GREATER_THAN = '>'
    GREATER_THAN_OR_EQUAL = '>='
    REGEX = '~'

    @property
    def is_relational(self) -> bool:
        return self not in (Operator.NONE, Operator.REGEX)

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Operator':
        """Map an operator symbol as written in a criteria file.

        Raises:
            ValueError: If the symbol is not a known operator.
        """
        if symbol == '!=':
            return cls.NOT_EQUAL
        return cls(symbol)


class SetupGate(enum.Enum):
    """How the SetUp tag restricts selection."""

    ANY = 'any'
    NO_SETUP = 'none'
    SETUP_ONLY = 'only'


@dataclass(frozen=True)
class Criterion:
    """A registered pattern plus the operator it is compared with."""

    pattern: str
    operator: Operator = Operator.NONE
    regex: Optional[re.Pattern] = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self):
        """Compile REGEX patterns once; an invalid pattern leaves regex as None."""
        if self.operator is Operator.REGEX:
            try:
                object.__setattr__(self, 'regex', re.compile(self.pattern))
            except re.error:
                pass


@dataclass(frozen=True)
class MatchConfig:
    """Process-wide matching options, fixed before evaluation begins."""

    use_soundex: bool = False
    match_anywhere: bool = False
    setup_gate: SetupGate = SetupGate.ANY


@dataclass
class Game:
    """A game read from a PGN file."""

    headers: dict[str, str]
    raw: str
    number: int = 0   # 1-based position in the source file


@dataclass
class Selection:
    """Outcome of running a game through the selector."""

    game: Game
    selected: bool
    reason: str       # SELECTED, SETUP, TAGS, ECO, POSITION
