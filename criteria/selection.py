"""Combine per-tag verdicts into the decision whether a game is selected."""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from criteria import CriteriaError, Game, MatchConfig, Selection, SetupGate
from criteria.matching import check_date, check_elo, check_list, check_time_control
from criteria.position import INITIAL_BOARD
from criteria.registry import CriteriaRegistry
from criteria.tags import PSEUDO_TAGS, Tag

log = logging.getLogger(__name__)

Details = Sequence[Optional[str]]

# Checked by eco_match, which callers run at a later point.
_SEPARATELY_CHECKED = PSEUDO_TAGS | {Tag.ECO}


class RecordSelector:
    """Decides whether a game's tags satisfy the registered criteria.

    Holds no per-game state, so one selector may serve any number of games
    once registration is complete.
    """

    def __init__(self, registry: CriteriaRegistry, config: Optional[MatchConfig] = None) -> None:
        self.registry = registry
        self.config = config if config is not None else registry.config

    def overall_match(self, details: Details) -> bool:
        """Check every tag except ECO.

        Player and Elo criteria accept a game if either side matches.
        Lists for different tags are ANDed, and a tag with criteria must be
        present in the game.

        Raises:
            CriteriaError: If details is not sized to the registry's tag count.
        """
        if not self.registry.has_criteria:
            return True
        if len(details) != self.registry.tag_count:
            raise CriteriaError(
                f"Tag-Anzahl passt nicht: {len(details)} statt {self.registry.tag_count}"
            )

        players = self.registry.list_for(Tag.PSEUDO_PLAYER)
        if players and not self._either_side(
            details, Tag.WHITE, Tag.BLACK,
            lambda tag, value: check_list(tag, value, players, self.config),
        ):
            return False

        ratings = self.registry.list_for(Tag.PSEUDO_ELO)
        if ratings and not self._either_side(
            details, Tag.WHITE_ELO, Tag.BLACK_ELO,
            lambda tag, value: check_elo(value, ratings),
        ):
            return False

        for tag in range(self.registry.tag_count):
            if tag in _SEPARATELY_CHECKED:
                continue
            criteria = self.registry.list_for(tag)
            if not criteria:
                continue
            value = details[tag]
            if value is None:
                return False
            if not self._check_tag(tag, value, criteria):
                return False
        return True

    def eco_match(self, details: Details) -> bool:
        """Check just the ECO tag."""
        if not self.registry.has_criteria:
            return True
        criteria = self.registry.list_for(Tag.ECO)
        if not criteria:
            return True
        value = details[Tag.ECO] if len(details) > Tag.ECO else None
        if value is None:
            return False
        return check_list(Tag.ECO, value, criteria, self.config)

    def setup_gate(self, details: Details) -> bool:
        """Check the presence or absence of the SetUp tag.

        Raises:
            CriteriaError: If the configured gate mode is unknown.
        """
        gate = self.config.setup_gate
        if gate is SetupGate.ANY:
            return True
        has_setup = len(details) > Tag.SETUP and details[Tag.SETUP] is not None
        if gate is SetupGate.NO_SETUP:
            return not has_setup
        if gate is SetupGate.SETUP_ONLY:
            return has_setup
        raise CriteriaError(f"Unbekannter SetUp-Modus: {gate!r}")

    def position_match(self, details: Details) -> bool:
        """Check the game's starting position against any board patterns."""
        positions = self.registry.positions
        if not len(positions):
            return True
        fen = details[Tag.FEN] if len(details) > Tag.FEN else None
        return positions.matches(fen if fen is not None else INITIAL_BOARD)

    def select(self, game: Game) -> Selection:
        """Run a game through all checks in pipeline order.

        The reason names the first check that rejected the game.
        """
        details = self.registry.schema.details(game.headers)
        stages = (
            ('SETUP', self.setup_gate),
            ('TAGS', self.overall_match),
            ('ECO', self.eco_match),
            ('POSITION', self.position_match),
        )
        for reason, check in stages:
            if not check(details):
                return Selection(game=game, selected=False, reason=reason)
        return Selection(game=game, selected=True, reason='SELECTED')

    def select_games(self, games: Iterable[Game]) -> list[Selection]:
        """Select from a stream of games.

        Returns:
            One Selection per game, in input order.
        """
        results = [self.select(game) for game in games]
        selected = sum(1 for r in results if r.selected)
        log.info("%d von %d Partien ausgewaehlt", selected, len(results))
        return results

    def _check_tag(self, tag: int, value: str, criteria) -> bool:
        if tag == Tag.DATE:
            return check_date(value, criteria)
        if tag in (Tag.WHITE_ELO, Tag.BLACK_ELO):
            return check_elo(value, criteria)
        if tag == Tag.TIME_CONTROL:
            return check_time_control(value, criteria)
        return check_list(tag, value, criteria, self.config)

    @staticmethod
    def _either_side(
        details: Details,
        white_tag: Tag,
        black_tag: Tag,
        check: Callable[[int, str], bool],
    ) -> bool:
        white = details[white_tag]
        if white is not None and check(white_tag, white):
            return True
        black = details[black_tag]
        return black is not None and check(black_tag, black)
