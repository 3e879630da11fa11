"""Automatic player for measuring how playable generated levels are."""
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.results import ShuffleResult, SessionPhase
from .pair_finder import find_matchable_pairs
from .session import MatchSession

logger = logging.getLogger(__name__)

STRATEGIES = ("first", "random")


@dataclass
class AutoplayResult:
    """Outcome of one level played by the bot."""
    level: int
    cleared: bool
    matches: int
    shuffles_used: int
    score: int
    time_left: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "cleared": self.cleared,
            "matches": self.matches,
            "shuffles_used": self.shuffles_used,
            "score": self.score,
            "time_left": self.time_left,
        }


@dataclass
class AutoplayRun:
    """A whole run: levels played until game over or the level cap."""
    levels: List[AutoplayResult] = field(default_factory=list)

    @property
    def final_score(self) -> int:
        return self.levels[-1].score if self.levels else 0

    @property
    def levels_cleared(self) -> int:
        return sum(1 for result in self.levels if result.cleared)


class AutoPlayer:
    """Plays a session by always matching an available pair."""

    def __init__(
        self,
        strategy: str = "first",
        rng: Optional[random.Random] = None,
        seconds_per_move: int = 1,
    ):
        """
        Initialize player.

        Args:
            strategy: "first" takes the first pair found, "random" any pair.
            rng: Random source for the "random" strategy.
            seconds_per_move: Time units that pass after each match.
        """
        if strategy not in STRATEGIES:
            raise ValueError(f"Invalid strategy. Must be one of: {list(STRATEGIES)}")
        self.strategy = strategy
        self.rng = rng or random.Random()
        self.seconds_per_move = seconds_per_move

    def play_level(self, session: MatchSession) -> AutoplayResult:
        """Play the session's current level until it is cleared or lost."""
        matches = 0
        shuffles_used = 0

        while session.phase == SessionPhase.PLAYING:
            pairs = find_matchable_pairs(session.board)
            if not pairs:
                outcome = session.resolve_dead_lock()
                if isinstance(outcome, ShuffleResult):
                    shuffles_used += 1
                continue

            first, second = pairs[0] if self.strategy == "first" else self.rng.choice(pairs)
            session.select_tile(first.index)
            session.select_tile(second.index)
            matches += 1

            if session.phase == SessionPhase.PLAYING and self.seconds_per_move:
                session.advance(self.seconds_per_move)

        result = AutoplayResult(
            level=session.level,
            cleared=session.phase == SessionPhase.CLEARED,
            matches=matches,
            shuffles_used=shuffles_used,
            score=session.score,
            time_left=session.time_left,
        )
        logger.debug("Autoplay level %d: %s", session.level, result.to_dict())
        return result

    def play_run(self, session: MatchSession, max_level: int = 10) -> AutoplayRun:
        """Start a game and keep advancing until it ends or max_level is cleared."""
        run = AutoplayRun()
        session.start_game(1)

        while True:
            result = self.play_level(session)
            run.levels.append(result)
            if not result.cleared or session.level >= max_level:
                break
            session.next_level()

        if not session.is_game_over:
            session.game_over()
        return run
