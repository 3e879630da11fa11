"""
Match session: the stateful engine behind one game.

The session owns the live board, the selection, score, combo, hint and
shuffle budgets and the countdown. Every player action returns a result
descriptor (or None when the action is not allowed) that a renderer applies
to the screen. Time is fed in through ``advance`` or the ``ticks`` async
generator; countdown ticks and the terminal game-over payload are published
on ``events``.
"""
import asyncio
import logging
import random
from typing import Any, AsyncIterator, Callable, List, Optional, Union

from ..models.board import Board
from ..models.results import (
    DeselectResult,
    GameOverPayload,
    HintResult,
    MatchResult,
    NextLevelResult,
    NoMoreMovesResult,
    SelectResult,
    SessionPhase,
    SessionState,
    ShuffleResult,
    SwitchResult,
    TimeTick,
)
from ..models.tiles import Tile
from ..utils.helpers import fisher_yates_shuffle
from .connectivity import can_connect
from .generator import LevelGenerator, get_generator
from .pair_finder import find_matchable_pairs, has_matchable_pair

logger = logging.getLogger(__name__)

SessionEvent = Union[TimeTick, GameOverPayload]
SelectOutcome = Union[SelectResult, DeselectResult, SwitchResult, MatchResult]

# Scoring
BASE_SCORE = 100
COMBO_STEP = 20
MAX_COMBO_STEPS = 10
LEVEL_BONUS = 10
TIME_BONUS_INTERVAL = 10
TIME_BONUS_PER_INTERVAL = 5
CLEAR_BONUS_PER_SECOND = 10

COMBO_WINDOW = 2
MIN_SHUFFLE_TILES = 4


def hints_for_level(level: int) -> int:
    """Hint budget for a level."""
    return max(1, 4 - level // 3)


def shuffles_for_level(level: int) -> int:
    """Shuffle budget for a level."""
    return max(1, 3 - level // 4)


def match_score(combo: int, level: int, time_left: int) -> int:
    """Points for one match with the given combo count (1 for the first)."""
    combo_bonus = min(combo - 1, MAX_COMBO_STEPS) * COMBO_STEP
    level_bonus = level * LEVEL_BONUS
    time_bonus = (time_left // TIME_BONUS_INTERVAL) * TIME_BONUS_PER_INTERVAL
    return BASE_SCORE + combo_bonus + level_bonus + time_bonus


def clear_bonus(time_left: int, level: int) -> int:
    """Bonus for clearing a level with time to spare."""
    return time_left * CLEAR_BONUS_PER_SECOND * level


class SessionEvents:
    """Publish/subscribe channel for session events."""

    def __init__(self):
        self._handlers: List[Callable[[SessionEvent], Any]] = []

    def subscribe(self, handler: Callable[[SessionEvent], Any]) -> Callable[[], None]:
        """
        Register a handler for ticks and the game-over payload.

        Returns:
            A callable that removes the handler again.
        """
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def publish(self, event: SessionEvent) -> None:
        for handler in list(self._handlers):
            handler(event)


class MatchSession:
    """Single-player match engine. Not thread-safe; drive it from one loop."""

    def __init__(
        self,
        generator: Optional[LevelGenerator] = None,
        rng: Optional[random.Random] = None,
        combo_window: int = COMBO_WINDOW,
    ):
        """
        Initialize session.

        Args:
            generator: Level generator. Defaults to the shared instance.
            rng: Random source for hints and shuffles.
            combo_window: Time units without a match before the combo resets.
        """
        self.generator = generator or get_generator()
        self.rng = rng or random.Random()
        self.combo_window = combo_window
        self.events = SessionEvents()
        self._timer_generation = 0
        self._timer_running = False
        self.reset()

    def reset(self) -> None:
        """Discard the board and all counters."""
        self.stop_timer()
        self.board: Optional[Board] = None
        self.level = 1
        self.score = 0
        self.time_left = 0
        self.time_limit = 0
        self.selected: Optional[Tile] = None
        self.hints = 0
        self.shuffles = 0
        self.combo = 0
        self._combo_idle = 0
        self.is_paused = False
        self.is_game_over = False
        self.matched_count = 0
        self.total_pairs = 0

    @property
    def cols(self) -> int:
        return self.board.cols if self.board else 0

    @property
    def rows(self) -> int:
        return self.board.rows if self.board else 0

    @property
    def phase(self) -> SessionPhase:
        if self.is_game_over:
            return SessionPhase.GAME_OVER
        if self.board is None:
            return SessionPhase.IDLE
        if self.is_paused:
            return SessionPhase.PAUSED
        if self.total_pairs and self.matched_count >= self.total_pairs:
            return SessionPhase.CLEARED
        return SessionPhase.PLAYING

    @property
    def timer_running(self) -> bool:
        return self._timer_running

    # ------------------------------------------------------------------
    # Game and level lifecycle
    # ------------------------------------------------------------------

    def start_game(self, level: int = 1) -> SessionState:
        """Start a new run from the given level."""
        self.reset()
        self.load_level(level)
        return self.get_state()

    def retry(self) -> SessionState:
        """Start over from level 1."""
        return self.start_game(1)

    def load_level(self, level: int) -> NextLevelResult:
        """Generate a fresh board for the level and restart the countdown."""
        generated = self.generator.generate(level)

        self.level = level
        self.board = Board.from_tiles(generated.cols, generated.rows, generated.tiles)
        self.time_limit = generated.time_limit
        self.time_left = generated.time_limit
        self.total_pairs = generated.pair_count
        self.matched_count = 0
        self.selected = None
        self.hints = hints_for_level(level)
        self.shuffles = shuffles_for_level(level)

        logger.info(
            "Loaded level %d: %dx%d board, %d pairs, %ds",
            level, generated.cols, generated.rows, self.total_pairs, self.time_limit,
        )
        self.start_timer()
        return self._level_result()

    def next_level(self) -> Optional[NextLevelResult]:
        """Advance to the next level. Score carries over."""
        if self.is_game_over:
            return None
        return self.load_level(self.level + 1)

    def _level_result(self) -> NextLevelResult:
        return NextLevelResult(
            level=self.level,
            board=self.board.snapshot(),
            cols=self.cols,
            rows=self.rows,
            time_limit=self.time_limit,
            hints=self.hints,
            shuffles=self.shuffles,
        )

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    def start_timer(self) -> None:
        """(Re)start the countdown. Running tick streams end."""
        self.stop_timer()
        self._timer_running = True

    def stop_timer(self) -> None:
        """Cancel the countdown."""
        self._timer_running = False
        self._timer_generation += 1

    def pause(self) -> bool:
        """Freeze the countdown and combo decay. Returns False if not playing."""
        if self.phase != SessionPhase.PLAYING:
            return False
        self.is_paused = True
        return True

    def resume(self) -> bool:
        """Unfreeze after pause. Returns False if not paused."""
        if not self.is_paused or self.is_game_over:
            return False
        self.is_paused = False
        return True

    def advance(self, units: int = 1) -> List[SessionEvent]:
        """
        Let time pass.

        Nothing moves while paused or after game over. The combo resets once
        ``combo_window`` units pass without a match. While the countdown
        runs each unit publishes a TimeTick; reaching zero ends the game.

        Returns:
            Events produced, in order.
        """
        produced: List[SessionEvent] = []
        if self.is_paused or self.is_game_over:
            return produced

        for _ in range(units):
            if self.combo:
                self._combo_idle += 1
                if self._combo_idle >= self.combo_window:
                    self.combo = 0
                    self._combo_idle = 0

            if not self._timer_running:
                continue

            self.time_left = max(0, self.time_left - 1)
            tick = TimeTick(self.time_left)
            produced.append(tick)
            self.events.publish(tick)

            if self.time_left <= 0:
                payload = self.game_over()
                if payload is not None:
                    produced.append(payload)
                break

        return produced

    async def ticks(self, period: float = 1.0) -> AsyncIterator[SessionEvent]:
        """
        Drive the countdown in real time.

        Sleeps ``period`` seconds per time unit and yields the events of each
        step. The stream ends when the timer is stopped or restarted, or the
        game ends; call it again after a new level starts.
        """
        generation = self._timer_generation
        while self._timer_running and generation == self._timer_generation:
            await asyncio.sleep(period)
            if generation != self._timer_generation:
                return
            for event in self.advance(1):
                yield event

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def _can_act(self) -> bool:
        return self.phase == SessionPhase.PLAYING

    def select_tile(self, index: int) -> Optional[SelectOutcome]:
        """
        Handle a click on a board cell.

        Clicking the selected tile releases it; with no selection the tile
        becomes selected. A second tile of a different kind, or of the same
        kind but without a clear path, takes over the selection. A second
        tile of the same kind with a clear path is matched.
        """
        if not self._can_act() or not 0 <= index < len(self.board):
            return None

        tile = self.board[index]
        if not isinstance(tile, Tile):
            return None

        if self.selected is not None and self.selected.index == index:
            self.selected = None
            return DeselectResult(index)

        if self.selected is None:
            self.selected = tile
            return SelectResult(index)

        first = self.selected
        if first.kind != tile.kind or not can_connect(
            self.board, self.board.position(first.index), self.board.position(index)
        ):
            self.selected = tile
            return SwitchResult(first.index, index)

        return self._match(first.index, index)

    def _match(self, index1: int, index2: int) -> MatchResult:
        self.board.remove_pair(index1, index2)
        self.selected = None
        self.matched_count += 1

        self.combo += 1
        self._combo_idle = 0

        points = match_score(self.combo, self.level, self.time_left)
        self.score += points

        result = MatchResult(
            indices=(index1, index2),
            score=points,
            combo=self.combo,
            total_score=self.score,
        )

        if self.matched_count >= self.total_pairs:
            result.level_clear = True
            result.time_bonus = clear_bonus(self.time_left, self.level)
            self.score += result.time_bonus
            result.total_score = self.score
            self.stop_timer()
            logger.info("Level %d cleared, time bonus %d", self.level, result.time_bonus)
        elif not has_matchable_pair(self.board):
            result.no_more_moves = True
            logger.info("No more moves on level %d", self.level)

        return result

    def use_hint(self) -> Optional[Union[HintResult, NoMoreMovesResult]]:
        """Reveal one random matchable pair, spending a hint."""
        if self.hints <= 0 or not self._can_act():
            return None

        pairs = find_matchable_pairs(self.board)
        if not pairs:
            return NoMoreMovesResult()

        self.hints -= 1
        first, second = self.rng.choice(pairs)
        return HintResult(indices=(first.index, second.index), hints_left=self.hints)

    def use_shuffle(self) -> Optional[ShuffleResult]:
        """
        Redistribute the remaining tiles over the occupied cells.

        The result is not guaranteed to have a matchable pair.
        """
        if self.shuffles <= 0 or not self._can_act():
            return None

        tiles = self.board.occupied_tiles()
        if len(tiles) < MIN_SHUFFLE_TILES:
            return None

        fisher_yates_shuffle(tiles, self.rng)
        self.board.rearrange(tiles)
        self.shuffles -= 1
        self.selected = None

        return ShuffleResult(board=self.board.snapshot(), shuffles_left=self.shuffles)

    def resolve_dead_lock(self) -> Optional[Union[ShuffleResult, GameOverPayload]]:
        """
        Get out of a board with no matchable pair.

        Shuffles when a shuffle is left, otherwise ends the game. Does
        nothing if the board still has a move.
        """
        if not self._can_act() or has_matchable_pair(self.board):
            return None

        shuffled = self.use_shuffle()
        if shuffled is not None:
            return shuffled
        return self.game_over()

    def quit(self) -> Optional[GameOverPayload]:
        """End the run at the player's request."""
        return self.game_over()

    def game_over(self) -> Optional[GameOverPayload]:
        """
        End the run.

        Only the first call has an effect: it stops the timer and publishes
        the payload for the scoring service.
        """
        if self.is_game_over:
            return None

        self.is_game_over = True
        self.is_paused = False
        self.selected = None
        self.stop_timer()

        payload = GameOverPayload(
            score=self.score,
            level=self.level,
            time=max(0, self.time_limit - self.time_left),
        )
        logger.info("Game over: score=%d level=%d time=%d", payload.score, payload.level, payload.time)
        self.events.publish(payload)
        return payload

    def get_state(self) -> SessionState:
        """Snapshot for display."""
        return SessionState(
            board=self.board.snapshot() if self.board else [],
            cols=self.cols,
            rows=self.rows,
            level=self.level,
            score=self.score,
            time_left=self.time_left,
            time_limit=self.time_limit,
            hints=self.hints,
            shuffles=self.shuffles,
            combo=self.combo,
            is_paused=self.is_paused,
            is_game_over=self.is_game_over,
            matched_count=self.matched_count,
            total_pairs=self.total_pairs,
            phase=self.phase,
        )
