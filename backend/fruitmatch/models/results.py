"""Result descriptors and events produced by a match session."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class SessionPhase(str, Enum):
    """Match session lifecycle phase."""
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    CLEARED = "cleared"
    GAME_OVER = "game_over"


@dataclass
class SelectResult:
    """A tile became the current selection."""
    index: int
    action: str = field(default="select", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"action": self.action, "index": self.index}


@dataclass
class DeselectResult:
    """The selected tile was clicked again and released."""
    index: int
    action: str = field(default="deselect", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"action": self.action, "index": self.index}


@dataclass
class SwitchResult:
    """Selection moved from one tile to another without a match."""
    from_index: int
    to_index: int
    action: str = field(default="switch", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"action": self.action, "from": self.from_index, "to": self.to_index}


@dataclass
class MatchResult:
    """Two tiles were matched and removed."""
    indices: Tuple[int, int]
    score: int
    combo: int
    total_score: int
    level_clear: bool = False
    time_bonus: Optional[int] = None
    no_more_moves: bool = False
    action: str = field(default="match", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary. Optional flags appear only when set."""
        data: Dict[str, Any] = {
            "action": self.action,
            "indices": list(self.indices),
            "score": self.score,
            "combo": self.combo,
            "totalScore": self.total_score,
        }
        if self.level_clear:
            data["levelClear"] = True
            data["timeBonus"] = self.time_bonus
        if self.no_more_moves:
            data["noMoreMoves"] = True
        return data


@dataclass
class HintResult:
    """A connectable pair to highlight. Does not change the board."""
    indices: Tuple[int, int]
    hints_left: int
    action: str = field(default="hint", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"action": self.action, "indices": list(self.indices), "hintsLeft": self.hints_left}


@dataclass
class NoMoreMovesResult:
    """No connectable pair is left on the board."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"noMoreMoves": True}


@dataclass
class ShuffleResult:
    """Remaining tiles were redistributed."""
    board: List[Optional[Dict[str, Any]]]
    shuffles_left: int
    action: str = field(default="shuffle", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"action": self.action, "board": self.board, "shufflesLeft": self.shuffles_left}


@dataclass
class NextLevelResult:
    """A new level was loaded."""
    level: int
    board: List[Optional[Dict[str, Any]]]
    cols: int
    rows: int
    time_limit: int
    hints: int
    shuffles: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "board": self.board,
            "cols": self.cols,
            "rows": self.rows,
            "timeLimit": self.time_limit,
            "hints": self.hints,
            "shuffles": self.shuffles,
        }


@dataclass(frozen=True)
class TimeTick:
    """Countdown event, one per elapsed time unit."""
    time_left: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"event": "tick", "timeLeft": self.time_left}


@dataclass(frozen=True)
class GameOverPayload:
    """Terminal event handed to the scoring service."""
    score: int
    level: int
    time: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"score": self.score, "level": self.level, "time": self.time}


@dataclass
class SessionState:
    """Read-only snapshot of a match session for display."""
    board: List[Optional[Dict[str, Any]]]
    cols: int
    rows: int
    level: int
    score: int
    time_left: int
    time_limit: int
    hints: int
    shuffles: int
    combo: int
    is_paused: bool
    is_game_over: bool
    matched_count: int
    total_pairs: int
    phase: SessionPhase

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "board": self.board,
            "cols": self.cols,
            "rows": self.rows,
            "level": self.level,
            "score": self.score,
            "timeLeft": self.time_left,
            "timeLimit": self.time_limit,
            "hints": self.hints,
            "shuffles": self.shuffles,
            "combo": self.combo,
            "isPaused": self.is_paused,
            "isGameOver": self.is_game_over,
            "matchedCount": self.matched_count,
            "totalPairs": self.total_pairs,
            "phase": self.phase.value,
        }
