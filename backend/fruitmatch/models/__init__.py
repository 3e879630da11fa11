"""Data models package.

This package contains the tile catalog, board, level tables, result
descriptors and API schemas.
"""
from .tiles import (
    TileKind,
    Tile,
    Empty,
    EMPTY,
    Cell,
    TILE_CATALOG,
    get_tile_kind,
)
from .level import (
    LevelConfig,
    GeneratedLevel,
    LEVEL_TABLE,
)
from .board import Board
from .results import (
    SessionPhase,
    SelectResult,
    DeselectResult,
    SwitchResult,
    MatchResult,
    HintResult,
    NoMoreMovesResult,
    ShuffleResult,
    NextLevelResult,
    TimeTick,
    GameOverPayload,
    SessionState,
)
from .schemas import (
    RankingEntrySchema,
    RankingsResponse,
    ScoreSubmitRequest,
    ScoreSubmitResponse,
    MessageResponse,
)

__all__ = [
    # Tiles and board
    "TileKind",
    "Tile",
    "Empty",
    "EMPTY",
    "Cell",
    "TILE_CATALOG",
    "get_tile_kind",
    "Board",
    # Level models
    "LevelConfig",
    "GeneratedLevel",
    "LEVEL_TABLE",
    # Session results
    "SessionPhase",
    "SelectResult",
    "DeselectResult",
    "SwitchResult",
    "MatchResult",
    "HintResult",
    "NoMoreMovesResult",
    "ShuffleResult",
    "NextLevelResult",
    "TimeTick",
    "GameOverPayload",
    "SessionState",
    # API schemas
    "RankingEntrySchema",
    "RankingsResponse",
    "ScoreSubmitRequest",
    "ScoreSubmitResponse",
    "MessageResponse",
]
