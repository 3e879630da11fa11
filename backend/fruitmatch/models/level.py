"""Level data models and structures."""
from dataclasses import dataclass, field
from typing import Dict, List, Any

from .tiles import Tile


@dataclass(frozen=True)
class LevelConfig:
    """Board shape, kind variety and time limit for one level."""
    cols: int
    rows: int
    tile_types: int
    time_limit: int

    @property
    def pair_count(self) -> int:
        """Number of pairs that fit; an odd trailing cell stays empty."""
        return (self.cols * self.rows) // 2


@dataclass
class GeneratedLevel:
    """Result of level generation."""
    level: int
    tiles: List[Tile]
    cols: int
    rows: int
    time_limit: int
    tile_types: int = 0
    pair_count: int = field(init=False)

    def __post_init__(self):
        self.pair_count = len(self.tiles) // 2

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "tiles": [tile.to_dict(self.cols) for tile in self.tiles],
            "cols": self.cols,
            "rows": self.rows,
            "timeLimit": self.time_limit,
            "tileTypes": self.tile_types,
            "pairCount": self.pair_count,
        }


# Levels 1-10. Higher levels reuse level 10 with a shrinking time limit.
LEVEL_TABLE: Dict[int, LevelConfig] = {
    1: LevelConfig(cols=6, rows=4, tile_types=10, time_limit=45),
    2: LevelConfig(cols=6, rows=5, tile_types=12, time_limit=50),
    3: LevelConfig(cols=7, rows=5, tile_types=14, time_limit=55),
    4: LevelConfig(cols=7, rows=6, tile_types=16, time_limit=60),
    5: LevelConfig(cols=8, rows=6, tile_types=18, time_limit=65),
    6: LevelConfig(cols=8, rows=7, tile_types=20, time_limit=70),
    7: LevelConfig(cols=9, rows=7, tile_types=22, time_limit=75),
    8: LevelConfig(cols=9, rows=8, tile_types=24, time_limit=80),
    9: LevelConfig(cols=10, rows=8, tile_types=26, time_limit=85),
    10: LevelConfig(cols=10, rows=9, tile_types=28, time_limit=90),
}

MAX_TABLE_LEVEL = 10
MIN_TIME_LIMIT = 30
TIME_LIMIT_STEP = 5
