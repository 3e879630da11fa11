"""Level generator: board size, tile multiset and time limit per level."""
import random
from typing import Dict, List, Optional, Sequence

from ..models.level import (
    GeneratedLevel,
    LevelConfig,
    LEVEL_TABLE,
    MAX_TABLE_LEVEL,
    MIN_TIME_LIMIT,
    TIME_LIMIT_STEP,
)
from ..models.tiles import Tile, TileKind, TILE_CATALOG
from ..utils.helpers import fisher_yates_shuffle


class LevelGenerator:
    """Generates a shuffled, fully paired tile layout for a level."""

    def __init__(
        self,
        catalog: Sequence[TileKind] = TILE_CATALOG,
        level_table: Optional[Dict[int, LevelConfig]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize generator.

        Args:
            catalog: Tile kinds, in the order levels draw from them.
            level_table: Per-level configuration for levels 1..MAX_TABLE_LEVEL.
            rng: Random source for the tile permutation. Seed it for
                reproducible boards.
        """
        self.catalog = tuple(catalog)
        self.level_table = dict(level_table or LEVEL_TABLE)
        self.rng = rng or random.Random()

    def get_level_config(self, level: int) -> LevelConfig:
        """
        Get the configuration for a level.

        Levels beyond the table reuse the last entry; only the time limit
        keeps shrinking, down to MIN_TIME_LIMIT.

        Raises:
            ValueError: If level is below 1.
        """
        if level < 1:
            raise ValueError(f"Level must be >= 1, got {level}")

        top = min(level, MAX_TABLE_LEVEL)
        config = self.level_table[top]
        if level > MAX_TABLE_LEVEL:
            time_limit = max(
                MIN_TIME_LIMIT,
                config.time_limit - (level - MAX_TABLE_LEVEL) * TIME_LIMIT_STEP,
            )
            config = LevelConfig(
                cols=config.cols,
                rows=config.rows,
                tile_types=config.tile_types,
                time_limit=time_limit,
            )
        return config

    def generate(self, level: int) -> GeneratedLevel:
        """
        Generate the tiles for a level.

        Pair i uses catalog kind ``i % tile_types`` so kinds are spread as
        evenly as possible. Tiles are shuffled and laid out row-major; an odd
        trailing cell is left empty.

        Args:
            level: Level number, 1 or above.

        Returns:
            GeneratedLevel with tiles indexed 0..2*pair_count-1.
        """
        config = self.get_level_config(level)
        kinds = self.catalog[:config.tile_types]
        if not kinds:
            raise ValueError("Tile catalog is empty")

        drawn: List[TileKind] = []
        pair_ids: List[int] = []
        for pair_id in range(config.pair_count):
            kind = kinds[pair_id % len(kinds)]
            drawn.extend((kind, kind))
            pair_ids.extend((pair_id, pair_id))

        order = fisher_yates_shuffle(list(range(len(drawn))), self.rng)
        tiles = [
            Tile(kind=drawn[src], pair_id=pair_ids[src], index=dst)
            for dst, src in enumerate(order)
        ]

        return GeneratedLevel(
            level=level,
            tiles=tiles,
            cols=config.cols,
            rows=config.rows,
            time_limit=config.time_limit,
            tile_types=len(kinds),
        )


# Singleton instance
_generator = None


def get_generator() -> LevelGenerator:
    """Get or create generator singleton instance."""
    global _generator
    if _generator is None:
        _generator = LevelGenerator()
    return _generator
