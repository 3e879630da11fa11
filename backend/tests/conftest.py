"""Shared fixtures: boards and sessions built from text grids.

Each character of a grid row is one cell: ``.`` is empty, any other letter is
a tile whose kind is the catalog entry at ``ord(letter) - ord('A')``.
"""
import random
from typing import Dict, List, Sequence

import pytest

from fruitmatch.core.generator import LevelGenerator
from fruitmatch.core.session import MatchSession
from fruitmatch.models.board import Board
from fruitmatch.models.level import GeneratedLevel
from fruitmatch.models.tiles import Tile, TILE_CATALOG


def tiles_from_rows(rows: Sequence[str]) -> List[Tile]:
    """Tiles for a text grid, pairing same letters in reading order."""
    cols = len(rows[0])
    seen: Dict[str, int] = {}
    tiles = []
    for r, line in enumerate(rows):
        assert len(line) == cols, "grid rows must have equal length"
        for c, char in enumerate(line):
            if char == ".":
                continue
            occurrence = seen.get(char, 0)
            seen[char] = occurrence + 1
            kind_index = ord(char) - ord("A")
            pair_id = kind_index * 100 + occurrence // 2
            tiles.append(Tile(kind=TILE_CATALOG[kind_index], pair_id=pair_id, index=r * cols + c))
    return tiles


def board_from_rows(rows: Sequence[str]) -> Board:
    """Board for a text grid."""
    return Board.from_tiles(len(rows[0]), len(rows), tiles_from_rows(rows))


class FixedGenerator(LevelGenerator):
    """Generator that always lays out the same grid."""

    def __init__(self, rows: Sequence[str], time_limit: int = 40):
        super().__init__(rng=random.Random(0))
        self.rows = list(rows)
        self.time_limit = time_limit

    def generate(self, level: int) -> GeneratedLevel:
        return GeneratedLevel(
            level=level,
            tiles=tiles_from_rows(self.rows),
            cols=len(self.rows[0]),
            rows=len(self.rows),
            time_limit=self.time_limit,
        )


@pytest.fixture
def make_board():
    """Factory fixture for text-grid boards."""
    return board_from_rows


@pytest.fixture
def make_session():
    """Factory fixture for a started session on a text-grid board."""
    def _make(rows: Sequence[str], time_limit: int = 40, level: int = 1) -> MatchSession:
        session = MatchSession(generator=FixedGenerator(rows, time_limit), rng=random.Random(1))
        session.start_game(level)
        return session
    return _make


# Dead-locked unless a neighbour of an A is removed: both A tiles are boxed
# in by tiles of kinds that appear only once.
WALLED_PAIR = [
    "BCDEF",
    "GAHAI",
    "JKLMN",
]


@pytest.fixture
def walled_rows():
    """Grid whose only pair is boxed in."""
    return list(WALLED_PAIR)
