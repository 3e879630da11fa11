"""Tests for level generator, board model and shuffle helper."""
import random
from collections import Counter

import pytest

from fruitmatch.core.generator import LevelGenerator, get_generator
from fruitmatch.models.board import Board
from fruitmatch.models.level import LevelConfig, LEVEL_TABLE
from fruitmatch.models.tiles import EMPTY, TILE_CATALOG, Tile
from fruitmatch.utils.helpers import fisher_yates_shuffle


@pytest.fixture
def generator():
    """Create a seeded generator instance."""
    return LevelGenerator(rng=random.Random(12345))


class LowestRandom:
    """Random stand-in that always picks the lower bound."""

    def randint(self, a, b):
        return a


class TestFisherYates:
    """Test cases for the shuffle primitive."""

    def test_swaps_from_the_end(self):
        """With j always 0, each step swaps slot i with slot 0."""
        items = [0, 1, 2, 3]

        fisher_yates_shuffle(items, LowestRandom())

        assert items == [1, 2, 3, 0]

    def test_seeded_shuffle_is_reproducible(self):
        """Same seed, same permutation."""
        first = fisher_yates_shuffle(list(range(20)), random.Random(7))
        second = fisher_yates_shuffle(list(range(20)), random.Random(7))

        assert first == second
        assert sorted(first) == list(range(20))

    def test_short_lists(self):
        """Empty and single-item lists are returned unchanged."""
        assert fisher_yates_shuffle([], random.Random(1)) == []
        assert fisher_yates_shuffle(["x"], random.Random(1)) == ["x"]


class TestLevelConfig:
    """Test cases for level configuration lookup."""

    def test_table_levels(self, generator):
        """Levels 1-10 come straight from the table."""
        for level in range(1, 11):
            assert generator.get_level_config(level) == LEVEL_TABLE[level]

    def test_first_level(self, generator):
        """Level 1 is a 6x4 board with 10 kinds and 45 seconds."""
        config = generator.get_level_config(1)

        assert (config.cols, config.rows, config.tile_types, config.time_limit) == (6, 4, 10, 45)

    def test_levels_beyond_table_shrink_time(self, generator):
        """Past level 10 only the time limit changes, 5 less per level."""
        assert generator.get_level_config(11).time_limit == 85
        assert generator.get_level_config(12).time_limit == 80

        config = generator.get_level_config(15)
        top = LEVEL_TABLE[10]
        assert (config.cols, config.rows, config.tile_types) == (top.cols, top.rows, top.tile_types)

    def test_time_limit_floor(self, generator):
        """The time limit never drops below 30."""
        assert generator.get_level_config(22).time_limit == 30
        assert generator.get_level_config(50).time_limit == 30

    def test_invalid_level(self, generator):
        """Levels below 1 are rejected."""
        with pytest.raises(ValueError):
            generator.get_level_config(0)


class TestLevelGenerator:
    """Test cases for LevelGenerator."""

    @pytest.mark.parametrize("level", list(range(1, 16)))
    def test_generated_tiles_are_paired(self, generator, level):
        """Even tile count, every pair id twice, everything fits the board."""
        result = generator.generate(level)
        pair_counts = Counter(tile.pair_id for tile in result.tiles)

        assert len(result.tiles) % 2 == 0
        assert all(count == 2 for count in pair_counts.values())
        assert result.cols * result.rows >= len(result.tiles)
        assert result.pair_count == len(result.tiles) // 2

    def test_pairs_share_a_kind(self, generator):
        """Both tiles of a pair have the same kind."""
        result = generator.generate(4)
        kinds = {}
        for tile in result.tiles:
            kinds.setdefault(tile.pair_id, set()).add(tile.kind)

        assert all(len(kind_set) == 1 for kind_set in kinds.values())

    def test_tiles_laid_out_row_major(self, generator):
        """Tile k sits at index k."""
        result = generator.generate(2)

        assert [tile.index for tile in result.tiles] == list(range(len(result.tiles)))

    def test_kind_usage_is_even(self, generator):
        """Kinds are drawn from the first tile_types catalog entries, cycling."""
        result = generator.generate(1)
        per_kind = Counter(tile.kind.id for tile in result.tiles)
        allowed = {kind.id for kind in TILE_CATALOG[:10]}

        assert set(per_kind) <= allowed
        assert len(per_kind) == 10
        assert max(per_kind.values()) - min(per_kind.values()) <= 2

    def test_odd_board_leaves_last_cell_empty(self):
        """A 3x3 board holds four pairs; the ninth cell is never filled."""
        generator = LevelGenerator(
            level_table={1: LevelConfig(cols=3, rows=3, tile_types=2, time_limit=20)},
            rng=random.Random(3),
        )

        result = generator.generate(1)
        board = Board.from_tiles(result.cols, result.rows, result.tiles)

        assert len(result.tiles) == 8
        assert board[8] is EMPTY

    def test_seeded_generation_is_reproducible(self):
        """Two generators with the same seed lay out the same board."""
        first = LevelGenerator(rng=random.Random(5)).generate(3)
        second = LevelGenerator(rng=random.Random(5)).generate(3)

        assert [t.kind.id for t in first.tiles] == [t.kind.id for t in second.tiles]

    def test_to_dict(self, generator):
        """Serialized level carries the board shape and tiles."""
        data = generator.generate(1).to_dict()

        assert data["cols"] == 6
        assert data["rows"] == 4
        assert data["timeLimit"] == 45
        assert len(data["tiles"]) == 24
        assert {"id", "icon", "pairId", "index", "row", "col"} <= set(data["tiles"][0])

    def test_singleton(self):
        """get_generator returns the same instance."""
        assert get_generator() is get_generator()


class TestBoard:
    """Test cases for the board model."""

    def test_positions(self):
        """Flat index and (row, col) convert both ways."""
        board = Board(cols=4, rows=3)

        assert board.position(6) == (1, 2)
        assert board.index_of(1, 2) == 6
        assert board.cell_at(-1, 0) is EMPTY

    def test_remove_pair(self, make_board):
        """Removing a pair empties both cells and bumps the version."""
        board = make_board(["A.A"])
        version = board.version

        board.remove_pair(0, 2)

        assert board.remaining == 0
        assert board.version == version + 1

    def test_remove_rejects_different_kinds(self, make_board):
        """Two different kinds are not a pair."""
        board = make_board(["AB"])

        with pytest.raises(ValueError):
            board.remove_pair(0, 1)

    def test_remove_across_pairs_keeps_pairs_whole(self, make_board):
        """Matching tiles from two pairs of one kind re-pairs the leftovers."""
        board = make_board(["AAAA"])
        # pair ids in reading order: 0, 0, 1, 1
        board.remove_pair(1, 2)

        left = board.occupied_tiles()
        assert [tile.index for tile in left] == [0, 3]
        assert left[0].pair_id == left[1].pair_id

    def test_rearrange_keeps_empty_cells(self, make_board):
        """Rearranged tiles only land on occupied cells."""
        board = make_board(["A.B", "B.A"])
        tiles = list(reversed(board.occupied_tiles()))

        board.rearrange(tiles)

        assert board[1] is EMPTY and board[4] is EMPTY
        assert [t.index for t in board.occupied_tiles()] == [0, 2, 3, 5]
        assert board[0].kind == TILE_CATALOG[0]

    def test_rearrange_rejects_wrong_count(self, make_board):
        """Tile count must match the occupied cells."""
        board = make_board(["A.A"])

        with pytest.raises(ValueError):
            board.rearrange([Tile(kind=TILE_CATALOG[0], pair_id=0, index=0)])

    def test_snapshot(self, make_board):
        """Empty cells serialize to None."""
        board = make_board(["A."])

        snapshot = board.snapshot()

        assert snapshot[1] is None
        assert snapshot[0]["id"] == TILE_CATALOG[0].id
