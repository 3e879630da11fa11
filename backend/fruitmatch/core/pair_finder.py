"""Enumerate connectable same-kind pairs on a board."""
from typing import List, Tuple

from ..models.board import Board
from ..models.tiles import Tile
from .connectivity import can_connect

TilePair = Tuple[Tile, Tile]


def find_matchable_pairs(board: Board) -> List[TilePair]:
    """
    Find every pair of same-kind tiles that can currently be matched.

    Pairs come out in scan order: the first tile is the one with the lower
    index. An empty list means the board is dead-locked.
    """
    tiles = board.occupied_tiles()
    pairs: List[TilePair] = []

    for i, first in enumerate(tiles):
        for second in tiles[i + 1:]:
            if first.kind != second.kind:
                continue
            if can_connect(board, board.position(first.index), board.position(second.index)):
                pairs.append((first, second))

    return pairs


def has_matchable_pair(board: Board) -> bool:
    """True as soon as one matchable pair is found."""
    tiles = board.occupied_tiles()
    for i, first in enumerate(tiles):
        for second in tiles[i + 1:]:
            if first.kind == second.kind and can_connect(
                board, board.position(first.index), board.position(second.index)
            ):
                return True
    return False
