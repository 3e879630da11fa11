"""
Connectivity resolver.

Two tiles connect when a path of empty cells joins them with at most two
bends. Cells outside the board are always passable, so paths may run along
the ring one cell beyond each edge. Positions are (row, col) tuples.
"""
from typing import List, Optional, Tuple

from ..models.board import Board
from ..models.tiles import Tile

Position = Tuple[int, int]


def is_empty_or_outside(board: Board, pos: Position) -> bool:
    """True if pos is off the board or holds no tile."""
    row, col = pos
    if not board.in_bounds(row, col):
        return True
    return not isinstance(board.cell_at(row, col), Tile)


def can_connect_straight(board: Board, pos1: Position, pos2: Position) -> bool:
    """
    Check a straight segment between two positions.

    Only the cells strictly between the ends are inspected. Positions that
    share neither a row nor a column never connect straight.
    """
    (r1, c1), (r2, c2) = pos1, pos2

    if r1 == r2:
        for col in range(min(c1, c2) + 1, max(c1, c2)):
            if not is_empty_or_outside(board, (r1, col)):
                return False
        return True

    if c1 == c2:
        for row in range(min(r1, r2) + 1, max(r1, r2)):
            if not is_empty_or_outside(board, (row, c1)):
                return False
        return True

    return False


def _one_corner_path(board: Board, pos1: Position, pos2: Position) -> Optional[List[Position]]:
    for corner in ((pos1[0], pos2[1]), (pos2[0], pos1[1])):
        if (
            is_empty_or_outside(board, corner)
            and can_connect_straight(board, pos1, corner)
            and can_connect_straight(board, corner, pos2)
        ):
            return [pos1, corner, pos2]
    return None


def _two_corner_path(board: Board, pos1: Position, pos2: Position) -> Optional[List[Position]]:
    (r1, c1), (r2, c2) = pos1, pos2
    candidates = [((r1, col), (r2, col)) for col in range(-1, board.cols + 1)]
    candidates += [((row, c1), (row, c2)) for row in range(-1, board.rows + 1)]

    for corner1, corner2 in candidates:
        if not (is_empty_or_outside(board, corner1) and is_empty_or_outside(board, corner2)):
            continue
        if (
            can_connect_straight(board, pos1, corner1)
            and can_connect_straight(board, corner1, corner2)
            and can_connect_straight(board, corner2, pos2)
        ):
            return [pos1, corner1, corner2, pos2]
    return None


def can_connect_one_corner(board: Board, pos1: Position, pos2: Position) -> bool:
    """Check for an L-shaped path through (r1, c2) or (r2, c1)."""
    return _one_corner_path(board, pos1, pos2) is not None


def can_connect_two_corners(board: Board, pos1: Position, pos2: Position) -> bool:
    """Check for a path with two bends, sweeping columns then rows."""
    return _two_corner_path(board, pos1, pos2) is not None


def find_path(board: Board, pos1: Position, pos2: Position) -> Optional[List[Position]]:
    """
    Find a connecting path between two board positions.

    Returns:
        Waypoints from pos1 to pos2 (endpoints plus 0-2 corners), or None if
        the positions do not connect.
    """
    if pos1 == pos2:
        return None
    if not (board.in_bounds(*pos1) and board.in_bounds(*pos2)):
        return None

    if can_connect_straight(board, pos1, pos2):
        return [pos1, pos2]
    return _one_corner_path(board, pos1, pos2) or _two_corner_path(board, pos1, pos2)


def can_connect(board: Board, pos1: Position, pos2: Position) -> bool:
    """
    Decide whether two board positions connect with at most two bends.

    Identical positions and positions off the board never connect.
    """
    return find_path(board, pos1, pos2) is not None
