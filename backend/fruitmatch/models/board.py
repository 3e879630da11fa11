"""Board model: a row-major grid of cells owned by one match session."""
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .tiles import Cell, EMPTY, Tile
from ..utils.helpers import index_to_position, position_to_index


class Board:
    """
    Row-major sequence of ``cols * rows`` cells.

    Every cell is either a Tile or EMPTY. ``version`` increases on each
    mutation so callers can tell snapshots apart.
    """

    def __init__(self, cols: int, rows: int, cells: Optional[Sequence[Cell]] = None):
        if cols < 1 or rows < 1:
            raise ValueError(f"Board dimensions must be positive, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        if cells is None:
            self._cells: List[Cell] = [EMPTY] * (cols * rows)
        else:
            if len(cells) != cols * rows:
                raise ValueError(
                    f"Expected {cols * rows} cells for a {cols}x{rows} board, got {len(cells)}"
                )
            self._cells = list(cells)
        self.version = 0

    @classmethod
    def from_tiles(cls, cols: int, rows: int, tiles: Sequence[Tile]) -> "Board":
        """Build a board with each tile placed at its own index."""
        board = cls(cols, rows)
        for tile in tiles:
            if not 0 <= tile.index < cols * rows:
                raise ValueError(f"Tile index {tile.index} outside {cols}x{rows} board")
            board._cells[tile.index] = tile
        return board

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def position(self, index: int) -> Tuple[int, int]:
        """(row, col) of a flat index."""
        return index_to_position(index, self.cols)

    def index_of(self, row: int, col: int) -> int:
        """Flat index of (row, col)."""
        return position_to_index(row, col, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        """Cell at (row, col); positions off the board read as EMPTY."""
        if not self.in_bounds(row, col):
            return EMPTY
        return self._cells[self.index_of(row, col)]

    def is_empty(self, index: int) -> bool:
        return not isinstance(self._cells[index], Tile)

    def occupied_tiles(self) -> List[Tile]:
        """Tiles in board order."""
        return [cell for cell in self._cells if isinstance(cell, Tile)]

    @property
    def remaining(self) -> int:
        return sum(1 for cell in self._cells if isinstance(cell, Tile))

    def remove_pair(self, index1: int, index2: int) -> None:
        """
        Remove two same-kind tiles in one step.

        The tiles may come from different pairs when a kind is used by more
        than one pair. In that case the two orphaned partners are re-paired
        under the first tile's pair id, so every pair id left on the board
        still appears exactly twice.
        """
        first, second = self._cells[index1], self._cells[index2]
        if not isinstance(first, Tile) or not isinstance(second, Tile):
            raise ValueError(f"Cannot remove empty cell ({index1}, {index2})")
        if index1 == index2 or first.kind != second.kind:
            raise ValueError(f"Cells {index1} and {index2} do not hold a matching pair")

        if first.pair_id != second.pair_id:
            for i, cell in enumerate(self._cells):
                if isinstance(cell, Tile) and cell.pair_id == second.pair_id and i != index2:
                    self._cells[i] = Tile(kind=cell.kind, pair_id=first.pair_id, index=i)
                    break

        self._cells[index1] = EMPTY
        self._cells[index2] = EMPTY
        self.version += 1

    def rearrange(self, tiles: Sequence[Tile]) -> None:
        """
        Put the given tiles onto the currently occupied cells, in board order.

        Empty cells stay empty. Each tile is re-indexed to its new cell.
        """
        slots = [i for i, cell in enumerate(self._cells) if isinstance(cell, Tile)]
        if len(slots) != len(tiles):
            raise ValueError(
                f"Rearrange needs {len(slots)} tiles, got {len(tiles)}"
            )
        for slot, tile in zip(slots, tiles):
            self._cells[slot] = tile.moved_to(slot)
        self.version += 1

    def snapshot(self) -> List[Optional[Dict[str, Any]]]:
        """Cells as plain data for renderers; empty cells become None."""
        return [
            cell.to_dict(self.cols) if isinstance(cell, Tile) else None
            for cell in self._cells
        ]
