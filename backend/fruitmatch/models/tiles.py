"""Tile kinds, placed tiles and the empty cell marker."""
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True)
class TileKind:
    """A type of tile. Two tiles match only if their kinds are equal."""
    id: str
    glyph: str
    category: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "icon": self.glyph, "category": self.category}


@dataclass(frozen=True)
class Tile:
    """A tile placed on a board cell."""
    kind: TileKind
    pair_id: int
    index: int

    def moved_to(self, index: int) -> "Tile":
        """Return a copy of this tile placed at another cell."""
        return Tile(kind=self.kind, pair_id=self.pair_id, index=index)

    def to_dict(self, cols: int) -> Dict[str, Any]:
        """Convert to dictionary, including (row, col) for the given width."""
        data = self.kind.to_dict()
        data.update({
            "pairId": self.pair_id,
            "index": self.index,
            "row": self.index // cols,
            "col": self.index % cols,
        })
        return data


class Empty:
    """Marker for a cell that holds no tile."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False


EMPTY = Empty()

Cell = Union[Tile, Empty]


# 32 kinds; levels use a prefix of this tuple.
TILE_CATALOG: Tuple[TileKind, ...] = (
    TileKind("apple", "🍎", "fruit"),
    TileKind("green_apple", "🍏", "fruit"),
    TileKind("orange", "🍊", "fruit"),
    TileKind("tangerine", "🍋", "fruit"),
    TileKind("banana", "🍌", "fruit"),
    TileKind("watermelon", "🍉", "fruit"),
    TileKind("grape", "🍇", "fruit"),
    TileKind("strawberry", "🍓", "fruit"),
    TileKind("blueberry", "🫐", "fruit"),
    TileKind("melon", "🍈", "fruit"),
    TileKind("cherry", "🍒", "fruit"),
    TileKind("peach", "🍑", "fruit"),
    TileKind("mango", "🥭", "fruit"),
    TileKind("pineapple", "🍍", "fruit"),
    TileKind("coconut", "🥥", "fruit"),
    TileKind("kiwi", "🥝", "fruit"),
    TileKind("tomato", "🍅", "vegetable"),
    TileKind("avocado", "🥑", "vegetable"),
    TileKind("eggplant", "🍆", "vegetable"),
    TileKind("carrot", "🥕", "vegetable"),
    TileKind("corn", "🌽", "vegetable"),
    TileKind("pepper", "🌶️", "vegetable"),
    TileKind("broccoli", "🥦", "vegetable"),
    TileKind("mushroom", "🍄", "vegetable"),
    TileKind("chestnut", "🌰", "nut"),
    TileKind("peanut", "🥜", "nut"),
    TileKind("honey", "🍯", "pantry"),
    TileKind("bread", "🍞", "pantry"),
    TileKind("cheese", "🧀", "pantry"),
    TileKind("egg", "🥚", "pantry"),
    TileKind("cookie", "🍪", "sweet"),
    TileKind("cake", "🍰", "sweet"),
)


def get_tile_kind(kind_id: str) -> TileKind:
    """Look up a catalog kind by id."""
    for kind in TILE_CATALOG:
        if kind.id == kind_id:
            return kind
    raise KeyError(f"Unknown tile kind: {kind_id}")
