"""Utility helper functions."""
import random
from typing import List, Optional, Tuple, TypeVar

T = TypeVar("T")


def fisher_yates_shuffle(items: List[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Shuffle a list in place with the Fisher-Yates algorithm.

    Walks from the last index down to 1 and swaps each slot with a uniformly
    chosen slot in [0, i].

    Args:
        items: List to permute. Modified in place.
        rng: Random source. Pass a seeded ``random.Random`` for reproducible
            results; the module-level generator is used otherwise.

    Returns:
        The same list, for chaining.
    """
    rand = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = rand.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def index_to_position(index: int, cols: int) -> Tuple[int, int]:
    """Convert a flat board index to (row, col)."""
    return index // cols, index % cols


def position_to_index(row: int, col: int, cols: int) -> int:
    """Convert (row, col) to a flat board index."""
    return row * cols + col


def truncate_nickname(nickname: str, max_length: int = 20) -> str:
    """Strip surrounding whitespace and cut a display name to max_length."""
    return nickname.strip()[:max_length]
