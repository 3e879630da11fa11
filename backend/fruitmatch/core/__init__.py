"""Core game logic package.

This package contains level generation, path connectivity, pair search,
the match session engine, the automatic player and ranking storage.
"""
from .generator import LevelGenerator, get_generator
from .connectivity import can_connect, find_path
from .pair_finder import find_matchable_pairs, has_matchable_pair
from .session import MatchSession, SessionEvents
from .autoplay import AutoPlayer, AutoplayResult
from .ranking import (
    RankingStore,
    MemoryRankingStore,
    JsonFileRankingStore,
    get_ranking_store,
)

__all__ = [
    "LevelGenerator",
    "get_generator",
    "can_connect",
    "find_path",
    "find_matchable_pairs",
    "has_matchable_pair",
    "MatchSession",
    "SessionEvents",
    "AutoPlayer",
    "AutoplayResult",
    "RankingStore",
    "MemoryRankingStore",
    "JsonFileRankingStore",
    "get_ranking_store",
]
