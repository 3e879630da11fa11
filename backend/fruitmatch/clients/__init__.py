"""External service clients package.

This package contains the client for the ranking service.
"""
from .ranking import (
    RankingClient,
    get_ranking_client,
    update_ranking_client,
)

__all__ = [
    "RankingClient",
    "get_ranking_client",
    "update_ranking_client",
]
