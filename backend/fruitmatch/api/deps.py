"""API dependencies."""
from ..core.ranking import get_ranking_store, RankingStore


def get_rankings() -> RankingStore:
    """Dependency for the ranking store."""
    return get_ranking_store()
