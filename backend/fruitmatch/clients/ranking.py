"""Ranking API client used to submit finished games."""
import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from ..config import get_settings
from ..models.results import GameOverPayload

logger = logging.getLogger(__name__)


class RankingClient:
    """Client for the ranking HTTP API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize ranking client.

        Args:
            base_url: Ranking server URL (e.g., http://localhost:3000).
            timeout: Total request timeout in seconds.
        """
        settings = get_settings()
        self.base_url = (base_url or settings.ranking_api_url or "").rstrip("/")
        self.timeout = timeout if timeout is not None else settings.ranking_timeout

    @property
    def is_configured(self) -> bool:
        """Check if client is properly configured."""
        return bool(self.base_url)

    async def get_rankings(self) -> List[Dict[str, Any]]:
        """
        Fetch the ranking board.

        Returns:
            Entries sorted by score, or an empty list if the server cannot
            be reached.
        """
        if not self.is_configured:
            return []

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    f"{self.base_url}/api/rankings",
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        logger.warning("Ranking lookup failed with status %d", response.status)
                        return []
                    data = await response.json()
                    if not isinstance(data, dict) or not data.get("success"):
                        return []
                    rankings = data.get("rankings")
                    return rankings if isinstance(rankings, list) else []

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning("Ranking lookup failed: %s", e)
            return []

    async def submit_score(self, nickname: str, payload: GameOverPayload) -> Optional[int]:
        """
        Submit a finished game.

        Args:
            nickname: Player display name.
            payload: Game-over payload from the match session.

        Returns:
            1-based rank, or None if the rank is unknown (score off the
            board, server unconfigured, unreachable or failing).
        """
        if not self.is_configured:
            return None

        body = {"nickname": nickname, **payload.to_dict()}

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    f"{self.base_url}/api/score",
                    json=body,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        logger.warning(
                            "Score submission failed with status %d: %s",
                            response.status, await response.text(),
                        )
                        return None
                    data = await response.json()
                    if not isinstance(data, dict):
                        logger.warning("Unexpected score reply: %r", data)
                        return None
                    rank = data.get("rank")
                    return int(rank) if data.get("success") and rank else None

        except (aiohttp.ClientError, asyncio.TimeoutError, TypeError, ValueError) as e:
            logger.warning("Score submission failed: %s", e)
            return None


# Singleton instance
_client = None


def get_ranking_client() -> RankingClient:
    """Get or create ranking client singleton instance."""
    global _client
    if _client is None:
        _client = RankingClient()
    return _client


def update_ranking_client(base_url: str, timeout: Optional[float] = None) -> RankingClient:
    """Update ranking client with new configuration."""
    global _client
    _client = RankingClient(base_url=base_url, timeout=timeout)
    return _client
