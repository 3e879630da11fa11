"""Ranking API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...models.schemas import (
    MessageResponse,
    RankingEntrySchema,
    RankingsResponse,
    ScoreSubmitRequest,
    ScoreSubmitResponse,
)
from ...core.ranking import RankingStore
from ..deps import get_rankings

router = APIRouter(prefix="/api", tags=["rankings"])


@router.get("/rankings", response_model=RankingsResponse)
async def list_rankings(
    store: RankingStore = Depends(get_rankings),
) -> RankingsResponse:
    """
    Get the ranking board.

    Returns:
        RankingsResponse with entries sorted by score, best first.
    """
    return RankingsResponse(
        success=True,
        rankings=[RankingEntrySchema(**entry.to_dict()) for entry in store.list()],
    )


@router.post("/score", response_model=ScoreSubmitResponse)
async def submit_score(
    request: ScoreSubmitRequest,
    store: RankingStore = Depends(get_rankings),
) -> ScoreSubmitResponse:
    """
    Record a finished game.

    Args:
        request: ScoreSubmitRequest with nickname, score, level and time.
        store: RankingStore dependency.

    Returns:
        ScoreSubmitResponse with the stored entry and its rank.
    """
    if not request.nickname or not request.nickname.strip():
        raise HTTPException(status_code=400, detail="Nickname and score are required")

    entry, rank = store.add(
        nickname=request.nickname,
        score=request.score,
        level=request.level or 1,
        time=request.time or 0,
    )

    return ScoreSubmitResponse(
        success=True,
        rank=rank,
        entry=RankingEntrySchema(**entry.to_dict()),
    )


@router.delete("/rankings", response_model=MessageResponse)
async def clear_rankings(
    store: RankingStore = Depends(get_rankings),
) -> MessageResponse:
    """Reset the ranking board."""
    store.clear()
    return MessageResponse(success=True, message="Rankings cleared")
