"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class RankingEntrySchema(BaseModel):
    """A single ranking entry."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Entry identifier")
    nickname: str = Field(..., max_length=20, description="Player display name")
    score: int = Field(..., ge=0, description="Final score")
    level: int = Field(..., ge=1, description="Level reached")
    time: int = Field(..., ge=0, description="Seconds played on the last level")
    created_at: str = Field(..., alias="createdAt", description="ISO 8601 timestamp")


class RankingsResponse(BaseModel):
    """Response schema for the ranking list."""
    success: bool = Field(default=True, description="Whether the lookup succeeded")
    rankings: List[RankingEntrySchema] = Field(default=[], description="Entries, best first")


class ScoreSubmitRequest(BaseModel):
    """Request schema for score submission."""
    nickname: str = Field(default="", description="Player display name (cut to 20 chars)")
    score: int = Field(..., ge=0, description="Final score")
    level: Optional[int] = Field(default=1, ge=1, description="Level reached")
    time: Optional[int] = Field(default=0, ge=0, description="Seconds played on the last level")


class ScoreSubmitResponse(BaseModel):
    """Response schema for score submission."""
    success: bool = Field(..., description="Whether the score was recorded")
    rank: Optional[int] = Field(default=None, ge=1, description="1-based rank, None if off the board")
    entry: RankingEntrySchema = Field(..., description="Stored entry")


class MessageResponse(BaseModel):
    """Generic status response."""
    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(default="", description="Status message")
