"""
Pydantic models for sports matches.

A match pairs two team names with a free‑form score string such as
``"2-2"``.  As with users, the models only document the usual shape;
posted matches are stored and broadcast exactly as sent.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MatchBase(BaseModel):
    id: Optional[int] = Field(None, examples=[3])
    team1: Optional[str] = Field(None, examples=["Team E"])
    team2: Optional[str] = Field(None, examples=["Team F"])
    score: Optional[str] = Field(None, examples=["2-2"], description="Score as '<team1>-<team2>'")

    model_config = {"extra": "allow"}


class MatchCreate(MatchBase):
    """Schema for adding a new sports match."""


class MatchRead(MatchBase):
    """Schema for a match as echoed back and broadcast to realtime clients."""
