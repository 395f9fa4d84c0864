"""Schemas for card comments"""
from datetime import datetime

from pydantic import BaseModel, Field

from kanban.schemas.user import UserSummary


class CommentCreate(BaseModel):
    card_id: int
    content: str = Field(..., min_length=1, max_length=10000)


class CommentUpdate(BaseModel):
    content: str = Field(..., min_length=1, max_length=10000)


class CommentResponse(BaseModel):
    id: int
    card_id: int
    content: str
    created_at: datetime
    updated_at: datetime
    is_edited: bool
    author: UserSummary

    class Config:
        from_attributes = True
