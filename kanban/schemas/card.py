"""Schemas for cards"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from kanban.schemas.comment import CommentResponse
from kanban.schemas.label import LabelRef
from kanban.schemas.user import UserSummary


class CardCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)


class CardUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = Field(default=None, max_length=10000)
    due_date: Optional[datetime] = None
    assignee_id: Optional[int] = None
    # Setting a column (and optionally a position) moves the card.
    column_id: Optional[int] = None
    position: Optional[int] = Field(default=None, ge=0)


class CardReorder(BaseModel):
    card_ids: List[int] = Field(..., min_length=1)


class BoardCard(BaseModel):
    id: int
    column_id: int
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    assignee_id: Optional[int]
    position: int
    labels: List[LabelRef] = Field(default_factory=list)
    comment_count: int = 0

    class Config:
        from_attributes = True


class CardColumnRef(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class CardDetail(BaseModel):
    id: int
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    position: int
    created_at: datetime
    updated_at: datetime
    column: CardColumnRef
    assignee: Optional[UserSummary]
    labels: List[LabelRef] = Field(default_factory=list)
    comments: List[CommentResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True
