"""Schemas for boards"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from kanban.schemas.column import ColumnWithCards
from kanban.schemas.label import LabelRef


class BoardCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)


class BoardRename(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class BoardDescriptionUpdate(BaseModel):
    description: str = Field(..., max_length=500)


class BoardSummary(BaseModel):
    id: int
    name: str
    description: Optional[str]
    is_favorite: bool
    updated_at: datetime

    class Config:
        from_attributes = True


class BoardResponse(BoardSummary):
    created_at: datetime
    columns: List[ColumnWithCards] = Field(default_factory=list)
    labels: List[LabelRef] = Field(default_factory=list)
