"""Schemas for board columns"""
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from kanban.schemas.card import BoardCard


class ColumnCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ColumnRename(ColumnCreate):
    pass


class WipLimitUpdate(BaseModel):
    wip_limit: Optional[Union[int, str]] = None

    @field_validator("wip_limit")
    @classmethod
    def _blank_or_zero_means_unlimited(cls, value):
        if value is None or value == "":
            return None
        value = int(value)
        if value < 0:
            raise ValueError("WIP limit cannot be negative")
        return value or None


class ColumnReorder(BaseModel):
    column_ids: List[int] = Field(..., min_length=1)


class ColumnRef(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class ColumnResponse(ColumnRef):
    board_id: int
    position: int
    wip_limit: Optional[int]
    created_at: datetime
    updated_at: datetime


class ColumnWithCards(ColumnResponse):
    cards: List[BoardCard] = Field(default_factory=list)
