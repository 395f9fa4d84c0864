"""Schemas for labels"""
from pydantic import BaseModel, Field


class LabelCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    color: str = Field(..., min_length=1, max_length=32)


class LabelUpdate(LabelCreate):
    pass


class LabelRef(BaseModel):
    id: int
    name: str
    color: str

    class Config:
        from_attributes = True


class LabelResponse(LabelRef):
    board_id: int


class CardLabelToggleResponse(BaseModel):
    card_id: int
    label_id: int
    attached: bool
