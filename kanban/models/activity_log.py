"""Append-only audit trail of card and comment mutations"""
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from kanban.database import Base


class ActivityAction(str, enum.Enum):
    CARD_CREATED = "card.created"
    CARD_MOVED = "card.moved"
    CARD_UPDATED = "card.updated"
    CARD_DELETED = "card.deleted"
    COMMENT_ADDED = "comment.added"


class ActivityLogEntry(Base):
    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False)
    card_id = Column(Integer, ForeignKey("cards.id", ondelete="CASCADE"), nullable=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    # Stored as the plain string value so the column stays readable outside Python.
    action = Column(String(32), nullable=False)
    # ``metadata`` is reserved on declarative classes.
    meta = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    board = relationship("Board", back_populates="activity")
    card = relationship("Card", back_populates="activity")
    user = relationship("User")

    __table_args__ = (
        Index("ix_activity_log_board_created", "board_id", "created_at"),
        Index("ix_activity_log_card", "card_id"),
    )
