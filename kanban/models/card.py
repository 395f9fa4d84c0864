"""
Card Model
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from kanban.database import Base


class Card(Base):
    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    column_id = Column(Integer, ForeignKey("columns.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime(timezone=True), nullable=True)
    assignee_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    position = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    column = relationship("BoardColumn", back_populates="cards")
    assignee = relationship("User", back_populates="assigned_cards")
    card_labels = relationship("CardLabel", back_populates="card", cascade="all, delete", passive_deletes=True)
    comments = relationship(
        "Comment",
        back_populates="card",
        cascade="all, delete",
        passive_deletes=True,
        order_by="Comment.created_at",
    )
    activity = relationship("ActivityLogEntry", back_populates="card", cascade="all, delete", passive_deletes=True)

    __table_args__ = (
        UniqueConstraint("column_id", "position", name="uq_cards_column_position"),
    )
