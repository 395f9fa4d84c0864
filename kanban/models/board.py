"""
Board Model
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from kanban.database import Base


class Board(Base):
    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    is_favorite = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    columns = relationship(
        "BoardColumn",
        back_populates="board",
        cascade="all, delete",
        passive_deletes=True,
        order_by="BoardColumn.position",
    )
    labels = relationship("Label", back_populates="board", cascade="all, delete", passive_deletes=True)
    activity = relationship("ActivityLogEntry", back_populates="board", cascade="all, delete", passive_deletes=True)
