"""
Label and card-label association models
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from kanban.database import Base


class Label(Base):
    __tablename__ = "labels"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    color = Column(String(32), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    board = relationship("Board", back_populates="labels")
    card_labels = relationship("CardLabel", back_populates="label", cascade="all, delete", passive_deletes=True)


class CardLabel(Base):
    __tablename__ = "card_labels"

    card_id = Column(Integer, ForeignKey("cards.id", ondelete="CASCADE"), primary_key=True)
    label_id = Column(Integer, ForeignKey("labels.id", ondelete="CASCADE"), primary_key=True)

    # Relationships
    card = relationship("Card", back_populates="card_labels")
    label = relationship("Label", back_populates="card_labels")
