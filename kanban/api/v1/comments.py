"""Card comment endpoints"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, selectinload

from kanban.database import get_db, transaction
from kanban.dependencies import get_current_user
from kanban.errors import AuthorizationError, ValidationError
from kanban.models import ActivityAction, Comment, User
from kanban.schemas import CommentCreate, CommentResponse, CommentUpdate
from kanban.services import activity
from kanban.services.loaders import load_card, load_comment
from kanban.api.v1.serializers import serialize_comment

router = APIRouter(tags=["comments"])


def _ensure_author(comment: Comment, current_user: User) -> None:
    if comment.author_id != current_user.id:
        raise AuthorizationError("Only the author can change this comment")


@router.get("/cards/{card_id}/comments", response_model=List[CommentResponse])
def list_comments(card_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    load_card(db, card_id)
    comments = (
        db.query(Comment)
        .options(selectinload(Comment.author))
        .filter(Comment.card_id == card_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )
    return [serialize_comment(comment) for comment in comments]


@router.post("/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    comment_in: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add a comment to a card and record it in the board's activity."""
    content = comment_in.content.strip()
    if not content:
        raise ValidationError("Comment content cannot be empty")

    with transaction(db):
        card = load_card(db, comment_in.card_id)
        comment = Comment(card_id=card.id, author_id=current_user.id, content=content)
        db.add(comment)
        activity.record(
            db,
            board_id=card.column.board_id,
            action=ActivityAction.COMMENT_ADDED,
            metadata=activity.comment_preview(content),
            card_id=card.id,
            user_id=current_user.id,
        )
    db.refresh(comment)
    return serialize_comment(comment)


@router.patch("/comments/{comment_id}", response_model=CommentResponse)
def update_comment(
    comment_id: int,
    comment_in: CommentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    with transaction(db):
        comment = load_comment(db, comment_id)
        _ensure_author(comment, current_user)
        content = comment_in.content.strip()
        if not content:
            raise ValidationError("Comment content cannot be empty")
        comment.content = content
    db.refresh(comment)
    return serialize_comment(comment)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(comment_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    with transaction(db):
        comment = load_comment(db, comment_id)
        _ensure_author(comment, current_user)
        db.delete(comment)
