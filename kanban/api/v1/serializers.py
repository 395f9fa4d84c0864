"""ORM → response schema conversion shared by the v1 routers."""
from kanban.config import settings
from kanban.models import Board, Card, Comment
from kanban.schemas import (
    BoardCard,
    BoardResponse,
    CardColumnRef,
    CardDetail,
    ColumnResponse,
    ColumnWithCards,
    CommentResponse,
    LabelRef,
    UserSummary,
)


def comment_is_edited(comment: Comment) -> bool:
    if comment.created_at is None or comment.updated_at is None:
        return False
    gap = (comment.updated_at - comment.created_at).total_seconds()
    return gap > settings.COMMENT_EDIT_TOLERANCE_SECONDS


def serialize_comment(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        card_id=comment.card_id,
        content=comment.content,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        is_edited=comment_is_edited(comment),
        author=UserSummary.model_validate(comment.author),
    )


def _card_labels(card: Card):
    return [LabelRef.model_validate(link.label) for link in card.card_labels]


def serialize_board_card(card: Card) -> BoardCard:
    return BoardCard(
        id=card.id,
        column_id=card.column_id,
        title=card.title,
        description=card.description,
        due_date=card.due_date,
        assignee_id=card.assignee_id,
        position=card.position,
        labels=_card_labels(card),
        comment_count=len(card.comments),
    )


def serialize_card_detail(card: Card) -> CardDetail:
    return CardDetail(
        id=card.id,
        title=card.title,
        description=card.description,
        due_date=card.due_date,
        position=card.position,
        created_at=card.created_at,
        updated_at=card.updated_at,
        column=CardColumnRef.model_validate(card.column),
        assignee=UserSummary.model_validate(card.assignee) if card.assignee else None,
        labels=_card_labels(card),
        comments=[serialize_comment(comment) for comment in card.comments],
    )


def serialize_board(board: Board) -> BoardResponse:
    columns = []
    for column in board.columns:
        column_data = ColumnResponse.model_validate(column).model_dump()
        columns.append(
            ColumnWithCards(**column_data, cards=[serialize_board_card(card) for card in column.cards])
        )

    return BoardResponse(
        id=board.id,
        name=board.name,
        description=board.description,
        is_favorite=board.is_favorite,
        created_at=board.created_at,
        updated_at=board.updated_at,
        columns=columns,
        labels=[LabelRef.model_validate(label) for label in board.labels],
    )
