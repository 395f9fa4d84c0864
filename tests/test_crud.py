from datetime import datetime

import pytest
from sqlalchemy.orm import Session

import kanban.api.v1.boards as board_routes
import kanban.api.v1.cards as card_routes
import kanban.api.v1.columns as column_routes
import kanban.api.v1.comments as comment_routes
import kanban.api.v1.labels as label_routes
import kanban.api.v1.users as user_routes
import kanban.models as models
import kanban.schemas as schemas
from kanban.database import transaction
from kanban.errors import AuthorizationError, NotFoundError, StorageFault, ValidationError
from tests.helpers import card_titles, column_names


def test_create_board_with_default_columns(db_session: Session, make_board):
    board = make_board("Roadmap")

    assert board.name == "Roadmap"
    assert board.is_favorite is False
    assert [(column.name, column.position) for column in board.columns] == [
        ("To Do", 0),
        ("In Progress", 1),
        ("Done", 2),
    ]
    assert all(column.cards == [] for column in board.columns)


def test_rename_favorite_and_describe_board(db_session: Session, user, make_board):
    board = make_board()

    renamed = board_routes.rename_board(board.id, schemas.BoardRename(name="Renamed"), db_session, user)
    favorite = board_routes.toggle_favorite(board.id, db_session, user)
    described = board_routes.update_board_description(
        board.id, schemas.BoardDescriptionUpdate(description="Q3 work"), db_session, user
    )

    assert renamed.name == "Renamed"
    assert favorite.is_favorite is True
    assert described.description == "Q3 work"
    assert board_routes.toggle_favorite(board.id, db_session, user).is_favorite is False
    assert [summary.name for summary in board_routes.list_boards(db_session, user)] == ["Renamed"]


def test_missing_board_is_not_found(db_session: Session, user):
    with pytest.raises(NotFoundError):
        board_routes.get_board(404, db_session, user)


def test_new_column_is_appended(db_session: Session, user, make_board):
    board = make_board()

    column = column_routes.create_column(board.id, schemas.ColumnCreate(name="Review"), db_session, user)

    assert column.position == 3
    assert column_names(db_session, board.id)[-1] == ("Review", 3)


def test_wip_limit_blank_or_zero_means_unlimited(db_session: Session, user, make_board):
    board = make_board()
    column_id = board.columns[1].id

    def set_limit(value):
        return column_routes.update_wip_limit(column_id, schemas.WipLimitUpdate(wip_limit=value), db_session, user)

    assert set_limit(3).wip_limit == 3
    assert set_limit("").wip_limit is None
    assert set_limit(5).wip_limit == 5
    assert set_limit(0).wip_limit is None

    with pytest.raises(ValueError):
        schemas.WipLimitUpdate(wip_limit=-1)


def test_delete_column_closes_gap(db_session: Session, user, make_board, make_cards):
    board = make_board()
    todo, doing = board.columns[0].id, board.columns[1].id
    make_cards(doing, "gone")

    column_routes.delete_column(doing, None, db_session, user)

    assert column_names(db_session, board.id) == [("To Do", 0), ("Done", 1)]
    assert db_session.query(models.Card).count() == 0
    assert db_session.get(models.BoardColumn, todo) is not None


def test_delete_column_moves_cards_to_end_of_target(db_session: Session, user, make_board, make_cards):
    board = make_board()
    todo, doing, done = (column.id for column in board.columns)
    make_cards(todo, "t1")
    make_cards(doing, "d1", "d2")

    column_routes.delete_column(doing, todo, db_session, user)

    assert column_names(db_session, board.id) == [("To Do", 0), ("Done", 1)]
    assert card_titles(db_session, todo) == [("t1", 0), ("d1", 1), ("d2", 2)]
    moved = (
        db_session.query(models.ActivityLogEntry)
        .filter(models.ActivityLogEntry.action == models.ActivityAction.CARD_MOVED.value)
        .all()
    )
    assert len(moved) == 2
    assert all(entry.meta == {"fromColumn": "In Progress", "toColumn": "To Do"} for entry in moved)


def test_delete_column_rejects_bad_rescue_target(db_session: Session, user, make_board, make_cards):
    board = make_board("One")
    other = make_board("Two")
    doing = board.columns[1].id
    make_cards(doing, "keep")

    with pytest.raises(ValidationError):
        column_routes.delete_column(doing, other.columns[0].id, db_session, user)
    with pytest.raises(ValidationError):
        column_routes.delete_column(doing, doing, db_session, user)

    assert card_titles(db_session, doing) == [("keep", 0)]
    assert len(column_names(db_session, board.id)) == 3


def test_new_card_goes_on_top(db_session: Session, user, make_board):
    board = make_board()
    todo = board.columns[0].id

    first = card_routes.create_card(todo, schemas.CardCreate(title="first"), db_session, user)
    second = card_routes.create_card(todo, schemas.CardCreate(title="second"), db_session, user)

    assert first.position == 0
    assert second.position == 0
    assert second.column.name == "To Do"
    assert card_titles(db_session, todo) == [("second", 0), ("first", 1)]


def test_delete_card_closes_gap(db_session: Session, user, make_board, make_cards):
    board = make_board()
    todo = board.columns[0].id
    c1, c2, c3 = make_cards(todo, "c1", "c2", "c3")

    card_routes.delete_card(c2.id, db_session, user)

    assert card_titles(db_session, todo) == [("c1", 0), ("c3", 1)]
    with pytest.raises(NotFoundError):
        card_routes.get_card(c2.id, db_session, user)


def test_update_card_rejects_unknown_assignee(db_session: Session, user, make_board, make_cards):
    board = make_board()
    (card,) = make_cards(board.columns[0].id, "Nobody")

    with pytest.raises(ValidationError):
        card_routes.update_card(card.id, schemas.CardUpdate(assignee_id=4242), db_session, user)

    assert card_routes.get_card(card.id, db_session, user).assignee is None


def test_deleting_card_removes_its_dependents(db_session: Session, user, make_board, make_cards):
    board = make_board()
    todo = board.columns[0].id
    (card,) = make_cards(todo, "Doomed")
    label = label_routes.create_label(board.id, schemas.LabelCreate(name="Bug", color="#ef4444"), db_session, user)
    card_routes.toggle_card_label(card.id, label.id, db_session, user)
    comment_routes.create_comment(schemas.CommentCreate(card_id=card.id, content="Bye"), db_session, user)

    card_routes.delete_card(card.id, db_session, user)

    assert db_session.query(models.Comment).count() == 0
    assert db_session.query(models.CardLabel).count() == 0
    assert db_session.query(models.ActivityLogEntry).filter(models.ActivityLogEntry.card_id == card.id).count() == 0
    assert db_session.get(models.BoardColumn, todo) is not None
    assert db_session.get(models.Label, label.id) is not None


def test_deleting_board_removes_everything_under_it(db_session: Session, user, make_board, make_cards):
    board = make_board()
    keep = make_board("Keep")
    (card,) = make_cards(board.columns[0].id, "Doomed")
    label_routes.create_label(board.id, schemas.LabelCreate(name="Bug", color="#ef4444"), db_session, user)
    comment_routes.create_comment(schemas.CommentCreate(card_id=card.id, content="Bye"), db_session, user)

    board_routes.delete_board(board.id, db_session, user)

    assert db_session.query(models.Board).count() == 1
    assert db_session.query(models.BoardColumn).filter(models.BoardColumn.board_id == board.id).count() == 0
    assert db_session.query(models.Card).count() == 0
    assert db_session.query(models.Label).count() == 0
    assert db_session.query(models.Comment).count() == 0
    assert db_session.query(models.ActivityLogEntry).count() == 0
    assert len(column_names(db_session, keep.id)) == 3


def test_toggle_label(db_session: Session, user, make_board, make_cards):
    board = make_board()
    (card,) = make_cards(board.columns[0].id, "Tagged")
    label = label_routes.create_label(board.id, schemas.LabelCreate(name="Urgent", color="#f97316"), db_session, user)

    assert card_routes.toggle_card_label(card.id, label.id, db_session, user).attached is True
    assert [ref.name for ref in card_routes.get_card(card.id, db_session, user).labels] == ["Urgent"]
    assert card_routes.toggle_card_label(card.id, label.id, db_session, user).attached is False
    assert card_routes.get_card(card.id, db_session, user).labels == []


def test_label_from_another_board_cannot_be_attached(db_session: Session, user, make_board, make_cards):
    board = make_board("One")
    other = make_board("Two")
    (card,) = make_cards(board.columns[0].id, "Tagged")
    foreign = label_routes.create_label(other.id, schemas.LabelCreate(name="Bug", color="#ef4444"), db_session, user)

    with pytest.raises(ValidationError):
        card_routes.toggle_card_label(card.id, foreign.id, db_session, user)

    assert db_session.query(models.CardLabel).count() == 0


def test_delete_label_detaches_it(db_session: Session, user, make_board, make_cards):
    board = make_board()
    (card,) = make_cards(board.columns[0].id, "Tagged")
    label = label_routes.create_label(board.id, schemas.LabelCreate(name="Docs", color="#22c55e"), db_session, user)
    card_routes.toggle_card_label(card.id, label.id, db_session, user)

    label_routes.delete_label(label.id, db_session, user)

    assert label_routes.list_labels(board.id, db_session, user) == []
    assert card_routes.get_card(card.id, db_session, user).labels == []


def test_only_author_can_change_comment(db_session: Session, user, other_user, make_board, make_cards):
    board = make_board()
    (card,) = make_cards(board.columns[0].id, "Discuss")
    created = comment_routes.create_comment(
        schemas.CommentCreate(card_id=card.id, content="Mine"), db_session, other_user
    )

    with pytest.raises(AuthorizationError):
        comment_routes.update_comment(created.id, schemas.CommentUpdate(content="Hijacked"), db_session, user)
    with pytest.raises(AuthorizationError):
        comment_routes.delete_comment(created.id, db_session, user)

    assert [comment.content for comment in comment_routes.list_comments(card.id, db_session, user)] == ["Mine"]

    comment_routes.delete_comment(created.id, db_session, other_user)
    assert comment_routes.list_comments(card.id, db_session, user) == []


def test_blank_comment_is_rejected(db_session: Session, user, make_board, make_cards):
    board = make_board()
    (card,) = make_cards(board.columns[0].id, "Discuss")

    with pytest.raises(ValidationError):
        comment_routes.create_comment(schemas.CommentCreate(card_id=card.id, content="   "), db_session, user)

    assert db_session.query(models.Comment).count() == 0


def test_comment_is_edited_only_after_tolerance(db_session: Session, user, make_board, make_cards):
    board = make_board()
    (card,) = make_cards(board.columns[0].id, "Discuss")
    created = comment_routes.create_comment(
        schemas.CommentCreate(card_id=card.id, content="First take"), db_session, user
    )
    assert created.is_edited is False

    quick = comment_routes.update_comment(created.id, schemas.CommentUpdate(content="Typo fix"), db_session, user)
    assert quick.is_edited is False

    comment = db_session.get(models.Comment, created.id)
    comment.created_at = datetime(2020, 1, 1)
    db_session.commit()

    later = comment_routes.update_comment(created.id, schemas.CommentUpdate(content="Second take"), db_session, user)
    assert later.content == "Second take"
    assert later.is_edited is True


def test_deleting_user_clears_their_traces(db_session: Session, user, other_user, make_board, make_cards):
    board = make_board()
    (card,) = make_cards(board.columns[0].id, "Handover")
    card_routes.update_card(card.id, schemas.CardUpdate(assignee_id=other_user.id), db_session, other_user)
    comment_routes.create_comment(schemas.CommentCreate(card_id=card.id, content="On it"), db_session, other_user)
    other_id = other_user.id

    user_routes.delete_user(other_id, db_session, user)

    assert card_routes.get_card(card.id, db_session, user).assignee is None
    assert db_session.query(models.Comment).count() == 0
    assert db_session.query(models.ActivityLogEntry).filter(models.ActivityLogEntry.user_id == other_id).count() == 0
    assert db_session.query(models.ActivityLogEntry).filter(models.ActivityLogEntry.user_id.is_(None)).count() == 2

    with pytest.raises(NotFoundError):
        user_routes.delete_user(other_id, db_session, user)


def test_duplicate_email_is_rejected(db_session: Session, user):
    created = user_routes.create_user(schemas.UserCreate(name="Carol", email="carol@example.com"), db_session, user)
    assert created.email == "carol@example.com"

    with pytest.raises(ValidationError):
        user_routes.create_user(schemas.UserCreate(name="Carol 2", email="carol@example.com"), db_session, user)

    assert [member.name for member in user_routes.list_users(db_session, user)] == ["Carol", "You"]


def test_storage_errors_become_storage_fault(db_session: Session, user):
    with pytest.raises(StorageFault):
        with transaction(db_session):
            db_session.add(models.User(name="Clone", email=user.email))

    assert db_session.query(models.User).count() == 1
