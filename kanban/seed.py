"""Populate the database with a demo board for local development.

Safe to run repeatedly: every table is emptied before inserting.

Usage: python -m kanban.seed
"""
import logging
from datetime import datetime, timedelta

from kanban.database import Base, SessionLocal, engine, transaction
from kanban.models import ActivityAction, Board, BoardColumn, CardLabel, Comment, Label, User
from kanban.services import activity, cards, moves

logger = logging.getLogger(__name__)

COLUMNS = [
    ("Backlog", None),
    ("To Do", None),
    ("In Progress", 3),
    ("Review", 2),
    ("Done", None),
]

LABELS = [
    ("Bug", "#ef4444"),
    ("Feature", "#3b82f6"),
    ("Urgent", "#f97316"),
    ("Design", "#a855f7"),
    ("Docs", "#22c55e"),
]

# Cards are listed top to bottom; create_card puts each new card on top.
CARDS = {
    "Backlog": ["Dark mode", "Export board as CSV", "Keyboard shortcuts"],
    "To Do": ["Write onboarding guide", "Fix login redirect loop"],
    "In Progress": ["Drag and drop between columns", "Activity feed"],
    "Review": ["Label picker"],
    "Done": ["Project scaffolding", "Database schema"],
}


def seed() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    with SessionLocal() as db, transaction(db):
        alice = User(name="Alice Chen", email="alice@example.com")
        bob = User(name="Bob Martinez", email="bob@example.com")
        carol = User(name="Carol Kim", email="carol@example.com")
        db.add_all([alice, bob, carol])

        board = Board(
            name="Project Alpha",
            description="A demo kanban board with sample tasks for local development.",
            is_favorite=True,
        )
        db.add(board)
        db.flush()

        columns = {}
        for position, (name, wip_limit) in enumerate(COLUMNS):
            columns[name] = BoardColumn(board_id=board.id, name=name, position=position, wip_limit=wip_limit)
        db.add_all(columns.values())

        labels = {name: Label(board_id=board.id, name=name, color=color) for name, color in LABELS}
        db.add_all(labels.values())
        db.flush()

        created = {}
        for column_name, titles in CARDS.items():
            for title in reversed(titles):
                created[title] = cards.create_card(db, columns[column_name].id, title, actor_id=alice.id)

        created["Fix login redirect loop"].assignee_id = bob.id
        created["Fix login redirect loop"].due_date = datetime.utcnow() + timedelta(days=3)
        created["Activity feed"].assignee_id = carol.id
        db.add_all(
            [
                CardLabel(card_id=created["Fix login redirect loop"].id, label_id=labels["Bug"].id),
                CardLabel(card_id=created["Fix login redirect loop"].id, label_id=labels["Urgent"].id),
                CardLabel(card_id=created["Drag and drop between columns"].id, label_id=labels["Feature"].id),
                CardLabel(card_id=created["Label picker"].id, label_id=labels["Design"].id),
                CardLabel(card_id=created["Write onboarding guide"].id, label_id=labels["Docs"].id),
            ]
        )

        feed = created["Activity feed"]
        for author, content in [
            (bob, "Should moves between columns show up here too?"),
            (alice, "Yes, every move records the source and destination column."),
        ]:
            db.add(Comment(card_id=feed.id, author_id=author.id, content=content))
            activity.record(
                db,
                board_id=board.id,
                action=ActivityAction.COMMENT_ADDED,
                metadata=activity.comment_preview(content),
                card_id=feed.id,
                user_id=author.id,
            )

        moves.move_card(db, created["Label picker"].id, columns["Done"].id, 0, actor_id=carol.id)

    logger.info("Seeded board 'Project Alpha' with %d cards", len(created))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    seed()


if __name__ == "__main__":
    main()
