"""Request-scoped dependencies shared by the routers."""
import logging

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from kanban.config import settings
from kanban.database import get_db
from kanban.models import User

logger = logging.getLogger(__name__)


def get_default_user(db: Session) -> User:
    """Get or create the single default user that stands in for authentication."""
    user = db.query(User).filter(User.email == settings.DEFAULT_USER_EMAIL).first()
    if user:
        return user

    user = User(name=settings.DEFAULT_USER_NAME, email=settings.DEFAULT_USER_EMAIL)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Another request created it first.
        db.rollback()
        return db.query(User).filter(User.email == settings.DEFAULT_USER_EMAIL).one()
    db.refresh(user)
    logger.info("Created default user %s", user.email)
    return user


def get_current_user(db: Session = Depends(get_db)) -> User:
    """Resolve the acting user. Replace this dependency to plug in real authentication."""
    return get_default_user(db)
