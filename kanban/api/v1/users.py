"""User endpoints"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from kanban.database import get_db, transaction
from kanban.dependencies import get_current_user
from kanban.errors import NotFoundError, ValidationError
from kanban.models import User
from kanban.schemas import UserCreate, UserResponse

router = APIRouter(tags=["users"])


@router.get("/users/me", response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user


@router.get("/users", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return db.query(User).order_by(User.name.asc()).all()


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    with transaction(db):
        user = User(name=user_in.name, email=user_in.email, avatar_url=user_in.avatar_url)
        db.add(user)
        try:
            db.flush()
        except IntegrityError as exc:
            # Enforced by the unique index on email, so concurrent creates are covered too.
            raise ValidationError("Email already registered") from exc
    db.refresh(user)
    return user


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    """Delete a user: their comments go, their assignments and activity attribution are cleared."""
    with transaction(db):
        user = db.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        db.delete(user)
