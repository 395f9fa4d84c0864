"""Version 1 of the HTTP API."""
from fastapi import APIRouter

from kanban.api.v1 import boards, cards, columns, comments, labels, users

api_router = APIRouter()
api_router.include_router(boards.router)
api_router.include_router(columns.router)
api_router.include_router(cards.router)
api_router.include_router(labels.router)
api_router.include_router(comments.router)
api_router.include_router(users.router)
