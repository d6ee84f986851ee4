"""Todos Routes — list/create/delete over the shared TodoStore.

Invariants:
    - The store comes from app.state via get_todo_store (one per app instance)
    - DELETE of an unknown id → RESOURCE_NOT_FOUND (404)

Design Decisions:
    - Store injected with Depends: tests get a fresh list per app, no module globals
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from crud_api.schemas.todo import Todo, TodoCreate, TodoDeleteResponse
from crud_api.services.todo_store import TodoStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/todos", tags=["todos"])


def get_todo_store(request: Request) -> TodoStore:
    return request.app.state.todo_store


@router.get("", response_model=list[Todo])
async def get_todos(store: TodoStore = Depends(get_todo_store)):
    """Snapshot of the current list, in creation order."""
    return await store.list_todos()


@router.post(
    "", response_model=Todo, status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    body: TodoCreate, store: TodoStore = Depends(get_todo_store),
):
    return await store.create_todo(body.title)


@router.delete("/{todo_id}", response_model=TodoDeleteResponse)
async def delete_todo(
    todo_id: str, store: TodoStore = Depends(get_todo_store),
):
    await store.delete_todo(todo_id)
    return TodoDeleteResponse(message="Todo deleted successfully")
