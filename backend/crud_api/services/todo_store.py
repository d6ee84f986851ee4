"""Todo Store — the todos service's single shared, lock-guarded list.

Invariants:
    - One TodoStore per todos app (held on app.state), owning one list + one lock
    - Every public method acquires the lock for its whole body and releases it
      before returning — no acquisition spans two handlers
    - list_todos returns a copy; callers never see the live list
    - Ids are UUID4 tokens generated inside the critical section

Design Decisions:
    - asyncio.Lock over threading.Lock: handlers run as tasks on one event loop
    - List over dict: insertion order is the listing order, no index kept
"""

import asyncio
import logging
import uuid

from crud_api.core.domain_types import TodoId
from crud_api.core.errors import ResourceNotFoundError
from crud_api.schemas.todo import Todo

logger = logging.getLogger(__name__)


class TodoStore:
    """In-memory todo list guarded by a single exclusive lock."""

    def __init__(self) -> None:
        self._todos: list[Todo] = []
        self._lock = asyncio.Lock()

    async def list_todos(self) -> list[Todo]:
        async with self._lock:
            return list(self._todos)

    async def create_todo(self, title: str) -> Todo:
        async with self._lock:
            todo = Todo(id=TodoId(str(uuid.uuid4())), title=title)
            self._todos.append(todo)
        logger.info("Todo created", extra={"todo_id": todo.id})
        return todo

    async def delete_todo(self, todo_id: str) -> None:
        """Remove every entry with a matching id.

        Raises ResourceNotFoundError when the list length did not change.
        """
        async with self._lock:
            before = len(self._todos)
            self._todos = [t for t in self._todos if t.id != todo_id]
            removed = before - len(self._todos)
        if not removed:
            raise ResourceNotFoundError("Todo", todo_id)
        logger.info("Todo deleted", extra={"todo_id": todo_id})
