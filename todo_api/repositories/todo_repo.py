from __future__ import annotations

from typing import Any

from todo_api.models.todo import Todo
from todo_api.models.user import User


class TodoRepository:
    """List operations on a single user's todo sequence."""

    def list(self, user: User) -> list[Todo]:
        return list(user.todos)

    def create(self, user: User, fields: dict[str, Any]) -> Todo:
        todo = Todo.from_fields(fields)
        user.todos.append(todo)
        return todo

    def index_of(self, user: User, todo_id: str) -> int | None:
        return next(
            (i for i, todo in enumerate(user.todos) if str(todo.id) == todo_id),
            None,
        )

    def get(self, user: User, todo_id: str) -> Todo | None:
        index = self.index_of(user, todo_id)
        return None if index is None else user.todos[index]

    def replace(self, user: User, todo_id: str, patch: dict[str, Any]) -> Todo | None:
        """Swap the stored record for a merged copy, keeping its position."""
        index = self.index_of(user, todo_id)
        if index is None:
            return None
        todo = user.todos[index].merged(patch)
        user.todos[index] = todo
        return todo

    def delete(self, user: User, todo_id: str) -> bool:
        index = self.index_of(user, todo_id)
        if index is None:
            return False
        del user.todos[index]
        return True
