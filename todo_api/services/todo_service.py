import logging

from todo_api.database import InMemoryDatabase
from todo_api.exceptions import TaskNotFoundError
from todo_api.models.todo import Todo
from todo_api.models.user import User
from todo_api.repositories.todo_repo import TodoRepository
from todo_api.schemas.todo import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)


class TodoService:
    """Todo operations for an already-resolved user.

    The access guards in ``todo_api.dependencies`` run first; the lookups
    here are repeated under the store lock so a todo removed between the
    guard and the operation still yields ``TaskNotFoundError``.
    """

    def __init__(self):
        self.repo = TodoRepository()

    def list_todos(self, db: InMemoryDatabase, user: User) -> list[Todo]:
        with db.lock:
            return self.repo.list(user)

    def create_todo(self, db: InMemoryDatabase, user: User, todo_in: TodoCreate) -> Todo:
        with db.lock:
            todo = self.repo.create(user, todo_in.client_fields())
        logger.info(
            "Created todo",
            extra={"username": user.username, "todo_id": str(todo.id)},
        )
        return todo

    def get_todo(self, db: InMemoryDatabase, user: User, todo_id: str) -> Todo | None:
        with db.lock:
            return self.repo.get(user, todo_id)

    def update_todo(
        self, db: InMemoryDatabase, user: User, todo_id: str, patch: TodoUpdate
    ) -> Todo:
        with db.lock:
            todo = self.repo.replace(user, todo_id, patch.client_fields())
        if todo is None:
            raise TaskNotFoundError(todo_id)
        logger.info("Updated todo", extra={"username": user.username, "todo_id": todo_id})
        return todo

    def mark_done(self, db: InMemoryDatabase, user: User, todo_id: str) -> Todo:
        with db.lock:
            todo = self.repo.get(user, todo_id)
            if todo is None:
                raise TaskNotFoundError(todo_id)
            todo.done = True
        logger.info("Marked todo done", extra={"username": user.username, "todo_id": todo_id})
        return todo

    def delete_todo(self, db: InMemoryDatabase, user: User, todo_id: str) -> None:
        with db.lock:
            deleted = self.repo.delete(user, todo_id)
        if not deleted:
            raise TaskNotFoundError(todo_id)
        logger.info("Deleted todo", extra={"username": user.username, "todo_id": todo_id})
