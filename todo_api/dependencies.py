import logging
from typing import Optional

from fastapi import Depends, Header

from todo_api.database import InMemoryDatabase, get_db
from todo_api.exceptions import TaskNotFoundError, UserNotFoundError
from todo_api.models.todo import Todo
from todo_api.models.user import User
from todo_api.services.todo_service import TodoService
from todo_api.services.user_service import UserService

logger = logging.getLogger(__name__)

user_service = UserService()
todo_service = TodoService()


def get_current_user(
    username: Optional[str] = Header(default=None),
    db: InMemoryDatabase = Depends(get_db),
) -> User:
    user = user_service.get_user(db, username)
    if user is None:
        logger.debug("Unknown username", extra={"username": username})
        raise UserNotFoundError(username)
    return user


def get_current_todo(
    todo_id: str,
    user: User = Depends(get_current_user),
    db: InMemoryDatabase = Depends(get_db),
) -> Todo:
    # Resolving the user first means the user check always precedes this one.
    todo = todo_service.get_todo(db, user, todo_id)
    if todo is None:
        logger.debug("Unknown todo", extra={"username": user.username, "todo_id": todo_id})
        raise TaskNotFoundError(todo_id)
    return todo
