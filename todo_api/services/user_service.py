import logging

from todo_api.database import InMemoryDatabase
from todo_api.exceptions import UserAlreadyExistsError
from todo_api.models.user import User
from todo_api.repositories.user_repo import UserRepository
from todo_api.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self):
        self.repo = UserRepository()

    def create_user(self, db: InMemoryDatabase, user_in: UserCreate) -> User:
        with db.lock:
            if self.repo.exists(db, user_in.username):
                raise UserAlreadyExistsError(user_in.username)
            user = self.repo.create(db, user_in)
        logger.info("Registered user", extra={"username": user.username})
        return user

    def get_user(self, db: InMemoryDatabase, username: str | None) -> User | None:
        with db.lock:
            return self.repo.get_by_username(db, username)
