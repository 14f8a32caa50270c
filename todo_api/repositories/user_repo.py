from todo_api.database import InMemoryDatabase
from todo_api.models.user import User
from todo_api.schemas.user import UserCreate


class UserRepository:
    def create(self, db: InMemoryDatabase, user_in: UserCreate) -> User:
        user = User.from_fields(user_in.model_dump())
        db.users.append(user)
        return user

    def get_by_username(self, db: InMemoryDatabase, username: str | None) -> User | None:
        return next((user for user in db.users if user.username == username), None)

    def exists(self, db: InMemoryDatabase, username: str | None) -> bool:
        return any(user.username == username for user in db.users)
