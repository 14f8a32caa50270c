import threading

from todo_api.models.user import User


class InMemoryDatabase:
    """Process-wide registry of users, each embedding its own todo list.

    Nothing is persisted. Services hold ``lock`` around every
    read-modify-write so concurrent requests can't interleave list splices.
    """

    def __init__(self) -> None:
        self.users: list[User] = []
        self.lock = threading.RLock()


# Created empty at import; lives until the process exits.
database = InMemoryDatabase()


def get_db() -> InMemoryDatabase:
    return database
