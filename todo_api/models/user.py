from dataclasses import dataclass, field
from typing import Any
from uuid import UUID, uuid4

from todo_api.models.todo import Todo

# Fields the server owns on a user record.
_SERVER_FIELDS = frozenset({"id", "todos", "extra"})


@dataclass
class User:
    name: str
    username: str
    id: UUID = field(default_factory=uuid4)
    todos: list[Todo] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> "User":
        extra = {
            key: value
            for key, value in fields.items()
            if key not in _SERVER_FIELDS and key not in ("name", "username")
        }
        return cls(name=fields["name"], username=fields["username"], extra=extra)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "id": self.id,
            "name": self.name,
            "username": self.username,
            "todos": [todo.to_dict() for todo in self.todos],
        }
