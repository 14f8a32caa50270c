import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

# Fields the server assigns; client bodies never overwrite them.
PROTECTED_FIELDS = frozenset({"id", "created_at"})
_DECLARED_FIELDS = frozenset({"title", "deadline", "done"})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Todo:
    title: Any = None
    deadline: Any = None
    done: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    # Client-supplied fields outside the known schema, kept verbatim.
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> "Todo":
        declared, extra = _split(fields)
        return cls(**declared, extra=extra)

    def merged(self, patch: dict[str, Any]) -> "Todo":
        """Return a copy with ``patch`` shallow-merged over this record."""
        declared, extra = _split(patch)
        return dataclasses.replace(self, **declared, extra={**self.extra, **extra})

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "id": self.id,
            "title": self.title,
            "deadline": self.deadline,
            "done": self.done,
            "created_at": self.created_at,
        }


def _split(fields: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    declared: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for key, value in fields.items():
        if key in PROTECTED_FIELDS or key == "extra":
            continue
        if key in _DECLARED_FIELDS:
            declared[key] = value
        else:
            extra[key] = value
    return declared, extra
