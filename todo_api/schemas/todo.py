from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class TodoBase(BaseModel):
    # Client fields are stored and echoed back verbatim, unknown ones included.
    model_config = ConfigDict(extra="allow")

    title: Any = None
    # ISO-8601 string as sent by the client; echoed back unchanged.
    deadline: Any = None
    done: Optional[bool] = None

    def client_fields(self) -> dict:
        """Only the fields the client actually sent, extras included.

        ``done: null`` counts as not sent: a todo is always active or done.
        """
        fields = {**self.model_dump(exclude_unset=True), **(self.model_extra or {})}
        if fields.get("done") is None:
            fields.pop("done", None)
        return fields


class TodoCreate(TodoBase):
    pass


class TodoUpdate(TodoBase):
    pass


class TodoOut(TodoBase):
    id: UUID
    done: bool
    created_at: datetime
