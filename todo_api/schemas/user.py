from uuid import UUID

from pydantic import BaseModel, ConfigDict

from todo_api.schemas.todo import TodoOut


class UserBase(BaseModel):
    # Extra registration fields are kept on the user and echoed back.
    model_config = ConfigDict(extra="allow")

    name: str
    username: str


class UserCreate(UserBase):
    pass


class UserOut(UserBase):
    id: UUID
    todos: list[TodoOut] = []
