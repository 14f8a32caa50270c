class TodoApiError(Exception):
    """Base class for errors surfaced to API clients."""

    http_status = 500
    code = "TODO_API_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class UserAlreadyExistsError(TodoApiError):
    http_status = 400
    code = "USER_ALREADY_EXISTS"

    def __init__(self, username: str):
        super().__init__("User already exists")
        self.username = username


class UserNotFoundError(TodoApiError):
    http_status = 404
    code = "USER_NOT_FOUND"

    def __init__(self, username: str | None):
        super().__init__("User does not exist")
        self.username = username


class TaskNotFoundError(TodoApiError):
    http_status = 404
    code = "TASK_NOT_FOUND"

    def __init__(self, todo_id: str):
        super().__init__("Task does not exist")
        self.todo_id = todo_id
