from typing import Optional


class TaskStoreError(Exception):
    """Base error surfaced to HTTP callers as ``{"error": message}``."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None, *, cause: Optional[BaseException] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.cause = cause


class InvalidUsername(TaskStoreError):
    status_code = 400
    default_message = "Invalid username"


class UserAlreadyExists(TaskStoreError):
    status_code = 409
    default_message = "User already exists"


class UserNotFound(TaskStoreError):
    status_code = 404
    default_message = "User not found"


class TaskNotFound(TaskStoreError):
    status_code = 404
    default_message = "Task not found"
