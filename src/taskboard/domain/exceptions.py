class TaskNotFoundError(Exception):
    """Raised when a task identifier does not exist in the task store."""
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id '{task_id}' was not found.")
        self.task_id = task_id


class TaskValidationError(Exception):
    """Raised when form input cannot become a task draft."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid '{field}': {message}")
        self.field = field
        self.message = message
