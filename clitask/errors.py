"""
CLITASK - Error Types
=====================
Domain failures (TaskError) are reported to the user and the command exits
cleanly. Storage failures (StorageError) are never recovered.
"""


class ClitaskError(Exception):
    """Base class for all clitask errors"""


class TaskError(ClitaskError, ValueError):
    """A task operation was rejected; nothing was mutated"""


class TaskFormatError(TaskError):
    """Input is not in 'id:description' format"""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__("Data should be in 'id:description' format")


class DuplicateTaskError(TaskError):
    """Task ID is already present in the open task set"""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"The task with ID '{task_id}' already exists")


class TaskNotFoundError(TaskError):
    """Task ID is not present in the open task set"""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task with ID '{task_id}' not found")


class StorageError(ClitaskError, OSError):
    """Store file could not be read, parsed or written"""
