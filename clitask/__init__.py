"""
CLITASK - Local TODO List
=========================

Persistent task tracking from the command line. Open tasks and completed
tasks live in two JSON key-value files.

Usage:
    from clitask import open_task_manager

    with open_task_manager(".") as manager:
        manager.add_task(1, "Test Task")
        manager.add_task(2, "Another Task")
        manager.complete_task(1)

        manager.list_open()        # -> ["2. Another Task"]
        manager.list_completed()   # -> ["1. Test Task"]
"""

from .errors import (
    ClitaskError,
    TaskError,
    TaskFormatError,
    DuplicateTaskError,
    TaskNotFoundError,
    StorageError
)

from .schema import (
    Task,
    CompletedTask,
    Command,
    CommandKind,
    parse_task_spec
)

from .kvstore import KeyValueStore
from .manager import TaskManager, open_task_manager

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "open_task_manager",
    "KeyValueStore",
    "Task",
    "CompletedTask",
    "Command",
    "CommandKind",
    "parse_task_spec",
    "ClitaskError",
    "TaskError",
    "TaskFormatError",
    "DuplicateTaskError",
    "TaskNotFoundError",
    "StorageError"
]
