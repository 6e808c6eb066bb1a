"""
CLITASK - Task Manager
======================
State transitions for tasks, layered on two key-value stores:

    open_db:  "<id>" -> "<description>"
    done_db:  "<id>" -> ["<description>", ...]

Every mutation is persisted immediately by the stores' auto-dump.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Union

from pydantic import ValidationError

from .errors import DuplicateTaskError, StorageError, TaskFormatError, TaskNotFoundError
from .kvstore import KeyValueStore
from .schema import CompletedTask, Task, parse_task_spec

logger = logging.getLogger("clitask.manager")

DEFAULT_OPEN_FILE = "tasks.json"
DEFAULT_DONE_FILE = "done.json"


class TaskManager:
    """
    Task store over an open set and a completed set

    Usage:
        with open_task_manager(".") as manager:
            manager.add_task(1, "Test Task")
            manager.complete_task(1)
            manager.list_completed()   # -> ["1. Test Task"]
    """

    def __init__(self, open_db: KeyValueStore, done_db: KeyValueStore):
        self.open_db = open_db
        self.done_db = done_db

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, task_id: int, description: str) -> Task:
        """
        Add an open task; the ID must not already be open

        Unlike add_from_spec, the description may contain ':'.
        """
        try:
            task = Task(id=task_id, description=description)
        except ValidationError as e:
            raise TaskFormatError(f"{task_id}:{description}") from e
        return self._insert(task)

    def add_from_spec(self, raw: str) -> Task:
        """Add an open task from 'id:description' input"""
        return self._insert(parse_task_spec(raw))

    def _insert(self, task: Task) -> Task:
        if self.open_db.exists(task.key):
            logger.info(f"Duplicate task ID rejected: {task.id}")
            raise DuplicateTaskError(task.id)

        self.open_db.set(task.key, task.description)
        logger.info(f"➕ Added task: {task.render()}")
        return task

    def complete_task(self, task_id: int) -> Task:
        """Move an open task into the completed set"""
        key = str(task_id)
        description = self.open_db.get(key)
        if description is None:
            raise TaskNotFoundError(task_id)

        done = list(self.done_db.get(key, []))
        done.append(description)

        # done_db is written before the open entry is dropped
        self.done_db.set(key, done)
        self.open_db.rem(key)

        logger.info(f"✅ Completed task: {task_id} ({len(done)} completion(s) recorded)")
        return Task(id=task_id, description=description)

    def remove_task(self, task_id: int) -> Task:
        """Delete an open task permanently; the completed set is untouched"""
        key = str(task_id)
        description = self.open_db.get(key)
        if description is None:
            raise TaskNotFoundError(task_id)

        self.open_db.rem(key)
        logger.info(f"🗑️ Removed task: {task_id}")
        return Task(id=task_id, description=description)

    # ========================================
    # LISTING
    # ========================================

    def open_tasks(self) -> List[Task]:
        """Open tasks by ascending numeric ID"""
        try:
            tasks = [
                Task(id=int(key), description=description)
                for key, description in self.open_db.items()
            ]
        except ValueError as e:
            raise StorageError(f"Malformed entry in {self.open_db.path}: {e}") from e
        return sorted(tasks, key=lambda t: t.id)

    def completed_tasks(self) -> List[CompletedTask]:
        """Completed tasks by ascending numeric ID"""
        try:
            done = [
                CompletedTask(id=int(key), descriptions=descriptions)
                for key, descriptions in self.done_db.items()
            ]
        except ValueError as e:
            raise StorageError(f"Malformed entry in {self.done_db.path}: {e}") from e
        return sorted(done, key=lambda t: t.id)

    def list_open(self) -> List[str]:
        return [task.render() for task in self.open_tasks()]

    def list_completed(self) -> List[str]:
        lines = []
        for done in self.completed_tasks():
            lines.extend(done.render())
        return lines

    def summary(self) -> Dict[str, int]:
        return {
            "open": len(self.open_db),
            "completed": sum(len(d.descriptions) for d in self.completed_tasks()),
        }


@contextmanager
def open_task_manager(
    tasks_dir: Union[str, Path] = ".",
    open_file: str = DEFAULT_OPEN_FILE,
    done_file: str = DEFAULT_DONE_FILE,
) -> Iterator[TaskManager]:
    """Open both stores for one command; they are flushed on every exit path"""
    tasks_dir = Path(tasks_dir)
    with KeyValueStore(tasks_dir / open_file) as open_db:
        with KeyValueStore(tasks_dir / done_file) as done_db:
            logger.debug(f"📂 Opened stores in {tasks_dir}: {len(open_db)} open, {len(done_db)} done")
            yield TaskManager(open_db, done_db)
