"""
CLITASK - Schema Definition
===========================
Task models, the 'id:description' input parser, and the command variant
the CLI hands to the task manager.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import TaskFormatError


class CommandKind(str, Enum):
    """Commands the CLI can dispatch"""
    ADD = "add"
    COMPLETE = "done"
    REMOVE = "remove"
    LIST_OPEN = "list"
    LIST_COMPLETED = "list-done"
    HELP = "help"


class Task(BaseModel):
    """An open task"""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: int = Field(gt=0)           # Caller-assigned, never generated
    description: str = Field(min_length=1)

    @property
    def key(self) -> str:
        return str(self.id)

    def render(self) -> str:
        return f"{self.id}. {self.description}"


class CompletedTask(BaseModel):
    """
    Every completion recorded under one ID.

    An ID can be re-added after it was completed, so completions accumulate
    in order rather than overwrite each other.
    """
    id: int = Field(gt=0)
    descriptions: List[str] = Field(default_factory=list)

    def render(self) -> List[str]:
        return [f"{self.id}. {d}" for d in self.descriptions]


class Command(BaseModel):
    """A single parsed CLI command"""
    kind: CommandKind
    task_id: Optional[int] = None   # done / remove
    raw: Optional[str] = None       # add: unparsed 'id:description'
    as_json: bool = False           # list / list-done


def parse_task_spec(raw: str) -> Task:
    """Parse 'id:description' into a Task, raising TaskFormatError"""
    parts = raw.split(":")
    if len(parts) != 2:
        raise TaskFormatError(raw)

    id_part, description = parts[0].strip(), parts[1].strip()
    if not (id_part.isascii() and id_part.isdigit()):
        raise TaskFormatError(raw)

    try:
        return Task(id=int(id_part), description=description)
    except ValidationError as e:
        raise TaskFormatError(raw) from e
