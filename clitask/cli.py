"""
CLITASK - CLI Interface
=======================
Command-line tool for a local TODO list.

Usage:
    clitask add 1:"Buy milk"
    clitask list
    clitask done 1
    clitask list-done
    clitask remove 2
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import Settings
from .errors import StorageError, TaskError
from .manager import TaskManager, open_task_manager
from .schema import Command, CommandKind

logger = logging.getLogger("clitask.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clitask",
        description="clitask - a local TODO list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  clitask add 1:"Buy milk"      Add task 1
  clitask list                  List open tasks
  clitask done 1                Mark task 1 as done
  clitask remove 1              Remove task 1 without completing it
  clitask list-done             List completed tasks
  clitask list --dir ~/todo     Use task files in ~/todo
        """
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dir", default=None, help="Directory holding the task files")
    common.add_argument("-v", "--verbose", action="store_true", help="Log state changes")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", parents=[common], help="Add task in 'id:description' format")
    add_parser.add_argument("spec", help="Task as 'id:description'")

    # DONE command
    done_parser = subparsers.add_parser(
        "done", parents=[common], aliases=["complete"], help="Mark task as done by ID"
    )
    done_parser.add_argument("task_id", type=int, help="Task ID")

    # LIST command
    list_parser = subparsers.add_parser("list", parents=[common], help="List incomplete tasks")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # REMOVE command
    remove_parser = subparsers.add_parser(
        "remove", parents=[common], aliases=["rm"], help="Remove task by ID"
    )
    remove_parser.add_argument("task_id", type=int, help="Task ID")

    # LIST-DONE command
    list_done_parser = subparsers.add_parser("list-done", parents=[common], help="List completed tasks")
    list_done_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # HELP command
    subparsers.add_parser("help", help="Show help manual")

    return parser


_KINDS = {
    "add": CommandKind.ADD,
    "done": CommandKind.COMPLETE,
    "complete": CommandKind.COMPLETE,
    "list": CommandKind.LIST_OPEN,
    "remove": CommandKind.REMOVE,
    "rm": CommandKind.REMOVE,
    "list-done": CommandKind.LIST_COMPLETED,
    "help": CommandKind.HELP,
}


def parse_command(args: argparse.Namespace) -> Command:
    """Map parsed arguments onto a Command"""
    return Command(
        kind=_KINDS[args.command],
        task_id=getattr(args, "task_id", None),
        raw=getattr(args, "spec", None),
        as_json=getattr(args, "json", False),
    )


def run_command(command: Command, manager: TaskManager) -> List[str]:
    """Execute a command against the task manager; returns output lines"""
    if command.kind == CommandKind.ADD:
        task = manager.add_from_spec(command.raw or "")
        return [f"✅ Task added: {task.id} -> {task.description}"]

    elif command.kind == CommandKind.COMPLETE:
        task = manager.complete_task(command.task_id)
        return [f"✅ Task marked as done: {task.render()}"]

    elif command.kind == CommandKind.REMOVE:
        task = manager.remove_task(command.task_id)
        return [f"🗑️ Task removed: {task.render()}"]

    elif command.kind == CommandKind.LIST_OPEN:
        if command.as_json:
            return [json.dumps([t.model_dump() for t in manager.open_tasks()], indent=2)]
        tasks = manager.list_open()
        if not tasks:
            return ["No open tasks"]
        return ["📋 Your TODO list:"] + tasks

    elif command.kind == CommandKind.LIST_COMPLETED:
        if command.as_json:
            return [json.dumps([t.model_dump() for t in manager.completed_tasks()], indent=2)]
        tasks = manager.list_completed()
        if not tasks:
            return ["No completed tasks"]
        return ["📋 Completed tasks:"] + tasks

    raise ValueError(f"Unsupported command: {command.kind.value}")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    command = parse_command(args)
    if command.kind == CommandKind.HELP:
        parser.print_help()
        return 0

    settings = Settings.from_env(tasks_dir=args.dir, verbose=args.verbose)
    setup_logging(settings.log_level)

    try:
        with open_task_manager(settings.tasks_dir, settings.open_file, settings.done_file) as manager:
            try:
                lines = run_command(command, manager)
            except TaskError as e:
                print(f"❌ {e}")
                return 0
    except StorageError as e:
        logger.error(f"❌ Storage failure: {e}")
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
