#!/usr/bin/env python3
"""
TASKLINE - CLI Interface
========================
Command-line tool for managing local to-do lists.

Usage:
    taskline new work
    taskline add work buy milk
    taskline ls work
    taskline done work 1
    taskline rm work 1
    taskline del work
    taskline lists
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    OutOfRangeError,
    TasklineError,
)
from .manager import DEFAULT_STORE_PATH, TaskManager, parse_position

ABOUT_EN = """Taskline - About
Taskline is a simple, local-first CLI task manager.
It stores data in ./tasks.json and is free & open-source.
Features: lists, tasks, remove, done, JSON storage."""

ABOUT_PT = """Taskline - Sobre
Taskline é um gerenciador de tarefas simples para terminal.
Armazenamento local em ./tasks.json. Livre e Open Source.
Funcionalidades: listas, adicionar, remover, concluir, armazenamento em JSON."""

NOTES = """
Notes:
  - List names cannot contain spaces (use underscores if needed).
  - Task text may contain spaces and is formed by joining the remaining
    arguments, no quotes needed.

Examples:
  taskline new work             Create list 'work'
  taskline add work buy milk    Add a task (creates 'work' if missing)
  taskline ls work              Show tasks in 'work'
  taskline done work 1          Mark task 1 as done
  taskline rm work 1            Remove task 1 (later tasks renumber)
  taskline del work             Delete the whole list
  taskline lists                Show all lists
"""

# Errors the user can fix by re-typing the command
_WARNINGS = (AlreadyExistsError, InvalidArgumentError, OutOfRangeError)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskline",
        description="Taskline - Simple CLI To-Do Manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=NOTES
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", default=DEFAULT_STORE_PATH, help="Store file")
    common.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log more (-vv for debug)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # NEW command
    new_parser = subparsers.add_parser("new", parents=[common], help="Create a new list")
    new_parser.add_argument("list", help="List name (single token, no spaces)")

    # ADD command
    add_parser = subparsers.add_parser("add", parents=[common], help="Add a task")
    add_parser.add_argument("list", help="List name")
    add_parser.add_argument("task", nargs="+", help="Task text")

    # LS command
    ls_parser = subparsers.add_parser("ls", parents=[common], help="Show tasks in a list")
    ls_parser.add_argument("list", help="List name")

    # LISTS command
    subparsers.add_parser("lists", parents=[common], help="Show all lists")

    # RM command
    rm_parser = subparsers.add_parser("rm", parents=[common], help="Remove a task by number")
    rm_parser.add_argument("list", help="List name")
    rm_parser.add_argument("num", help="Task number")

    # DEL command
    del_parser = subparsers.add_parser("del", parents=[common], help="Delete an entire list")
    del_parser.add_argument("list", help="List name")

    # DONE command
    done_parser = subparsers.add_parser("done", parents=[common], help="Mark a task as done")
    done_parser.add_argument("list", help="List name")
    done_parser.add_argument("num", help="Task number")

    # ABOUT command
    about_parser = subparsers.add_parser("about", help="About (default pt, 'en' for English)")
    about_parser.add_argument("lang", nargs="?", default="pt", help="Language")

    subparsers.add_parser("help", help="Show this help menu")

    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in (None, "help"):
        parser.print_help()
        return 0

    if args.command == "about":
        print(ABOUT_EN if args.lang == "en" else ABOUT_PT)
        return 0

    _configure_logging(args.verbose)

    manager = TaskManager(store_path=args.file)

    try:
        return _run(manager, args)
    except _WARNINGS as e:
        print(f"⚠️ {e}")
        return 1
    except TasklineError as e:
        print(f"❌ {e}")
        return 1


def _run(manager: TaskManager, args: argparse.Namespace) -> int:
    # Execute command
    if args.command == "new":
        manager.create_list(args.list)
        print(f"✅ List '{args.list}' created.")

    elif args.command == "add":
        created = manager.add_task(args.list, " ".join(args.task))
        if created:
            print(f"ℹ️ List '{args.list}' did not exist; created automatically.")
        print(f"✅ Task added to '{args.list}'.")

    elif args.command == "ls":
        rows = manager.list_tasks(args.list)
        print(f"=== {args.list} ===")
        for row in rows:
            text = row.text or "(no text)"
            if row.done:
                print(f"{row.position}. [DONE] {row.created_short} {text}")
            else:
                print(f"{row.position}. {row.created_short} {text}")

    elif args.command == "lists":
        names = manager.list_all_lists()
        print("Existing lists:")
        if not names:
            print("  (no lists)")
        for name in names:
            print(f"  - {name}")

    elif args.command == "rm":
        position = parse_position(args.num)
        manager.remove_task(args.list, position)
        print(f"✅ Removed task {position} from '{args.list}'.")

    elif args.command == "del":
        manager.delete_list(args.list)
        print(f"✅ Deleted list '{args.list}'.")

    elif args.command == "done":
        position = parse_position(args.num)
        manager.mark_done(args.list, position)
        print(f"✅ Task {position} marked as done.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
