"""
TASKLINE - Document Operations
==============================
List registry and task operations over an in-memory Document.

Nothing here touches the filesystem: every function mutates (or reads) the
Document it is given and leaves persistence to the caller.
"""

import logging
from datetime import datetime
from typing import List, NamedTuple, Optional

from .errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
)
from .schema import CREATED_FORMAT, CREATED_SHORT_FORMAT, Document, Task, TaskList

logger = logging.getLogger("taskline")


class RenderedTask(NamedTuple):
    """Display row for one task"""
    position: int
    created_short: str
    text: str
    done: bool


# ========================================
# LIST REGISTRY
# ========================================

def create_list(doc: Document, name: str) -> None:
    """Insert an empty list; fails if the name is taken"""
    if name in doc.lists:
        raise AlreadyExistsError(name)
    _check_list_name(name)
    doc.lists[name] = []
    logger.info(f"🆕 Created list: {name}")


def delete_list(doc: Document, name: str) -> None:
    """Remove a list and all of its tasks"""
    if name not in doc.lists:
        raise NotFoundError(name)
    removed = doc.lists.pop(name)
    logger.info(f"🗑️ Deleted list: {name} ({len(removed)} tasks)")


def list_names(doc: Document) -> List[str]:
    """Existing list names in insertion order"""
    return list(doc.lists)


# ========================================
# TASK OPERATIONS
# ========================================

def append_task(
    doc: Document,
    list_name: str,
    text: str,
    now: Optional[datetime] = None
) -> bool:
    """
    Append a new task to the end of a list.

    The list is created when missing. Returns True if that happened so the
    caller can tell the user.
    """
    if not text or not text.strip():
        raise InvalidArgumentError("Task text is required.")

    created_list = False
    if list_name not in doc.lists:
        _check_list_name(list_name)
        doc.lists[list_name] = []
        created_list = True
        logger.info(f"🆕 Auto-created list: {list_name}")

    now = now or datetime.now()
    task = Task(
        text=text,
        created=now.strftime(CREATED_FORMAT),
        created_short=now.strftime(CREATED_SHORT_FORMAT),
    )
    doc.lists[list_name].append(task)

    logger.info(f"➕ Added task #{len(doc.lists[list_name])} to {list_name}")
    return created_list


def remove_task(doc: Document, list_name: str, position: int) -> Task:
    """Delete the task at a 1-based position; later tasks move up"""
    tasks = _get_list(doc, list_name)
    _check_position(tasks, position)

    task = tasks.pop(position - 1)
    logger.info(f"➖ Removed task #{position} from {list_name}")
    return task


def mark_done(doc: Document, list_name: str, position: int) -> Task:
    """Mark the task at a 1-based position as done (idempotent)"""
    tasks = _get_list(doc, list_name)
    _check_position(tasks, position)

    task = tasks[position - 1]
    if task.done:
        logger.debug(f"Task #{position} in {list_name} already done")
    else:
        task.done = True
        logger.info(f"✅ Marked task #{position} in {list_name} as done")
    return task


def render_list(doc: Document, list_name: str) -> List[RenderedTask]:
    """Display rows for a list, numbered from 1"""
    tasks = _get_list(doc, list_name)
    return [
        RenderedTask(position, task.created_short, task.text, task.done)
        for position, task in enumerate(tasks, start=1)
    ]


# ========================================
# HELPER METHODS
# ========================================

def _get_list(doc: Document, list_name: str) -> TaskList:
    tasks = doc.lists.get(list_name)
    if tasks is None:
        raise NotFoundError(list_name)
    return tasks


def _check_position(tasks: TaskList, position: int) -> None:
    if position <= 0:
        raise InvalidArgumentError(f"Invalid task number: {position}.")
    if position > len(tasks):
        raise OutOfRangeError(position, len(tasks))


def _check_list_name(name: str) -> None:
    """List names are single non-empty tokens"""
    if not name:
        raise InvalidArgumentError("List name is required.")
    if any(ch.isspace() for ch in name):
        raise InvalidArgumentError(
            f"List name '{name}' cannot contain spaces (use underscores)."
        )
