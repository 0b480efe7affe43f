"""
TASKLINE - Local To-Do Lists
============================

Named task lists kept in a single JSON file (./tasks.json).

Usage:
    from taskline import TaskManager

    manager = TaskManager()
    manager.create_list("work")
    manager.add_task("work", "buy milk")
    manager.mark_done("work", 1)

    for row in manager.list_tasks("work"):
        print(row.position, row.created_short, row.text, row.done)

A corrupt store is moved to tasks.json.bak and replaced by an empty one.
"""

from .errors import (
    TasklineError,
    AlreadyExistsError,
    NotFoundError,
    InvalidArgumentError,
    OutOfRangeError,
    StorageCorruptError,
    StorageWriteFailedError
)

from .schema import Document, Task, TaskList, encode_document, decode_document

from .operations import (
    RenderedTask,
    create_list,
    delete_list,
    list_names,
    append_task,
    remove_task,
    mark_done,
    render_list
)

from .manager import TaskManager, DEFAULT_STORE_PATH

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "DEFAULT_STORE_PATH",
    "Document",
    "Task",
    "TaskList",
    "RenderedTask",
    "encode_document",
    "decode_document",
    "create_list",
    "delete_list",
    "list_names",
    "append_task",
    "remove_task",
    "mark_done",
    "render_list",
    "TasklineError",
    "AlreadyExistsError",
    "NotFoundError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "StorageCorruptError",
    "StorageWriteFailedError"
]
