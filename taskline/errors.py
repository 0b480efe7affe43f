"""
TASKLINE - Error Kinds
======================
Every failure a core operation can report. The CLI catches TasklineError
at the command boundary and prints the message.
"""


class TasklineError(Exception):
    """Base class for all taskline errors"""


class AlreadyExistsError(TasklineError):
    """A list with that name is already present"""

    def __init__(self, name: str):
        super().__init__(f"List '{name}' already exists.")
        self.name = name


class NotFoundError(TasklineError, LookupError):
    """A list (or task) is absent"""

    def __init__(self, name: str):
        super().__init__(f"List '{name}' not found.")
        self.name = name


class InvalidArgumentError(TasklineError, ValueError):
    """Non-positive position, bad list name, missing text"""


class OutOfRangeError(TasklineError, IndexError):
    """Position beyond the end of the list"""

    def __init__(self, position: int, size: int):
        super().__init__(f"Task number {position} out of range (1..{size}).")
        self.position = position
        self.size = size


class StorageCorruptError(TasklineError):
    """Store file content is not a valid document"""


class StorageWriteFailedError(TasklineError):
    """Store file could not be written"""

    def __init__(self, path):
        super().__init__(f"Failed to save data to {path}.")
        self.path = path
