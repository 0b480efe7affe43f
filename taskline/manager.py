"""
TASKLINE - Task Manager
=======================
Handles persistence, corruption recovery, and the caller-facing commands.

Each command is one load -> operate -> save cycle against the store file.
No document is kept between commands.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

from . import operations
from .errors import InvalidArgumentError, StorageCorruptError, StorageWriteFailedError
from .operations import RenderedTask
from .schema import Document, Task, decode_document, encode_document

logger = logging.getLogger("taskline")

DEFAULT_STORE_PATH = "tasks.json"


def parse_position(value: Union[int, str]) -> int:
    """Turn a task-number token into an int"""
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidArgumentError(f"Invalid task number: {value!r}.") from None


class TaskManager:
    """
    Task manager backed by a single JSON store.

    Primary storage: ./tasks.json
    Backup: ./tasks.json.bak, written only when a corrupt store is replaced

    There is no locking: two processes writing at once race, last writer wins.
    """

    def __init__(self, store_path: Union[str, Path] = DEFAULT_STORE_PATH):
        self.store_path = Path(store_path)

    @property
    def backup_path(self) -> Path:
        return self.store_path.with_name(self.store_path.name + ".bak")

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def load(self) -> Document:
        """
        Load the store, recovering instead of failing.

        - missing file: a fresh empty store is written and returned
        - corrupt file: moved to <name>.bak, then a fresh store is written
        - no "lists" key: an empty mapping is injected (written on next save)
        - unreadable file, or corrupt file that cannot be moved: an empty
          read-only document is returned; saving it fails and leaves the
          file alone
        """
        if not self.store_path.exists():
            logger.info(f"📄 No store at {self.store_path}, creating one")
            return self._create_fresh()

        try:
            raw = self.store_path.read_bytes()
        except OSError as e:
            logger.error(f"Cannot read store {self.store_path}: {e}")
            return self._stand_in()

        try:
            doc = decode_document(raw)
        except StorageCorruptError as e:
            logger.warning(f"⚠️ Corrupt store {self.store_path}: {e}")
            try:
                os.replace(self.store_path, self.backup_path)
            except OSError as err:
                logger.error(f"Could not back up corrupt store to {self.backup_path}: {err}")
                return self._stand_in()
            logger.warning(f"💾 Moved corrupt store to {self.backup_path}")
            return self._create_fresh()

        if not doc.has_lists_key:
            logger.info(f"Store {self.store_path} has no lists, starting empty")

        logger.debug(f"📂 Loaded store: {self.store_path} ({len(doc.lists)} lists)")
        return doc

    def save(self, doc: Document) -> bool:
        """Overwrite the store with the full document. Returns False on failure."""
        if doc.read_only:
            logger.error(f"❌ Refusing to overwrite unreadable store {self.store_path}")
            return False

        try:
            payload = encode_document(doc)
        except (TypeError, ValueError) as e:
            logger.error(f"❌ Failed to encode store: {e}")
            return False

        try:
            self.store_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.store_path, "w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            logger.error(f"❌ Failed to save {self.store_path}: {e}")
            return False

        logger.info(f"✅ Saved store: {self.store_path} ({len(doc.lists)} lists)")
        return True

    def _create_fresh(self) -> Document:
        doc = Document()
        # A store that cannot be written is reported on the next save
        self.save(doc)
        return doc

    def _stand_in(self) -> Document:
        """Empty document used when the store exists but cannot be used or moved"""
        doc = Document()
        doc._read_only = True
        return doc

    def _commit(self, doc: Document) -> None:
        if not self.save(doc):
            raise StorageWriteFailedError(self.store_path)

    # ========================================
    # COMMANDS
    # ========================================

    def create_list(self, name: str) -> None:
        doc = self.load()
        operations.create_list(doc, name)
        self._commit(doc)

    def add_task(self, list_name: str, text: str) -> bool:
        """Add a task; returns True when the list had to be created"""
        doc = self.load()
        created = operations.append_task(doc, list_name, text)
        self._commit(doc)
        return created

    def list_tasks(self, list_name: str) -> List[RenderedTask]:
        return operations.render_list(self.load(), list_name)

    def list_all_lists(self) -> List[str]:
        return operations.list_names(self.load())

    def remove_task(self, list_name: str, position: Union[int, str]) -> Task:
        position = parse_position(position)
        doc = self.load()
        task = operations.remove_task(doc, list_name, position)
        self._commit(doc)
        return task

    def delete_list(self, list_name: str) -> None:
        doc = self.load()
        operations.delete_list(doc, list_name)
        self._commit(doc)

    def mark_done(self, list_name: str, position: Union[int, str]) -> Task:
        position = parse_position(position)
        doc = self.load()
        task = operations.mark_done(doc, list_name, position)
        self._commit(doc)
        return task
