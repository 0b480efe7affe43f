"""
TASKLINE - Store Schema Definition
==================================
Typed model of the store file and its JSON codec.

On disk:

    {
      "lists": {
        "work": [
          {"text": "buy milk", "created": "2026-01-28 09:15",
           "created_short": "[28/01 09:15]", "done": false}
        ]
      }
    }
"""

import json
from typing import Dict, List, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    StrictBool,
    StrictStr,
    ValidationError,
)

from .errors import StorageCorruptError

CREATED_FORMAT = "%Y-%m-%d %H:%M"
CREATED_SHORT_FORMAT = "[%d/%m %H:%M]"


class Task(BaseModel):
    """One to-do entry"""
    # Unknown keys survive a load/save cycle
    model_config = ConfigDict(extra="allow")

    # Strict: "done": "yes" or 1 is a malformed store, not True
    text: StrictStr = ""
    created: StrictStr = ""          # CREATED_FORMAT, set once
    created_short: StrictStr = ""    # CREATED_SHORT_FORMAT, same instant
    done: StrictBool = False         # never goes back to False


# Ordered by insertion; position = index + 1
TaskList = List[Task]


class Document(BaseModel):
    """Root of the store file"""
    model_config = ConfigDict(extra="allow")

    lists: Dict[str, TaskList] = Field(default_factory=dict)

    # Set on stand-in documents that must never replace the store file
    _read_only: bool = PrivateAttr(default=False)

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def has_lists_key(self) -> bool:
        """False when the decoded file had no "lists" key"""
        return "lists" in self.model_fields_set


# ============================================================
# CODEC
# ============================================================

def encode_document(doc: Document) -> str:
    """Pretty-printed JSON for the whole document"""
    return json.dumps(doc.model_dump(mode="json"), indent=2, ensure_ascii=False) + "\n"


def decode_document(raw: Union[bytes, str]) -> Document:
    """
    Parse store content into a Document.

    Raises StorageCorruptError for anything that is not a JSON object of
    the expected shape. A missing "lists" key is accepted and yields an
    empty mapping.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise StorageCorruptError(f"store is not UTF-8 text: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageCorruptError(f"store is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise StorageCorruptError(
            f"store root must be an object, got {type(data).__name__}"
        )

    try:
        return Document.model_validate(data)
    except ValidationError as e:
        raise StorageCorruptError(
            f"store has an unexpected shape ({e.error_count()} errors)"
        ) from e
