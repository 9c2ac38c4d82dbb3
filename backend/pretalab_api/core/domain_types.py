"""Domain Types — identifier format and enumerations shared by both collections.

Invariants:
    - DocumentId is a 24-char lowercase hex object id:
      4-byte seconds timestamp | 5-byte process random | 3-byte counter
    - is_valid_document_id() is purely structural; it never touches the store
    - TransactionType has exactly two members (income, expense)

Design Decisions:
    - NewType over wrapper class: ids travel as plain strings in JSON and SQL
    - Counter starts at a random offset and wraps at 2**24, so ids from the
      same second are unique but not ordered; listings sort by created_at
"""

import itertools
import os
import random
import re
import threading
import time
from enum import Enum
from typing import NewType

DocumentId = NewType("DocumentId", str)

_OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")
_PROCESS_UNIQUE = os.urandom(5)
_COUNTER = itertools.count(random.randint(0, 0xFFFFFF))  # nosec B311
_COUNTER_LOCK = threading.Lock()


class TransactionType(str, Enum):
    """Direction of a transaction — the only two values ever stored."""
    INCOME = "income"
    EXPENSE = "expense"


class Resource(str, Enum):
    """The two document collections exposed by the API."""
    TASK = "task"
    TRANSACTION = "transaction"


def is_valid_document_id(token: object) -> bool:
    """True when token has the object id shape (existence is not checked)."""
    return isinstance(token, str) and bool(_OBJECT_ID_RE.match(token))


def new_document_id(timestamp: float | None = None) -> DocumentId:
    """Generate a fresh object id. The leading 4 bytes are the creation second."""
    seconds = int(time.time() if timestamp is None else timestamp)
    with _COUNTER_LOCK:
        counter = next(_COUNTER) & 0xFFFFFF
    raw = (
        seconds.to_bytes(4, "big")
        + _PROCESS_UNIQUE
        + counter.to_bytes(3, "big")
    )
    return DocumentId(raw.hex())


def normalize_document_id(token: str) -> DocumentId:
    """Lowercase a well-formed id so lookups are case-insensitive like the hex it encodes."""
    return DocumentId(token.lower())
