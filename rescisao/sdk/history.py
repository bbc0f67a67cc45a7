"""
Calculation history storage.

Saved calculations (input case + severance result) live in a single JSON
file in the data directory, newest first. Only the 20 most recent are
kept; saving a 21st evicts the oldest.

CLI and MCP tools should be thin wrappers that call these functions.

File format (history.json):
    [
        {
            "id": "3f2a9c1b",
            "saved_at": "2024-05-02T14:03:11",
            "case": {...TerminationCase...},
            "result": {...SeveranceResult...}
        },
        ...
    ]

A history file that cannot be parsed is treated as empty (and logged);
the next save replaces it.
"""

import hashlib
import json
import logging
import os
import uuid
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import get_data_path
from .schemas import HistoryItem, SeveranceResult, TerminationCase

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

HISTORY_FILENAME = "history.json"
MAX_HISTORY_ITEMS = 20


class HistoryItemNotFoundError(Exception):
    """Raised when a history item ID does not exist."""
    pass


def get_history_path() -> Path:
    """Get the history file path (~/.local/share/rescisao-calc/history.json)."""
    return get_data_path() / HISTORY_FILENAME


def _generate_item_id(case: TerminationCase, saved_at: datetime) -> str:
    """8-char ID from the case content, save time and a per-save nonce."""
    content = case.model_dump_json() + saved_at.isoformat() + uuid.uuid4().hex
    return hashlib.sha256(content.encode()).hexdigest()[:8]


def load_history() -> List[HistoryItem]:
    """Load saved calculations, newest first.

    Returns:
        List of HistoryItem (empty if no history or the file is unreadable)
    """
    path = get_history_path()
    if not path.exists():
        return []

    try:
        with open(path, "r") as f:
            raw = json.load(f)
        return [HistoryItem.model_validate(item) for item in raw]
    except (json.JSONDecodeError, ValidationError, TypeError) as e:
        logger.warning(f"{path.name}: unreadable history, ignoring ({e})")
        return []


def _write_history(items: List[HistoryItem]) -> Path:
    path = get_history_path()
    with open(path, "w") as f:
        json.dump([item.model_dump(mode="json") for item in items], f, indent=2, ensure_ascii=False)
    return path


def save_history_item(
    case: TerminationCase,
    result: SeveranceResult,
    saved_at: Optional[datetime] = None,
) -> HistoryItem:
    """Save a calculation at the head of the history.

    Args:
        case: Input facts
        result: compute_severance(case)
        saved_at: Save timestamp (default: now)

    Returns:
        The stored HistoryItem
    """
    saved_at = saved_at or datetime.now().replace(microsecond=0)
    item = HistoryItem(
        id=_generate_item_id(case, saved_at),
        saved_at=saved_at,
        case=case,
        result=result,
    )

    items = [item] + load_history()
    evicted = items[MAX_HISTORY_ITEMS:]
    if evicted:
        logger.debug(f"history full, evicting {len(evicted)} oldest item(s)")

    _write_history(items[:MAX_HISTORY_ITEMS])
    return item


def get_history_item(item_id: str) -> HistoryItem:
    """Get a saved calculation by ID.

    Raises:
        HistoryItemNotFoundError: If no item has that ID
    """
    for item in load_history():
        if item.id == item_id:
            return item
    raise HistoryItemNotFoundError(f"History item not found: {item_id}")


def clear_history() -> int:
    """Delete all saved calculations.

    Returns:
        Number of items removed
    """
    count = len(load_history())
    path = get_history_path()
    if path.exists():
        path.unlink()
    return count
