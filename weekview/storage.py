"""
Persistent storage for the user's pasted schedule text.

This module manages the file:

    <data dir>/saved_schedule.json     {"raw_text": "..."}

Only the raw text is stored, never parsed courses. Parsing is cheap and the
text is the single source of truth, so a parser change never leaves a stale
course list behind.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from weekview import config


logger = logging.getLogger(__name__)


def _default_store_path() -> Path:
    """
    Return the default path of saved_schedule.json.

    Read at call time (not import time) so tests can patch config.
    """
    return config.DEFAULT_STORE_PATH


def load_saved_text(path: str | Path | None = None) -> Optional[str]:
    """
    Load the previously saved raw text.

    Returns None if the file does not exist or is invalid. Never raises:
    a corrupted file must not keep the application from starting.
    """
    store_path = Path(path) if path is not None else _default_store_path()

    # First run: nothing saved yet
    if not store_path.exists():
        return None

    try:
        data = json.loads(store_path.read_text(encoding="utf-8"))
        text = data.get("raw_text")
        if not isinstance(text, str):
            logger.warning("Ignoring %s: 'raw_text' is missing or not a string", store_path)
            return None
        return text
    except (OSError, json.JSONDecodeError, UnicodeDecodeError, AttributeError) as e:
        logger.warning("Ignoring unreadable store %s: %s", store_path, e)
        return None


def save_raw_text(text: str, path: str | Path | None = None) -> None:
    """
    Save raw text to saved_schedule.json. Creates parent directories if needed.
    """
    store_path = Path(path) if path is not None else _default_store_path()
    store_path.parent.mkdir(parents=True, exist_ok=True)

    payload = {"raw_text": text}
    store_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.debug("Saved %d characters to %s", len(text), store_path)
