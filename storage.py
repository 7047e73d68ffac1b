# storage.py
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Dict, Optional

from config import get_settings

logger = logging.getLogger(__name__)

TASKS_FILE = get_settings().tasks_file


def _quarantine(path: Path) -> Optional[Path]:
    """Move an unreadable store aside so it can be recovered by hand."""
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
    target = path.with_name(f"{path.name}.corrupt-{stamp}")
    try:
        path.replace(target)
    except OSError as e:
        logger.error("Could not quarantine %s: %s", path, e)
        return None
    return target


def read_tasks() -> List[Dict]:
    """
    Reads the full task list from the JSON store.

    A missing store is an empty list. A store that does not parse, or does
    not hold a list, is quarantined and also read as an empty list. Other
    I/O errors propagate to the caller.
    """
    try:
        with open(TASKS_FILE, 'rb') as f:
            data = f.read()
    except FileNotFoundError:
        return []

    try:
        tasks = json.loads(data)
        if not isinstance(tasks, list) or not all(isinstance(t, dict) for t in tasks):
            raise ValueError("expected a list of task objects")
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.error("Error parsing %s: %s", TASKS_FILE.name, e)
        moved_to = _quarantine(TASKS_FILE)
        if moved_to:
            logger.warning("Unreadable store moved to %s; starting with no tasks", moved_to.name)
        return []
    return tasks


def write_tasks(tasks: List[Dict]):
    """Overwrites the JSON store with the full task list."""
    with open(TASKS_FILE, 'w', encoding='utf-8') as f:
        json.dump(tasks, f, indent=2, ensure_ascii=False)


def initialize_tasks_file() -> bool:
    """Creates the store holding an empty list. Returns True if it was created."""
    if TASKS_FILE.exists():
        return False
    TASKS_FILE.parent.mkdir(parents=True, exist_ok=True)
    write_tasks([])
    logger.info("%s created.", TASKS_FILE.name)
    return True


def find_task(tasks: List[Dict], task_id: str) -> int:
    """Index of the task with the given id, or -1."""
    return next((i for i, t in enumerate(tasks) if t.get("id") == task_id), -1)
