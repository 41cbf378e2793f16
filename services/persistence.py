import json
import os
import tempfile
import shutil
from typing import List, Dict, Any, Optional

from config import get_config

DATA_DIR = os.path.normpath(get_config().data_dir)

FILES = {
    'constructpro_banners': 'constructpro_banners.json',
    'constructpro_careers': 'constructpro_careers.json',
    'constructpro_contacts': 'constructpro_contacts.json',
    'constructpro_projects': 'constructpro_projects.json',
}


class PersistenceError(Exception):
    """Raised when a stored collection cannot be read or written."""


def _path(key: str) -> str:
    return os.path.join(DATA_DIR, FILES.get(key, f"{key}.json"))


def exists(key: str) -> bool:
    return os.path.exists(_path(key))


def load_list(key: str) -> Optional[List[Dict[str, Any]]]:
    """Return the stored collection, or None when nothing was saved yet.

    Raises PersistenceError if the blob is unreadable or is not a list of objects.
    """
    file_path = _path(key)
    if not os.path.exists(file_path):
        return None
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise PersistenceError(f"cannot read {file_path}: {e}") from e
    if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
        raise PersistenceError(f"{file_path} does not hold a list of records")
    return data


def atomic_write(key: str, data: List[Dict[str, Any]]):
    file_path = _path(key)
    tmp_path = None
    try:
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        tmp_fd, tmp_path = tempfile.mkstemp(
            prefix='tmp_', suffix='.json', dir=os.path.dirname(file_path))
        with os.fdopen(tmp_fd, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        shutil.move(tmp_path, file_path)
    except (OSError, TypeError, ValueError) as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise PersistenceError(f"cannot write {file_path}: {e}") from e


def replace_all(key: str, items: List[Dict[str, Any]]):
    atomic_write(key, items)


def remove(key: str):
    """Drop the stored blob for key (no-op when absent)."""
    file_path = _path(key)
    try:
        if os.path.exists(file_path):
            os.remove(file_path)
    except OSError as e:
        raise PersistenceError(f"cannot remove {file_path}: {e}") from e
