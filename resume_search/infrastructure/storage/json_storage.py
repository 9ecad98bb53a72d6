import json
import logging
from pathlib import Path
from typing import Optional

from resume_search.core.errors import StorageError

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """Key-value storage kept in a single JSON object file."""

    def __init__(self, path: str = "~/.resume_search/preferences.json"):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Preferences file unreadable, ignoring: {e}")
            return {}
        return data if isinstance(data, dict) else {}
