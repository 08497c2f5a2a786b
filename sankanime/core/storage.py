"""Key-value text storage backing the persistent cache.

Values are plain strings, callers serialize. `FileStorage` keeps every key in
one JSON document so records survive process restarts; `MemoryStorage` lives
only as long as the process.
"""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from .errors import StorageError


class Storage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...

    def keys(self) -> List[str]: ...

    def clear(self) -> None: ...


class MemoryStorage:
    """Process-local storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()


class FileStorage:
    """Storage persisted as a single JSON object on disk.

    Missing or undecodable documents read as empty. Other I/O failures and
    unserializable values raise StorageError. Writes go to a sibling temp file
    that replaces the document, so a failed write leaves the old one intact.
    """

    def __init__(self, file_path: Path) -> None:
        self.file_path = Path(file_path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        try:
            with self.file_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except ValueError:
            return {}
        except PermissionError as e:
            raise StorageError(f"Permission denied reading {self.file_path}") from e
        except OSError as e:
            raise StorageError(f"Cannot read {self.file_path}: {e}") from e
        if not isinstance(data, dict):
            return {}
        return data

    def _save(self, data: Dict[str, str]) -> None:
        try:
            text = json.dumps(data, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Cannot serialize data: {e}") from e

        tmp_name = None
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.file_path.parent,
                prefix=self.file_path.name + ".", suffix=".tmp", delete=False,
            ) as f:
                tmp_name = f.name
                f.write(text)
            os.replace(tmp_name, self.file_path)
        except PermissionError as e:
            raise StorageError(f"Permission denied writing {self.file_path}") from e
        except OSError as e:
            raise StorageError(f"Cannot write {self.file_path}: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)

    def get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = str(value)
            self._save(data)

    def remove_item(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if data.pop(key, None) is not None:
                self._save(data)

    def keys(self) -> List[str]:
        return list(self._load())

    def clear(self) -> None:
        with self._lock:
            self._save({})
