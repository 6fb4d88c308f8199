"""Бэкенды хранилища сессии (аналог localStorage браузера)."""

import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from bookhub.config import Settings

logger = logging.getLogger(__name__)


class StorageBackend(ABC):
    """Строковое key-value хранилище с интерфейсом localStorage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Получить значение или None, если ключа нет"""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Сохранить значение"""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Удалить ключ (отсутствующий ключ не ошибка)"""


class NullStorage(StorageBackend):
    """Хранилище-заглушка: ничего не сохраняет, всегда пусто."""

    def get_item(self, key: str) -> Optional[str]:
        return None

    def set_item(self, key: str, value: str) -> None:
        pass

    def remove_item(self, key: str) -> None:
        pass


class FileStorage(StorageBackend):
    """Хранилище в JSON-файле: {ключ: строка}."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"[STORAGE] Failed to read {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"[STORAGE] Unexpected content in {self.path}, ignoring")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)

    def remove_item(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if key in data:
                del data[key]
                self._save(data)


def select_storage(settings: Settings) -> StorageBackend:
    """
    Выбрать бэкенд хранилища при старте.

    Args:
        settings: Настройки клиента

    Returns:
        FileStorage для storage_backend="file", иначе NullStorage
    """
    if settings.storage_backend == "file":
        logger.info(f"[STORAGE] Using file storage at {settings.session_file}")
        return FileStorage(settings.session_file)
    logger.info("[STORAGE] Session persistence disabled")
    return NullStorage()
