"""Навигация как внедряемая зависимость (HTTP слой не знает про UI)."""

import logging
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)


class Navigator(ABC):
    """Текущий маршрут и переход на другой маршрут."""

    @property
    @abstractmethod
    def current_path(self) -> str:
        """Путь текущего экрана, например "/books/42" """

    @abstractmethod
    def navigate_to(self, path: str) -> None:
        """Перейти на экран по пути"""


class InMemoryNavigator(Navigator):
    """Навигатор без UI: запоминает текущий путь и историю переходов."""

    def __init__(self, initial_path: str = "/"):
        self._current = initial_path
        self.history: List[str] = []

    @property
    def current_path(self) -> str:
        return self._current

    def navigate_to(self, path: str) -> None:
        logger.debug(f"Navigating {self._current} -> {path}")
        self.history.append(path)
        self._current = path
