"""Привязка клиента к Streamlit: навигация по страницам и клиент на сессию браузера."""

import logging
from typing import Dict, Optional

import streamlit as st

from bookhub.api_client import BookApiClient, create_client
from bookhub.config import Settings, get_settings
from bookhub.core.storage import StorageBackend
from bookhub.logging_config import setup_logging
from bookhub.navigation import Navigator

logger = logging.getLogger(__name__)

SESSION_API_CLIENT = "bookhub_api_client"
SESSION_CURRENT_PATH = "bookhub_current_path"
SESSION_STORAGE = "bookhub_storage"


class SessionStateStorage(StorageBackend):
    """Хранилище в st.session_state: у каждой сессии браузера своё."""

    def __init__(self) -> None:
        self._items: Dict[str, str] = st.session_state.setdefault(SESSION_STORAGE, {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class StreamlitNavigator(Navigator):
    """
    Навигатор для multipage приложения Streamlit.

    Args:
        pages: Маршрут -> скрипт страницы, например {"/auth/login": "pages/1_auth.py"}
        initial_path: Маршрут, с которого стартует сессия браузера
    """

    def __init__(self, pages: Dict[str, str], initial_path: str = "/"):
        self.pages = pages
        st.session_state.setdefault(SESSION_CURRENT_PATH, initial_path)

    @property
    def current_path(self) -> str:
        return st.session_state[SESSION_CURRENT_PATH]

    def navigate_to(self, path: str) -> None:
        page = self.pages.get(path)
        if page is None:
            logger.warning(f"No Streamlit page registered for {path}")
            return
        st.session_state[SESSION_CURRENT_PATH] = path
        st.switch_page(page)


def get_api_client(
    pages: Dict[str, str],
    settings: Optional[Settings] = None,
) -> BookApiClient:
    """
    Получить API клиент текущей сессии браузера (создаётся один раз).

    Args:
        pages: Маршруты страниц для StreamlitNavigator
        settings: Настройки (по умолчанию get_settings())

    Returns:
        Настроенный API клиент
    """
    client = st.session_state.get(SESSION_API_CLIENT)
    if client is None:
        settings = settings or get_settings()
        setup_logging(level=settings.log_level, json_logs=settings.json_logs)
        client = create_client(
            settings=settings,
            storage=SessionStateStorage(),
            navigator=StreamlitNavigator(pages),
        )
        st.session_state[SESSION_API_CLIENT] = client
        logger.info("Created API client for Streamlit session")
    return client
