"""Хранилище сессии: текущий пользователь, токен и флаг авторизации."""

import json
import logging
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import ValidationError

from bookhub.constants import LOGIN_PATH, STORAGE_AUTH_TOKEN_KEY, STORAGE_AUTH_USER_KEY
from bookhub.core.storage import StorageBackend
from bookhub.models import AuthState, User
from bookhub.navigation import Navigator

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Сессия клиента с записью в хранилище при каждом переходе.

    Состояние хранится одним неизменяемым снимком AuthState, поэтому
    user, token и is_authenticated всегда меняются вместе.
    """

    def __init__(
        self,
        storage: StorageBackend,
        navigator: Optional[Navigator] = None,
        login_path: str = LOGIN_PATH,
    ) -> None:
        """
        Args:
            storage: Бэкенд для сохранения сессии между запусками
            navigator: Навигатор для перехода на экран входа после logout
            login_path: Путь экрана входа
        """
        self.storage = storage
        self.navigator = navigator
        self.login_path = login_path
        self._state = AuthState.anonymous()
        self.restore()

    @property
    def state(self) -> AuthState:
        return self._state

    def get_user(self) -> Optional[User]:
        return self._state.user

    def get_token(self) -> Optional[str]:
        return self._state.token

    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    def restore(self) -> None:
        """Восстановить сессию из хранилища, если там есть и токен, и пользователь."""
        token = self.storage.get_item(STORAGE_AUTH_TOKEN_KEY)
        user_str = self.storage.get_item(STORAGE_AUTH_USER_KEY)

        if not (token and user_str):
            logger.debug("[SESSION] Nothing to restore, staying anonymous")
            return

        try:
            user = User.model_validate(json.loads(user_str))
        except (ValueError, ValidationError) as e:
            logger.error(f"[SESSION] Failed to parse user data: {e}")
            self.clear_auth()
            return

        self._state = AuthState.authenticated(user, token)
        logger.info(f"[SESSION] Restored session for user id={user.id}")

    def set_auth(self, user: Union[User, Mapping[str, Any]], token: str) -> None:
        """
        Авторизовать сессию и сохранить её в хранилище.

        Args:
            user: Пользователь (модель или словарь из ответа сервера)
            token: Bearer токен

        Raises:
            ValueError: Если токен пустой
        """
        if not token:
            raise ValueError("token must be a non-empty string")
        if not isinstance(user, User):
            user = User.model_validate(user)

        # Сначала хранилище: при ошибке записи сессия остаётся прежней
        self.storage.set_item(STORAGE_AUTH_TOKEN_KEY, token)
        self.storage.set_item(STORAGE_AUTH_USER_KEY, user.model_dump_json(exclude_none=True))
        self._state = AuthState.authenticated(user, token)
        logger.info(f"[SESSION] Authenticated user id={user.id}, token length={len(token)}")

    def clear_auth(self) -> None:
        """Сбросить сессию и удалить её из хранилища."""
        self._state = AuthState.anonymous()
        self.storage.remove_item(STORAGE_AUTH_TOKEN_KEY)
        self.storage.remove_item(STORAGE_AUTH_USER_KEY)
        logger.info("[SESSION] Session cleared")

    def logout(self, remote_logout: Callable[[], Any]) -> None:
        """
        Выход: вызов API (ошибка игнорируется), затем очистка и переход на вход.

        Args:
            remote_logout: Вызов POST /auth/logout
        """
        try:
            remote_logout()
        except Exception as e:
            logger.error(f"[SESSION] Logout API call failed: {e}", exc_info=True)
        finally:
            self.clear_auth()
            if self.navigator is not None:
                self.navigator.navigate_to(self.login_path)
