"""Модуль core: сессия, хранилище и сценарии аутентификации."""

from bookhub.core.auth import forgot_password, login, logout, register, require_authentication
from bookhub.core.session import SessionStore
from bookhub.core.storage import FileStorage, NullStorage, StorageBackend, select_storage

__all__ = [
    # auth
    "forgot_password",
    "login",
    "logout",
    "register",
    "require_authentication",
    # session
    "SessionStore",
    # storage
    "FileStorage",
    "NullStorage",
    "StorageBackend",
    "select_storage",
]
