"""Клиент REST API каталога книг BookHub: сессия и вызовы API."""

from bookhub.api_client import BookApiClient, create_client, handle_api_error
from bookhub.config import Settings, get_settings
from bookhub.core import FileStorage, NullStorage, SessionStore, StorageBackend
from bookhub.exceptions import ApiError, NetworkError, ServerError
from bookhub.models import AuthResponse, AuthState, ForgotPasswordResponse, RegisterResponse, User
from bookhub.navigation import InMemoryNavigator, Navigator

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AuthResponse",
    "AuthState",
    "BookApiClient",
    "FileStorage",
    "ForgotPasswordResponse",
    "InMemoryNavigator",
    "Navigator",
    "NetworkError",
    "NullStorage",
    "RegisterResponse",
    "ServerError",
    "SessionStore",
    "Settings",
    "StorageBackend",
    "User",
    "create_client",
    "get_settings",
    "handle_api_error",
]
