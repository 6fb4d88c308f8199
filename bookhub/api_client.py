"""Централизованный API клиент для взаимодействия с backend BookHub."""

import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ValidationError
from requests.auth import AuthBase

from bookhub.config import Settings, get_settings
from bookhub.constants import (
    AUTH_PATH_PREFIX,
    DEFAULT_HEADERS,
    ENDPOINT_AUTH_FORGOT_PASSWORD,
    ENDPOINT_AUTH_LOGIN,
    ENDPOINT_AUTH_LOGOUT,
    ENDPOINT_AUTH_REGISTER,
    ENDPOINT_BOOKS,
    ENDPOINT_BOOKS_SEARCH,
    ENDPOINT_CATEGORIES,
    HTTP_UNAUTHORIZED,
    MSG_GENERIC_ERROR,
    MSG_INVALID_RESPONSE,
)
from bookhub.core.session import SessionStore
from bookhub.core.storage import StorageBackend, select_storage
from bookhub.exceptions import ApiError, NetworkError, ServerError
from bookhub.models import AuthResponse, ForgotPasswordResponse, RegisterResponse
from bookhub.navigation import InMemoryNavigator, Navigator

logger = logging.getLogger(__name__)

Params = Optional[Dict[str, Any]]
ModelT = TypeVar("ModelT", bound=BaseModel)


class BearerAuth(AuthBase):
    """Подставляет Authorization: Bearer <token> из сессии в момент отправки."""

    def __init__(self, session: SessionStore):
        self.session = session

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        token = self.session.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        return request


def _response_data(response: requests.Response) -> Any:
    """Тело ответа: JSON, если разбирается, иначе текст, для пустого None."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def handle_api_error(error: requests.RequestException) -> ApiError:
    """
    Привести ошибку транспорта к нормализованному виду.

    Args:
        error: Исключение requests

    Returns:
        ServerError, если есть ответ сервера, иначе NetworkError
    """
    response = getattr(error, "response", None)
    # Response.__bool__ ложен для 4xx/5xx, поэтому только сравнение с None
    if response is not None:
        data = _response_data(response)
        server_message = data.get("message") if isinstance(data, dict) else None
        return ServerError(
            message=server_message or str(error) or MSG_GENERIC_ERROR,
            status_code=response.status_code,
            data=data,
        )

    return NetworkError()


def _parse_model(model: Type[ModelT], data: Any) -> ModelT:
    """Провалидировать ответ сервера, ошибку схемы отдать как ApiError."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"Unexpected {model.__name__} payload: {e}")
        raise ApiError(message=MSG_INVALID_RESPONSE, data=data) from e


class BookApiClient:
    """Клиент для REST API каталога книг."""

    def __init__(
        self,
        session: SessionStore,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        navigator: Optional[Navigator] = None,
        login_path: Optional[str] = None,
    ) -> None:
        """
        Инициализация API клиента.

        Args:
            session: Сессия, из которой берётся токен
            base_url: Базовый URL API (по умолчанию из конфигурации)
            timeout: Таймаут запросов в секундах (None - без таймаута)
            navigator: Навигатор для редиректа на вход при 401
            login_path: Путь экрана входа
        """
        self.session = session
        self.base_url = (base_url or get_settings().api_base_url).rstrip("/")
        self.timeout = timeout
        self.navigator = navigator or session.navigator
        self.login_path = login_path or session.login_path

        self.http = requests.Session()
        self.http.headers.update(DEFAULT_HEADERS)
        self.http.auth = BearerAuth(session)
        self.http.hooks["response"].append(self._on_response)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "BookApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _on_response(self, response: requests.Response, *args: Any, **kwargs: Any) -> requests.Response:
        """Глобальная обработка 401: сброс сессии и редирект на вход."""
        if response.status_code != HTTP_UNAUTHORIZED:
            return response

        logger.warning(f"Unauthorized response from {response.url}, clearing session")
        self.session.clear_auth()

        if self.navigator is not None and not self.navigator.current_path.startswith(AUTH_PATH_PREFIX):
            logger.info(f"Redirecting to {self.login_path}")
            self.navigator.navigate_to(self.login_path)
        return response

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Выполнить запрос и вернуть разобранное тело ответа.

        Raises:
            ApiError: ServerError или NetworkError
        """
        try:
            response = self.http.request(
                method,
                f"{self.base_url}{path}",
                timeout=self.timeout,
                **kwargs,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            if getattr(e, "response", None) is None:
                logger.error(f"API Request Error: {method} {path}: {e}")
            else:
                logger.error(f"API request {method} {path} failed with status {e.response.status_code}")
            raise handle_api_error(e) from e

        return _response_data(response)

    # ===== Books =====

    def get_books(self, params: Params = None) -> Any:
        """Список книг (постранично)."""
        return self._request("GET", ENDPOINT_BOOKS, params=params or {})

    def get_book(self, book_id: Union[int, str]) -> Any:
        """Одна книга по ID."""
        return self._request("GET", f"{ENDPOINT_BOOKS}/{book_id}")

    def search_books(self, query: str, params: Params = None) -> Any:
        """
        Поиск книг.

        Args:
            query: Строка поиска (параметр q)
            params: Дополнительные параметры, могут переопределить q
        """
        return self._request("GET", ENDPOINT_BOOKS_SEARCH, params={"q": query, **(params or {})})

    # ===== Categories =====

    def get_categories(self) -> Any:
        return self._request("GET", ENDPOINT_CATEGORIES)

    def get_category_books(self, category_id: Union[int, str], params: Params = None) -> Any:
        return self._request("GET", f"{ENDPOINT_CATEGORIES}/{category_id}/books", params=params or {})

    # ===== Auth =====

    def login(self, email: str, password: str) -> AuthResponse:
        """
        Вход пользователя.

        Returns:
            Пользователь и токен
        """
        data = self._request("POST", ENDPOINT_AUTH_LOGIN, json={"email": email, "password": password})
        return _parse_model(AuthResponse, data)

    def register(self, name: str, email: str, password: str) -> RegisterResponse:
        """
        Регистрация нового пользователя.

        Returns:
            Пользователь и, если сервер его выдал, токен
        """
        data = self._request(
            "POST",
            ENDPOINT_AUTH_REGISTER,
            json={"name": name, "email": email, "password": password},
        )
        return _parse_model(RegisterResponse, data)

    def forgot_password(self, email: str) -> ForgotPasswordResponse:
        data = self._request("POST", ENDPOINT_AUTH_FORGOT_PASSWORD, json={"email": email})
        return _parse_model(ForgotPasswordResponse, data)

    def logout(self) -> Any:
        return self._request("POST", ENDPOINT_AUTH_LOGOUT)


def create_client(
    settings: Optional[Settings] = None,
    storage: Optional[StorageBackend] = None,
    navigator: Optional[Navigator] = None,
) -> BookApiClient:
    """
    Собрать сессию и API клиент по настройкам.

    Args:
        settings: Настройки (по умолчанию get_settings())
        storage: Бэкенд хранилища (по умолчанию select_storage(settings))
        navigator: Навигатор (по умолчанию InMemoryNavigator)

    Returns:
        Клиент с восстановленной из хранилища сессией
    """
    settings = settings or get_settings()
    navigator = navigator or InMemoryNavigator()
    session = SessionStore(
        storage if storage is not None else select_storage(settings),
        navigator=navigator,
        login_path=settings.login_path,
    )
    return BookApiClient(
        session,
        base_url=settings.api_base_url,
        timeout=settings.api_timeout,
        navigator=navigator,
        login_path=settings.login_path,
    )
