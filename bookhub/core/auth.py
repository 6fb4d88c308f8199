"""Сценарии аутентификации поверх API клиента и сессии."""

import logging
from typing import TYPE_CHECKING

from bookhub.models import AuthResponse, ForgotPasswordResponse, RegisterResponse

if TYPE_CHECKING:
    from bookhub.api_client import BookApiClient

logger = logging.getLogger(__name__)


def login(client: "BookApiClient", email: str, password: str) -> AuthResponse:
    """
    Вход: запрос к API и авторизация сессии.

    Args:
        client: API клиент
        email: Email пользователя
        password: Пароль

    Returns:
        Ответ сервера (пользователь и токен)

    Raises:
        ApiError: Если сервер отклонил вход или недоступен
    """
    response = client.login(email, password)
    client.session.set_auth(response.user, response.token)
    logger.info(f"User logged in: id={response.user.id}")
    return response


def register(client: "BookApiClient", name: str, email: str, password: str) -> RegisterResponse:
    """
    Регистрация. Сессия авторизуется, только если сервер сразу выдал токен.

    Returns:
        Ответ сервера
    """
    response = client.register(name, email, password)
    if response.token:
        client.session.set_auth(response.user, response.token)
        logger.info(f"User registered and logged in: id={response.user.id}")
    else:
        logger.info(f"User registered without token: id={response.user.id}, login required")
    return response


def forgot_password(client: "BookApiClient", email: str) -> ForgotPasswordResponse:
    """Запросить письмо для сброса пароля."""
    response = client.forgot_password(email)
    logger.info(f"Password reset requested, success={response.success}")
    return response


def logout(client: "BookApiClient") -> None:
    """Выход из системы: ошибка API игнорируется, сессия очищается всегда."""
    logger.info("User logged out")
    client.session.logout(client.logout)


def require_authentication(client: "BookApiClient") -> bool:
    """
    Требует авторизацию, иначе перенаправляет на страницу входа.

    Returns:
        True если пользователь авторизован
    """
    if client.session.is_authenticated():
        return True

    if client.navigator is not None:
        client.navigator.navigate_to(client.login_path)
    return False
