"""
Исключения клиента API
"""

from typing import Any, Dict, Optional

from bookhub.constants import MSG_GENERIC_ERROR, MSG_NETWORK_ERROR


class ApiError(Exception):
    """Нормализованная ошибка запроса к API: {message, statusCode?, data?}"""

    def __init__(
        self,
        message: str = MSG_GENERIC_ERROR,
        status_code: Optional[int] = None,
        data: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.data = data
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация ошибки в словарь (необязательные поля опускаются)"""
        result: Dict[str, Any] = {"message": self.message}
        if self.status_code is not None:
            result["statusCode"] = self.status_code
        if self.data is not None:
            result["data"] = self.data
        return result

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )


class ServerError(ApiError):
    """Сервер ответил кодом ошибки"""

    def __init__(self, message: str, status_code: int, data: Any = None):
        super().__init__(message=message, status_code=status_code, data=data)


class NetworkError(ApiError):
    """Ответа от сервера нет (сеть недоступна, DNS, обрыв соединения)"""

    def __init__(self, message: str = MSG_NETWORK_ERROR):
        super().__init__(message=message)
