"""
Модели данных клиента: пользователь, состояние сессии, ответы auth API
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    Пользователь в том виде, в каком его вернул сервер.

    Неизвестные поля сохраняются как есть и попадают обратно в хранилище.
    """

    id: Union[int, str] = Field(..., description="ID пользователя")
    name: str = Field(..., description="Имя")
    email: Optional[str] = Field(None, description="Email")
    avatar: Optional[str] = Field(None, description="URL аватара")

    model_config = ConfigDict(extra="allow")


class AuthState(BaseModel):
    """Снимок состояния сессии. Заменяется целиком при каждом переходе."""

    user: Optional[User] = None
    token: Optional[str] = None
    is_authenticated: bool = False

    model_config = ConfigDict(frozen=True)

    @classmethod
    def anonymous(cls) -> "AuthState":
        return cls()

    @classmethod
    def authenticated(cls, user: User, token: str) -> "AuthState":
        return cls(user=user, token=token, is_authenticated=True)


class AuthResponse(BaseModel):
    """Ответ POST /auth/login"""

    user: User
    token: str


class RegisterResponse(BaseModel):
    """Ответ POST /auth/register (токен сервер может не вернуть)"""

    user: User
    token: Optional[str] = None


class ForgotPasswordResponse(BaseModel):
    """Ответ POST /auth/forgot-password"""

    message: str
    success: bool = True
