"""Константы клиента BookHub."""

from typing import Final

# ===== HTTP STATUS CODES =====
HTTP_UNAUTHORIZED: Final[int] = 401

# ===== API ENDPOINTS =====
ENDPOINT_BOOKS: Final[str] = "/books"
ENDPOINT_BOOKS_SEARCH: Final[str] = "/books/search"
ENDPOINT_CATEGORIES: Final[str] = "/categories"
ENDPOINT_AUTH_LOGIN: Final[str] = "/auth/login"
ENDPOINT_AUTH_REGISTER: Final[str] = "/auth/register"
ENDPOINT_AUTH_FORGOT_PASSWORD: Final[str] = "/auth/forgot-password"
ENDPOINT_AUTH_LOGOUT: Final[str] = "/auth/logout"

# ===== HEADERS =====
DEFAULT_HEADERS: Final[dict] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# ===== STORAGE KEYS =====
STORAGE_AUTH_TOKEN_KEY: Final[str] = "auth_token"
STORAGE_AUTH_USER_KEY: Final[str] = "auth_user"

# ===== ROUTES =====
AUTH_PATH_PREFIX: Final[str] = "/auth"
LOGIN_PATH: Final[str] = "/auth/login"

# ===== DEFAULTS =====
DEFAULT_API_BASE_URL: Final[str] = "https://api.example.com"
DEFAULT_SITE_URL: Final[str] = "https://bookhub.com"

# ===== ERROR MESSAGES =====
MSG_GENERIC_ERROR: Final[str] = "An error occurred"
MSG_NETWORK_ERROR: Final[str] = "Network error. Please check your connection."
MSG_INVALID_RESPONSE: Final[str] = "Unexpected response from server"
