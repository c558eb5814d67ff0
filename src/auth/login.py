"""Login — проверка учетных данных

Порядок проверок:
1. Длина username → набор символов username
2. Длина password
3. Поиск записи и сравнение PBKDF2 хеша (constant-time)

Каталог пользователей не содержит захардкоженных записей: пользователи
регистрируются через register(). Сообщение при неверных данных не раскрывает,
что именно неверно (username или password).
"""

import hashlib
import hmac
import logging
import re
import secrets
from dataclasses import dataclass
from typing import Final, Iterable, Optional

from src.core.domain.user import User, UserRecord

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS_DEFAULT: Final[int] = 100_000
SALT_BYTES: Final[int] = 16


@dataclass(frozen=True)
class CredentialPolicy:
    """Ограничения формы входа и параметры хеширования."""

    username_min_length: int = 3
    username_max_length: int = 20
    username_pattern: str = r"^[a-zA-Z0-9_.-]+$"
    password_min_length: int = 6
    password_max_length: int = 50
    pbkdf2_iterations: int = PBKDF2_ITERATIONS_DEFAULT


@dataclass(frozen=True)
class LoginResult:
    """Результат попытки входа."""

    authenticated: bool
    reject_reason: str
    message: str
    user: Optional[User] = None


def hash_password(password: str, salt: bytes, iterations: int) -> str:
    """PBKDF2-HMAC-SHA256 хеш пароля (hex)."""
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations).hex()


class UserDirectory:
    """Каталог пользователей в памяти."""

    def __init__(
        self,
        records: Iterable[UserRecord] = (),
        policy: Optional[CredentialPolicy] = None,
    ):
        self.policy = policy or CredentialPolicy()
        self._username_re = re.compile(self.policy.username_pattern)
        self._records: dict[str, UserRecord] = {}
        for record in records:
            self._records[record.username] = record

    def __contains__(self, username: str) -> bool:
        return username in self._records

    def register(self, username: str, password: str) -> UserRecord:
        """
        Регистрация пользователя.

        Raises:
            ValueError: данные не проходят CredentialPolicy или пользователь уже существует
        """
        rejection = self._check_form(username, password)
        if rejection is not None:
            raise ValueError(f"{rejection.reject_reason}: {rejection.message}")
        if username in self._records:
            raise ValueError(f"user already exists: {username}")

        salt = secrets.token_bytes(SALT_BYTES)
        record = UserRecord(
            username=username,
            salt_hex=salt.hex(),
            password_hash_hex=hash_password(password, salt, self.policy.pbkdf2_iterations),
            iterations=self.policy.pbkdf2_iterations,
        )
        self._records[username] = record
        logger.info("Registered user %s", username)
        return record

    def login(self, username: str, password: str) -> LoginResult:
        """Проверка формы входа и учетных данных."""
        rejection = self._check_form(username, password)
        if rejection is not None:
            return rejection

        record = self._records.get(username)
        if record is None:
            logger.debug("Login rejected: unknown user")
            return self._invalid_credentials()

        entered_hash = hash_password(password, bytes.fromhex(record.salt_hex), record.iterations)
        if not hmac.compare_digest(entered_hash, record.password_hash_hex):
            logger.debug("Login rejected: password mismatch for %s", username)
            return self._invalid_credentials()

        return LoginResult(
            authenticated=True,
            reject_reason="",
            message="Login successful.",
            user=User(username=record.username),
        )

    def _check_form(self, username: str, password: str) -> Optional[LoginResult]:
        policy = self.policy

        if not policy.username_min_length <= len(username) <= policy.username_max_length:
            return LoginResult(
                authenticated=False,
                reject_reason="username_length",
                message=(
                    f"Username must be between {policy.username_min_length} and "
                    f"{policy.username_max_length} characters long."
                ),
            )

        if not self._username_re.fullmatch(username):
            return LoginResult(
                authenticated=False,
                reject_reason="username_invalid_chars",
                message=(
                    "Username contains invalid characters. Only letters, numbers, "
                    "underscores, dots, and hyphens are allowed."
                ),
            )

        if not policy.password_min_length <= len(password) <= policy.password_max_length:
            return LoginResult(
                authenticated=False,
                reject_reason="password_length",
                message=(
                    f"Password must be between {policy.password_min_length} and "
                    f"{policy.password_max_length} characters long."
                ),
            )

        return None

    @staticmethod
    def _invalid_credentials() -> LoginResult:
        return LoginResult(
            authenticated=False,
            reject_reason="invalid_credentials",
            message="Username or password is invalid.",
        )
