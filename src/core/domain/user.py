"""
User — Модели пользователя

- User: аутентифицированная личность (без секретов)
- UserRecord: запись каталога пользователей с PBKDF2-хешем пароля
"""

from pydantic import BaseModel, Field, field_validator


class User(BaseModel):
    """Аутентифицированный пользователь."""

    username: str = Field(..., min_length=1, description="Имя пользователя")

    model_config = {"frozen": True}


class UserRecord(BaseModel):
    """
    Запись каталога пользователей.

    Пароль хранится только как PBKDF2-HMAC-SHA256 хеш с индивидуальной солью.
    """

    username: str = Field(..., min_length=1, description="Имя пользователя")
    salt_hex: str = Field(..., min_length=2, description="Соль (hex)")
    password_hash_hex: str = Field(..., min_length=2, description="PBKDF2 хеш (hex)")
    iterations: int = Field(..., gt=0, description="Число итераций PBKDF2")

    model_config = {"frozen": True}

    @field_validator("salt_hex", "password_hash_hex")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        """Проверка, что значение — корректная hex-строка"""
        try:
            bytes.fromhex(v)
        except ValueError:
            raise ValueError(f"not a hex string: {v!r}")
        return v
