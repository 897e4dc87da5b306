"""Схемы ответов сервиса авторизации."""

from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field as PydField

from ucode_sdk.schemas.api.base import Envelope


class User(Envelope):
    """Пользователь проекта."""

    id: str = ""
    login: str = ""
    password: str = ""
    email: str = ""
    phone: str = ""
    name: str = ""
    project_id: str = ""
    role_id: str = ""
    client_type_id: str = ""


class Token(Envelope):
    """Выданная пара токенов."""

    access_token: str = ""
    refresh_token: str = ""
    created_at: str = ""
    updated_at: str = ""
    expires_at: str = ""
    refresh_in_seconds: int = 0


class SessionData(Envelope):
    """Данные сессии, общие для register и login."""

    user_found: bool = False
    user_id: str = ""
    token: Optional[Token] = None
    login_table_slug: str = ""
    environment_id: str = ""
    user: Optional[User] = None
    user_id_auth: str = ""


class RegisterResponse(Envelope):
    """Ответ /v2/register."""

    status: str = ""
    description: str = ""
    data: SessionData = PydField(default_factory=SessionData)


class LoginData(SessionData):
    # остальные поля login (роль, тип клиента, права) сохраняем как есть
    model_config = ConfigDict(extra="allow")


class LoginResponse(Envelope):
    """Ответ /v2/login и /v2/login/with-option."""

    status: str = ""
    description: str = ""
    data: LoginData = PydField(default_factory=LoginData)


class SendCodeData(Envelope):
    model_config = ConfigDict(extra="allow")

    sms_id: str = ""
    user_found: bool = False


class SendCodeResponse(Envelope):
    """Ответ /v2/send-code."""

    status: str = ""
    description: str = ""
    data: SendCodeData = PydField(default_factory=SendCodeData)


__all__ = [
    "LoginResponse",
    "RegisterResponse",
    "SendCodeResponse",
    "Token",
    "User",
]
