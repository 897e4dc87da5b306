# core/api/errors.py
from __future__ import annotations

from typing import Optional

from ucode_sdk.schemas.api.base import Response


class UcodeAPIError(Exception):
    """
    Базовая ошибка SDK.

    response — единый Response со status=error и диагностикой в data
    (description / message / error), как его вернул бы exec*.
    """

    def __init__(self, message: str, *, response: Optional[Response] = None):
        self.message = message
        self.response = response or Response.failure(message=message, error=message)
        super().__init__(message)

    @property
    def description(self):
        return (self.response.data or {}).get("description")


class RequestValidationError(UcodeAPIError):
    """Локальная ошибка входных данных: запрос не отправлялся."""


class TransportError(UcodeAPIError):
    """Не удалось сериализовать тело, собрать запрос или выполнить его."""

    def __init__(
        self,
        message: str,
        *,
        raw: bytes = b"",
        response: Optional[Response] = None,
    ):
        self.raw = raw
        super().__init__(message, response=response)


class DecodeError(UcodeAPIError):
    """Ответ получен, но не совпадает с ожидаемой формой конверта."""

    def __init__(
        self,
        message: str,
        *,
        raw: bytes = b"",
        response: Optional[Response] = None,
    ):
        self.raw = raw
        super().__init__(message, response=response)


__all__ = [
    "DecodeError",
    "RequestValidationError",
    "TransportError",
    "UcodeAPIError",
]
