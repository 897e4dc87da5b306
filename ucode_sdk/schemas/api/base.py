"""Базовые схемы API по конвенциям проекта."""

from __future__ import annotations

import json
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field as PydField, model_validator


STATUS_DONE = "done"
STATUS_ERROR = "error"


class BaseSchema(BaseModel):
    """Базовая модель схем SDK."""

    model_config = ConfigDict(populate_by_name=True)


class Envelope(BaseSchema):
    """
    Базовая модель ответа бэкенда.

    Лишние ключи игнорируются, а JSON null для вложенного объекта
    превращается в значение по умолчанию (пустой объект/словарь).
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if v is not None}
        return value


class Request(BaseSchema):
    """Универсальное тело запроса: {data, is_cached}."""

    data: Dict[str, Any] = PydField(
        default_factory=dict, description="Произвольные данные запроса."
    )
    is_cached: bool = PydField(default=False, description="Признак кэширования.")


class ActionBody(BaseSchema):
    """Тело create/update: данные объекта и флаг отключения FaaS-триггеров."""

    data: Dict[str, Any] = PydField(
        default_factory=dict, description="Поля создаваемого/обновляемого объекта."
    )
    disable_faas: bool = PydField(
        default=True, description="Не запускать функции-триггеры на бэкенде."
    )


class AuthRequest(BaseSchema):
    """Тело и пользовательские заголовки запросов авторизации."""

    data: Dict[str, Any] = PydField(default_factory=dict, description="Тело запроса.")
    headers: Dict[str, str] = PydField(
        default_factory=dict,
        description="Заголовки тенанта (resource/environment id и т. п.).",
    )


class Response(BaseSchema):
    """Единый ответ SDK: status done|error и диагностический data при ошибке."""

    status: Literal["done", "error"] = PydField(default=STATUS_DONE)
    error: str = PydField(default="", description="Текст ошибки.")
    data: Optional[Dict[str, Any]] = PydField(
        default=None,
        description="description / message / error — только при status=error.",
    )

    @property
    def ok(self) -> bool:
        return self.status == STATUS_DONE

    @classmethod
    def done(cls) -> "Response":
        return cls(status=STATUS_DONE)

    @classmethod
    def failure(
        cls, message: str, error: str, description: Optional[Any] = None
    ) -> "Response":
        data: Dict[str, Any] = {"message": message, "error": error}
        if description is not None:
            data["description"] = description
        return cls(status=STATUS_ERROR, data=data)

    def to_json(self) -> str:
        return json.dumps(self.model_dump(mode="json"), ensure_ascii=False)


class ResponseError(BaseSchema):
    """
    Ошибка, которую обработчик функции отдаёт платформе.

    to_response() собирает из неё Response со status=error.
    """

    status_code: int = PydField(default=500, description="HTTP-статус для ответа.")
    description: Any = PydField(default=None, description="Сырой ответ/контекст.")
    error_message: str = PydField(default="", description="Текст исключения.")
    client_error_message: str = PydField(
        default="", description="Сообщение для клиента."
    )

    def to_response(self) -> Response:
        return Response(
            status=STATUS_ERROR,
            data={
                "message": self.client_error_message,
                "error": self.error_message,
                "description": self.description,
            },
        )


__all__ = [
    "ActionBody",
    "AuthRequest",
    "BaseSchema",
    "Envelope",
    "Request",
    "Response",
    "ResponseError",
    "STATUS_DONE",
    "STATUS_ERROR",
]
