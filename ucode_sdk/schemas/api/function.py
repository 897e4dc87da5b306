"""Схемы вызова серверных функций."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import Field as PydField

from ucode_sdk.schemas.api.base import BaseSchema, Envelope


class FunctionResponse(Envelope):
    """
    Ответ /v1/invoke_function/{path}.

    Форма data зависит от самой функции, поэтому не типизируется.
    """

    status: str = ""
    description: str = ""
    data: Any = None
    custom_message: Any = None


class FunctionRequestData(Envelope):
    """Данные, с которыми платформа вызывает функцию-триггер."""

    app_id: str = PydField(default="", description="API-ключ проекта.")
    method: str = PydField(default="", description="CREATE | UPDATE | DELETE | ...")
    object_data: Dict[str, Any] = PydField(default_factory=dict)
    object_ids: List[str] = PydField(default_factory=list)
    table_slug: str = ""
    user_id: str = ""


class FunctionRequest(BaseSchema):
    """Входящее тело функции: {data: {...}, is_cached}."""

    data: FunctionRequestData = PydField(default_factory=FunctionRequestData)
    is_cached: bool = False


__all__ = ["FunctionRequest", "FunctionRequestData", "FunctionResponse"]
