# core/api/function.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Tuple

from ucode_sdk.schemas.api.base import Request, Response
from ucode_sdk.schemas.api.function import FunctionResponse

if TYPE_CHECKING:
    from ucode_sdk.core.api.ucode_api import UcodeAPI


class APIFunction:
    """
    Вызов серверной функции.

        api.function("send-notification").invoke({"user_id": "..."}).exec()
    """

    PATH_INVOKE = "/v1/invoke_function"

    def __init__(self, api: "UcodeAPI", path: str):
        self.api = api
        self.path = path
        self.request = Request()

    def invoke(self, data: Dict[str, Any]) -> "APIFunction":
        self.request = Request(data=data or {})
        return self

    def exec(self) -> Tuple[FunctionResponse, Response]:
        return self.api.call(
            "POST",
            f"{self.api.config.base_url}{self.PATH_INVOKE}/{self.path}",
            self.request,
            FunctionResponse,
            decode_message="Error while unmarshalling invoke function",
        )
