"""
ucode-sdk — цепочечный клиент REST API u-code.

    from ucode_sdk import Config, UcodeAPI

    api = UcodeAPI(Config(app_id="P-...", base_url="https://api.admin.u-code.io"))
    created, response = api.items("houses").create({"name": "house"}).exec()
"""

from ucode_sdk.config.settings import Config
from ucode_sdk.core.api.errors import (
    DecodeError,
    RequestValidationError,
    TransportError,
    UcodeAPIError,
)
from ucode_sdk.core.api.ucode_api import UcodeAPI
from ucode_sdk.schemas.api.base import Request, Response, ResponseError
from ucode_sdk.schemas.api.function import FunctionRequest

__version__ = "0.1.0"


def new(config: Config, **kwargs) -> UcodeAPI:
    return UcodeAPI(config, **kwargs)


__all__ = [
    "Config",
    "DecodeError",
    "FunctionRequest",
    "Request",
    "RequestValidationError",
    "Response",
    "ResponseError",
    "TransportError",
    "UcodeAPI",
    "UcodeAPIError",
    "new",
]
