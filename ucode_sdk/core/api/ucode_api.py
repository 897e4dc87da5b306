from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ucode_sdk.config.settings import Config
from ucode_sdk.core.api.client import APIClient
from ucode_sdk.core.api.errors import DecodeError, TransportError
from ucode_sdk.core.logger import setup_logger
from ucode_sdk.schemas.api.base import Response

logger = setup_logger("ucode_api")
T = TypeVar("T", bound=BaseModel)


class UcodeAPI:
    """
    Корневой клиент u-code.

    Пример:
        api = UcodeAPI(Config(app_id="P-...", base_url="https://api.admin.u-code.io"))

        created, _ = api.items("houses").create({"name": "house"}).exec()
        houses, _ = api.items("houses").get_list().page(1).limit(10).exec()
        result, _ = api.function("my-function").invoke({"key": "value"}).exec()
    """

    def __init__(self, config: Config, *, http_client: Optional[httpx.Client] = None):
        self._config = config
        self._client = APIClient(timeout=config.request_timeout, http_client=http_client)

    @property
    def config(self) -> Config:
        return self._config

    def default_headers(self) -> Dict[str, str]:
        return {
            "authorization": "API-KEY",
            "X-API-KEY": self._config.app_id,
        }

    # ------- Namespaces -------
    def items(self, collection: str):
        """Объекты коллекции: create / update / delete / get_single / get_list."""
        from ucode_sdk.core.api.items import APIItem

        return APIItem(self, collection)

    def auth(self):
        """Регистрация, вход, сброс пароля, отправка кода."""
        from ucode_sdk.core.api.auth import APIAuth

        return APIAuth(self)

    def files(self):
        """Загрузка и удаление файлов."""
        from ucode_sdk.core.api.files import APIFiles

        return APIFiles(self)

    def function(self, path: Optional[str] = None):
        """Вызов серверной функции по её пути (по умолчанию Config.function_name)."""
        from ucode_sdk.core.api.function import APIFunction

        return APIFunction(self, path or self._config.function_name)

    # ------- Transport -------
    def do_request(
        self,
        url: str,
        method: str,
        body: Any,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> bytes:
        return self._client.do_request(url, method, body, headers, params)

    def call(
        self,
        method: str,
        url: str,
        body: Any,
        response_model: Optional[Type[T]] = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        message: str = "Can't send request",
        decode_message: str = "Error while unmarshalling response",
    ) -> Tuple[Optional[T], Response]:
        """
        Один запрос и разбор конверта.

        headers=None -> стандартные API-KEY заголовки.
        response_model=None -> тело ответа не разбирается.
        Ошибки поднимаются как TransportError / DecodeError с Response внутри.
        """
        if headers is None:
            headers = self.default_headers()
        try:
            raw = self._client.do_request(url, method, body, headers, params)
        except TransportError as e:
            raise self._transport_failure(e, message) from e
        return self.decode(raw, response_model, decode_message)

    def call_files(
        self,
        url: str,
        files: Mapping[str, Any],
        response_model: Type[T],
        *,
        method: str = "POST",
        message: str = "Can't send request",
        decode_message: str = "Error while unmarshalling response",
    ) -> Tuple[T, Response]:
        try:
            raw = self._client.do_file_request(url, method, self.default_headers(), files)
        except TransportError as e:
            raise self._transport_failure(e, message) from e
        return self.decode(raw, response_model, decode_message)

    @staticmethod
    def _transport_failure(exc: TransportError, message: str) -> TransportError:
        response = Response.failure(
            message=message,
            error=exc.message,
            description=exc.raw.decode("utf-8", errors="replace"),
        )
        return TransportError(exc.message, raw=exc.raw, response=response)

    @staticmethod
    def decode(
        raw: bytes,
        response_model: Optional[Type[T]],
        decode_message: str = "Error while unmarshalling response",
    ) -> Tuple[Optional[T], Response]:
        if response_model is None:
            return None, Response.done()

        # тело "null" -> пустой конверт, как и null во вложенных полях
        if raw.strip() == b"null":
            return response_model(), Response.done()

        try:
            parsed = response_model.model_validate_json(raw)
        except ValidationError as e:
            text = raw.decode("utf-8", errors="replace")
            logger.error("%s: %s | body=%.300s", decode_message, e.errors()[:1], text)
            response = Response.failure(message=decode_message, error=str(e), description=text)
            raise DecodeError(str(e), raw=raw, response=response) from e

        return parsed, Response.done()

    # ---------------------- lifecycle -------------------------

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "UcodeAPI":
        return self

    def __exit__(self, *_):
        self.close()
