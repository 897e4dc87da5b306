# core/api/client.py
from __future__ import annotations

import json
import time
import uuid
from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import BaseModel

from ucode_sdk.config.settings import settings
from ucode_sdk.core.api.errors import TransportError
from ucode_sdk.core.logger import setup_logger

logger = setup_logger("api_client")


class APIClient:
    """
    HTTP-транспорт u-code.

    Делает:
      • сериализацию тела в JSON (None -> null) или multipart для файлов
      • один запрос без повторов; HTTP-статус не интерпретируется
      • возврат сырых байтов ответа
      • понятное логирование запроса и ответа (X-API-KEY маскируется)
    """

    # ограничения на превью тел в логах
    REQ_PREVIEW_LIMIT = settings.request_preview_limit    # bytes
    RESP_PREVIEW_LIMIT = settings.response_preview_limit  # chars

    def __init__(
        self,
        timeout: Optional[float] = 90,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.client = http_client or httpx.Client(timeout=timeout)
        self._owns_client = http_client is None

        logger.debug("Инициализирован APIClient: timeout=%s, external_client=%s",
                     timeout, not self._owns_client)

    # ------------------------ служебные ------------------------

    @staticmethod
    def _new_trace_id() -> str:
        return uuid.uuid4().hex[:12]

    @staticmethod
    def _mask_api_key(headers: Mapping[str, str]) -> Dict[str, str]:
        masked = {}
        for key, value in headers.items():
            if key.lower() == "x-api-key" and value:
                value = f"{value[:4]}..." if len(value) > 8 else "******"
            masked[key] = value
        return masked

    @staticmethod
    def _prettify_json(text: str) -> str:
        try:
            obj = json.loads(text)
            return json.dumps(obj, ensure_ascii=False, indent=2)
        except ValueError:
            return text

    @staticmethod
    def _serialize_payload(data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data.model_dump(mode="python")
        return data

    def _log_response(self, trace_id: str, url: str, resp: httpx.Response, elapsed_ms: float) -> bytes:
        raw = resp.content or b""
        text_preview = raw.decode("utf-8", errors="replace")[: self.RESP_PREVIEW_LIMIT]
        logger.info("↘️  [trace:%s] %s -> %s in %.1fms | recv=%dB",
                    trace_id, url, resp.status_code, elapsed_ms, len(raw))
        logger.debug("Response headers: %s", dict(resp.headers))
        logger.debug("Response body (preview): %s", self._prettify_json(text_preview))
        return raw

    # ------------------------- JSON ---------------------------

    def do_request(
        self,
        url: str,
        method: str,
        body: Any,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> bytes:
        """
        {method} {url} с JSON-телом.

        Правила:
          - BaseModel сериализуется через model_dump, прочее — как есть
          - ошибки сериализации, некорректный URL и сетевые ошибки -> TransportError
          - не-2xx ответ возвращается как обычные байты
        """
        trace_id = self._new_trace_id()

        try:
            content = json.dumps(self._serialize_payload(body), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.error("[trace:%s] Не удалось сериализовать тело запроса: %s", trace_id, e)
            raise TransportError(f"json: unsupported value: {e}") from e

        try:
            # заголовки кодируются в ASCII: кириллица в значении -> UnicodeEncodeError
            req_headers = httpx.Headers(headers or {})
            req_headers.setdefault("Content-Type", "application/json")
            req = self.client.build_request(
                method, url, content=content, headers=req_headers, params=params
            )
        except (httpx.InvalidURL, UnicodeEncodeError, ValueError, TypeError) as e:
            logger.error("[trace:%s] Некорректный запрос %s %s: %s", trace_id, method, url, e)
            raise TransportError(f"invalid request: {e}") from e

        # ---- LOG: кратко и понятно ----
        body_preview = content[: self.REQ_PREVIEW_LIMIT].decode("utf-8", errors="replace")
        logger.info("↗️  [trace:%s] %s %s | send=%dB", trace_id, req.method, req.url, len(content))
        logger.debug("Request headers: %s", self._mask_api_key(req_headers))
        logger.debug("Request body (preview): %s", self._prettify_json(body_preview))

        return self._send(trace_id, req)

    # ------------------------ multipart -----------------------

    def do_file_request(
        self,
        url: str,
        method: str,
        headers: Optional[Mapping[str, str]],
        files: Mapping[str, Any],
    ) -> bytes:
        """
        {method} {url} с multipart-телом.
        Content-Type (с boundary) выставляет httpx.
        """
        trace_id = self._new_trace_id()

        try:
            req = self.client.build_request(method, url, headers=dict(headers or {}), files=files)
        except (httpx.InvalidURL, UnicodeEncodeError, ValueError, TypeError) as e:
            logger.error("[trace:%s] Некорректный multipart-запрос %s %s: %s", trace_id, method, url, e)
            raise TransportError(f"invalid request: {e}") from e

        logger.info("↗️  [trace:%s] %s %s | multipart fields=%s",
                    trace_id, req.method, req.url, list(files))
        logger.debug("Request headers: %s", self._mask_api_key(req.headers))

        return self._send(trace_id, req)

    def _send(self, trace_id: str, req: httpx.Request) -> bytes:
        url = str(req.url)
        t0 = time.perf_counter()
        try:
            resp = self.client.send(req)
        except httpx.HTTPError as e:
            logger.error("[trace:%s] Ошибка отправки %s %s: %s", trace_id, req.method, url, e)
            raise TransportError(str(e) or e.__class__.__name__) from e
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        return self._log_response(trace_id, url, resp, elapsed_ms)

    # ---------------------- lifecycle -------------------------

    def close(self) -> None:
        if self._owns_client:
            logger.debug("Закрытие httpx.Client")
            self.client.close()

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
