# core/api/auth.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from ucode_sdk.core.logger import setup_logger
from ucode_sdk.schemas.api.auth import LoginResponse, RegisterResponse, SendCodeResponse
from ucode_sdk.schemas.api.base import AuthRequest, Response

if TYPE_CHECKING:
    from ucode_sdk.core.api.ucode_api import UcodeAPI

logger = setup_logger("auth")


class APIAuth:
    """
    Сервис авторизации (Config.auth_base_url).

        api.auth().register(data).headers({"Resource-Id": "...", "Environment-Id": "..."}).exec()
        api.auth().login({"username": "...", "password": "..."}).exec()
    """

    PATH_REGISTER = "/v2/register"
    PATH_RESET_PASSWORD = "/v2/reset-password"
    PATH_LOGIN = "/v2/login"
    PATH_LOGIN_WITH_OPTION = "/v2/login/with-option"
    PATH_SEND_CODE = "/v2/send-code"

    def __init__(self, api: "UcodeAPI"):
        self.api = api

    def url(self, path: str) -> str:
        return f"{self.api.config.auth_base_url}{path}"

    def register(self, data: Dict[str, Any]) -> "Register":
        return Register(self, data)

    def reset_password(self, data: Dict[str, Any]) -> "ResetPassword":
        return ResetPassword(self, data)

    def login(self, data: Dict[str, Any]) -> "Login":
        return Login(self, data)

    def send_code(self, data: Dict[str, Any]) -> "SendCode":
        return SendCode(self, data)


class _AuthOperation:
    """Общая часть auth-билдеров: тело + пользовательские заголовки."""

    def __init__(self, auth: APIAuth, data: Optional[Dict[str, Any]]):
        self.auth = auth
        self.request = AuthRequest(data=dict(data or {}))

    def headers(self, headers: Dict[str, str]):
        self.request.headers = dict(headers or {})
        return self

    def _headers(self) -> Dict[str, str]:
        # пользовательские заголовки перекрывают стандартные API-KEY (без учёта регистра);
        # значения проверяет транспорт
        custom = {key.lower() for key in self.request.headers}
        headers = {
            key: value
            for key, value in self.auth.api.default_headers().items()
            if key.lower() not in custom
        }
        headers.update(self.request.headers)
        return headers

    def _post(self, path: str, response_model, *, params=None, decode_message: str):
        return self.auth.api.call(
            "POST",
            self.auth.url(path),
            self.request.data,
            response_model,
            params=params,
            headers=self._headers(),
            decode_message=decode_message,
        )


class Register(_AuthOperation):
    def exec(self) -> Tuple[RegisterResponse, Response]:
        """POST /v2/register?project-id=..."""
        return self._post(
            APIAuth.PATH_REGISTER,
            RegisterResponse,
            params={"project-id": self.auth.api.config.project_id},
            decode_message="Error while unmarshalling register object",
        )


class ResetPassword(_AuthOperation):
    def exec(self) -> Response:
        """PUT /v2/reset-password — всегда со стандартными API-KEY заголовками."""
        if self.request.headers:
            logger.debug("reset_password: пользовательские заголовки не используются")

        _, response = self.auth.api.call(
            "PUT",
            self.auth.url(APIAuth.PATH_RESET_PASSWORD),
            self.request.data,
            message="Error while reset password",
        )
        return response


class Login(_AuthOperation):
    def __init__(self, auth: APIAuth, data: Optional[Dict[str, Any]]):
        super().__init__(auth, data)
        if self.request.data.get("project_id") is None:
            self.request.data["project_id"] = auth.api.config.project_id

    def exec(self) -> Tuple[LoginResponse, Response]:
        """POST /v2/login"""
        return self._post(
            APIAuth.PATH_LOGIN,
            LoginResponse,
            decode_message="Error while unmarshalling login object",
        )

    def exec_with_option(self) -> Tuple[LoginResponse, Response]:
        """POST /v2/login/with-option?project-id=... — вход по OTP, телефону и т. п."""
        return self._post(
            APIAuth.PATH_LOGIN_WITH_OPTION,
            LoginResponse,
            params={"project-id": self.auth.api.config.project_id},
            decode_message="Error while unmarshalling login with option object",
        )


class SendCode(_AuthOperation):
    def exec(self) -> Tuple[SendCodeResponse, Response]:
        """POST /v2/send-code — отправка кода подтверждения."""
        return self._post(
            APIAuth.PATH_SEND_CODE,
            SendCodeResponse,
            decode_message="Error while unmarshalling send code object",
        )
