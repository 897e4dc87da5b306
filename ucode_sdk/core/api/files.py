# core/api/files.py
from __future__ import annotations

import os
from typing import TYPE_CHECKING, Tuple

from ucode_sdk.core.api.errors import RequestValidationError, TransportError
from ucode_sdk.core.logger import setup_logger
from ucode_sdk.schemas.api.base import Request, Response
from ucode_sdk.schemas.api.files import CreateFileResponse

if TYPE_CHECKING:
    from ucode_sdk.core.api.ucode_api import UcodeAPI

logger = setup_logger("files")


class APIFiles:
    PATH_UPLOAD = "/v1/files/folder_upload"
    PATH_FILES = "/v1/files"
    UPLOAD_FOLDER = "Media"

    def __init__(self, api: "UcodeAPI"):
        self.api = api

    def upload(self, file_path: str) -> "UploadFile":
        return UploadFile(self, file_path)

    def delete(self, file_id: str) -> "DeleteFile":
        return DeleteFile(self, file_id)


class UploadFile:
    def __init__(self, files: APIFiles, path: str):
        self.files = files
        self.path = path

    def exec(self) -> Tuple[CreateFileResponse, Response]:
        """
        Загружает локальный файл в папку Media (multipart, поле file).
        Файл закрывается при любом исходе.
        """
        api = self.files.api
        url = f"{api.config.base_url}{APIFiles.PATH_UPLOAD}?folder_name={APIFiles.UPLOAD_FOLDER}"

        try:
            fh = open(self.path, "rb")
        except OSError as e:
            logger.warning("Не удалось открыть файл %s: %s", self.path, e)
            raise RequestValidationError(
                str(e),
                response=Response.failure(
                    message="can't open file by path", error=str(e), description=self.path
                ),
            ) from e

        # httpx читает файл лениво, уже при отправке
        with fh:
            try:
                return api.call_files(
                    url,
                    {"file": (os.path.basename(self.path), fh)},
                    CreateFileResponse,
                    decode_message="Error while unmarshalling create file object",
                )
            except OSError as e:
                logger.error("Не удалось прочитать файл %s: %s", self.path, e)
                raise TransportError(
                    str(e),
                    response=Response.failure(
                        message="can't copy file", error=str(e), description=self.path
                    ),
                ) from e


class DeleteFile:
    def __init__(self, files: APIFiles, file_id: str):
        self.files = files
        self.file_id = file_id

    def exec(self) -> Response:
        """DELETE /v1/files/{id}"""
        if not self.file_id:
            raise RequestValidationError(
                "file id is empty",
                response=Response.failure(message="Error while deleting file", error="file id is empty"),
            )

        api = self.files.api
        _, response = api.call(
            "DELETE",
            f"{api.config.base_url}{APIFiles.PATH_FILES}/{self.file_id}",
            Request(),
            message="Error while deleting file",
        )
        return response
