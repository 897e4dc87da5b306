"""Схемы файлового хранилища."""

from __future__ import annotations

from typing import Any

from pydantic import Field as PydField

from ucode_sdk.schemas.api.base import Envelope


class FileData(Envelope):
    id: str = ""
    title: str = ""
    storage: str = ""
    file_name_disk: str = ""
    file_name_download: str = ""
    link: str = ""
    file_size: int = 0


class CreateFileResponse(Envelope):
    """Ответ загрузки файла в папку Media."""

    status: str = ""
    description: str = ""
    data: FileData = PydField(default_factory=FileData)
    custom_message: Any = None


__all__ = ["CreateFileResponse", "FileData"]
