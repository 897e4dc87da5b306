# core/api/items.py
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from ucode_sdk.core.api.errors import RequestValidationError, TransportError
from ucode_sdk.core.logger import setup_logger
from ucode_sdk.schemas.api.base import ActionBody, Request, Response
from ucode_sdk.schemas.api.items import (
    ClientApiMultipleUpdateResponse,
    ClientApiResponse,
    ClientApiUpdateResponse,
    CreateItemResponse,
    GetListAggregationClientApiResponse,
    GetListClientApiResponse,
)

if TYPE_CHECKING:
    from ucode_sdk.core.api.ucode_api import UcodeAPI

logger = setup_logger("items")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def flag(value: bool) -> str:
    """Булево значение в query-строке: true | false."""
    return "true" if value else "false"


class APIItem:
    """
    Объекты (записи) коллекции.

        api.items("houses").create({"name": "house"}).exec()
        api.items("houses").get_list().page(1).limit(10).filter({"name": "house"}).exec()

    create/update/delete по умолчанию отключают FaaS-триггеры,
    включить их: .disable_faas(False).
    """

    def __init__(self, api: "UcodeAPI", collection: str):
        self.api = api
        self.collection = collection

    @property
    def url(self) -> str:
        return f"{self.api.config.base_url}/v2/items/{self.collection}"

    def create(self, data: Dict[str, Any]) -> "CreateItem":
        return CreateItem(self, data)

    def update(self, data: Dict[str, Any]) -> "UpdateItem":
        return UpdateItem(self, data)

    def delete(self) -> "DeleteItem":
        return DeleteItem(self)

    def get_single(self, guid: str) -> "GetSingleItem":
        return GetSingleItem(self, guid)

    def get_list(self) -> "GetListItem":
        return GetListItem(self)


# ---------- CREATE ----------


class CreateItem:
    def __init__(self, item: APIItem, data: Dict[str, Any]):
        self.item = item
        self.body = ActionBody(data=data or {}, disable_faas=True)

    def disable_faas(self, is_disable: bool) -> "CreateItem":
        self.body.disable_faas = is_disable
        return self

    def exec(self) -> Tuple[CreateItemResponse, Response]:
        """POST /v2/items/{collection}?from-ofs=..."""
        return self.item.api.call(
            "POST",
            self.item.url,
            self.body,
            CreateItemResponse,
            params={"from-ofs": flag(not self.body.disable_faas)},
            decode_message="Error while unmarshalling create object",
        )


# ---------- UPDATE ----------


class UpdateItem:
    def __init__(self, item: APIItem, data: Dict[str, Any]):
        self.item = item
        self.body = ActionBody(data=data or {}, disable_faas=True)

    def disable_faas(self, is_disable: bool) -> "UpdateItem":
        self.body.disable_faas = is_disable
        return self

    def exec_single(self) -> Tuple[ClientApiUpdateResponse, Response]:
        """PUT /v2/items/{collection} — обновление одного объекта (guid в data)."""
        return self.item.api.call(
            "PUT",
            self.item.url,
            self.body,
            ClientApiUpdateResponse,
            params={"from-ofs": flag(not self.body.disable_faas)},
            message="Error while updating object",
            decode_message="Error while unmarshalling update object",
        )

    def exec_multiple(self, block_builder: bool = False) -> Tuple[ClientApiMultipleUpdateResponse, Response]:
        """PATCH /v2/items/{collection} — массовое обновление (data.objects)."""
        return self.item.api.call(
            "PATCH",
            self.item.url,
            self.body,
            ClientApiMultipleUpdateResponse,
            params={
                "from-ofs": flag(not self.body.disable_faas),
                "block_builder": flag(block_builder),
            },
            message="Error while multiple updating objects",
            decode_message="Error while unmarshalling multiple update objects",
        )


# ---------- DELETE ----------


class DeleteItem:
    def __init__(self, item: APIItem):
        self.item = item
        self._disable_faas = True
        self.guid = ""

    def disable_faas(self, disable: bool) -> "DeleteItem":
        self._disable_faas = disable
        return self

    def single(self, guid: str) -> "DeleteItem":
        self.guid = guid
        return self

    def multiple(self, ids: Optional[Iterable[str]]) -> "DeleteMultipleItem":
        return DeleteMultipleItem(self.item, list(ids or []), self._disable_faas)

    def exec(self) -> Response:
        """DELETE /v2/items/{collection}/{guid}"""
        if not self.guid:
            logger.warning("Удаление из %s без guid", self.item.collection)
            raise RequestValidationError(
                "guid is empty",
                response=Response.failure(message="Error while deleting object", error="guid is empty"),
            )

        _, response = self.item.api.call(
            "DELETE",
            f"{self.item.url}/{self.guid}",
            Request(),
            params={"from-ofs": flag(not self._disable_faas)},
            message="Error while deleting object",
        )
        return response


class DeleteMultipleItem:
    def __init__(self, item: APIItem, ids: List[str], disable_faas: bool = True):
        self.item = item
        self.ids = ids
        self._disable_faas = disable_faas

    def exec(self) -> Response:
        """DELETE /v2/items/{collection} с телом {"ids": [...]}"""
        if not self.ids:
            logger.warning("Массовое удаление из %s с пустым списком ids", self.item.collection)
            raise RequestValidationError(
                "ids is empty",
                response=Response.failure(message="Error while deleting objects", error="ids is empty"),
            )

        _, response = self.item.api.call(
            "DELETE",
            self.item.url,
            {"ids": self.ids},
            params={"from-ofs": flag(not self._disable_faas)},
            message="Error while deleting objects",
        )
        return response


# ---------- GET SINGLE ----------


class GetSingleItem:
    def __init__(self, item: APIItem, guid: str):
        self.item = item
        self.guid = guid

    def _check_guid(self) -> None:
        if not self.guid:
            logger.warning("get_single из %s без guid", self.item.collection)
            raise RequestValidationError(
                "guid is empty",
                response=Response.failure(message="guid is empty", error="guid is empty"),
            )

    def exec(self) -> Tuple[ClientApiResponse, Response]:
        """GET /v2/items/{collection}/{guid} — объект со всеми связями."""
        self._check_guid()
        return self.item.api.call(
            "GET",
            f"{self.item.url}/{self.guid}",
            None,
            ClientApiResponse,
            params={"from-ofs": flag(True)},
            decode_message="Error while unmarshalling get single object",
        )

    def exec_slim(self) -> Tuple[ClientApiResponse, Response]:
        """GET /v1/object-slim/{collection}/{guid} — облегчённый и более быстрый вариант."""
        self._check_guid()
        return self.item.api.call(
            "GET",
            f"{self.item.api.config.base_url}/v1/object-slim/{self.item.collection}/{self.guid}",
            None,
            ClientApiResponse,
            params={"from-ofs": flag(True)},
            decode_message="Error while unmarshalling get single slim object",
        )


# ---------- GET LIST ----------


class GetListItem:
    """
    Выборка списка. Параметры копятся в request.data и уходят
    JSON-строкой в query-параметр data, offset/limit — отдельными параметрами.

    page <= 0 -> 1, limit <= 0 -> 10; offset = (page - 1) * limit
    пересчитывается при каждом вызове page() или limit().
    """

    def __init__(self, item: APIItem):
        self.item = item
        self.request = Request()
        self._page: Optional[int] = None
        self._limit: Optional[int] = None

    @property
    def current_page(self) -> int:
        return self._page or DEFAULT_PAGE

    @property
    def current_limit(self) -> int:
        return self._limit or DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.current_limit

    def page(self, page: int) -> "GetListItem":
        if page <= 0:
            page = DEFAULT_PAGE
        self._page = page
        self.request.data["offset"] = self.offset
        return self

    def limit(self, limit: int) -> "GetListItem":
        if limit <= 0:
            limit = DEFAULT_LIMIT
        self._limit = limit
        self.request.data["offset"] = self.offset
        self.request.data["limit"] = limit
        return self

    def filter(self, filter: Dict[str, Any]) -> "GetListItem":
        self.request.data.update(filter or {})
        return self

    def search(self, search: str) -> "GetListItem":
        self.request.data["search"] = search
        return self

    def sort(self, sort: Dict[str, Any]) -> "GetListItem":
        self.request.data["order"] = sort
        return self

    def view_fields(self, fields: List[str]) -> "GetListItem":
        self.request.data["view_fields"] = list(fields)
        return self

    def with_relations(self, with_: bool) -> "GetListItem":
        self.request.data["with_relations"] = with_
        return self

    def pipelines(self, query: Dict[str, Any]) -> "GetListAggregation":
        return GetListAggregation(self.item, query)

    def _params(self) -> Dict[str, Any]:
        try:
            data = json.dumps(self.request.data, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error("Не удалось сериализовать параметры выборки %s: %s", self.item.collection, e)
            raise TransportError(
                f"json: unsupported value: {e}",
                response=Response.failure(
                    message="Error while marshalling request getting list object", error=str(e)
                ),
            ) from e

        return {
            "from-ofs": flag(True),
            "data": data,
            "offset": self.offset,
            "limit": self.current_limit,
        }

    def exec(self) -> Tuple[GetListClientApiResponse, Response]:
        """GET /v2/items/{collection} — полный ответ (поля, вью, связи)."""
        return self.item.api.call(
            "GET",
            self.item.url,
            None,
            GetListClientApiResponse,
            params=self._params(),
            decode_message="Error while unmarshalling get list object",
        )

    def exec_slim(self) -> Tuple[GetListClientApiResponse, Response]:
        """GET /v2/object-slim/get-list/{collection} — только сами объекты, быстрее exec()."""
        return self.item.api.call(
            "GET",
            f"{self.item.api.config.base_url}/v2/object-slim/get-list/{self.item.collection}",
            None,
            GetListClientApiResponse,
            params=self._params(),
            decode_message="Error while unmarshalling get list slim object",
        )


class GetListAggregation:
    def __init__(self, item: APIItem, query: Dict[str, Any]):
        self.item = item
        self.request = Request(data=query or {})

    def exec_aggregation(self) -> Tuple[GetListAggregationClientApiResponse, Response]:
        """POST /v2/items/{collection}/aggregation с pipeline в data."""
        return self.item.api.call(
            "POST",
            f"{self.item.url}/aggregation",
            self.request,
            GetListAggregationClientApiResponse,
            decode_message="Error while unmarshalling aggregation object",
        )
