"""Схемы ответов эндпоинтов /v2/items."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import Field as PydField

from ucode_sdk.schemas.api.base import Envelope


# ---------- CREATE: {data: {data: {data: {...}}}} ----------


class CreateItemObject(Envelope):
    data: Dict[str, Any] = PydField(
        default_factory=dict, description="Созданный объект (включая guid)."
    )


class CreateItemData(Envelope):
    data: CreateItemObject = PydField(default_factory=CreateItemObject)


class CreateItemResponse(Envelope):
    """Ответ создания объекта."""

    data: CreateItemData = PydField(default_factory=CreateItemData)

    @property
    def object(self) -> Dict[str, Any]:
        return self.data.data.data


# ---------- GET SINGLE / GET SINGLE SLIM: {data: {data: {response: {...}}}} ----------


class ClientApiResp(Envelope):
    response: Dict[str, Any] = PydField(default_factory=dict)


class ClientApiData(Envelope):
    data: ClientApiResp = PydField(default_factory=ClientApiResp)


class ClientApiResponse(Envelope):
    """Ответ получения одного объекта."""

    data: ClientApiData = PydField(default_factory=ClientApiData)

    @property
    def object(self) -> Dict[str, Any]:
        return self.data.data.response


# ---------- GET LIST: {data: {data: {response: [...]}}} ----------


class GetListClientApiResp(Envelope):
    response: List[Dict[str, Any]] = PydField(default_factory=list)


class GetListClientApiData(Envelope):
    data: GetListClientApiResp = PydField(default_factory=GetListClientApiResp)


class GetListClientApiResponse(Envelope):
    """Ответ получения списка объектов."""

    data: GetListClientApiData = PydField(default_factory=GetListClientApiData)

    @property
    def objects(self) -> List[Dict[str, Any]]:
        return self.data.data.response


# ---------- AGGREGATION: {data: {data: {data: [...]}}} ----------


class AggregationRows(Envelope):
    data: List[Dict[str, Any]] = PydField(default_factory=list)


class AggregationData(Envelope):
    data: AggregationRows = PydField(default_factory=AggregationRows)


class GetListAggregationClientApiResponse(Envelope):
    """Ответ агрегации по pipeline."""

    data: AggregationData = PydField(default_factory=AggregationData)

    @property
    def rows(self) -> List[Dict[str, Any]]:
        return self.data.data.data


# ---------- UPDATE: {status, description, data: {table_slug, data}} ----------


class UpdateData(Envelope):
    table_slug: str = ""
    data: Dict[str, Any] = PydField(default_factory=dict)


class ClientApiUpdateResponse(Envelope):
    """Ответ обновления одного объекта."""

    status: str = ""
    description: str = ""
    data: UpdateData = PydField(default_factory=UpdateData)


# ---------- MULTIPLE UPDATE: {status, description, data: {data: {objects: [...]}}} ----------


class MultipleUpdateObjects(Envelope):
    objects: List[Dict[str, Any]] = PydField(default_factory=list)


class MultipleUpdateData(Envelope):
    data: MultipleUpdateObjects = PydField(default_factory=MultipleUpdateObjects)


class ClientApiMultipleUpdateResponse(Envelope):
    """Ответ массового обновления."""

    status: str = ""
    description: str = ""
    data: MultipleUpdateData = PydField(default_factory=MultipleUpdateData)

    @property
    def objects(self) -> List[Dict[str, Any]]:
        return self.data.data.objects


__all__ = [
    "ClientApiMultipleUpdateResponse",
    "ClientApiResponse",
    "ClientApiUpdateResponse",
    "CreateItemResponse",
    "GetListAggregationClientApiResponse",
    "GetListClientApiResponse",
]
