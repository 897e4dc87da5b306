import json

import pytest
from pydantic import ValidationError

from ucode_sdk import Config, FunctionRequest, Response, ResponseError
from ucode_sdk.core.logger import setup_logger
from ucode_sdk.schemas.api.base import ActionBody
from ucode_sdk.schemas.api.items import ClientApiUpdateResponse, GetListClientApiResponse


def test_null_nested_object_decodes_to_empty_default():
    parsed = GetListClientApiResponse.model_validate_json('{"data": {"data": null}}')

    assert parsed.objects == []


def test_unknown_keys_are_ignored():
    parsed = ClientApiUpdateResponse.model_validate_json(
        '{"status": "OK", "server_version": 2, "data": {"table_slug": "houses", "extra": true}}'
    )

    assert parsed.status == "OK"
    assert parsed.data.table_slug == "houses"
    assert parsed.data.data == {}


def test_mismatched_shape_is_rejected():
    with pytest.raises(ValidationError):
        GetListClientApiResponse.model_validate_json('{"data": {"data": {"response": {"guid": "1"}}}}')


def test_action_body_defaults():
    assert ActionBody(data={"a": 1}).model_dump() == {"data": {"a": 1}, "disable_faas": True}


def test_response_failure():
    response = Response.failure(message="Can't send request", error="boom", description="")

    assert response.status == "error"
    assert not response.ok
    assert response.data == {"message": "Can't send request", "error": "boom", "description": ""}


def test_response_error_for_function_handlers():
    error = ResponseError(
        status_code=400,
        description="raw body",
        error_message="guid is empty",
        client_error_message="Error on getting request body",
    )

    payload = json.loads(error.to_response().to_json())

    assert payload == {
        "status": "error",
        "error": "",
        "data": {
            "message": "Error on getting request body",
            "error": "guid is empty",
            "description": "raw body",
        },
    }


def test_function_request_parsing():
    body = '{"data": {"app_id": "P-1", "method": "CREATE", "object_data": {"test_id": "t-1"}, "table_slug": "houses"}}'

    request = FunctionRequest.model_validate_json(body)

    assert request.data.app_id == "P-1"
    assert request.data.method == "CREATE"
    assert request.data.object_data == {"test_id": "t-1"}
    assert request.data.object_ids == []
    assert request.is_cached is False


def test_config_strips_trailing_slash():
    config = Config(base_url="https://api.admin.u-code.io/", auth_base_url="https://auth-api.ucode.run//")

    assert config.base_url == "https://api.admin.u-code.io"
    assert config.auth_base_url == "https://auth-api.ucode.run"


def test_config_is_immutable():
    config = Config(app_id="P-1")

    with pytest.raises(ValidationError):
        config.app_id = "P-2"


def test_setup_logger_is_namespaced():
    logger = setup_logger("items")

    assert logger.name == "ucode_sdk.items"
    assert logger.propagate
    assert not logger.disabled
