from ucode_sdk.schemas.api.function import FunctionResponse

from conftest import BASE_URL


def test_invoke(api, backend):
    backend.reply({"status": "done", "data": [1, 2, 3], "custom_message": {"text": "ok"}})

    result, response = api.function("send-notification").invoke({"user_id": "u-1"}).exec()

    request = backend.last
    assert request.method == "POST"
    assert str(request.url) == f"{BASE_URL}/v1/invoke_function/send-notification"
    assert backend.last_json() == {"data": {"user_id": "u-1"}, "is_cached": False}
    assert isinstance(result, FunctionResponse)
    assert result.data == [1, 2, 3]
    assert result.custom_message == {"text": "ok"}
    assert response.ok


def test_invoke_uses_configured_function_name(api, backend):
    api.function().invoke({}).exec()

    assert backend.last.url.path == "/v1/invoke_function/default-function"


def test_invoke_with_untyped_data(api, backend):
    backend.reply({"status": "done", "data": "plain string"})

    result, _ = api.function("echo").invoke({"x": 1}).exec()

    assert result.data == "plain string"
    assert result.custom_message is None
