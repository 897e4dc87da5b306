"""
End-to-end run against a real u-code project.

Run with: python -m pytest tests/test_integration.py -v -s
Requires: UCODE_BASE_URL, UCODE_APP_ID and a collection named by
UCODE_TEST_COLLECTION (default "houses") with name/price/room_count fields.
"""

import os

import pytest

from ucode_sdk import Config, UcodeAPI

BASE_URL = os.environ.get("UCODE_BASE_URL")
APP_ID = os.environ.get("UCODE_APP_ID")
COLLECTION = os.environ.get("UCODE_TEST_COLLECTION", "houses")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not (BASE_URL and APP_ID), reason="UCODE_BASE_URL / UCODE_APP_ID not set"),
]


@pytest.fixture(scope="module")
def live_api():
    with UcodeAPI(Config()) as api:
        yield api


def test_create_get_update_delete(live_api):
    house = {"name": "house", "price": 15000, "room_count": 5}

    created, response = live_api.items(COLLECTION).create(house).exec()
    assert response.status == "done"
    guid = created.object.get("guid")
    assert guid

    try:
        found, _ = live_api.items(COLLECTION).get_single(guid).exec()
        for key, value in house.items():
            assert found.object[key] == value

        slim, _ = live_api.items(COLLECTION).get_single(guid).exec_slim()
        assert slim.object["guid"] == guid

        updated, _ = live_api.items(COLLECTION).update({"guid": guid, "price": 20000}).exec_single()
        assert updated.data.data.get("price") == 20000

        listed, _ = live_api.items(COLLECTION).get_list().page(1).limit(100).filter({"guid": guid}).exec()
        assert [o["guid"] for o in listed.objects] == [guid]
    finally:
        response = live_api.items(COLLECTION).delete().single(guid).exec()
        assert response.status == "done"
