import json

import httpx
import pytest

from azmgmt.clients.resources import DEFAULT_API_VERSION, ResourceManagementClient
from azmgmt.errors import ValidationError
from azmgmt.models import ResourceGroup

SUBSCRIPTION = "sub-1"
GROUPS_URL = f"https://management.azure.com/subscriptions/{SUBSCRIPTION}/resourcegroups"


def _client(token_getter) -> ResourceManagementClient:
    return ResourceManagementClient(token_getter, SUBSCRIPTION, poll_interval=0)


def test_create_or_update_puts_location_and_tags(respx_mock, token_getter):
    route = respx_mock.put(
        f"{GROUPS_URL}/rg1", params={"api-version": DEFAULT_API_VERSION}
    ).mock(
        return_value=httpx.Response(
            201,
            json={
                "id": f"/subscriptions/{SUBSCRIPTION}/resourceGroups/rg1",
                "name": "rg1",
                "location": "westus2",
                "properties": {"provisioningState": "Succeeded"},
            },
        )
    )

    group = _client(token_getter).resource_groups.create_or_update(
        "rg1", ResourceGroup(location="westus2", tags={"owner": "tests"})
    )

    assert route.called
    assert json.loads(route.calls.last.request.content) == {
        "location": "westus2",
        "tags": {"owner": "tests"},
    }
    assert group.name == "rg1"
    assert group.provisioning_state == "Succeeded"


def test_get_returns_group(respx_mock, token_getter):
    respx_mock.get(f"{GROUPS_URL}/rg1").mock(
        return_value=httpx.Response(200, json={"name": "rg1", "location": "eastus"})
    )

    group = _client(token_getter).resource_groups.get("rg1")

    assert group.location == "eastus"


def test_check_existence_maps_head_status(respx_mock, token_getter):
    respx_mock.head(f"{GROUPS_URL}/present").mock(return_value=httpx.Response(204))
    respx_mock.head(f"{GROUPS_URL}/absent").mock(return_value=httpx.Response(404))
    client = _client(token_getter)

    assert client.resource_groups.check_existence("present") is True
    assert client.resource_groups.check_existence("absent") is False


def test_list_passes_top_and_follows_pages(respx_mock, token_getter):
    next_link = f"{GROUPS_URL}?api-version={DEFAULT_API_VERSION}&$skiptoken=abc"
    respx_mock.get(GROUPS_URL, params={"$skiptoken": "abc"}).mock(
        return_value=httpx.Response(200, json={"value": [{"name": "rg2"}]})
    )
    first = respx_mock.get(GROUPS_URL, params={"$top": "5"}).mock(
        return_value=httpx.Response(200, json={"value": [{"name": "rg1"}], "nextLink": next_link})
    )

    groups = _client(token_getter).resource_groups.list(top=5)

    assert first.called
    assert [g.name for g in groups] == ["rg1", "rg2"]


def test_delete_polls_location_until_done(respx_mock, token_getter):
    operation_url = "https://management.azure.com/operationresults/op1"
    respx_mock.delete(f"{GROUPS_URL}/rg1").mock(
        return_value=httpx.Response(202, headers={"Location": operation_url})
    )
    poll = respx_mock.get(operation_url).mock(
        side_effect=[httpx.Response(202), httpx.Response(200)]
    )

    result = _client(token_getter).resource_groups.delete("rg1", raw=True)

    assert poll.call_count == 2
    assert result.status_code == 200
    assert result.output is None


def test_create_requires_location(respx_mock, token_getter):
    route = respx_mock.put(f"{GROUPS_URL}/rg1").mock(return_value=httpx.Response(201, json={}))

    with pytest.raises(ValidationError) as exc_info:
        _client(token_getter).resource_groups.create_or_update("rg1", ResourceGroup())

    assert exc_info.value.target == "location"
    assert not route.called
