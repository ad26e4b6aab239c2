from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from azmgmt.clients import BatchManagementClient, RawResponse
from azmgmt.errors import DeserializationError, HttpError, ValidationError
from azmgmt.models import (
    ActivateApplicationPackageParameters,
    AddApplicationParameters,
    AutoStorageBaseProperties,
    BatchAccountCreateParameters,
    PackageState,
    UpdateApplicationParameters,
)
from azmgmt.testing import RecordedResponse, RecordedTransport

SUBSCRIPTION = "sub-1"
ACCOUNT_PATH = (
    "/subscriptions/sub-1/resourceGroups/resourceGroupName/providers/"
    "Microsoft.Batch/batchAccounts/acctName"
)


def make_client(transport: RecordedTransport) -> BatchManagementClient:
    return BatchManagementClient(lambda: "token", SUBSCRIPTION, transport=transport, poll_interval=0)


def test_add_application_package_decodes_201_body() -> None:
    utc_now = "2016-05-11T10:20:30.1234567Z"
    body = {
        "id": "foo",
        "storageUrl": "//storageUrl",
        "state": "Pending",
        "version": "beta",
        "format": "zip",
        "storageUrlExpiry": utc_now,
        "lastActivationTime": utc_now,
    }
    transport = RecordedTransport(RecordedResponse(201, body))
    client = make_client(transport)

    result = client.application.add_application_package(
        "resourceGroupName", "acctName", "id", "beta", raw=True
    )

    assert isinstance(result, RawResponse)
    assert result.status_code == 201
    package = result.output
    assert package.id == "foo"
    assert package.storage_url == "//storageUrl"
    assert package.state is PackageState.PENDING
    assert package.version == "beta"
    assert package.format == "zip"
    expected = datetime(2016, 5, 11, 10, 20, 30, 123456, tzinfo=timezone.utc)
    assert package.storage_url_expiry == expected
    assert package.last_activation_time == expected
    assert package.to_wire() == body
    assert transport.method == "PUT"
    assert transport.uri.path == f"{ACCOUNT_PATH}/applications/id/versions/beta"
    assert transport.uri.params["api-version"] == "2015-12-01"


def test_add_application_sends_put_with_identifying_header() -> None:
    transport = RecordedTransport(status_code_to_return=201)
    client = make_client(transport)

    result = client.application.add_application(
        "resourceGroupName",
        "acctName",
        "applicationId",
        AddApplicationParameters(allow_updates=True, display_name="displayName"),
        raw=True,
    )

    assert result.output is None
    assert result.status_code == 201
    assert transport.call_count == 1
    assert transport.method == "PUT"
    assert transport.request_headers["User-Agent"].startswith("azmgmt/")
    assert transport.request_headers["Authorization"] == "Bearer token"
    assert "x-ms-client-request-id" in transport.request_headers
    assert json.loads(transport.request_content) == {
        "allowUpdates": True,
        "displayName": "displayName",
    }


def test_add_application_without_parameters_sends_no_body() -> None:
    transport = RecordedTransport(status_code_to_return=201)
    client = make_client(transport)

    client.application.add_application("resourceGroupName", "acctName", "applicationId")

    assert transport.request_content == ""


def test_update_application_issues_single_patch() -> None:
    transport = RecordedTransport(status_code_to_return=204)
    client = make_client(transport)
    params = UpdateApplicationParameters(
        allow_updates=True, default_version="blah", display_name="displayName"
    )

    result = client.application.update_application(
        "resourceGroupName", "acctName", "applicationId", params, raw=True
    )

    assert result.status_code == 204
    assert transport.call_count == 1
    assert transport.method == "PATCH"
    assert "User-Agent" in transport.request_headers
    assert json.loads(transport.request_content) == {
        "allowUpdates": True,
        "defaultVersion": "blah",
        "displayName": "displayName",
    }


def test_activate_application_package_posts_format() -> None:
    transport = RecordedTransport(status_code_to_return=204)
    client = make_client(transport)

    result = client.application.activate_application_package(
        "resourceGroupName",
        "acctName",
        "applicationId",
        "version",
        ActivateApplicationPackageParameters(format="zip"),
        raw=True,
    )

    assert result.status_code == 204
    assert transport.method == "POST"
    assert transport.uri.path.endswith("/applications/applicationId/versions/version/activate")
    assert json.loads(transport.request_content) == {"format": "zip"}


def test_delete_application_and_package_use_delete() -> None:
    transport = RecordedTransport(status_code_to_return=204)
    client = make_client(transport)

    app_result = client.application.delete_application(
        "resourceGroupName", "acctName", "applicationId", raw=True
    )
    assert app_result.status_code == 204
    assert transport.method == "DELETE"
    assert transport.uri.path.endswith("/applications/applicationId")

    package_result = client.application.delete_application_package(
        "resourceGroupName", "acctName", "applicationId", "version", raw=True
    )
    assert package_result.status_code == 204
    assert transport.uri.path.endswith("/applications/applicationId/versions/version")
    assert transport.call_count == 2


def test_get_application_decodes_body() -> None:
    body = {
        "id": "applicationId",
        "allowUpdates": True,
        "displayName": "displayName",
        "defaultVersion": "blah",
        "packages": [{"version": "fooVersion", "state": "Active"}],
    }
    transport = RecordedTransport(RecordedResponse(200, body))
    client = make_client(transport)

    application = client.application.get_application("resourceGroupName", "acctName", "applicationId")

    assert transport.method == "GET"
    assert application.id == "applicationId"
    assert application.allow_updates is True
    assert application.get_package("fooVersion") is not None
    assert application.get_package("missing") is None


def test_get_application_package_decodes_body() -> None:
    transport = RecordedTransport(
        RecordedResponse(200, {"id": "foo", "version": "beta", "state": "Unmapped"})
    )
    client = make_client(transport)

    package = client.application.get_application_package(
        "resourceGroupName", "acctName", "foo", "beta"
    )

    assert transport.method == "GET"
    assert package.state is PackageState.UNMAPPED


def test_list_applications_keeps_packages_in_order() -> None:
    body = {
        "value": [
            {
                "id": "foo",
                "allowUpdates": "true",
                "displayName": "displayName",
                "defaultVersion": "blah",
                "packages": [
                    {
                        "version": "fooVersion",
                        "state": "Pending",
                        "format": "beta",
                        "lastActivationTime": "2016-05-11T10:20:30Z",
                    },
                    {
                        "version": "blahVersion",
                        "state": "Active",
                        "format": "alpha",
                        "lastActivationTime": "2016-05-11T10:20:30Z",
                    },
                ],
            }
        ]
    }
    transport = RecordedTransport(RecordedResponse(200, body))
    client = make_client(transport)

    applications = client.application.list("resourceGroupName", "acctName", maxresults=1)

    assert transport.method == "GET"
    assert transport.uri.params["maxresults"] == "1"
    assert len(applications) == 1
    packages = applications[0].packages
    assert [p.version for p in packages] == ["fooVersion", "blahVersion"]
    assert [p.state for p in packages] == [PackageState.PENDING, PackageState.ACTIVE]


def test_list_applications_follows_next_link() -> None:
    next_link = f"https://management.azure.com{ACCOUNT_PATH}/applications?api-version=2015-12-01&page=2"
    transport = RecordedTransport.sequence(
        [
            RecordedResponse(200, {"value": [{"id": "first"}], "nextLink": next_link}),
            RecordedResponse(200, {"value": [{"id": "second"}]}),
        ]
    )
    client = make_client(transport)

    applications = client.application.list("resourceGroupName", "acctName")

    assert [a.id for a in applications] == ["first", "second"]
    assert transport.call_count == 2
    assert transport.uri.params["page"] == "2"


REQUIRED_ARGUMENTS = {
    "add_application": ("resource_group_name", "account_name", "application_id"),
    "get_application": ("resource_group_name", "account_name", "application_id"),
    "list": ("resource_group_name", "account_name"),
    "update_application": ("resource_group_name", "account_name", "application_id", "parameters"),
    "delete_application": ("resource_group_name", "account_name", "application_id"),
    "add_application_package": ("resource_group_name", "account_name", "application_id", "version"),
    "get_application_package": ("resource_group_name", "account_name", "application_id", "version"),
    "activate_application_package": (
        "resource_group_name",
        "account_name",
        "application_id",
        "version",
        "parameters",
    ),
    "delete_application_package": ("resource_group_name", "account_name", "application_id", "version"),
}

VALID_ARGUMENTS = {
    "resource_group_name": "resourceGroupName",
    "account_name": "acctName",
    "application_id": "applicationId",
    "version": "version",
}


def _valid_argument(operation: str, name: str) -> object:
    if name == "parameters":
        if operation == "activate_application_package":
            return ActivateApplicationPackageParameters(format="zip")
        return UpdateApplicationParameters(display_name="displayName")
    return VALID_ARGUMENTS[name]


@pytest.mark.parametrize(
    ("operation", "target", "missing"),
    [
        (operation, name, missing)
        for operation, names in REQUIRED_ARGUMENTS.items()
        for name in names
        for missing in (None, "")
        if not (name == "parameters" and missing == "")
    ],
)
def test_application_operations_reject_missing_arguments(operation, target, missing) -> None:
    transport = RecordedTransport(status_code_to_return=204)
    client = make_client(transport)
    args = [
        missing if name == target else _valid_argument(operation, name)
        for name in REQUIRED_ARGUMENTS[operation]
    ]

    with pytest.raises(ValidationError) as exc_info:
        getattr(client.application, operation)(*args)

    assert exc_info.value.target == target
    assert transport.call_count == 0


@pytest.mark.parametrize("operation", ["get", "delete"])
@pytest.mark.parametrize(
    ("args", "target"),
    [
        ((None, "acctName"), "resource_group_name"),
        (("resourceGroupName", ""), "account_name"),
    ],
)
def test_account_operations_reject_missing_arguments(operation, args, target) -> None:
    transport = RecordedTransport(status_code_to_return=200)
    client = make_client(transport)

    with pytest.raises(ValidationError) as exc_info:
        getattr(client.account, operation)(*args)

    assert exc_info.value.target == target
    assert transport.call_count == 0


def test_activate_requires_format() -> None:
    transport = RecordedTransport(status_code_to_return=204)
    client = make_client(transport)

    with pytest.raises(ValidationError) as exc_info:
        client.application.activate_application_package(
            "resourceGroupName",
            "acctName",
            "applicationId",
            "version",
            ActivateApplicationPackageParameters(),
        )

    assert exc_info.value.target == "format"
    assert transport.call_count == 0


def test_create_account_requires_storage_account_id() -> None:
    transport = RecordedTransport(status_code_to_return=200)
    client = make_client(transport)
    params = BatchAccountCreateParameters(
        location="westus", auto_storage=AutoStorageBaseProperties()
    )

    with pytest.raises(ValidationError) as exc_info:
        client.account.create("resourceGroupName", "acctName", params)

    assert exc_info.value.target == "storage_account_id"
    assert transport.call_count == 0


def test_missing_subscription_fails_before_request() -> None:
    transport = RecordedTransport(status_code_to_return=200)
    client = BatchManagementClient(lambda: "token", None, transport=transport)

    with pytest.raises(ValidationError) as exc_info:
        client.application.get_application("resourceGroupName", "acctName", "applicationId")

    assert exc_info.value.target == "subscription_id"
    assert transport.call_count == 0


def test_create_account_waits_for_async_operation() -> None:
    transport = RecordedTransport.sequence(
        [
            RecordedResponse(
                202,
                headers={"Azure-AsyncOperation": "https://management.azure.com/operations/op1"},
            ),
            RecordedResponse(200, {"status": "Succeeded"}),
            RecordedResponse(
                200,
                {
                    "id": ACCOUNT_PATH,
                    "name": "acctName",
                    "location": "westus",
                    "properties": {"provisioningState": "Succeeded"},
                },
            ),
        ]
    )
    client = make_client(transport)
    params = BatchAccountCreateParameters(
        location="westus",
        auto_storage=AutoStorageBaseProperties(storage_account_id="/storage/acct"),
    )

    account = client.account.create("resourceGroupName", "acctName", params)

    assert account.name == "acctName"
    assert account.provisioning_state == "Succeeded"
    assert [r.method for r in transport.requests] == ["PUT", "GET", "GET"]
    assert transport.requests[1].url.path == "/operations/op1"
    assert json.loads(transport.requests[0].content) == {
        "location": "westus",
        "properties": {"autoStorage": {"storageAccountId": "/storage/acct"}},
    }


def test_failed_async_operation_raises() -> None:
    transport = RecordedTransport.sequence(
        [
            RecordedResponse(
                202,
                headers={"Azure-AsyncOperation": "https://management.azure.com/operations/op1"},
            ),
            RecordedResponse(200, {"status": "Failed", "error": {"code": "Conflict"}}),
        ]
    )
    client = make_client(transport)

    with pytest.raises(HttpError) as exc_info:
        client.account.create(
            "resourceGroupName", "acctName", BatchAccountCreateParameters(location="westus")
        )

    assert exc_info.value.details == {"code": "Conflict"}


def test_unexpected_status_raises_http_error() -> None:
    transport = RecordedTransport(RecordedResponse(200, {}))
    client = make_client(transport)

    with pytest.raises(HttpError) as exc_info:
        client.application.delete_application("resourceGroupName", "acctName", "applicationId")

    assert exc_info.value.status_code == 200


def test_error_status_carries_service_details() -> None:
    transport = RecordedTransport(
        RecordedResponse(404, {"error": {"code": "ApplicationNotFound"}})
    )
    client = make_client(transport)

    with pytest.raises(HttpError) as exc_info:
        client.application.get_application("resourceGroupName", "acctName", "missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.details == {"error": {"code": "ApplicationNotFound"}}


def test_unparseable_body_raises_deserialization_error() -> None:
    transport = RecordedTransport(RecordedResponse(200, "{not json"))
    client = make_client(transport)

    with pytest.raises(DeserializationError):
        client.application.get_application("resourceGroupName", "acctName", "applicationId")


def test_bad_field_type_fails_whole_operation() -> None:
    transport = RecordedTransport(
        RecordedResponse(201, {"id": "foo", "lastActivationTime": "yesterday"})
    )
    client = make_client(transport)

    with pytest.raises(DeserializationError):
        client.application.add_application_package("resourceGroupName", "acctName", "foo", "beta")
