"""
Tests for the MCP tool handlers and tool routing.
"""
import json

import pytest

from hubspot_crm.handlers.association_handler import AssociationHandler
from hubspot_crm.handlers.contact_handler import ContactHandler
from hubspot_crm.server import call_tool, list_tools

from test_association_client import ASSOCIATION_BODY, INVALID_CONTACT_AND_COMPANY_BODY
from test_contact_client import CONFLICT_BODY, CONTACT_BODY


def handlers_for(client):
    return ContactHandler(client), AssociationHandler(client)


def response_json(response):
    assert len(response) == 1
    assert response[0].type == "text"
    return json.loads(response[0].text)


def test_list_tools_names():
    names = [tool.name for tool in list_tools(*handlers_for(None))]

    assert names == [
        "hubspot_create_contact",
        "hubspot_update_contact",
        "hubspot_read_contact",
        "hubspot_delete_contact",
        "hubspot_create_association",
    ]


def test_create_contact_tool(make_client):
    client, mock = make_client(201, CONTACT_BODY)

    response = call_tool(
        "hubspot_create_contact",
        {"email": "pp@gmail.com", "firstname": "Peter", "properties": {"company": "Marvel"}},
        *handlers_for(client),
    )

    data = response_json(response)
    assert data["id"] == "551"
    assert data["createdAt"] == "2020-08-20T15:47:54.554000Z"
    assert json.loads(mock.requests[0]["data"]) == {
        "properties": {"email": "pp@gmail.com", "firstname": "Peter", "company": "Marvel"}
    }


def test_create_contact_tool_reports_api_error(make_client):
    client, _ = make_client(409, CONFLICT_BODY)

    response = call_tool("hubspot_create_contact", {"email": "pp@gmail.com"}, *handlers_for(client))

    error = response_json(response)["error"]
    assert error["statusCode"] == 409
    assert error["category"] == "CONFLICT"


def test_update_contact_tool(make_client):
    client, mock = make_client(200, CONTACT_BODY)

    response = call_tool(
        "hubspot_update_contact",
        {"contact_id": 551, "properties": {"company": "Marvel"}},
        *handlers_for(client),
    )

    assert response_json(response)["id"] == "551"
    assert "/objects/contacts/551?" in mock.requests[0]["url"]


def test_read_contact_tool_not_found(make_client):
    client, _ = make_client(404, "")

    response = call_tool("hubspot_read_contact", {"email": "nobody@example.com"}, *handlers_for(client))

    error = response_json(response)["error"]
    assert error["statusCode"] == 404
    assert error["category"] == "OBJECT_NOT_FOUND"


def test_delete_contact_tool(make_client):
    client, _ = make_client(204, "")

    response = call_tool("hubspot_delete_contact", {"contact_id": "551"}, *handlers_for(client))

    assert response_json(response) == {"deleted": True, "id": "551"}


def test_create_association_tool(make_client):
    client, mock = make_client(201, ASSOCIATION_BODY)

    response = call_tool(
        "hubspot_create_association",
        {"from_id": "3051", "to_id": "4705054985"},
        *handlers_for(client),
    )

    assert response_json(response)["status"] == "COMPLETE"
    assert "/associations/contact/company/batch/create?" in mock.requests[0]["url"]


def test_create_association_tool_reports_every_error(make_client):
    client, _ = make_client(207, INVALID_CONTACT_AND_COMPANY_BODY)

    response = call_tool(
        "hubspot_create_association",
        {"from_id": "9993051", "to_id": "994705054985"},
        *handlers_for(client),
    )

    error = response_json(response)["error"]
    assert error["numErrors"] == 2
    assert len(error["errors"]) == 2


@pytest.mark.parametrize(
    "name, arguments, message",
    [
        ("hubspot_create_contact", None, "Error: Missing arguments. Required: email"),
        ("hubspot_delete_contact", {"id": "1"}, "Error: Missing required argument: contact_id"),
        ("hubspot_unknown", {}, "Error: Unknown tool: hubspot_unknown"),
    ],
)
def test_call_tool_argument_errors(make_client, name, arguments, message):
    client, mock = make_client(201, CONTACT_BODY)

    response = call_tool(name, arguments, *handlers_for(client))

    assert response[0].text == message
    assert mock.requests == []


def test_error_keys_use_hubspot_field_names(make_client):
    client, _ = make_client(409, CONFLICT_BODY)

    response = call_tool("hubspot_create_contact", {"email": "pp@gmail.com"}, *handlers_for(client))

    error = response_json(response)["error"]
    assert error["correlationId"] == "64c72d80-c369-409f-b2ec-c233d4928080"
    assert "status_code" not in error
    assert "correlation_id" not in error


@pytest.mark.parametrize(
    "name, arguments",
    [
        ("hubspot_read_contact", {"email": 5}),
        ("hubspot_create_association", {"from_id": "1", "to_id": "2", "from_object": None}),
        ("hubspot_create_contact", {"email": "pp@gmail.com", "properties": [1]}),
    ],
    ids=["email not a string", "from object missing", "properties not a mapping"],
)
def test_call_tool_wrong_argument_types_return_error_text(make_client, name, arguments):
    client, mock = make_client(201, CONTACT_BODY)

    response = call_tool(name, arguments, *handlers_for(client))

    assert len(response) == 1
    assert response[0].text.startswith("Error: ")
    assert mock.requests == []
