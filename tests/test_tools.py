"""Tests for the MCP tool handlers."""

from unittest.mock import AsyncMock

import pytest

from xero_connector import ConnectorConfig, ListOptions, XeroAuthorizationError, XeroUnexpectedError
from xero_connector.tools import ALL_TOOLS, handle_object_tool, handle_status_tool


@pytest.fixture
def mock_client():
    client = AsyncMock()
    client.list_objects.return_value = "<Contacts/>"
    client.get_object.return_value = "<Invoices/>"
    client.create_object.return_value = "<Created/>"
    client.update_object.return_value = "<Updated/>"
    return client


def test_all_tools_listed():
    names = {tool.name for tool in ALL_TOOLS}

    assert names == {
        "xero_connection_status",
        "xero_list_objects",
        "xero_get_object",
        "xero_create_object",
        "xero_update_object",
    }


async def test_list_objects_tool(mock_client):
    result = await handle_object_tool(
        "xero_list_objects",
        {"object_type": "Contacts", "where": 'Name=="Acme"', "order": "Name"},
        mock_client,
    )

    assert result == {"object_type": "Contacts", "xml": "<Contacts/>"}
    mock_client.list_objects.assert_awaited_once_with("Contacts", ListOptions(where='Name=="Acme"', order="Name"))


async def test_get_object_tool(mock_client):
    result = await handle_object_tool("xero_get_object", {"object_type": "Invoices", "object_id": "INV-1"}, mock_client)

    assert result["xml"] == "<Invoices/>"
    mock_client.get_object.assert_awaited_once_with("Invoices", "INV-1")


async def test_write_tools(mock_client):
    created = await handle_object_tool("xero_create_object", {"object_type": "Contacts", "xml": "<C/>"}, mock_client)
    updated = await handle_object_tool("xero_update_object", {"object_type": "Contacts", "xml": "<U/>"}, mock_client)

    assert created["xml"] == "<Created/>"
    assert updated["xml"] == "<Updated/>"
    mock_client.create_object.assert_awaited_once_with("Contacts", "<C/>")
    mock_client.update_object.assert_awaited_once_with("Contacts", "<U/>")


async def test_authorization_error_reported(mock_client):
    mock_client.list_objects.side_effect = XeroAuthorizationError("token_rejected", status_code=401)

    result = await handle_object_tool("xero_list_objects", {"object_type": "Contacts"}, mock_client)

    assert result == {"error": "token_rejected", "error_type": "authorization"}


async def test_unexpected_error_reported(mock_client):
    mock_client.create_object.side_effect = XeroUnexpectedError("connection refused")

    result = await handle_object_tool("xero_create_object", {"object_type": "Contacts", "xml": "<C/>"}, mock_client)

    assert result == {"error": "connection refused", "error_type": "unexpected"}


async def test_missing_xml_argument_reported(mock_client):
    result = await handle_object_tool("xero_update_object", {"object_type": "Contacts"}, mock_client)

    assert result["error_type"] == "unexpected"
    mock_client.update_object.assert_not_awaited()


async def test_unknown_object_tool(mock_client):
    result = await handle_object_tool("xero_delete_object", {}, mock_client)

    assert result == {"error": "Unknown object tool: xero_delete_object"}


async def test_connection_status_tool():
    config = ConnectorConfig(
        api_url="https://api.xero.com/api.xro/2.0/",
        consumer_key="ck",
        consumer_secret="cs",
        access_key="ak",
        access_secret="as",
    )

    result = await handle_status_tool("xero_connection_status", {}, config)

    assert result == {
        "configured": True,
        "api_url": "https://api.xero.com/api.xro/2.0/",
        "signature_method": "HMAC-SHA1",
        "consumer_key": "ck",
    }
    assert "cs" not in result.values()
