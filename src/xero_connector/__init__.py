"""Xero connector: OAuth 1.0a signed access to the Xero accounting API."""

from .config import ConnectorConfig
from .exceptions import XeroAuthorizationError, XeroConnectorError, XeroUnexpectedError
from .xero import ListOptions, ReadableObjectType, WritableObjectType, XeroClient, XeroRequest

__all__ = [
    "ConnectorConfig",
    "ListOptions",
    "ReadableObjectType",
    "WritableObjectType",
    "XeroAuthorizationError",
    "XeroClient",
    "XeroConnectorError",
    "XeroRequest",
    "XeroUnexpectedError",
]
