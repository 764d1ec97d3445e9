"""Xero API client."""

from .client import ListOptions, XeroClient, XeroRequest
from .object_types import ReadableObjectType, WritableObjectType

__all__ = ["ListOptions", "ReadableObjectType", "WritableObjectType", "XeroClient", "XeroRequest"]
