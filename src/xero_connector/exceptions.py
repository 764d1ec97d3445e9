"""Errors raised by the Xero connector."""

from typing import Any


class XeroConnectorError(Exception):
    """Base error for Xero connector calls."""

    def __init__(self, message: str, status_code: int | None = None, details: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class XeroAuthorizationError(XeroConnectorError):
    """OAuth signing failed or Xero rejected the OAuth credentials."""


class XeroUnexpectedError(XeroConnectorError):
    """Any other failure: network, encoding, bad input or transport."""
