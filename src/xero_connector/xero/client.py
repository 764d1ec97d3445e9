"""Xero API client issuing OAuth 1.0a signed requests."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import parse_qsl

import aiohttp
from yarl import URL

from ..auth import AccessToken, OAuth1SigningService, SignedRequest
from ..auth.oauth1 import FORM_CONTENT_TYPE
from ..config import ConnectorConfig
from ..exceptions import XeroAuthorizationError, XeroConnectorError, XeroUnexpectedError
from .object_types import ReadableObjectType, WritableObjectType

logger = logging.getLogger(__name__)

XML_CONTENT_TYPE = "application/xml; charset=utf-8"

# Body parameter Xero reads the document from on form-encoded POSTs
XML_BODY_PARAMETER = "xml"


@dataclass(frozen=True)
class ListOptions:
    """Optional filter and ordering clauses for listing objects."""

    where: str | None = None
    order: str | None = None

    def to_query(self) -> dict[str, str]:
        """Query string parameters for the clauses that are present."""
        query: dict[str, str] = {}
        if self.where is not None:
            query["where"] = self.where
        if self.order is not None:
            query["order"] = self.order
        return query


@dataclass(frozen=True)
class XeroRequest:
    """A single call to the Xero API.

    Unused parameter slots must be empty mappings, never None. When a payload
    is given it is sent as the raw body and any body parameters are ignored.
    """

    method: str
    url: str
    query_params: Mapping[str, str] = field(default_factory=dict)
    body_params: Mapping[str, str] = field(default_factory=dict)
    payload: str | None = None

    def __post_init__(self) -> None:
        if self.query_params is None:
            raise TypeError("query_params must be a mapping, use {} when there are none")
        if self.body_params is None:
            raise TypeError("body_params must be a mapping, use {} when there are none")

    def prepare(self) -> tuple[str, dict[str, str], str | bytes]:
        """Build the full URL, headers and body to be signed.

        Returns:
            Tuple of (url, headers, body)
        """
        url = URL(self.url, encoded=True)
        if self.query_params:
            url = url.update_query(dict(self.query_params))

        headers: dict[str, str] = {}
        body: str | bytes = b""

        if self.payload is not None:
            headers["Content-Type"] = XML_CONTENT_TYPE
            body = self.payload.encode("utf-8")
        elif self.body_params:
            headers["Content-Type"] = FORM_CONTENT_TYPE
            body = URL.build(query=dict(self.body_params)).raw_query_string

        return str(url), headers, body


class XeroClient:
    """Client for the Xero accounting API using OAuth 1.0a signing."""

    def __init__(self, config: ConnectorConfig):
        """Initialize Xero client.

        Args:
            config: Connector configuration (API URL and OAuth credentials)
        """
        self.config = config
        self.access_token = AccessToken(config.access_key, config.access_secret)

    def build_request_uri(self, object_type: str, object_id: str | None = None) -> str:
        """Build the full target URL for an object type.

        Segments are appended as given, without escaping.

        Args:
            object_type: Xero object type appended to the API URL
            object_id: Optional object identifier appended after a slash

        Returns:
            Full Xero API URL
        """
        url = f"{self.config.api_url}{object_type}"
        if object_id is not None:
            url = f"{url}/{object_id}"
        return url

    # ==================== Read ====================

    async def list_objects(
        self,
        object_type: ReadableObjectType | str,
        options: ListOptions | None = None,
    ) -> str:
        """List Xero objects of a type.

        Args:
            object_type: Xero object type (e.g. Contacts)
            options: Optional 'where' filter and 'order' clauses

        Returns:
            Xero XML response

        Raises:
            XeroAuthorizationError: If OAuth signing fails or Xero rejects the credentials
            XeroUnexpectedError: If anything else fails
        """
        segment = _readable_segment(object_type)
        query = options.to_query() if options else {}
        return await self.call_xero(XeroRequest("GET", self.build_request_uri(segment), query_params=query))

    async def get_object(self, object_type: ReadableObjectType | str, object_id: str | None = None) -> str:
        """Get a Xero object, or the object type's resource when no ID is given.

        Args:
            object_type: Xero object type
            object_id: Xero object identifier

        Returns:
            Xero XML response
        """
        segment = _readable_segment(object_type)
        return await self.call_xero(XeroRequest("GET", self.build_request_uri(segment, object_id)))

    # ==================== Write ====================

    async def update_object(self, object_type: WritableObjectType | str, payload: str) -> str:
        """Update Xero objects from an XML document.

        The document is posted form-encoded as the 'xml' body parameter.

        Args:
            object_type: Writable Xero object type
            payload: XML request document

        Returns:
            Xero XML response
        """
        segment = _writable_segment(object_type)
        return await self.call_xero(
            XeroRequest(
                "POST",
                self.build_request_uri(segment),
                body_params={XML_BODY_PARAMETER: payload},
            )
        )

    async def create_object(self, object_type: WritableObjectType | str, payload: str) -> str:
        """Create Xero objects from an XML document.

        The document is posted as the raw UTF-8 request body.

        Args:
            object_type: Writable Xero object type
            payload: XML request document

        Returns:
            Xero XML response
        """
        segment = _writable_segment(object_type)
        return await self.call_xero(XeroRequest("POST", self.build_request_uri(segment), payload=payload))

    # ==================== Execution ====================

    def signing_service(self) -> OAuth1SigningService:
        """Create a signing service bound to the configured consumer credentials."""
        return OAuth1SigningService(
            self.config.consumer_key,
            self.config.consumer_secret,
            signature_method=self.config.signature_method,
            rsa_key=self.config.rsa_key,
        )

    async def call_xero(self, request: XeroRequest) -> str:
        """Sign and send a request, returning the response body.

        Args:
            request: Request to execute

        Returns:
            Response body text, whatever the HTTP status

        Raises:
            XeroAuthorizationError: If OAuth signing fails or Xero rejects the credentials
            XeroUnexpectedError: If anything else fails
        """
        service = self.signing_service()

        try:
            url, headers, body = request.prepare()
        except Exception as e:
            raise XeroUnexpectedError(f"Failed to build Xero request: {e}", details=str(e)) from e

        signed = service.sign(request.method, url, headers, body, self.access_token)

        try:
            return await self._send(signed)
        except XeroConnectorError:
            raise
        except Exception as e:
            raise XeroUnexpectedError(f"Xero request failed: {e}", details=repr(e)) from e

    async def _send(self, signed: SignedRequest) -> str:
        """Send a signed request once and read the response body."""
        logger.debug(f"Xero request: {signed.method} {signed.url}")

        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.request(
                signed.method,
                URL(signed.url, encoded=True),
                headers=signed.headers,
                data=signed.body or None,
            ) as response:
                text = await response.text()
                status = response.status

        if status >= 400:
            logger.warning(f"Xero responded {status} to {signed.method} {signed.url}")

        if status == 401 and "oauth_problem" in text:
            problem = dict(parse_qsl(text.strip()))
            raise XeroAuthorizationError(
                f"Xero rejected OAuth credentials: {problem.get('oauth_problem', 'unknown')}",
                status_code=status,
                details=problem,
            )

        return text


def _readable_segment(object_type: ReadableObjectType | str) -> str:
    """Return the URL segment for a readable object type."""
    if not isinstance(object_type, str) or not object_type:
        raise XeroUnexpectedError(f"Invalid Xero object type: {object_type!r}")
    return str(object_type)


def _writable_segment(object_type: WritableObjectType | str) -> str:
    """Return the URL segment for a writable object type."""
    try:
        return str(WritableObjectType(object_type))
    except ValueError as e:
        raise XeroUnexpectedError(f"{object_type!r} is not a writable Xero object type") from e
