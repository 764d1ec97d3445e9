"""OAuth 1.0a request signing for the Xero API."""

import logging
from dataclasses import dataclass, field

from authlib.oauth1 import SIGNATURE_RSA_SHA1, SIGNATURE_TYPE_HEADER, ClientAuth

from ..exceptions import XeroAuthorizationError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class AccessToken:
    """OAuth 1.0a access token used to sign every request."""

    key: str
    secret: str

    def __repr__(self) -> str:
        return f"AccessToken(key={self.key!r}, secret='***')"


@dataclass(frozen=True)
class SignedRequest:
    """A request carrying its OAuth Authorization header, ready to send."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


class OAuth1SigningService:
    """Sign requests with the consumer credentials of a Xero application.

    Public and partner applications sign with HMAC-SHA1 using the consumer
    secret. Private applications sign with RSA-SHA1 using the PEM key
    registered with Xero.
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        signature_method: str,
        rsa_key: str | None = None,
    ):
        """Initialize the signing service.

        Args:
            consumer_key: Xero application consumer key
            consumer_secret: Xero application consumer secret
            signature_method: HMAC-SHA1 or RSA-SHA1
            rsa_key: PEM private key (RSA-SHA1 only)

        Raises:
            XeroAuthorizationError: If the credentials cannot be used for signing
        """
        if not consumer_key:
            raise XeroAuthorizationError("Consumer key is required for OAuth signing")
        if signature_method == SIGNATURE_RSA_SHA1 and not rsa_key:
            raise XeroAuthorizationError("RSA-SHA1 signing requires an RSA private key")

        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.signature_method = signature_method
        self.rsa_key = rsa_key

    def sign(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | bytes,
        token: AccessToken,
    ) -> SignedRequest:
        """Sign a request with the given access token.

        Form-encoded bodies take part in the signature base string; any other
        body is sent as-is and left out of it.

        Args:
            method: HTTP method
            url: Full URL, query string included
            headers: Request headers (Content-Type decides how the body is signed)
            body: Form-encoded string or raw payload bytes
            token: Access token to sign with

        Returns:
            Signed request

        Raises:
            XeroAuthorizationError: If signing fails
        """
        try:
            auth = ClientAuth(
                self.consumer_key,
                client_secret=self.consumer_secret,
                token=token.key,
                token_secret=token.secret,
                rsa_key=self.rsa_key,
                signature_method=self.signature_method,
                signature_type=SIGNATURE_TYPE_HEADER,
            )
            signed_url, signed_headers, signed_body = auth.prepare(method, url, dict(headers), body)
        except Exception as e:
            raise XeroAuthorizationError(f"Failed to sign Xero request: {e}", details=str(e)) from e

        # Authlib only hands back form bodies; raw payloads go out as given
        if FORM_CONTENT_TYPE not in signed_headers.get("Content-Type", ""):
            signed_body = body
        if isinstance(signed_body, str):
            signed_body = signed_body.encode("utf-8")

        logger.debug(f"Signed {method} {url} with {self.signature_method}")
        return SignedRequest(
            method=method,
            url=signed_url,
            headers=dict(signed_headers),
            body=signed_body or b"",
        )
