"""OAuth 1.0a signing and credential lookup."""

from .credentials import get_secure_credential
from .oauth1 import AccessToken, OAuth1SigningService, SignedRequest

__all__ = ["AccessToken", "OAuth1SigningService", "SignedRequest", "get_secure_credential"]
