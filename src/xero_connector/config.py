"""Connector configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

from authlib.oauth1 import SIGNATURE_HMAC_SHA1, SIGNATURE_RSA_SHA1

from .auth.credentials import get_secure_credential

# Xero accounting API base URL (object types are appended directly)
DEFAULT_API_URL = "https://api.xero.com/api.xro/2.0/"

# Seconds allowed for a whole request/response exchange
DEFAULT_TIMEOUT = 60.0

SIGNATURE_METHODS = (SIGNATURE_HMAC_SHA1, SIGNATURE_RSA_SHA1)

# Field name -> (secure storage name, environment variable)
_CREDENTIAL_SOURCES = {
    "consumer_key": ("xero-consumer-key", "XERO_CONSUMER_KEY"),
    "consumer_secret": ("xero-consumer-secret", "XERO_CONSUMER_SECRET"),
    "access_key": ("xero-access-key", "XERO_ACCESS_KEY"),
    "access_secret": ("xero-access-secret", "XERO_ACCESS_SECRET"),
}


@dataclass(frozen=True)
class ConnectorConfig:
    """Immutable settings for a Xero connector client."""

    api_url: str
    consumer_key: str
    consumer_secret: str
    access_key: str
    access_secret: str
    signature_method: str = SIGNATURE_HMAC_SHA1
    rsa_key: str | None = field(default=None, repr=False)
    timeout: float | None = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.signature_method not in SIGNATURE_METHODS:
            raise ValueError(
                f"Unsupported signature method {self.signature_method!r}, "
                f"expected one of {', '.join(SIGNATURE_METHODS)}"
            )

    def __repr__(self) -> str:
        return (
            f"ConnectorConfig(api_url={self.api_url!r}, consumer_key={self.consumer_key!r}, "
            f"access_key={self.access_key!r}, signature_method={self.signature_method!r})"
        )

    @property
    def is_configured(self) -> bool:
        """Check if enough credentials are present to sign requests."""
        return bool(self.consumer_key and self.access_key)

    @classmethod
    def from_environment(cls, **overrides: Any) -> Self:
        """Build a configuration from overrides, secure storage and environment.

        Args:
            **overrides: Explicit field values, taking precedence over everything else

        Lookup order for credentials:
            1. Explicit override
            2. Platform secure storage (xero-consumer-key, xero-consumer-secret,
               xero-access-key, xero-access-secret)
            3. Environment variable (XERO_CONSUMER_KEY, XERO_CONSUMER_SECRET,
               XERO_ACCESS_KEY, XERO_ACCESS_SECRET)

        Other settings come from XERO_API_URL, XERO_SIGNATURE_METHOD,
        XERO_RSA_KEY_FILE and XERO_TIMEOUT.
        """
        values: dict[str, Any] = {}

        for name, (secret_name, env_var) in _CREDENTIAL_SOURCES.items():
            if name in overrides:
                values[name] = overrides[name]
            else:
                values[name] = get_secure_credential(secret_name) or os.environ.get(env_var, "")

        values["api_url"] = overrides.get("api_url", os.environ.get("XERO_API_URL", DEFAULT_API_URL))
        values["signature_method"] = overrides.get(
            "signature_method", os.environ.get("XERO_SIGNATURE_METHOD", SIGNATURE_HMAC_SHA1)
        ).upper()

        rsa_key = overrides.get("rsa_key")
        if "rsa_key" not in overrides and os.environ.get("XERO_RSA_KEY_FILE"):
            rsa_key = Path(os.environ["XERO_RSA_KEY_FILE"]).expanduser().read_text(encoding="utf-8")
        values["rsa_key"] = rsa_key

        if "timeout" in overrides:
            values["timeout"] = overrides["timeout"]
        elif os.environ.get("XERO_TIMEOUT"):
            values["timeout"] = float(os.environ["XERO_TIMEOUT"])

        return cls(**values)
