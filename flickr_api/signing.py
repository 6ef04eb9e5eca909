"""
Argument signing for the Flickr API.

The signature is the MD5 hex digest of the shared secret followed by every
argument name and value, concatenated in byte-wise key order.
"""

import hashlib
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .exceptions import ConfigurationError

Text = Union[str, bytes]


@dataclass(frozen=True)
class Credentials:
    """API key and optional shared secret for a client."""

    api_key: str
    api_secret: Optional[str] = None

    def __post_init__(self):
        if not self.api_key:
            raise ConfigurationError("api_key cannot be empty")

    @property
    def has_secret(self) -> bool:
        """True when a non-empty secret is available for signing."""
        return bool(self.api_secret)

    def __repr__(self) -> str:
        secret = "<set>" if self.has_secret else None
        return f"Credentials(api_key={self.api_key!r}, api_secret={secret!r})"


def to_utf8(value: Any) -> bytes:
    """
    Normalize a key or value to UTF-8 bytes.

    Text is encoded, bytes pass through untouched, None becomes the empty
    string and any other scalar is rendered with str().
    """
    if value is None:
        return b""
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        value = str(value)
    return value.encode('utf-8')


def sign_args(secret: Text, args: Mapping[Any, Any]) -> str:
    """
    Compute the api_sig for a set of arguments.

    Args:
        secret: Shared API secret
        args: Argument names and values; None values are signed as ''

    Returns:
        32 character lowercase hex digest

    Raises:
        ConfigurationError: If secret is empty
    """
    if not secret:
        raise ConfigurationError("Cannot sign arguments without an API secret")

    pairs = sorted((to_utf8(key), to_utf8(value)) for key, value in args.items())

    digest = hashlib.md5(to_utf8(secret))
    for key, value in pairs:
        digest.update(key)
        digest.update(value)
    return digest.hexdigest()
