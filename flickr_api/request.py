"""
Request value object and builder.

A Request carries the final argument set for one API call (including the
injected method, api_key and api_sig) plus the endpoint it targets. Building
one performs no network I/O.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from .constants import (
    DEFAULT_REST_URI,
    FORM_CONTENT_TYPE,
    PARAM_API_KEY,
    PARAM_API_SIG,
    PARAM_METHOD
)
from .signing import Credentials, sign_args, to_utf8

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    """A single, immutable Flickr API call."""

    method: str
    args: Mapping[Any, Any] = field(default_factory=dict)
    endpoint: str = DEFAULT_REST_URI

    # args is a read-only mapping, which cannot be hashed
    __hash__ = None

    def __post_init__(self):
        if not self.method:
            raise ValueError("method cannot be empty")
        # Freeze a private copy so neither side can mutate the other
        object.__setattr__(self, 'args', MappingProxyType(dict(self.args)))

    @property
    def signed(self) -> bool:
        """True when the argument set carries an api_sig."""
        return PARAM_API_SIG in self.args

    @property
    def content_type(self) -> str:
        return FORM_CONTENT_TYPE

    @property
    def body(self) -> bytes:
        """Form-encoded request body (UTF-8)."""
        return encode_args(self.args)


def encode_args(args: Mapping[Any, Any]) -> bytes:
    """Form-encode an argument set; None values are sent as empty strings."""
    return urlencode([(to_utf8(key), to_utf8(value)) for key, value in args.items()]).encode('ascii')


def build_request(method: str, args: Optional[Mapping[Any, Any]],
                  credentials: Credentials,
                  endpoint: str = DEFAULT_REST_URI) -> Request:
    """
    Assemble a Request for a method call.

    Injects method and api_key into a copy of args and, when the credentials
    carry a secret, signs the full set and adds api_sig. Without a secret the
    request goes out unsigned.

    Args:
        method: API method name, e.g. "flickr.test.echo"
        args: Method arguments (not modified)
        credentials: Key and optional secret
        endpoint: REST endpoint URL

    Returns:
        Request ready to be sent
    """
    if not method:
        raise ValueError("method cannot be empty")

    final_args = dict(args or {})
    final_args.pop(PARAM_API_SIG, None)
    final_args[PARAM_METHOD] = method
    final_args[PARAM_API_KEY] = credentials.api_key

    if credentials.has_secret:
        final_args[PARAM_API_SIG] = sign_args(credentials.api_secret, final_args)

    logger.debug("Built request for %s (signed=%s)", method, credentials.has_secret)
    return Request(method=method, args=final_args, endpoint=endpoint)
