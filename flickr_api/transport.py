"""
HTTP transport for the Flickr API client.

The client talks to the network only through an object with a
send(request) -> RawResponse method. RequestsTransport is the default;
callers may pass their own (for example one wrapping a caching session).
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

import requests

from .constants import DEFAULT_CONFIG
from .request import Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and body exactly as delivered by a transport."""

    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport(Protocol):
    """Minimal capability the client needs from an HTTP layer."""

    def send(self, request: Request) -> RawResponse:
        ...


class RequestsTransport:
    """
    Transport backed by a requests.Session.

    Connectivity errors raised by requests are not caught here and reach
    the caller unchanged.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_CONFIG['timeout'],
                 compression_enabled: bool = DEFAULT_CONFIG['compression_enabled'],
                 user_agent: str = DEFAULT_CONFIG['user_agent']):
        """
        Initialize the transport.

        Args:
            session: Pre-configured session to use instead of a new one; its
                headers are left untouched and user_agent and
                compression_enabled are ignored
            timeout: Request timeout in seconds
            compression_enabled: Whether to ask the service for gzip bodies
            user_agent: User-Agent header value
        """
        self.timeout = timeout
        if session is not None:
            # A caller's session is used exactly as configured
            self.session = session
            return

        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': user_agent,
            'Accept-Encoding': 'gzip' if compression_enabled else 'identity',
        })

    def send(self, request: Request) -> RawResponse:
        """POST the request's form body to its endpoint."""
        logger.debug("POST %s (%s)", request.endpoint, request.method)
        response = self.session.post(
            request.endpoint,
            data=request.body,
            headers={'Content-Type': request.content_type},
            timeout=self.timeout
        )
        return RawResponse(
            status=response.status_code,
            body=response.content,
            headers=dict(response.headers)
        )

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
