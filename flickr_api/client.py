"""
Flickr API client.

Builds signed requests, sends them through a pluggable transport and
classifies the XML envelope of every reply.
"""

import logging
from typing import Any, Mapping, Optional
from urllib.parse import urlsplit

from .auth import build_auth_url
from .constants import DEFAULT_CONFIG, PARAM_API_KEY, PARAM_API_SIG, PARAM_METHOD
from .exceptions import ConfigurationError
from .request import Request, build_request
from .response import Response, interpret
from .signing import Credentials, sign_args
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)


def _is_positive_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


class FlickrClient:
    """
    Client for the Flickr REST API.

    Calls are signed when a secret is configured. Without one they go out
    unsigned and methods that require signing are rejected by the service.
    """

    def __init__(self, api_key: str, api_secret: Optional[str] = None,
                 transport: Optional[Transport] = None, **config):
        """
        Initialize Flickr client.

        Args:
            api_key: Your API key
            api_secret: Your API key's secret, required for signing
            transport: Object with send(request) -> RawResponse; defaults to
                a RequestsTransport built from config
            **config: Configuration options (rest_uri, auth_uri, timeout,
                compression_enabled, user_agent)
        """
        unknown = set(config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"Unknown configuration options: {', '.join(sorted(unknown))}")

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()

        self._credentials = Credentials(api_key, api_secret)

        self._owns_transport = transport is None
        if transport is None:
            transport = RequestsTransport(
                timeout=self.config['timeout'],
                compression_enabled=self.config['compression_enabled'],
                user_agent=self.config['user_agent']
            )
        self.transport = transport

    def _validate_config(self):
        """Validate client configuration."""
        for key in ('rest_uri', 'auth_uri'):
            parts = urlsplit(self.config[key] or '')
            if parts.scheme not in ('http', 'https') or not parts.netloc:
                raise ConfigurationError(f"{key} must be an absolute http(s) URL")

        timeout = self.config['timeout']
        parts = timeout if isinstance(timeout, tuple) else (timeout,)
        if len(parts) not in (1, 2) or not all(_is_positive_number(p) for p in parts):
            raise ConfigurationError("timeout must be a positive number or a (connect, read) pair")

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def api_key(self) -> str:
        return self._credentials.api_key

    def sign_args(self, args: Mapping[Any, Any]) -> str:
        """
        Sign an argument set with this client's secret.

        Raises:
            ConfigurationError: If no secret was configured
        """
        return sign_args(self._credentials.api_secret, args)

    def request_auth_url(self, perms: str, frob: Optional[str] = None) -> Optional[str]:
        """
        URL an application must redirect a user to for approving a token.

        Args:
            perms: Requested permission level
            frob: Optional for web-based applications

        Returns:
            The URL, or None if no secret was configured
        """
        return build_auth_url(self._credentials, perms, frob, auth_uri=self.config['auth_uri'])

    def build_request(self, method: str, args: Optional[Mapping[Any, Any]] = None) -> Request:
        """Build a Request for method against the configured REST endpoint."""
        return build_request(method, args, self._credentials, self.config['rest_uri'])

    def execute_method(self, method: str, args: Optional[Mapping[Any, Any]] = None) -> Response:
        """
        Call an API method.

        Args:
            method: Method name, e.g. "flickr.test.echo"
            args: Method arguments

        Returns:
            Classified Response

        Raises:
            requests.RequestException: If the default transport cannot reach the service
        """
        return self._send(self.build_request(method, args))

    def execute_request(self, request: Request) -> Response:
        """
        Execute a Request built elsewhere.

        method and api_key are re-injected for this client's credentials and
        the request is re-signed when a secret is configured.
        """
        args = {key: value for key, value in request.args.items()
                if key not in (PARAM_METHOD, PARAM_API_KEY, PARAM_API_SIG)}
        return self._send(build_request(request.method, args, self._credentials, request.endpoint))

    def _send(self, request: Request) -> Response:
        logger.debug("Executing %s (signed=%s)", request.method, request.signed)
        raw = self.transport.send(request)
        return interpret(raw.status, raw.body)

    def close(self):
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
