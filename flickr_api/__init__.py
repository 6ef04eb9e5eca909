"""
Flickr API Client Library

A Python client for the Flickr REST API that signs requests with the
application secret and classifies the XML response envelope.

Example usage:
    from flickr_api import FlickrClient

    client = FlickrClient("your_api_key", "your_app_secret")
    response = client.execute_method("flickr.test.echo", {"foo": "bar"})
    if response.success:
        print(response.find("foo").text)
"""

import logging

from .client import FlickrClient
from .auth import build_auth_url
from .request import Request, build_request
from .response import Outcome, Response, interpret
from .signing import Credentials, sign_args
from .transport import RawResponse, RequestsTransport, Transport
from .exceptions import (
    FlickrAPIError,
    ConfigurationError,
    ResponseError,
    ProtocolError,
    MethodFailedError
)
from .constants import (
    DEFAULT_REST_URI,
    DEFAULT_AUTH_URI,
    DEFAULT_CONFIG,
    VERSION
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = VERSION
__author__ = "Flickr API Client contributors"
__all__ = [
    "FlickrClient",
    "Credentials",
    "Request",
    "Response",
    "Outcome",
    "RawResponse",
    "Transport",
    "RequestsTransport",
    "build_request",
    "build_auth_url",
    "interpret",
    "sign_args",
    "FlickrAPIError",
    "ConfigurationError",
    "ResponseError",
    "ProtocolError",
    "MethodFailedError",
    "DEFAULT_REST_URI",
    "DEFAULT_AUTH_URI",
    "DEFAULT_CONFIG"
]
