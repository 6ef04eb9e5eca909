"""
Custom exceptions for the Flickr API client library.
"""


class FlickrAPIError(Exception):
    """Base exception for Flickr API client errors."""
    pass


class ConfigurationError(FlickrAPIError):
    """Raised when client configuration is invalid or a secret is required but missing."""
    pass


class ResponseError(FlickrAPIError):
    """Base exception for unsuccessful responses, raised by Response.raise_for_error()."""

    def __init__(self, message: str, response=None):
        super().__init__(message)
        self.response = response


class ProtocolError(ResponseError):
    """Raised when the service returned a non-200 status or a malformed envelope."""
    pass


class MethodFailedError(ResponseError):
    """Raised when the envelope reports stat="fail"."""

    def __init__(self, code: int, message: str, response=None):
        super().__init__(f"Method failed with error {code}: {message}", response)
        self.code = code
        self.message = message
