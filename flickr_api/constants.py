"""
Constants for the Flickr API client library.
Endpoint defaults and wire-level parameter names of the REST/XML dialect.
"""

# Service endpoints
DEFAULT_REST_URI = "http://api.flickr.com/services/rest/"
DEFAULT_AUTH_URI = "http://api.flickr.com/services/auth/"

# Request parameters injected by the client
PARAM_METHOD = "method"
PARAM_API_KEY = "api_key"
PARAM_API_SIG = "api_sig"
PARAM_PERMS = "perms"
PARAM_FROB = "frob"

# Response envelope
RSP_TAG = "rsp"
ERR_TAG = "err"
STAT_OK = "ok"
STAT_FAIL = "fail"

# Permission levels accepted by the auth endpoint (long and legacy short forms)
KNOWN_PERMS = frozenset({"read", "write", "delete", "r", "w", "d"})

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
GZIP_MAGIC = b"\x1f\x8b"

VERSION = "1.0.0"
USER_AGENT = f"flickr-api-python/{VERSION}"

# Default configuration values
DEFAULT_CONFIG = {
    'rest_uri': DEFAULT_REST_URI,
    'auth_uri': DEFAULT_AUTH_URI,
    'timeout': 30,                  # HTTP timeout in seconds
    'compression_enabled': True,    # advertise gzip to the service
    'user_agent': USER_AGENT,
}
