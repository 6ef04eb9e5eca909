"""
Authorization URL builder for the frob-based web auth flow.
"""

import logging
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from .constants import (
    DEFAULT_AUTH_URI,
    KNOWN_PERMS,
    PARAM_API_KEY,
    PARAM_API_SIG,
    PARAM_FROB,
    PARAM_PERMS
)
from .request import encode_args
from .signing import Credentials, sign_args

logger = logging.getLogger(__name__)


def build_auth_url(credentials: Credentials, perms: str, frob: Optional[str] = None,
                   auth_uri: str = DEFAULT_AUTH_URI) -> Optional[str]:
    """
    Build the URL a user must be sent to in order to approve a token.

    Args:
        credentials: Key and secret; the secret is required for signing
        perms: Requested permission level ("read", "write", "delete")
        frob: Frob issued by the auth flow, optional for web applications
        auth_uri: Auth endpoint; any query it already has is replaced

    Returns:
        Signed URL, or None when the credentials carry no secret
    """
    if not credentials.has_secret:
        logger.debug("No API secret configured, cannot build auth URL")
        return None

    if perms not in KNOWN_PERMS:
        logger.warning("Unknown permission level %r requested", perms)

    args = {
        PARAM_API_KEY: credentials.api_key,
        PARAM_PERMS: perms,
    }
    if frob:
        args[PARAM_FROB] = frob

    args[PARAM_API_SIG] = sign_args(credentials.api_secret, args)

    parts = urlsplit(auth_uri)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, encode_args(args).decode('ascii'), ''))
