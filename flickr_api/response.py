"""
Response classification for the Flickr REST/XML envelope.

Every reply is wrapped in <rsp stat="ok|fail">. interpret() turns an HTTP
status and body into a Response that is exactly one of OK, FAIL or
PROTOCOL_ERROR.
"""

import enum
import gzip
import logging
import zlib
from dataclasses import dataclass, field
from typing import List, Optional, Union
from xml.etree import ElementTree as ET

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as DefusedET

from .constants import ERR_TAG, GZIP_MAGIC, RSP_TAG, STAT_FAIL, STAT_OK
from .exceptions import MethodFailedError, ProtocolError

logger = logging.getLogger(__name__)

MSG_NO_ERROR_CODE = "Method failed but returned no error code"
MSG_INVALID_RESPONSE = "API returned an invalid response"
MSG_INVALID_STATUS = "API returned an invalid status code"


class Outcome(enum.Enum):
    OK = "ok"
    FAIL = "fail"
    PROTOCOL_ERROR = "protocol_error"


@dataclass(frozen=True)
class Response:
    """
    Classified API response.

    error_code and error_message are set only for FAIL, protocol_error only
    for PROTOCOL_ERROR and payload (the <rsp> element) only for OK. The
    payload element is left out of equality, so two interpretations of the
    same reply compare equal.
    """

    http_status: int
    outcome: Outcome
    error_code: Optional[int] = None
    error_message: Optional[str] = None
    protocol_error: Optional[str] = None
    payload: Optional[ET.Element] = field(default=None, compare=False, repr=False)
    content: str = field(default="", repr=False)

    def __post_init__(self):
        is_fail = self.outcome is Outcome.FAIL
        if (self.error_code is not None or self.error_message is not None) != is_fail:
            raise ValueError("error_code/error_message must be set exactly for FAIL responses")
        if (self.protocol_error is not None) != (self.outcome is Outcome.PROTOCOL_ERROR):
            raise ValueError("protocol_error must be set exactly for PROTOCOL_ERROR responses")
        if (self.payload is not None) != (self.outcome is Outcome.OK):
            raise ValueError("payload must be set exactly for OK responses")

    @property
    def is_ok(self) -> bool:
        return self.outcome is Outcome.OK

    success = is_ok

    @property
    def is_fail(self) -> bool:
        return self.outcome is Outcome.FAIL

    @property
    def is_protocol_error(self) -> bool:
        return self.outcome is Outcome.PROTOCOL_ERROR

    def find(self, path: str) -> Optional[ET.Element]:
        """First payload element matching path, or None when not OK."""
        if self.payload is None:
            return None
        return self.payload.find(path)

    def findall(self, path: str) -> List[ET.Element]:
        """All payload elements matching path, or [] when not OK."""
        if self.payload is None:
            return []
        return self.payload.findall(path)

    def raise_for_error(self) -> "Response":
        """
        Raise if the call did not succeed.

        Returns:
            self, for OK responses

        Raises:
            MethodFailedError: For FAIL responses
            ProtocolError: For PROTOCOL_ERROR responses
        """
        if self.is_fail:
            raise MethodFailedError(self.error_code, self.error_message, response=self)
        if self.is_protocol_error:
            raise ProtocolError(self.protocol_error, response=self)
        return self


def _protocol_error(http_status: int, message: str, content: str = "") -> Response:
    logger.warning("Protocol error: %s", message)
    return Response(http_status=http_status, outcome=Outcome.PROTOCOL_ERROR,
                    protocol_error=message, content=content)


def _decompress(body: bytes) -> bytes:
    """Gunzip a body that still carries the gzip magic; fall back to the raw bytes."""
    if not body.startswith(GZIP_MAGIC):
        return body
    try:
        return gzip.decompress(body)
    except (OSError, EOFError, zlib.error) as e:
        logger.debug("Body looked gzipped but could not be decompressed: %s", e)
        return body


def _first_element(node: ET.Element) -> Optional[ET.Element]:
    for child in node:
        return child
    return None


def interpret(http_status: int, raw_body: Union[bytes, str, None]) -> Response:
    """
    Classify an HTTP reply.

    Args:
        http_status: HTTP status code
        raw_body: Response body, bytes (possibly gzipped) or text

    Returns:
        Response in exactly one outcome
    """
    if http_status != 200:
        return _protocol_error(http_status, f"API returned a non-200 status code ({http_status})")

    if raw_body is None:
        raw_body = b""
    if isinstance(raw_body, bytes):
        raw_body = _decompress(raw_body)
        content = raw_body.decode('utf-8', errors='replace')
    else:
        content = raw_body

    try:
        rsp = DefusedET.fromstring(raw_body)
    except (ET.ParseError, DefusedXmlException) as e:
        logger.debug("Unparseable response body: %s", e)
        return _protocol_error(http_status, MSG_INVALID_RESPONSE, content)

    if rsp.tag != RSP_TAG:
        return _protocol_error(http_status, MSG_INVALID_RESPONSE, content)

    stat = rsp.get('stat')

    if stat == STAT_FAIL:
        err = _first_element(rsp)
        if err is not None and err.tag == ERR_TAG:
            try:
                code = int(err.get('code', 0))
            except ValueError:
                code = 0
            message = err.get('msg', '')
        else:
            code, message = 0, MSG_NO_ERROR_CODE
        logger.warning("API call failed with error %s: %s", code, message)
        return Response(http_status=http_status, outcome=Outcome.FAIL,
                        error_code=code, error_message=message, content=content)

    if stat == STAT_OK:
        logger.debug("API call succeeded")
        return Response(http_status=http_status, outcome=Outcome.OK,
                        payload=rsp, content=content)

    return _protocol_error(http_status, MSG_INVALID_STATUS, content)
