"""
Errors raised while building or executing a call.

The base class hangs off googleapiclient's error tree so code already
catching googleapiclient.errors.Error / HttpError keeps working when it
moves over to these bindings.
"""
import json

import httplib2
import requests
from googleapiclient.errors import Error as GoogleApiClientError, HttpError


class Error(GoogleApiClientError):
    """Base error for everything raised by gapirest"""
    pass


class MalformedRequest(Error):
    """
    The call can't be turned into a request, a path parameter is missing
    or the body won't serialize.  Always raised before any network I/O.
    """
    pass


class DecodeError(Error, ValueError):
    """A 2xx response body that is not JSON or doesn't fit the expected type"""
    pass


# transport failures are whatever the HTTP client raised, passed through as-is
TransportError = requests.exceptions.RequestException


class ApiError(HttpError, Error):
    """
    Non-2xx response from the server.
    HttpError already pulls the server message out of the standard
    {"error": {"code": ..., "message": ...}} body into .reason, this adds
    the parsed payload for anything more specific.
    """

    def __init__(self, resp: httplib2.Response, content: bytes, uri: str|None = None) -> None:
        super().__init__(resp, content, uri=uri)

    def __str__(self) -> str:
        return f"<ApiError {self.status_code} when requesting {self.uri} returned \"{self.reason}\">"

    @classmethod
    def from_response(cls, response, uri: str|None = None):
        """
        Build from a requests style response.  HttpError wants an httplib2
        response so translate the status and headers across.
        """
        info = {k.lower(): v for k, v in response.headers.items()}
        info['status'] = response.status_code
        reason = getattr(response, 'reason', None)
        if reason:
            info['reason'] = reason
        content = response.content if response.content is not None else b""
        return cls(httplib2.Response(info), content, uri=uri)

    @property
    def payload(self) -> dict|list|None:
        """The error body decoded as JSON or None if it wasn't JSON"""
        try:
            return json.loads(self.content.decode('utf-8'))
        except (ValueError, UnicodeDecodeError):
            return None
