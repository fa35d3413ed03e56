"""
The one piece of real machinery: turn a REST method description (verb, path
template, parameters, body, media) into a single HTTP request and its response
into a resource or an error.

Every generated call in the API modules is a thin specialisation of
RequestBuilder, see service.ApiCall.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
import io
import json
import logging
import uuid
from urllib.parse import urlencode, urljoin, urlsplit, urlunsplit

from googleapiclient.http import MediaInMemoryUpload, MediaIoBaseUpload, MediaUpload
from uritemplate import URITemplate

from .errors import ApiError, DecodeError, MalformedRequest
from .resources import ApiResource

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "gapirest/0.1"
DEFAULT_MEDIA_TYPE = "application/octet-stream"

def query_value(value) -> str:
    """
    String form of a query parameter value.
    JSON style booleans and lists are comma joined.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(query_value(v) for v in value)
    return str(value)


def placeholders(path_template: str) -> list[str]:
    """Names of the parameters a path template needs, in order"""
    names = []
    for var in URITemplate(path_template).variables:
        names += [n for n in var.variable_names if n not in names]
    return names


def _opaque_dots(url: str) -> str:
    """
    Percent-encode path segments made only of dots so that an expanded value
    of . or .. is never resolved away by the HTTP client.
    """
    scheme, netloc, path, query, fragment = urlsplit(url)
    segments = ["%2E" * len(s) if s and not s.strip(".") else s for s in path.split("/")]
    return urlunsplit((scheme, netloc, "/".join(segments), query, fragment))


@dataclass
class HttpRequest():
    """A fully built request, ready to hand to the HTTP client"""
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes|None = field(default=None)

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def query(self) -> str:
        return urlsplit(self.url).query

    def __str__(self) -> str:
        return f"{self.method} {self.url}"


class RequestBuilder():
    """
    Accumulates one REST call and executes it exactly once.
    Setters return self so they chain.  After execute() the builder is spent
    and any further use raises RuntimeError.
    """

    def __init__(self, base_url: str, path_template: str, method: str = "GET",
                 user_agent: str = DEFAULT_USER_AGENT) -> None:
        self.base_url = str(base_url)
        self.path_template = str(path_template)
        self.method = str(method).upper()
        self.user_agent = user_agent
        self._path_params = {}
        self._query_params = {}
        self._body = None
        self._media = None
        self._executed = False

    def __repr__(self) -> str:
        state = "executed" if self._executed else "pending"
        return f"{str(self.__class__)}:{self.method} {self.path_template}<{state}>"

    @property
    def executed(self) -> bool:
        return self._executed

    def _check_pending(self) -> None:
        if self._executed:
            raise RuntimeError(f"{self.method} {self.path_template} has already been executed")

    def path_param(self, name: str, value) -> "RequestBuilder":
        self._check_pending()
        self._path_params[str(name)] = value
        return self

    def query_param(self, name: str, value) -> "RequestBuilder":
        """Setting None removes the parameter"""
        self._check_pending()
        if value is None:
            self._query_params.pop(str(name), None)
        else:
            self._query_params[str(name)] = query_value(value)
        return self

    def body(self, record: ApiResource|Mapping|None) -> "RequestBuilder":
        self._check_pending()
        self._body = record
        return self

    def media(self, media: MediaUpload|bytes|io.IOBase|None,
              mimetype: str|None = None) -> "RequestBuilder":
        """
        Switch to an upload request.  Accepts raw bytes, a binary file object
        or any googleapiclient MediaUpload.  None switches back.
        """
        self._check_pending()
        if media is None or isinstance(media, MediaUpload):
            self._media = media
        elif isinstance(media, (bytes, bytearray)):
            self._media = MediaInMemoryUpload(bytes(media), mimetype=mimetype or DEFAULT_MEDIA_TYPE)
        else:
            self._media = MediaIoBaseUpload(media, mimetype or DEFAULT_MEDIA_TYPE)
        return self

    def _expand(self, url: str) -> str:
        missing = [n for n in placeholders(url) if self._path_params.get(n, None) is None]
        if missing:
            raise MalformedRequest(f"{self.method} {self.path_template}: "
                                   f"missing path parameter(s) {', '.join(missing)}")

        values = {k: str(v) for k, v in self._path_params.items() if v is not None}
        return _opaque_dots(URITemplate(url).expand(values))

    def _json_body(self) -> bytes|None:
        if self._body is None:
            return None
        base = self._body.to_base() if isinstance(self._body, ApiResource) else self._body
        try:
            return json.dumps(base, ensure_ascii=False).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise MalformedRequest(f"{self.method} {self.path_template}: body does not serialize: {e}") from e

    def _multipart(self, metadata: bytes|None) -> tuple[bytes, str]:
        """multipart/related with the JSON metadata first and the media second"""
        boundary = "===============" + uuid.uuid4().hex + "=="
        media_bytes = self._media.getbytes(0, self._media.size())
        parts = [
            f"--{boundary}\r\n".encode(),
            b"Content-Type: application/json; charset=UTF-8\r\n\r\n",
            metadata if metadata is not None else b"{}",
            f"\r\n--{boundary}\r\n".encode(),
            f"Content-Type: {self._media.mimetype()}\r\n".encode(),
            b"Content-Transfer-Encoding: binary\r\n\r\n",
            media_bytes,
            f"\r\n--{boundary}--".encode(),
        ]
        return b"".join(parts), f'multipart/related; boundary="{boundary}"'

    def build(self) -> HttpRequest:
        """
        Assemble the request without sending it.
        The template is resolved against the base URL before expansion so
        the expanded values are never re-interpreted as path syntax.
        """
        url = urljoin(self.base_url, self.path_template)
        params = dict(self._query_params)
        params['alt'] = 'json'
        if self._media is not None:
            scheme, netloc, path, _, _ = urlsplit(url)
            url = urlunsplit((scheme, netloc, "/upload" + path, "", ""))
            params['uploadType'] = 'multipart'
        url = self._expand(url)
        url += "?" + urlencode(sorted(params.items()))

        headers = {'User-Agent': self.user_agent}
        body = self._json_body()
        if self._media is not None:
            body, headers['Content-Type'] = self._multipart(body)
        elif body is not None:
            headers['Content-Type'] = 'application/json'
        return HttpRequest(self.method, url, headers, body)

    def execute(self, http, response: type|None = None, timeout: float|tuple|None = None):
        """
        One round trip through http, a requests.Session style client such as
        google.auth.transport.requests.AuthorizedSession.
        Returns the decoded response resource, or None when the method has no
        response body.  Nothing is retried.
        A MalformedRequest leaves the builder pending, anything past that
        point spends it.
        """
        self._check_pending()
        request = self.build()
        self._executed = True
        logger.debug("%s", request)
        with http.request(request.method, request.url, data=request.body,
                          headers=request.headers, timeout=timeout) as resp:
            if not 200 <= resp.status_code < 300:
                logger.debug("%s returned %d", request, resp.status_code)
                raise ApiError.from_response(resp, request.url)
            if response is None:
                return None
            try:
                data = json.loads(resp.content)
            except (TypeError, ValueError) as e:
                raise DecodeError(f"{request}: response is not JSON: {e}") from e
            try:
                return response.from_base(data)
            except TypeError as e:
                raise DecodeError(f"{request}: response does not fit {response.__name__}: {e}") from e
