"""
Client configuration and the call descriptor base that generated bindings
specialise.

An ApiService holds the base URL and the authenticated HTTP client and is
shared read-only by every ResourceService hanging off it.  Each operation on
a resource returns a fresh ApiCall which is configured with its typed setters
and then consumed by execute().
"""
import io
from collections.abc import Mapping
from typing import ClassVar, Self

from googleapiclient.http import MediaUpload

from .request import DEFAULT_USER_AGENT, HttpRequest, RequestBuilder
from .resources import ApiResource


class ApiService():
    """
    Base URL plus HTTP client for one API.
    http is anything with the requests.Session request() signature,
    normally a google.auth.transport.requests.AuthorizedSession.
    """
    BASE_URL: ClassVar[str] = ""

    def __init__(self, http, base_url: str|None = None,
                 user_agent: str|None = None,
                 timeout: float|tuple|None = None) -> None:
        if http is None:
            raise ValueError(f"{self.__class__.__name__} needs an HTTP client")
        self._http = http
        self._base_url = str(base_url) if base_url else self.BASE_URL
        self._user_agent = str(user_agent) if user_agent else DEFAULT_USER_AGENT
        self._timeout = timeout

    def __str__(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @property
    def http(self):
        return self._http

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def timeout(self) -> float|tuple|None:
        """
        Default timeout handed to the HTTP client, in seconds or as a
        (connect, read) tuple.  None means no limit.
        """
        return self._timeout

    @property
    def config(self) -> dict:
        """
        Get all configuration state as a dict.
        Convenience for getting it all at once for pushing into a json, toml, ini, etc, file.
        """
        return {
            'base_url': self._base_url,
            'user_agent': self._user_agent,
            'timeout': self._timeout
        }

    @config.setter
    def config(self, config: dict) -> None:
        """
        Set configuration state from a dict.
        Keys that are missing or None keep their current value.
        """
        v = config.get('base_url', None)
        if v is not None:
            self._base_url = str(v)
        v = config.get('user_agent', None)
        if v is not None:
            self._user_agent = str(v)
        v = config.get('timeout', None)
        if v is not None:
            self._timeout = tuple(v) if isinstance(v, (tuple, list)) else float(v)


class ResourceService():
    """One REST resource, e.g. datasets.  Subclasses add one method per operation."""

    def __init__(self, service: ApiService) -> None:
        self._service = service

    @property
    def service(self) -> ApiService:
        return self._service

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self._service)}"


class ApiCall():
    """
    A single API operation.  Generated subclasses set the class attributes
    and add a setter per optional parameter, the rest is here.
    """
    method: ClassVar[str] = "GET"
    path: ClassVar[str] = ""
    response: ClassVar[type|None] = None
    upload: ClassVar[bool] = False

    def __init__(self, service: ApiService,
                 path_params: Mapping|None = None,
                 query: Mapping|None = None,
                 body: ApiResource|Mapping|None = None) -> None:
        self._service = service
        self._builder = RequestBuilder(service.base_url, self.path, self.method,
                                       user_agent=service.user_agent)
        for k, v in dict(path_params or {}).items():
            self._builder.path_param(k, v)
        for k, v in dict(query or {}).items():
            self._builder.query_param(k, v)
        if body is not None:
            self._builder.body(body)

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{repr(self._builder)}"

    def _query(self, name: str, value) -> Self:
        self._builder.query_param(name, value)
        return self

    def fields(self, *fields: str) -> Self:
        """
        Partial response, only the listed fields come back.
        See https://developers.google.com/gdata/docs/2.0/basics#PartialResponse
        """
        return self._query("fields", ",".join(str(f) for f in fields) if fields else None)

    def media(self, media: MediaUpload|bytes|io.IOBase,
              mimetype: str|None = None) -> Self:
        """Attach media to upload with this call.  Only for methods that support it."""
        if not self.upload:
            raise TypeError(f"{self.__class__.__name__} does not support media upload")
        self._builder.media(media, mimetype)
        return self

    def request(self) -> HttpRequest:
        """The request execute() would send, without sending it"""
        return self._builder.build()

    def execute(self, timeout: float|tuple|None = None):
        """
        Send the request.  Returns the response resource, or None for methods
        without one.  A call can only be executed once.
        """
        t = timeout if timeout is not None else self._service.timeout
        return self._builder.execute(self._service.http, self.response, timeout=t)
