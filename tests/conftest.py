import json

import pytest


class FakeResponse():
    """Just enough of requests.Response for the builder"""

    def __init__(self, status_code: int = 200, content: bytes|str|dict|list = b"",
                 headers: dict|None = None, reason: str = "OK") -> None:
        if isinstance(content, (dict, list)):
            content = json.dumps(content)
        if isinstance(content, str):
            content = content.encode('utf-8')
        self.status_code = status_code
        self.content = content
        self.headers = headers if headers is not None else {'Content-Type': 'application/json; charset=UTF-8'}
        self.reason = reason
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.closed = True


class FakeSession():
    """Records every request and replays queued responses in order"""

    def __init__(self) -> None:
        self.responses = []
        self.returned = []
        self.calls = []

    def reply(self, status_code: int = 200, content: bytes|str|dict|list = b"", **kwargs) -> "FakeSession":
        self.responses.append(FakeResponse(status_code, content, **kwargs))
        return self

    def fail(self, exc: Exception) -> "FakeSession":
        """The next request raises exc instead of answering"""
        self.responses.append(exc)
        return self

    def request(self, method, url, data=None, headers=None, timeout=None):
        self.calls.append({
            'method': method,
            'url': url,
            'data': data,
            'headers': dict(headers or {}),
            'timeout': timeout
        })
        if not self.responses:
            raise AssertionError(f"unexpected request {method} {url}")
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        self.returned.append(resp)
        return resp


@pytest.fixture
def session():
    return FakeSession()
