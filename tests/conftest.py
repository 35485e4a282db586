from __future__ import annotations

import json
import re
from typing import Any, Callable, Dict, List, Tuple

import pytest

from be2bill import Credentials, Environment

SUCCESS_BODY = (
    '{"OPERATIONTYPE":"payment","TRANSACTIONID":"ABCDE01","EXECCODE":"0000",'
    '"MESSAGE":"ok","DESCRIPTOR":"descr"}'
)

_PARAM_KEY = re.compile(r"^params\[([^\]]+)\](?:\[([^\]]+)\])?$")


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """
    Stand-in for ``requests.Session`` routing each URL prefix to a handler.

    A handler receives the form data and returns a :class:`FakeResponse` or
    raises, just like a real POST would.
    """

    def __init__(self, handlers: Dict[str, Callable[[Dict[str, str]], FakeResponse]]) -> None:
        self.handlers = handlers
        self.calls: List[Tuple[str, Dict[str, str], float]] = []

    def post(self, url: str, data: Dict[str, str], timeout: float) -> FakeResponse:
        self.calls.append((url, data, timeout))
        for prefix, handler in self.handlers.items():
            if url.startswith(prefix):
                return handler(data)
        raise AssertionError(f"unexpected URL {url}")


def request_parameters(form: Dict[str, str]) -> Dict[str, Any]:
    """Rebuild the parameter map from a DirectLink form body."""
    params: Dict[str, Any] = {}
    for name, value in form.items():
        match = _PARAM_KEY.match(name)
        if match is None:
            continue
        key, subkey = match.groups()
        if subkey is None:
            params[key] = value
        else:
            params.setdefault(key, {})[subkey] = value
    return params


def respond(text: str, status_code: int = 200) -> Callable[[Dict[str, str]], FakeResponse]:
    return lambda data: FakeResponse(text, status_code)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials("foo", "bar", Environment(["http://primary.test", "http://backup.test"]))
