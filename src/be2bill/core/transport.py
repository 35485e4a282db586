"""
HTTP delivery of signed DirectLink requests.

A call is posted to each host of the environment in order until one answers:

* a connection failure moves on to the next host;
* a non-2xx status moves on as well unless ``failover_on_server_error`` is
  disabled, in which case it is raised at once;
* a timeout is raised immediately, remaining hosts are not tried;
* a 2xx body that is not a JSON object is raised as
  :class:`MalformedResponse` and never retried.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Any, Dict, Mapping, Optional

import requests

from .constants import DEFAULT_REQUEST_TIMEOUT_SECONDS, PARAM_OPERATION_TYPE
from .environment import Environment
from .exceptions import (
    Be2billError,
    HostConnectionError,
    MalformedResponse,
    NoHostsConfigured,
    RequestTimeout,
    ServerError,
)
from .options import encode_request
from .result import Result

__all__ = ["Transport"]


def _decode(url: str, response: requests.Response) -> Result:
    try:
        payload = response.json()
    except ValueError as exc:
        raise MalformedResponse(url, response.text, str(exc)) from exc
    if not isinstance(payload, dict):
        raise MalformedResponse(
            url, response.text, f"expected a JSON object, got {type(payload).__name__}"
        )
    return Result.from_response(payload)


class Transport:
    """
    Posts form-encoded requests to the hosts of an :class:`Environment`.

    Each attempt runs on its own worker thread and the caller waits for it
    with the full ``timeout`` budget. The same budget is handed to
    ``requests`` so an abandoned attempt releases its connection.

    A timed-out attempt is abandoned, not interrupted: its worker keeps
    running until ``requests`` gives up on the socket. That timeout applies
    to each connect and read operation, so a server trickling bytes slower
    than ``timeout`` keeps the worker alive, and interpreter exit waits for
    it. The caller still gets :class:`RequestTimeout` on time.
    """

    def __init__(
        self,
        environment: Environment,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        failover_on_server_error: bool = True,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be greater than zero")
        self.environment = environment
        self.session = session or requests.Session()
        self.timeout = timeout
        self.failover_on_server_error = failover_on_server_error

    def _post_with_timeout(self, url: str, body: Dict[str, str]) -> requests.Response:
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="be2bill-request")
        try:
            future = executor.submit(self.session.post, url, data=body, timeout=self.timeout)
            try:
                return future.result(timeout=self.timeout)
            except FuturesTimeoutError as exc:
                future.cancel()
                raise RequestTimeout(url, self.timeout) from exc
            except requests.Timeout as exc:
                raise RequestTimeout(url, self.timeout) from exc
        finally:
            executor.shutdown(wait=False)

    def post(self, path: str, params: Mapping[str, Any]) -> Result:
        urls = self.environment.endpoints(path)
        if not urls:
            raise NoHostsConfigured()

        body = encode_request(params)
        operation = params.get(PARAM_OPERATION_TYPE)
        last_error: Optional[Be2billError] = None
        last_cause: Optional[BaseException] = None

        for url in urls:
            logging.info("Submitting %s request to %s", operation, url)
            try:
                response = self._post_with_timeout(url, body)
            except requests.RequestException as exc:
                logging.warning("Could not reach %s: %s", url, exc)
                last_error, last_cause = HostConnectionError(url, exc), exc
                continue

            if not 200 <= response.status_code < 300:
                error = ServerError(url, response.status_code, response.text)
                if not self.failover_on_server_error:
                    raise error
                logging.warning("%s responded with %s", url, response.status_code)
                last_error, last_cause = error, None
                continue

            return _decode(url, response)

        raise last_error from last_cause
