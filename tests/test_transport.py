from __future__ import annotations

import time

import pytest
import requests

from be2bill import (
    Environment,
    HostConnectionError,
    MalformedResponse,
    NoHostsConfigured,
    RequestTimeout,
    ServerError,
)
from be2bill.core.transport import Transport

from .conftest import SUCCESS_BODY, FakeResponse, FakeSession, respond

PARAMS = {"OPERATIONTYPE": "payment", "AMOUNT": 100, "HASH": "x"}


def refuse(data):
    raise requests.ConnectionError("connection refused")


def test_fallback_after_server_error():
    session = FakeSession(
        {
            "http://a.test": respond("internal server error", 500),
            "http://b.test": respond(SUCCESS_BODY),
        }
    )
    transport = Transport(Environment(["http://a.test", "http://b.test"]), session=session)

    started = time.monotonic()
    result = transport.post("/front/service/rest/process", PARAMS)

    assert time.monotonic() - started < 1
    assert result.success
    assert result.transaction_id == "ABCDE01"
    assert [url for url, _, _ in session.calls] == [
        "http://a.test/front/service/rest/process",
        "http://b.test/front/service/rest/process",
    ]


def test_fallback_after_connection_error():
    session = FakeSession({"http://a.test": refuse, "http://b.test": respond(SUCCESS_BODY)})
    transport = Transport(Environment(["http://a.test", "http://b.test"]), session=session)
    assert transport.post("/p", PARAMS).exec_code == "0000"


def test_all_hosts_unreachable_raises_last_connection_error():
    session = FakeSession({"http://a.test": refuse, "http://b.test": refuse})
    transport = Transport(Environment(["http://a.test", "http://b.test"]), session=session)

    with pytest.raises(HostConnectionError) as excinfo:
        transport.post("/p", PARAMS)
    assert excinfo.value.url == "http://b.test/p"
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_all_hosts_failing_raises_server_error():
    session = FakeSession({"http://": respond("internal server error", 500)})
    transport = Transport(Environment(["http://a.test", "http://b.test"]), session=session)

    with pytest.raises(ServerError) as excinfo:
        transport.post("/p", PARAMS)
    assert excinfo.value.status_code == 500
    assert len(session.calls) == 2


def test_server_error_without_failover_stops_at_first_host():
    session = FakeSession(
        {
            "http://a.test": respond("unavailable", 503),
            "http://b.test": respond(SUCCESS_BODY),
        }
    )
    transport = Transport(
        Environment(["http://a.test", "http://b.test"]),
        session=session,
        failover_on_server_error=False,
    )

    with pytest.raises(ServerError):
        transport.post("/p", PARAMS)
    assert len(session.calls) == 1


def test_empty_environment_makes_no_request():
    session = FakeSession({})
    transport = Transport(Environment(), session=session)

    with pytest.raises(NoHostsConfigured, match="no URL provided"):
        transport.post("/p", PARAMS)
    assert session.calls == []


def test_late_response_is_a_timeout_and_stops_failover():
    def slow(data):
        time.sleep(0.5)
        return FakeResponse(SUCCESS_BODY)

    session = FakeSession({"http://slow.test": slow, "http://b.test": respond(SUCCESS_BODY)})
    transport = Transport(
        Environment(["http://slow.test", "http://b.test"]), session=session, timeout=0.1
    )

    started = time.monotonic()
    with pytest.raises(RequestTimeout):
        transport.post("/p", PARAMS)
    # the slow attempt is abandoned, the caller does not wait for it
    assert time.monotonic() - started < 0.4
    assert [url for url, _, _ in session.calls] == ["http://slow.test/p"]


def test_requests_timeout_is_reported_as_timeout():
    def timed_out(data):
        raise requests.ReadTimeout("read timed out")

    session = FakeSession({"http://a.test": timed_out, "http://b.test": respond(SUCCESS_BODY)})
    transport = Transport(Environment(["http://a.test", "http://b.test"]), session=session)

    with pytest.raises(RequestTimeout):
        transport.post("/p", PARAMS)
    assert len(session.calls) == 1


@pytest.mark.parametrize(
    "body",
    [
        "<b>Fatal error</b>: Uncaught exception 'Exception'",
        '{"OPERATIONTYPE":"payment","TRANSA',
        '["not", "an", "object"]',
    ],
)
def test_malformed_body_is_not_retried(body):
    session = FakeSession({"http://a.test": respond(body), "http://b.test": respond(SUCCESS_BODY)})
    transport = Transport(Environment(["http://a.test", "http://b.test"]), session=session)

    with pytest.raises(MalformedResponse) as excinfo:
        transport.post("/p", PARAMS)
    assert excinfo.value.body == body
    assert not isinstance(excinfo.value, (RequestTimeout, HostConnectionError))
    assert len(session.calls) == 1


def test_request_carries_timeout_and_encoded_body():
    session = FakeSession({"http://a.test": respond(SUCCESS_BODY)})
    transport = Transport(Environment(["http://a.test"]), session=session, timeout=5)

    transport.post("/p", {"OPERATIONTYPE": "refund", "AMOUNTS": {"2015-01-01": 1}})

    _, data, timeout = session.calls[0]
    assert timeout == 5
    assert data == {
        "method": "refund",
        "params[AMOUNTS][2015-01-01]": "1",
        "params[OPERATIONTYPE]": "refund",
    }


def test_timeout_must_be_positive():
    with pytest.raises(ValueError):
        Transport(Environment(["http://a.test"]), timeout=0)
