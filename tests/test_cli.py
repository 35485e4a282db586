from __future__ import annotations

import logging

import pytest

from be2bill import cli, compute_hash
from be2bill.core.result import Result

ENV = ["--env-file", "missing.env", "--set", "BE2BILL_IDENTIFIER=test", "--set", "BE2BILL_PASSWORD=password"]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key in ("BE2BILL_IDENTIFIER", "BE2BILL_PASSWORD", "BE2BILL_ENVIRONMENT", "BE2BILL_URLS"):
        monkeypatch.delenv(key, raising=False)


def test_payment_form(capsys):
    code = cli.run_cli(
        ENV
        + [
            "payment-form",
            "--schedule",
            "2010-05-14=15235",
            "--schedule",
            "2012-06-04=14723",
            "--order-id",
            "order_1412327697",
            "--client-id",
            "6328_john.smith@example.org",
            "--description",
            "Fashion jacket",
            "--param",
            "CLIENTEMAIL=toto@example.org",
            "--param",
            "3DSECURE=yes",
        ]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "e4e3c4ab88774536108b85ccd62735bf1c1a6825a87d0fcbd7efa2ece12670e2" in out


def test_authorization_form(capsys):
    code = cli.run_cli(
        ENV
        + [
            "authorization-form",
            "--amount",
            "15235",
            "--order-id",
            "order_1412327697",
            "--client-id",
            "6328_john.smith@example.org",
            "--description",
            "Fashion jacket",
        ]
    )
    assert code == 0
    assert "01ccdb73b31de50567aa699642dad2e566a9c676d74d359efb4c849c13012427" in capsys.readouterr().out


def test_sign_and_verify(capsys):
    assert cli.run_cli(ENV + ["sign", "c=3", "a=1", "b=2"]) == 0
    digest = capsys.readouterr().out.strip()
    assert digest == compute_hash("password", {"c": "3", "a": "1", "b": "2"})

    assert cli.run_cli(ENV + ["verify", "c=3", "a=1", "b=2", f"HASH={digest}"]) == 0
    assert cli.run_cli(ENV + ["verify", "c=4", "a=1", "b=2", f"HASH={digest}"]) == 1


def test_missing_credentials(caplog):
    with caplog.at_level(logging.ERROR):
        assert cli.run_cli(["--env-file", "missing.env", "sign", "a=1"]) == 1
    assert "Invalid configuration" in caplog.text


class StubClient:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def _answer(self, *args):
        self.calls.append(args)
        if self.error is not None:
            raise self.error
        return self.result

    capture = refund = stop_n_times = _answer


def test_capture(monkeypatch):
    stub = StubClient(Result.from_response({"EXECCODE": "0000", "OPERATIONTYPE": "capture"}))
    monkeypatch.setattr(cli, "create_directlink_client", lambda config: stub)

    code = cli.run_cli(
        ENV + ["capture", "--transaction-id", "A1", "--order-id", "o1", "--description", "d"]
    )
    assert code == 0
    assert stub.calls == [("A1", "o1", "d")]


def test_refund_failure_exec_code(monkeypatch):
    stub = StubClient(Result.from_response({"EXECCODE": "2004", "MESSAGE": "not refundable"}))
    monkeypatch.setattr(cli, "create_directlink_client", lambda config: stub)

    code = cli.run_cli(
        ENV + ["refund", "--transaction-id", "A1", "--order-id", "o1", "--description", "d"]
    )
    assert code == 1


def test_stop_schedule_transport_error(monkeypatch):
    from be2bill import RequestTimeout

    stub = StubClient(error=RequestTimeout("http://a.test/p", 30))
    monkeypatch.setattr(cli, "create_directlink_client", lambda config: stub)

    assert cli.run_cli(ENV + ["stop-schedule", "--schedule-id", "S1"]) == 1
    assert stub.calls == [("S1",)]
