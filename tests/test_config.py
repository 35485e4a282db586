from __future__ import annotations

import pytest

from be2bill import (
    PRODUCTION,
    SANDBOX,
    ClientParameters,
    ConfigError,
    DirectLinkClient,
    Environment,
    FormClient,
    build_production_directlink_client,
    build_sandbox_form_client,
    create_directlink_client,
    create_form_client,
    load_client_config,
    load_env_file,
    production_user,
    sandbox_user,
    user,
)
from be2bill.core.environment import build_variables, resolve_environment

BASE = {"BE2BILL_IDENTIFIER": "foo", "BE2BILL_PASSWORD": "bar"}


def test_environments():
    assert PRODUCTION.urls == (
        "https://secure-magenta1.be2bill.com",
        "https://secure-magenta2.be2bill.com",
    )
    assert SANDBOX.urls == ("https://secure-test.be2bill.com",)
    assert resolve_environment(" Production ") is PRODUCTION
    with pytest.raises(ValueError):
        resolve_environment("staging")


def test_switch_urls_returns_new_environment():
    switched = PRODUCTION.switch_urls()
    assert switched.urls == (
        "https://secure-magenta2.be2bill.com",
        "https://secure-magenta1.be2bill.com",
    )
    assert PRODUCTION[0] == "https://secure-magenta1.be2bill.com"
    assert switched.switch_urls() == PRODUCTION


def test_environment_endpoints():
    env = Environment(["http://a.test/", "http://b.test"])
    assert env.endpoints("/p") == ("http://a.test/p", "http://b.test/p")
    assert len(Environment()) == 0


def test_credentials_factories():
    assert user("foo", "bar", SANDBOX).environment is SANDBOX
    assert sandbox_user("foo", "bar").environment is SANDBOX
    credentials = production_user("foo", "bar")
    assert credentials.identifier == "foo"
    assert credentials.password == "bar"
    assert credentials.environment is PRODUCTION
    assert "bar" not in repr(credentials)


def test_client_builders():
    form = build_sandbox_form_client("foo", "bar")
    assert form.credentials.environment is SANDBOX
    direct = build_production_directlink_client("foo", "bar")
    assert direct.transport.environment is PRODUCTION


def test_config_defaults():
    config = load_client_config(env_file=None, base=BASE)
    assert config.identifier == "foo"
    assert config.password == "bar"
    assert config.environment == SANDBOX
    assert config.timeout_seconds == 30.0
    assert config.failover_on_server_error is True
    assert "bar" not in repr(config)


def test_config_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# be2bill\n"
        "BE2BILL_IDENTIFIER=file-id\n"
        "BE2BILL_PASSWORD=file-pw\n"
        "BE2BILL_ENVIRONMENT=production\n"
        "BE2BILL_SWITCH_URLS=true\n"
        "BE2BILL_REQUEST_TIMEOUT_SECONDS=2.5\n"
        "BE2BILL_FAILOVER_ON_SERVER_ERROR=no\n",
        encoding="utf-8",
    )
    config = load_client_config(env_file=str(env_file), base={"BE2BILL_IDENTIFIER": "env-id"})

    assert config.identifier == "env-id"
    assert config.password == "file-pw"
    assert config.environment == PRODUCTION.switch_urls()
    assert config.timeout_seconds == 2.5
    assert config.failover_on_server_error is False


def test_keyword_arguments_win():
    config = load_client_config(
        env_file=None,
        base=BASE,
        overrides={"BE2BILL_IDENTIFIER": "override"},
        parameters=ClientParameters(password="param-pw"),
        urls=["http://a.test", "http://b.test"],
        timeout_seconds=5,
    )
    assert config.identifier == "override"
    assert config.password == "param-pw"
    assert config.environment.urls == ("http://a.test", "http://b.test")
    assert config.timeout_seconds == 5.0


@pytest.mark.parametrize(
    "values",
    [
        {"BE2BILL_PASSWORD": "bar"},
        {"BE2BILL_IDENTIFIER": "foo"},
        dict(BASE, BE2BILL_ENVIRONMENT="staging"),
        dict(BASE, BE2BILL_URLS="ftp://a.test"),
        dict(BASE, BE2BILL_REQUEST_TIMEOUT_SECONDS="soon"),
        dict(BASE, BE2BILL_REQUEST_TIMEOUT_SECONDS="0"),
        dict(BASE, BE2BILL_SWITCH_URLS="maybe"),
    ],
)
def test_invalid_config(values):
    with pytest.raises(ConfigError):
        load_client_config(env_file=None, base=values)


def test_load_env_file_keeps_existing_values(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("A=file\nB=file\nnot a pair\n", encoding="utf-8")
    environ = {"A": "env"}
    merged = load_env_file(str(env_file), environ=environ)
    assert merged == {"A": "env", "B": "file"}
    assert load_env_file(str(tmp_path / "missing"), environ={}) == {}


def test_build_variables_overrides_win():
    variables = build_variables(env_file=None, base={"A": "1"}, overrides={"A": "2"})
    assert variables.get("A") == "2"
    assert variables.get("B", "default") == "default"


def test_create_clients_from_config():
    config = load_client_config(
        env_file=None, base=dict(BASE, BE2BILL_REQUEST_TIMEOUT_SECONDS="3")
    )
    direct = create_directlink_client(config=config)
    assert isinstance(direct, DirectLinkClient)
    assert direct.transport.timeout == 3.0
    assert isinstance(create_form_client(config=config), FormClient)

    with pytest.raises(ValueError):
        create_form_client(config=config, overrides={"A": "1"})


def test_create_client_from_environment():
    client = create_directlink_client(
        env_file=None, base=dict(BASE, BE2BILL_FAILOVER_ON_SERVER_ERROR="false")
    )
    assert client.credentials.identifier == "foo"
    assert client.transport.failover_on_server_error is False


def test_sandbox_form_client_identifier():
    assert build_sandbox_form_client("foo", "bar").credentials.identifier == "foo"
