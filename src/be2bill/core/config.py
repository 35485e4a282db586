"""
Configuration objects and helpers for Be2bill clients.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .constants import DEFAULT_REQUEST_TIMEOUT_SECONDS
from .credentials import Credentials
from .environment import Environment, build_variables, resolve_environment

__all__ = [
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "load_client_config",
]

_PARAMETER_TO_ENV_KEY = {
    "identifier": "BE2BILL_IDENTIFIER",
    "password": "BE2BILL_PASSWORD",
    "environment": "BE2BILL_ENVIRONMENT",
    "urls": "BE2BILL_URLS",
    "switch_urls": "BE2BILL_SWITCH_URLS",
    "timeout_seconds": "BE2BILL_REQUEST_TIMEOUT_SECONDS",
    "failover_on_server_error": "BE2BILL_FAILOVER_ON_SERVER_ERROR",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    identifier: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    environment: Optional[str] = None
    urls: Optional[str | list[str] | tuple[str, ...]] = None
    switch_urls: Optional[bool | str] = None
    timeout_seconds: Optional[float | int | str] = None
    failover_on_server_error: Optional[bool | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown client parameter '{key}'") from exc
        overrides[env_key] = _stringify(value)
    return overrides


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _require(values: Mapping[str, str], key: str) -> str:
    value = values.get(key, "").strip()
    if not value:
        raise ConfigError(f"{key} must be provided")
    return value


def _parse_bool(raw: str, key: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be a boolean, got '{raw}'")


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"BE2BILL_REQUEST_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("BE2BILL_REQUEST_TIMEOUT_SECONDS must be greater than zero")
    return timeout


def _parse_environment(values: Mapping[str, str]) -> Environment:
    urls_raw = values.get("BE2BILL_URLS")
    if urls_raw:
        urls = [url.strip() for url in urls_raw.split(",") if url.strip()]
        for url in urls:
            if not url.startswith(("http://", "https://")):
                raise ConfigError(f"BE2BILL_URLS entry '{url}' is not an HTTP URL")
        environment = Environment(urls)
    else:
        name = values.get("BE2BILL_ENVIRONMENT", "sandbox")
        try:
            environment = resolve_environment(name)
        except ValueError as exc:
            raise ConfigError(f"BE2BILL_ENVIRONMENT: {exc}") from exc

    if _parse_bool(values.get("BE2BILL_SWITCH_URLS", "false"), "BE2BILL_SWITCH_URLS"):
        environment = environment.switch_urls()
    return environment


@dataclass(frozen=True)
class ClientConfig:
    identifier: str
    password: str = field(repr=False)
    environment: Environment
    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    failover_on_server_error: bool = True

    def credentials(self) -> Credentials:
        return Credentials(self.identifier, self.password, self.environment)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        identifier = _require(values, "BE2BILL_IDENTIFIER")
        password = _require(values, "BE2BILL_PASSWORD")
        environment = _parse_environment(values)

        timeout_seconds = _parse_timeout(
            values.get("BE2BILL_REQUEST_TIMEOUT_SECONDS", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
        )
        failover_on_server_error = _parse_bool(
            values.get("BE2BILL_FAILOVER_ON_SERVER_ERROR", "true"),
            "BE2BILL_FAILOVER_ON_SERVER_ERROR",
        )

        return cls(
            identifier=identifier,
            password=password,
            environment=environment,
            timeout_seconds=timeout_seconds,
            failover_on_server_error=failover_on_server_error,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        identifier: Optional[str] = None,
        password: Optional[str] = None,
        environment: Optional[str] = None,
        urls: Optional[str | list[str] | tuple[str, ...]] = None,
        switch_urls: Optional[bool | str] = None,
        timeout_seconds: Optional[float | int | str] = None,
        failover_on_server_error: Optional[bool | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "identifier": identifier,
                "password": password,
                "environment": environment,
                "urls": urls,
                "switch_urls": switch_urls,
                "timeout_seconds": timeout_seconds,
                "failover_on_server_error": failover_on_server_error,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        variables = build_variables(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(variables.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    identifier: Optional[str] = None,
    password: Optional[str] = None,
    environment: Optional[str] = None,
    urls: Optional[str | list[str] | tuple[str, ...]] = None,
    switch_urls: Optional[bool | str] = None,
    timeout_seconds: Optional[float | int | str] = None,
    failover_on_server_error: Optional[bool | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    The configuration can be provided entirely through environment variables,
    a ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        identifier=identifier,
        password=password,
        environment=environment,
        urls=urls,
        switch_urls=switch_urls,
        timeout_seconds=timeout_seconds,
        failover_on_server_error=failover_on_server_error,
    )
