"""
Public, high-level helpers for building Be2bill clients.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import DirectLinkClient, FormClient
from .core.config import ClientConfig, ClientParameters, load_client_config
from .core.credentials import production_user, sandbox_user

__all__ = [
    "build_production_directlink_client",
    "build_production_form_client",
    "build_sandbox_directlink_client",
    "build_sandbox_form_client",
    "create_directlink_client",
    "create_form_client",
]


def _resolve_config(
    config: Optional[ClientConfig],
    *,
    env_file: Optional[str],
    overrides: Optional[Mapping[str, str]],
    base: Optional[Mapping[str, str]],
    parameters: Optional[ClientParameters],
) -> ClientConfig:
    if config is not None:
        extras = (overrides, base, parameters)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        return config
    return load_client_config(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
    )


def create_form_client(
    *,
    config: Optional[ClientConfig] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
) -> FormClient:
    """
    Construct a :class:`FormClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data.
    """
    cfg = _resolve_config(
        config, env_file=env_file, overrides=overrides, base=base, parameters=parameters
    )
    return FormClient(cfg.credentials())


def create_directlink_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
) -> DirectLinkClient:
    """Construct a :class:`DirectLinkClient` from a config or environment data."""
    cfg = _resolve_config(
        config, env_file=env_file, overrides=overrides, base=base, parameters=parameters
    )
    return DirectLinkClient(
        cfg.credentials(),
        session=session,
        timeout=cfg.timeout_seconds,
        failover_on_server_error=cfg.failover_on_server_error,
    )


def build_sandbox_form_client(identifier: str, password: str) -> FormClient:
    return FormClient(sandbox_user(identifier, password))


def build_production_form_client(identifier: str, password: str) -> FormClient:
    return FormClient(production_user(identifier, password))


def build_sandbox_directlink_client(
    identifier: str,
    password: str,
    *,
    session: Optional[requests.Session] = None,
) -> DirectLinkClient:
    return DirectLinkClient(sandbox_user(identifier, password), session=session)


def build_production_directlink_client(
    identifier: str,
    password: str,
    *,
    session: Optional[requests.Session] = None,
) -> DirectLinkClient:
    return DirectLinkClient(production_user(identifier, password), session=session)
