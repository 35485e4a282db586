"""
Public facade for the Be2bill merchant API client.

The module re-exports the most useful pieces for integrators so they can
``from be2bill import ...`` without navigating the package.
"""

from .core import constants
from .api import (
    build_production_directlink_client,
    build_production_form_client,
    build_sandbox_directlink_client,
    build_sandbox_form_client,
    create_directlink_client,
    create_form_client,
)
from .core import (
    PRODUCTION,
    SANDBOX,
    Amount,
    Be2billError,
    Card,
    ClientConfig,
    ClientParameters,
    ConfigError,
    Credentials,
    DirectLinkClient,
    Environment,
    FormClient,
    FragmentedAmount,
    HostConnectionError,
    InvalidSignature,
    MalformedResponse,
    NoHostsConfigured,
    Options,
    RequestTimeout,
    Result,
    ServerError,
    Sha256Hasher,
    SingleAmount,
    UnsupportedAmountError,
    check_hash,
    compute_hash,
    flatten,
    load_client_config,
    load_env_file,
    production_user,
    sandbox_user,
    user,
    verify_notification,
)

__all__ = (
    "Amount",
    "Be2billError",
    "Card",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "Credentials",
    "DirectLinkClient",
    "Environment",
    "FormClient",
    "FragmentedAmount",
    "HostConnectionError",
    "InvalidSignature",
    "MalformedResponse",
    "NoHostsConfigured",
    "Options",
    "PRODUCTION",
    "RequestTimeout",
    "Result",
    "SANDBOX",
    "ServerError",
    "Sha256Hasher",
    "SingleAmount",
    "UnsupportedAmountError",
    "build_production_directlink_client",
    "build_production_form_client",
    "build_sandbox_directlink_client",
    "build_sandbox_form_client",
    "check_hash",
    "compute_hash",
    "constants",
    "create_directlink_client",
    "create_form_client",
    "flatten",
    "load_client_config",
    "load_env_file",
    "production_user",
    "sandbox_user",
    "user",
    "verify_notification",
)
