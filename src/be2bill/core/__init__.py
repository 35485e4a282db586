"""
Core primitives of the Be2bill client: signing, flattening and transport.
"""

from .amount import Amount, FragmentedAmount, SingleAmount, require_single_amount
from .client import DirectLinkClient, FormClient
from .config import ClientConfig, ClientParameters, ConfigError, load_client_config
from .credentials import Credentials, production_user, sandbox_user, user
from .environment import (
    PRODUCTION,
    SANDBOX,
    Environment,
    EnvironmentVariables,
    build_variables,
    load_env_file,
    resolve_environment,
)
from .exceptions import (
    Be2billError,
    HostConnectionError,
    InvalidSignature,
    MalformedResponse,
    NoHostsConfigured,
    RequestTimeout,
    ServerError,
    UnsupportedAmountError,
)
from .hashing import Sha256Hasher, check_hash, compute_hash, verify_notification
from .options import Options, encode_request, flatten
from .payloads import Card
from .renderer import HTMLRenderer
from .result import Result
from .transport import Transport

__all__ = [
    "Amount",
    "Be2billError",
    "Card",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "Credentials",
    "DirectLinkClient",
    "Environment",
    "EnvironmentVariables",
    "FormClient",
    "FragmentedAmount",
    "HTMLRenderer",
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
    "Transport",
    "UnsupportedAmountError",
    "build_variables",
    "check_hash",
    "compute_hash",
    "encode_request",
    "flatten",
    "load_client_config",
    "load_env_file",
    "production_user",
    "require_single_amount",
    "resolve_environment",
    "sandbox_user",
    "user",
    "verify_notification",
]
