"""
Request signing for the Be2bill API.

Before a request leaves the client, its parameters are hashed using the
merchant account password as a salt and the digest is stored under ``HASH``.
Any later change to the parameters invalidates the request.

The base string starts with the password, then every parameter (sorted by
key, ``HASH`` excluded) is appended as ``KEY=value`` followed by the password
again. Nested maps contribute ``KEY[subkey]=value`` entries. The digest is
the lowercase hex SHA-256 of that string.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Any, Mapping

from .constants import PARAM_HASH
from .exceptions import InvalidSignature
from .options import iter_leaves

__all__ = [
    "Sha256Hasher",
    "check_hash",
    "compute_hash",
    "verify_notification",
]


def _base_string(password: str, params: Mapping[str, Any]) -> str:
    signable = {key: value for key, value in params.items() if key != PARAM_HASH}
    parts = [password]
    for name, value in iter_leaves(signable):
        parts.append(f"{name}={value}{password}")
    return "".join(parts)


def compute_hash(password: str, params: Mapping[str, Any]) -> str:
    """Return the hex SHA-256 signature of ``params`` salted with ``password``."""
    clear = _base_string(password, params)
    return hashlib.sha256(clear.encode("utf-8")).hexdigest()


def check_hash(password: str, params: Mapping[str, Any]) -> bool:
    """
    Compare the ``HASH`` carried by ``params`` with the recomputed one.

    A missing or non-string ``HASH`` is treated as an empty string and thus
    never matches.
    """
    received = params.get(PARAM_HASH)
    if not isinstance(received, str):
        received = ""
    computed = compute_hash(password, params)
    return hmac.compare_digest(received.encode("utf-8"), computed.encode("utf-8"))


def verify_notification(password: str, params: Mapping[str, Any]) -> None:
    """Raise :class:`InvalidSignature` unless ``params`` carry a valid HASH."""
    if not check_hash(password, params):
        raise InvalidSignature("HASH does not match the notification parameters")


class Sha256Hasher:
    """
    Default hasher used by the clients.

    Clients only need an object exposing ``compute_hash(password, params)``,
    so another implementation can be injected for tests.
    """

    def compute_hash(self, password: str, params: Mapping[str, Any]) -> str:
        return compute_hash(password, params)

    def check_hash(self, password: str, params: Mapping[str, Any]) -> bool:
        return check_hash(password, params)
