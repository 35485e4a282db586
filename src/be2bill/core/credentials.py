"""
Merchant credentials shared by the Form and DirectLink clients.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .environment import PRODUCTION, SANDBOX, Environment

__all__ = [
    "Credentials",
    "production_user",
    "sandbox_user",
    "user",
]


@dataclass(frozen=True)
class Credentials:
    """
    What a client needs to identify itself to the API.

    ``password`` is the account secret used to sign requests; it is kept out
    of ``repr`` so credentials can be logged safely.
    """

    identifier: str
    password: str = field(repr=False)
    environment: Environment = SANDBOX


def user(identifier: str, password: str, environment: Environment) -> Credentials:
    return Credentials(identifier, password, environment)


def production_user(identifier: str, password: str) -> Credentials:
    return Credentials(identifier, password, PRODUCTION)


def sandbox_user(identifier: str, password: str) -> Credentials:
    return Credentials(identifier, password, SANDBOX)
