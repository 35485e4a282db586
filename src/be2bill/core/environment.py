"""
Be2bill endpoints and the process environment used to configure clients.

An :class:`Environment` is the ordered list of base URLs of a Be2bill
endpoint: the first URL is tried first and the others are failover hosts.
The production environment is where real transactions take place; the
sandbox simulates operations for testing.

The second half of the module understands ``.env`` files and layers them
with :data:`os.environ` and caller overrides into a plain mapping that
:class:`be2bill.core.config.ClientConfig` reads from.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, MutableMapping, Optional, Tuple

__all__ = [
    "Environment",
    "EnvironmentVariables",
    "PRODUCTION",
    "SANDBOX",
    "build_variables",
    "load_env_file",
    "resolve_environment",
]


@dataclass(frozen=True)
class Environment:
    urls: Tuple[str, ...]

    def __init__(self, urls: Iterable[str] = ()) -> None:
        object.__setattr__(self, "urls", tuple(url.rstrip("/") for url in urls))

    def __len__(self) -> int:
        return len(self.urls)

    def __iter__(self):
        return iter(self.urls)

    def __getitem__(self, index: int) -> str:
        return self.urls[index]

    def switch_urls(self) -> "Environment":
        """
        Return a copy with the URL order reversed.

        Useful to exercise the failover hosts without touching the shared
        :data:`PRODUCTION` or :data:`SANDBOX` values.
        """
        return Environment(reversed(self.urls))

    def endpoints(self, path: str) -> Tuple[str, ...]:
        return tuple(url + path for url in self.urls)


PRODUCTION = Environment(
    (
        "https://secure-magenta1.be2bill.com",
        "https://secure-magenta2.be2bill.com",
    )
)
SANDBOX = Environment(("https://secure-test.be2bill.com",))

_NAMED_ENVIRONMENTS = {
    "production": PRODUCTION,
    "sandbox": SANDBOX,
}


def resolve_environment(name: str) -> Environment:
    try:
        return _NAMED_ENVIRONMENTS[name.strip().lower()]
    except KeyError as exc:
        choices = ", ".join(sorted(_NAMED_ENVIRONMENTS))
        raise ValueError(f"Unknown environment '{name}', expected one of: {choices}") from exc


def _parse_env_file(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip()
    return values


def load_env_file(
    path: str = ".env",
    *,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Load variables from ``path`` into ``environ`` without replacing existing keys.

    The merged mapping is returned so callers can inspect the resulting values.
    """
    target: MutableMapping[str, str] = environ if environ is not None else os.environ
    for key, value in _parse_env_file(Path(path)).items():
        target.setdefault(key, value)
    return dict(target)


@dataclass(frozen=True)
class EnvironmentVariables:
    """A resolved set of ``BE2BILL_*`` settings."""

    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)


def build_variables(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> EnvironmentVariables:
    """
    Merge ``base`` (default :data:`os.environ`), an optional ``.env`` file and
    ``overrides``. Set ``env_file`` to ``None`` to skip file loading; overrides
    always win.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)

    if env_file is not None:
        for key, value in _parse_env_file(Path(env_file)).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(overrides)

    return EnvironmentVariables(variables=merged)
