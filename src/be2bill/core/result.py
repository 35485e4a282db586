"""
Decoded responses of DirectLink calls.
"""

from __future__ import annotations

import base64
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator

from .constants import (
    EXEC_CODE_SUCCESS,
    RESULT_PARAM_AMOUNT,
    RESULT_PARAM_DESCRIPTOR,
    RESULT_PARAM_EXEC_CODE,
    RESULT_PARAM_MESSAGE,
    RESULT_PARAM_OPERATION_TYPE,
    RESULT_PARAM_REDIRECT_HTML,
    RESULT_PARAM_TRANSACTION_ID,
)

__all__ = ["Result"]


@dataclass(frozen=True, eq=False)
class Result(Mapping):
    """
    Read-only view over the JSON object returned by the API.

    Equality follows :class:`~collections.abc.Mapping`, so a result compares
    equal to a dict with the same items and, like a dict, is not hashable.

    See the notification parameters at
    https://developer.be2bill.com/annexes/parameters for the possible keys.
    """

    raw: Mapping[str, Any]

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "Result":
        return cls(raw=MappingProxyType(dict(payload)))

    def __getitem__(self, key: str) -> Any:
        return self.raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.raw)

    def __len__(self) -> int:
        return len(self.raw)

    def string_value(self, name: str) -> str:
        """Return the value of ``name`` or ``""`` when missing or not a string."""
        value = self.raw.get(name)
        return value if isinstance(value, str) else ""

    @property
    def operation_type(self) -> str:
        return self.string_value(RESULT_PARAM_OPERATION_TYPE)

    @property
    def transaction_id(self) -> str:
        return self.string_value(RESULT_PARAM_TRANSACTION_ID)

    @property
    def exec_code(self) -> str:
        """Execution code of the operation, returned verbatim."""
        return self.string_value(RESULT_PARAM_EXEC_CODE)

    @property
    def message(self) -> str:
        return self.string_value(RESULT_PARAM_MESSAGE)

    @property
    def descriptor(self) -> str:
        return self.string_value(RESULT_PARAM_DESCRIPTOR)

    @property
    def amount(self) -> str:
        return self.string_value(RESULT_PARAM_AMOUNT)

    @property
    def redirect_html(self) -> str:
        return self.string_value(RESULT_PARAM_REDIRECT_HTML)

    def decoded_redirect_html(self) -> bytes:
        """Decode the base64 ``REDIRECTHTML`` payload of a redirect result."""
        return base64.b64decode(self.redirect_html, validate=True)

    @property
    def success(self) -> bool:
        return self.exec_code == EXEC_CODE_SUCCESS
