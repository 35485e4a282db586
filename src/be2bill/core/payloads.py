"""
Helpers for constructing the signed parameter maps sent to Be2bill.

Every builder starts from a copy of the caller's options, writes its own
fields over them, stamps ``IDENTIFIER`` and ``VERSION`` and finally adds the
``HASH`` signature. Reserved fields therefore always win over caller values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
from urllib.parse import urlparse

from .constants import (
    API_VERSION,
    COMPRESSION_FORMATS,
    OPERATION_TYPE_GET_TRANSACTIONS,
    PARAM_CALLBACK_URL,
    PARAM_CARD_CODE,
    PARAM_CARD_CVV,
    PARAM_CARD_FULL_NAME,
    PARAM_CARD_VALIDITY_DATE,
    PARAM_CLIENT_EMAIL,
    PARAM_CLIENT_IDENT,
    PARAM_CLIENT_IP,
    PARAM_CLIENT_USER_AGENT,
    PARAM_COMPRESSION,
    PARAM_DATE,
    PARAM_DESCRIPTION,
    PARAM_END_DATE,
    PARAM_HASH,
    PARAM_IDENTIFIER,
    PARAM_MAIL_TO,
    PARAM_OPERATION_TYPE,
    PARAM_ORDER_ID,
    PARAM_START_DATE,
    PARAM_TRANSACTION_ID,
    PARAM_VERSION,
)
from .credentials import Credentials
from .hashing import Sha256Hasher
from .options import merge_options

__all__ = [
    "Card",
    "build_export_payload",
    "build_form_payload",
    "build_get_transactions_payload",
    "build_transaction_payload",
    "is_http_url",
    "sign_payload",
]

SEARCH_BY_ORDER_ID = PARAM_ORDER_ID
SEARCH_BY_TRANSACTION_ID = PARAM_TRANSACTION_ID

_DEFAULT_HASHER = Sha256Hasher()


@dataclass(frozen=True)
class Card:
    """Card data for the card-present operations (payment, authorization, credit)."""

    pan: str
    validity_date: str
    cryptogram: str
    full_name: str

    def __repr__(self) -> str:
        return f"Card(pan='...{self.pan[-4:]}', full_name={self.full_name!r})"

    def parameters(self) -> Dict[str, str]:
        return {
            PARAM_CARD_CODE: self.pan,
            PARAM_CARD_VALIDITY_DATE: self.validity_date,
            PARAM_CARD_CVV: self.cryptogram,
            PARAM_CARD_FULL_NAME: self.full_name,
        }


def is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https")


def sign_payload(
    credentials: Credentials,
    params: Dict[str, Any],
    *,
    hasher: Any = None,
) -> Dict[str, Any]:
    """Stamp the merchant identifier, protocol version and signature in place."""
    params[PARAM_IDENTIFIER] = credentials.identifier
    params[PARAM_VERSION] = API_VERSION
    params[PARAM_HASH] = (hasher or _DEFAULT_HASHER).compute_hash(credentials.password, params)
    return params


def build_transaction_payload(
    credentials: Credentials,
    params: Mapping[str, Any],
    *,
    order_id: str,
    client_id: str,
    client_email: str,
    client_ip: str,
    description: str,
    client_user_agent: str,
    hasher: Any = None,
) -> Dict[str, Any]:
    """
    Complete the parameters of a payment-like operation.

    ``params`` already holds the operation type, the amount and the card or
    alias fields; the client context is added on top.
    """
    payload = merge_options(params)
    payload[PARAM_ORDER_ID] = order_id
    payload[PARAM_CLIENT_IDENT] = client_id
    payload[PARAM_CLIENT_EMAIL] = client_email
    payload[PARAM_DESCRIPTION] = description
    payload[PARAM_CLIENT_USER_AGENT] = client_user_agent
    payload[PARAM_CLIENT_IP] = client_ip
    return sign_payload(credentials, payload, hasher=hasher)


def build_form_payload(
    credentials: Credentials,
    operation_type: str,
    params: Mapping[str, Any],
    *,
    order_id: str,
    client_id: str,
    description: str,
    hasher: Any = None,
) -> Dict[str, Any]:
    payload = merge_options(params)
    payload[PARAM_OPERATION_TYPE] = operation_type
    payload[PARAM_ORDER_ID] = order_id
    payload[PARAM_CLIENT_IDENT] = client_id
    payload[PARAM_DESCRIPTION] = description
    return sign_payload(credentials, payload, hasher=hasher)


def _check_compression(compression: str) -> str:
    if compression not in COMPRESSION_FORMATS:
        choices = ", ".join(COMPRESSION_FORMATS)
        raise ValueError(f"Unsupported compression '{compression}', expected one of: {choices}")
    return compression


def _destination_parameter(destination: str) -> Tuple[str, str]:
    # exports are either pushed to a callback URL or mailed
    if is_http_url(destination):
        return PARAM_CALLBACK_URL, destination
    return PARAM_MAIL_TO, destination


def build_get_transactions_payload(
    credentials: Credentials,
    search_by: str,
    ids: Iterable[str],
    destination: str,
    compression: str,
    *,
    hasher: Any = None,
) -> Dict[str, Any]:
    if search_by not in (SEARCH_BY_ORDER_ID, SEARCH_BY_TRANSACTION_ID):
        raise ValueError(f"Cannot search transactions by '{search_by}'")

    payload: Dict[str, Any] = {
        PARAM_OPERATION_TYPE: OPERATION_TYPE_GET_TRANSACTIONS,
        search_by: ";".join(ids),
        PARAM_COMPRESSION: _check_compression(compression),
    }
    key, value = _destination_parameter(destination)
    payload[key] = value
    return sign_payload(credentials, payload, hasher=hasher)


def build_export_payload(
    credentials: Credentials,
    operation_type: str,
    destination: str,
    compression: str,
    *,
    start_date: str,
    end_date: Optional[str] = None,
    options: Optional[Mapping[str, Any]] = None,
    hasher: Any = None,
) -> Dict[str, Any]:
    """
    Build an export or reconciliation request.

    A non-empty ``end_date`` selects the ``STARTDATE``/``ENDDATE`` interval,
    otherwise ``start_date`` is sent alone as ``DATE``.
    """
    payload = merge_options(options)
    payload[PARAM_OPERATION_TYPE] = operation_type
    payload[PARAM_COMPRESSION] = _check_compression(compression)

    if end_date:
        payload[PARAM_START_DATE] = start_date
        payload[PARAM_END_DATE] = end_date
    else:
        payload[PARAM_DATE] = start_date

    key, value = _destination_parameter(destination)
    payload[key] = value
    return sign_payload(credentials, payload, hasher=hasher)
