"""
Form and DirectLink clients for the Be2bill API.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Union

import requests

from .amount import Amount, amount_parameter, require_single_amount
from .constants import (
    ALIAS_MODE_ONE_CLICK,
    ALIAS_MODE_SUBSCRIPTION,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DIRECTLINK_PATH,
    EXPORT_PATH,
    OPERATION_TYPE_AUTHORIZATION,
    OPERATION_TYPE_CAPTURE,
    OPERATION_TYPE_CREDIT,
    OPERATION_TYPE_EXPORT_CHARGEBACKS,
    OPERATION_TYPE_EXPORT_RECONCILED_TRANSACTIONS,
    OPERATION_TYPE_EXPORT_RECONCILIATION,
    OPERATION_TYPE_EXPORT_TRANSACTIONS,
    OPERATION_TYPE_PAYMENT,
    OPERATION_TYPE_REFUND,
    OPERATION_TYPE_STOP_N_TIMES,
    PARAM_ALIAS,
    PARAM_ALIAS_MODE,
    PARAM_AMOUNT,
    PARAM_DESCRIPTION,
    PARAM_OPERATION_TYPE,
    PARAM_ORDER_ID,
    PARAM_SCHEDULE_ID,
    PARAM_TRANSACTION_ID,
    RECONCILIATION_PATH,
)
from .credentials import Credentials
from .exceptions import NoHostsConfigured
from .hashing import Sha256Hasher
from .options import merge_options
from .payloads import (
    SEARCH_BY_ORDER_ID,
    SEARCH_BY_TRANSACTION_ID,
    Card,
    build_export_payload,
    build_form_payload,
    build_get_transactions_payload,
    build_transaction_payload,
    sign_payload,
)
from .renderer import HTMLRenderer
from .result import Result
from .transport import Transport

__all__ = [
    "DirectLinkClient",
    "FormClient",
]

Options = Optional[Mapping[str, Any]]


class FormClient:
    """
    Builds payment and authorization forms to embed on a merchant website.

    The form posts to the first URL of the credentials' environment.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        renderer: Optional[HTMLRenderer] = None,
        hasher: Any = None,
    ) -> None:
        if renderer is None:
            if not credentials.environment:
                raise NoHostsConfigured()
            renderer = HTMLRenderer(credentials.environment[0])
        self.credentials = credentials
        self.renderer = renderer
        self.hasher = hasher or Sha256Hasher()

    def _build_process_button(
        self,
        operation_type: str,
        params: Dict[str, Any],
        order_id: str,
        client_id: str,
        description: str,
        html_options: Options,
    ) -> str:
        payload = build_form_payload(
            self.credentials,
            operation_type,
            params,
            order_id=order_id,
            client_id=client_id,
            description=description,
            hasher=self.hasher,
        )
        return self.renderer.render(payload, html_options)

    def build_payment_form_button(
        self,
        amount: Union[Amount, int],
        order_id: str,
        client_id: str,
        description: str,
        html_options: Options = None,
        options: Options = None,
    ) -> str:
        """
        Return the HTML of a payment button.

        ``amount`` may be immediate or a :class:`FragmentedAmount` schedule.
        See https://developer.be2bill.com/functions/buildPaymentFormButton.
        """
        params = merge_options(options)
        key, value = amount_parameter(amount, OPERATION_TYPE_PAYMENT)
        params[key] = value
        return self._build_process_button(
            OPERATION_TYPE_PAYMENT, params, order_id, client_id, description, html_options
        )

    def build_authorization_form_button(
        self,
        amount: Union[Amount, int],
        order_id: str,
        client_id: str,
        description: str,
        html_options: Options = None,
        options: Options = None,
    ) -> str:
        """
        Return the HTML of an authorization button; only immediate amounts.

        The resulting authorization is captured later with
        :meth:`DirectLinkClient.capture`.
        """
        params = merge_options(options)
        params[PARAM_AMOUNT] = require_single_amount(amount, OPERATION_TYPE_AUTHORIZATION)
        return self._build_process_button(
            OPERATION_TYPE_AUTHORIZATION, params, order_id, client_id, description, html_options
        )


class DirectLinkClient:
    """
    Server-to-server access to the DirectLink API.

    Every operation returns the decoded :class:`Result`; a non-success
    execution code is reported through :attr:`Result.exec_code`, transport
    failures are raised.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        failover_on_server_error: bool = True,
        hasher: Any = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self.credentials = credentials
        self.hasher = hasher or Sha256Hasher()
        self.transport = transport or Transport(
            credentials.environment,
            session=session,
            timeout=timeout,
            failover_on_server_error=failover_on_server_error,
        )

    def _transaction(
        self,
        params: Dict[str, Any],
        *,
        order_id: str,
        client_id: str,
        client_email: str,
        client_ip: str,
        description: str,
        client_user_agent: str,
    ) -> Result:
        payload = build_transaction_payload(
            self.credentials,
            params,
            order_id=order_id,
            client_id=client_id,
            client_email=client_email,
            client_ip=client_ip,
            description=description,
            client_user_agent=client_user_agent,
            hasher=self.hasher,
        )
        return self.transport.post(DIRECTLINK_PATH, payload)

    def _signed_process_call(self, params: Dict[str, Any]) -> Result:
        payload = sign_payload(self.credentials, params, hasher=self.hasher)
        return self.transport.post(DIRECTLINK_PATH, payload)

    def _card_operation(
        self,
        operation_type: str,
        card: Card,
        amount_key: str,
        amount_value: Any,
        options: Options,
        context: Dict[str, str],
    ) -> Result:
        params = merge_options(options)
        params[amount_key] = amount_value
        params[PARAM_OPERATION_TYPE] = operation_type
        params.update(card.parameters())
        return self._transaction(params, **context)

    def _alias_operation(
        self,
        operation_type: str,
        alias: str,
        alias_mode: str,
        amount_key: str,
        amount_value: Any,
        options: Options,
        context: Dict[str, str],
    ) -> Result:
        params = merge_options(options)
        params[amount_key] = amount_value
        params[PARAM_OPERATION_TYPE] = operation_type
        params[PARAM_ALIAS] = alias
        params[PARAM_ALIAS_MODE] = alias_mode
        return self._transaction(params, **context)

    def payment(
        self,
        card: Card,
        amount: Union[Amount, int],
        *,
        order_id: str,
        client_id: str,
        client_email: str,
        client_ip: str,
        description: str,
        client_user_agent: str,
        options: Options = None,
    ) -> Result:
        """Charge a card, immediately or following a fragmented schedule."""
        key, value = amount_parameter(amount, OPERATION_TYPE_PAYMENT)
        return self._card_operation(
            OPERATION_TYPE_PAYMENT,
            card,
            key,
            value,
            options,
            dict(
                order_id=order_id,
                client_id=client_id,
                client_email=client_email,
                client_ip=client_ip,
                description=description,
                client_user_agent=client_user_agent,
            ),
        )

    def authorization(
        self,
        card: Card,
        amount: Union[Amount, int],
        *,
        order_id: str,
        client_id: str,
        client_email: str,
        client_ip: str,
        description: str,
        client_user_agent: str,
        options: Options = None,
    ) -> Result:
        value = require_single_amount(amount, OPERATION_TYPE_AUTHORIZATION)
        return self._card_operation(
            OPERATION_TYPE_AUTHORIZATION,
            card,
            PARAM_AMOUNT,
            value,
            options,
            dict(
                order_id=order_id,
                client_id=client_id,
                client_email=client_email,
                client_ip=client_ip,
                description=description,
                client_user_agent=client_user_agent,
            ),
        )

    def credit(
        self,
        card: Card,
        amount: Union[Amount, int],
        *,
        order_id: str,
        client_id: str,
        client_email: str,
        client_ip: str,
        description: str,
        client_user_agent: str,
        options: Options = None,
    ) -> Result:
        value = require_single_amount(amount, OPERATION_TYPE_CREDIT)
        return self._card_operation(
            OPERATION_TYPE_CREDIT,
            card,
            PARAM_AMOUNT,
            value,
            options,
            dict(
                order_id=order_id,
                client_id=client_id,
                client_email=client_email,
                client_ip=client_ip,
                description=description,
                client_user_agent=client_user_agent,
            ),
        )

    def one_click_payment(
        self,
        alias: str,
        amount: Union[Amount, int],
        *,
        order_id: str,
        client_id: str,
        client_email: str,
        client_ip: str,
        description: str,
        client_user_agent: str,
        options: Options = None,
    ) -> Result:
        """Charge a stored card alias; only immediate amounts."""
        value = require_single_amount(amount, OPERATION_TYPE_PAYMENT)
        return self._alias_operation(
            OPERATION_TYPE_PAYMENT,
            alias,
            ALIAS_MODE_ONE_CLICK,
            PARAM_AMOUNT,
            value,
            options,
            dict(
                order_id=order_id,
                client_id=client_id,
                client_email=client_email,
                client_ip=client_ip,
                description=description,
                client_user_agent=client_user_agent,
            ),
        )

    def one_click_authorization(
        self,
        alias: str,
        amount: Union[Amount, int],
        *,
        order_id: str,
        client_id: str,
        client_email: str,
        client_ip: str,
        description: str,
        client_user_agent: str,
        options: Options = None,
    ) -> Result:
        value = require_single_amount(amount, OPERATION_TYPE_AUTHORIZATION)
        return self._alias_operation(
            OPERATION_TYPE_AUTHORIZATION,
            alias,
            ALIAS_MODE_ONE_CLICK,
            PARAM_AMOUNT,
            value,
            options,
            dict(
                order_id=order_id,
                client_id=client_id,
                client_email=client_email,
                client_ip=client_ip,
                description=description,
                client_user_agent=client_user_agent,
            ),
        )

    def subscription_payment(
        self,
        alias: str,
        amount: Union[Amount, int],
        *,
        order_id: str,
        client_id: str,
        client_email: str,
        client_ip: str,
        description: str,
        client_user_agent: str,
        options: Options = None,
    ) -> Result:
        value = require_single_amount(amount, OPERATION_TYPE_PAYMENT)
        return self._alias_operation(
            OPERATION_TYPE_PAYMENT,
            alias,
            ALIAS_MODE_SUBSCRIPTION,
            PARAM_AMOUNT,
            value,
            options,
            dict(
                order_id=order_id,
                client_id=client_id,
                client_email=client_email,
                client_ip=client_ip,
                description=description,
                client_user_agent=client_user_agent,
            ),
        )

    def subscription_authorization(
        self,
        alias: str,
        amount: Union[Amount, int],
        *,
        order_id: str,
        client_id: str,
        client_email: str,
        client_ip: str,
        description: str,
        client_user_agent: str,
        options: Options = None,
    ) -> Result:
        value = require_single_amount(amount, OPERATION_TYPE_AUTHORIZATION)
        return self._alias_operation(
            OPERATION_TYPE_AUTHORIZATION,
            alias,
            ALIAS_MODE_SUBSCRIPTION,
            PARAM_AMOUNT,
            value,
            options,
            dict(
                order_id=order_id,
                client_id=client_id,
                client_email=client_email,
                client_ip=client_ip,
                description=description,
                client_user_agent=client_user_agent,
            ),
        )

    def redirect_for_payment(
        self,
        amount: Union[Amount, int],
        *,
        order_id: str,
        client_id: str,
        client_email: str,
        client_ip: str,
        description: str,
        client_user_agent: str,
        options: Options = None,
    ) -> Result:
        """
        Start a payment that continues on an alternate payment page.

        The page to display is returned base64-encoded in ``REDIRECTHTML``,
        see :meth:`Result.decoded_redirect_html`.
        """
        params = merge_options(options)
        params[PARAM_OPERATION_TYPE] = OPERATION_TYPE_PAYMENT
        params[PARAM_AMOUNT] = require_single_amount(amount, OPERATION_TYPE_PAYMENT)
        return self._transaction(
            params,
            order_id=order_id,
            client_id=client_id,
            client_email=client_email,
            client_ip=client_ip,
            description=description,
            client_user_agent=client_user_agent,
        )

    def refund(
        self,
        transaction_id: str,
        order_id: str,
        description: str,
        options: Options = None,
    ) -> Result:
        params = merge_options(options)
        params[PARAM_OPERATION_TYPE] = OPERATION_TYPE_REFUND
        params[PARAM_DESCRIPTION] = description
        params[PARAM_TRANSACTION_ID] = transaction_id
        params[PARAM_ORDER_ID] = order_id
        return self._signed_process_call(params)

    def capture(
        self,
        transaction_id: str,
        order_id: str,
        description: str,
        options: Options = None,
    ) -> Result:
        """Capture a previous authorization."""
        params = merge_options(options)
        params[PARAM_OPERATION_TYPE] = OPERATION_TYPE_CAPTURE
        params[PARAM_DESCRIPTION] = description
        params[PARAM_TRANSACTION_ID] = transaction_id
        params[PARAM_ORDER_ID] = order_id
        return self._signed_process_call(params)

    def stop_n_times(self, schedule_id: str, options: Options = None) -> Result:
        """Stop the remaining charges of a fragmented payment schedule."""
        params = merge_options(options)
        params[PARAM_OPERATION_TYPE] = OPERATION_TYPE_STOP_N_TIMES
        params[PARAM_SCHEDULE_ID] = schedule_id
        return self._signed_process_call(params)

    def get_transactions_by_transaction_id(
        self,
        transaction_ids: Iterable[str],
        destination: str,
        compression: str,
    ) -> Result:
        payload = build_get_transactions_payload(
            self.credentials,
            SEARCH_BY_TRANSACTION_ID,
            transaction_ids,
            destination,
            compression,
            hasher=self.hasher,
        )
        return self.transport.post(EXPORT_PATH, payload)

    def get_transactions_by_order_id(
        self,
        order_ids: Iterable[str],
        destination: str,
        compression: str,
    ) -> Result:
        payload = build_get_transactions_payload(
            self.credentials,
            SEARCH_BY_ORDER_ID,
            order_ids,
            destination,
            compression,
            hasher=self.hasher,
        )
        return self.transport.post(EXPORT_PATH, payload)

    def _export(
        self,
        path: str,
        operation_type: str,
        start_date: str,
        end_date: Optional[str],
        destination: str,
        compression: str,
        options: Options,
    ) -> Result:
        payload = build_export_payload(
            self.credentials,
            operation_type,
            destination,
            compression,
            start_date=start_date,
            end_date=end_date,
            options=options,
            hasher=self.hasher,
        )
        return self.transport.post(path, payload)

    def export_transactions(
        self,
        start_date: str,
        end_date: Optional[str],
        destination: str,
        compression: str,
        options: Options = None,
    ) -> Result:
        """
        Export the transactions of a day or of a ``start_date``-``end_date`` interval.

        ``destination`` is either a callback URL or an e-mail address.
        """
        return self._export(
            EXPORT_PATH,
            OPERATION_TYPE_EXPORT_TRANSACTIONS,
            start_date,
            end_date,
            destination,
            compression,
            options,
        )

    def export_chargebacks(
        self,
        start_date: str,
        end_date: Optional[str],
        destination: str,
        compression: str,
        options: Options = None,
    ) -> Result:
        return self._export(
            EXPORT_PATH,
            OPERATION_TYPE_EXPORT_CHARGEBACKS,
            start_date,
            end_date,
            destination,
            compression,
            options,
        )

    def export_reconciliation(
        self,
        start_date: str,
        end_date: Optional[str],
        destination: str,
        compression: str,
        options: Options = None,
    ) -> Result:
        return self._export(
            RECONCILIATION_PATH,
            OPERATION_TYPE_EXPORT_RECONCILIATION,
            start_date,
            end_date,
            destination,
            compression,
            options,
        )

    def export_reconciled_transactions(
        self,
        date: str,
        destination: str,
        compression: str,
        options: Options = None,
    ) -> Result:
        return self._export(
            RECONCILIATION_PATH,
            OPERATION_TYPE_EXPORT_RECONCILED_TRANSACTIONS,
            date,
            None,
            destination,
            compression,
            options,
        )
