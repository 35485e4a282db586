"""
Minimal script that uses the public API to charge a card through DirectLink.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import Iterable, Tuple

from be2bill import (
    Be2billError,
    Card,
    ConfigError,
    FragmentedAmount,
    SingleAmount,
    create_directlink_client,
    load_client_config,
)


def _override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _build_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a Be2bill payment using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing BE2BILL_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--amount", type=int, default=100, help="Amount in cents (default: 100)")
    parser.add_argument(
        "--installments",
        type=int,
        default=1,
        help="Split the amount over this many monthly charges starting today",
    )
    parser.add_argument("--card", default="1111222233334444", help="Card number")
    parser.add_argument("--validity", default="01-30", help="Card validity date (MM-YY)")
    parser.add_argument("--cvv", default="123", help="Card cryptogram")
    parser.add_argument("--holder", default="john doe", help="Card holder name")
    parser.add_argument("--order-id", default="order_example", help="Merchant order id")
    return parser.parse_args()


def _build_amount(args: argparse.Namespace):
    if args.installments <= 1:
        return SingleAmount(args.amount)

    today = date.today()
    share, remainder = divmod(args.amount, args.installments)
    schedule = {}
    for index in range(args.installments):
        year, month = divmod(today.month - 1 + index, 12)
        due = today.replace(year=today.year + year, month=month + 1, day=min(today.day, 28))
        schedule[due.isoformat()] = share + (remainder if index == 0 else 0)
    return FragmentedAmount(schedule)


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_client_config(
            env_file=args.env_file,
            overrides=_build_overrides(args.set or ()),
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_directlink_client(config=config)
    logging.info("Sending payment to %s", ", ".join(config.environment))

    try:
        result = client.payment(
            Card(args.card, args.validity, args.cvv, args.holder),
            _build_amount(args),
            order_id=args.order_id,
            client_id="example_client",
            client_email="client@example.org",
            client_ip="127.0.0.1",
            description="SDK example payment",
            client_user_agent="be2bill-example",
        )
    except Be2billError as exc:
        logging.error("Payment request failed: %s", exc)
        return 1

    if result.success:
        logging.info("Payment accepted. Transaction: %s", result.transaction_id)
        return 0

    logging.error("Payment refused with %s: %s", result.exec_code, result.message)
    return 1


if __name__ == "__main__":
    sys.exit(main())
