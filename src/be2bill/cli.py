"""
Command-line interface for exercising the Be2bill APIs.
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Iterable, Sequence, Tuple

from .api import create_directlink_client, create_form_client
from .core.amount import FragmentedAmount, SingleAmount
from .core.config import ConfigError, load_client_config
from .core.exceptions import Be2billError
from .core.hashing import check_hash, compute_hash
from .core.result import Result


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _key_value(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Values must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Key must not be empty")
    return key, val


def _schedule_entry(value: str) -> Tuple[str, int]:
    date, cents = _key_value(value)
    try:
        return date, int(cents)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid amount for {date}: '{cents}'") from exc


def _collect(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    collected: Dict[str, str] = {}
    for key, value in pairs:
        collected[key] = value
    return collected


def _add_form_arguments(parser: argparse.ArgumentParser, *, allow_schedule: bool) -> None:
    amount = parser.add_mutually_exclusive_group(required=True)
    amount.add_argument("--amount", type=int, help="Immediate amount in cents")
    if allow_schedule:
        amount.add_argument(
            "--schedule",
            action="append",
            type=_schedule_entry,
            metavar="YYYY-MM-DD=CENTS",
            help="Fragmented amount entry (repeatable)",
        )
    parser.add_argument("--order-id", required=True)
    parser.add_argument("--client-id", required=True)
    parser.add_argument("--description", required=True)
    parser.add_argument(
        "--param",
        action="append",
        type=_key_value,
        metavar="KEY=VALUE",
        default=None,
        help="Additional API parameter (repeatable)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="be2bill",
        description="Build signed Be2bill forms and run DirectLink operations",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing BE2BILL_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_key_value,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    payment_form = commands.add_parser("payment-form", help="Print a payment form button")
    _add_form_arguments(payment_form, allow_schedule=True)

    authorization_form = commands.add_parser(
        "authorization-form", help="Print an authorization form button"
    )
    _add_form_arguments(authorization_form, allow_schedule=False)

    for name, help_text in (
        ("sign", "Print the HASH of a parameter set"),
        ("verify", "Check the HASH carried by a parameter set"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument(
            "params",
            nargs="*",
            type=_key_value,
            metavar="KEY=VALUE",
            help="Parameters to hash",
        )

    for name, help_text in (
        ("capture", "Capture an authorization"),
        ("refund", "Refund a transaction"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("--transaction-id", required=True)
        command.add_argument("--order-id", required=True)
        command.add_argument("--description", required=True)

    stop = commands.add_parser("stop-schedule", help="Stop a fragmented payment schedule")
    stop.add_argument("--schedule-id", required=True)
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    if args.command in ("payment-form", "authorization-form"):
        return _handle_form(args, create_form_client(config=config))

    if args.command == "sign":
        print(compute_hash(config.password, _collect(args.params)))
        return 0

    if args.command == "verify":
        if not check_hash(config.password, _collect(args.params)):
            logging.error("HASH does not match the given parameters")
            return 1
        logging.info("HASH is valid")
        return 0

    client = create_directlink_client(config=config)
    try:
        if args.command == "capture":
            result = client.capture(args.transaction_id, args.order_id, args.description)
        elif args.command == "refund":
            result = client.refund(args.transaction_id, args.order_id, args.description)
        else:
            result = client.stop_n_times(args.schedule_id)
    except Be2billError as exc:
        logging.error("%s request failed: %s", args.command, exc)
        return 1

    return _handle_result(result)


def _handle_form(args: argparse.Namespace, client) -> int:
    options = _collect(args.param or ())
    schedule = getattr(args, "schedule", None)
    amount = FragmentedAmount(dict(schedule)) if schedule else SingleAmount(args.amount)

    try:
        if args.command == "payment-form":
            button = client.build_payment_form_button(
                amount, args.order_id, args.client_id, args.description, options=options
            )
        else:
            button = client.build_authorization_form_button(
                amount, args.order_id, args.client_id, args.description, options=options
            )
    except (Be2billError, ValueError) as exc:
        logging.error("Could not build form: %s", exc)
        return 1

    print(button)
    return 0


def _handle_result(result: Result) -> int:
    if not result.success:
        logging.error("Operation failed with %s: %s", result.exec_code, result.message)
        return 1

    logging.info(
        "%s succeeded. Transaction: %s",
        result.operation_type,
        result.transaction_id,
    )
    return 0
