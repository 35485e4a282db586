"""
Amounts accepted by the payment operations.

A :class:`SingleAmount` is charged immediately. A :class:`FragmentedAmount`
is a schedule of partial charges keyed by ``YYYY-MM-DD`` dates; it is sent as
the nested ``AMOUNTS`` parameter instead of ``AMOUNT``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

from .constants import PARAM_AMOUNT, PARAM_AMOUNTS
from .exceptions import UnsupportedAmountError

__all__ = [
    "Amount",
    "FragmentedAmount",
    "SingleAmount",
    "amount_parameter",
    "require_single_amount",
]


def _check_cents(value: object, label: str) -> int:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} must be an integer number of cents, got {value!r}")
    return value


@dataclass(frozen=True)
class SingleAmount:
    value: int

    def __post_init__(self) -> None:
        _check_cents(self.value, "SingleAmount")

    @property
    def immediate(self) -> bool:
        return True

    def options(self) -> None:
        return None

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FragmentedAmount:
    schedule: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        checked: Dict[str, int] = {}
        for date, cents in self.schedule.items():
            if not isinstance(date, str):
                raise TypeError(f"FragmentedAmount dates must be strings, got {date!r}")
            checked[date] = _check_cents(cents, f"FragmentedAmount[{date}]")
        object.__setattr__(self, "schedule", MappingProxyType(checked))

    @property
    def immediate(self) -> bool:
        return False

    def options(self) -> Dict[str, int]:
        """Return the schedule as a fresh parameter mapping."""
        return dict(self.schedule)


Amount = Union[SingleAmount, FragmentedAmount]


def require_single_amount(amount: Union[Amount, int], operation: str) -> SingleAmount:
    """
    Return ``amount`` as a :class:`SingleAmount` or fail for ``operation``.

    Plain integers are accepted as a shorthand for immediate amounts.
    """
    if isinstance(amount, SingleAmount):
        return amount
    if isinstance(amount, int) and not isinstance(amount, bool):
        return SingleAmount(amount)
    kind = type(amount).__name__
    raise UnsupportedAmountError(
        f"unsupported amount kind for {operation}: {kind} (only immediate amounts are accepted)"
    )


def amount_parameter(amount: Union[Amount, int], operation: str) -> Tuple[str, Amount]:
    """Return the ``(name, value)`` pair used to send ``amount``."""
    if isinstance(amount, FragmentedAmount):
        return PARAM_AMOUNTS, amount
    return PARAM_AMOUNT, require_single_amount(amount, operation)
