from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, time
from decimal import ROUND_CEILING, Decimal
from typing import Any, Optional, Union

from pydantic import ValidationError

from .config import ScoringConfig
from .errors import InvalidReceiptError
from .models import Receipt

_AMOUNT_RE = re.compile(r"(\d+)\.(\d{2})", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"(\d{2}):(\d{2})", re.ASCII)
# Whole-dollar digits; keeps int() well inside its string-conversion limit.
MAX_AMOUNT_DIGITS = 15

ReceiptInput = Union[Receipt, Mapping[str, Any]]


@dataclass(frozen=True)
class ParsedItem:
    description: str
    price_cents: int

    @property
    def trimmed_description(self) -> str:
        return self.description.strip()


@dataclass(frozen=True)
class ReceiptContext:
    retailer: str
    purchase_date: date
    purchase_time: time
    total_cents: int
    items: tuple[ParsedItem, ...]
    config: ScoringConfig = field(default_factory=ScoringConfig)

    @classmethod
    def from_receipt(
        cls,
        receipt: ReceiptInput,
        config: Optional[ScoringConfig] = None,
    ) -> "ReceiptContext":
        """Parse and validate every field up front; rules only ever see clean values."""
        model = parse_receipt(receipt)
        if not model.retailer.strip():
            raise InvalidReceiptError("retailer", "must not be blank")
        if not model.items:
            raise InvalidReceiptError("items", "must contain at least one item")

        items = tuple(
            ParsedItem(
                description=item.short_description,
                price_cents=parse_amount_cents(item.price, field=f"items.{idx}.price"),
            )
            for idx, item in enumerate(model.items)
        )
        return cls(
            retailer=model.retailer,
            purchase_date=parse_purchase_date(model.purchase_date),
            purchase_time=parse_purchase_time(model.purchase_time),
            total_cents=parse_amount_cents(model.total, field="total"),
            items=items,
            config=config or ScoringConfig(),
        )


def parse_receipt(receipt: ReceiptInput) -> Receipt:
    if isinstance(receipt, Receipt):
        return receipt
    if not isinstance(receipt, Mapping):
        raise InvalidReceiptError("receipt", f"expected an object, got {type(receipt).__name__}")
    try:
        return Receipt.model_validate(dict(receipt))
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first.get("loc", ())) or "receipt"
        raise InvalidReceiptError(loc, first.get("msg", "invalid value")) from exc


def parse_amount_cents(value: str, *, field: str) -> int:
    """Parse a two-decimal currency string ("6.49") into integer cents (649)."""
    match = _AMOUNT_RE.fullmatch(value)
    if not match:
        shown = value if len(value) <= 32 else f"{value[:29]}..."
        raise InvalidReceiptError(field, f"expected an amount with two decimals, got {shown!r}")
    dollars, cents = match.groups()
    if len(dollars) > MAX_AMOUNT_DIGITS:
        raise InvalidReceiptError(field, f"amount has more than {MAX_AMOUNT_DIGITS} integer digits")
    return int(dollars) * 100 + int(cents)


def parse_purchase_date(value: str) -> date:
    if not _DATE_RE.fullmatch(value):
        raise InvalidReceiptError("purchaseDate", f"expected YYYY-MM-DD, got {value!r}")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidReceiptError("purchaseDate", str(exc)) from exc


def parse_purchase_time(value: str) -> time:
    match = _TIME_RE.fullmatch(value)
    if not match:
        raise InvalidReceiptError("purchaseTime", f"expected HH:MM, got {value!r}")
    hour, minute = (int(part) for part in match.groups())
    try:
        return time(hour, minute)
    except ValueError as exc:
        raise InvalidReceiptError("purchaseTime", str(exc)) from exc


def cents_to_decimal(cents: int) -> Decimal:
    return Decimal(cents).scaleb(-2)


def ceil_points(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_CEILING))
