"""
Draft Domain Models

The stop-loss / take-profit form as the trader edits it.
No framework dependencies.

Every price and amount is free text until submission. Updates only check
the shape of a value (text vs flag); they never parse numbers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Union

from oco_core.domain.jobs import Direction


class DraftField(str, Enum):
    """The editable fields of a draft, valued by their wire names."""
    LOW_PRICE = "lowPrice"
    LOW_LIMIT_PRICE = "lowLimitPrice"
    LOW_TRAILING = "lowTrailing"
    HIGH_PRICE = "highPrice"
    HIGH_LIMIT_PRICE = "highLimitPrice"
    HIGH_TRAILING = "highTrailing"
    INITIAL_TRAILING_STOP = "initialTrailingStop"
    AMOUNT = "amount"
    DIRECTION = "direction"

    @property
    def attribute(self) -> str:
        """Name of the matching DraftState attribute."""
        return _ATTRIBUTES[self]

    @property
    def is_flag(self) -> bool:
        return self in (DraftField.LOW_TRAILING, DraftField.HIGH_TRAILING)


_ATTRIBUTES = {
    DraftField.LOW_PRICE: "low_price",
    DraftField.LOW_LIMIT_PRICE: "low_limit_price",
    DraftField.LOW_TRAILING: "low_trailing",
    DraftField.HIGH_PRICE: "high_price",
    DraftField.HIGH_LIMIT_PRICE: "high_limit_price",
    DraftField.HIGH_TRAILING: "high_trailing",
    DraftField.INITIAL_TRAILING_STOP: "initial_trailing_stop",
    DraftField.AMOUNT: "amount",
    DraftField.DIRECTION: "direction",
}


class BracketSide(str, Enum):
    """Side of the bracket: LOW (stop-loss) or HIGH (take-profit)."""
    LOW = "low"
    HIGH = "high"


class LegKind(str, Enum):
    """Which leg constructor a side of the draft asks for."""
    LIMIT = "LIMIT"
    TRAILING = "TRAILING"


@dataclass(frozen=True)
class DraftState:
    """
    Pre-validation stop-loss / take-profit form.

    A blank threshold (`low_price` / `high_price`) leaves that side of the
    bracket out. `amount` and `direction` apply to both sides;
    `initial_trailing_stop` is used by whichever side is trailing.
    """
    low_price: str = ""
    low_limit_price: str = ""
    low_trailing: bool = False
    high_price: str = ""
    high_limit_price: str = ""
    high_trailing: bool = False
    initial_trailing_stop: str = ""
    amount: str = ""
    direction: Direction = Direction.BUY

    def get(self, field: DraftField) -> Any:
        return getattr(self, field.attribute)

    def threshold(self, side: BracketSide) -> str:
        return self.low_price if side is BracketSide.LOW else self.high_price

    def limit_price(self, side: BracketSide) -> str:
        return self.low_limit_price if side is BracketSide.LOW else self.high_limit_price

    def leg_kind(self, side: BracketSide) -> LegKind:
        trailing = self.low_trailing if side is BracketSide.LOW else self.high_trailing
        return LegKind.TRAILING if trailing else LegKind.LIMIT

    def to_dict(self) -> dict:
        """Form state keyed by wire names."""
        data = {field.value: self.get(field) for field in DraftField}
        data[DraftField.DIRECTION.value] = self.direction.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[Union[str, DraftField], Any]) -> "DraftState":
        return merge(cls(), data)


def resolve_field(key: Union[str, DraftField]) -> DraftField:
    """Look up a DraftField by member or wire name; KeyError if unknown."""
    if isinstance(key, DraftField):
        return key
    try:
        return DraftField(key)
    except ValueError:
        raise KeyError(f"Unknown draft field: {key!r}") from None


def with_field(draft: DraftState, field: Union[str, DraftField], value: Any) -> DraftState:
    """
    Return a copy of `draft` with one field replaced.

    Text fields take strings; Decimal and int values (e.g. a price picked
    from a chart) are rendered with str(). Flag fields take bools only.
    The direction field takes a Direction or its name. The field may be
    given as a DraftField or its wire name.

    Raises:
        KeyError: If the field names no draft field
        TypeError: If the value has the wrong shape for the field
        ValueError: If a direction name is unknown
    """
    field = resolve_field(field)
    if field is DraftField.DIRECTION:
        if not isinstance(value, str):
            raise TypeError(f"{field.value} expects a direction name, got {type(value).__name__}")
        value = Direction(value)
    elif field.is_flag:
        if not isinstance(value, bool):
            raise TypeError(f"{field.value} expects a bool, got {type(value).__name__}")
    elif isinstance(value, (Decimal, int)) and not isinstance(value, bool):
        value = str(value)
    elif not isinstance(value, str):
        raise TypeError(f"{field.value} expects text, got {type(value).__name__}")

    return replace(draft, **{field.attribute: value})


def merge(draft: DraftState, values: Mapping[Union[str, DraftField], Any]) -> DraftState:
    """
    Apply several field updates, keyed by DraftField or wire name.

    Raises:
        KeyError: If a key names no draft field
    """
    for key, value in values.items():
        draft = with_field(draft, key, value)
    return draft
