"""Value Objects and guards shared across the domain.

Value Objects are immutable and compared by value, not identity.
The guard helpers here are what every entity constructor uses, so all
three entities reject bad input with the same error types and messages.
"""

from __future__ import annotations

import uuid
from decimal import Decimal, InvalidOperation
from enum import Enum

from orders.domain.exceptions import OutOfRangeError, ValidationError

# The all-zero UUID is reserved for "unset" and never identifies an entity.
EMPTY_ID = uuid.UUID(int=0)

ZERO = Decimal("0.00")
CENT = Decimal("0.01")


class OrderStatus(Enum):
    PENDING = "Pending"
    PAID = "Paid"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: OrderStatus | str) -> OrderStatus:
        """Accept a member, its value (``"Paid"``) or its name (``"PAID"``)."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            for member in cls:
                if raw == member.value or raw.upper() == member.name:
                    return member
        raise ValidationError(f"Status {raw!r} is not a valid OrderStatus value")


def new_id() -> uuid.UUID:
    """Generate a fresh, non-empty entity identifier."""
    return uuid.uuid4()


def require_id(value: object, field_name: str) -> uuid.UUID:
    if not isinstance(value, uuid.UUID):
        raise ValidationError(
            f"{field_name} must be a UUID, got {type(value).__name__}"
        )
    if value == EMPTY_ID:
        raise ValidationError(f"{field_name} cannot be empty")
    return value


def parse_id(raw: uuid.UUID | str, field_name: str = "Id") -> uuid.UUID:
    """Turn user input such as a CLI argument into a non-empty UUID."""
    if isinstance(raw, str):
        try:
            raw = uuid.UUID(raw.strip())
        except ValueError as exc:
            raise ValidationError(f"{field_name} {raw!r} is not a valid UUID") from exc
    return require_id(raw, field_name)


def require_text(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} cannot be null or whitespace")
    return value


def to_amount(value: str | float | int | Decimal, field_name: str) -> Decimal:
    """Coerce to Decimal and reject negatives and sub-cent amounts.

    Floats go through ``str`` so 0.1 becomes Decimal("0.1") rather than
    its binary approximation.  Amounts are stored with two fractional
    digits, so anything finer is refused instead of being rounded.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number, got bool")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {field_name}: {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    if amount < 0:
        raise OutOfRangeError(f"{field_name} cannot be negative, got {amount}")
    try:
        cents = amount.quantize(CENT)
    except InvalidOperation as exc:
        raise OutOfRangeError(f"{field_name} is too large: {amount}") from exc
    if cents != amount:
        raise ValidationError(
            f"{field_name} cannot have more than 2 decimal places, got {amount}"
        )
    return amount
