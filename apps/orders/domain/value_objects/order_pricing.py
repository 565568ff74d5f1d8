"""
Order pricing value object.
"""
from dataclasses import dataclass
from decimal import Decimal

from shared.domain import ValidationError, ValueObject

# Largest amount the money columns hold (12 digits, 2 decimal places).
MAX_ORDER_AMOUNT = Decimal("9999999999.99")


@dataclass(frozen=True)
class OrderPricing(ValueObject):
    """Totals fixed at order creation; grand_total = items_total + delivery_charge."""
    items_total: Decimal
    delivery_charge: Decimal
    grand_total: Decimal

    def __post_init__(self):
        for name in ('items_total', 'delivery_charge', 'grand_total'):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))
            if getattr(self, name) < 0:
                raise ValidationError(f"{name} must be non-negative", field=name)
            if getattr(self, name) > MAX_ORDER_AMOUNT:
                raise ValidationError(f"{name} exceeds {MAX_ORDER_AMOUNT}", field=name)
        if self.grand_total != self.items_total + self.delivery_charge:
            raise ValidationError(
                f"Grand total {self.grand_total} does not equal "
                f"{self.items_total} + {self.delivery_charge}",
                field="grand_total",
            )

    @classmethod
    def compose(cls, items_total: Decimal, delivery_charge: Decimal) -> 'OrderPricing':
        return cls(
            items_total=items_total,
            delivery_charge=delivery_charge,
            grand_total=items_total + delivery_charge,
        )
