#!/usr/bin/env python
from typing import ClassVar, List, Protocol, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from structkit.patterns.composite import format_currency


class Purchase(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: str = Field(..., description="Product name")
    price: float = Field(..., ge=0, description="Base price")


class Modifier(Protocol):
    label: str
    is_discount: bool

    def apply(self, price: float) -> float: ...


class Extra(BaseModel):
    """Fixed surcharge, shown in the purchase description."""

    model_config = ConfigDict(frozen=True)

    label: str
    amount: float = Field(..., ge=0)
    is_discount: ClassVar[bool] = False

    def apply(self, price: float) -> float:
        return price + self.amount


class Discount(BaseModel):
    """Percentage off the price accumulated so far."""

    model_config = ConfigDict(frozen=True)

    label: str
    rate: float = Field(..., ge=0, le=1)
    is_discount: ClassVar[bool] = True

    def apply(self, price: float) -> float:
        return price - price * self.rate


GIFT_WRAP = Extra(label="giftwrap", amount=2)
RIBBON = Extra(label="ribbon", amount=1)
DELIVERY = Extra(label="delivery", amount=5)
BLACK_FRIDAY = Discount(label="black friday", rate=0.20)
END_OF_LINE = Discount(label="end of line", rate=0.70)


class DecoratedPurchase:
    def __init__(self, purchase: Purchase, modifiers: Sequence[Modifier] = ()) -> None:
        self.purchase = purchase
        self.modifiers: Tuple[Modifier, ...] = tuple(modifiers)

    def with_modifier(self, modifier: Modifier) -> "DecoratedPurchase":
        return DecoratedPurchase(self.purchase, self.modifiers + (modifier,))

    @property
    def description(self) -> str:
        labels = [m.label for m in self.modifiers if not m.is_discount]
        return " + ".join([self.purchase.product, *labels])

    @property
    def total_price(self) -> float:
        price = self.purchase.price
        for modifier in self.modifiers:
            price = modifier.apply(price)
        return price

    def discount_count(self) -> int:
        return sum(1 for m in self.modifiers if m.is_discount)

    def __str__(self) -> str:
        return self.description


class CustomerAccount:
    def __init__(self, name: str) -> None:
        self.customer_name = name
        self.purchases: List[DecoratedPurchase] = []

    def add_purchase(self, purchase: Purchase | DecoratedPurchase) -> None:
        if isinstance(purchase, Purchase):
            purchase = DecoratedPurchase(purchase)
        self.purchases.append(purchase)

    def total_due(self) -> float:
        return sum(p.total_price for p in self.purchases)

    def statement(self) -> List[str]:
        lines = [
            f"Purchase {p.description}, Price {format_currency(p.total_price)}"
            for p in self.purchases
        ]
        lines.append(f"Total due: {format_currency(self.total_due())}")
        return lines
