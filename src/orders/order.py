# file: src/orders/order.py
# English-only comments

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, List, Optional, Tuple

Sink = Callable[[str], None]


class CloneError(RuntimeError):
    """Deep copy of an order sub-object failed. The original error is __cause__."""


def _to_decimal(x: Any) -> Decimal:
    # Safe conversion for floats/Decimals/strings
    if isinstance(x, Decimal):
        return x
    return Decimal(str(x))


@dataclass
class Product:
    name: str
    price: Decimal
    quantity: int = 1

    def __post_init__(self) -> None:
        self.price = _to_decimal(self.price)
        self._check_quantity(self.quantity)

    @staticmethod
    def _check_quantity(quantity: int) -> None:
        if quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {quantity}")

    def set_quantity(self, quantity: int) -> None:
        self._check_quantity(quantity)
        self.quantity = quantity

    def clone(self) -> "Product":
        return Product(name=self.name, price=self.price, quantity=self.quantity)

    def __str__(self) -> str:
        return f"{self.name} x{self.quantity} ${self.price}"


@dataclass(frozen=True)
class Discount:
    """Percent discount. Immutable: replace it on the order to change it."""
    percent: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "percent", _to_decimal(self.percent))

    def clone(self) -> "Discount":
        return Discount(percent=self.percent)

    def __str__(self) -> str:
        return f"{self.percent}%"


@dataclass
class Order:
    """
    Order template that can be copied with clone().

    Ownership:
      - products and discount belong to this order only; clone() copies
        each of them, so the copy shares no mutable sub-object.
      - delivery_cost / payment_method are immutable scalars, copied by value.
    """
    delivery_cost: Decimal = Decimal("0")
    payment_method: str = ""
    discount: Optional[Discount] = None
    _products: List[Product] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.delivery_cost = _to_decimal(self.delivery_cost)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    def add_product(self, product: Product) -> None:
        self._products.append(product)

    def remove_product(self, product: Product) -> None:
        """Remove this exact product object (identity, not equality)."""
        for i, p in enumerate(self._products):
            if p is product:
                del self._products[i]
                return
        raise ValueError(f"product not in order: {product}")

    def set_delivery_cost(self, cost: Any) -> None:
        self.delivery_cost = _to_decimal(cost)

    def set_discount(self, discount: Discount) -> None:
        self.discount = discount

    def set_payment_method(self, method: str) -> None:
        self.payment_method = method

    # ------------------------------------------------------------------
    # Prototype
    # ------------------------------------------------------------------
    def clone(self) -> "Order":
        """
        Deep copy for owned sub-objects, by value for scalars.
        Raises CloneError if copying a product or the discount fails.
        """
        try:
            products = [p.clone() for p in self._products]
            discount = self.discount.clone() if self.discount is not None else None
        except Exception as e:
            raise CloneError(f"Failed to clone order: {e}") from e

        return Order(
            delivery_cost=self.delivery_cost,
            payment_method=self.payment_method,
            discount=discount,
            _products=products,
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def lines(self) -> List[str]:
        out = [str(p) for p in self._products]
        out.append(f"Delivery: {self.delivery_cost}")
        out.append(f"Discount: {self.discount if self.discount is not None else 'none'}")
        out.append(f"Payment: {self.payment_method}")
        return out

    def show(self, sink: Sink = print) -> None:
        for line in self.lines():
            sink(line)
