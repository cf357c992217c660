from dataclasses import dataclass, replace
from typing import Iterable, Tuple

@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: int

@dataclass(frozen=True)
class CartItem:
    product_id: int
    name: str
    price: int
    quantity: int

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity

    @classmethod
    def from_product(cls, product: Product, quantity: int) -> 'CartItem':
        """Snapshot the product's name and price at add time."""
        return cls(
            product_id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity
        )

@dataclass(frozen=True)
class Order:
    order_id: int
    payment_method: str
    items: Tuple[CartItem, ...]
    total_amount: int

    @property
    def item_count(self) -> int:
        return len(self.items)

    @classmethod
    def from_cart(cls, items: Iterable[CartItem], payment_method: str) -> 'Order':
        """Build an unnumbered order; the ledger assigns the id on save."""
        items = tuple(items)
        return cls(
            order_id=0,
            payment_method=payment_method,
            items=items,
            total_amount=sum(item.subtotal for item in items)
        )

    def with_id(self, order_id: int) -> 'Order':
        return replace(self, order_id=order_id)
