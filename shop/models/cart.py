import logging
from typing import List, Optional
from .models import CartItem
from ..database.catalog import Catalog
from ..utils.constants import MAX_CART_ITEMS

logger = logging.getLogger(__name__)

class Cart:
    """Ordered line items for the current session. Lines are never merged."""

    def __init__(self, catalog: Catalog, max_items: int = MAX_CART_ITEMS):
        self.catalog = catalog
        self.max_items = max_items
        self._items: List[CartItem] = []

    @property
    def items(self) -> List[CartItem]:
        return list(self._items)

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.max_items

    def add(self, product_id: int, quantity: int) -> Optional[CartItem]:
        """Append a snapshot line for the product.

        Returns None when the product id is unknown or the cart is full.
        """
        if quantity < 1:
            raise ValueError(f"Quantity must be positive, got {quantity}")

        product = self.catalog.get(product_id)
        if product is None:
            return None

        if self.is_full:
            logger.warning(f"Cart is full ({self.max_items} items), product {product_id} not added")
            return None

        item = CartItem.from_product(product, quantity)
        self._items.append(item)
        return item

    def total(self) -> int:
        return sum(item.subtotal for item in self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
