from typing import Iterable, List, Optional, Tuple
from ..models.models import Product
from ..utils.constants import MAX_PRODUCTS

DEFAULT_PRODUCTS = (
    Product(id=1, name='Laptop', price=1200),
    Product(id=2, name='Mouse', price=25),
    Product(id=3, name='Keyboard', price=75),
    Product(id=4, name='Monitor', price=300)
)

class Catalog:
    def __init__(self, products: Iterable[Product] = DEFAULT_PRODUCTS):
        self._products: Tuple[Product, ...] = tuple(products)
        if len(self._products) > MAX_PRODUCTS:
            raise ValueError(f"Catalog holds at most {MAX_PRODUCTS} products")

        seen = set()
        for product in self._products:
            if product.id < 1 or product.price < 0:
                raise ValueError(f"Invalid product: {product}")
            if product.id in seen:
                raise ValueError(f"Duplicate product id: {product.id}")
            seen.add(product.id)

    @property
    def products(self) -> List[Product]:
        return list(self._products)

    def get(self, product_id: int) -> Optional[Product]:
        """Return the first product with this id, or None if there is none."""
        return next((p for p in self._products if p.id == product_id), None)

    def __len__(self) -> int:
        return len(self._products)
