import pytest
from shop.database.catalog import Catalog
from shop.models.cart import Cart
from shop.models.models import Product

@pytest.mark.parametrize("product_id,quantity", [(1, 1), (2, 3), (3, 10), (4, 2)])
def test_add_grows_cart_by_one_line(cart, catalog, product_id, quantity):
    cart.add(1, 1)
    before_count, before_total = len(cart), cart.total()

    item = cart.add(product_id, quantity)

    product = catalog.get(product_id)
    assert item is not None
    assert len(cart) == before_count + 1
    assert cart.total() == before_total + product.price * quantity

def test_duplicate_product_ids_are_not_merged(cart):
    cart.add(2, 1)
    cart.add(2, 4)

    assert len(cart) == 2
    assert [item.quantity for item in cart.items] == [1, 4]
    assert cart.total() == 25 * 5

def test_unknown_product_is_not_added(cart):
    assert cart.add(999, 1) is None
    assert len(cart) == 0
    assert cart.total() == 0

def test_items_are_snapshots_of_the_product(cart):
    item = cart.add(1, 2)

    assert item.product_id == 1
    assert item.name == 'Laptop'
    assert item.price == 1200
    assert item.subtotal == 2400

def test_non_positive_quantity_is_rejected(cart):
    with pytest.raises(ValueError):
        cart.add(1, 0)
    assert len(cart) == 0

def test_full_cart_drops_the_line(catalog):
    cart = Cart(catalog, max_items=2)
    cart.add(1, 1)
    cart.add(2, 1)

    assert cart.is_full
    assert cart.add(3, 1) is None
    assert len(cart) == 2
    assert cart.total() == 1225

def test_clear_empties_cart(cart):
    cart.add(1, 1)
    cart.add(3, 2)
    cart.clear()

    assert len(cart) == 0
    assert cart.items == []
    assert cart.total() == 0

def test_items_returns_a_copy(cart):
    cart.add(1, 1)
    cart.items.clear()
    assert len(cart) == 1

def test_catalog_lookup(catalog):
    assert [p.name for p in catalog.products] == ['Laptop', 'Mouse', 'Keyboard', 'Monitor']
    assert catalog.get(4).price == 300
    assert catalog.get(0) is None
    assert catalog.get(999) is None

def test_catalog_rejects_duplicate_ids():
    with pytest.raises(ValueError):
        Catalog([Product(1, 'A', 1), Product(1, 'B', 2)])

def test_catalog_rejects_too_many_products():
    with pytest.raises(ValueError):
        Catalog([Product(i, f"P{i}", 1) for i in range(1, 102)])
