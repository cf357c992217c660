import io
import pytest
from shop.database.catalog import Catalog
from shop.database.ledger import OrderLedger
from shop.handlers.session import Session
from shop.models.cart import Cart
from shop.utils.prompts import Console

@pytest.fixture
def catalog():
    return Catalog()

@pytest.fixture
def cart(catalog):
    return Cart(catalog)

@pytest.fixture
def log_path(tmp_path):
    return tmp_path / 'orders.txt'

@pytest.fixture
def ledger(log_path):
    return OrderLedger(str(log_path))

def scripted_console(*lines):
    """Console fed from the given input lines, capturing everything written."""
    stdin = io.StringIO(''.join(f"{line}\n" for line in lines))
    return Console(stdin=stdin, stdout=io.StringIO())

@pytest.fixture
def make_session(catalog, cart, ledger):
    def _make(*lines):
        return Session(
            console=scripted_console(*lines),
            catalog=catalog,
            cart=cart,
            ledger=ledger
        )
    return _make
