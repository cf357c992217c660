from dataclasses import dataclass
from ..database.catalog import Catalog
from ..database.ledger import OrderLedger
from ..models.cart import Cart
from ..utils.prompts import Console

@dataclass
class Session:
    """Everything a handler needs for one run of the shop."""
    console: Console
    catalog: Catalog
    cart: Cart
    ledger: OrderLedger
