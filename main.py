import sys
import logging
from typing import Optional
from shop.database.catalog import Catalog
from shop.database.ledger import OrderLedger
from shop.handlers.menu_handlers import exit_shop, run_session
from shop.handlers.session import Session
from shop.models.cart import Cart
from shop.utils.config import load_settings
from shop.utils.prompts import Console

logger = logging.getLogger(__name__)

def build_session(settings, console: Optional[Console] = None) -> Session:
    """Wire up the single catalog, cart and ledger used for one run."""
    catalog = Catalog()
    return Session(
        console=console or Console(),
        catalog=catalog,
        cart=Cart(catalog, max_items=settings.max_cart_items),
        ledger=OrderLedger(
            settings.order_log_path,
            max_orders=settings.max_orders,
            start_order_id=settings.start_order_id
        )
    )

def main() -> int:
    # Load environment variables (and .env) before anything reads them
    settings = load_settings()

    # Enable logging
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=settings.log_level
    )

    session = build_session(settings)
    logger.info(f"Starting shop, orders are logged to {settings.order_log_path}")

    try:
        run_session(session)
    except KeyboardInterrupt:
        session.console.say()
        logger.info("Interrupted, leaving the shop")
        exit_shop(session)
    return 0

if __name__ == '__main__':
    sys.exit(main())
