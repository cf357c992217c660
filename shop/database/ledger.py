import logging
from typing import List, Optional
from ..models.models import Order
from ..utils.constants import MAX_ORDERS
from ..utils.formatters import format_log_line, format_orders

logger = logging.getLogger(__name__)

class OrderLedger:
    """Numbers completed orders, keeps them for the session and appends them to the order log.

    One ledger is created per run and handed to the menu loop. The log file is
    write-only: nothing here ever reads it back, so a restarted process starts
    with an empty in-memory list while the log keeps growing.
    """

    def __init__(self, log_path: str, max_orders: int = MAX_ORDERS, start_order_id: int = 1):
        if max_orders < 1:
            raise ValueError("max_orders must be positive")
        self.log_path = log_path
        self.max_orders = max_orders
        self._last_order_id = start_order_id
        self._orders: List[Order] = []

    def next_order_id(self) -> int:
        order_id = self._last_order_id
        self._last_order_id += 1
        return order_id

    @property
    def is_full(self) -> bool:
        return len(self._orders) >= self.max_orders

    @property
    def orders(self) -> List[Order]:
        return list(self._orders)

    def save(self, order: Order) -> Optional[Order]:
        # Full ledger: drop the order before it consumes an id or reaches the log
        if self.is_full:
            logger.warning(f"Order ledger is full ({self.max_orders} orders), order dropped")
            return None

        stored = order.with_id(self.next_order_id())
        self._orders.append(stored)
        logger.info(f"Saved order {stored.order_id} ({stored.total_amount} via {stored.payment_method})")

        try:
            with open(self.log_path, 'a', encoding='utf-8') as log:
                log.write(format_log_line(stored))
        except OSError as e:
            logger.error(f"Could not write order {stored.order_id} to {self.log_path}: {e}")

        return stored

    def list_all(self) -> str:
        return format_orders(self._orders)

    def __len__(self) -> int:
        return len(self._orders)
