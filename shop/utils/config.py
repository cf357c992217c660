import os
import logging
from dataclasses import dataclass
from dotenv import load_dotenv
from .constants import MAX_CART_ITEMS, MAX_ORDERS

@dataclass(frozen=True)
class Settings:
    order_log_path: str = 'orders.txt'
    max_orders: int = MAX_ORDERS
    max_cart_items: int = MAX_CART_ITEMS
    start_order_id: int = 1
    log_level: int = logging.WARNING

def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value

def _log_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"{name} is not a valid logging level: {raw!r}")
    return level

def load_settings(dotenv: bool = True) -> Settings:
    """Read settings from the environment, optionally loading a .env file first."""
    if dotenv:
        load_dotenv()

    return Settings(
        order_log_path=os.getenv('SHOP_ORDER_LOG') or 'orders.txt',
        max_orders=_positive_int('SHOP_MAX_ORDERS', MAX_ORDERS),
        max_cart_items=_positive_int('SHOP_MAX_CART_ITEMS', MAX_CART_ITEMS),
        start_order_id=_positive_int('SHOP_START_ORDER_ID', 1),
        log_level=_log_level('SHOP_LOG_LEVEL', logging.WARNING)
    )
