import logging
from typing import Callable, Dict
from .session import Session
from .product_handlers import view_products
from .cart_handlers import view_cart
from .order_handlers import view_orders
from ..utils.constants import (
    MAIN_MENU, VIEWING_PRODUCTS, VIEWING_CART, VIEWING_ORDERS, EXITED,
    MENU_OPTIONS, MESSAGES, PROMPTS
)
from ..utils.formatters import format_main_menu
from ..utils.prompts import InvalidInput, read_menu_choice

logger = logging.getLogger(__name__)

def handle_main_menu(session: Session) -> int:
    console = session.console
    while True:
        try:
            console.say()
            console.say(format_main_menu(MENU_OPTIONS))
            choice = read_menu_choice(console, PROMPTS['MENU_CHOICE'], 1, len(MENU_OPTIONS))
            return MENU_OPTIONS[choice][1]
        except InvalidInput as e:
            console.say(str(e))

def exit_shop(session: Session) -> int:
    session.console.say(MESSAGES['GOODBYE'])
    return EXITED

STATES: Dict[int, Callable[[Session], int]] = {
    MAIN_MENU: handle_main_menu,
    VIEWING_PRODUCTS: view_products,
    VIEWING_CART: view_cart,
    VIEWING_ORDERS: view_orders
}

def run_session(session: Session) -> None:
    """Drive the menu until the user exits or the input runs out."""
    state = MAIN_MENU
    while state != EXITED:
        try:
            state = STATES[state](session)
        except EOFError:
            logger.info("Input closed, leaving the shop")
            session.console.say()
            state = EXITED

    exit_shop(session)
