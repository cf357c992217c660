import logging
from typing import Optional
from .session import Session
from ..models.models import Order
from ..utils.constants import MAIN_MENU, MESSAGES, PROMPTS
from ..utils.formatters import format_cart_text
from ..utils.payments import PaymentMethod, pay, payment_menu
from ..utils.prompts import InvalidInput, read_menu_choice, read_yes_no

logger = logging.getLogger(__name__)

def ask_checkout(session: Session) -> bool:
    console = session.console
    while True:
        try:
            return read_yes_no(console, PROMPTS['CHECKOUT'])
        except InvalidInput as e:
            console.say(str(e))

def ask_payment_method(session: Session) -> PaymentMethod:
    console = session.console
    while True:
        try:
            console.say()
            console.say(payment_menu())
            choice = read_menu_choice(console, PROMPTS['PAYMENT_CHOICE'], 1, len(PaymentMethod))
            return PaymentMethod.from_choice(choice)
        except InvalidInput as e:
            console.say(str(e))

def checkout(session: Session, method: PaymentMethod) -> Optional[Order]:
    """Pay for the cart, record the order and empty the cart.

    Returns None without paying when the cart is empty or the ledger is full.
    """
    cart, ledger, console = session.cart, session.ledger, session.console

    if not len(cart):
        return None

    if ledger.is_full:
        console.say(MESSAGES['ORDERS_FULL'])
        return None

    # The order carries the only computed total; payment charges exactly that
    order = Order.from_cart(cart.items, method.label)
    receipt = pay(method, order.total_amount)
    console.say(receipt.message)

    order = ledger.save(order)
    if order is None:
        console.say(MESSAGES['ORDERS_FULL'])
        return None

    cart.clear()
    logger.debug(f"Cart cleared after order {order.order_id}")
    return order

def view_cart(session: Session) -> int:
    console = session.console
    items = session.cart.items

    if not items:
        console.say()
        console.say(MESSAGES['CART_EMPTY'])
        return MAIN_MENU

    console.say(format_cart_text(items))

    if not ask_checkout(session):
        return MAIN_MENU

    method = ask_payment_method(session)
    if checkout(session, method) is not None:
        console.say()
        console.say(MESSAGES['CHECKOUT_DONE'])
    return MAIN_MENU
