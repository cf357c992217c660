from typing import Optional
from .session import Session
from ..utils.constants import MAIN_MENU, MESSAGES, PROMPTS
from ..utils.formatters import format_products_table
from ..utils.prompts import InvalidInput, read_int, read_yes_no

def ask_product_id(session: Session) -> Optional[int]:
    """Prompt until a catalog id is entered. Returns None when the user goes back with 0."""
    console = session.console
    while True:
        try:
            product_id = read_int(console, PROMPTS['PRODUCT_ID'])
        except InvalidInput as e:
            console.say(str(e))
            continue

        if product_id == 0:
            return None
        if session.catalog.get(product_id) is not None:
            return product_id
        console.say(MESSAGES['INVALID_PRODUCT'])

def ask_quantity(session: Session) -> int:
    console = session.console
    while True:
        try:
            return read_int(console, PROMPTS['QUANTITY'], minimum=1)
        except InvalidInput as e:
            console.say(str(e))

def ask_add_another(session: Session) -> bool:
    console = session.console
    while True:
        try:
            return read_yes_no(console, PROMPTS['ADD_ANOTHER'])
        except InvalidInput as e:
            console.say(str(e))

def view_products(session: Session) -> int:
    console = session.console
    console.say(format_products_table(session.catalog.products))
    console.say()

    while True:
        product_id = ask_product_id(session)
        if product_id is None:
            return MAIN_MENU

        quantity = ask_quantity(session)
        if session.cart.add(product_id, quantity) is None:
            console.say(MESSAGES['CART_FULL'])
        else:
            console.say(MESSAGES['PRODUCT_ADDED'])

        if not ask_add_another(session):
            return MAIN_MENU
