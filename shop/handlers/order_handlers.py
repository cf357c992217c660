from .session import Session
from ..utils.constants import MAIN_MENU

def view_orders(session: Session) -> int:
    session.console.say()
    session.console.say(session.ledger.list_all())
    return MAIN_MENU
