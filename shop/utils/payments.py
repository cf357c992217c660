from enum import Enum
from typing import NamedTuple
from .prompts import InvalidInput

class PaymentMethod(Enum):
    CASH = 1
    CARD = 2
    GCASH = 3

    @property
    def label(self) -> str:
        return PAYMENT_LABELS[self]

    @classmethod
    def from_choice(cls, choice: int) -> 'PaymentMethod':
        try:
            return cls(choice)
        except ValueError:
            raise InvalidInput() from None

# Short names shown in the selection menu
MENU_NAMES = {
    PaymentMethod.CASH: 'Cash',
    PaymentMethod.CARD: 'Card',
    PaymentMethod.GCASH: 'GCash'
}

# Labels recorded on orders and in the log
PAYMENT_LABELS = {
    PaymentMethod.CASH: 'Cash',
    PaymentMethod.CARD: 'Credit / Debit Card',
    PaymentMethod.GCASH: 'GCash'
}

class PaymentReceipt(NamedTuple):
    label: str
    message: str

def pay(method: PaymentMethod, amount: int) -> PaymentReceipt:
    """Simulate a payment. There is no gateway, so this always succeeds."""
    label = method.label
    return PaymentReceipt(label=label, message=f"Paid {amount} using {label}.")

def payment_menu() -> str:
    lines = ['Select Payment Method:']
    lines += [f"{method.value}. {MENU_NAMES[method]}" for method in PaymentMethod]
    return "\n".join(lines)
