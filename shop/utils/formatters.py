from typing import Iterable, List, Sequence
from ..models.models import Product, CartItem, Order
from .constants import MESSAGES

def format_products_table(products: Iterable[Product]) -> str:
    """Format the catalog listing."""
    lines = [
        "Available Products:",
        f"{'Product ID':<10}{'Name':<15}{'Price':>10}"
    ]
    for product in products:
        lines.append(f"{product.id:<10}{product.name:<15}{product.price:>10}")
    return "\n".join(lines)

def format_items_table(items: Iterable[CartItem]) -> List[str]:
    lines = [f"{'Product ID':<15}{'Name':<20}{'Price':>10}{'Quantity':>10}"]
    for item in items:
        lines.append(f"{item.product_id:<15}{item.name:<20}{item.price:>10}{item.quantity:>10}")
    return lines

def format_cart_text(items: Sequence[CartItem]) -> str:
    """Format cart contents followed by the total."""
    total = sum(item.subtotal for item in items)
    lines = ["Your Shopping Cart:"]
    lines += format_items_table(items)
    lines.append("")
    lines.append(f"Total Amount: {total}")
    return "\n".join(lines)

def format_order(order: Order) -> str:
    lines = [
        f"Order ID: {order.order_id}",
        f"Total Amount: {order.total_amount}",
        f"Payment Method: {order.payment_method}",
        "Order Details:"
    ]
    lines += format_items_table(order.items)
    return "\n".join(lines)

def format_orders(orders: Sequence[Order]) -> str:
    """Format every order in insertion order, or the no-orders notice."""
    if not orders:
        return MESSAGES['NO_ORDERS']
    return "\n\n".join(format_order(order) for order in orders)

def format_log_line(order: Order) -> str:
    return (
        f"[LOG] -> Order ID: {order.order_id} has been successfully "
        f"checked out and paid using {order.payment_method}.\n"
    )

def format_main_menu(options: dict) -> str:
    lines = [MESSAGES['MENU_TITLE']]
    lines += [f"{number}. {label}" for number, (label, _) in options.items()]
    return "\n".join(lines)
