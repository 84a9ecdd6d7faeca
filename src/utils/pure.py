from typing import Sequence

from booking.reservation import cart_total
from store.models import CartItem


def format_price(value: float) -> str:
    return f"£{value:,.2f}"


def order_summary_markdown(cart: Sequence[CartItem]) -> str:
    """
    Markdown table of the cart, one row per entry, followed by the total.
    Empty string for an empty cart.
    """
    if not cart:
        return ""

    lines = [
        "| Lesson | Location | Price |",
        "| :--- | :--- | ---: |",
    ]
    lines += [
        f"| {item.subject} | {item.location} | {format_price(item.price)} |"
        for item in cart
    ]
    lines.append("")
    lines.append(f"**Total:** {format_price(cart_total(cart))}")
    return "\n".join(lines)
