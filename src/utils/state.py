from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from booking.catalog import CatalogStore, load_catalog
from store.models import CartItem, ContactInfo, SortSpec


@dataclass
class SessionState:
    """
    Everything one shopping session owns. Screens read it, the booking
    functions mutate it.

    Fields:
      - catalog: lessons and their remaining seats
      - cart: reserved seats, in the order they were added
      - contact: name/phone typed in at checkout
      - sort: how the lesson list is ordered
      - show_cart: whether the cart is on screen
      - error_msg / success_msg: feedback from the last checkout attempt
    """

    catalog: CatalogStore = field(default_factory=CatalogStore)
    cart: List[CartItem] = field(default_factory=list)
    contact: ContactInfo = field(default_factory=ContactInfo)
    sort: SortSpec = field(default_factory=SortSpec)
    show_cart: bool = False
    error_msg: str = ""
    success_msg: str = ""

    async def load_catalog(self) -> bool:
        """Fill the catalog; False means the offline seed is in use."""
        return await load_catalog(self.catalog)

    def toggle_cart(self) -> bool:
        self.show_cart = not self.show_cart
        self.error_msg = ""
        self.success_msg = ""
        return self.show_cart

    def fail(self, message: str) -> None:
        self.error_msg = message
        self.success_msg = ""

    def succeed(self, message: str) -> None:
        self.success_msg = message
        self.error_msg = ""
