from textual.message import Message


class QuitRequestedMessage(Message):
    """
    broadcasted when the app is about to quit
    """

    bubble = True


class CatalogLoadedMessage(Message):
    """
    Fired once the lesson catalog is filled, live or from seed data
    """

    bubble = True

    def __init__(self, live: bool) -> None:
        super().__init__()
        self.live = live


class CartChangedMessage(Message):
    """
    Fired whenever a seat is reserved or released, or the cart is cleared by a checkout.
    Must be posted at App level so every screen hears it
    """

    bubble = True
