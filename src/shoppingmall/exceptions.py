"""Errors raised while placing and looking up orders.

Built on Protean's exception hierarchy so the FastAPI exception handlers map
them to HTTP responses: the ``NotExist*`` errors become 404s and
``InsufficientSavings`` becomes a 400.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class NotExistCart(ObjectNotFoundError):
    def __init__(self, cart_id):
        self.cart_id = cart_id
        super().__init__({"cart": [f"Cart {cart_id} does not exist"]})


class NotExistUser(ObjectNotFoundError):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__({"user": [f"User {user_id} does not exist"]})


class NotExistOrder(ObjectNotFoundError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__({"order": [f"Order {order_id} does not exist"]})


class InsufficientSavings(ValidationError):
    """Raised when a user tries to redeem more savings than they hold."""

    def __init__(self, balance, requested):
        self.balance = balance
        self.requested = requested
        super().__init__({"savings": [f"Cannot use {requested} savings with a balance of {balance}"]})
