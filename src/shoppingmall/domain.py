"""ShoppingMall domain: carts, products, users and order placement.

A single Protean domain hosts every aggregate touched by order placement so
that one command handler invocation runs inside one Unit of Work.
"""

from protean.domain import Domain

from shoppingmall.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
shoppingmall = Domain(name="shoppingmall")
