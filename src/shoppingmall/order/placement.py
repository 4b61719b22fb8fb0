"""Order placement: command and handler.

Placing an order touches four aggregates in a fixed sequence:

1. resolve the owner through the first ("anchor") cart,
2. create the ProductOrder,
3. consume every cart, the anchor included,
4. update each purchased product's counters,
5. settle the owner's savings.

The handler runs inside Protean's Unit of Work, so any error raised along the
way discards every write staged before it. Savings are checked last, after
the order, carts and products have already been staged.
"""

import json
from dataclasses import dataclass

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain

from shoppingmall.cart.cart import Cart
from shoppingmall.domain import shoppingmall
from shoppingmall.exceptions import InsufficientSavings, NotExistCart, NotExistUser
from shoppingmall.order.order import ProductOrder
from shoppingmall.product.product import Product
from shoppingmall.user.user import NormalUser
from shoppingmall.utils.logging import get_logger

logger = get_logger(__name__)

SAVINGS_RATE_PERCENT = 3


def earned_savings(amount):
    """Points credited for an order: 3% of the amount, truncated toward zero."""
    return int(amount * SAVINGS_RATE_PERCENT / 100)


@dataclass(frozen=True)
class PurchasedLine:
    product_id: str
    quantity: int


@shoppingmall.command(part_of="ProductOrder")
class PlaceOrder:
    cart_ids = Text(required=True)  # JSON: list of cart ids, anchor first
    order_number = String(required=True, max_length=50)
    order_name = String(required=True, max_length=255)
    amount = Integer(required=True)
    delivery_message = Text()
    address = String(max_length=500)
    use_savings = Integer(default=0)


@shoppingmall.command_handler(part_of=ProductOrder)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_ids = json.loads(command.cart_ids)
        if not cart_ids:
            raise ValidationError({"cart_ids": ["At least one cart is required to place an order"]})

        cart_repo = current_domain.repository_for(Cart)
        user_repo = current_domain.repository_for(NormalUser)
        product_repo = current_domain.repository_for(Product)

        anchor = cart_repo.find_by_id(cart_ids[0])
        if anchor is None:
            logger.warning("order_rejected", reason="cart_not_found", cart_id=cart_ids[0])
            raise NotExistCart(cart_ids[0])

        try:
            user = user_repo.get(anchor.user_id)
        except ObjectNotFoundError:
            logger.warning("order_rejected", reason="user_not_found", user_id=str(anchor.user_id))
            raise NotExistUser(anchor.user_id) from None

        order = ProductOrder.place(
            user_id=user.id,
            order_number=command.order_number,
            order_name=command.order_name,
            amount=command.amount,
            delivery_message=command.delivery_message,
            address=command.address,
        )
        current_domain.repository_for(ProductOrder).add(order)

        # The anchor cart is fetched again here and consumed with the rest.
        purchased = []
        for cart_id in cart_ids:
            cart = cart_repo.find_by_id(cart_id)
            if cart is None:
                logger.warning("order_rejected", reason="cart_not_found", cart_id=cart_id)
                raise NotExistCart(cart_id)

            cart.consume(order.id)
            purchased.append(PurchasedLine(product_id=str(cart.product_id), quantity=cart.product_count))
            cart_repo.add(cart)

        # One instance per product so repeated products accumulate
        products = {}
        for line in purchased:
            product = products.get(line.product_id)
            if product is None:
                product = product_repo.get(line.product_id)
                products[line.product_id] = product
            product.record_purchase(line.quantity)

        for product in products.values():
            product_repo.add(product)

        use_savings = command.use_savings or 0
        if not user.can_use_savings(use_savings):
            logger.warning(
                "order_rejected",
                reason="insufficient_savings",
                user_id=str(user.id),
                savings=user.savings,
                use_savings=use_savings,
            )
            raise InsufficientSavings(user.savings, use_savings)

        earned = earned_savings(command.amount)
        user.settle_savings(used=use_savings, earned=earned)
        user_repo.add(user)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(user.id),
            cart_count=len(cart_ids),
            use_savings=use_savings,
            earned_savings=earned,
        )
        return str(order.id)
