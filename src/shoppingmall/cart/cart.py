"""Cart aggregate: one line item pairing a user, a product and a quantity.

A cart row stays active (``use_yn == "Y"``) until an order consumes it, at
which point it is linked to that order and deactivated.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, Integer, String

from shoppingmall.domain import shoppingmall


class CartUsage(Enum):
    ACTIVE = "Y"
    INACTIVE = "N"


@shoppingmall.aggregate
class Cart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    product_count = Integer(required=True, min_value=1)
    use_yn = String(max_length=1, choices=CartUsage, default=CartUsage.ACTIVE.value)
    product_order_id = Identifier()
    created_at = DateTime()

    @classmethod
    def create(cls, user_id, product_id, product_count):
        return cls(
            user_id=user_id,
            product_id=product_id,
            product_count=product_count,
            use_yn=CartUsage.ACTIVE.value,
            created_at=datetime.now(UTC),
        )

    @property
    def is_active(self):
        return self.use_yn == CartUsage.ACTIVE.value

    def consume(self, order_id):
        """Attach the cart to ``order_id`` and deactivate it."""
        self.product_order_id = order_id
        self.use_yn = CartUsage.INACTIVE.value


@shoppingmall.repository(part_of=Cart)
class CartRepository:
    def find_by_id(self, cart_id) -> Cart | None:
        """Return the cart with ``cart_id``, or None when there is no such row."""
        return self._dao.query.filter(id=cart_id).all().first
