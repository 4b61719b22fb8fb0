"""ProductOrder aggregate: an order placed from one or more carts.

An order is created once per placement and is not modified afterwards by
the placement workflow.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, Integer, String, Text

from shoppingmall.api.schemas import OrderResponse
from shoppingmall.domain import shoppingmall


class OrderStatus(Enum):
    COMPLETE = "COMPLETE"


class RefundState(Enum):
    NOT_REFUNDED = "N"
    REFUNDED = "Y"


@shoppingmall.aggregate
class ProductOrder:
    user_id = Identifier(required=True)
    order_number = String(required=True, max_length=50)
    order_name = String(required=True, max_length=255)
    amount = Integer(required=True)
    delivery_message = Text()
    address = String(max_length=500)
    order_status = String(choices=OrderStatus, default=OrderStatus.COMPLETE.value)
    refund_state = String(max_length=1, choices=RefundState, default=RefundState.NOT_REFUNDED.value)
    created_at = DateTime()

    @classmethod
    def place(cls, user_id, order_number, order_name, amount, delivery_message=None, address=None):
        return cls(
            user_id=user_id,
            order_number=order_number,
            order_name=order_name,
            amount=amount,
            delivery_message=delivery_message,
            address=address,
            order_status=OrderStatus.COMPLETE.value,
            refund_state=RefundState.NOT_REFUNDED.value,
            created_at=datetime.now(UTC),
        )

    def to_response(self):
        """Flat projection of the order for API consumers."""
        return OrderResponse(
            order_id=str(self.id),
            user_id=str(self.user_id),
            order_number=self.order_number,
            order_name=self.order_name,
            amount=self.amount,
            delivery_message=self.delivery_message,
            address=self.address,
            order_status=self.order_status,
            refund_state=self.refund_state,
            created_at=self.created_at,
        )
