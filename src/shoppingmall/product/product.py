"""Product aggregate: sale counters and stock levels."""

from datetime import UTC, datetime

from protean.fields import DateTime, Integer, String

from shoppingmall.domain import shoppingmall


@shoppingmall.aggregate
class Product:
    name = String(required=True, max_length=255)
    price = Integer(default=0)
    purchase_count = Integer(default=0)  # cumulative units sold
    limit_count = Integer(default=0)  # remaining purchase cap
    total_count = Integer(default=0)  # stock on hand
    created_at = DateTime()

    @classmethod
    def create(cls, name, price=0, limit_count=0, total_count=0):
        return cls(
            name=name,
            price=price,
            purchase_count=0,
            limit_count=limit_count,
            total_count=total_count,
            created_at=datetime.now(UTC),
        )

    def record_purchase(self, quantity):
        """Account for ``quantity`` units sold.

        There is no floor check: ``limit_count`` and ``total_count`` go negative
        when an order asks for more than is left.
        """
        self.purchase_count += quantity
        self.limit_count -= quantity
        self.total_count -= quantity
