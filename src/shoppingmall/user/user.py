"""NormalUser aggregate: a shopper and their loyalty-point balance."""

from datetime import UTC, datetime

from protean.fields import DateTime, Integer, String

from shoppingmall.domain import shoppingmall


@shoppingmall.aggregate
class NormalUser:
    name = String(required=True, max_length=100)
    email = String(max_length=254)
    savings = Integer(default=0)
    created_at = DateTime()

    @classmethod
    def register(cls, name, email=None, savings=0):
        return cls(
            name=name,
            email=email,
            savings=savings,
            created_at=datetime.now(UTC),
        )

    def can_use_savings(self, amount):
        return self.savings >= amount

    def settle_savings(self, used, earned):
        """Spend ``used`` points and credit ``earned`` points in one step."""
        self.savings = self.savings - used + earned
