"""Repository for the ProductOrder aggregate."""

from shoppingmall.domain import shoppingmall
from shoppingmall.order.order import ProductOrder


@shoppingmall.repository(part_of=ProductOrder)
class ProductOrderRepository:
    def find_by_user_paged(self, user_id, page_index: int, page_size: int):
        """One page of a user's orders, newest first.

        ``page_index`` is zero-based. The returned ``ResultSet`` carries the
        page's ``items`` and the ``total`` number of orders the user has.
        """
        return (
            self._dao.query.filter(user_id=user_id)
            .order_by("-created_at")
            .offset(page_index * page_size)
            .limit(page_size)
            .all()
        )
