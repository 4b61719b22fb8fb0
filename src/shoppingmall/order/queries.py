"""Read-side lookups for placed orders."""

import math

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from shoppingmall.api.schemas import OrderHistory, OrderResponse, PagingInfo
from shoppingmall.exceptions import NotExistOrder
from shoppingmall.order.order import ProductOrder

ORDER_PAGE_SIZE = 5


def get_order_details(order_id) -> OrderResponse:
    try:
        order = current_domain.repository_for(ProductOrder).get(order_id)
    except ObjectNotFoundError:
        raise NotExistOrder(order_id) from None

    return order.to_response()


def get_order_history(user_id, page: int) -> OrderHistory | None:
    """Return one page of the user's orders, newest first.

    ``page`` is one-based, but page 0 is accepted and treated like page 1.
    Returns None when the user has no orders at all.
    """
    if page < 0:
        raise ValidationError({"page": ["Page number must not be negative"]})

    page_index = 0 if page == 0 else page - 1

    result = current_domain.repository_for(ProductOrder).find_by_user_paged(
        user_id, page_index=page_index, page_size=ORDER_PAGE_SIZE
    )
    if not result.total:
        return None

    return OrderHistory(
        orders=[order.to_response() for order in result.items],
        paging=PagingInfo(
            page_number=page_index,
            page_size=ORDER_PAGE_SIZE,
            total_elements=result.total,
            total_pages=math.ceil(result.total / ORDER_PAGE_SIZE),
        ),
    )
