"""FastAPI endpoints for placing and looking up orders."""

import json

from fastapi import APIRouter, Query, Response
from protean.utils.globals import current_domain

from shoppingmall.api.schemas import OrderHistory, OrderIdResponse, OrderResponse, PlaceOrderRequest
from shoppingmall.order.placement import PlaceOrder
from shoppingmall.order.queries import get_order_details, get_order_history

order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest) -> OrderIdResponse:
    command = PlaceOrder(
        cart_ids=json.dumps(body.cart_ids),
        order_number=body.order_number,
        order_name=body.order_name,
        amount=body.amount,
        delivery_message=body.delivery_message,
        address=body.address,
        use_savings=body.use_savings,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=order_id)


@order_router.get("/users/{user_id}", response_model=OrderHistory)
async def order_history(user_id: str, page: int = Query(1, ge=0)):
    """A user's orders, five per page, newest first. 204 when there are none."""
    history = get_order_history(user_id, page)
    if history is None:
        return Response(status_code=204)
    return history


@order_router.get("/{order_id}", response_model=OrderResponse)
async def order_details(order_id: str) -> OrderResponse:
    return get_order_details(order_id)
