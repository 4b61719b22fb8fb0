"""Pydantic request/response schemas for the ShoppingMall order API.

These are external contracts, separate from the internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "cart_ids": ["cart-001", "cart-002"],
                    "order_number": "20240101-000123",
                    "order_name": "Wool Scarf and 1 more",
                    "amount": 42000,
                    "delivery_message": "Leave at the front door",
                    "address": "12 Market Street, Springfield",
                    "use_savings": 500,
                }
            ]
        }
    }

    cart_ids: list[str] = Field(..., min_length=1)
    order_number: str = Field(..., max_length=50)
    order_name: str = Field(..., max_length=255)
    amount: int = Field(..., gt=0)
    delivery_message: str | None = None
    address: str | None = Field(None, max_length=500)
    use_savings: int = Field(0, ge=0)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderIdResponse(BaseModel):
    order_id: str


class OrderResponse(BaseModel):
    order_id: str
    user_id: str
    order_number: str
    order_name: str
    amount: int
    delivery_message: str | None = None
    address: str | None = None
    order_status: str
    refund_state: str
    created_at: datetime | None = None


class PagingInfo(BaseModel):
    page_number: int  # zero-based
    page_size: int
    total_elements: int
    total_pages: int


class OrderHistory(BaseModel):
    orders: list[OrderResponse]
    paging: PagingInfo
