"""BDD scenarios for order placement."""

import json

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from shoppingmall.cart.cart import Cart, CartUsage
from shoppingmall.exceptions import InsufficientSavings, NotExistCart
from shoppingmall.order.order import ProductOrder
from shoppingmall.order.placement import PlaceOrder
from shoppingmall.product.product import Product
from shoppingmall.user.user import NormalUser

scenarios("features/order_placement.feature")


@pytest.fixture()
def cart_ids():
    return []


@pytest.fixture()
def outcome():
    """Container for the placed order id or the captured error."""
    return {"order_id": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("a shopper with {savings:d} savings"), target_fixture="user_id")
def shopper(savings):
    user = NormalUser.register(name="Park Seojun", savings=savings)
    current_domain.repository_for(NormalUser).add(user)
    return str(user.id)


@given(
    parsers.cfparse("a product with {limit_count:d} units under the purchase limit and {total_count:d} in stock"),
    target_fixture="product_id",
)
def product(limit_count, total_count):
    product = Product.create(name="Wool Scarf", limit_count=limit_count, total_count=total_count)
    current_domain.repository_for(Product).add(product)
    return str(product.id)


@given(parsers.cfparse("the shopper has a cart with {quantity:d} units of the product"))
def shopper_cart(user_id, product_id, cart_ids, quantity):
    cart = Cart.create(user_id=user_id, product_id=product_id, product_count=quantity)
    current_domain.repository_for(Cart).add(cart)
    cart_ids.append(str(cart.id))


@given("the order also lists a cart that does not exist")
def missing_cart(cart_ids):
    cart_ids.append("missing-cart")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse("the shopper orders all carts for {amount:d} using {use_savings:d} savings"))
def place_order(cart_ids, outcome, amount, use_savings):
    command = PlaceOrder(
        cart_ids=json.dumps(cart_ids),
        order_number="20240101-0001",
        order_name="Wool Scarf",
        amount=amount,
        delivery_message="Leave at the door",
        address="12 Market Street",
        use_savings=use_savings,
    )
    try:
        outcome["order_id"] = current_domain.process(command, asynchronous=False)
    except (InsufficientSavings, NotExistCart) as exc:
        outcome["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
def _orders():
    return current_domain.repository_for(ProductOrder)._dao.query.all().items


@then("one order is created")
def one_order_created(outcome):
    orders = _orders()
    assert len(orders) == 1
    assert str(orders[0].id) == outcome["order_id"]


@then("no order is created")
def no_order_created():
    assert _orders() == []


@then("every cart is inactive and linked to the order")
def carts_consumed(cart_ids, outcome):
    repo = current_domain.repository_for(Cart)
    for cart_id in cart_ids:
        cart = repo.get(cart_id)
        assert cart.use_yn == CartUsage.INACTIVE.value
        assert str(cart.product_order_id) == outcome["order_id"]


@then(
    parsers.cfparse(
        "the product has {purchases:d} purchases, {limit_count:d} left under the limit and {total_count:d} in stock"
    )
)
def product_counters(product_id, purchases, limit_count, total_count):
    product = current_domain.repository_for(Product).get(product_id)
    assert product.purchase_count == purchases
    assert product.limit_count == limit_count
    assert product.total_count == total_count


@then(parsers.cfparse("the shopper has {savings:d} savings"))
def shopper_savings(user_id, savings):
    assert current_domain.repository_for(NormalUser).get(user_id).savings == savings


@then("the order is rejected for insufficient savings")
def rejected_for_savings(outcome):
    assert isinstance(outcome["exc"], InsufficientSavings)


@then("the order is rejected because a cart is missing")
def rejected_for_missing_cart(outcome):
    assert isinstance(outcome["exc"], NotExistCart)
