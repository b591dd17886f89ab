"""Order model (``orders``) with its line items and shipping lines."""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from woocommerce_api.domain.enums import OrderStatus
from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel, coerce_enum, lenient_datetime
from .customer import Address
from .metadata import MetaData


class LineItem(WooModel):
    """Product line of an order. Monetary values are decimal strings."""

    id: Optional[int] = None
    name: Optional[str] = None
    product_id: Optional[int] = None
    variation_id: Optional[int] = None
    quantity: Optional[int] = None
    tax_class: Optional[str] = None
    subtotal: Optional[str] = None
    subtotal_tax: Optional[str] = None
    total: Optional[str] = None
    total_tax: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[float] = None
    meta_data: Optional[List[MetaData]] = None

    @classmethod
    def fake(cls) -> "LineItem":
        return cls(
            id=FakeHelper.integer(),
            name=FakeHelper.word(),
            product_id=FakeHelper.integer(),
            variation_id=0,
            quantity=FakeHelper.integer(1, 10),
            subtotal=FakeHelper.decimal(),
            total=FakeHelper.decimal(),
            total_tax=FakeHelper.decimal(10),
            sku=FakeHelper.code(),
        )


class ShippingLine(WooModel):
    id: Optional[int] = None
    method_title: Optional[str] = None
    method_id: Optional[str] = None
    total: Optional[str] = None
    total_tax: Optional[str] = None
    meta_data: Optional[List[MetaData]] = None

    @classmethod
    def fake(cls) -> "ShippingLine":
        return cls(
            id=FakeHelper.integer(),
            method_title=FakeHelper.sentence(),
            method_id=FakeHelper.choice_of(["flat_rate", "free_shipping", "local_pickup"]),
            total=FakeHelper.decimal(20),
            total_tax="0.00",
        )


class Order(WooModel):
    """
    Store order.

    ``status`` decodes unknown values to ``pending``. Totals are decimal
    strings in the order currency.
    """

    id: Optional[int] = None
    parent_id: Optional[int] = None
    number: Optional[str] = None
    order_key: Optional[str] = None
    created_via: Optional[str] = None
    version: Optional[str] = None
    status: Optional[OrderStatus] = None
    currency: Optional[str] = None
    date_created: Optional[datetime] = None
    date_created_gmt: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    date_modified_gmt: Optional[datetime] = None
    discount_total: Optional[str] = None
    discount_tax: Optional[str] = None
    shipping_total: Optional[str] = None
    shipping_tax: Optional[str] = None
    cart_tax: Optional[str] = None
    total: Optional[str] = None
    total_tax: Optional[str] = None
    prices_include_tax: Optional[bool] = None
    customer_id: Optional[int] = None
    customer_ip_address: Optional[str] = None
    customer_user_agent: Optional[str] = None
    customer_note: Optional[str] = None
    billing: Optional[Address] = None
    shipping: Optional[Address] = None
    payment_method: Optional[str] = None
    payment_method_title: Optional[str] = None
    transaction_id: Optional[str] = None
    date_paid: Optional[datetime] = None
    date_completed: Optional[datetime] = None
    cart_hash: Optional[str] = None
    set_paid: Optional[bool] = None
    line_items: Optional[List[LineItem]] = None
    shipping_lines: Optional[List[ShippingLine]] = None
    meta_data: Optional[List[MetaData]] = None

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v):
        return coerce_enum(OrderStatus, v, OrderStatus.PENDING)

    @field_validator(
        "date_created",
        "date_created_gmt",
        "date_modified",
        "date_modified_gmt",
        "date_paid",
        "date_completed",
        mode="before",
    )
    @classmethod
    def parse_dates(cls, v):
        return lenient_datetime(v)

    @classmethod
    def fake(cls) -> "Order":
        order_id = FakeHelper.integer()
        return cls(
            id=order_id,
            parent_id=0,
            number=str(order_id),
            order_key=f"wc_order_{FakeHelper.code().lower()}",
            created_via="rest-api",
            status=FakeHelper.choice(OrderStatus),
            currency=FakeHelper.choice_of(["USD", "EUR", "CRC"]),
            date_created=FakeHelper.date_time(),
            discount_total=FakeHelper.decimal(10),
            shipping_total=FakeHelper.decimal(20),
            total=FakeHelper.decimal(500),
            total_tax=FakeHelper.decimal(50),
            prices_include_tax=FakeHelper.boolean(),
            customer_id=FakeHelper.integer(),
            customer_note=FakeHelper.sentence(),
            billing=Address.fake(),
            shipping=Address.fake().copy_with(email=None, phone=None),
            payment_method="bacs",
            payment_method_title="Direct Bank Transfer",
            line_items=FakeHelper.list_of(LineItem.fake),
            shipping_lines=FakeHelper.list_of(ShippingLine.fake, max_items=1),
            meta_data=FakeHelper.list_of(MetaData.fake),
        )
