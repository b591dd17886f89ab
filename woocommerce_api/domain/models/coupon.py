"""Coupon model (``coupons``)."""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from woocommerce_api.domain.enums import DiscountType
from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel, coerce_enum, lenient_datetime
from .metadata import MetaData


class Coupon(WooModel):
    """
    Discount coupon. ``amount`` and ``minimum_amount``/``maximum_amount`` are
    decimal strings as sent by the server.
    """

    REQUIRED_FIELDS = ("code",)

    id: Optional[int] = None
    code: Optional[str] = None
    amount: Optional[str] = None
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    discount_type: Optional[DiscountType] = None
    description: Optional[str] = None
    date_expires: Optional[datetime] = None
    usage_count: Optional[int] = None
    individual_use: Optional[bool] = None
    product_ids: Optional[List[int]] = None
    excluded_product_ids: Optional[List[int]] = None
    usage_limit: Optional[int] = None
    usage_limit_per_user: Optional[int] = None
    free_shipping: Optional[bool] = None
    product_categories: Optional[List[int]] = None
    excluded_product_categories: Optional[List[int]] = None
    exclude_sale_items: Optional[bool] = None
    minimum_amount: Optional[str] = None
    maximum_amount: Optional[str] = None
    email_restrictions: Optional[List[str]] = None
    used_by: Optional[List[str]] = None
    meta_data: Optional[List[MetaData]] = None

    @field_validator("discount_type", mode="before")
    @classmethod
    def parse_discount_type(cls, v):
        return coerce_enum(DiscountType, v, DiscountType.FIXED_CART)

    @field_validator("date_created", "date_modified", "date_expires", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return lenient_datetime(v)

    @classmethod
    def fake(cls) -> "Coupon":
        return cls(
            id=FakeHelper.integer(),
            code=FakeHelper.code(),
            amount=FakeHelper.decimal(),
            discount_type=FakeHelper.choice(DiscountType),
            description=FakeHelper.sentence(),
            date_expires=FakeHelper.date_time(),
            usage_count=FakeHelper.integer(0, 50),
            individual_use=FakeHelper.boolean(),
            product_ids=FakeHelper.list_of_integers(),
            usage_limit=FakeHelper.integer(),
            free_shipping=FakeHelper.boolean(),
            minimum_amount=FakeHelper.decimal(),
            email_restrictions=FakeHelper.list_of(FakeHelper.email),
            meta_data=FakeHelper.list_of(MetaData.fake),
        )
