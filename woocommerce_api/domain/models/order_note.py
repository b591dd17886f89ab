"""Order note model (``orders/{order_id}/notes``)."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel, lenient_datetime


class OrderNote(WooModel):
    """
    Comment attached to an order.

    ``customer_note`` notes are visible to (and e-mailed to) the customer;
    the others are internal.
    """

    REQUIRED_FIELDS = ("note",)

    id: Optional[int] = None
    author: Optional[str] = None
    date_created: Optional[datetime] = None
    date_created_gmt: Optional[datetime] = None
    note: Optional[str] = None
    customer_note: Optional[bool] = None
    added_by_user: Optional[bool] = None

    @field_validator("date_created", "date_created_gmt", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return lenient_datetime(v)

    @classmethod
    def fake(cls) -> "OrderNote":
        return cls(
            id=FakeHelper.integer(),
            author=FakeHelper.first_name(),
            date_created=FakeHelper.date_time(),
            note=FakeHelper.sentence(),
            customer_note=FakeHelper.boolean(),
            added_by_user=FakeHelper.boolean(),
        )
