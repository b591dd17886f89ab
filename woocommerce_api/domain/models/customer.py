"""
Customer model (``customers``) and the postal address shared with orders.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel, lenient_datetime
from .metadata import MetaData


class Address(WooModel):
    """Billing or shipping address. ``email`` and ``phone`` only appear on billing."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    country: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def fake(cls) -> "Address":
        return cls(
            first_name=FakeHelper.first_name(),
            last_name=FakeHelper.last_name(),
            company=FakeHelper.company(),
            address_1=FakeHelper.address(),
            city=FakeHelper.city(),
            state=FakeHelper.state(),
            postcode=FakeHelper.postcode(),
            country=FakeHelper.country_code(),
            email=FakeHelper.email(),
            phone=FakeHelper.phone_number(),
        )


class Customer(WooModel):
    """Store customer. ``password`` is write-only and never returned by the server."""

    id: Optional[int] = None
    date_created: Optional[datetime] = None
    date_created_gmt: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    date_modified_gmt: Optional[datetime] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    billing: Optional[Address] = None
    shipping: Optional[Address] = None
    is_paying_customer: Optional[bool] = None
    avatar_url: Optional[str] = None
    meta_data: Optional[List[MetaData]] = None

    @field_validator("date_created", "date_created_gmt", "date_modified", "date_modified_gmt", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return lenient_datetime(v)

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    @classmethod
    def fake(cls) -> "Customer":
        return cls(
            id=FakeHelper.integer(),
            date_created=FakeHelper.date_time(),
            email=FakeHelper.email(),
            first_name=FakeHelper.first_name(),
            last_name=FakeHelper.last_name(),
            role="customer",
            username=FakeHelper.username(),
            billing=Address.fake(),
            shipping=Address.fake().copy_with(email=None, phone=None),
            is_paying_customer=FakeHelper.boolean(),
            avatar_url=FakeHelper.image(),
            meta_data=FakeHelper.list_of(MetaData.fake),
        )
