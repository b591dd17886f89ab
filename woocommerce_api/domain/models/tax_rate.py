"""
Tax rate model (``taxes``).

The tax class travels as ``class`` on the wire, a reserved word in Python,
so the attribute is ``tax_class``.
"""

from typing import List, Optional

from pydantic import Field

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel


class TaxRate(WooModel):
    """
    Tax rate with geographical targeting.

    Attributes:
        country: ISO 3166 country code
        state: State code
        postcode: Single postcode (deprecated since WooCommerce 5.3)
        city: Single city (deprecated since WooCommerce 5.3)
        postcodes: Postcodes, introduced in WooCommerce 5.3
        cities: City names, introduced in WooCommerce 5.3
        rate: Rate as a decimal string, e.g. ``"8.2500"``
        priority: Application priority (server default 1)
        compound: Whether the rate is compound (server default false)
        shipping: Whether the rate applies to shipping (server default true)
        order: Position in queries
        tax_class: Tax class (server default ``standard``)
    """

    id: Optional[int] = None
    country: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    postcodes: Optional[List[str]] = None
    cities: Optional[List[str]] = None
    rate: Optional[str] = None
    name: Optional[str] = None
    priority: Optional[int] = None
    compound: Optional[bool] = None
    shipping: Optional[bool] = None
    order: Optional[int] = None
    tax_class: Optional[str] = Field(default=None, alias="class")

    @classmethod
    def fake(cls) -> "TaxRate":
        return cls(
            id=FakeHelper.integer(),
            country=FakeHelper.country_code(),
            state=FakeHelper.state(),
            postcodes=FakeHelper.list_of(FakeHelper.postcode),
            cities=FakeHelper.list_of(FakeHelper.city),
            rate=FakeHelper.decimal(max_value=30, digits=4),
            name=FakeHelper.word(),
            priority=FakeHelper.integer(1, 10),
            compound=FakeHelper.boolean(),
            shipping=FakeHelper.boolean(),
            order=FakeHelper.integer(),
            tax_class=FakeHelper.choice_of(["standard", "reduced-rate", "zero-rate"]),
        )
