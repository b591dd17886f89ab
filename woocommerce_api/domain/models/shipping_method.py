"""Shipping method model (``shipping_methods``). Identifiers are strings such as ``flat_rate``."""

from typing import Optional

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel


class ShippingMethod(WooModel):
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def fake(cls) -> "ShippingMethod":
        return cls(
            id=FakeHelper.choice_of(["flat_rate", "free_shipping", "local_pickup"]),
            title=FakeHelper.sentence(),
            description=FakeHelper.sentence(),
        )
