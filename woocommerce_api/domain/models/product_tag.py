"""Product tag model (``products/tags``)."""

from typing import Optional

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel


class ProductTag(WooModel):
    REQUIRED_FIELDS = ("name",)

    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    count: Optional[int] = None

    @classmethod
    def fake(cls) -> "ProductTag":
        return cls(
            id=FakeHelper.integer(),
            name=FakeHelper.word(),
            slug=FakeHelper.slug(),
            description=FakeHelper.sentence(),
            count=FakeHelper.integer(),
        )
