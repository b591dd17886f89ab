"""Custom meta data entries attached to most WooCommerce resources."""

from typing import Any, Optional

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel


class MetaData(WooModel):
    id: Optional[int] = None
    key: Optional[str] = None
    value: Any = None

    @classmethod
    def fake(cls) -> "MetaData":
        return cls(id=FakeHelper.integer(), key=FakeHelper.word(), value=FakeHelper.word())
