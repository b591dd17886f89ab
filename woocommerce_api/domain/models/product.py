"""Product model (``products``)."""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from woocommerce_api.domain.enums import ProductStatus, ProductType, StockStatus
from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel, coerce_enum, lenient_datetime
from .metadata import MetaData


class ProductImage(WooModel):
    id: Optional[int] = None
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    src: Optional[str] = None
    name: Optional[str] = None
    alt: Optional[str] = None

    @field_validator("date_created", "date_modified", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return lenient_datetime(v)

    @classmethod
    def fake(cls) -> "ProductImage":
        return cls(id=FakeHelper.integer(), src=FakeHelper.image(), name=FakeHelper.word(), alt=FakeHelper.sentence())


class ProductTerm(WooModel):
    """Category or tag reference embedded in a product."""

    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None

    @classmethod
    def fake(cls) -> "ProductTerm":
        return cls(id=FakeHelper.integer(), name=FakeHelper.word(), slug=FakeHelper.slug())


class Product(WooModel):
    """
    Store product.

    Enum defaults for unknown wire values: ``type`` -> simple,
    ``status`` -> publish, ``stock_status`` -> instock.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    permalink: Optional[str] = None
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    type: Optional[ProductType] = None
    status: Optional[ProductStatus] = None
    featured: Optional[bool] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[str] = None
    regular_price: Optional[str] = None
    sale_price: Optional[str] = None
    on_sale: Optional[bool] = None
    purchasable: Optional[bool] = None
    total_sales: Optional[int] = None
    virtual: Optional[bool] = None
    downloadable: Optional[bool] = None
    tax_class: Optional[str] = None
    manage_stock: Optional[bool] = None
    stock_quantity: Optional[int] = None
    stock_status: Optional[StockStatus] = None
    weight: Optional[str] = None
    reviews_allowed: Optional[bool] = None
    average_rating: Optional[str] = None
    rating_count: Optional[int] = None
    related_ids: Optional[List[int]] = None
    parent_id: Optional[int] = None
    categories: Optional[List[ProductTerm]] = None
    tags: Optional[List[ProductTerm]] = None
    images: Optional[List[ProductImage]] = None
    variations: Optional[List[int]] = None
    menu_order: Optional[int] = None
    meta_data: Optional[List[MetaData]] = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, v):
        return coerce_enum(ProductType, v, ProductType.SIMPLE)

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v):
        return coerce_enum(ProductStatus, v, ProductStatus.PUBLISH)

    @field_validator("stock_status", mode="before")
    @classmethod
    def parse_stock_status(cls, v):
        return coerce_enum(StockStatus, v, StockStatus.IN_STOCK)

    @field_validator("date_created", "date_modified", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return lenient_datetime(v)

    @classmethod
    def fake(cls) -> "Product":
        regular_price = FakeHelper.decimal(500)
        return cls(
            id=FakeHelper.integer(),
            name=FakeHelper.word().title(),
            slug=FakeHelper.slug(),
            permalink=FakeHelper.url(),
            date_created=FakeHelper.date_time(),
            type=FakeHelper.choice(ProductType),
            status=FakeHelper.choice(ProductStatus),
            featured=FakeHelper.boolean(),
            description=FakeHelper.sentence(),
            short_description=FakeHelper.sentence(),
            sku=FakeHelper.code(),
            price=regular_price,
            regular_price=regular_price,
            on_sale=False,
            total_sales=FakeHelper.integer(0, 1000),
            manage_stock=True,
            stock_quantity=FakeHelper.integer(0, 100),
            stock_status=FakeHelper.choice(StockStatus),
            average_rating=FakeHelper.decimal(5),
            rating_count=FakeHelper.integer(0, 100),
            categories=FakeHelper.list_of(ProductTerm.fake, max_items=3),
            tags=FakeHelper.list_of(ProductTerm.fake, max_items=3),
            images=FakeHelper.list_of(ProductImage.fake, max_items=3),
            menu_order=0,
            meta_data=FakeHelper.list_of(MetaData.fake),
        )
