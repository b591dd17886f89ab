"""
Product category model.

Wire reference: ``products/categories`` resource of the REST API.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from woocommerce_api.domain.enums import CategoryDisplay
from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel, coerce_enum, lenient_datetime


class CategoryImage(WooModel):
    """Image attached to a category."""

    id: Optional[int] = None
    date_created: Optional[datetime] = None
    date_created_gmt: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    date_modified_gmt: Optional[datetime] = None
    src: Optional[str] = None
    name: Optional[str] = None
    alt: Optional[str] = None

    @field_validator("date_created", "date_created_gmt", "date_modified", "date_modified_gmt", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return lenient_datetime(v)

    @classmethod
    def fake(cls) -> "CategoryImage":
        return cls(
            id=FakeHelper.integer(),
            date_created=FakeHelper.date_time(),
            src=FakeHelper.image(),
            name=FakeHelper.word(),
            alt=FakeHelper.sentence(),
        )


class ProductCategory(WooModel):
    """
    Product category.

    Attributes:
        id: Unique identifier (read-only)
        name: Category name (always sent on create/update)
        slug: Alphanumeric identifier unique to its type
        parent: ID of the parent category
        description: HTML description
        display: Archive display type, unknown values decode to ``default``
        image: Image data
        menu_order: Custom sort position
        count: Number of published products (read-only)
        links: Hypermedia links (``_links`` on the wire)
    """

    REQUIRED_FIELDS = ("name",)

    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    parent: Optional[int] = None
    description: Optional[str] = None
    display: Optional[CategoryDisplay] = None
    image: Optional[CategoryImage] = None
    menu_order: Optional[int] = None
    count: Optional[int] = None
    links: Optional[Dict[str, Any]] = Field(default=None, alias="_links")

    @field_validator("display", mode="before")
    @classmethod
    def parse_display(cls, v):
        return coerce_enum(CategoryDisplay, v, CategoryDisplay.DEFAULT)

    @classmethod
    def fake(cls) -> "ProductCategory":
        return cls(
            id=FakeHelper.integer(),
            name=FakeHelper.word(),
            slug=FakeHelper.slug(),
            parent=FakeHelper.integer(),
            description=FakeHelper.sentence(),
            display=FakeHelper.choice(CategoryDisplay),
            image=CategoryImage.fake(),
            menu_order=FakeHelper.integer(),
            count=FakeHelper.integer(),
        )
