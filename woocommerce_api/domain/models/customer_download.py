"""Downloadable files granted to a customer (``customers/{customer_id}/downloads``)."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel, lenient_datetime


class CustomerDownloadFile(WooModel):
    name: Optional[str] = None
    file: Optional[str] = None

    @classmethod
    def fake(cls) -> "CustomerDownloadFile":
        return cls(name=FakeHelper.word(), file=FakeHelper.url())


class CustomerDownload(WooModel):
    """
    One download permission.

    ``download_id`` is an MD5 string and ``downloads_remaining`` is text
    because the server answers ``"unlimited"`` when there is no limit.
    """

    download_id: Optional[str] = None
    download_url: Optional[str] = None
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    download_name: Optional[str] = None
    order_id: Optional[int] = None
    order_key: Optional[str] = None
    downloads_remaining: Optional[str] = None
    access_expires: Optional[datetime] = None
    access_expires_gmt: Optional[datetime] = None
    file: Optional[CustomerDownloadFile] = None

    @field_validator("access_expires", "access_expires_gmt", mode="before")
    @classmethod
    def parse_dates(cls, v):
        # "never" when access does not expire
        return lenient_datetime(v)

    @classmethod
    def fake(cls) -> "CustomerDownload":
        return cls(
            download_id=FakeHelper.code(),
            download_url=FakeHelper.url(),
            product_id=FakeHelper.integer(),
            product_name=FakeHelper.word(),
            download_name=FakeHelper.word(),
            order_id=FakeHelper.integer(),
            order_key=f"wc_order_{FakeHelper.word()}",
            downloads_remaining=str(FakeHelper.integer(0, 10)),
            access_expires=FakeHelper.date_time(),
            file=CustomerDownloadFile.fake(),
        )
