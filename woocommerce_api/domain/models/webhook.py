"""Webhook model (``webhooks``)."""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from woocommerce_api.domain.enums import WebhookStatus, WebhookTopic
from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooModel, coerce_enum, lenient_datetime


class Webhook(WooModel):
    """
    Webhook subscription.

    ``topic`` stays a plain string: besides the ``<resource>.<event>`` pairs in
    WebhookTopic the server accepts custom ``action.*`` topics.
    """

    REQUIRED_FIELDS = ("topic", "delivery_url")

    id: Optional[int] = None
    name: Optional[str] = None
    status: Optional[WebhookStatus] = None
    topic: Optional[str] = None
    resource: Optional[str] = None
    event: Optional[str] = None
    hooks: Optional[List[str]] = None
    delivery_url: Optional[str] = None
    secret: Optional[str] = None
    date_created: Optional[datetime] = None
    date_created_gmt: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    date_modified_gmt: Optional[datetime] = None

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v):
        return coerce_enum(WebhookStatus, v, WebhookStatus.ACTIVE)

    @field_validator("date_created", "date_created_gmt", "date_modified", "date_modified_gmt", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return lenient_datetime(v)

    @classmethod
    def fake(cls) -> "Webhook":
        topic = FakeHelper.choice(WebhookTopic).value
        resource, event = topic.split(".", 1)
        return cls(
            id=FakeHelper.integer(),
            name=FakeHelper.sentence(),
            status=FakeHelper.choice(WebhookStatus),
            topic=topic,
            resource=resource,
            event=event,
            delivery_url=FakeHelper.url(),
            secret=FakeHelper.code(),
            date_created=FakeHelper.date_time(),
        )
