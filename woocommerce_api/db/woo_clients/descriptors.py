"""
Static description of every REST resource.

A descriptor holds what differs between resources (path, model, query type,
delete default) so a single generic client can serve all of them. Nested
resources declare their parent identifiers as ``{placeholders}`` in the path
and are bound to one parent with `ResourceDescriptor.bind`.
"""

from dataclasses import dataclass, replace
from string import Formatter
from typing import Any, Tuple, Type

from woocommerce_api.domain.models import (
    Coupon,
    Customer,
    CustomerDownload,
    Order,
    OrderNote,
    Product,
    ProductCategory,
    ProductTag,
    ShippingMethod,
    TaxRate,
    Webhook,
    WooModel,
)

from .query_builder import (
    CategoryQuery,
    CouponQuery,
    CustomerQuery,
    OrderNoteQuery,
    OrderQuery,
    ProductQuery,
    ProductTagQuery,
    Query,
    TaxRateQuery,
    WebhookQuery,
)


@dataclass(frozen=True)
class ResourceDescriptor:
    """
    Attributes:
        name: Human readable resource name used in logs
        path: Collection path template relative to the API root
        model: Model class providing decode/encode/fake
        query_type: Query type accepted by list calls
        default_force: ``force`` sent on delete when the caller gives none
        supports_batch: Whether ``<path>/batch`` exists
        id_field: Attribute holding the resource identifier
    """

    name: str
    path: str
    model: Type[WooModel]
    query_type: Type[Query]
    default_force: bool = False
    supports_batch: bool = True
    id_field: str = "id"

    @property
    def parent_params(self) -> Tuple[str, ...]:
        """Placeholders of the path still waiting for a parent identifier."""
        return tuple(name for _, name, _, _ in Formatter().parse(self.path) if name)

    @property
    def is_bound(self) -> bool:
        return not self.parent_params

    def bind(self, **parents: Any) -> "ResourceDescriptor":
        """
        Resolve the parent placeholders of the path.

        Raises:
            ValueError: If a placeholder is missing or None, or a name is unknown
        """
        expected = set(self.parent_params)
        missing = sorted(name for name in expected if parents.get(name) is None)
        unknown = sorted(set(parents) - expected)
        if missing or unknown:
            raise ValueError(f"{self.name} path {self.path!r}: missing {missing}, unknown {unknown}")
        return replace(self, path=self.path.format(**parents))

    @property
    def collection_path(self) -> str:
        """
        Collection path of a bound descriptor.

        Raises:
            ValueError: If parent placeholders are still unresolved
        """
        if not self.is_bound:
            raise ValueError(f"{self.name} requires parent identifiers {list(self.parent_params)}")
        return self.path

    def item_path(self, resource_id: Any) -> str:
        return f"{self.collection_path}/{resource_id}"

    @property
    def batch_path(self) -> str:
        return f"{self.collection_path}/batch"

    def id_of(self, model: WooModel) -> Any:
        return getattr(model, self.id_field)


CATEGORIES = ResourceDescriptor("product category", "products/categories", ProductCategory, CategoryQuery)
PRODUCT_TAGS = ResourceDescriptor("product tag", "products/tags", ProductTag, ProductTagQuery, default_force=True)
TAX_RATES = ResourceDescriptor("tax rate", "taxes", TaxRate, TaxRateQuery, default_force=True)
SHIPPING_METHODS = ResourceDescriptor(
    "shipping method", "shipping_methods", ShippingMethod, Query, supports_batch=False
)
WEBHOOKS = ResourceDescriptor("webhook", "webhooks", Webhook, WebhookQuery)
COUPONS = ResourceDescriptor("coupon", "coupons", Coupon, CouponQuery)
ORDERS = ResourceDescriptor("order", "orders", Order, OrderQuery)
PRODUCTS = ResourceDescriptor("product", "products", Product, ProductQuery)
CUSTOMERS = ResourceDescriptor("customer", "customers", Customer, CustomerQuery, default_force=True)

# notes cannot be trashed, so delete always forces
ORDER_NOTES = ResourceDescriptor(
    "order note", "orders/{order_id}/notes", OrderNote, OrderNoteQuery, default_force=True, supports_batch=False
)
CUSTOMER_DOWNLOADS = ResourceDescriptor(
    "customer download",
    "customers/{customer_id}/downloads",
    CustomerDownload,
    Query,
    supports_batch=False,
    id_field="download_id",
)
