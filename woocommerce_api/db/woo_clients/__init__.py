"""
WooCommerce REST clients organized by responsibility.

This module contains the generic resource client, the per-resource clients,
the query builder, the batch aggregator and the HTTP transport.
"""

from .batch import (
    BatchItem,
    BatchItemError,
    BatchOperation,
    BatchOutcome,
    BatchOutcomeStatus,
    BatchReport,
    BatchRequest,
    BatchResponse,
)
from .descriptors import ResourceDescriptor
from .query_builder import (
    CategoryQuery,
    CouponQuery,
    CustomerQuery,
    ListQuery,
    OrderNoteQuery,
    OrderQuery,
    ProductQuery,
    ProductTagQuery,
    Query,
    TaxRateQuery,
    WebhookQuery,
    build_query_params,
)
from .resource_client import AppendOnlyResourceClient, ReadOnlyResourceClient, ResourceClient
from .resources import (
    AuthenticationClient,
    CouponClient,
    CustomerClient,
    OrderClient,
    OrderNoteClient,
    ProductCategoryClient,
    ProductClient,
    ProductTagClient,
    ShippingMethodClient,
    TaxRateClient,
    WebhookClient,
)
from .transport import AiohttpTransport, Transport, TransportResponse
from .unified_client import WooCommerceClient

__all__ = [
    "WooCommerceClient",
    "ResourceClient",
    "ReadOnlyResourceClient",
    "AppendOnlyResourceClient",
    "ResourceDescriptor",
    "ProductCategoryClient",
    "ProductTagClient",
    "TaxRateClient",
    "ShippingMethodClient",
    "WebhookClient",
    "CouponClient",
    "OrderClient",
    "OrderNoteClient",
    "ProductClient",
    "CustomerClient",
    "AuthenticationClient",
    "Query",
    "ListQuery",
    "CategoryQuery",
    "ProductTagQuery",
    "TaxRateQuery",
    "WebhookQuery",
    "CouponQuery",
    "OrderQuery",
    "OrderNoteQuery",
    "ProductQuery",
    "CustomerQuery",
    "build_query_params",
    "BatchRequest",
    "BatchResponse",
    "BatchItem",
    "BatchItemError",
    "BatchOperation",
    "BatchOutcome",
    "BatchOutcomeStatus",
    "BatchReport",
    "Transport",
    "TransportResponse",
    "AiohttpTransport",
]
