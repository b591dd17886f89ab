"""
Typed queries and their wire serialization.

Each query is a frozen keyword-only dataclass whose fields map 1:1
to a documented query parameter. Fields whose Python name differs from the
wire name declare it in ``metadata={"wire": ...}``.
"""

import logging
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import AbstractSet, Any, Dict, Optional, Sequence, Union

from woocommerce_api.domain.enums import (
    CategoryOrderBy,
    Context,
    CustomerOrderBy,
    CustomerRole,
    DateOrderBy,
    OrderNoteType,
    OrderStatus,
    ProductOrderBy,
    ProductStatus,
    ProductTagOrderBy,
    ProductType,
    SortOrder,
    StockStatus,
    TaxRateOrderBy,
    WebhookStatus,
)

logger = logging.getLogger(__name__)

WireValue = Union[str, int, float]
IdList = Union[Sequence[int], AbstractSet[int]]


@dataclass(frozen=True, kw_only=True)
class Query:
    """Base query for single-item calls: only the context scope."""

    context: Context = Context.VIEW


@dataclass(frozen=True, kw_only=True)
class ListQuery(Query):
    """Pagination, search, inclusion and sort parameters shared by every list endpoint."""

    page: int = 1
    per_page: int = 10
    search: Optional[str] = None
    include: Optional[IdList] = None
    exclude: Optional[IdList] = None
    offset: Optional[int] = None
    order: SortOrder = SortOrder.DESC
    orderby: Optional[Enum] = None


@dataclass(frozen=True, kw_only=True)
class CategoryQuery(ListQuery):
    orderby: Optional[CategoryOrderBy] = None
    hide_empty: Optional[bool] = None
    parent: Optional[int] = None
    product: Optional[int] = None
    slug: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class ProductTagQuery(ListQuery):
    orderby: Optional[ProductTagOrderBy] = None
    hide_empty: Optional[bool] = None
    product: Optional[int] = None
    slug: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class TaxRateQuery(ListQuery):
    orderby: Optional[TaxRateOrderBy] = None
    tax_class: Optional[str] = field(default=None, metadata={"wire": "class"})


@dataclass(frozen=True, kw_only=True)
class WebhookQuery(ListQuery):
    orderby: Optional[DateOrderBy] = None
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    status: Optional[WebhookStatus] = None


@dataclass(frozen=True, kw_only=True)
class CouponQuery(ListQuery):
    orderby: Optional[DateOrderBy] = None
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    code: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class OrderQuery(ListQuery):
    """``dp`` is the number of decimal points used in the response totals."""

    orderby: Optional[DateOrderBy] = None
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    parent: Optional[IdList] = None
    status: Optional[OrderStatus] = None
    customer: Optional[int] = None
    product: Optional[int] = None
    dp: Optional[int] = None


@dataclass(frozen=True, kw_only=True)
class OrderNoteQuery(Query):
    """Order notes are not paginated; ``type`` limits them to customer or internal notes."""

    type: Optional[OrderNoteType] = None


@dataclass(frozen=True, kw_only=True)
class ProductQuery(ListQuery):
    orderby: Optional[ProductOrderBy] = None
    parent: Optional[IdList] = None
    slug: Optional[str] = None
    status: Optional[ProductStatus] = None
    type: Optional[ProductType] = None
    sku: Optional[str] = None
    featured: Optional[bool] = None
    category: Optional[str] = None
    tag: Optional[str] = None
    on_sale: Optional[bool] = None
    min_price: Optional[str] = None
    max_price: Optional[str] = None
    stock_status: Optional[StockStatus] = None


@dataclass(frozen=True, kw_only=True)
class CustomerQuery(ListQuery):
    orderby: Optional[CustomerOrderBy] = None
    email: Optional[str] = None
    role: Optional[CustomerRole] = None


def _serialize(value: Any) -> WireValue:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return ",".join(str(item) for item in sorted(value))
    if isinstance(value, (list, tuple)):
        return ",".join(str(_serialize(item)) for item in value)
    return value


def build_query_params(query: Query, *, max_per_page: int = 100) -> Dict[str, WireValue]:
    """
    Build the wire query-parameter map of a query.

    Absent (None) fields and empty id collections are omitted. Id
    collections are comma-joined in the given order (sets ascending), enums
    use their wire vocabulary, booleans are ``"true"``/``"false"`` and
    datetimes ISO-8601.

    Args:
        query: Typed query
        max_per_page: Server maximum for ``per_page``; exceeding it only logs

    Returns:
        Dict: Wire name -> serialized value

    Raises:
        ValueError: If ``page`` or ``per_page`` is lower than 1
    """
    if isinstance(query, ListQuery):
        if query.page < 1:
            raise ValueError(f"page must be >= 1, got {query.page}")
        if query.per_page < 1:
            raise ValueError(f"per_page must be >= 1, got {query.per_page}")
        if query.per_page > max_per_page:
            logger.warning(f"per_page={query.per_page} exceeds the server maximum of {max_per_page}")

    params: Dict[str, WireValue] = {}
    for query_field in fields(query):
        value = getattr(query, query_field.name)
        if value is None or (isinstance(value, (list, tuple, set, frozenset)) and not value):
            continue
        params[query_field.metadata.get("wire", query_field.name)] = _serialize(value)
    return params
