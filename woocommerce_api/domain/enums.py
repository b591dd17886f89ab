"""
Enumerations shared by queries and domain models.

Values are the server's lowercase wire vocabulary.
"""

from enum import Enum


class Context(str, Enum):
    """Scope under which a request is made; determines fields present in the response."""

    VIEW = "view"
    EDIT = "edit"


class SortOrder(str, Enum):
    """Order sort attribute ascending or descending."""

    ASC = "asc"
    DESC = "desc"


class CategoryOrderBy(str, Enum):
    ID = "id"
    INCLUDE = "include"
    NAME = "name"
    SLUG = "slug"
    TERM_GROUP = "term_group"
    DESCRIPTION = "description"
    COUNT = "count"


class CategoryDisplay(str, Enum):
    """Category archive display type. Unknown values decode to DEFAULT."""

    DEFAULT = "default"
    PRODUCTS = "products"
    SUBCATEGORIES = "subcategories"
    BOTH = "both"


class ProductTagOrderBy(str, Enum):
    ID = "id"
    INCLUDE = "include"
    NAME = "name"
    SLUG = "slug"
    TERM_GROUP = "term_group"
    DESCRIPTION = "description"
    COUNT = "count"


class TaxRateOrderBy(str, Enum):
    ID = "id"
    ORDER = "order"
    PRIORITY = "priority"


class DateOrderBy(str, Enum):
    """Sort vocabulary shared by post-type resources (webhooks, coupons, orders)."""

    DATE = "date"
    ID = "id"
    INCLUDE = "include"
    TITLE = "title"
    SLUG = "slug"
    MODIFIED = "modified"


class ProductOrderBy(str, Enum):
    DATE = "date"
    ID = "id"
    INCLUDE = "include"
    TITLE = "title"
    SLUG = "slug"
    PRICE = "price"
    POPULARITY = "popularity"
    RATING = "rating"
    MENU_ORDER = "menu_order"


class CustomerOrderBy(str, Enum):
    ID = "id"
    INCLUDE = "include"
    NAME = "name"
    REGISTERED_DATE = "registered_date"


class CustomerRole(str, Enum):
    ALL = "all"
    ADMINISTRATOR = "administrator"
    EDITOR = "editor"
    AUTHOR = "author"
    CONTRIBUTOR = "contributor"
    SUBSCRIBER = "subscriber"
    CUSTOMER = "customer"
    SHOP_MANAGER = "shop_manager"


class WebhookStatus(str, Enum):
    """Unknown values decode to ACTIVE."""

    ACTIVE = "active"
    PAUSED = "paused"
    DISABLED = "disabled"


class WebhookTopic(str, Enum):
    COUPON_CREATED = "coupon.created"
    COUPON_UPDATED = "coupon.updated"
    COUPON_DELETED = "coupon.deleted"
    CUSTOMER_CREATED = "customer.created"
    CUSTOMER_UPDATED = "customer.updated"
    CUSTOMER_DELETED = "customer.deleted"
    ORDER_CREATED = "order.created"
    ORDER_UPDATED = "order.updated"
    ORDER_DELETED = "order.deleted"
    PRODUCT_CREATED = "product.created"
    PRODUCT_UPDATED = "product.updated"
    PRODUCT_DELETED = "product.deleted"


class DiscountType(str, Enum):
    """Unknown values decode to FIXED_CART."""

    PERCENT = "percent"
    FIXED_CART = "fixed_cart"
    FIXED_PRODUCT = "fixed_product"


class OrderStatus(str, Enum):
    """Unknown values decode to PENDING."""

    PENDING = "pending"
    PROCESSING = "processing"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    FAILED = "failed"
    TRASH = "trash"


class ProductType(str, Enum):
    """Unknown values decode to SIMPLE."""

    SIMPLE = "simple"
    GROUPED = "grouped"
    EXTERNAL = "external"
    VARIABLE = "variable"


class ProductStatus(str, Enum):
    """Unknown values decode to PUBLISH."""

    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    PUBLISH = "publish"


class StockStatus(str, Enum):
    """Unknown values decode to IN_STOCK."""

    IN_STOCK = "instock"
    OUT_OF_STOCK = "outofstock"
    ON_BACKORDER = "onbackorder"


class OrderNoteType(str, Enum):
    ANY = "any"
    CUSTOMER = "customer"
    INTERNAL = "internal"
