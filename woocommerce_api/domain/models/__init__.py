"""
Domain models for WooCommerce resources.

Each model decodes from and encodes to the wire JSON of its resource and
can synthesize a plausible instance for the faker backend.
"""

from .base import WooModel, coerce_enum, lenient_datetime
from .category import CategoryImage, ProductCategory
from .coupon import Coupon
from .customer import Address, Customer
from .customer_download import CustomerDownload, CustomerDownloadFile
from .metadata import MetaData
from .order import LineItem, Order, ShippingLine
from .order_note import OrderNote
from .product import Product, ProductImage, ProductTerm
from .product_tag import ProductTag
from .session import AuthSession, PasswordChange, PasswordReset
from .shipping_method import ShippingMethod
from .tax_rate import TaxRate
from .webhook import Webhook

__all__ = [
    "WooModel",
    "coerce_enum",
    "lenient_datetime",
    "MetaData",
    "ProductCategory",
    "CategoryImage",
    "ProductTag",
    "TaxRate",
    "ShippingMethod",
    "Webhook",
    "Coupon",
    "Address",
    "Customer",
    "CustomerDownload",
    "CustomerDownloadFile",
    "Order",
    "LineItem",
    "ShippingLine",
    "OrderNote",
    "Product",
    "ProductImage",
    "ProductTerm",
    "AuthSession",
    "PasswordChange",
    "PasswordReset",
]
