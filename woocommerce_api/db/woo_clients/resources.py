"""
Typed clients for each WooCommerce resource.

Most are the generic client bound to their descriptor. Order notes live
under one order. Customers add the authenticated customer and their
downloads. Authentication wraps the account routes.
"""

import logging
from typing import List, Optional

from woocommerce_api.core.client_config import ClientConfig
from woocommerce_api.domain.models import (
    AuthSession,
    Coupon,
    Customer,
    CustomerDownload,
    Order,
    OrderNote,
    PasswordChange,
    PasswordReset,
    Product,
    ProductCategory,
    ProductTag,
    ShippingMethod,
    TaxRate,
    Webhook,
)
from woocommerce_api.utils.error_handler import AppException, ErrorCode

from . import descriptors
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
from .resource_client import AppendOnlyResourceClient, BaseResourceClient, ReadOnlyResourceClient, ResourceClient
from .transport import Transport

logger = logging.getLogger(__name__)


class ProductCategoryClient(ResourceClient[ProductCategory, CategoryQuery]):
    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(descriptors.CATEGORIES, transport, config)


class ProductTagClient(ResourceClient[ProductTag, ProductTagQuery]):
    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(descriptors.PRODUCT_TAGS, transport, config)


class TaxRateClient(ResourceClient[TaxRate, TaxRateQuery]):
    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(descriptors.TAX_RATES, transport, config)


class ShippingMethodClient(ReadOnlyResourceClient[ShippingMethod, Query]):
    """Shipping methods are read-only and not paginated."""

    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(descriptors.SHIPPING_METHODS, transport, config)


class WebhookClient(ResourceClient[Webhook, WebhookQuery]):
    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(descriptors.WEBHOOKS, transport, config)


class CouponClient(ResourceClient[Coupon, CouponQuery]):
    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(descriptors.COUPONS, transport, config)


class OrderClient(ResourceClient[Order, OrderQuery]):
    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(descriptors.ORDERS, transport, config)


class ProductClient(ResourceClient[Product, ProductQuery]):
    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(descriptors.PRODUCTS, transport, config)


class OrderNoteClient(AppendOnlyResourceClient[OrderNote, OrderNoteQuery]):
    """
    Notes of one order (``orders/{order_id}/notes``).

    Notes are created and deleted but never updated. Bind the client to an
    order with ``for_order()`` before calling it.
    """

    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(descriptors.ORDER_NOTES, transport, config)

    def for_order(self, order_id: int) -> "OrderNoteClient":
        return self.with_parent(order_id=order_id)


def _no_user_error() -> AppException:
    return AppException(
        message="No authenticated user; call login() or register() first",
        error_code=ErrorCode.CONFIGURATION_ERROR,
    )


class CustomerClient(ResourceClient[Customer, CustomerQuery]):
    def __init__(self, transport: Transport, config: Optional[ClientConfig] = None):
        super().__init__(descriptors.CUSTOMERS, transport, config)
        self._downloads: ReadOnlyResourceClient[CustomerDownload, Query] = ReadOnlyResourceClient(
            descriptors.CUSTOMER_DOWNLOADS, transport, self.config
        )

    async def current(self, query: Optional[Query] = None, *, use_faker: Optional[bool] = None) -> Customer:
        """
        Retrieve the customer whose id is held by the credential store.

        Raises:
            AppException: If no user is authenticated
        """
        user_id = await self.config.credential_store.get_user_id()
        if user_id is None:
            raise _no_user_error()
        return await self.retrieve(user_id, query, use_faker=use_faker)

    async def downloads(self, customer_id: int, *, use_faker: Optional[bool] = None) -> List[CustomerDownload]:
        """List the download permissions granted to a customer."""
        return await self._downloads.with_parent(customer_id=customer_id).list(use_faker=use_faker)


class AuthenticationClient(BaseResourceClient):
    """
    Account routes of the store's authentication plugin.

    ``login`` and ``register`` answer ``{"user_id": ...}``; the id is
    persisted through the configured credential store. ``change-password``
    acts on the stored user.
    """

    LOGIN_PATH = "login"
    REGISTER_PATH = "register"
    CHANGE_PASSWORD_PATH = "change-password"
    FORGOT_PASSWORD_PATH = "forgot-password"

    async def _authenticate(self, path: str, body: dict, use_faker: Optional[bool]) -> int:
        session = await self._backend(use_faker).submit("POST", path, AuthSession, body)
        if session.user_id is None:
            raise AppException(
                message=f"Authentication route '{path}' did not return a user_id",
                error_code=ErrorCode.UNKNOWN_ERROR,
            )
        await self.config.credential_store.set_user_id(session.user_id)
        logger.info(f"Authenticated user {session.user_id} via {path}")
        return session.user_id

    async def login(self, email: str, password: str, *, use_faker: Optional[bool] = None) -> int:
        """Log in and persist the returned user id."""
        return await self._authenticate(self.LOGIN_PATH, {"email": email, "password": password}, use_faker)

    async def register(self, customer: Customer, *, use_faker: Optional[bool] = None) -> int:
        """Register a new customer and persist the returned user id."""
        return await self._authenticate(self.REGISTER_PATH, customer.encode(), use_faker)

    async def change_password(self, password: str, *, use_faker: Optional[bool] = None) -> PasswordChange:
        """
        Change the password of the stored user.

        Raises:
            AppException: If no user is authenticated
            WooCommerceAPIException: If the server rejects the change
        """
        user_id = await self.config.credential_store.get_user_id()
        if user_id is None:
            raise _no_user_error()
        result = await self._backend(use_faker).submit(
            "POST", self.CHANGE_PASSWORD_PATH, PasswordChange, {"user_id": user_id, "password": password}
        )
        logger.info(f"Password changed for user {user_id} (status={result.status})")
        return result

    async def forgot_password(self, email: str, *, use_faker: Optional[bool] = None) -> PasswordReset:
        """
        Request a password reset code.

        The stored user is left untouched; the returned ``user_id`` is the
        account the code was issued for.

        Raises:
            AppException: If the answer carries no user_id or code
        """
        reset = await self._backend(use_faker).submit(
            "POST", self.FORGOT_PASSWORD_PATH, PasswordReset, {"email": email}
        )
        if reset.user_id is None or not reset.code:
            raise AppException(
                message=f"Authentication route '{self.FORGOT_PASSWORD_PATH}' did not return user_id and code",
                error_code=ErrorCode.UNKNOWN_ERROR,
            )
        return reset

    async def logout(self) -> None:
        await self.config.credential_store.clear()
        logger.info("Logged out")

    async def is_authenticated(self) -> bool:
        return await self.config.credential_store.get_user_id() is not None
