"""
Unified WooCommerce client that combines all resource clients.

This module provides a single entry point whose attributes are the
specialized resource clients, all sharing one transport and one
`ClientConfig`.
"""

import logging
from typing import Optional

from woocommerce_api.core.client_config import ClientConfig
from woocommerce_api.core.config import Settings, get_settings

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
from .transport import AiohttpTransport, Transport

logger = logging.getLogger(__name__)


class WooCommerceClient:
    """
    Unified WooCommerce REST client.

    Example:
        async with WooCommerceClient() as woo:
            categories = await woo.categories.list(CategoryQuery(per_page=5))
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Initialize the unified client with all resource clients.

        Args:
            settings: Settings used for the default transport and config
            config: Explicit client configuration (faker mode, credential store)
            transport: Transport to use instead of the default aiohttp one
        """
        self.settings = settings or get_settings()
        self.config = config or ClientConfig.from_settings(self.settings)
        self.transport = transport or AiohttpTransport(self.settings)

        self.categories = ProductCategoryClient(self.transport, self.config)
        self.product_tags = ProductTagClient(self.transport, self.config)
        self.tax_rates = TaxRateClient(self.transport, self.config)
        self.shipping_methods = ShippingMethodClient(self.transport, self.config)
        self.webhooks = WebhookClient(self.transport, self.config)
        self.coupons = CouponClient(self.transport, self.config)
        self.orders = OrderClient(self.transport, self.config)
        self.order_notes = OrderNoteClient(self.transport, self.config)
        self.products = ProductClient(self.transport, self.config)
        self.customers = CustomerClient(self.transport, self.config)
        self.auth = AuthenticationClient(self.transport, self.config)

        logger.info(f"WooCommerce client ready (faker={'on' if self.config.use_faker else 'off'})")

    async def initialize(self) -> None:
        """Open the shared transport session, if the transport has one."""
        initialize = getattr(self.transport, "initialize", None)
        if initialize is not None:
            await initialize()

    async def close(self) -> None:
        """Close the shared transport session."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "WooCommerceClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
