"""
Typed asynchronous client for the WooCommerce REST API.
"""

from woocommerce_api.core.client_config import ClientConfig
from woocommerce_api.core.config import Settings, get_settings
from woocommerce_api.core.credential_store import CredentialStore, InMemoryCredentialStore
from woocommerce_api.db.woo_clients import WooCommerceClient
from woocommerce_api.utils.error_handler import AppException, ErrorCode, WooCommerceAPIException
from woocommerce_api.version import get_version

__version__ = get_version()

__all__ = [
    "WooCommerceClient",
    "ClientConfig",
    "Settings",
    "get_settings",
    "CredentialStore",
    "InMemoryCredentialStore",
    "AppException",
    "ErrorCode",
    "WooCommerceAPIException",
]
