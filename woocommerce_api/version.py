"""
Version information for the WooCommerce API client.

Single source of truth: pyproject.toml
Runtime access via importlib.metadata with fallback.
"""

from importlib.metadata import PackageNotFoundError, version

# Fallback version if package metadata unavailable (source checkout)
_FALLBACK_VERSION = "0.1.0"


def get_version() -> str:
    """Get the package version from metadata or fallback."""
    try:
        return version("woocommerce-api")
    except PackageNotFoundError:
        return _FALLBACK_VERSION


__version__ = get_version()
