"""Acceso a la API REST de WooCommerce."""
