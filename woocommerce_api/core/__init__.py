"""Configuración, logging y estado del cliente."""
