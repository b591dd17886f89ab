"""Utilidades compartidas: manejo de errores y generación de datos sintéticos."""
