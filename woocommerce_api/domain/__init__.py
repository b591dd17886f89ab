"""
Domain layer for the WooCommerce client.

Contains the immutable resource models exchanged with the REST API and
the enumerations of the server's wire vocabulary.
"""
