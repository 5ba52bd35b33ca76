"""Storefront: cart pricing and inventory engine with a FastAPI surface."""

__version__ = "1.0.0"
