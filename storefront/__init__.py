"""Storefront: demonstration e-commerce REST API"""

__version__ = "1.0.0"
