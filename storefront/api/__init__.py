"""
API routers
"""

from storefront.api import companies, products, ar_requests, dashboard, upload, homepage

__all__ = [
    "companies",
    "products",
    "ar_requests",
    "dashboard",
    "upload",
    "homepage",
]
