"""
Domain exceptions raised by the catalog service
"""


class StorefrontError(Exception):
    """Base class for storefront domain errors"""


class PriceInvariantError(StorefrontError):
    """Raised when a discount price is negative or above the list price"""


class InvalidTransitionError(StorefrontError):
    """Raised when an AR request cannot move to the requested status"""


class DuplicateSubdomainError(StorefrontError):
    """Raised when a company is created with a subdomain already in use"""
