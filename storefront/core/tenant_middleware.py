"""
Tenant context middleware for subdomain routing
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from typing import Callable, Optional
import structlog

from storefront.core.config import get_settings

logger = structlog.get_logger(__name__)
settings = get_settings()

# Host labels that name the site or API rather than a shop
RESERVED_SUBDOMAINS = ("www", "api")


def subdomain_from_host(host: str) -> Optional[str]:
    """
    Extract the tenant subdomain from a Host header value.

    demo.localhost:3000 -> demo, demo.example.com -> demo,
    localhost / example.com / api.example.com -> None
    """
    hostname = host.split(":")[0].strip().lower()
    if not hostname:
        return None

    parts = hostname.split(".")
    if "localhost" in parts:
        if len(parts) > 1 and parts[0] != "localhost" and parts[0] not in RESERVED_SUBDOMAINS:
            return parts[0]
        return None

    if len(parts) > 2 and parts[0] not in RESERVED_SUBDOMAINS:
        return parts[0]
    return None


class TenantContextMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set tenant context"""

    async def dispatch(self, request: Request, call_next: Callable):
        # Explicit header wins over the host
        subdomain = request.headers.get(settings.TENANT_HEADER)
        if not subdomain:
            subdomain = subdomain_from_host(request.headers.get("host", ""))

        request.state.subdomain = subdomain.lower() if subdomain else None

        if subdomain:
            logger.debug(f"Tenant context: {subdomain}")

        response = await call_next(request)
        return response
