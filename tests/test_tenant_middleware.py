"""
Tests for tenant resolution from the request host
"""

import pytest

from storefront.core.tenant_middleware import subdomain_from_host


@pytest.mark.parametrize("host, expected", [
    ("demo.localhost:3000", "demo"),
    ("Demo.LocalHost", "demo"),
    ("localhost:3000", None),
    ("localhost", None),
    ("fashion.example.com", "fashion"),
    ("www.example.com", None),
    ("api.example.com", None),
    ("api.localhost:8000", None),
    ("example.com", None),
    ("test", None),
    ("", None),
])
def test_subdomain_from_host(host, expected):
    assert subdomain_from_host(host) == expected


async def test_header_overrides_host(client, company, other_company, make_product):
    await make_product(company)
    jacket = await make_product(other_company, name="Leather Jacket")

    response = await client.get(
        "/api/products",
        headers={"host": "demo.localhost:3000", "X-Tenant-Subdomain": "FASHION"},
    )

    assert [p["id"] for p in response.json()] == [jacket.id]
