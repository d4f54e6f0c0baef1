"""
Unit tests for the product record mapper
"""

import pytest
from decimal import Decimal

from storefront.models import Company, Product
from storefront.models.product import ARPlacement
from storefront.services.product_mapper import discount_percentage, effective_price, map_product
from tests.conftest import signed, ts


def build_product(**fields) -> Product:
    fields.setdefault("id", 1)
    fields.setdefault("company_id", 7)
    fields.setdefault("name", "Modern Sofa")
    fields.setdefault("price", Decimal("79900"))
    fields.setdefault("created_at", ts(1))
    fields.setdefault("updated_at", ts(1))
    return Product(**fields)


def build_company() -> Company:
    return Company(
        id=7,
        shop_name="Demo Furniture Store",
        subdomain="demo",
        description="Premium furniture",
        logo="logos/demo.png",
    )


class TestDerivedPrices:
    """Discount percentage and effective price"""

    @pytest.mark.parametrize("price, discount, expected", [
        (Decimal("79900"), Decimal("69900"), 13),
        (Decimal("100"), Decimal("75"), 25),
        (Decimal("200"), Decimal("199"), 1),    # 0.5% rounds half up
        (Decimal("100"), Decimal("100"), 0),
        (Decimal("100"), Decimal("0"), 100),
    ])
    def test_discount_percentage(self, price, discount, expected):
        assert discount_percentage(price, discount) == expected

    def test_no_discount_is_zero_percent(self):
        assert discount_percentage(Decimal("100"), None) == 0

    def test_zero_price_is_zero_percent(self):
        assert discount_percentage(Decimal("0"), Decimal("0")) == 0

    def test_effective_price_prefers_discount(self):
        assert effective_price(Decimal("100"), Decimal("80")) == Decimal("80")
        assert effective_price(Decimal("100"), None) == Decimal("100")


class TestMapProduct:
    """Enrichment of a product row"""

    async def test_prices_and_discount(self, signer):
        product = build_product(price=Decimal("79900"), discount_price=Decimal("69900"))

        result = await map_product(product, build_company(), signer)

        assert result.price == 79900.0
        assert result.discount_price == 69900.0
        assert result.effective_price == 69900.0
        assert result.discount_percentage == 13

    async def test_without_discount(self, signer):
        product = build_product(price=Decimal("24900"))

        result = await map_product(product, build_company(), signer)

        assert result.discount_price is None
        assert result.effective_price == 24900.0
        assert result.discount_percentage == 0

    async def test_nested_company_summary(self, signer):
        result = await map_product(build_product(), build_company(), signer)

        assert result.company.id == 7
        assert result.company.name == "Demo Furniture Store"
        assert result.company.subdomain == "demo"
        assert result.company.logo == "logos/demo.png"
        assert result.company_id == 7

    async def test_signed_image_and_model_urls(self, signer):
        product = build_product(
            image_1="products/1/images/a.jpg",
            image_3="products/1/images/c.jpg",
            glb_file="products/1/ar/model.glb",
        )

        result = await map_product(product, build_company(), signer)

        assert result.image_1 == signed("products/1/images/a.jpg")
        assert result.image_2 is None
        assert result.image_3 == signed("products/1/images/c.jpg")
        assert result.image_4 is None
        assert result.images == [
            signed("products/1/images/a.jpg"),
            signed("products/1/images/c.jpg"),
        ]
        assert result.glb_file == signed("products/1/ar/model.glb")
        assert result.usdz_file is None

    async def test_site_paths_are_not_signed(self, signer, s3_client):
        product = build_product(image_1="/placeholder.svg?text=Sofa")

        result = await map_product(product, build_company(), signer)

        assert result.image_1 == "/placeholder.svg?text=Sofa"
        assert s3_client.presign_calls == []

    async def test_signing_failure_only_nulls_that_key(self, signer, s3_client):
        s3_client.fail_keys.add("broken.jpg")
        product = build_product(image_1="broken.jpg", image_2="ok.jpg")

        result = await map_product(product, build_company(), signer)

        assert result.image_1 is None
        assert result.image_2 == signed("ok.jpg")
        assert result.images == [signed("ok.jpg")]

    async def test_ar_defaults(self, signer):
        product = build_product()
        product.ar_scale = None
        product.ar_placement = None

        result = await map_product(product, build_company(), signer)

        assert result.ar_scale == 1.0
        assert result.ar_placement == ARPlacement.FLOOR
