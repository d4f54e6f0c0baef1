"""
Maps product rows to the API shape: numeric prices, derived discount
fields, nested company summary and signed file URLs.
"""

import asyncio
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence, Tuple

from storefront.models import Company, Product
from storefront.models.product import ARPlacement, IMAGE_FIELDS
from storefront.schemas.product import CompanySummary, ProductRead
from storefront.services.signed_urls import SignedUrlService


def discount_percentage(price: Decimal, discount_price: Optional[Decimal]) -> int:
    """Whole-percent discount, rounded half up; 0 without a discount"""
    if discount_price is None or not price:
        return 0
    percent = (Decimal(price) - Decimal(discount_price)) / Decimal(price) * 100
    return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def effective_price(price: Decimal, discount_price: Optional[Decimal]) -> Decimal:
    """Price actually charged"""
    return discount_price if discount_price is not None else price


async def map_product(product: Product, company: Company, signer: SignedUrlService) -> ProductRead:
    """Build the enriched response for one product row"""
    image_keys = product.image_keys()
    signed = await signer.sign_many([*image_keys, product.glb_file, product.usdz_file])
    signed_images, glb_url, usdz_url = signed[:4], signed[4], signed[5]

    price = Decimal(product.price)
    discount = Decimal(product.discount_price) if product.discount_price is not None else None

    return ProductRead(
        id=product.id,
        name=product.name,
        description=product.description,
        price=float(price),
        discount_price=float(discount) if discount is not None else None,
        discount_percentage=discount_percentage(price, discount),
        effective_price=float(effective_price(price, discount)),
        company_id=product.company_id,
        company=CompanySummary(
            id=company.id,
            name=company.shop_name,
            subdomain=company.subdomain,
            description=company.description,
            logo=company.logo,
        ),
        category=product.category,
        images=[url for key, url in zip(image_keys, signed_images) if key and url],
        **dict(zip(IMAGE_FIELDS, signed_images)),
        dimensions=product.dimensions,
        weight=product.weight,
        material=product.material,
        color=product.color,
        ar_scale=float(product.ar_scale) if product.ar_scale else 1.0,
        ar_placement=product.ar_placement or ARPlacement.FLOOR,
        has_ar=product.has_ar,
        glb_file=glb_url,
        usdz_file=usdz_url,
        featured=product.featured,
        status=product.status,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


async def map_products(
    rows: Sequence[Tuple[Product, Company]], signer: SignedUrlService
) -> List[ProductRead]:
    """Map rows concurrently; the signer bounds outbound signing calls"""
    return list(await asyncio.gather(*(map_product(p, c, signer) for p, c in rows)))
