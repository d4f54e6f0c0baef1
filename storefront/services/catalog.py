"""
Catalog service - data access for companies, products and AR requests

Every read of a product goes through the record mapper, so callers only
ever see the enriched shape with signed file URLs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import IntegrityError
import structlog

from storefront.core.exceptions import (
    DuplicateSubdomainError,
    InvalidTransitionError,
    PriceInvariantError,
)
from storefront.models import (
    ARRequest,
    ARRequestStatus,
    Company,
    Product,
    ProductEvent,
    ProductEventType,
    ProductStatus,
)
from storefront.models.product import IMAGE_FIELDS
from storefront.schemas.company import CompanyCreate
from storefront.schemas.dashboard import DashboardStats
from storefront.schemas.product import ProductCreate, ProductRead, ProductUpdate
from storefront.services.product_mapper import map_product, map_products
from storefront.services.signed_urls import SignedUrlService

logger = structlog.get_logger(__name__)


def validate_prices(price: Optional[Decimal], discount_price: Optional[Decimal]):
    """Prices are non-negative and a discount never exceeds the list price"""
    if price is None:
        raise PriceInvariantError("Price is required")
    if price < 0:
        raise PriceInvariantError("Price cannot be negative")
    if discount_price is not None:
        if discount_price < 0:
            raise PriceInvariantError("Discount price cannot be negative")
        if discount_price > price:
            raise PriceInvariantError("Discount price cannot exceed price")


class CatalogService:
    """Query façade used by the API routes"""

    def __init__(self, session: AsyncSession, signer: SignedUrlService):
        self.session = session
        self.signer = signer

    # ------------------------------------------------------------------
    # Companies
    # ------------------------------------------------------------------

    async def get_companies(self) -> List[Company]:
        result = await self.session.exec(
            select(Company).order_by(Company.created_at.desc(), Company.id.desc())
        )
        return list(result.all())

    async def get_company(self, company_id: int) -> Optional[Company]:
        return await self.session.get(Company, company_id)

    async def get_company_by_subdomain(self, subdomain: str) -> Optional[Company]:
        result = await self.session.exec(
            select(Company).where(Company.subdomain == subdomain)
        )
        return result.first()

    async def create_company(self, data: CompanyCreate) -> Company:
        """Insert a company; subdomains are unique"""
        if await self.get_company_by_subdomain(data.subdomain):
            raise DuplicateSubdomainError(f"Subdomain '{data.subdomain}' is already taken")

        company = Company(**data.model_dump())
        self.session.add(company)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateSubdomainError(f"Subdomain '{data.subdomain}' is already taken")
        await self.session.refresh(company)
        logger.info(f"Company created: {company.id} ({company.subdomain})")
        return company

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def _product_query(self):
        return (
            select(Product, Company)
            .join(Company, Product.company_id == Company.id)
            .where(Product.status == ProductStatus.ACTIVE)
        )

    async def get_active_product(
        self, product_id: int, company_id: Optional[int] = None
    ) -> Optional[Product]:
        query = select(Product).where(
            Product.id == product_id,
            Product.status == ProductStatus.ACTIVE,
        )
        if company_id is not None:
            query = query.where(Product.company_id == company_id)
        result = await self.session.exec(query)
        return result.first()

    async def get_products(self, company_id: Optional[int] = None) -> List[ProductRead]:
        """Active products, featured first, then newest first"""
        query = self._product_query()
        if company_id is not None:
            query = query.where(Product.company_id == company_id)
        query = query.order_by(Product.featured.desc(), Product.created_at.desc())

        result = await self.session.exec(query)
        return await map_products(result.all(), self.signer)

    async def get_products_by_subdomain(self, subdomain: str) -> List[ProductRead]:
        company = await self.get_company_by_subdomain(subdomain)
        if not company:
            return []
        return await self.get_products(company.id)

    async def get_product(
        self, product_id: int, company_id: Optional[int] = None
    ) -> Optional[ProductRead]:
        """One active product, optionally only if it belongs to company_id"""
        query = self._product_query().where(Product.id == product_id)
        if company_id is not None:
            query = query.where(Product.company_id == company_id)

        result = await self.session.exec(query)
        row = result.first()
        if row is None:
            return None
        product, company = row
        return await map_product(product, company, self.signer)

    async def create_product(self, data: ProductCreate) -> Optional[ProductRead]:
        """Insert a product for an existing company; None if the company is unknown"""
        validate_prices(data.price, data.discount_price)

        company = await self.get_company(data.shop_id)
        if not company:
            return None

        fields = data.model_dump(exclude={"shop_id", "images"})
        fields.update(dict(zip(IMAGE_FIELDS, data.images)))
        product = Product(company_id=company.id, **fields)
        self.session.add(product)
        await self.session.flush()

        self.session.add(ProductEvent(
            product_id=product.id,
            company_id=company.id,
            event_type=ProductEventType.CREATED,
        ))
        await self.session.commit()
        logger.info(f"Created product {product.id} for company {company.id}")

        return await self.get_product(product.id)

    async def update_product(
        self,
        product_id: int,
        data: ProductUpdate,
        company_id: Optional[int] = None,
    ) -> Optional[ProductRead]:
        """Apply only the provided fields; None if no active product matched"""
        product = await self.get_active_product(product_id, company_id)
        if not product:
            return None

        changes: Dict[str, Any] = data.model_dump(exclude_unset=True)
        if "price" in changes or "discount_price" in changes:
            validate_prices(
                changes.get("price", product.price),
                changes.get("discount_price", product.discount_price),
            )

        for key, value in changes.items():
            setattr(product, key, value)
        product.updated_at = datetime.utcnow()
        self.session.add(product)

        self.session.add(ProductEvent(
            product_id=product.id,
            company_id=product.company_id,
            event_type=ProductEventType.UPDATED,
            changed_fields=",".join(sorted(changes)) or None,
        ))
        await self.session.commit()
        logger.info(f"Updated product {product_id}: {sorted(changes)}")

        return await self.get_product(product_id)

    async def delete_product(self, product_id: int, company_id: Optional[int] = None) -> bool:
        """Soft delete: mark Inactive and record the event"""
        product = await self.get_active_product(product_id, company_id)
        if not product:
            return False

        product.status = ProductStatus.INACTIVE
        product.updated_at = datetime.utcnow()
        self.session.add(product)
        self.session.add(ProductEvent(
            product_id=product.id,
            company_id=product.company_id,
            event_type=ProductEventType.DELETED,
        ))
        await self.session.commit()
        logger.info(f"Soft deleted product {product_id}")
        return True

    async def attach_file(self, product_id: int, field: str, key: str) -> Optional[Product]:
        """Store an uploaded object key on one of the product's file fields"""
        product = await self.get_active_product(product_id)
        if not product:
            return None

        setattr(product, field, key)
        if field in ("glb_file", "usdz_file"):
            product.has_ar = True
        product.updated_at = datetime.utcnow()
        self.session.add(product)
        self.session.add(ProductEvent(
            product_id=product.id,
            company_id=product.company_id,
            event_type=ProductEventType.UPDATED,
            changed_fields=field,
        ))
        await self.session.commit()
        return product

    async def get_product_events(
        self, product_id: int, company_id: Optional[int] = None
    ) -> List[ProductEvent]:
        query = select(ProductEvent).where(ProductEvent.product_id == product_id)
        if company_id is not None:
            query = query.where(ProductEvent.company_id == company_id)
        result = await self.session.exec(
            query.order_by(ProductEvent.created_at.asc(), ProductEvent.id.asc())
        )
        return list(result.all())

    # ------------------------------------------------------------------
    # AR requests
    # ------------------------------------------------------------------

    async def get_ar_requests(self, shop_id: Optional[int] = None) -> List[ARRequest]:
        query = select(ARRequest)
        if shop_id is not None:
            query = query.where(ARRequest.shop == shop_id)
        query = query.order_by(ARRequest.request_date.desc(), ARRequest.id.desc())
        result = await self.session.exec(query)
        return list(result.all())

    async def create_ar_request(self, product_id: int, shop_id: int) -> Optional[ARRequest]:
        """New pending request; None unless the product belongs to the shop"""
        product = await self.get_active_product(product_id, company_id=shop_id)
        if not product:
            return None

        ar_request = ARRequest(product=product_id, shop=shop_id)
        self.session.add(ar_request)
        await self.session.commit()
        await self.session.refresh(ar_request)
        logger.info(f"AR request {ar_request.id} created for product {product_id}")
        return ar_request

    async def update_ar_request(
        self, request_id: int, status: ARRequestStatus
    ) -> Optional[ARRequest]:
        """Move a request through Pending -> Approved | Rejected"""
        ar_request = await self.session.get(ARRequest, request_id)
        if not ar_request:
            return None

        try:
            ar_request.transition_to(status)
        except ValueError as e:
            raise InvalidTransitionError(str(e))

        self.session.add(ar_request)
        await self.session.commit()
        await self.session.refresh(ar_request)
        logger.info(f"AR request {request_id} -> {status.value}")
        return ar_request

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    async def _count(self, model, *conditions) -> int:
        query = select(func.count()).select_from(model)
        if conditions:
            query = query.where(*conditions)
        result = await self.session.exec(query)
        return result.one()

    async def get_dashboard_stats(self, shop_id: Optional[int] = None) -> DashboardStats:
        product_scope = [Product.status == ProductStatus.ACTIVE]
        request_scope = []
        if shop_id is not None:
            product_scope.append(Product.company_id == shop_id)
            request_scope.append(ARRequest.shop == shop_id)
            total_companies = 1 if await self.get_company(shop_id) else 0
        else:
            total_companies = await self._count(Company)

        return DashboardStats(
            total_products=await self._count(Product, *product_scope),
            featured_products=await self._count(Product, *product_scope, Product.featured == True),  # noqa: E712
            ar_products=await self._count(Product, *product_scope, Product.has_ar == True),  # noqa: E712
            discounted_products=await self._count(
                Product, *product_scope, Product.discount_price.is_not(None)
            ),
            total_companies=total_companies,
            pending_ar_requests=await self._count(
                ARRequest, *request_scope, ARRequest.status == ARRequestStatus.PENDING
            ),
            approved_ar_requests=await self._count(
                ARRequest, *request_scope, ARRequest.status == ARRequestStatus.APPROVED
            ),
            rejected_ar_requests=await self._count(
                ARRequest, *request_scope, ARRequest.status == ARRequestStatus.REJECTED
            ),
        )
