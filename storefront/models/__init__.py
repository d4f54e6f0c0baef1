from storefront.models.company import Company, CompanyStatus, CompanyPlan
from storefront.models.product import Product, ProductStatus, ARPlacement
from storefront.models.ar_request import ARRequest, ARRequestStatus
from storefront.models.product_event import ProductEvent, ProductEventType
