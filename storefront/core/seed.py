"""
Demo tenants and products inserted into an empty database
"""

from decimal import Decimal

from sqlmodel.ext.asyncio.session import AsyncSession
import structlog

from storefront.models import Company, Product

logger = structlog.get_logger(__name__)


DEMO_COMPANIES = [
    {
        "shop_name": "Demo Furniture Store",
        "subdomain": "demo",
        "description": "Premium furniture with AR visualization",
        "phone": "+91 98765 43210",
        "whatsapp": "+91 98765 43210",
        "website": "https://demo.localhost:3000",
    },
    {
        "shop_name": "Modern Electronics",
        "subdomain": "electronics",
        "description": "Latest gadgets and electronics",
        "phone": "+91 98765 43211",
        "whatsapp": "+91 98765 43211",
        "website": "https://electronics.localhost:3000",
    },
    {
        "shop_name": "Fashion Hub",
        "subdomain": "fashion",
        "description": "Trendy clothing and accessories",
        "phone": "+91 98765 43212",
        "whatsapp": "+91 98765 43212",
        "website": "https://fashion.localhost:3000",
    },
]


def _placeholder(text: str) -> str:
    return f"/placeholder.svg?height=400&width=600&text={text}"


DEMO_PRODUCTS = {
    "demo": [
        {
            "name": "Modern Sofa",
            "description": "Comfortable 3-seater sofa with premium fabric upholstery. Perfect for modern living rooms.",
            "price": Decimal("79900"),
            "discount_price": Decimal("69900"),
            "category": "Furniture",
            "image_1": _placeholder("Modern+Sofa"),
            "dimensions": "200cm × 90cm × 85cm",
            "material": "Premium Fabric",
            "color": "Charcoal Gray",
            "has_ar": True,
            "featured": True,
        },
        {
            "name": "Dining Table",
            "description": "Elegant wooden dining table for 6 people. Crafted from solid oak wood.",
            "price": Decimal("65900"),
            "discount_price": Decimal("59900"),
            "category": "Furniture",
            "image_1": _placeholder("Dining+Table"),
            "dimensions": "180cm × 90cm × 75cm",
            "material": "Solid Oak Wood",
            "color": "Natural Brown",
            "has_ar": True,
            "featured": True,
        },
        {
            "name": "Office Chair",
            "description": "Ergonomic office chair with lumbar support and adjustable height.",
            "price": Decimal("24900"),
            "category": "Furniture",
            "image_1": _placeholder("Office+Chair"),
            "dimensions": "65cm × 65cm × 110cm",
            "material": "Mesh & Plastic",
            "color": "Black",
            "has_ar": True,
        },
        {
            "name": "Coffee Table",
            "description": "Stylish glass-top coffee table with wooden legs.",
            "price": Decimal("18900"),
            "discount_price": Decimal("16900"),
            "category": "Furniture",
            "image_1": _placeholder("Coffee+Table"),
            "dimensions": "120cm × 60cm × 45cm",
            "material": "Glass & Wood",
            "color": "Clear & Natural",
            "has_ar": True,
        },
    ],
    "electronics": [
        {
            "name": "iPhone 15 Pro",
            "description": "Latest iPhone with advanced camera system and A17 Pro chip.",
            "price": Decimal("134900"),
            "discount_price": Decimal("129900"),
            "category": "Smartphones",
            "image_1": _placeholder("iPhone+15+Pro"),
            "dimensions": "14.67cm × 7.09cm × 0.83cm",
            "material": "Titanium",
            "color": "Natural Titanium",
            "has_ar": True,
            "featured": True,
        },
        {
            "name": "MacBook Air M3",
            "description": "Ultra-thin laptop with M3 chip and all-day battery life.",
            "price": Decimal("114900"),
            "category": "Laptops",
            "image_1": _placeholder("MacBook+Air+M3"),
            "dimensions": "30.41cm × 21.5cm × 1.13cm",
            "material": "Aluminum",
            "color": "Space Gray",
            "has_ar": True,
            "featured": True,
        },
    ],
    "fashion": [
        {
            "name": "Designer T-Shirt",
            "description": "Premium cotton t-shirt with modern design.",
            "price": Decimal("2999"),
            "discount_price": Decimal("2499"),
            "category": "Clothing",
            "image_1": _placeholder("Designer+T-Shirt"),
            "material": "Premium Cotton",
            "color": "Navy Blue",
            "featured": True,
        },
        {
            "name": "Leather Jacket",
            "description": "Genuine leather jacket with classic styling.",
            "price": Decimal("12999"),
            "discount_price": Decimal("10999"),
            "category": "Clothing",
            "image_1": _placeholder("Leather+Jacket"),
            "material": "Genuine Leather",
            "color": "Black",
            "featured": True,
        },
    ],
}


async def seed_demo_data(session: AsyncSession):
    """Insert demo companies and their products"""
    logger.info("Seeding sample data")
    try:
        companies = {}
        for data in DEMO_COMPANIES:
            company = Company(**data)
            session.add(company)
            companies[data["subdomain"]] = company
        await session.flush()

        product_count = 0
        for subdomain, products in DEMO_PRODUCTS.items():
            company_id = companies[subdomain].id
            for data in products:
                session.add(Product(company_id=company_id, **data))
                product_count += 1

        await session.commit()
        logger.info(f"Sample data seeded: {len(companies)} companies, {product_count} products")
    except Exception as e:
        await session.rollback()
        logger.error(f"Error seeding sample data: {e}")
        raise
