"""
Test configuration for pytest
"""

import os

# Test environment variables
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DEBUG"] = "false"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["B2_BUCKET_NAME"] = "test-bucket"
os.environ["B2_KEY_ID"] = "test-key-id"
os.environ["B2_APPLICATION_KEY"] = "test-application-key"
os.environ["HOMEPAGE_STORAGE"] = "memory"

import pytest
from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from storefront.api.dependencies import get_homepage_store, get_signer, get_storage
from storefront.core.database import get_session
from storefront.main import app
from storefront.models import Company, Product
from storefront.services.catalog import CatalogService
from storefront.services.homepage import HomepageStore, InMemoryHomepageBackend
from storefront.services.object_storage import ObjectStorage
from storefront.services.signed_urls import SignedUrlService


class FakeS3Client:
    """Stands in for the boto3 client; records calls"""

    def __init__(self):
        self.presign_calls = []
        self.objects = {}
        self.fail_keys = set()

    def generate_presigned_url(self, operation, Params, ExpiresIn):
        key = Params["Key"]
        self.presign_calls.append(key)
        if key in self.fail_keys:
            raise RuntimeError(f"signing failed for {key}")
        return f"https://signed.test/{Params['Bucket']}/{key}?expires={ExpiresIn}"

    def put_object(self, Bucket, Key, Body, ContentType):
        self.objects[Key] = {"bucket": Bucket, "body": Body, "content_type": ContentType}


def signed(key: str) -> str:
    """URL the fake client produces for a key"""
    return f"https://signed.test/test-bucket/{key}?expires=3600"


@pytest.fixture(scope="function")
async def engine():
    """Fresh in-memory database per test"""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSession(engine, expire_on_commit=False) as db_session:
        yield db_session


@pytest.fixture
def s3_client() -> FakeS3Client:
    return FakeS3Client()


@pytest.fixture
def storage(s3_client) -> ObjectStorage:
    return ObjectStorage(bucket_name="test-bucket", client=s3_client)


@pytest.fixture
def signer(storage) -> SignedUrlService:
    return SignedUrlService(storage, expires_in=3600, cache_seconds=60, max_concurrency=4)


@pytest.fixture
def catalog(session, signer) -> CatalogService:
    return CatalogService(session, signer)


@pytest.fixture
def homepage_store() -> HomepageStore:
    return HomepageStore(InMemoryHomepageBackend())


@pytest.fixture
async def company(session) -> Company:
    """Create a test company"""
    company = Company(
        shop_name="Demo Furniture Store",
        subdomain="demo",
        description="Premium furniture with AR visualization",
        logo="logos/demo.png",
        phone="+91 98765 43210",
    )
    session.add(company)
    await session.commit()
    await session.refresh(company)
    return company


@pytest.fixture
async def other_company(session) -> Company:
    """Create a second tenant"""
    company = Company(shop_name="Fashion Hub", subdomain="fashion")
    session.add(company)
    await session.commit()
    await session.refresh(company)
    return company


@pytest.fixture
def make_product(session):
    """Factory inserting a product row directly"""

    async def _make_product(company: Company, **fields) -> Product:
        fields.setdefault("name", "Modern Sofa")
        fields.setdefault("price", Decimal("79900"))
        product = Product(company_id=company.id, **fields)
        session.add(product)
        await session.commit()
        await session.refresh(product)
        return product

    return _make_product


@pytest.fixture
async def client(engine, storage, signer, homepage_store) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with test database and fake storage"""

    async def override_get_session():
        async with AsyncSession(engine, expire_on_commit=False) as db_session:
            yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_signer] = lambda: signer
    app.dependency_overrides[get_homepage_store] = lambda: homepage_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()


def ts(day: int) -> datetime:
    return datetime(2024, 1, day, 12, 0, 0)
