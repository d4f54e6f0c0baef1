"""
Homepage content store

Content edited in the dashboard is kept per tenant key behind a pluggable
backend: in memory for development and tests, JSON files on disk otherwise.
"""

import asyncio
import json
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional
import structlog

from storefront.core.config import Settings, get_settings
from storefront.schemas.homepage import HomepageData, SaveRecord, StorageInfo

logger = structlog.get_logger(__name__)

DEFAULT_KEY = "default"


class HomepageBackend:
    """Persistence interface for homepage documents"""

    def load(self, key: str) -> Optional[dict]:
        raise NotImplementedError

    def save(self, key: str, document: dict):
        raise NotImplementedError

    def delete(self, key: str):
        raise NotImplementedError


class InMemoryHomepageBackend(HomepageBackend):
    def __init__(self):
        self._documents: Dict[str, dict] = {}

    def load(self, key: str) -> Optional[dict]:
        document = self._documents.get(key)
        return dict(document) if document is not None else None

    def save(self, key: str, document: dict):
        self._documents[key] = dict(document)

    def delete(self, key: str):
        self._documents.pop(key, None)


class JsonFileHomepageBackend(HomepageBackend):
    """One JSON file per key under a directory"""

    def __init__(self, directory: str):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        safe_key = re.sub(r"[^a-zA-Z0-9_-]", "_", key)
        return self.directory / f"{safe_key}.json"

    def load(self, key: str) -> Optional[dict]:
        path = self._path(key)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def save(self, key: str, document: dict):
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp_path.replace(path)

    def delete(self, key: str):
        self._path(key).unlink(missing_ok=True)


class HomepageStore:
    """
    Loads and saves homepage content, keeping a history of save attempts.

    Backend calls run in a worker thread.
    """

    def __init__(self, backend: HomepageBackend):
        self.backend = backend
        self._history: Dict[str, List[SaveRecord]] = {}

    async def load(self, key: str = DEFAULT_KEY) -> Optional[HomepageData]:
        document = await asyncio.to_thread(self.backend.load, key)
        if document is None:
            return None
        return HomepageData.model_validate(document)

    async def load_or_default(self, key: str = DEFAULT_KEY) -> HomepageData:
        return await self.load(key) or default_homepage_data()

    async def save(self, key: str, data: HomepageData) -> HomepageData:
        """Stamp last_updated and persist; failures are recorded and re-raised"""
        stamped = data.model_copy(update={"last_updated": datetime.utcnow()})
        history = self._history.setdefault(key, [])
        try:
            await asyncio.to_thread(
                self.backend.save, key, stamped.model_dump(mode="json", by_alias=True)
            )
        except Exception as e:
            history.append(SaveRecord(timestamp=datetime.utcnow(), success=False, error=str(e)))
            logger.error(f"Homepage save failed for {key}: {e}")
            raise

        history.append(SaveRecord(timestamp=datetime.utcnow(), success=True))
        logger.info(
            f"Homepage saved for {key}: {len(stamped.features)} features, "
            f"{len(stamped.featured_products)} featured products"
        )
        return stamped

    async def reset(self, key: str = DEFAULT_KEY):
        await asyncio.to_thread(self.backend.delete, key)
        self._history.pop(key, None)
        logger.info(f"Homepage data cleared for {key}")

    async def storage_info(self, key: str = DEFAULT_KEY) -> StorageInfo:
        data = await self.load(key)
        history = self._history.get(key, [])
        return StorageInfo(
            has_data=data is not None,
            last_updated=data.last_updated if data else None,
            save_history_count=len(history),
            last_save_attempt=history[-1] if history else None,
            recent_saves=history[-5:],
        )


def build_homepage_store(settings: Optional[Settings] = None) -> HomepageStore:
    settings = settings or get_settings()
    if settings.HOMEPAGE_STORAGE == "file":
        return HomepageStore(JsonFileHomepageBackend(settings.HOMEPAGE_STORAGE_DIR))
    return HomepageStore(InMemoryHomepageBackend())


def default_homepage_data() -> HomepageData:
    """Content shown before a shop has customized its homepage"""
    description = (
        "Transform your space with premium furniture and cutting-edge AR technology. "
        "See how furniture looks in your home before you buy!"
    )
    return HomepageData.model_validate({
        "heroSection": {
            "title": "Welcome to\nFurniCraft",
            "subtitle": "AR Furniture Visualization",
            "description": description,
            "primaryButtonText": "Browse Furniture",
            "secondaryButtonText": "Try AR Demo",
            "backgroundImage": "/images/hero-bg.jpg",
            "logoImage": "/images/logo.png",
        },
        "features": [
            {
                "id": "1",
                "title": "Premium Quality",
                "description": "Handcrafted furniture made from the finest materials with attention to every detail",
                "icon": "Home",
                "color": "blue",
            },
            {
                "id": "2",
                "title": "AR Visualization",
                "description": "See exactly how furniture will look in your space with our advanced AR technology",
                "icon": "Sparkles",
                "color": "purple",
            },
            {
                "id": "3",
                "title": "Free Assembly",
                "description": "Professional delivery and assembly service included with every purchase",
                "icon": "Truck",
                "color": "green",
            },
        ],
        "featuredProducts": [
            {
                "id": "1",
                "name": "Modern Sectional Sofa",
                "description": "Comfortable 3-seater with premium fabric",
                "price": "₹79,900",
                "rating": "4.8",
                "image": "/images/sofa-modern.png",
                "arEnabled": True,
            },
            {
                "id": "2",
                "name": "Dining Table Set",
                "description": "Elegant 6-seater solid oak wood",
                "price": "₹59,900",
                "rating": "4.6",
                "image": "/images/dining-table.png",
                "arEnabled": True,
            },
            {
                "id": "3",
                "name": "Ergonomic Office Chair",
                "description": "High-back with lumbar support",
                "price": "₹22,900",
                "rating": "4.7",
                "image": "/images/office-chair.png",
                "arEnabled": True,
            },
        ],
        "statsSection": {
            "stat1": {"value": "500+", "label": "Furniture Pieces"},
            "stat2": {"value": "50+", "label": "AR Models"},
            "stat3": {"value": "2000+", "label": "Happy Homes"},
            "stat4": {"value": "24/7", "label": "Support"},
        },
        "trustIndicators": [
            {
                "id": "1",
                "title": "2-Year Warranty",
                "description": "Comprehensive warranty on all furniture pieces",
                "icon": "Shield",
            },
            {
                "id": "2",
                "title": "Free Delivery",
                "description": "Professional delivery and assembly included",
                "icon": "Truck",
            },
            {
                "id": "3",
                "title": "30-Day Returns",
                "description": "Not satisfied? Return within 30 days",
                "icon": "Home",
            },
        ],
        "seoSettings": {
            "metaTitle": "FurniCraft - Premium AR Furniture Store",
            "metaDescription": description,
            "keywords": "furniture, AR, home decor, interior design, augmented reality",
            "ogImage": "/images/og-image.jpg",
        },
    })
