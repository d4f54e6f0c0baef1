"""
Schemas for editable homepage content

Field names are snake_case in Python and camelCase on the wire, which is
what the dashboard editor sends and reads.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List, Optional


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HeroSection(CamelModel):
    title: str
    subtitle: str
    description: str
    primary_button_text: str
    secondary_button_text: str
    background_image: str
    logo_image: str


class Feature(CamelModel):
    id: str
    title: str
    description: str
    icon: str
    color: str
    enabled: bool = True


class FeaturedProduct(CamelModel):
    id: str
    name: str
    description: str
    price: str
    rating: str
    image: str
    ar_enabled: bool = False
    enabled: bool = True


class Stat(CamelModel):
    value: str
    label: str


class StatsSection(CamelModel):
    stat1: Stat
    stat2: Stat
    stat3: Stat
    stat4: Stat
    enabled: bool = True


class TrustIndicator(CamelModel):
    id: str
    title: str
    description: str
    icon: str
    enabled: bool = True


class SeoSettings(CamelModel):
    meta_title: str
    meta_description: str
    keywords: str
    og_image: str


class HomepageData(CamelModel):
    """Everything the storefront homepage renders"""
    hero_section: HeroSection
    features: List[Feature] = Field(default_factory=list)
    featured_products: List[FeaturedProduct] = Field(default_factory=list)
    stats_section: StatsSection
    trust_indicators: List[TrustIndicator] = Field(default_factory=list)
    seo_settings: SeoSettings
    last_updated: Optional[datetime] = None


class SaveRecord(CamelModel):
    timestamp: datetime
    success: bool
    error: Optional[str] = None


class StorageInfo(CamelModel):
    has_data: bool
    last_updated: Optional[datetime] = None
    save_history_count: int
    last_save_attempt: Optional[SaveRecord] = None
    recent_saves: List[SaveRecord] = Field(default_factory=list)
