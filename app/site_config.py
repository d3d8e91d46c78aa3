from typing import Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class NavLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    href: str = Field(..., min_length=1)


class SocialLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    twitter: Optional[str] = None
    youtube: Optional[str] = None
    instagram: Optional[str] = None


class SiteConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    avatar: Optional[str] = None
    siteUrl: str = Field(..., min_length=1)
    siteName: str = Field(..., min_length=1)
    siteDescription: str = Field(..., min_length=1)
    twitterCard: str = "summary_large_image"
    siteThumbnail: str
    nav: Tuple[NavLink, ...]
    social: Optional[SocialLinks] = None


# Process-wide constant; validated once at import
site_config = SiteConfig(
    avatar="/avatar.png",
    siteUrl="https://diary.zenshop.app",
    siteName="zenshop",
    siteDescription="Developer diary | zenshop",
    siteThumbnail="https://www.zenshop.app/images/landing/twitter-card.png",
    nav=(
        NavLink(label="Posts", href="/posts"),
        NavLink(label="About", href="https://www.zenshop.app/about"),
    ),
    social=SocialLinks(
        youtube="https://www.youtube.com/channel/UCNSNRGSutFKcB9L-2AFabdA",
        twitter="https://twitter.com/zenshop_app",
        instagram="https://www.instagram.com/zenshop_app",
    ),
)


def get_site_config() -> SiteConfig:
    """Small wrapper to allow dependency overrides in tests."""
    return site_config
