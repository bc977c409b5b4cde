"""Environment-derived store configuration and base settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger("bizsite.config")

DEFAULT_STORE_NAME = "My Business"
DEFAULT_BRAND_COLOR = "#FFD700"
DEFAULT_THEME_PRESET = "default"
DEFAULT_MAX_SERVICES = 10
PRO_TIERS = ("pro", "hosted")


def _env(environ: Mapping[str, str] | None, key: str, default: str = "") -> str:
    source = os.environ if environ is None else environ
    value = source.get(key)
    if value is None:
        return default
    return value.strip() or default


@dataclass(frozen=True)
class StoreConfig:
    store_id: str = ""
    name: str = DEFAULT_STORE_NAME
    tagline: str = ""
    about_text: str = ""
    brand_color: str = DEFAULT_BRAND_COLOR
    theme_preset: str = DEFAULT_THEME_PRESET
    logo_url: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    address: str = ""
    instagram_url: str = ""
    facebook_url: str = ""
    twitter_url: str = ""
    linkedin_url: str = ""
    business_type: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "StoreConfig":
        return cls(
            store_id=_env(environ, "STORE_ID"),
            name=_env(environ, "STORE_NAME", DEFAULT_STORE_NAME),
            tagline=_env(environ, "STORE_TAGLINE"),
            about_text=_env(environ, "ABOUT_TEXT"),
            brand_color=_env(environ, "BRAND_COLOR", DEFAULT_BRAND_COLOR),
            theme_preset=_env(environ, "THEME_PRESET", DEFAULT_THEME_PRESET),
            logo_url=_env(environ, "LOGO_URL"),
            contact_email=_env(environ, "CONTACT_EMAIL"),
            contact_phone=_env(environ, "CONTACT_PHONE"),
            address=_env(environ, "ADDRESS"),
            instagram_url=_env(environ, "INSTAGRAM_URL"),
            facebook_url=_env(environ, "FACEBOOK_URL"),
            twitter_url=_env(environ, "TWITTER_URL"),
            linkedin_url=_env(environ, "LINKEDIN_URL"),
            business_type=_env(environ, "BUSINESS_TYPE"),
        )


@dataclass(frozen=True)
class TierLimits:
    payment_tier: str = "starter"
    max_services: int | None = DEFAULT_MAX_SERVICES  # None means unlimited

    @property
    def is_pro(self) -> bool:
        return self.payment_tier in PRO_TIERS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TierLimits":
        tier = _env(environ, "PAYMENT_TIER", "starter").lower()
        raw = _env(environ, "MAX_SERVICES", str(DEFAULT_MAX_SERVICES)).lower()
        if raw == "unlimited":
            return cls(payment_tier=tier, max_services=None)
        try:
            max_services = int(raw)
        except ValueError:
            logger.warning("config_invalid_max_services value=%s fallback=%s", raw, DEFAULT_MAX_SERVICES)
            max_services = DEFAULT_MAX_SERVICES
        return cls(payment_tier=tier, max_services=max(max_services, 0))


def base_settings(config: StoreConfig | None = None) -> dict:
    """Base document the persisted settings are merged over.

    Only values the deployment environment actually knows about live here;
    content copy comes from the business type's preset during the merge.
    """
    cfg = config or StoreConfig.from_env()
    base = {
        "businessName": cfg.name,
        "themePreset": cfg.theme_preset,
        "brandColor": cfg.brand_color,
        "logoUrl": cfg.logo_url,
        "tagline": cfg.tagline,
        "aboutText": cfg.about_text,
        "phoneNumber": cfg.contact_phone,
        "contactEmail": cfg.contact_email,
        "address": cfg.address,
        "instagramUrl": cfg.instagram_url,
        "facebookUrl": cfg.facebook_url,
        "twitterUrl": cfg.twitter_url,
        "linkedinUrl": cfg.linkedin_url,
    }
    if cfg.business_type:
        base["businessType"] = cfg.business_type
    return base
