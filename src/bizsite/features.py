"""Feature flag schema, metadata and per-type canonical defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Tuple

from .business_types import BusinessType, RegistryError, coerce_business_type


FEATURE_KEYS: Tuple[str, ...] = (
    # Content
    "menuSystem",
    "portfolioGallery",
    "testimonials",
    "teamMembers",
    "faqSection",
    # Booking & contact
    "bookingSystem",
    "quoteRequests",
    "emergencyServices",
    # Display
    "serviceAreaMap",
    "pricingDisplay",
    "beforeAfterGallery",
    "servicePackages",
    # Trust
    "licenseBadges",
    "insuranceBadges",
)

# The 7-flag schema persisted by older sites.
LEGACY_FEATURE_KEYS: Tuple[str, ...] = (
    "menuSystem",
    "bookingSystem",
    "portfolioGallery",
    "quoteRequests",
    "testimonials",
    "teamMembers",
    "faqSection",
)

NEW_FEATURE_KEYS: Tuple[str, ...] = tuple(k for k in FEATURE_KEYS if k not in LEGACY_FEATURE_KEYS)

Features = Dict[str, bool]


@dataclass(frozen=True)
class FeatureMetadata:
    key: str
    label: str
    description: str
    icon: str
    group: str
    admin_nav_label: str | None = None
    public_nav_label: str | None = None
    pro_only: bool = False

    def to_dict(self) -> dict:
        out = {
            "key": self.key,
            "label": self.label,
            "description": self.description,
            "icon": self.icon,
            "group": self.group,
            "proOnly": self.pro_only,
        }
        if self.admin_nav_label:
            out["adminNavLabel"] = self.admin_nav_label
        if self.public_nav_label:
            out["publicNavLabel"] = self.public_nav_label
        return out


@dataclass(frozen=True)
class FeatureGroup:
    id: str
    label: str
    description: str
    features: Tuple[str, ...]


FEATURE_GROUPS: Tuple[FeatureGroup, ...] = (
    FeatureGroup(
        "content",
        "Content Features",
        "What content to show on your site",
        ("menuSystem", "portfolioGallery", "testimonials", "teamMembers", "faqSection"),
    ),
    FeatureGroup(
        "booking",
        "Booking & Contact",
        "How customers reach you",
        ("bookingSystem", "quoteRequests", "emergencyServices"),
    ),
    FeatureGroup(
        "display",
        "Display Options",
        "Additional display features",
        ("serviceAreaMap", "pricingDisplay", "beforeAfterGallery", "servicePackages"),
    ),
    FeatureGroup(
        "trust",
        "Trust & Credentials",
        "Build customer confidence",
        ("licenseBadges", "insuranceBadges"),
    ),
)

FEATURE_METADATA: Tuple[FeatureMetadata, ...] = (
    FeatureMetadata(
        "menuSystem",
        "Menu System",
        "Food, drink, or service menus with categories and pricing",
        "menu",
        "content",
        admin_nav_label="Menu",
        public_nav_label="Menu",
    ),
    FeatureMetadata(
        "portfolioGallery",
        "Portfolio Gallery",
        "Showcase your work with photos and project details",
        "image",
        "content",
        admin_nav_label="Portfolio",
        public_nav_label="Portfolio",
    ),
    FeatureMetadata("testimonials", "Testimonials", "Display customer reviews and ratings", "star", "content"),
    FeatureMetadata(
        "teamMembers",
        "Team Members",
        "Show staff profiles with photos and bios",
        "users",
        "content",
        admin_nav_label="Team",
    ),
    FeatureMetadata("faqSection", "FAQ Section", "Frequently asked questions", "help-circle", "content"),
    FeatureMetadata(
        "bookingSystem",
        "Booking System",
        "Online appointment scheduling",
        "calendar",
        "booking",
        public_nav_label="Book Now",
    ),
    FeatureMetadata("quoteRequests", "Quote Requests", "Request a quote or estimate forms", "file-text", "booking"),
    FeatureMetadata(
        "emergencyServices",
        "Emergency Services",
        "Highlight 24/7 emergency availability",
        "alert-circle",
        "booking",
    ),
    FeatureMetadata("serviceAreaMap", "Service Area Map", "Show your service area on Google Maps", "map", "display"),
    FeatureMetadata("pricingDisplay", "Price Display", "Show service prices on your site", "dollar-sign", "display"),
    FeatureMetadata(
        "beforeAfterGallery",
        "Before/After Gallery",
        "Showcase transformations with comparison images",
        "columns",
        "display",
        pro_only=True,
    ),
    FeatureMetadata(
        "servicePackages",
        "Service Packages",
        "Bundle services into packages with special pricing",
        "package",
        "display",
    ),
    FeatureMetadata(
        "licenseBadges",
        "License Badges",
        "Display professional licenses and certifications",
        "award",
        "trust",
    ),
    FeatureMetadata(
        "insuranceBadges",
        "Insurance Badges",
        "Show insurance and bonding information",
        "shield-check",
        "trust",
    ),
)

_T = BusinessType

# Flags switched on for each type; everything else defaults to off.
_ENABLED_BY_TYPE: Dict[BusinessType, FrozenSet[str]] = {
    # Food & Beverage
    _T.RESTAURANT: frozenset({"menuSystem", "testimonials", "faqSection", "bookingSystem", "serviceAreaMap"}),
    _T.CAFE: frozenset({"menuSystem", "testimonials", "serviceAreaMap"}),
    _T.CATERING: frozenset({
        "menuSystem", "portfolioGallery", "testimonials", "teamMembers", "faqSection",
        "bookingSystem", "quoteRequests", "serviceAreaMap", "servicePackages",
    }),
    _T.FOOD_TRUCK: frozenset({"menuSystem", "testimonials", "serviceAreaMap"}),
    _T.BAKERY: frozenset({"menuSystem", "portfolioGallery", "testimonials", "serviceAreaMap", "pricingDisplay"}),
    _T.BAR_LOUNGE: frozenset({"menuSystem", "testimonials", "faqSection", "serviceAreaMap"}),
    # Beauty & Wellness
    _T.SALON: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "pricingDisplay", "beforeAfterGallery",
    }),
    _T.SPA: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "pricingDisplay", "servicePackages",
    }),
    _T.BARBERSHOP: frozenset({"portfolioGallery", "testimonials", "teamMembers", "bookingSystem", "pricingDisplay"}),
    _T.NAIL_SALON: frozenset({"portfolioGallery", "testimonials", "bookingSystem", "pricingDisplay"}),
    _T.MASSAGE: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "pricingDisplay",
        "servicePackages", "licenseBadges",
    }),
    _T.TATTOO_STUDIO: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "pricingDisplay", "licenseBadges",
    }),
    # Home Services
    _T.GENERAL_CONTRACTOR: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "quoteRequests",
        "serviceAreaMap", "beforeAfterGallery", "licenseBadges", "insuranceBadges",
    }),
    _T.PLUMBER: frozenset({
        "portfolioGallery", "testimonials", "faqSection", "quoteRequests", "emergencyServices",
        "serviceAreaMap", "pricingDisplay", "licenseBadges", "insuranceBadges",
    }),
    _T.ELECTRICIAN: frozenset({
        "testimonials", "faqSection", "quoteRequests", "emergencyServices", "serviceAreaMap",
        "pricingDisplay", "licenseBadges", "insuranceBadges",
    }),
    _T.HVAC: frozenset({
        "testimonials", "faqSection", "quoteRequests", "emergencyServices", "serviceAreaMap",
        "pricingDisplay", "servicePackages", "licenseBadges", "insuranceBadges",
    }),
    _T.LANDSCAPING: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "quoteRequests",
        "serviceAreaMap", "beforeAfterGallery", "servicePackages", "insuranceBadges",
    }),
    _T.CLEANING: frozenset({
        "testimonials", "faqSection", "bookingSystem", "quoteRequests", "serviceAreaMap",
        "pricingDisplay", "servicePackages", "insuranceBadges",
    }),
    _T.HANDYMAN: frozenset({
        "portfolioGallery", "testimonials", "faqSection", "quoteRequests", "serviceAreaMap",
        "pricingDisplay", "insuranceBadges",
    }),
    _T.PAINTER: frozenset({
        "portfolioGallery", "testimonials", "faqSection", "quoteRequests", "serviceAreaMap",
        "beforeAfterGallery", "insuranceBadges",
    }),
    _T.ROOFER: frozenset({
        "portfolioGallery", "testimonials", "faqSection", "quoteRequests", "emergencyServices",
        "serviceAreaMap", "beforeAfterGallery", "licenseBadges", "insuranceBadges",
    }),
    _T.PEST_CONTROL: frozenset({
        "testimonials", "faqSection", "quoteRequests", "emergencyServices", "serviceAreaMap",
        "pricingDisplay", "servicePackages", "licenseBadges", "insuranceBadges",
    }),
    _T.POOL_SERVICE: frozenset({
        "portfolioGallery", "testimonials", "faqSection", "quoteRequests", "serviceAreaMap",
        "pricingDisplay", "servicePackages", "licenseBadges", "insuranceBadges",
    }),
    # Professional Services
    _T.CONSULTANT: frozenset({"testimonials", "teamMembers", "faqSection", "bookingSystem", "servicePackages"}),
    _T.LAW_FIRM: frozenset({"testimonials", "teamMembers", "faqSection", "bookingSystem", "licenseBadges"}),
    _T.ACCOUNTING: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "servicePackages", "licenseBadges",
    }),
    _T.MARKETING_AGENCY: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem", "servicePackages",
    }),
    _T.IT_SERVICES: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "emergencyServices",
        "servicePackages", "licenseBadges",
    }),
    _T.REAL_ESTATE: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "serviceAreaMap", "licenseBadges",
    }),
    _T.INSURANCE: frozenset({"testimonials", "teamMembers", "faqSection", "bookingSystem", "licenseBadges"}),
    _T.FINANCIAL_ADVISOR: frozenset({"testimonials", "teamMembers", "faqSection", "bookingSystem", "licenseBadges"}),
    # Health & Medical
    _T.MEDICAL_PRACTICE: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "serviceAreaMap",
        "licenseBadges", "insuranceBadges",
    }),
    _T.DENTAL: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "beforeAfterGallery", "servicePackages", "licenseBadges", "insuranceBadges",
    }),
    _T.THERAPY: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "licenseBadges", "insuranceBadges",
    }),
    _T.FITNESS: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "pricingDisplay", "beforeAfterGallery", "servicePackages", "licenseBadges",
    }),
    _T.CHIROPRACTIC: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "licenseBadges", "insuranceBadges",
    }),
    _T.OPTOMETRY: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "licenseBadges", "insuranceBadges",
    }),
    # Automotive
    _T.AUTO_REPAIR: frozenset({
        "testimonials", "faqSection", "quoteRequests", "emergencyServices", "serviceAreaMap",
        "pricingDisplay", "licenseBadges", "insuranceBadges",
    }),
    _T.AUTO_DETAILING: frozenset({
        "portfolioGallery", "testimonials", "faqSection", "bookingSystem", "pricingDisplay",
        "beforeAfterGallery", "servicePackages", "insuranceBadges",
    }),
    _T.TOWING: frozenset({
        "testimonials", "faqSection", "emergencyServices", "serviceAreaMap", "pricingDisplay",
        "licenseBadges", "insuranceBadges",
    }),
    _T.TIRE_SHOP: frozenset({
        "testimonials", "faqSection", "quoteRequests", "serviceAreaMap", "pricingDisplay", "insuranceBadges",
    }),
    # Pet Services
    _T.PET_GROOMING: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "pricingDisplay", "beforeAfterGallery", "insuranceBadges",
    }),
    _T.VETERINARY: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "emergencyServices",
        "serviceAreaMap", "licenseBadges", "insuranceBadges",
    }),
    _T.PET_SITTING: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "serviceAreaMap", "pricingDisplay", "servicePackages", "insuranceBadges",
    }),
    _T.DOG_TRAINING: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "serviceAreaMap", "pricingDisplay", "beforeAfterGallery", "servicePackages",
        "licenseBadges", "insuranceBadges",
    }),
    # Events & Creative
    _T.PHOTOGRAPHY: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "quoteRequests", "serviceAreaMap", "pricingDisplay", "servicePackages", "insuranceBadges",
    }),
    _T.VIDEOGRAPHY: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "quoteRequests", "serviceAreaMap", "pricingDisplay", "servicePackages", "insuranceBadges",
    }),
    _T.DJ_ENTERTAINMENT: frozenset({
        "portfolioGallery", "testimonials", "faqSection", "bookingSystem", "quoteRequests",
        "serviceAreaMap", "pricingDisplay", "servicePackages", "insuranceBadges",
    }),
    _T.EVENT_PLANNING: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "quoteRequests", "serviceAreaMap", "servicePackages", "insuranceBadges",
    }),
    _T.FLORIST: frozenset({
        "portfolioGallery", "testimonials", "faqSection", "bookingSystem", "serviceAreaMap", "pricingDisplay",
    }),
    _T.WEDDING_SERVICES: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "quoteRequests", "serviceAreaMap", "servicePackages", "insuranceBadges",
    }),
    # Education
    _T.TUTORING: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "serviceAreaMap",
        "pricingDisplay", "servicePackages",
    }),
    _T.MUSIC_LESSONS: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "pricingDisplay", "servicePackages",
    }),
    _T.DRIVING_SCHOOL: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "serviceAreaMap",
        "pricingDisplay", "servicePackages", "licenseBadges", "insuranceBadges",
    }),
    _T.LANGUAGE_SCHOOL: frozenset({
        "testimonials", "teamMembers", "faqSection", "bookingSystem", "pricingDisplay", "servicePackages",
    }),
    # Unclassified businesses start permissive and switch things off.
    _T.CUSTOM: frozenset({
        "portfolioGallery", "testimonials", "teamMembers", "faqSection", "bookingSystem",
        "quoteRequests", "serviceAreaMap", "pricingDisplay", "servicePackages",
    }),
}


def _check_tables() -> None:
    keys = set(FEATURE_KEYS)
    if len(keys) != len(FEATURE_KEYS):
        raise RegistryError("duplicate feature key")
    grouped = [key for group in FEATURE_GROUPS for key in group.features]
    if len(grouped) != len(set(grouped)) or set(grouped) != keys:
        raise RegistryError("feature groups must partition the feature keys")
    meta_keys = [m.key for m in FEATURE_METADATA]
    if len(meta_keys) != len(set(meta_keys)) or set(meta_keys) != keys:
        raise RegistryError("feature metadata must cover every feature key once")
    members = {g.id: g.features for g in FEATURE_GROUPS}
    for meta in FEATURE_METADATA:
        if meta.key not in members.get(meta.group, ()):
            raise RegistryError(f"feature {meta.key} declares group {meta.group} that does not list it")
    for btype in BusinessType:
        enabled = _ENABLED_BY_TYPE.get(btype)
        if enabled is None:
            raise RegistryError(f"business type {btype.value} has no feature defaults")
        unknown = enabled - keys
        if unknown:
            raise RegistryError(f"business type {btype.value} enables unknown features {sorted(unknown)}")


_check_tables()

_METADATA_BY_KEY: Dict[str, FeatureMetadata] = {m.key: m for m in FEATURE_METADATA}
_GROUPS_BY_ID: Dict[str, FeatureGroup] = {g.id: g for g in FEATURE_GROUPS}


def is_feature_key(key: Any) -> bool:
    return isinstance(key, str) and key in _METADATA_BY_KEY


def empty_features() -> Features:
    return {key: False for key in FEATURE_KEYS}


def get_feature_defaults(business_type: Any) -> Features:
    """Canonical 14-flag defaults for a business type.

    Unknown types get the ``custom`` defaults. A fresh dict is returned on
    every call so callers are free to edit it.
    """
    btype = coerce_business_type(business_type) or BusinessType.CUSTOM
    enabled = _ENABLED_BY_TYPE[btype]
    return {key: key in enabled for key in FEATURE_KEYS}


def get_feature_metadata(key: Any) -> FeatureMetadata | None:
    if not isinstance(key, str):
        return None
    return _METADATA_BY_KEY.get(key)


def get_feature_group(group_id: str) -> FeatureGroup | None:
    return _GROUPS_BY_ID.get(group_id)


def enabled_feature_keys(features: Any) -> list[str]:
    if not isinstance(features, dict):
        return []
    return [key for key in FEATURE_KEYS if features.get(key) is True]
