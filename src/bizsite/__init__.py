"""Business-type configuration and settings migration for service business sites."""

from .business_types import (
    BusinessCategory,
    BusinessType,
    BusinessTypeInfo,
    CategoryInfo,
    RegistryError,
    category_of,
    get_business_type_info,
    lookup_type,
    types_in_category,
)
from .content_presets import ContentPreset, get_content_preset, render_content_preset
from .feature_diff import FeatureChange, get_modified_features, has_modified_features
from .features import FEATURE_KEYS, get_feature_defaults, get_feature_metadata
from .legacy import migrate_business_type, migrate_legacy_features
from .settings import needs_migration, resolve_settings, resolve_settings_report

__all__ = [
    "BusinessCategory",
    "BusinessType",
    "BusinessTypeInfo",
    "CategoryInfo",
    "ContentPreset",
    "FEATURE_KEYS",
    "FeatureChange",
    "RegistryError",
    "category_of",
    "get_business_type_info",
    "get_content_preset",
    "get_feature_defaults",
    "get_feature_metadata",
    "get_modified_features",
    "has_modified_features",
    "lookup_type",
    "migrate_business_type",
    "migrate_legacy_features",
    "needs_migration",
    "render_content_preset",
    "resolve_settings",
    "resolve_settings_report",
    "types_in_category",
]
