"""Admin-side transitions on a resolved settings document.

Each function returns a new dict; the input is left untouched.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from .business_types import BusinessType, category_of, coerce_business_type, get_business_type_info
from .content_presets import preset_settings
from .feature_diff import get_modified_features, has_modified_features
from .features import enabled_feature_keys, get_feature_defaults, is_feature_key

logger = logging.getLogger("bizsite.type_selection")


def _current_type(settings: dict) -> BusinessType:
    return coerce_business_type(settings.get("businessType")) or BusinessType.CUSTOM


def _features(settings: dict) -> dict:
    features = settings.get("enabledFeatures")
    if isinstance(features, dict):
        return dict(features)
    return get_feature_defaults(_current_type(settings))


def select_business_type(settings: dict, business_type: Any, apply_content_defaults: bool = True) -> dict:
    """Switch the tenant to ``business_type`` and reset its flags to that type's defaults.

    With ``apply_content_defaults`` the hero, trust badge, process and "why
    choose us" copy is overwritten by the type's rendered content preset.
    """
    btype = coerce_business_type(business_type) or BusinessType.CUSTOM
    updated = copy.deepcopy(settings)
    previous = updated.get("businessType")
    updated["businessType"] = btype.value
    updated["enabledFeatures"] = get_feature_defaults(btype)
    updated["featuresModified"] = False
    if apply_content_defaults:
        updated.update(preset_settings(btype, updated.get("businessName") or None))
    logger.info(
        "business_type_selected from=%s to=%s content_defaults=%s",
        previous,
        btype.value,
        apply_content_defaults,
    )
    return updated


def set_feature(settings: dict, key: str, enabled: bool) -> dict:
    updated = copy.deepcopy(settings)
    if not is_feature_key(key):
        return updated
    features = _features(updated)
    features[key] = bool(enabled)
    updated["enabledFeatures"] = features
    updated["featuresModified"] = has_modified_features(_current_type(updated), features)
    return updated


def toggle_feature(settings: dict, key: str) -> dict:
    if not is_feature_key(key):
        return copy.deepcopy(settings)
    return set_feature(settings, key, not _features(settings).get(key, False))


def reset_features(settings: dict) -> dict:
    updated = copy.deepcopy(settings)
    updated["enabledFeatures"] = get_feature_defaults(_current_type(updated))
    updated["featuresModified"] = False
    return updated


def describe_selection(settings: dict) -> dict:
    btype = _current_type(settings)
    features = _features(settings)
    return {
        "type": get_business_type_info(btype).to_dict(),
        "category": category_of(btype).to_dict(),
        "featuresModified": has_modified_features(btype, features),
        "modifiedFeatures": [change.to_dict() for change in get_modified_features(btype, features)],
        "enabledCount": len(enabled_feature_keys(features)),
    }
