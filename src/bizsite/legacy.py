"""Migration of the 7-type / 7-flag settings schema to the current one."""

from __future__ import annotations

from typing import Any, Dict, Tuple

from .business_types import BusinessType, coerce_business_type
from .features import FEATURE_KEYS, LEGACY_FEATURE_KEYS, NEW_FEATURE_KEYS, Features


LEGACY_BUSINESS_TYPES: Tuple[str, ...] = (
    "restaurant",
    "catering",
    "contractor",
    "salon",
    "professional",
    "cleaning",
    "custom",
)

LEGACY_TYPE_MAPPING: Dict[str, BusinessType] = {
    "restaurant": BusinessType.RESTAURANT,
    "catering": BusinessType.CATERING,
    "contractor": BusinessType.PLUMBER,
    "salon": BusinessType.SALON,
    "professional": BusinessType.CONSULTANT,
    "cleaning": BusinessType.CLEANING,
    "custom": BusinessType.CUSTOM,
}


def is_legacy_business_type(value: Any) -> bool:
    """True for identifiers that only exist in the old schema."""
    return isinstance(value, str) and value in LEGACY_TYPE_MAPPING and coerce_business_type(value) is None


def migrate_business_type(legacy_id: Any) -> BusinessType:
    if isinstance(legacy_id, str) and legacy_id in LEGACY_TYPE_MAPPING:
        return LEGACY_TYPE_MAPPING[legacy_id]
    return coerce_business_type(legacy_id) or BusinessType.CUSTOM


def is_legacy_feature_set(features: Any) -> bool:
    # Structural check only: any missing new-schema key marks the document as legacy.
    if not isinstance(features, dict):
        return False
    return any(key not in features for key in NEW_FEATURE_KEYS)


def migrate_legacy_features(legacy: Any) -> Features:
    """Lift a 7-flag feature object into the 14-flag schema.

    Legacy keys keep their boolean values, absent ones become False, the seven
    newer flags start off, and anything else in the input is dropped. Running
    it on its own output is a no-op.
    """
    source = legacy if isinstance(legacy, dict) else {}
    migrated: Features = {}
    for key in FEATURE_KEYS:
        if key in LEGACY_FEATURE_KEYS:
            value = source.get(key)
            migrated[key] = value if isinstance(value, bool) else False
        else:
            migrated[key] = False
    return migrated
