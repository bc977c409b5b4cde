"""Divergence of a tenant's feature flags from the canonical type defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .features import FEATURE_KEYS, get_feature_defaults


@dataclass(frozen=True)
class FeatureChange:
    key: str
    default_value: bool
    current_value: Any

    def to_dict(self) -> dict:
        return {"key": self.key, "defaultValue": self.default_value, "currentValue": self.current_value}


def _current(candidate: Any, key: str) -> Any:
    if not isinstance(candidate, dict):
        return None
    return candidate.get(key)


def get_modified_features(business_type: Any, candidate: Any) -> list[FeatureChange]:
    """Per-key comparison in canonical order; a missing key counts as changed."""
    defaults = get_feature_defaults(business_type)
    changes: list[FeatureChange] = []
    for key in FEATURE_KEYS:
        current = _current(candidate, key)
        if current is not defaults[key]:
            changes.append(FeatureChange(key, defaults[key], current))
    return changes


def has_modified_features(business_type: Any, candidate: Any) -> bool:
    defaults = get_feature_defaults(business_type)
    return any(_current(candidate, key) is not defaults[key] for key in FEATURE_KEYS)
