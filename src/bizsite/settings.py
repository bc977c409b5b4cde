"""Runtime settings resolution: base defaults + persisted document -> full settings.

The merge is driven by an explicit per-field rule table instead of a generic
deep merge, because the fields disagree about what "unset" means:

- ``EMPTY``   missing, None or "" falls back. An empty list is kept, so a
              tenant can clear its process steps or stats.
- ``NULLISH`` missing or None falls back. A persisted "" is kept.
- ``STRICT``  only a missing key falls back. A persisted False or 0 is kept;
              a value of the wrong kind (None included) is reported and
              replaced.

Nothing here raises on bad input. Anomalies come back as issue dicts next to
the settings from :func:`resolve_settings_report`.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .business_types import BusinessType, coerce_business_type
from .content_presets import preset_settings
from .feature_diff import has_modified_features
from .features import FEATURE_KEYS, Features, get_feature_defaults
from .legacy import is_legacy_business_type, is_legacy_feature_set, migrate_business_type, migrate_legacy_features

logger = logging.getLogger("bizsite.settings")

Issue = Dict[str, Any]

EMPTY = "empty"
NULLISH = "nullish"
STRICT = "strict"


def _issue(code: str, message: str, path: str | None = None, detail: dict | None = None) -> Issue:
    return {"code": code, "message": message, "path": path, "detail": detail}


@dataclass(frozen=True)
class FieldRule:
    name: str
    policy: str
    kind: str
    default: Any = None
    preset: bool = False


_DEFAULT_STATS = (
    {"value": "10+", "label": "Years Experience"},
    {"value": "500+", "label": "Happy Customers"},
    {"value": "100%", "label": "Satisfaction Rate"},
)

SETTINGS_FIELDS: Tuple[FieldRule, ...] = (
    # Branding
    FieldRule("businessName", NULLISH, "str", ""),
    FieldRule("themePreset", EMPTY, "str", "default"),
    FieldRule("brandColor", EMPTY, "str", "#FFD700"),
    FieldRule("logoUrl", EMPTY, "str", ""),
    FieldRule("tagline", NULLISH, "str", ""),
    FieldRule("aboutText", NULLISH, "str", ""),
    # Contact
    FieldRule("contactMode", EMPTY, "str", "form"),
    FieldRule("calendlyUrl", NULLISH, "str", ""),
    FieldRule("phoneNumber", NULLISH, "str", ""),
    FieldRule("contactEmail", NULLISH, "str", ""),
    FieldRule("address", NULLISH, "str", ""),
    FieldRule("businessHours", NULLISH, "str", "Mon-Fri 9am-5pm"),
    FieldRule("serviceAreas", EMPTY, "list", ()),
    FieldRule("mapEmbedUrl", NULLISH, "str", ""),
    FieldRule("mapTitle", NULLISH, "str", ""),
    # Section toggles
    FieldRule("showProcess", STRICT, "bool", True),
    FieldRule("showStats", STRICT, "bool", True),
    FieldRule("showTeam", STRICT, "bool", False),
    FieldRule("showTestimonials", STRICT, "bool", True),
    FieldRule("showPortfolio", STRICT, "bool", False),
    FieldRule("showFaq", STRICT, "bool", True),
    FieldRule("showMapEmbed", STRICT, "bool", False),
    FieldRule("showAdditionalServices", STRICT, "bool", False),
    # Stats and reviews
    FieldRule("stats", EMPTY, "list", _DEFAULT_STATS),
    FieldRule("reviewCount", STRICT, "number", 0),
    FieldRule("overallRating", STRICT, "number", 5.0),
    FieldRule("googleReviewsUrl", NULLISH, "str", ""),
    # Hero
    FieldRule("heroStyle", EMPTY, "str", "gradient"),
    FieldRule("heroImageUrl", NULLISH, "str", ""),
    FieldRule("heroVideoUrl", NULLISH, "str", ""),
    FieldRule("heroHeading", NULLISH, "str", preset=True),
    FieldRule("heroHeadingAccent", NULLISH, "str", preset=True),
    FieldRule("heroSubheading", NULLISH, "str", preset=True),
    FieldRule("heroBadgeText", NULLISH, "str", preset=True),
    FieldRule("heroCTAText", NULLISH, "str", preset=True),
    FieldRule("heroSecondaryCTAText", NULLISH, "str", preset=True),
    # Trust, process and "why choose us" copy
    FieldRule("trustBadges", NULLISH, "list", preset=True),
    FieldRule("process", EMPTY, "list", preset=True),
    FieldRule("processTitle", NULLISH, "str", preset=True),
    FieldRule("processSubtitle", NULLISH, "str", preset=True),
    FieldRule("processCTAText", NULLISH, "str", preset=True),
    FieldRule("whyChooseUsTitle", NULLISH, "str", preset=True),
    FieldRule("whyChooseUsHeading", NULLISH, "str", preset=True),
    FieldRule("whyChooseUsText", NULLISH, "str", preset=True),
    FieldRule("emergencyBannerText", NULLISH, "str", preset=True),
    FieldRule("emergencyBannerEnabled", STRICT, "bool", preset=True),
    # Booking
    FieldRule("bookingUrl", NULLISH, "str", ""),
    FieldRule("bookingDisplayMode", EMPTY, "str", "embed"),
    FieldRule("bookingButtonText", EMPTY, "str", "Book Now"),
    FieldRule("bookingDescription", NULLISH, "str", ""),
    FieldRule("showBookingPage", STRICT, "bool", False),
    FieldRule("showBookingOnHero", STRICT, "bool", False),
    FieldRule("showBookingOnServicePages", STRICT, "bool", False),
    # Social
    FieldRule("instagramUrl", NULLISH, "str", ""),
    FieldRule("facebookUrl", NULLISH, "str", ""),
    FieldRule("twitterUrl", NULLISH, "str", ""),
    FieldRule("linkedinUrl", NULLISH, "str", ""),
)

FIELD_RULES: Dict[str, FieldRule] = {rule.name: rule for rule in SETTINGS_FIELDS}

# Keys computed by the merge itself rather than through the rule table.
CORE_KEYS = ("businessType", "enabledFeatures", "featuresModified")


def _kind_ok(kind: str, value: Any) -> bool:
    if kind == "str":
        return isinstance(value, str)
    if kind == "bool":
        return isinstance(value, bool)
    if kind == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if kind == "list":
        return isinstance(value, list)
    if kind == "dict":
        return isinstance(value, dict)
    return True


def _is_unset(policy: str, value: Any) -> bool:
    if policy == STRICT:
        return False
    if value is None:
        return True
    if policy == EMPTY:
        return value == ""
    return False


def _resolve_field(
    rule: FieldRule,
    sources: List[Tuple[str, dict]],
    preset_values: dict,
    warnings: List[Issue],
) -> Any:
    for source_name, doc in sources:
        if rule.name not in doc:
            continue
        value = doc[rule.name]
        if _is_unset(rule.policy, value):
            continue
        if _kind_ok(rule.kind, value):
            return copy.deepcopy(value)
        warnings.append(
            _issue(
                "SETTINGS_FIELD_INVALID",
                f"{rule.name} must be {rule.kind}",
                f"{source_name}.{rule.name}",
                {"value_type": type(value).__name__},
            )
        )
    if rule.preset:
        return copy.deepcopy(preset_values[rule.name])
    if isinstance(rule.default, tuple):
        return copy.deepcopy(list(rule.default))
    return rule.default


def _resolve_business_type(persisted: dict, base: dict, warnings: List[Issue]) -> BusinessType:
    raw = persisted.get("businessType")
    source = "persisted"
    if _is_unset(EMPTY, raw):
        raw = base.get("businessType")
        source = "base"
    if _is_unset(EMPTY, raw):
        return BusinessType.CUSTOM
    btype = coerce_business_type(raw)
    if btype is not None:
        return btype
    migrated = migrate_business_type(raw)
    if is_legacy_business_type(raw):
        logger.info("settings_legacy_type_migrated from=%s to=%s", raw, migrated.value)
        warnings.append(
            _issue(
                "SETTINGS_LEGACY_TYPE_MIGRATED",
                "legacy business type migrated",
                f"{source}.businessType",
                {"from": raw, "to": migrated.value},
            )
        )
    else:
        logger.warning("settings_unknown_business_type value=%r fallback=%s", raw, migrated.value)
        warnings.append(
            _issue(
                "SETTINGS_UNKNOWN_TYPE",
                "unknown business type; using custom",
                f"{source}.businessType",
                {"value": raw if isinstance(raw, str) else type(raw).__name__},
            )
        )
    return migrated


def _normalize_features(raw: dict, business_type: BusinessType, source: str, warnings: List[Issue]) -> Features:
    defaults = get_feature_defaults(business_type)
    features: Features = {}
    for key in FEATURE_KEYS:
        value = raw.get(key)
        if isinstance(value, bool):
            features[key] = value
            continue
        if key in raw:
            warnings.append(
                _issue(
                    "SETTINGS_FIELD_INVALID",
                    f"feature flag {key} must be bool",
                    f"{source}.enabledFeatures.{key}",
                    {"value_type": type(value).__name__},
                )
            )
        features[key] = defaults[key]
    return features


def _features_from(doc: dict, source: str, business_type: BusinessType, warnings: List[Issue]) -> Features | None:
    if "enabledFeatures" not in doc or doc["enabledFeatures"] is None:
        return None
    raw = doc["enabledFeatures"]
    if not isinstance(raw, dict):
        warnings.append(
            _issue(
                "SETTINGS_FIELD_INVALID",
                "enabledFeatures must be an object",
                f"{source}.enabledFeatures",
                {"value_type": type(raw).__name__},
            )
        )
        return None
    if is_legacy_feature_set(raw):
        logger.info("settings_legacy_features_migrated source=%s keys=%s", source, len(raw))
        warnings.append(
            _issue(
                "SETTINGS_LEGACY_FEATURES_MIGRATED",
                "legacy feature flags migrated to the current schema",
                f"{source}.enabledFeatures",
                {"missing": [k for k in FEATURE_KEYS if k not in raw]},
            )
        )
        return migrate_legacy_features(raw)
    return _normalize_features(raw, business_type, source, warnings)


def needs_migration(persisted: Any) -> bool:
    """True when the stored document still uses the legacy type or flag schema."""
    if not isinstance(persisted, dict):
        return False
    return is_legacy_business_type(persisted.get("businessType")) or is_legacy_feature_set(
        persisted.get("enabledFeatures")
    )


def resolve_settings_report(base: Any, persisted: Any) -> tuple[dict, List[Issue]]:
    warnings: List[Issue] = []
    if base is not None and not isinstance(base, dict):
        warnings.append(
            _issue("SETTINGS_DOCUMENT_INVALID", "base settings must be an object", "base", {"value_type": type(base).__name__})
        )
    if persisted is not None and not isinstance(persisted, dict):
        warnings.append(
            _issue(
                "SETTINGS_DOCUMENT_INVALID",
                "persisted settings must be an object",
                "persisted",
                {"value_type": type(persisted).__name__},
            )
        )
    base_doc: dict = base if isinstance(base, dict) else {}
    persisted_doc: dict = persisted if isinstance(persisted, dict) else {}

    business_type = _resolve_business_type(persisted_doc, base_doc, warnings)

    features = _features_from(persisted_doc, "persisted", business_type, warnings)
    if features is None:
        features = _features_from(base_doc, "base", business_type, warnings)
    if features is None:
        features = get_feature_defaults(business_type)

    sources = [("persisted", persisted_doc), ("base", base_doc)]
    name_rule = FIELD_RULES["businessName"]
    business_name = _resolve_field(name_rule, sources, {}, [])
    preset_values = preset_settings(business_type, business_name or None)

    settings: dict = {}
    for doc in (base_doc, persisted_doc):
        for key, value in doc.items():
            if key in FIELD_RULES or key in CORE_KEYS:
                continue
            settings[key] = copy.deepcopy(value)
    for rule in SETTINGS_FIELDS:
        settings[rule.name] = _resolve_field(rule, sources, preset_values, warnings)

    settings["businessType"] = business_type.value
    settings["enabledFeatures"] = features
    stored_flag = persisted_doc.get("featuresModified")
    # A flag stored before migration describes the old type and flag set.
    if isinstance(stored_flag, bool) and not needs_migration(persisted_doc):
        settings["featuresModified"] = stored_flag
    else:
        settings["featuresModified"] = has_modified_features(business_type, features)

    logger.debug(
        "settings_resolved business_type=%s features_modified=%s warnings=%s",
        business_type.value,
        settings["featuresModified"],
        len(warnings),
    )
    return settings, warnings


def resolve_settings(base: Any, persisted: Any) -> dict:
    """Merge ``persisted`` over ``base`` into a complete settings document."""
    settings, _ = resolve_settings_report(base, persisted)
    return settings
