"""Navigation, guided-tour steps and tier gating derived from feature flags."""

from __future__ import annotations

from typing import Any, Iterable, List

from .config import TierLimits
from .features import FEATURE_KEYS, FEATURE_METADATA, Features


def _enabled(features: Any, key: str) -> bool:
    return isinstance(features, dict) and features.get(key) is True


def admin_nav_links(features: Any) -> list[dict]:
    links = [
        {"href": "/admin", "label": "Dashboard"},
        {"href": "/admin/services", "label": "Services"},
    ]
    for meta in FEATURE_METADATA:
        if meta.admin_nav_label and _enabled(features, meta.key):
            links.append({"href": f"/admin/{meta.admin_nav_label.lower()}", "label": meta.admin_nav_label})
    links.append({"href": "/admin/inquiries", "label": "Inquiries"})
    links.append({"href": "/admin/settings", "label": "Settings"})
    return links


def public_quick_links(settings: dict) -> list[dict]:
    features = settings.get("enabledFeatures")
    links = [{"href": "/", "label": "Home"}, {"href": "/services", "label": "Services"}]
    if _enabled(features, "menuSystem"):
        links.append({"href": "/menu", "label": "Menu"})
    if _enabled(features, "portfolioGallery"):
        links.append({"href": "/portfolio", "label": "Portfolio"})
    if _enabled(features, "bookingSystem") and settings.get("showBookingPage") is True:
        links.append({"href": "/booking", "label": "Booking"})
    links.append({"href": "/contact", "label": "Contact"})
    if _enabled(features, "faqSection") or settings.get("showFaq") is True:
        links.append({"href": "/faq", "label": "FAQ"})
    return links


ADMIN_TOUR_STEPS: tuple[dict, ...] = (
    {"id": "welcome", "title": "Welcome to Your Services Admin!"},
    {"id": "dashboard", "title": "Dashboard Overview"},
    {"id": "services", "title": "Services Management"},
    {"id": "portfolio", "title": "Portfolio Gallery", "featureRequired": "portfolioGallery"},
    {"id": "menu", "title": "Menu Builder", "featureRequired": "menuSystem"},
    {"id": "booking", "title": "Booking System", "featureRequired": "bookingSystem"},
    {"id": "inquiries", "title": "Customer Inquiries"},
    {"id": "faq", "title": "FAQ Management"},
    {"id": "settings", "title": "Business Settings"},
    {"id": "view-site", "title": "Preview Your Site"},
    {"id": "complete", "title": "You're All Set!"},
)


def filter_tour_steps(steps: Iterable[dict], features: Features | None) -> List[dict]:
    if features is None:
        return [dict(step) for step in steps]
    kept = []
    for step in steps:
        required = step.get("featureRequired")
        if required and not _enabled(features, required):
            continue
        kept.append(dict(step))
    return kept


def gate_pro_features(features: Features, limits: TierLimits) -> Features:
    """Switch off pro-only flags for tiers that do not include them."""
    gated = {key: features.get(key) is True for key in FEATURE_KEYS}
    if limits.is_pro:
        return gated
    for meta in FEATURE_METADATA:
        if meta.pro_only:
            gated[meta.key] = False
    return gated


def can_add_service(current_count: int, limits: TierLimits) -> bool:
    if limits.max_services is None:
        return True
    return current_count < limits.max_services
