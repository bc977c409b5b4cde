import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from bizsite.config import TierLimits
from bizsite.features import get_feature_defaults
from bizsite.navigation import (
    ADMIN_TOUR_STEPS,
    admin_nav_links,
    can_add_service,
    filter_tour_steps,
    gate_pro_features,
    public_quick_links,
)


def _labels(links) -> list:
    return [link["label"] for link in links]


class TestAdminNav(unittest.TestCase):
    def test_catering_links(self) -> None:
        links = admin_nav_links(get_feature_defaults("catering"))
        self.assertEqual(
            _labels(links),
            ["Dashboard", "Services", "Menu", "Portfolio", "Team", "Inquiries", "Settings"],
        )
        self.assertIn({"href": "/admin/menu", "label": "Menu"}, links)

    def test_no_features(self) -> None:
        self.assertEqual(_labels(admin_nav_links(None)), ["Dashboard", "Services", "Inquiries", "Settings"])


class TestPublicLinks(unittest.TestCase):
    def test_restaurant(self) -> None:
        settings = {"enabledFeatures": get_feature_defaults("restaurant"), "showBookingPage": False, "showFaq": False}
        self.assertEqual(_labels(public_quick_links(settings)), ["Home", "Services", "Menu", "Contact", "FAQ"])

    def test_booking_needs_page_toggle(self) -> None:
        settings = {"enabledFeatures": get_feature_defaults("restaurant"), "showBookingPage": True}
        self.assertEqual(
            _labels(public_quick_links(settings)),
            ["Home", "Services", "Menu", "Booking", "Contact", "FAQ"],
        )

    def test_faq_from_section_toggle(self) -> None:
        settings = {"enabledFeatures": get_feature_defaults("cafe"), "showFaq": True}
        self.assertEqual(_labels(public_quick_links(settings)), ["Home", "Services", "Menu", "Contact", "FAQ"])
        settings["showFaq"] = False
        self.assertEqual(_labels(public_quick_links(settings)), ["Home", "Services", "Menu", "Contact"])


class TestTourAndTiers(unittest.TestCase):
    def test_tour_steps_follow_features(self) -> None:
        steps = filter_tour_steps(ADMIN_TOUR_STEPS, get_feature_defaults("restaurant"))
        ids = [step["id"] for step in steps]
        self.assertNotIn("portfolio", ids)
        self.assertIn("menu", ids)
        self.assertIn("booking", ids)
        self.assertEqual(len(steps), len(ADMIN_TOUR_STEPS) - 1)

    def test_tour_without_features_keeps_everything(self) -> None:
        self.assertEqual(len(filter_tour_steps(ADMIN_TOUR_STEPS, None)), len(ADMIN_TOUR_STEPS))

    def test_pro_only_features_are_gated(self) -> None:
        salon = get_feature_defaults("salon")
        self.assertTrue(salon["beforeAfterGallery"])
        self.assertFalse(gate_pro_features(salon, TierLimits())["beforeAfterGallery"])
        self.assertTrue(gate_pro_features(salon, TierLimits(payment_tier="pro"))["beforeAfterGallery"])
        self.assertTrue(gate_pro_features(salon, TierLimits())["bookingSystem"])

    def test_service_limit(self) -> None:
        limits = TierLimits()
        self.assertTrue(can_add_service(9, limits))
        self.assertFalse(can_add_service(10, limits))
        self.assertTrue(can_add_service(500, TierLimits(max_services=None)))


if __name__ == "__main__":
    unittest.main()
