import copy
import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from bizsite.config import StoreConfig, base_settings
from bizsite.features import get_feature_defaults
from bizsite.settings import resolve_settings
from bizsite.type_selection import (
    describe_selection,
    reset_features,
    select_business_type,
    set_feature,
    toggle_feature,
)


class TestTypeSelection(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = resolve_settings(base_settings(StoreConfig(name="Bloom")), {"businessType": "plumber"})

    def test_select_applies_defaults_and_copy(self) -> None:
        before = copy.deepcopy(self.settings)
        updated = select_business_type(self.settings, "salon")
        self.assertEqual(updated["businessType"], "salon")
        self.assertEqual(updated["enabledFeatures"], get_feature_defaults("salon"))
        self.assertFalse(updated["featuresModified"])
        self.assertEqual(updated["heroHeading"], "Look & Feel")
        self.assertEqual(updated["whyChooseUsTitle"], "Why Choose Bloom?")
        self.assertFalse(updated["emergencyBannerEnabled"])
        self.assertEqual(self.settings, before)

    def test_select_without_content_defaults(self) -> None:
        updated = select_business_type(self.settings, "salon", apply_content_defaults=False)
        self.assertEqual(updated["businessType"], "salon")
        self.assertEqual(updated["heroHeading"], "Professional")

    def test_select_unknown_type(self) -> None:
        with self.assertLogs("bizsite.type_selection", level="INFO"):
            updated = select_business_type(self.settings, "spaceship")
        self.assertEqual(updated["businessType"], "custom")
        self.assertEqual(updated["enabledFeatures"], get_feature_defaults("custom"))

    def test_toggle_tracks_modification(self) -> None:
        modified = toggle_feature(self.settings, "menuSystem")
        self.assertTrue(modified["enabledFeatures"]["menuSystem"])
        self.assertTrue(modified["featuresModified"])
        restored = toggle_feature(modified, "menuSystem")
        self.assertFalse(restored["enabledFeatures"]["menuSystem"])
        self.assertFalse(restored["featuresModified"])

    def test_reset_returns_to_migrated_state(self) -> None:
        modified = set_feature(self.settings, "bookingSystem", True)
        self.assertTrue(modified["featuresModified"])
        self.assertEqual(reset_features(modified), self.settings)

    def test_unknown_feature_key_is_ignored(self) -> None:
        self.assertEqual(set_feature(self.settings, "teleporter", True), self.settings)
        self.assertEqual(toggle_feature(self.settings, "teleporter"), self.settings)

    def test_describe_selection(self) -> None:
        summary = describe_selection(toggle_feature(self.settings, "menuSystem"))
        self.assertEqual(summary["type"]["id"], "plumber")
        self.assertEqual(summary["category"]["id"], "home_services")
        self.assertTrue(summary["featuresModified"])
        self.assertEqual(
            summary["modifiedFeatures"],
            [{"key": "menuSystem", "defaultValue": False, "currentValue": True}],
        )
        self.assertEqual(summary["enabledCount"], 10)


if __name__ == "__main__":
    unittest.main()
