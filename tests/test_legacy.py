import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from bizsite.business_types import BusinessType
from bizsite.features import FEATURE_KEYS, NEW_FEATURE_KEYS
from bizsite.legacy import (
    LEGACY_BUSINESS_TYPES,
    is_legacy_business_type,
    is_legacy_feature_set,
    migrate_business_type,
    migrate_legacy_features,
)


LEGACY_FEATURES = {
    "menuSystem": True,
    "bookingSystem": False,
    "portfolioGallery": True,
    "quoteRequests": False,
    "testimonials": True,
    "teamMembers": False,
    "faqSection": True,
}


class TestBusinessTypeMigration(unittest.TestCase):
    def test_literal_mappings(self) -> None:
        self.assertEqual(migrate_business_type("contractor"), BusinessType.PLUMBER)
        self.assertEqual(migrate_business_type("professional"), BusinessType.CONSULTANT)
        self.assertEqual(migrate_business_type("salon"), BusinessType.SALON)
        self.assertEqual(migrate_business_type("unknown_type"), BusinessType.CUSTOM)
        self.assertEqual(migrate_business_type(""), BusinessType.CUSTOM)

    def test_every_legacy_identifier_maps_to_a_current_type(self) -> None:
        for legacy_id in LEGACY_BUSINESS_TYPES:
            self.assertIsInstance(migrate_business_type(legacy_id), BusinessType)

    def test_current_types_pass_through(self) -> None:
        for btype in BusinessType:
            self.assertEqual(migrate_business_type(btype.value), btype)

    def test_total_over_garbage(self) -> None:
        for value in ("   ", "PLUMBER", "contractor ", "🚧", None, 7, {"a": 1}, [], True):
            self.assertEqual(migrate_business_type(value), BusinessType.CUSTOM)

    def test_is_legacy_business_type(self) -> None:
        self.assertTrue(is_legacy_business_type("contractor"))
        self.assertTrue(is_legacy_business_type("professional"))
        self.assertFalse(is_legacy_business_type("salon"))
        self.assertFalse(is_legacy_business_type("plumber"))
        self.assertFalse(is_legacy_business_type(None))


class TestFeatureMigration(unittest.TestCase):
    def test_literal_shape(self) -> None:
        migrated = migrate_legacy_features(LEGACY_FEATURES)
        self.assertEqual(len(migrated), 14)
        self.assertEqual(list(migrated.keys()), list(FEATURE_KEYS))
        for key, value in LEGACY_FEATURES.items():
            self.assertIs(migrated[key], value)
        for key in NEW_FEATURE_KEYS:
            self.assertIs(migrated[key], False)

    def test_idempotent(self) -> None:
        once = migrate_legacy_features(LEGACY_FEATURES)
        twice = migrate_legacy_features(once)
        self.assertEqual(once, twice)

    def test_partial_and_malformed_input(self) -> None:
        migrated = migrate_legacy_features({"menuSystem": True, "faqSection": "yes", "extra": True})
        self.assertTrue(migrated["menuSystem"])
        self.assertFalse(migrated["faqSection"])
        self.assertNotIn("extra", migrated)
        self.assertEqual(migrate_legacy_features(None), {key: False for key in FEATURE_KEYS})
        self.assertEqual(migrate_legacy_features("nope"), {key: False for key in FEATURE_KEYS})

    def test_input_not_mutated(self) -> None:
        source = dict(LEGACY_FEATURES)
        migrate_legacy_features(source)
        self.assertEqual(source, LEGACY_FEATURES)

    def test_legacy_detection(self) -> None:
        self.assertTrue(is_legacy_feature_set(LEGACY_FEATURES))
        self.assertTrue(is_legacy_feature_set({}))
        self.assertFalse(is_legacy_feature_set(migrate_legacy_features(LEGACY_FEATURES)))
        self.assertFalse(is_legacy_feature_set(None))
        partial = migrate_legacy_features(LEGACY_FEATURES)
        del partial["insuranceBadges"]
        self.assertTrue(is_legacy_feature_set(partial))


if __name__ == "__main__":
    unittest.main()
