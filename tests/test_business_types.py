import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from bizsite.business_types import (
    BUSINESS_CATEGORIES,
    BusinessCategory,
    BusinessType,
    category_of,
    get_business_type_info,
    get_category_info,
    list_business_types,
    list_categories,
    lookup_type,
    types_in_category,
)


class TestTypeRegistry(unittest.TestCase):
    def test_catalog_sizes(self) -> None:
        self.assertEqual(len(BusinessType), 56)
        self.assertEqual(len(BusinessCategory), 10)
        self.assertEqual(len(BUSINESS_CATEGORIES), 10)

    def test_categories_partition_types(self) -> None:
        listed = [t for cat in BUSINESS_CATEGORIES for t in cat.types]
        self.assertEqual(len(listed), len(set(listed)))
        self.assertEqual(set(listed), set(BusinessType))

    def test_every_type_has_complete_info(self) -> None:
        for btype in BusinessType:
            info = lookup_type(btype.value)
            self.assertIsNotNone(info, btype)
            self.assertEqual(info.id, btype)
            self.assertTrue(info.label)
            self.assertTrue(info.short_label)
            self.assertTrue(info.icon)
            self.assertTrue(info.description)
            self.assertIn(btype, category_of(btype).types)

    def test_lookup_type(self) -> None:
        info = lookup_type("plumber")
        self.assertEqual(info.label, "Plumber")
        self.assertEqual(info.category, BusinessCategory.HOME_SERVICES)
        self.assertIs(lookup_type(BusinessType.SPA).id, BusinessType.SPA)

    def test_lookup_absent_returns_none(self) -> None:
        for value in ("", "contractor", "PLUMBER", None, 42, ["plumber"]):
            self.assertIsNone(lookup_type(value))

    def test_get_business_type_info_falls_back_to_custom(self) -> None:
        self.assertEqual(get_business_type_info("nope").id, BusinessType.CUSTOM)
        self.assertEqual(get_business_type_info("dental").short_label, "Dental")

    def test_category_of(self) -> None:
        self.assertEqual(category_of("salon").id, BusinessCategory.BEAUTY_WELLNESS)
        self.assertEqual(category_of(BusinessType.TOWING).id, BusinessCategory.AUTOMOTIVE)
        self.assertEqual(category_of("custom").id, BusinessCategory.OTHER)
        self.assertEqual(category_of("garbage").id, BusinessCategory.OTHER)

    def test_types_in_category_is_ordered(self) -> None:
        self.assertEqual(
            types_in_category("education"),
            (
                BusinessType.TUTORING,
                BusinessType.MUSIC_LESSONS,
                BusinessType.DRIVING_SCHOOL,
                BusinessType.LANGUAGE_SCHOOL,
            ),
        )
        self.assertEqual(types_in_category(BusinessCategory.OTHER), (BusinessType.CUSTOM,))
        self.assertEqual(types_in_category("unknown"), ())
        self.assertIsNone(get_category_info("unknown"))

    def test_list_business_types_follows_category_order(self) -> None:
        types = list_business_types()
        self.assertEqual(len(types), 56)
        self.assertEqual(types[0].id, BusinessType.RESTAURANT)
        self.assertEqual(types[-1].id, BusinessType.CUSTOM)
        categories = list_categories()
        self.assertEqual(categories[0].id, BusinessCategory.FOOD_BEVERAGE)
        self.assertEqual(categories[-1].id, BusinessCategory.OTHER)

    def test_to_dict_shapes(self) -> None:
        data = lookup_type("it_services").to_dict()
        self.assertEqual(data["id"], "it_services")
        self.assertEqual(data["shortLabel"], "IT Services")
        self.assertEqual(data["category"], "professional_services")
        cat = category_of("it_services").to_dict()
        self.assertIn("it_services", cat["types"])

    def test_enum_values_compare_as_strings(self) -> None:
        self.assertEqual(BusinessType.PLUMBER, "plumber")
        self.assertEqual(BusinessCategory.OTHER, "other")


if __name__ == "__main__":
    unittest.main()
