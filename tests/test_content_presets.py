import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from bizsite.business_types import BusinessCategory, BusinessType
from bizsite.content_presets import (
    CATEGORY_CONTENT_PRESETS,
    PRESET_SETTING_KEYS,
    get_content_preset,
    preset_settings,
    render_content_preset,
)


class TestContentPresets(unittest.TestCase):
    def test_every_category_has_a_preset(self) -> None:
        self.assertEqual(set(CATEGORY_CONTENT_PRESETS), set(BusinessCategory))

    def test_every_type_resolves_to_complete_copy(self) -> None:
        for btype in BusinessType:
            preset = get_content_preset(btype)
            self.assertTrue(preset.hero_heading, btype)
            self.assertTrue(preset.hero_cta_text, btype)
            self.assertGreaterEqual(len(preset.process_steps), 1)
            self.assertGreaterEqual(len(preset.trust_badges), 1)

    def test_custom_uses_other_preset(self) -> None:
        preset = get_content_preset("custom")
        template = CATEGORY_CONTENT_PRESETS[BusinessCategory.OTHER]
        self.assertEqual(preset.hero_heading, template.hero_heading)
        self.assertEqual(preset.process_steps, template.process_steps)
        self.assertTrue(preset.hero_heading)
        self.assertGreaterEqual(len(preset.process_steps), 1)

    def test_resolved_copy_has_no_template_markup(self) -> None:
        for btype in BusinessType:
            settings = get_content_preset(btype).to_settings()
            for key, value in settings.items():
                if isinstance(value, str):
                    self.assertNotIn("{{", value, (btype, key))
        self.assertEqual(get_content_preset("custom").why_choose_us_title, "Why Choose Us?")

    def test_unknown_type_uses_other_preset(self) -> None:
        self.assertEqual(get_content_preset("nope"), get_content_preset("custom"))
        self.assertEqual(get_content_preset(None), get_content_preset("custom"))

    def test_types_share_category_copy(self) -> None:
        self.assertEqual(get_content_preset("plumber"), get_content_preset("electrician"))
        self.assertEqual(get_content_preset("plumber").hero_heading_accent, "Home Services")
        self.assertTrue(get_content_preset("plumber").emergency_banner_enabled)
        self.assertFalse(get_content_preset("salon").emergency_banner_enabled)

    def test_process_steps_are_numbered(self) -> None:
        steps = get_content_preset("tutoring").process_steps
        self.assertEqual([s.step for s in steps], list(range(1, len(steps) + 1)))

    def test_business_name_personalizes_title(self) -> None:
        preset = get_content_preset("plumber", "Ace Plumbing")
        self.assertEqual(preset.why_choose_us_title, "Why Choose Ace Plumbing?")
        self.assertEqual(preset.hero_heading, "Professional")

    def test_default_store_name_keeps_generic_title(self) -> None:
        self.assertEqual(get_content_preset("plumber", "My Business").why_choose_us_title, "Why Choose Us?")
        self.assertEqual(get_content_preset("plumber", "").why_choose_us_title, "Why Choose Us?")

    def test_render_template_preset(self) -> None:
        template = CATEGORY_CONTENT_PRESETS[BusinessCategory.HOME_SERVICES]
        self.assertEqual(
            render_content_preset(template, {"business_name": "Ace Plumbing"}).why_choose_us_title,
            "Why Choose Ace Plumbing?",
        )
        self.assertEqual(render_content_preset(template).why_choose_us_title, "Why Choose Us?")
        self.assertEqual(render_content_preset(template, {"business_name": None}).why_choose_us_title, "Why Choose Us?")

    def test_render_leaves_registry_untouched(self) -> None:
        template = CATEGORY_CONTENT_PRESETS[BusinessCategory.BEAUTY_WELLNESS]
        render_content_preset(template, {"business_name": "Calm"})
        self.assertIn("{{", CATEGORY_CONTENT_PRESETS[BusinessCategory.BEAUTY_WELLNESS].why_choose_us_title)

    def test_preset_settings_keys(self) -> None:
        values = preset_settings("restaurant", "Luigi's")
        self.assertEqual(set(values), set(PRESET_SETTING_KEYS))
        self.assertEqual(values["heroHeading"], "Delicious Food")
        self.assertEqual(values["whyChooseUsTitle"], "Why Choose Luigi's?")
        self.assertEqual(values["process"][0]["step"], 1)
        self.assertIn("text", values["trustBadges"][0])

    def test_preset_settings_are_fresh(self) -> None:
        first = preset_settings("cafe")
        first["trustBadges"].append({"text": "x", "icon": "y"})
        self.assertNotEqual(len(preset_settings("cafe")["trustBadges"]), len(first["trustBadges"]))


if __name__ == "__main__":
    unittest.main()
