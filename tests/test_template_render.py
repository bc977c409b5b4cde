import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from jinja2.exceptions import TemplateSyntaxError, UndefinedError

from bizsite.template_render import collect_undeclared_vars, has_placeholders, render_template


class TestTemplateRender(unittest.TestCase):
    def test_plain_text_is_returned_as_is(self) -> None:
        self.assertEqual(render_template("Our Process", {}), "Our Process")
        self.assertEqual(render_template(None, {}), "")
        self.assertFalse(has_placeholders("Our Process"))

    def test_default_filter(self) -> None:
        text = "Why Choose {{ business_name | default('Us', true) }}?"
        self.assertEqual(render_template(text, {"business_name": "Bloom"}), "Why Choose Bloom?")
        self.assertEqual(render_template(text, {}), "Why Choose Us?")

    def test_non_strict_missing_renders_empty(self) -> None:
        self.assertEqual(render_template("Hi {{ name }}!", {}), "Hi !")

    def test_strict_missing_raises(self) -> None:
        with self.assertRaises(UndefinedError):
            render_template("Hi {{ name }}!", {}, strict=True)

    def test_values_are_stringified(self) -> None:
        self.assertEqual(render_template("{{ count }} years", {"count": 12}), "12 years")

    def test_disallowed_filter_fails(self) -> None:
        with self.assertRaises(TemplateSyntaxError):
            render_template("{{ name | tojson }}", {"name": "x"})

    def test_collect_undeclared_vars(self) -> None:
        self.assertEqual(
            collect_undeclared_vars("Why Choose {{ business_name | default('Us', true) }}?"),
            {"business_name"},
        )
        self.assertEqual(collect_undeclared_vars(""), set())


if __name__ == "__main__":
    unittest.main()
