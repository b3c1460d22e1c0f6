import tempfile
import unittest
from pathlib import Path

from fitnosh_generator.config import get_layout_config, load_yaml_config
from fitnosh_generator.models import MealPlan, OverlayLayout


class TestDefaultLayout(unittest.TestCase):

    def setUp(self):
        self.layout = OverlayLayout()

    def test_logo_box(self):
        self.assertEqual(self.layout.logo_box(), (30, 30, 250, 250))

    def test_labels_stack_below_logo(self):
        meal = MealPlan(Breakfast="Idli", Snack="Chai", Lunch="Dosa")
        self.assertEqual(
            self.layout.label_positions(meal),
            [("Idli", 30, 320), ("Chai", 30, 360), ("Dosa", 30, 400)],
        )

    def test_label_without_element_is_skipped(self):
        layout = OverlayLayout(
            elements=[e for e in OverlayLayout().elements if e.role != "snack"]
        )
        texts = [text for text, _, _ in layout.label_positions(MealPlan())]
        self.assertEqual(texts, [MealPlan().Breakfast, MealPlan().Lunch])

    def test_no_logo_element(self):
        layout = OverlayLayout(elements=[])
        self.assertIsNone(layout.logo_box())
        self.assertEqual(layout.label_positions(MealPlan()), [])


class TestLayoutConfig(unittest.TestCase):

    def test_shipped_config_matches_defaults(self):
        layout = OverlayLayout.from_config(get_layout_config())
        self.assertEqual(layout.elements, OverlayLayout().elements)
        self.assertEqual(layout.text_style.fill, "#FDCF16")
        self.assertFalse(layout.placeholder.enabled)

    def test_partial_override(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "layout.yaml"
            path.write_text(
                "overlay:\n"
                "  text_style:\n"
                "    size: 48\n"
                "  placeholder:\n"
                "    enabled: true\n"
            )
            layout = OverlayLayout.from_config(load_yaml_config(path))
        self.assertEqual(layout.text_style.size, 48)
        self.assertTrue(layout.placeholder.enabled)
        self.assertEqual(layout.logo_box(), (30, 30, 250, 250))

    def test_missing_file_gives_defaults(self):
        config = load_yaml_config(Path("/nonexistent/layout.yaml"))
        self.assertEqual(config, {})
        self.assertEqual(OverlayLayout.from_config(config), OverlayLayout())


if __name__ == "__main__":
    unittest.main()
