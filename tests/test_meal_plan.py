import unittest

from fitnosh_generator.models import DEFAULT_MEAL, MealPlan


class TestMealPlanFromPayload(unittest.TestCase):

    def test_full_record_is_kept(self):
        meal = MealPlan.from_payload(
            {"Day": "Friday", "Breakfast": "Idli", "Snack": "Chai", "Lunch": "Dosa"}
        )
        self.assertEqual(meal.Day, "Friday")
        self.assertEqual(meal.dishes(), ("Idli", "Chai", "Dosa"))

    def test_missing_field_gets_only_its_default(self):
        meal = MealPlan.from_payload({"Day": "Monday", "Breakfast": "Poha", "Lunch": "Thali"})
        self.assertEqual(meal.Snack, DEFAULT_MEAL["Snack"])
        self.assertEqual(meal.Day, "Monday")
        self.assertEqual(meal.Breakfast, "Poha")
        self.assertEqual(meal.Lunch, "Thali")

    def test_empty_string_counts_as_missing(self):
        meal = MealPlan.from_payload({"Day": "", "Breakfast": "Upma"})
        self.assertEqual(meal.Day, DEFAULT_MEAL["Day"])
        self.assertEqual(meal.Breakfast, "Upma")

    def test_list_uses_first_element(self):
        meal = MealPlan.from_payload([{"Day": "Sunday"}, {"Day": "Monday"}])
        self.assertEqual(meal.Day, "Sunday")
        self.assertEqual(meal.Lunch, DEFAULT_MEAL["Lunch"])

    def test_unusable_payloads_fall_back_to_defaults(self):
        for payload in (None, [], "Friday", 42, ["not a record"]):
            with self.subTest(payload=payload):
                self.assertEqual(MealPlan.from_payload(payload).model_dump(), DEFAULT_MEAL)

    def test_non_string_values_are_stringified(self):
        meal = MealPlan.from_payload({"Day": 5})
        self.assertEqual(meal.Day, "5")


class TestMealPlanSlug(unittest.TestCase):

    def test_day_is_lowercased(self):
        self.assertEqual(MealPlan(Day="Friday").slug(), "friday")

    def test_separators_collapse(self):
        self.assertEqual(MealPlan(Day="Day 1 / Week 2").slug(), "day_1_week_2")

    def test_blank_day(self):
        self.assertEqual(MealPlan(Day="   ").slug(), "meal")


if __name__ == "__main__":
    unittest.main()
