"""
Unit tests for the structured meal-plan parser.
"""

from dietbuddy.services.chat.meal_plan_parser import parse_meal_plan

PLAN = """Day - 01

Breakfast: Poha - Ingredients: flattened rice, peas, peanuts - Cost: ₹40 - Preparation: Temper mustard seeds first

Lunch: Rajma Chawal - Ingredients: kidney beans, rice - Cost: ₹65 - Preparation: Soak beans overnight

Day - 02

Dinner: Ragi Dosa - Ingredients: ragi flour, curd - Cost: ₹50.5 - Preparation: Ferment for 8 hours
"""


class TestParseMealPlan:
    """Test extraction of days and meals."""

    def test_parses_days_and_meals(self):
        days = parse_meal_plan(PLAN)

        assert [d.day for d in days] == [1, 2]
        assert [m.type for m in days[0].meals] == ["breakfast", "lunch"]

        poha = days[0].meals[0]
        assert poha.name == "Poha"
        assert poha.ingredients == "flattened rice, peas, peanuts"
        assert poha.cost == 40
        assert poha.preparation == "Temper mustard seeds first"

        assert days[1].meals[0].cost == 50.5

    def test_unstructured_text_returns_none(self):
        assert parse_meal_plan("Eat more vegetables and drink water.") is None

    def test_days_without_meals_return_none(self):
        assert parse_meal_plan("Day - 01\n\nRest and hydrate.") is None

    def test_cost_without_currency_symbol(self):
        days = parse_meal_plan("Day - 3\nSnack: Chana - Ingredients: chickpeas - Cost: 20 - Preparation: Roast")
        assert days[0].day == 3
        assert days[0].meals[0].type == "snack"
        assert days[0].meals[0].preparation == "Roast"
