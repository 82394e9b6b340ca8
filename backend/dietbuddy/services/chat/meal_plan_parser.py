"""
Parses the structured meal-plan format the chat prompt asks for:

    Day - 01

    Breakfast: Poha - Ingredients: flattened rice, peas - Cost: ₹40 - Preparation: ...
"""

import re
from typing import List, Optional

from .models import ParsedDay, ParsedMeal

_DAY_RE = re.compile(r"Day\s*-\s*(\d+)", re.IGNORECASE)
_MEAL_RE = re.compile(
    r"(Breakfast|Lunch|Dinner|Snack):\s*([^-]+?)\s*-\s*Ingredients:\s*([^-]+?)\s*-\s*"
    r"Cost:\s*₹?(\d+(?:\.\d+)?)\s*-\s*Preparation:\s*(.+?)"
    r"(?=\n\n|(?:Breakfast|Lunch|Dinner|Snack):|$)",
    re.IGNORECASE | re.DOTALL,
)


def parse_meal_plan(content: str) -> Optional[List[ParsedDay]]:
    """Return the parsed days, or None if no day contains a recognisable meal."""
    day_matches = list(_DAY_RE.finditer(content))
    if not day_matches:
        return None

    days: List[ParsedDay] = []
    for i, day_match in enumerate(day_matches):
        start = day_match.end()
        end = day_matches[i + 1].start() if i + 1 < len(day_matches) else len(content)
        day_content = content[start:end]

        meals = [
            ParsedMeal(
                type=m.group(1).lower(),
                name=m.group(2).strip(),
                ingredients=m.group(3).strip(),
                cost=float(m.group(4)),
                preparation=m.group(5).strip(),
            )
            for m in _MEAL_RE.finditer(day_content)
        ]

        if meals:
            days.append(ParsedDay(day=int(day_match.group(1)), meals=meals))

    return days or None
