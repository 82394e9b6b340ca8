"""
Prompt construction for the nutrition chat.

Builds the system prompt from the user profile (and genetic traits when an
analysis exists) and the contextualised user message.
"""

from typing import Dict, List, Optional

from dietbuddy.services.genetics.models import GeneticTrait
from dietbuddy.services.profile.models import UserProfile

DIETARY_RESTRICTIONS: Dict[str, str] = {
    "Vegetarian": "NO MEAT, NO FISH, NO SEAFOOD, NO CHICKEN, NO MUTTON, NO BEEF, NO PORK, NO EGGS (strict vegetarian). Only plant-based foods, dairy, and milk products allowed.",
    "Vegan": "NO ANIMAL PRODUCTS WHATSOEVER - no meat, fish, eggs, dairy, milk, ghee, paneer, yogurt, cheese, honey. Only plant-based foods.",
    "Non-Vegetarian": "All foods allowed including meat, fish, chicken, eggs, dairy.",
    "Eggitarian": "Vegetarian diet PLUS eggs allowed. NO MEAT, NO FISH, NO SEAFOOD, NO CHICKEN, NO MUTTON, NO BEEF, NO PORK. Only plant-based foods, dairy, milk products, and eggs.",
    "Non-veg": "All foods allowed including meat, fish, chicken, eggs, dairy.",
    "Jain": "No meat, fish, eggs, and NO ROOT VEGETABLES (onions, garlic, potatoes, carrots, radish, ginger). No underground vegetables.",
    "Keto": "Very low carb, high fat. No rice, wheat, sugar, fruits, potatoes. Focus on meat, fish, eggs, leafy greens, nuts.",
    "Gluten-Free": "No wheat, barley, rye, oats. Use rice, quinoa, millet alternatives.",
}

RESPONSE_FORMAT = """Day - 01

Breakfast: [Meal Name] - Ingredients: [ingredients] - Cost: ₹[amount] - Preparation: [tip]

Lunch: [Meal Name] - Ingredients: [ingredients] - Cost: ₹[amount] - Preparation: [tip]

Dinner: [Meal Name] - Ingredients: [ingredients] - Cost: ₹[amount] - Preparation: [tip]

Day - 02

Breakfast: [Meal Name] - Ingredients: [ingredients] - Cost: ₹[amount] - Preparation: [tip]

Lunch: [Meal Name] - Ingredients: [ingredients] - Cost: ₹[amount] - Preparation: [tip]

Dinner: [Meal Name] - Ingredients: [ingredients] - Cost: ₹[amount] - Preparation: [tip]"""


def _num(value: float) -> str:
    return f"{value:g}"


def build_genetic_guidance(traits: List[GeneticTrait]) -> str:
    """Genetic requirements block; empty when no traits are known."""
    if not traits:
        return ""

    lines = [
        "GENETIC DIETARY REQUIREMENTS (CRITICAL - MUST FOLLOW):",
        "Based on uploaded genetic analysis:",
    ]
    for trait in traits:
        recs = ", ".join(r.text for r in trait.recommendations) or "None"
        lines.append(f"- {trait.trait_name}: {trait.interpretation}")
        lines.append(f"  Recommendations: {recs}")

    lines.extend([
        "",
        "IMPORTANT: All meal recommendations MUST consider these genetic traits. For example:",
        "- If lactose intolerant genetics detected → NO dairy, use plant-based alternatives",
        "- If reduced folate metabolism → emphasize leafy greens, beans, citrus in every meal plan",
        "- If slow caffeine metabolism → limit/avoid coffee recommendations",
    ])
    return "\n".join(lines)


def build_system_prompt(profile: UserProfile, traits: Optional[List[GeneticTrait]] = None) -> str:
    traits = traits or []
    restriction = DIETARY_RESTRICTIONS.get(profile.diet)
    goals = profile.goals or "general health"
    budget = _num(profile.budget)

    genetics_line = f"\n- Genetics: {len(traits)} genetic traits analyzed" if traits else ""

    return f"""You are DietBuddy, an expert AI nutrition assistant specializing in Indian nutrition and dietary planning with genetic analysis capabilities.

CRITICAL DIETARY RESTRICTION - ABSOLUTE COMPLIANCE REQUIRED
User follows {profile.diet} diet: {restriction or profile.diet}

{build_genetic_guidance(traits)}

VIOLATION CHECK: Before suggesting ANY meal, verify it follows {profile.diet} restrictions AND genetic requirements. If uncertain, DO NOT suggest it.

USER PROFILE (MUST USE IN ALL RESPONSES):
- Age: {profile.age} years, Gender: {profile.sex}
- Diet: {profile.diet} ({restriction or 'Follow strictly'})
- Region: {profile.region} India
- Budget: ₹{budget} per meal (NEVER EXCEED)
- Allergies: {profile.allergies or 'None'}
- Goals: {profile.goals or 'General health'}
- Height: {_num(profile.height)}cm, Weight: {_num(profile.weight)}kg, BMI: {profile.bmi:.1f}{genetics_line}

RESPONSE FORMAT (EXACT STRUCTURE WITH PROPER SPACING):
{RESPONSE_FORMAT}

MANDATORY RULES:
1. DIET COMPLIANCE: Every meal MUST follow {profile.diet} restrictions exactly
2. GENETIC COMPLIANCE: Every meal MUST consider genetic traits if available
3. BUDGET: All costs ≤ ₹{budget}
4. GOALS: Consider user's goals: {goals}
5. AUTHENTICATION: Start response mentioning user's profile (age {profile.age}, {profile.sex}, {profile.diet}, {profile.region}, ₹{budget})
6. INGREDIENTS: Focus on {profile.region} Indian regional ingredients
7. NO FORMATTING: Clean text, no **, no excessive symbols"""


def build_user_message(content: str, profile: UserProfile, trait_count: int = 0) -> str:
    """Appends a USER CONTEXT sentence to the raw chat message."""
    context = (
        f"I am a {profile.age}-year-old {profile.sex.lower()} following a {profile.diet} diet "
        f"in {profile.region}, India with a budget of ₹{_num(profile.budget)} per meal. "
        f"My height is {_num(profile.height)}cm, weight is {_num(profile.weight)}kg "
        f"(BMI: {profile.bmi:.1f} - {profile.bmi_status})"
    )
    if profile.allergies:
        context += f" and I'm allergic to {profile.allergies}"
    if profile.goals:
        context += f" and my goals are {profile.goals}"
    if trait_count:
        context += f" and I have genetic analysis data for {trait_count} nutrition-relevant traits"
    context += ". Please use this information for personalized recommendations."

    return f"{content}\n\nUSER CONTEXT: {context}"


def build_profile_summary(profile: UserProfile, trait_count: int = 0) -> str:
    """Header prepended to every assistant reply."""
    lines = [
        "Current Profile Used:",
        f"Age: {profile.age} years | Gender: {profile.sex} | Diet: {profile.diet}",
        f"Region: {profile.region} | Budget: ₹{_num(profile.budget)}/meal",
        f"Height: {_num(profile.height)}cm | Weight: {_num(profile.weight)}kg | "
        f"BMI: {profile.bmi:.1f} ({profile.bmi_status})",
    ]
    if profile.allergies:
        lines.append(f"Allergies: {profile.allergies}")
    if profile.goals:
        lines.append(f"Goals: {profile.goals}")
    if trait_count:
        lines.append(f"Genetics: {trait_count} traits analyzed")
    lines.extend(["", "---", "", ""])
    return "\n".join(lines)
