"""
Flavor Lab - design a food product from a base ingredient plus flavor and
texture profiles (each axis 0-100).

Deterministic apart from the product-type word in the name, which is drawn
from an injectable random generator.
"""

import math
import random
import uuid
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

MAX_SUGGESTIONS = 4
MAX_MATCHING_FOODS = 6


# ============================================================================
# Data Models
# ============================================================================

class BaseIngredient(BaseModel):
    id: str
    name: str
    category: str


class FlavorProfile(BaseModel):
    sweetness: int = Field(50, ge=0, le=100)
    saltiness: int = Field(50, ge=0, le=100)
    sourness: int = Field(50, ge=0, le=100)
    bitterness: int = Field(50, ge=0, le=100)
    umami: int = Field(50, ge=0, le=100)
    spiciness: int = Field(50, ge=0, le=100)


class TextureProfile(BaseModel):
    crunchiness: int = Field(50, ge=0, le=100)
    chewiness: int = Field(50, ge=0, le=100)
    smoothness: int = Field(50, ge=0, le=100)
    moisture: int = Field(50, ge=0, le=100)


class DesignRequest(BaseModel):
    base_ingredient: str = Field(..., description="Base ingredient id, e.g. 'millet'")
    flavor: FlavorProfile = Field(default_factory=FlavorProfile)
    texture: TextureProfile = Field(default_factory=TextureProfile)


class DesignedProduct(BaseModel):
    id: str
    name: str
    base_ingredient: str
    flavor_profile: FlavorProfile
    texture_profile: TextureProfile
    nutrition_score: int
    nutrition_grade: str
    flavor_intensity: Dict[str, str]
    suggestions: List[str]
    matching_foods: List[str]


BASE_INGREDIENTS: Dict[str, BaseIngredient] = {
    item.id: item
    for item in (
        BaseIngredient(id="millet", name="Millet (Bajra)", category="Grain"),
        BaseIngredient(id="lentils", name="Red Lentils (Masoor)", category="Legume"),
        BaseIngredient(id="chickpea", name="Chickpea Flour", category="Legume"),
        BaseIngredient(id="rice", name="Brown Rice", category="Grain"),
        BaseIngredient(id="quinoa", name="Quinoa", category="Grain"),
        BaseIngredient(id="sweet-potato", name="Sweet Potato", category="Vegetable"),
    )
}


class UnknownIngredientError(ValueError):
    pass


# ============================================================================
# Scoring
# ============================================================================

def nutrition_score(flavor: FlavorProfile, texture: TextureProfile) -> int:
    raw = (
        (100 - abs(flavor.sweetness - 40)) * 0.3
        + (100 - abs(flavor.saltiness - 30)) * 0.2
        + flavor.umami * 0.3
        + texture.moisture * 0.2
    )
    # half rounds up
    return int(math.floor(raw + 0.5))


def nutrition_grade(score: int) -> str:
    if score >= 80:
        return "A+"
    if score >= 70:
        return "A"
    if score >= 60:
        return "B+"
    if score >= 50:
        return "B"
    return "C"


def flavor_intensity(value: int) -> str:
    if value > 80:
        return "Very High"
    if value > 60:
        return "High"
    if value > 40:
        return "Medium"
    if value > 20:
        return "Low"
    return "Very Low"


# ============================================================================
# Generation
# ============================================================================

def build_suggestions(base: BaseIngredient, flavor: FlavorProfile, texture: TextureProfile):
    """Return (suggestions, matching_foods), truncated to their display limits."""
    suggestions: List[str] = []
    matching_foods: List[str] = []

    if flavor.sweetness > 70:
        suggestions.append("Add jaggery or dates for natural sweetness")
        matching_foods.extend(["Coconut", "Almonds", "Raisins"])
    elif flavor.sweetness < 30:
        suggestions.append("Balance with mild sweet spices like cinnamon")

    if flavor.spiciness > 70:
        suggestions.append("Include cooling elements like mint or yogurt")
        matching_foods.extend(["Yogurt", "Cucumber", "Mint leaves"])

    if texture.crunchiness > 70:
        suggestions.append("Add roasted nuts or seeds for extra crunch")
        matching_foods.extend(["Roasted peanuts", "Sesame seeds", "Fried curry leaves"])

    if texture.smoothness > 70:
        suggestions.append("Consider a creamy base like coconut milk")
        matching_foods.extend(["Coconut milk", "Cashew paste", "Ghee"])

    if base.id == "millet":
        suggestions.append("Millet pairs well with cumin and coriander")
        matching_foods.extend(["Cumin seeds", "Fresh coriander", "Lemon juice"])

    return suggestions[:MAX_SUGGESTIONS], matching_foods[:MAX_MATCHING_FOODS]


def product_name(
    base: BaseIngredient,
    flavor: FlavorProfile,
    texture: TextureProfile,
    rng: Optional[random.Random] = None,
) -> str:
    rng = rng or random.Random()
    descriptors = []
    if flavor.spiciness > 70:
        descriptors.append("Spicy")
    if flavor.sweetness > 70:
        descriptors.append("Sweet")
    if texture.crunchiness > 70:
        descriptors.append("Crunchy")
    if texture.smoothness > 70:
        descriptors.append("Smooth")
    if flavor.umami > 60:
        descriptors.append("Savory")
    if not descriptors:
        descriptors = ["Balanced"]

    if texture.crunchiness > 50:
        product_types = ["Crispies", "Bites", "Chips"]
    else:
        product_types = ["Porridge", "Smoothie", "Pudding"]

    base_name = base.name.split(" ")[0]
    return f"{' '.join(descriptors)} {base_name} {rng.choice(product_types)}"


def design_product(request: DesignRequest, rng: Optional[random.Random] = None) -> DesignedProduct:
    """
    Raises:
        UnknownIngredientError: base_ingredient is not in BASE_INGREDIENTS
    """
    base = BASE_INGREDIENTS.get(request.base_ingredient)
    if base is None:
        raise UnknownIngredientError(f"Unknown base ingredient: {request.base_ingredient}")

    flavor, texture = request.flavor, request.texture
    suggestions, matching_foods = build_suggestions(base, flavor, texture)
    score = nutrition_score(flavor, texture)

    return DesignedProduct(
        id=f"designed-{uuid.uuid4().hex[:12]}",
        name=product_name(base, flavor, texture, rng),
        base_ingredient=base.name,
        flavor_profile=flavor,
        texture_profile=texture,
        nutrition_score=score,
        nutrition_grade=nutrition_grade(score),
        flavor_intensity={axis: flavor_intensity(value) for axis, value in flavor.model_dump().items()},
        suggestions=suggestions,
        matching_foods=matching_foods,
    )
