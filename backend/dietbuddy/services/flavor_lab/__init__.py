from .designer import (
    BASE_INGREDIENTS,
    BaseIngredient,
    DesignedProduct,
    DesignRequest,
    FlavorProfile,
    TextureProfile,
    UnknownIngredientError,
    design_product,
    flavor_intensity,
    nutrition_grade,
    nutrition_score,
)

__all__ = [
    "BASE_INGREDIENTS",
    "BaseIngredient",
    "DesignedProduct",
    "DesignRequest",
    "FlavorProfile",
    "TextureProfile",
    "UnknownIngredientError",
    "design_product",
    "flavor_intensity",
    "nutrition_grade",
    "nutrition_score",
]
