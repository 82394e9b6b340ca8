from typing import List

from fastapi import APIRouter, HTTPException

from dietbuddy.services.flavor_lab.designer import (
    BASE_INGREDIENTS,
    BaseIngredient,
    DesignedProduct,
    DesignRequest,
    UnknownIngredientError,
    design_product,
)

router = APIRouter()


@router.get("/ingredients", response_model=List[BaseIngredient])
async def list_ingredients():
    return list(BASE_INGREDIENTS.values())


@router.post("/design", response_model=DesignedProduct)
async def design(request: DesignRequest):
    try:
        return design_product(request)
    except UnknownIngredientError as e:
        raise HTTPException(status_code=400, detail=str(e))
