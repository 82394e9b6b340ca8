from fastapi import APIRouter, Depends, HTTPException

from dietbuddy.api.deps import get_catalog
from dietbuddy.services.traceability.catalog import FoodProduct, ProductCatalog

router = APIRouter()


@router.get("/{batch_code}", response_model=FoodProduct)
async def trace_product(batch_code: str, catalog: ProductCatalog = Depends(get_catalog)):
    """Look up the supply chain for a product batch (e.g. FTF2025-014)."""
    product = catalog.lookup(batch_code)
    if product is None:
        raise HTTPException(status_code=404, detail=f"No product found for batch code {batch_code}")
    return product
