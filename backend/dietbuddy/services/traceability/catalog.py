"""
Product Catalog - mock supply-chain records for fortified food batches.
Loads the packaged products.json once and serves lookups by batch code.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "products.json"


class SupplyChainStep(BaseModel):
    id: str
    stage: str
    location: str
    date: str
    organization: str
    status: Literal["completed", "in-progress", "pending"]
    details: Dict[str, str] = Field(default_factory=dict)


class FoodProduct(BaseModel):
    id: str
    name: str
    batch: str
    category: str
    fortification_level: str
    expiry_date: str
    certifications: List[str] = Field(default_factory=list)
    nutrition_facts: Dict[str, str] = Field(default_factory=dict)
    supply_chain: List[SupplyChainStep] = Field(default_factory=list)

    @property
    def is_fully_traced(self) -> bool:
        return all(step.status == "completed" for step in self.supply_chain)


class ProductCatalog:
    def __init__(self, products: Dict[str, FoodProduct]):
        self._products = {code.upper(): product for code, product in products.items()}

    @classmethod
    def from_file(cls, path: Path = DEFAULT_CATALOG_PATH) -> "ProductCatalog":
        with open(path, 'r', encoding="utf-8") as f:
            raw = json.load(f)
        products = {code: FoodProduct.model_validate(item) for code, item in raw.items()}
        logger.info("Loaded %d traceable products from %s", len(products), path)
        return cls(products)

    def lookup(self, batch_code: str) -> Optional[FoodProduct]:
        return self._products.get(batch_code.strip().upper())

    def batch_codes(self) -> List[str]:
        return sorted(self._products)


@lru_cache(maxsize=1)
def get_product_catalog() -> ProductCatalog:
    """Get the global catalog built from the packaged products file."""
    return ProductCatalog.from_file()
