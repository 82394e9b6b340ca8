from .catalog import FoodProduct, ProductCatalog, SupplyChainStep, get_product_catalog

__all__ = ["FoodProduct", "ProductCatalog", "SupplyChainStep", "get_product_catalog"]
