"""Configuration adapters."""

from mcflurry_ratings.adapters.config.app_config import AppConfig
from mcflurry_ratings.adapters.config.catalog_loader import CatalogLoader

__all__ = ["AppConfig", "CatalogLoader"]
