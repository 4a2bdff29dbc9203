"""Location catalog adapters."""

from mcflurry_ratings.adapters.catalog.default_catalog import DEFAULT_CATALOG

__all__ = ["DEFAULT_CATALOG"]
