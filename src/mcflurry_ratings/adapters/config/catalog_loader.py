"""Catalog loader."""

import logging
from typing import Any

from mcflurry_ratings.adapters.catalog.default_catalog import DEFAULT_CATALOG
from mcflurry_ratings.adapters.config.app_config import AppConfig
from mcflurry_ratings.domain.errors import CatalogError
from mcflurry_ratings.domain.models.location import Location

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Loads the static location catalog from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[Location]:
        """Load the catalog from the configured TOML file, or the built-in one.

        Raises:
            CatalogError: If an entry is malformed or ids are not unique.
        """
        try:
            entries = config.get_catalog_config()
        except (FileNotFoundError, ValueError) as e:
            raise CatalogError(str(e)) from e

        if entries is None:
            logger.debug("No catalog file configured, using built-in catalog")
            return list(DEFAULT_CATALOG)

        locations = [
            CatalogLoader._parse_entry(index, entry) for index, entry in enumerate(entries)
        ]
        if not locations:
            raise CatalogError(f"Catalog file {config.catalog_file} defines no locations")

        ids = [location.id for location in locations]
        if len(ids) != len(set(ids)):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            raise CatalogError(f"Location ids must be unique. Duplicate ids found: {duplicates}")

        logger.info(f"Loaded {len(locations)} location(s) from {config.catalog_file}")
        return locations

    @staticmethod
    def _parse_entry(index: int, entry: dict[str, Any]) -> Location:
        try:
            location_id = entry["id"]
            display_name = str(entry["display_name"])
            city_name = str(entry.get("city_name", ""))
            latitude = float(entry["latitude"])
            longitude = float(entry["longitude"])
        except KeyError as e:
            raise CatalogError(f"Catalog entry #{index} is missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise CatalogError(f"Catalog entry #{index} has invalid coordinates: {e}") from e

        if isinstance(location_id, bool) or not isinstance(location_id, int):
            raise CatalogError(f"Catalog entry #{index} must have an integer id")
        if not -90.0 <= latitude <= 90.0:
            raise CatalogError(f"Catalog entry #{index} latitude {latitude} is out of range")
        if not -180.0 <= longitude <= 180.0:
            raise CatalogError(f"Catalog entry #{index} longitude {longitude} is out of range")

        return Location(
            id=location_id,
            display_name=display_name,
            city_name=city_name,
            latitude=latitude,
            longitude=longitude,
        )
