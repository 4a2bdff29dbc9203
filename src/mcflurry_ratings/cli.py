"""Command-line shell for browsing locations and rating McFlurrys."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import aiohttp

from mcflurry_ratings.adapters.config import AppConfig, CatalogLoader
from mcflurry_ratings.adapters.formatters import RatingFormatter
from mcflurry_ratings.adapters.memory import InMemoryRatingRepository
from mcflurry_ratings.adapters.position import (
    IpGeolocationPositionProvider,
    StaticPositionProvider,
)
from mcflurry_ratings.adapters.supabase_api import SupabaseRatingRepository
from mcflurry_ratings.application.services import (
    CatalogRanker,
    LeaderboardBuilder,
    RatingForm,
    RatingStore,
)
from mcflurry_ratings.domain.errors import (
    ExternalReadFailure,
    McFlurryRatingsError,
    UnknownLocationError,
)
from mcflurry_ratings.domain.models import (
    Location,
    LocationSummary,
    PhotoAttachment,
    RankedLocation,
    Rating,
    TextureCategory,
    UserPosition,
)
from mcflurry_ratings.domain.ports import PositionProvider, RatingRepository

logger = logging.getLogger(__name__)


def create_rating_repository(
    config: AppConfig, session: aiohttp.ClientSession | None
) -> RatingRepository:
    """Use the remote backend when configured, otherwise keep ratings in memory."""
    if config.uses_remote_backend and config.supabase_url and config.supabase_api_key:
        return SupabaseRatingRepository(
            base_url=config.supabase_url,
            api_key=config.supabase_api_key,
            session=session,
            table=config.ratings_table,
            timeout_seconds=config.api_timeout,
        )
    logger.warning(
        "SUPABASE_URL/SUPABASE_API_KEY not set, ratings are kept in memory for this run only"
    )
    return InMemoryRatingRepository()


def create_position_provider(
    args: argparse.Namespace, config: AppConfig, session: aiohttp.ClientSession | None
) -> PositionProvider:
    """Position from explicit coordinates, an IP lookup, or none at all."""
    if getattr(args, "locate", False):
        return IpGeolocationPositionProvider(config.geolocation_url, session=session)
    return StaticPositionProvider(parse_position(args.lat, args.lon))


def parse_position(latitude: float | None, longitude: float | None) -> UserPosition | None:
    """Build a position from optional coordinates; both or neither must be given."""
    if latitude is None and longitude is None:
        return None
    if latitude is None or longitude is None:
        raise ValueError("--lat and --lon must be given together")
    return UserPosition(latitude=latitude, longitude=longitude)


def find_location(catalog: Sequence[Location], location_id: int) -> Location:
    """Look up a catalog location by id."""
    for location in catalog:
        if location.id == location_id:
            return location
    raise UnknownLocationError(f"Location {location_id} is not in the catalog")


def photo_from_path(path: str) -> PhotoAttachment:
    """Attach a local image file (kept for this submission only, never uploaded)."""
    file_path = Path(path).expanduser().resolve()
    return PhotoAttachment(name=file_path.name, url=file_path.as_uri())


def location_to_dict(location: Location) -> dict[str, Any]:
    return {
        "id": location.id,
        "name": location.display_name,
        "city": location.city_name,
        "latitude": location.latitude,
        "longitude": location.longitude,
    }


def ranked_to_dict(entry: RankedLocation) -> dict[str, Any]:
    return {**location_to_dict(entry.location), "distance_km": entry.distance_km}


def summary_to_dict(summary: LocationSummary) -> dict[str, Any]:
    return {
        **location_to_dict(summary.location),
        "average_stars": summary.average_stars,
        "rating_count": summary.rating_count,
    }


def rating_to_dict(rating: Rating) -> dict[str, Any]:
    return {
        "id": rating.id,
        "location_id": rating.location_id,
        "texture": rating.texture.value,
        "stars": rating.stars,
        "has_mixin": rating.has_mixin,
        "sauce_level": rating.sauce_level,
        "comment": rating.comment,
        "created_at": rating.created_at.isoformat(),
    }


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def _load_ratings(store: RatingStore) -> None:
    """Load ratings; on failure continue with an empty store."""
    try:
        await store.load_all()
    except ExternalReadFailure as e:
        print(f"Warning: could not load ratings: {e}", file=sys.stderr)


async def show_stores(
    catalog: Sequence[Location], position_provider: PositionProvider, query: str, as_json: bool
) -> None:
    """Print the catalog, nearest first when a position is available."""
    position = await position_provider.current_position()
    ranked = CatalogRanker().rank(catalog, position, query)
    if as_json:
        _print_json([ranked_to_dict(entry) for entry in ranked])
        return

    formatter = RatingFormatter()
    if position is not None:
        print(f"Your position: {position.latitude:.5f}, {position.longitude:.5f}\n")
    if not ranked:
        print("No location found.")
        return
    for entry in ranked:
        distance = formatter.format_distance(entry.distance_km)
        location = entry.location
        line = f"  [{location.id}] {location.display_name} · {location.city_name}"
        print(f"{line}  {distance}" if distance else line)


async def show_ratings(
    catalog: Sequence[Location], store: RatingStore, location_id: int, as_json: bool
) -> None:
    """Print a location's average and its ratings, newest first."""
    location = find_location(catalog, location_id)
    await _load_ratings(store)
    ratings = store.ratings_for(location.id)
    average = store.average_stars(location.id)
    if as_json:
        _print_json(
            {
                "location": location_to_dict(location),
                "average_stars": average,
                "ratings": [rating_to_dict(rating) for rating in ratings],
            }
        )
        return

    formatter = RatingFormatter()
    print(f"{location.display_name}: {formatter.format_average(average)}\n")
    for rating in ratings:
        print(f"  {formatter.format_rating(rating)}")


async def show_leaderboard(
    catalog: Sequence[Location], store: RatingStore, n: int, as_json: bool
) -> None:
    """Print the best rated locations."""
    await _load_ratings(store)
    top = LeaderboardBuilder().top_n(catalog, store, n)
    if as_json:
        _print_json([summary_to_dict(summary) for summary in top])
        return

    if not top:
        print("No ratings yet. Be the first to rate!")
        return
    formatter = RatingFormatter()
    for rank, summary in enumerate(top, start=1):
        print(
            f"  {rank}. {summary.location.display_name} · {summary.location.city_name}"
            f" · {formatter.format_average(summary.average_stars)}"
        )


async def show_overview(catalog: Sequence[Location], store: RatingStore, as_json: bool) -> None:
    """Print every location with its average and number of ratings."""
    await _load_ratings(store)
    summaries = LeaderboardBuilder().overview(catalog, store)
    if as_json:
        _print_json([summary_to_dict(summary) for summary in summaries])
        return

    formatter = RatingFormatter()
    for summary in summaries:
        detail = formatter.format_average(summary.average_stars)
        if summary.rating_count:
            detail += f" ({summary.rating_count})"
        print(f"  [{summary.location.id}] {summary.location.display_name}: {detail}")


async def submit_rating(
    catalog: Sequence[Location], store: RatingStore, args: argparse.Namespace
) -> None:
    """Submit a rating built from command-line arguments."""
    form = RatingForm(catalog)
    form.select_location(find_location(catalog, args.location_id))
    form.texture = args.texture
    form.stars = args.stars
    form.has_mixin = args.mixin
    form.sauce_level = args.sauce
    form.comment = args.comment
    form.attach_photos(photo_from_path(path) for path in args.photo)

    submitted = await form.submit(store)
    formatter = RatingFormatter()
    print(f"Saved rating {submitted.rating.id}: {formatter.format_rating(submitted.rating)}")
    if submitted.photos:
        print(f"{len(submitted.photos)} photo(s) attached locally (not uploaded)")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Rate the McFlurry at your McDonald's and see the best stores",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Stores nearest to a position, filtered by city
  mcflurry-ratings stores --lat 48.137 --lon 11.575 --query münchen

  # Ratings of one store
  mcflurry-ratings ratings 3

  # Top 3 stores
  mcflurry-ratings top

  # Rate a store
  mcflurry-ratings rate 3 --stars 5 --texture creamy --mixin --sauce 3 --comment "Perfect"
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    stores_parser = subparsers.add_parser("stores", help="List stores, nearest first")
    stores_parser.add_argument("--lat", type=float, help="Your latitude")
    stores_parser.add_argument("--lon", type=float, help="Your longitude")
    stores_parser.add_argument(
        "--locate", action="store_true", help="Approximate your position from your IP address"
    )
    stores_parser.add_argument("--query", default="", help="Filter by store name or city")
    stores_parser.add_argument("--json", action="store_true", help="Output as JSON")

    ratings_parser = subparsers.add_parser("ratings", help="Show the ratings of a store")
    ratings_parser.add_argument("location_id", type=int, help="Store id (see 'stores')")
    ratings_parser.add_argument("--json", action="store_true", help="Output as JSON")

    top_parser = subparsers.add_parser("top", help="Show the best rated stores")
    top_parser.add_argument(
        "-n", type=int, default=None, help="Number of stores (default: LEADERBOARD_SIZE)"
    )
    top_parser.add_argument("--json", action="store_true", help="Output as JSON")

    overview_parser = subparsers.add_parser(
        "overview", help="Show every store with its average rating"
    )
    overview_parser.add_argument("--json", action="store_true", help="Output as JSON")

    rate_parser = subparsers.add_parser("rate", help="Rate the McFlurry of a store")
    rate_parser.add_argument("location_id", type=int, help="Store id (see 'stores')")
    rate_parser.add_argument("--stars", type=int, required=True, help="Star score from 1 to 5")
    rate_parser.add_argument(
        "--texture",
        choices=[category.value for category in TextureCategory],
        default=TextureCategory.CREAMY.value,
        help="Texture of the ice cream",
    )
    rate_parser.add_argument("--mixin", action="store_true", help="It had a chocolate mixin")
    rate_parser.add_argument(
        "--sauce", type=int, default=3, help="Sauce level from 1 (too little) to 5 (too much)"
    )
    rate_parser.add_argument("--comment", default="", help="Free-text comment")
    rate_parser.add_argument(
        "--photo", action="append", default=[], help="Photo to attach (repeatable, not uploaded)"
    )

    return parser


async def run(args: argparse.Namespace, config: AppConfig) -> None:
    """Execute a parsed command."""
    catalog = CatalogLoader.load(config)

    async with aiohttp.ClientSession() as session:
        store = RatingStore(create_rating_repository(config, session))

        if args.command == "stores":
            provider = create_position_provider(args, config, session)
            await show_stores(catalog, provider, args.query, args.json)
        elif args.command == "ratings":
            await show_ratings(catalog, store, args.location_id, args.json)
        elif args.command == "top":
            n = args.n if args.n is not None else config.leaderboard_size
            await show_leaderboard(catalog, store, n, args.json)
        elif args.command == "overview":
            await show_overview(catalog, store, args.json)
        elif args.command == "rate":
            await submit_rating(catalog, store, args)


async def main(argv: Sequence[str] | None = None, config: AppConfig | None = None) -> None:
    """Parse arguments and run the selected command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        await run(args, config or AppConfig())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (McFlurryRatingsError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
