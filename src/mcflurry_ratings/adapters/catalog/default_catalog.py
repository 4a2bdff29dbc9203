"""Built-in location catalog."""

from mcflurry_ratings.domain.models.location import Location

DEFAULT_CATALOG: tuple[Location, ...] = (
    # Augsburg
    Location(1, "McDonald's Augsburg City", "Augsburg", 48.36686, 10.89804),
    Location(2, "McDonald's Augsburg B17", "Augsburg", 48.35379, 10.85483),
    # München
    Location(3, "McDonald's München Marienplatz", "München", 48.13736, 11.57549),
    Location(4, "McDonald's München HBF", "München", 48.14023, 11.55857),
    # Hamburg
    Location(5, "McDonald's Hamburg HBF", "Hamburg", 53.55265, 10.0069),
    Location(6, "McDonald's Hamburg Mönckebergstraße", "Hamburg", 53.55047, 10.00134),
    # Berlin
    Location(7, "McDonald's Berlin Alexanderplatz", "Berlin", 52.52192, 13.41321),
    Location(8, "McDonald's Berlin HBF", "Berlin", 52.52508, 13.36941),
    # Köln
    Location(9, "McDonald's Köln Dom", "Köln", 50.9413, 6.9583),
    # Frankfurt
    Location(10, "McDonald's Frankfurt Zeil", "Frankfurt", 50.11552, 8.68341),
)
