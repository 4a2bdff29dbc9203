"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from mcflurry_ratings.adapters.config import AppConfig

ENV_VARS = (
    "SUPABASE_URL",
    "SUPABASE_API_KEY",
    "RATINGS_TABLE",
    "API_TIMEOUT",
    "CATALOG_FILE",
    "LEADERBOARD_SIZE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables that may be set in the test environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig(_env_file=None)  # type: ignore[call-arg]

    assert config.supabase_url is None
    assert config.supabase_api_key is None
    assert config.ratings_table == "ratings"
    assert config.api_timeout == 10
    assert config.catalog_file is None
    assert config.leaderboard_size == 3
    assert config.log_level == "WARNING"
    assert config.uses_remote_backend is False


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co/")
    monkeypatch.setenv("SUPABASE_API_KEY", "secret")
    monkeypatch.setenv("LEADERBOARD_SIZE", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig(_env_file=None)  # type: ignore[call-arg]

    assert config.supabase_url == "https://example.supabase.co"
    assert config.supabase_api_key == "secret"
    assert config.leaderboard_size == 5
    assert config.log_level == "DEBUG"
    assert config.uses_remote_backend is True


def test_config_needs_url_and_key_for_remote_backend() -> None:
    """Given only a URL, then the remote backend is not used."""
    config = AppConfig(supabase_url="https://example.supabase.co")

    assert config.uses_remote_backend is False


def test_config_treats_blank_url_as_unset() -> None:
    """Given a blank URL, then it is treated as not configured."""
    config = AppConfig(supabase_url="  ")

    assert config.supabase_url is None


@pytest.mark.parametrize("timeout", [0, -5])
def test_config_validates_api_timeout(timeout: int) -> None:
    """Given a non-positive timeout, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="api_timeout must be greater than 0"):
        AppConfig(api_timeout=timeout)


def test_config_validates_leaderboard_size(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a leaderboard size of zero, when loading config, then validation error is raised."""
    monkeypatch.setenv("LEADERBOARD_SIZE", "0")

    with pytest.raises(ValueError, match="leaderboard_size must be at least 1"):
        AppConfig()


def test_config_validates_log_level() -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig(log_level="loud")


def test_catalog_config_is_none_without_file() -> None:
    """Given no catalog file, when reading the catalog config, then None is returned."""
    config = AppConfig(catalog_file=None)

    assert config.get_catalog_config() is None


def test_catalog_config_parses_locations_from_toml(tmp_path: Path) -> None:
    """Given a TOML file with locations, when reading it, then the entries are returned."""
    catalog_file = tmp_path / "catalog.toml"
    catalog_file.write_text(
        """
[[locations]]
id = 1
display_name = "McDonald's Augsburg City"
city_name = "Augsburg"
latitude = 48.36686
longitude = 10.89804
""",
        encoding="utf-8",
    )

    config = AppConfig(catalog_file=str(catalog_file))
    entries = config.get_catalog_config()

    assert entries == [
        {
            "id": 1,
            "display_name": "McDonald's Augsburg City",
            "city_name": "Augsburg",
            "latitude": 48.36686,
            "longitude": 10.89804,
        }
    ]


def test_catalog_config_raises_when_file_not_found() -> None:
    """Given a missing catalog file, when reading it, then FileNotFoundError is raised."""
    config = AppConfig(catalog_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Catalog file not found"):
        config.get_catalog_config()


def test_catalog_config_rejects_non_list_locations(tmp_path: Path) -> None:
    """Given 'locations' that is not a list, when reading it, then ValueError is raised."""
    catalog_file = tmp_path / "catalog.toml"
    catalog_file.write_text('locations = "none"\n', encoding="utf-8")

    config = AppConfig(catalog_file=str(catalog_file))

    with pytest.raises(ValueError, match="must be a list"):
        config.get_catalog_config()
