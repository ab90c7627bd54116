"""Weather API - zip code to current weather gateway."""

__version__ = "1.0.0"
