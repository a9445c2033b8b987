"""Client for the Pokemon web API with typed records and an expiring in-memory cache."""

__version__ = "0.1.0"