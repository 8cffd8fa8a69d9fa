"""Project dashboard: filter, search, sort and page through project records."""

__version__ = "0.1.0"
