# noqa: D104
"""Request function generators for axios and SWR clients built from OpenAPI operations."""

__version__ = "0.1.0"
