# querykit/query/dependencies.py
"""FastAPI dependencies for query building."""

from querykit.config import Settings, settings


async def get_settings() -> Settings:
    """
    Settings used for request defaults.
    Overridden in tests via app.dependency_overrides.
    """
    return settings
