"""Location directory factory.

Provides get_location_resolver() / set_location_resolver() to swap
implementations. The adapter is picked with the LOCATION_DIRECTORY
environment variable; "static" is the only adapter shipped today.
"""

import os

from warehousing.location.port import Location, LocationResolver

_current_resolver: LocationResolver | None = None


def get_location_resolver() -> LocationResolver:
    """Return the configured location directory (singleton)."""
    global _current_resolver
    if _current_resolver is None:
        adapter = os.environ.get("LOCATION_DIRECTORY", "static")
        if adapter == "static":
            from warehousing.location.directory import StaticLocationDirectory

            _current_resolver = StaticLocationDirectory()
        else:
            raise ValueError(f"Unknown location directory: {adapter}")
    return _current_resolver


def set_location_resolver(resolver: LocationResolver) -> None:
    """Override the active location directory (useful for tests)."""
    global _current_resolver
    _current_resolver = resolver


def reset_location_resolver() -> None:
    """Reset to the configured default."""
    global _current_resolver
    _current_resolver = None


__all__ = [
    "Location",
    "LocationResolver",
    "get_location_resolver",
    "reset_location_resolver",
    "set_location_resolver",
]
