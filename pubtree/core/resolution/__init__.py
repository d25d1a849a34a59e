"""URL and property resolution algorithms."""
from .url import resolve_url
from .property_fallback import PropertyFallbackResolver, default_resolver

__all__ = [
    'resolve_url',
    'PropertyFallbackResolver',
    'default_resolver',
]
