"""
Resolution context.

A ResolutionContext stands for one request (or any other unit of work)
and carries the URL resolver registered for it. It is created by the
caller and passed explicitly into URL resolution.
"""
from typing import Optional

from .protocols import UrlResolver
from ..models.culture import INVARIANT_CULTURE


class ResolutionContext:
    """
    Per-request environment supplying a URL resolver.
    
    Usage:
        >>> with ResolutionContext(resolver) as ctx:
        ...     url = node.get_url(ctx)
    """
    
    def __init__(
        self,
        url_resolver: Optional[UrlResolver] = None,
        culture: str = INVARIANT_CULTURE
    ):
        self.url_resolver = url_resolver
        self.culture = culture
        self._active = True
    
    @property
    def is_active(self) -> bool:
        return self._active
    
    @property
    def has_url_resolver(self) -> bool:
        return self.url_resolver is not None
    
    def close(self) -> None:
        """Ends the context; later resolutions through it fail."""
        self._active = False
    
    def __enter__(self) -> 'ResolutionContext':
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
    
    def __repr__(self) -> str:
        return (
            f"<ResolutionContext active={self._active} "
            f"resolver={type(self.url_resolver).__name__ if self.url_resolver else None}>"
        )
