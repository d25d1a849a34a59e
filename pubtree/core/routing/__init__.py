"""Routing collaborators for content URLs."""
from .protocols import UrlResolver
from .context import ResolutionContext
from .segment_resolver import SegmentUrlResolver

__all__ = [
    'UrlResolver',
    'ResolutionContext',
    'SegmentUrlResolver',
]
