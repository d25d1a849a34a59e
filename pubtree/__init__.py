"""
pubtree - Published content tree nodes with lazy URLs and property fallback.

Usage:
    >>> from pubtree import TreeBuilder, ResolutionContext, SegmentUrlResolver
    >>>
    >>> nodes = TreeBuilder().build_index(records)
    >>> with ResolutionContext(SegmentUrlResolver(nodes)) as ctx:
    ...     print(nodes[1063].get_url(ctx))
"""
import logging
from .node import PublishedContent

from .core.config import ResolverConfig, UnknownEditorPolicy, MEDIA_FILE_ALIAS
from .core.exceptions import (
    PublishedContentException,
    PreconditionError,
    UnsupportedKindError,
    UnsupportedEditorError,
    TreeBuildError,
)
from .core.models import (
    ItemType,
    PropertyEditorKind,
    PropertyType,
    PublishedProperty,
    ContentType,
    ImageCropperValue,
    PublishedCultureInfo,
)
from .core.resolution import PropertyFallbackResolver
from .core.routing import UrlResolver, ResolutionContext, SegmentUrlResolver
from .core.storage import TreeBuilder

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for pubtree modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = ['pubtree'] + [
        name for name in logging.Logger.manager.loggerDict
        if name.startswith('pubtree.')
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'PublishedContent',
    'ResolverConfig',
    'UnknownEditorPolicy',
    'MEDIA_FILE_ALIAS',
    'PublishedContentException',
    'PreconditionError',
    'UnsupportedKindError',
    'UnsupportedEditorError',
    'TreeBuildError',
    'ItemType',
    'PropertyEditorKind',
    'PropertyType',
    'PublishedProperty',
    'ContentType',
    'ImageCropperValue',
    'PublishedCultureInfo',
    'PropertyFallbackResolver',
    'UrlResolver',
    'ResolutionContext',
    'SegmentUrlResolver',
    'TreeBuilder',
    'setup_logging',
]
