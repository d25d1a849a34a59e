"""
URL resolution for published content nodes.

Document URLs come from the URL resolver of the caller's resolution
context. Media URLs are read from the media file property, whose shape
depends on the editor that stored it.
"""
from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from ..config import ResolverConfig, UnknownEditorPolicy
from ..exceptions import PreconditionError, UnsupportedKindError, UnsupportedEditorError
from ..logging import get_logger
from ..models.enums import ItemType, PropertyEditorKind
from ..models.image_cropper import ImageCropperValue

if TYPE_CHECKING:
    from ...node import PublishedContent
    from ..routing.context import ResolutionContext

logger = get_logger(__name__)


def resolve_url(
    node: PublishedContent,
    context: Optional[ResolutionContext],
    config: ResolverConfig
) -> Optional[str]:
    """
    Compute the URL of a node. Does not read or write the node's cache.
    
    Args:
        node: Node to resolve
        context: Caller's resolution context (required for content)
        config: Resolver configuration
        
    Returns:
        URL string; "" for media without a file; None when unresolved
        
    Raises:
        PreconditionError: content node without an active context or resolver
        UnsupportedKindError: item type is neither content nor media
    """
    if node.item_type is ItemType.CONTENT:
        return _resolve_content_url(node, context)
    if node.item_type is ItemType.MEDIA:
        return _resolve_media_url(node, config)
    raise UnsupportedKindError(
        f"Cannot resolve a URL for item type {node.item_type!r}",
        node_id=node.id,
        kind=node.item_type
    )


def _resolve_content_url(
    node: PublishedContent,
    context: Optional[ResolutionContext]
) -> Optional[str]:
    if context is None or not context.is_active:
        raise PreconditionError(
            "Cannot resolve a URL for a content item: no active context",
            node_id=node.id
        )
    if context.url_resolver is None:
        raise PreconditionError(
            "Cannot resolve a URL for a content item: no URL resolver configured",
            node_id=node.id
        )
    
    url = context.url_resolver.resolve(node.id)
    logger.debug(f"Resolved content {node.id} to {url!r}")
    return url


def _resolve_media_url(node: PublishedContent, config: ResolverConfig) -> Optional[str]:
    prop = node.get_own_property(config.media_file_alias)
    if prop is None or not prop.has_value():
        return ''
    
    editor = prop.editor
    if editor is PropertyEditorKind.UPLOAD_FIELD:
        return str(prop.value)
    
    if editor is PropertyEditorKind.IMAGE_CROPPER:
        cropper = ImageCropperValue.coerce(prop.value)
        if cropper is not None:
            return cropper.src
        return str(prop.value)
    
    policy = config.unknown_editor_policy
    editor_alias = prop.property_type.editor_alias if prop.property_type else None
    logger.debug(f"Media {node.id} file uses unmapped editor {editor_alias!r}, policy {policy.value}")
    if policy is UnknownEditorPolicy.EMPTY:
        return ''
    if policy is UnknownEditorPolicy.RAISE:
        raise UnsupportedEditorError(
            f"No media URL mapping for the editor of property '{prop.alias}'",
            node_id=node.id,
            kind=editor
        )
    return None
