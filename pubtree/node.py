"""Published content node for documents and media items."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any, Iterator, TYPE_CHECKING
import weakref

from .core.config import ResolverConfig
from .core.lazy import LazyValue
from .core.models import (
    ItemType,
    ContentType,
    PublishedProperty,
    PublishedCultureInfo,
    INVARIANT_CULTURE,
)
from .core.resolution import resolve_url, default_resolver

if TYPE_CHECKING:
    from .core.routing import ResolutionContext


@dataclass(eq=False)
class PublishedContent:
    """
    A node of the published content tree: a document or a media item.

    Nodes are populated by a content-tree provider and read-only from then
    on; only the URL is computed lazily and cached once.

        >>> with ResolutionContext(resolver) as ctx:
        ...     page.get_url(ctx)
        '/about/'
        >>> page.value('siteTitle', recurse=True)
        'My site'
    """
    id: int
    name: str
    item_type: ItemType = ItemType.CONTENT
    key: str = ''
    content_type: Optional[ContentType] = None
    url_name: str = ''
    sort_order: int = 0
    level: int = 1
    path: str = ''
    template_id: int = 0
    creator_id: int = 0
    creator_name: str = ''
    create_date: Optional[datetime] = None
    writer_id: int = 0
    writer_name: str = ''
    update_date: Optional[datetime] = None
    is_draft: bool = False
    properties: Dict[str, PublishedProperty] = field(default_factory=dict, repr=False)
    cultures: Dict[str, PublishedCultureInfo] = field(default_factory=dict, repr=False)
    children: List[PublishedContent] = field(default_factory=list, repr=False)
    config: ResolverConfig = field(default_factory=ResolverConfig.default, repr=False)

    _parent_ref: Optional[weakref.ref] = field(default=None, repr=False)
    _url: LazyValue = field(default_factory=LazyValue, repr=False)

    # =========================================================================
    # URL
    # =========================================================================

    def get_url(self, context: Optional[ResolutionContext] = None) -> Optional[str]:
        """
        Get the canonical URL, computing it on first call.

        Document URLs come from the context's URL resolver; media URLs
        from the media file property. Once a URL is cached the context is
        no longer consulted.

        Args:
            context: Active resolution context (required for documents)

        Returns:
            URL string; "" for media without a file

        Raises:
            PreconditionError: document without an active context or resolver
            UnsupportedKindError: unknown item type
        """
        return self._url.get_or_compute(
            lambda: resolve_url(self, context, self.config)
        )

    @property
    def url(self) -> Optional[str]:
        """URL resolvable without a context: cached, or computed for media."""
        return self.get_url()

    @property
    def is_url_cached(self) -> bool:
        return self._url.is_set

    # =========================================================================
    # Properties
    # =========================================================================

    def get_own_property(self, alias: str) -> Optional[PublishedProperty]:
        """Gets the property defined directly on this node."""
        return self.properties.get(alias)

    def get_property(self, alias: str, recurse: bool = False) -> Optional[PublishedProperty]:
        """
        Get a property by alias, optionally falling back to ancestors.

        Args:
            alias: Property alias
            recurse: Walk up the parents until a property with a value is found

        Returns:
            The property with a value, else the nearest property found, else None
        """
        return default_resolver.resolve(self, alias, recurse)

    def has_property(self, alias: str) -> bool:
        return alias in self.properties

    def value(self, alias: str, recurse: bool = False, default: Any = None) -> Any:
        """Get a property's value, or default when it has none."""
        prop = self.get_property(alias, recurse)
        if prop is None or not prop.has_value():
            return default
        return prop.value

    def get_culture(self, culture: str = INVARIANT_CULTURE) -> Optional[PublishedCultureInfo]:
        """Get name and URL segment for a culture ("" for invariant)."""
        return self.cultures.get(culture)

    # =========================================================================
    # Kind
    # =========================================================================

    @property
    def is_content(self) -> bool:
        return self.item_type is ItemType.CONTENT

    @property
    def is_media(self) -> bool:
        return self.item_type is ItemType.MEDIA

    @property
    def content_type_alias(self) -> Optional[str]:
        return self.content_type.alias if self.content_type else None

    # =========================================================================
    # Tree Navigation
    # =========================================================================

    @property
    def parent(self) -> Optional[PublishedContent]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def root(self) -> PublishedContent:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def add_child(self, child: PublishedContent) -> None:
        """Attach a child, keeping children ordered by sort_order."""
        if any(c is child for c in self.children):
            return
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        self.children.sort(key=lambda c: c.sort_order)

    def ancestors(self) -> List[PublishedContent]:
        """Ancestors, nearest first."""
        result = []
        node = self.parent
        while node is not None:
            result.append(node)
            node = node.parent
        return result

    def descendants(self, include_self: bool = False) -> Iterator[PublishedContent]:
        if include_self:
            yield self
        for child in self.children:
            yield child
            yield from child.descendants()

    def find(self, node_id: int) -> Optional[PublishedContent]:
        """Finds a node by id in this subtree."""
        for node in self.descendants(include_self=True):
            if node.id == node_id:
                return node
        return None

    def __iter__(self) -> Iterator[PublishedContent]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __bool__(self) -> bool:
        return True  # Node always truthy

    def __truediv__(self, url_name: str) -> Optional[PublishedContent]:
        for child in self.children:
            if child.url_name == url_name:
                return child
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Converts node to dictionary."""
        parent = self.parent
        return {
            'id': self.id,
            'key': self.key,
            'name': self.name,
            'type': self.item_type.value,
            'content_type': self.content_type_alias,
            'parent': parent.id if parent is not None else None,
            'url_name': self.url_name,
            'sort_order': self.sort_order,
            'level': self.level,
            'path': self.path,
            'is_draft': self.is_draft,
            'properties': {alias: p.value for alias, p in self.properties.items()},
        }
