"""Ancestor-chain property lookup."""
from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ...node import PublishedContent
    from ..models.property import PublishedProperty


class PropertyFallbackResolver:
    """
    Finds the best property for an alias, optionally walking up the tree.
    
    With recurse, the walk stops at the first node whose property has a
    value. If none has one, the first property found at all (closest to
    the origin, possibly empty) is returned; if no node carries the alias
    the result is None.
    """
    
    def resolve(
        self,
        node: PublishedContent,
        alias: str,
        recurse: bool = False
    ) -> Optional[PublishedProperty]:
        prop = node.get_own_property(alias)
        if not recurse:
            return prop
        
        first_non_null = prop
        current: Optional[PublishedContent] = node
        while current is not None and (prop is None or not prop.has_value()):
            current = current.parent
            prop = current.get_own_property(alias) if current is not None else None
            if first_non_null is None and prop is not None:
                first_non_null = prop
        
        if prop is not None and prop.has_value():
            return prop
        return first_non_null


default_resolver = PropertyFallbackResolver()
