"""
Routing protocols.

Defines the interface a routing subsystem implements to give content
nodes their URLs.
"""
from typing import Protocol, Optional, runtime_checkable


@runtime_checkable
class UrlResolver(Protocol):
    """
    Protocol for content URL resolvers.
    
    Implementations own URL registration and routing; this package only
    asks them for the canonical URL of a content id.
    """
    
    def resolve(self, content_id: int) -> Optional[str]:
        """
        Resolve the canonical URL of a content node.
        
        Args:
            content_id: Numeric node id
            
        Returns:
            URL string, or None if the id has no route
        """
        ...
