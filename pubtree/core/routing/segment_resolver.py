"""Segment-based URL resolver over an in-memory node index."""
from __future__ import annotations
from typing import Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ...node import PublishedContent


class SegmentUrlResolver:
    """
    Builds URLs from the url_name segments of a node and its ancestors.
    
    With hide_top_level the top-level node maps to "/" and is left out of
    its descendants' URLs:
    
        Home (id 1)          -> /
        Home/About (id 2)    -> /about/
    """
    
    def __init__(
        self,
        nodes: Mapping[int, PublishedContent],
        hide_top_level: bool = True
    ):
        self.nodes = nodes
        self.hide_top_level = hide_top_level
    
    def resolve(self, content_id: int) -> Optional[str]:
        node = self.nodes.get(content_id)
        if node is None:
            return None
        
        chain = [node, *node.ancestors()]
        chain.reverse()
        if self.hide_top_level:
            chain = chain[1:]
        
        segments = [n.url_name or str(n.id) for n in chain]
        if not segments:
            return '/'
        return '/' + '/'.join(segments) + '/'
