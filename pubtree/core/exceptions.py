"""
Custom exceptions for published content resolution.

Only misconfiguration and unknown kinds are faults. A missing property,
ancestor or media file is a normal result and never raises.
"""
from typing import Optional, Any


class PublishedContentException(Exception):
    """Base exception for all pubtree errors."""
    
    def __init__(self, message: str, node_id: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            node_id: Id of the node being resolved (if available)
        """
        self.node_id = node_id
        super().__init__(message)


class PreconditionError(PublishedContentException):
    """Raised when a content URL is requested without an active context or URL resolver."""
    pass


class UnsupportedKindError(PublishedContentException):
    """Raised when a node's item type is neither content nor media."""
    
    def __init__(
        self,
        message: str,
        node_id: Optional[int] = None,
        kind: Any = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            node_id: Id of the offending node
            kind: The unsupported kind value
        """
        self.kind = kind
        super().__init__(message, node_id)


class UnsupportedEditorError(UnsupportedKindError):
    """Raised for a media file property produced by an editor with no URL mapping."""
    pass


class TreeBuildError(PublishedContentException):
    """Raised when flat node records cannot be assembled into a tree."""
    pass
