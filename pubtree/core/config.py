"""
Resolver configuration module.

Provides configuration for URL resolution on published content nodes.
"""
from dataclasses import dataclass
from enum import Enum


# Conventional alias of the primary file property on media items
MEDIA_FILE_ALIAS = 'umbracoFile'


class UnknownEditorPolicy(Enum):
    """
    What a media URL becomes when its file property has a value but was
    produced by an editor other than the upload field or image cropper.
    """
    EMPTY = 'empty'  # cache and return ""
    UNRESOLVED = 'unresolved'  # return None, cache nothing
    RAISE = 'raise'  # raise UnsupportedEditorError


@dataclass
class ResolverConfig:
    """
    URL resolution configuration.
    
    Shared by every node built from the same content snapshot.
    """
    media_file_alias: str = MEDIA_FILE_ALIAS
    unknown_editor_policy: UnknownEditorPolicy = UnknownEditorPolicy.EMPTY
    
    @classmethod
    def default(cls) -> 'ResolverConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def strict(cls, **kwargs) -> 'ResolverConfig':
        """Create configuration that faults on unmapped media editors."""
        return cls(unknown_editor_policy=UnknownEditorPolicy.RAISE, **kwargs)
    
    @classmethod
    def legacy(cls, **kwargs) -> 'ResolverConfig':
        """Create configuration that leaves unmapped media URLs unresolved."""
        return cls(unknown_editor_policy=UnknownEditorPolicy.UNRESOLVED, **kwargs)
