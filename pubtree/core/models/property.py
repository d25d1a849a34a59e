"""Published property models."""
from __future__ import annotations
from dataclasses import dataclass
from collections.abc import Sized
from typing import Optional, Any

from .enums import PropertyEditorKind
from .image_cropper import ImageCropperValue


@dataclass
class PropertyType:
    """Definition of a property: its alias and the editor that produces its values."""
    alias: str
    editor: PropertyEditorKind = PropertyEditorKind.OTHER
    editor_alias: str = ''
    
    @classmethod
    def from_editor_alias(cls, alias: str, editor_alias: Optional[str]) -> 'PropertyType':
        """Create a property type from a raw editor alias."""
        editor_alias = editor_alias or ''
        return cls(
            alias=alias,
            editor=PropertyEditorKind.from_alias(editor_alias),
            editor_alias=editor_alias
        )


@dataclass
class PublishedProperty:
    """
    A decoded property value attached to a node.
    
    The value is already decoded by the property value converter; this
    class only decides whether it is meaningful.
    """
    alias: str
    value: Any = None
    property_type: Optional[PropertyType] = None
    
    @property
    def editor(self) -> PropertyEditorKind:
        if self.property_type is None:
            return PropertyEditorKind.OTHER
        return self.property_type.editor
    
    def has_value(self) -> bool:
        """
        Checks whether the value is meaningful.
        
        None, blank strings, empty collections and image cropper values
        without a source have no value.
        """
        value = self.value
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        if isinstance(value, ImageCropperValue):
            return value.has_value()
        if isinstance(value, Sized):
            return len(value) > 0
        return True
    
    def __repr__(self) -> str:
        return f"<PublishedProperty alias={self.alias!r} value={self.value!r}>"
