"""Closed kind enumerations for published items and property editors."""
from enum import Enum


class ItemType(Enum):
    """Kind of a published item."""
    CONTENT = 'content'
    MEDIA = 'media'
    
    @classmethod
    def parse(cls, value: str) -> 'ItemType':
        """Parse a case-insensitive kind name. Raises ValueError for unknown names."""
        return cls(value.strip().lower())


class PropertyEditorKind(Enum):
    """Editor that produced a property value."""
    UPLOAD_FIELD = 'Umbraco.UploadField'
    IMAGE_CROPPER = 'Umbraco.ImageCropper'
    OTHER = 'other'
    
    @classmethod
    def from_alias(cls, alias: str) -> 'PropertyEditorKind':
        """Map a raw editor alias to a kind; unknown aliases map to OTHER."""
        for kind in (cls.UPLOAD_FIELD, cls.IMAGE_CROPPER):
            if kind.value == alias:
                return kind
        return cls.OTHER
