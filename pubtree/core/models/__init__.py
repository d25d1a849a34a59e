"""Published content domain models."""
from .enums import ItemType, PropertyEditorKind
from .property import PropertyType, PublishedProperty
from .content_type import ContentType
from .image_cropper import ImageCropperValue, ImageCropperCrop, FocalPoint
from .culture import PublishedCultureInfo, INVARIANT_CULTURE

__all__ = [
    'ItemType',
    'PropertyEditorKind',
    'PropertyType',
    'PublishedProperty',
    'ContentType',
    'ImageCropperValue',
    'ImageCropperCrop',
    'FocalPoint',
    'PublishedCultureInfo',
    'INVARIANT_CULTURE',
]
