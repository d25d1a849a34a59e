"""
Image cropper value model.

The image cropper stores its data as a JSON object:

    {"src": "/media/1001/a.jpg",
     "focalPoint": {"top": 0.5, "left": 0.5},
     "crops": [{"alias": "thumb", "width": 100, "height": 100}]}
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Mapping
import json


@dataclass
class FocalPoint:
    """Focal point as fractions of image height and width."""
    top: float = 0.5
    left: float = 0.5


@dataclass
class ImageCropperCrop:
    """A named crop definition."""
    alias: str
    width: int = 0
    height: int = 0
    coordinates: Optional[Dict[str, float]] = None
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ImageCropperCrop':
        return cls(
            alias=data.get('alias', ''),
            width=int(data.get('width') or 0),
            height=int(data.get('height') or 0),
            coordinates=data.get('coordinates'),
        )


@dataclass
class ImageCropperValue:
    """
    Decoded image cropper value.
    
    Example:
        >>> value = ImageCropperValue.coerce({'src': '/media/a.jpg'})
        >>> value.src
        '/media/a.jpg'
    """
    src: str = ''
    focal_point: Optional[FocalPoint] = None
    crops: List[ImageCropperCrop] = field(default_factory=list)
    
    def __str__(self) -> str:
        return self.src
    
    def has_value(self) -> bool:
        return bool(self.src)
    
    def get_crop(self, alias: str) -> Optional[ImageCropperCrop]:
        """Finds a crop by alias."""
        for crop in self.crops:
            if crop.alias == alias:
                return crop
        return None
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ImageCropperValue':
        """
        Create from a decoded JSON object.
        
        Args:
            data: Mapping with at least a 'src' key
            
        Returns:
            ImageCropperValue instance
        """
        focal = data.get('focalPoint')
        return cls(
            src=data.get('src') or '',
            focal_point=FocalPoint(
                top=float(focal.get('top', 0.5)),
                left=float(focal.get('left', 0.5))
            ) if isinstance(focal, Mapping) else None,
            crops=[
                ImageCropperCrop.from_dict(c)
                for c in data.get('crops') or []
                if isinstance(c, Mapping)
            ],
        )
    
    @classmethod
    def coerce(cls, value: Any) -> Optional['ImageCropperValue']:
        """
        Decode a value into the image cropper shape.
        
        Accepts an ImageCropperValue, a mapping with a 'src' key, or a
        JSON object string with a 'src' key.
        
        Returns:
            ImageCropperValue, or None when the value has a different shape
        """
        if isinstance(value, ImageCropperValue):
            return value
        
        if isinstance(value, str):
            text = value.strip()
            if not text.startswith('{'):
                return None
            try:
                value = json.loads(text)
            except ValueError:
                return None
        
        if isinstance(value, Mapping) and 'src' in value:
            return cls.from_dict(value)
        
        return None
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the stored JSON shape."""
        result: Dict[str, Any] = {'src': self.src}
        if self.focal_point is not None:
            result['focalPoint'] = {
                'top': self.focal_point.top,
                'left': self.focal_point.left
            }
        if self.crops:
            result['crops'] = [
                {'alias': c.alias, 'width': c.width, 'height': c.height,
                 **({'coordinates': c.coordinates} if c.coordinates else {})}
                for c in self.crops
            ]
        return result
