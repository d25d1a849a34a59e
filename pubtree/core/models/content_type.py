"""Content type model."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional

from .enums import ItemType
from .property import PropertyType


@dataclass
class ContentType:
    """Document or media type: an alias plus its property definitions."""
    alias: str
    item_type: ItemType = ItemType.CONTENT
    property_types: Dict[str, PropertyType] = field(default_factory=dict)
    
    def get_property_type(self, alias: str) -> Optional[PropertyType]:
        return self.property_types.get(alias)
    
    def add_property_type(self, property_type: PropertyType) -> 'ContentType':
        self.property_types[property_type.alias] = property_type
        return self
