"""Tree builder using Builder Pattern."""
from __future__ import annotations
from datetime import datetime
from typing import Dict, Any, Optional, List, Iterable, Union
import json

from ..config import ResolverConfig
from ..exceptions import TreeBuildError
from ..logging import get_logger
from ..models import (
    ItemType,
    PropertyEditorKind,
    PropertyType,
    PublishedProperty,
    ContentType,
    ImageCropperValue,
    PublishedCultureInfo,
)
from ...node import PublishedContent

logger = get_logger(__name__)

# Path prefix of top-level nodes
ROOT_PATH = '-1'


class TreeBuilder:
    """
    Builds a linked node tree from flat records.

    A record looks like:

        {"id": 1063, "parent": 1050, "name": "About", "type": "content",
         "url_name": "about", "sort_order": 2, "content_type": "textPage",
         "properties": {
             "title": "About us",
             "umbracoFile": {"value": "/media/a.jpg", "editor": "Umbraco.UploadField"}
         }}
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        self.config = config or ResolverConfig.default()
        self._content_types: Dict[str, ContentType] = {}

    def build(self, records: Iterable[Dict[str, Any]]) -> List[PublishedContent]:
        """
        Builds tree structure from flat records.

        Returns:
            Top-level nodes ordered by sort_order
        """
        index = self.build_index(records)
        roots = [node for node in index.values() if node.parent is None]
        roots.sort(key=lambda n: n.sort_order)
        return roots

    def build_index(self, records: Iterable[Dict[str, Any]]) -> Dict[int, PublishedContent]:
        """Builds tree structure and returns all nodes keyed by id."""
        nodes: Dict[int, PublishedContent] = {}
        parents: Dict[int, Optional[int]] = {}

        for record in records:
            node = self._create_node(record)
            if node.id in nodes:
                raise TreeBuildError(f"Duplicate node id {node.id}", node_id=node.id)
            nodes[node.id] = node
            parents[node.id] = self._parse_parent(record, node.id)

        for node_id, parent_id in parents.items():
            if parent_id is None:
                continue
            parent = nodes.get(parent_id)
            if parent is None:
                logger.warning(f"Node {node_id} references missing parent {parent_id}, treating as root")
                continue
            self._check_cycle(node_id, parents)
            parent.add_child(nodes[node_id])

        for node in nodes.values():
            if node.parent is None:
                self._assign_levels(node, 1, ROOT_PATH)

        return nodes

    def build_from_json(self, text: str) -> Dict[int, PublishedContent]:
        """Builds from a JSON list of records or a {"nodes": [...]} document."""
        data = json.loads(text)
        if isinstance(data, dict):
            data = data.get('nodes', [])
        if not isinstance(data, list):
            raise TreeBuildError("Expected a list of node records")
        return self.build_index(data)

    @staticmethod
    def _parse_parent(record: Dict[str, Any], node_id: int) -> Optional[int]:
        """Parent id of a record; None and -1 mean top level."""
        raw = record.get('parent')
        if raw is None:
            return None
        try:
            parent_id = int(raw)
        except (TypeError, ValueError):
            raise TreeBuildError(f"Invalid parent id {raw!r}", node_id=node_id)
        return None if parent_id == -1 else parent_id

    @staticmethod
    def _check_cycle(node_id: int, parents: Dict[int, Optional[int]]):
        """Rejects a parent chain that leads back to node_id."""
        seen = set()
        current = parents.get(node_id)
        while current is not None and current not in seen:
            if current == node_id:
                raise TreeBuildError(f"Node {node_id} is its own ancestor", node_id=node_id)
            seen.add(current)
            current = parents.get(current)

    def _assign_levels(self, node: PublishedContent, level: int, parent_path: str):
        """Fills level and path where the record left them out."""
        if node.level < 1:
            node.level = level
        if not node.path:
            node.path = f"{parent_path},{node.id}"
        for child in node.children:
            self._assign_levels(child, level + 1, node.path)

    def _create_node(self, record: Dict[str, Any]) -> PublishedContent:
        if 'id' not in record:
            raise TreeBuildError(f"Record without id: {record!r}")
        node_id = int(record['id'])

        try:
            item_type = ItemType.parse(str(record.get('type', ItemType.CONTENT.value)))
        except ValueError:
            raise TreeBuildError(
                f"Unknown item type {record.get('type')!r}", node_id=node_id
            )

        content_type = self._get_content_type(record.get('content_type'), item_type)

        properties = {}
        for alias, raw in (record.get('properties') or {}).items():
            properties[alias] = self._create_property(alias, raw, content_type)

        cultures = {}
        for code, raw in (record.get('cultures') or {}).items():
            cultures[code] = PublishedCultureInfo(
                culture=code,
                name=raw.get('name', record.get('name', '')),
                url_segment=raw.get('url_segment', ''),
                date=_parse_date(raw.get('date'))
            )

        return PublishedContent(
            id=node_id,
            name=record.get('name', str(node_id)),
            item_type=item_type,
            key=record.get('key', ''),
            content_type=content_type,
            url_name=record.get('url_name', ''),
            sort_order=record.get('sort_order', 0),
            level=record.get('level', 0),
            path=record.get('path', ''),
            template_id=record.get('template_id', 0),
            creator_id=record.get('creator_id', 0),
            creator_name=record.get('creator_name', ''),
            create_date=_parse_date(record.get('create_date')),
            writer_id=record.get('writer_id', 0),
            writer_name=record.get('writer_name', ''),
            update_date=_parse_date(record.get('update_date')),
            is_draft=bool(record.get('is_draft', False)),
            properties=properties,
            cultures=cultures,
            config=self.config,
        )

    def _get_content_type(
        self,
        alias: Optional[str],
        item_type: ItemType
    ) -> Optional[ContentType]:
        if not alias:
            return None
        content_type = self._content_types.get(alias)
        if content_type is None:
            content_type = ContentType(alias=alias, item_type=item_type)
            self._content_types[alias] = content_type
        return content_type

    def _create_property(
        self,
        alias: str,
        raw: Any,
        content_type: Optional[ContentType]
    ) -> PublishedProperty:
        editor_alias = None
        value = raw
        if isinstance(raw, dict) and 'value' in raw:
            value = raw['value']
            editor_alias = raw.get('editor')

        property_type = content_type.get_property_type(alias) if content_type else None
        if property_type is None or (editor_alias and property_type.editor_alias != editor_alias):
            property_type = PropertyType.from_editor_alias(alias, editor_alias)
            if content_type is not None:
                content_type.add_property_type(property_type)

        if property_type.editor is PropertyEditorKind.IMAGE_CROPPER:
            value = ImageCropperValue.coerce(value) or value

        return PublishedProperty(alias=alias, value=value, property_type=property_type)


def _parse_date(value: Union[str, datetime, None]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
