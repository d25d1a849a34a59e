"""Pytest fixtures for pubtree tests."""
import pytest
from unittest.mock import Mock

from pubtree import (
    PublishedContent,
    PublishedProperty,
    PropertyType,
    PropertyEditorKind,
    ItemType,
    ResolutionContext,
)


def _make_property(alias, value, editor=PropertyEditorKind.OTHER):
    return PublishedProperty(
        alias=alias,
        value=value,
        property_type=PropertyType(alias=alias, editor=editor, editor_alias=editor.value)
    )


def _make_node(node_id, name=None, item_type=ItemType.CONTENT, **properties):
    return PublishedContent(
        id=node_id,
        name=name or f"node-{node_id}",
        item_type=item_type,
        url_name=(name or f"node-{node_id}").lower(),
        properties=properties,
    )


@pytest.fixture
def make_property():
    """Factory for properties: make_property(alias, value, editor)."""
    return _make_property


@pytest.fixture
def make_node():
    """Factory for nodes: make_node(id, name, item_type, **properties)."""
    return _make_node


@pytest.fixture
def url_resolver():
    """Mock URL resolver returning /content/<id>/."""
    resolver = Mock()
    resolver.resolve.side_effect = lambda content_id: f"/content/{content_id}/"
    return resolver


@pytest.fixture
def context(url_resolver):
    """Active resolution context with the mock resolver."""
    with ResolutionContext(url_resolver) as ctx:
        yield ctx


@pytest.fixture
def chain():
    """Returns (root, mid, leaf) linked nodes without properties."""
    root = _make_node(1, "Root")
    mid = _make_node(2, "Mid")
    leaf = _make_node(3, "Leaf")
    root.add_child(mid)
    mid.add_child(leaf)
    return root, mid, leaf


@pytest.fixture
def sample_records():
    """Returns flat records for a small site with a media folder."""
    return [
        {'id': 1050, 'name': 'Home', 'url_name': 'home', 'content_type': 'home',
         'properties': {'siteTitle': 'My site', 'intro': ''}},
        {'id': 1063, 'parent': 1050, 'name': 'About', 'url_name': 'about',
         'sort_order': 2, 'content_type': 'textPage',
         'properties': {'intro': '', 'bodyText': 'About us'}},
        {'id': 1064, 'parent': 1050, 'name': 'Blog', 'url_name': 'blog',
         'sort_order': 1, 'content_type': 'textPage'},
        {'id': 1065, 'parent': 1063, 'name': 'Team', 'url_name': 'team',
         'content_type': 'textPage'},
        {'id': 2000, 'name': 'Media', 'type': 'media', 'content_type': 'Folder'},
        {'id': 2001, 'parent': 2000, 'name': 'Logo', 'type': 'media',
         'content_type': 'Image',
         'properties': {'umbracoFile': {
             'value': '{"src": "/media/1001/logo.png", "crops": []}',
             'editor': 'Umbraco.ImageCropper'}}},
        {'id': 2002, 'parent': 2000, 'name': 'Manual', 'type': 'media',
         'content_type': 'File',
         'properties': {'umbracoFile': {
             'value': '/media/1002/manual.pdf',
             'editor': 'Umbraco.UploadField'}}},
    ]
