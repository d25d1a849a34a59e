"""Tests for published content models."""
import pytest

from pubtree import (
    ItemType,
    PropertyEditorKind,
    PropertyType,
    PublishedProperty,
    ContentType,
    ImageCropperValue,
)
from pubtree.core.lazy import LazyValue


class TestEnums:
    """Test suite for kind enums."""

    def test_item_type_parse(self):
        """Test parsing is case-insensitive."""
        assert ItemType.parse('Media') is ItemType.MEDIA
        assert ItemType.parse(' content ') is ItemType.CONTENT

    def test_item_type_parse_unknown(self):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError):
            ItemType.parse('member')

    @pytest.mark.parametrize('alias,expected', [
        ('Umbraco.UploadField', PropertyEditorKind.UPLOAD_FIELD),
        ('Umbraco.ImageCropper', PropertyEditorKind.IMAGE_CROPPER),
        ('Umbraco.TextBox', PropertyEditorKind.OTHER),
        ('', PropertyEditorKind.OTHER),
    ])
    def test_editor_from_alias(self, alias, expected):
        """Test editor aliases map to kinds."""
        assert PropertyEditorKind.from_alias(alias) is expected


class TestPublishedProperty:
    """Test suite for PublishedProperty."""

    @pytest.mark.parametrize('value', [None, '', '   ', [], {}, ImageCropperValue(src='')])
    def test_has_no_value(self, value):
        """Test empty values."""
        assert PublishedProperty('p', value).has_value() is False

    @pytest.mark.parametrize('value', ['x', 0, False, [1], {'a': 1}, ImageCropperValue(src='/a.jpg')])
    def test_has_value(self, value):
        """Test meaningful values, including falsy scalars."""
        assert PublishedProperty('p', value).has_value() is True

    def test_editor_without_type(self):
        """Test editor defaults to OTHER."""
        assert PublishedProperty('p', 'x').editor is PropertyEditorKind.OTHER

    def test_editor_from_type(self):
        """Test editor comes from the property type."""
        prop = PublishedProperty(
            'umbracoFile', '/a.pdf',
            PropertyType.from_editor_alias('umbracoFile', 'Umbraco.UploadField')
        )

        assert prop.editor is PropertyEditorKind.UPLOAD_FIELD
        assert prop.property_type.editor_alias == 'Umbraco.UploadField'


class TestImageCropperValue:
    """Test suite for ImageCropperValue."""

    def test_coerce_instance(self):
        """Test instance passes through."""
        value = ImageCropperValue(src='/media/a.jpg')

        assert ImageCropperValue.coerce(value) is value

    def test_coerce_mapping(self):
        """Test mapping with src decodes."""
        value = ImageCropperValue.coerce({
            'src': '/media/a.jpg',
            'focalPoint': {'top': 0.2, 'left': 0.8},
            'crops': [{'alias': 'thumb', 'width': 100, 'height': 80}],
        })

        assert value.src == '/media/a.jpg'
        assert value.focal_point.top == 0.2
        assert value.get_crop('thumb').width == 100
        assert value.get_crop('missing') is None

    def test_coerce_json(self):
        """Test JSON object string decodes."""
        value = ImageCropperValue.coerce('{"src": "/media/a.jpg"}')

        assert value.src == '/media/a.jpg'
        assert str(value) == '/media/a.jpg'

    @pytest.mark.parametrize('value', ['/media/a.jpg', '{not json', '{"url": "/a"}', 42, None, {'url': '/a'}])
    def test_coerce_other_shapes(self, value):
        """Test other shapes do not decode."""
        assert ImageCropperValue.coerce(value) is None

    def test_to_dict(self):
        """Test conversion to stored shape."""
        value = ImageCropperValue.coerce({'src': '/a.jpg', 'focalPoint': {'top': 0.1, 'left': 0.9}})

        assert value.to_dict() == {'src': '/a.jpg', 'focalPoint': {'top': 0.1, 'left': 0.9}}


class TestContentType:
    """Test suite for ContentType."""

    def test_property_types(self):
        """Test adding and looking up property types."""
        content_type = ContentType('Image', ItemType.MEDIA)
        content_type.add_property_type(
            PropertyType.from_editor_alias('umbracoFile', 'Umbraco.ImageCropper')
        )

        assert content_type.get_property_type('umbracoFile').editor is PropertyEditorKind.IMAGE_CROPPER
        assert content_type.get_property_type('missing') is None


class TestLazyValue:
    """Test suite for the write-once cell."""

    def test_computes_once(self):
        """Test factory runs only until a value is stored."""
        calls = []
        cell = LazyValue()

        def factory():
            calls.append(1)
            return 'value'

        assert cell.get_or_compute(factory) == 'value'
        assert cell.get_or_compute(factory) == 'value'
        assert len(calls) == 1

    def test_none_not_stored(self):
        """Test a None result leaves the cell unset."""
        cell = LazyValue()

        assert cell.get_or_compute(lambda: None) is None
        assert cell.is_set is False
        assert cell.get_or_compute(lambda: 'later') == 'later'

    def test_first_write_wins(self):
        """Test a value written during computation is kept."""
        cell = LazyValue()

        def racing_factory():
            cell.get_or_compute(lambda: 'first')
            return 'second'

        assert cell.get_or_compute(racing_factory) == 'first'
        assert cell.get() == 'first'

    def test_empty_string_is_a_value(self):
        """Test empty string is cached."""
        cell = LazyValue()
        cell.get_or_compute(lambda: '')

        assert cell.is_set is True
        assert cell.get_or_compute(lambda: 'other') == ''
