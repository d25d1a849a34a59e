"""Tests for logging module."""
import logging

import pubtree
from pubtree.core.logging import get_logger


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_with_name(self):
        """Test getting logger with name."""
        logger = get_logger('pubtree.test_module')

        assert logger.name == 'pubtree.test_module'

    def test_get_logger_propagates(self):
        """Test logger propagates to root."""
        assert get_logger('pubtree.test').propagate is True

    def test_get_logger_returns_logger_instance(self):
        """Test returns logging.Logger instance."""
        assert isinstance(get_logger('pubtree.test'), logging.Logger)


class TestSetupLogging:
    """Test suite for setup_logging."""

    def test_sets_package_level(self):
        """Test package loggers get the level."""
        pubtree.setup_logging(logging.DEBUG)
        try:
            assert logging.getLogger('pubtree').level == logging.DEBUG
            assert logging.getLogger('pubtree.core.resolution.url').level == logging.DEBUG
        finally:
            pubtree.setup_logging(logging.WARNING)

    def test_covers_module_loggers(self):
        """Test every pubtree logger gets the level, including new ones."""
        extra = logging.getLogger('pubtree.extension')
        pubtree.setup_logging(logging.ERROR)
        try:
            assert extra.level == logging.ERROR
            assert logging.getLogger('pubtree.core.storage.tree_builder').level == logging.ERROR
        finally:
            pubtree.setup_logging(logging.WARNING)

    def test_resolution_logs_debug(self, caplog, make_node, context):
        """Test content resolution emits a debug record."""
        pubtree.setup_logging(logging.DEBUG)
        try:
            with caplog.at_level(logging.DEBUG, logger='pubtree'):
                make_node(1063).get_url(context)
        finally:
            pubtree.setup_logging(logging.WARNING)

        assert "Resolved content 1063" in caplog.text


class TestPackageExports:
    """Test suite for the package namespace."""

    def test_exports_node_class(self):
        """Test the node class is exported under its own name only."""
        assert pubtree.PublishedContent.__name__ == 'PublishedContent'
        assert not hasattr(pubtree, 'Node')
        assert 'Node' not in pubtree.__all__
